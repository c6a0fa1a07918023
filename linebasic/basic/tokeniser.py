"""
LineBASIC - tokeniser.py
Convert plain-text BASIC source into a token list

(c) 2013--2022 Rob Hagemans, 2026 LineBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

from collections import namedtuple

from .base import error
from .base import tokens as tk


Token = namedtuple('Token', ('type', 'value', 'line', 'column'))


class Tokeniser(object):
    """BASIC tokeniser."""

    def __init__(self, source):
        """Initialise tokeniser on a source text."""
        self._source = source
        self._pos = 0
        self._line = 1
        self._column = 1

    def tokenise(self):
        """Convert the whole source to a list of tokens, ending in EOF."""
        tokens = []
        while True:
            self._skip_blank()
            if self._at_end():
                break
            tokens.extend(self._read_token())
        tokens.append(Token(tk.EOF, '', self._line, self._column))
        return tokens

    def _read_token(self):
        """Read one token; return a list as REM yields two."""
        line, column = self._line, self._column
        c = self._read()
        if c == '\n':
            return [Token(tk.NEWLINE, c, line, column)]
        if c in tk.DIGITS:
            return [Token(tk.NUMBER, self._read_number(c), line, column)]
        if c == '"':
            return [Token(tk.STRING, self._read_string(line, column), line, column)]
        if c in tk.NAME_START:
            word = self._read_name(c)
            if word == tk.REM:
                return self._read_comment(line, column)
            if word in tk.KEYWORDS:
                return [Token(word, word, line, column)]
            return [Token(tk.IDENTIFIER, word, line, column)]
        pair = c + self._peek()
        if pair in tk.COMBINED:
            self._read()
            token_type, text = tk.COMBINED[pair]
            return [Token(token_type, text, line, column)]
        if c in tk.SYMBOLS:
            return [Token(tk.SYMBOLS[c], c, line, column)]
        raise error.ParseError('Unexpected character: %s' % (c,), line, column)

    def _read_number(self, first):
        """Read a decimal number literal."""
        word = first + self._read_while(tk.DIGITS)
        # a decimal point only counts if a digit follows
        if self._peek() == '.' and self._peek(1) and self._peek(1) in tk.DIGITS:
            word += self._read() + self._read_while(tk.DIGITS)
        return word

    def _read_string(self, line, column):
        """Read a string literal after the opening quote."""
        start = self._pos
        while not self._at_end() and self._peek() != '"':
            self._read()
        if self._at_end():
            raise error.ParseError('Unterminated string', line, column)
        word = self._source[start:self._pos]
        # closing quote
        self._read()
        return word

    def _read_name(self, first):
        """Read an identifier or keyword, upper-cased."""
        word = first + self._read_while(tk.NAME_CHARS)
        if self._peek() == tk.STR_SIGIL:
            word += self._read()
        return word.upper()

    def _read_comment(self, line, column):
        """Read the rest of the line after REM."""
        tokens = [Token(tk.REM, tk.REM, line, column)]
        self._skip_blank()
        comment_line, comment_column = self._line, self._column
        start = self._pos
        while not self._at_end() and self._peek() != '\n':
            self._read()
        comment = self._source[start:self._pos].rstrip()
        if comment:
            tokens.append(Token(tk.STRING, comment, comment_line, comment_column))
        return tokens

    def _read_while(self, chars):
        """Read characters while they are in the given set."""
        start = self._pos
        while not self._at_end() and self._peek() in chars:
            self._read()
        return self._source[start:self._pos]

    def _skip_blank(self):
        """Skip whitespace other than newlines."""
        self._read_while(tk.BLANKS)

    def _read(self):
        """Read one character and update the position."""
        c = self._source[self._pos]
        self._pos += 1
        if c == '\n':
            self._line += 1
            self._column = 1
        else:
            self._column += 1
        return c

    def _peek(self, offset=0):
        """Peek at a character ahead; empty at end of source."""
        return self._source[self._pos + offset : self._pos + offset + 1]

    def _at_end(self):
        """Source is exhausted."""
        return self._pos >= len(self._source)
