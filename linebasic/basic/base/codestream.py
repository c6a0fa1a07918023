"""
LineBASIC - codestream.py
Token stream with parser helpers

(c) 2013--2022 Rob Hagemans, 2026 LineBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

from . import error
from . import tokens as tk


class TokenStream(object):
    """Stream of tokens, ending in EOF."""

    def __init__(self, tokens):
        """Initialise on a token list as produced by the tokeniser."""
        if not tokens or tokens[-1].type != tk.EOF:
            raise ValueError('Token list must end in EOF')
        self._tokens = tokens
        self._pos = 0

    def peek(self):
        """Next token, without advancing; EOF at the end."""
        return self._tokens[self._pos]

    def read(self):
        """Read the next token; EOF is never consumed."""
        token = self._tokens[self._pos]
        if token.type != tk.EOF:
            self._pos += 1
        return token

    def at_end(self):
        """Stream is at EOF."""
        return self.peek().type == tk.EOF

    def check(self, *token_types):
        """Next token is of one of the given types."""
        return self.peek().type in token_types

    def read_if(self, *token_types):
        """Read the next token if it is of one of the given types; else return None."""
        if self.check(*token_types):
            return self.read()
        return None

    def require_read(self, token_types, message):
        """Read the next token and raise a syntax error if not of the given types."""
        if not self.check(*token_types):
            self.syntax_error(message)
        return self.read()

    def require_end(self, end=tk.END_STATEMENT):
        """Raise a syntax error if not at the end of a statement."""
        if not self.check(*end):
            self.syntax_error('Unexpected token: %s' % (describe(self.peek()),))

    def syntax_error(self, message):
        """Raise a syntax error at the next token."""
        token = self.peek()
        raise error.ParseError(message, token.line, token.column)


def describe(token):
    """Token text for error messages."""
    if token.type == tk.EOF:
        return 'end of input'
    if token.type == tk.NEWLINE:
        return 'end of line'
    if token.type == tk.STRING:
        return '"%s"' % (token.value,)
    return token.value
