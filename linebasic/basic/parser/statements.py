"""
LineBASIC - statements.py
Statement parser

(c) 2013--2022 Rob Hagemans, 2026 LineBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

from ..base import tokens as tk
from ..base.codestream import TokenStream, describe
from .. import nodes
from . import expressions


class Parser(object):
    """BASIC statement parser."""

    def __init__(self):
        """Initialise statement parser."""
        self.expression_parser = expressions.ExpressionParser()
        self._init_syntax()

    def _init_syntax(self):
        """Initialise syntax parsers."""
        self._simple = {
            tk.PRINT: self._parse_print,
            tk.LET: self._parse_let,
            tk.GOTO: self._parse_goto,
            tk.IF: self._parse_if,
            tk.FOR: self._parse_for,
            tk.NEXT: self._parse_next,
            tk.DATA: self._parse_data,
            tk.READ: self._parse_read,
            tk.RESTORE: self._parse_restore,
            tk.DIM: self._parse_dim,
            tk.END: self._parse_end,
            tk.REM: self._parse_rem,
        }

    def parse(self, tokens):
        """Parse a token list into a program."""
        ins = TokenStream(tokens)
        statements = []
        while not ins.at_end():
            # skip blank lines
            if ins.read_if(tk.NEWLINE):
                continue
            try:
                statements.append(self.parse_line(ins))
            except RecursionError:
                ins.syntax_error('Expression too deeply nested')
        return nodes.Program(statements)

    def parse_line(self, ins):
        """Parse an optionally numbered statement and the end of its line."""
        line_number = None
        token = ins.read_if(tk.NUMBER)
        if token:
            line_number = self._line_number(ins, token)
        statement = self.parse_statement(ins)
        ins.require_end()
        ins.read_if(tk.NEWLINE)
        return statement._replace(line=line_number)

    def parse_statement(self, ins):
        """Parse a single statement."""
        token = ins.peek()
        if token.type in self._simple:
            ins.read()
            return self._simple[token.type](ins)
        if token.type == tk.IDENTIFIER:
            # implicit LET
            return self._parse_let(ins)
        ins.syntax_error('Unexpected token: %s' % (describe(token),))

    def parse_expression(self, ins):
        """Parse an expression."""
        return self.expression_parser.parse_expression(ins)

    def _line_number(self, ins, token):
        """Convert a number token to a line number."""
        if not token.value.isdigit():
            ins.syntax_error('Line number must be an integer: %s' % (token.value,))
        return int(token.value)

    def _parse_line_number(self, ins, message):
        """Parse a required line number."""
        return self._line_number(ins, ins.require_read((tk.NUMBER,), message))

    ###########################################################################
    # statements

    def _parse_print(self, ins):
        """Parse PRINT syntax."""
        exprs, separators, trailing = [], [], None
        if not ins.check(*tk.END_BRANCH):
            exprs.append(self.parse_expression(ins))
            while True:
                sep = ins.read_if(tk.COMMA, tk.SEMICOLON)
                if not sep:
                    break
                sep = ',' if sep.type == tk.COMMA else ';'
                if ins.check(*tk.END_BRANCH):
                    # a separator with nothing after it sets the line ending
                    trailing = sep
                    break
                separators.append(sep)
                exprs.append(self.parse_expression(ins))
        return nodes.Print(tuple(exprs), tuple(separators), trailing)

    def _parse_let(self, ins):
        """Parse LET or implicit LET syntax."""
        variable = self.expression_parser.parse_variable(ins)
        ins.require_read((tk.O_EQ,), "Expected '=' after variable")
        return nodes.Let(variable, self.parse_expression(ins))

    def _parse_goto(self, ins):
        """Parse GOTO syntax."""
        return nodes.Goto(self._parse_line_number(ins, 'Expected line number after GOTO'))

    def _parse_if(self, ins):
        """Parse IF syntax."""
        condition = self.parse_expression(ins)
        ins.require_read((tk.THEN,), 'Expected THEN after IF condition')
        then_branch = self._parse_branch(ins)
        else_branch = None
        if ins.read_if(tk.ELSE):
            else_branch = self._parse_branch(ins)
        return nodes.If(condition, then_branch, else_branch)

    def _parse_branch(self, ins):
        """Parse the statement after THEN or ELSE; a bare line number means GOTO."""
        token = ins.read_if(tk.NUMBER)
        if token:
            return nodes.Goto(self._line_number(ins, token))
        if ins.check(*tk.END_BRANCH):
            ins.syntax_error('Expected statement after %s' % ('THEN or ELSE',))
        return self.parse_statement(ins)

    def _parse_for(self, ins):
        """Parse FOR syntax."""
        name = ins.require_read((tk.IDENTIFIER,), 'Expected variable name after FOR').value
        ins.require_read((tk.O_EQ,), "Expected '=' after FOR variable")
        start = self.parse_expression(ins)
        ins.require_read((tk.TO,), 'Expected TO after FOR start value')
        stop = self.parse_expression(ins)
        step = None
        if ins.read_if(tk.STEP):
            step = self.parse_expression(ins)
        return nodes.For(name, start, stop, step)

    def _parse_next(self, ins):
        """Parse NEXT syntax."""
        names = []
        if ins.check(tk.IDENTIFIER):
            names.append(ins.read().value)
            while ins.read_if(tk.COMMA):
                names.append(
                    ins.require_read((tk.IDENTIFIER,), 'Expected variable name after comma').value
                )
        return nodes.Next(tuple(names))

    def _parse_data(self, ins):
        """Parse DATA syntax."""
        data = []
        while True:
            sign = ins.read_if(tk.O_MINUS, tk.O_PLUS)
            if sign:
                token = ins.require_read((tk.NUMBER,), 'Expected number after sign in DATA statement')
            else:
                token = ins.require_read(
                    (tk.NUMBER, tk.STRING), 'Expected number or string in DATA statement'
                )
            if token.type == tk.STRING:
                data.append(token.value)
            elif sign and sign.type == tk.O_MINUS:
                data.append(-float(token.value))
            else:
                data.append(float(token.value))
            if not ins.read_if(tk.COMMA):
                break
        return nodes.Data(tuple(data))

    def _parse_read(self, ins):
        """Parse READ syntax."""
        variables = [self.expression_parser.parse_variable(ins)]
        while ins.read_if(tk.COMMA):
            variables.append(self.expression_parser.parse_variable(ins))
        return nodes.Read(tuple(variables))

    def _parse_restore(self, ins):
        """Parse RESTORE syntax."""
        token = ins.read_if(tk.NUMBER)
        if token:
            return nodes.Restore(self._line_number(ins, token))
        return nodes.Restore(None)

    def _parse_dim(self, ins):
        """Parse DIM syntax."""
        arrays = []
        while True:
            name = ins.require_read((tk.IDENTIFIER,), 'Expected array name').value
            ins.require_read((tk.LEFT_PAREN, tk.LEFT_BRACKET), "Expected '(' after array name")
            dimensions = self.expression_parser.parse_expression_list(ins)
            ins.require_read(
                (tk.RIGHT_PAREN, tk.RIGHT_BRACKET), "Expected ')' after array dimensions"
            )
            arrays.append(nodes.ArrayDeclaration(name, dimensions))
            if not ins.read_if(tk.COMMA):
                break
        return nodes.Dim(tuple(arrays))

    def _parse_end(self, ins):
        """Parse END syntax."""
        return nodes.End()

    def _parse_rem(self, ins):
        """Parse REM syntax; the tokeniser delivers the comment as one string."""
        token = ins.read_if(tk.STRING)
        return nodes.Rem(token.value if token else '')
