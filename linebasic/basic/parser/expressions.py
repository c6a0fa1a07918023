"""
LineBASIC - expressions.py
Expression parser

(c) 2013--2022 Rob Hagemans, 2026 LineBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

from ..base import tokens as tk
from ..base.codestream import describe
from .. import nodes
from . import operators as op


# closing bracket for each opening bracket
_BRACKETS = {
    tk.LEFT_PAREN: tk.RIGHT_PAREN,
    tk.LEFT_BRACKET: tk.RIGHT_BRACKET,
}


class ExpressionParser(object):
    """Expression parser."""

    def __init__(self):
        """Initialise precedence levels, lowest first."""
        self._levels = (
            op.OR_LEVEL, op.AND_LEVEL, op.EQUALITY, op.RELATIONAL,
            op.ADDITIVE, op.MULTIPLICATIVE,
        )

    def parse_expression(self, ins):
        """Parse an expression at the current position of the token stream."""
        return self._parse_level(ins, 0)

    def _parse_level(self, ins, level):
        """Parse a left-associative chain of binary operators at a precedence level."""
        if level == len(self._levels):
            return self._parse_unary(ins)
        expr = self._parse_level(ins, level + 1)
        while True:
            token = ins.read_if(*self._levels[level])
            if not token:
                return expr
            right = self._parse_level(ins, level + 1)
            expr = nodes.BinaryOp(token.value, expr, right)

    def _parse_unary(self, ins):
        """Parse prefix operators; these bind more loosely than power."""
        token = ins.read_if(*op.PREFIX)
        if token:
            return nodes.UnaryOp(token.value, self._parse_unary(ins))
        return self._parse_power(ins)

    def _parse_power(self, ins):
        """Parse power, right-associative; the exponent may carry a sign."""
        expr = self._parse_primary(ins)
        while True:
            token = ins.read_if(*op.POWER)
            if not token:
                return expr
            expr = nodes.BinaryOp(token.value, expr, self._parse_unary(ins))

    def _parse_primary(self, ins):
        """Parse a literal, variable or bracketed expression."""
        token = ins.read_if(tk.NUMBER, tk.STRING, tk.LEFT_PAREN)
        if token is None:
            if ins.check(tk.IDENTIFIER):
                return self.parse_variable(ins)
            ins.syntax_error('Unexpected token: %s' % (describe(ins.peek()),))
        if token.type == tk.NUMBER:
            return nodes.NumberLiteral(float(token.value))
        if token.type == tk.STRING:
            return nodes.StringLiteral(token.value)
        expr = self.parse_expression(ins)
        ins.require_read((tk.RIGHT_PAREN,), "Expected ')' after expression")
        return expr

    def parse_variable(self, ins):
        """Parse a scalar or array element reference."""
        name = ins.require_read((tk.IDENTIFIER,), 'Expected variable name').value
        bracket = ins.read_if(*_BRACKETS)
        if not bracket:
            return nodes.Variable(name, ())
        indices = self.parse_expression_list(ins)
        ins.require_read((_BRACKETS[bracket.type],), 'Expected closing bracket after array indices')
        return nodes.Variable(name, indices)

    def parse_expression_list(self, ins):
        """Parse one or more comma-separated expressions."""
        exprs = [self.parse_expression(ins)]
        while ins.read_if(tk.COMMA):
            exprs.append(self.parse_expression(ins))
        return tuple(exprs)
