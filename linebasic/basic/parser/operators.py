"""
LineBASIC - operators.py
Numeric and string operators

(c) 2013--2023 Rob Hagemans, 2026 LineBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

from ..base import tokens as tk
from .. import values


# binary operators by precedence level, lowest first
# the parser has one rule per level; power is handled separately as it is right-associative
OR_LEVEL = (tk.OR,)
AND_LEVEL = (tk.AND,)
EQUALITY = (tk.O_EQ, tk.O_NE)
RELATIONAL = (tk.O_LT, tk.O_GT, tk.O_LE, tk.O_GE)
ADDITIVE = (tk.O_PLUS, tk.O_MINUS)
MULTIPLICATIVE = (tk.O_TIMES, tk.O_DIV)
POWER = (tk.O_CARET,)

# prefix operators
PREFIX = (tk.NOT, tk.O_MINUS, tk.O_PLUS)

# unary operators, by operator text in the program model
UNARY = {
    '-': values.neg,
    '+': values.pos,
    'NOT': values.not_,
}

# binary operators, by operator text in the program model
BINARY = {
    '^': values.pow,
    '*': values.mul,
    '/': values.div,
    '+': values.add,
    '-': values.sub,
    '>': values.gt,
    '=': values.eq,
    '<': values.lt,
    '>=': values.gte,
    '<=': values.lte,
    '<>': values.neq,
    'AND': values.and_,
    'OR': values.or_,
}
