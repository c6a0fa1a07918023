"""
LineBASIC - nodes.py
Parsed program model: statement and expression records

(c) 2026 LineBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

from collections import namedtuple


# parsed program: statements in source order
Program = namedtuple('Program', ('statements',))


###############################################################################
# statements
# every statement carries an optional source line number as its last field

def _statement(name, fields):
    """Define a statement record type with an optional line number."""
    return namedtuple(name, tuple(fields) + ('line',), defaults=(None,))

# separators: ',' or ';' between consecutive expressions
# trailing: ',' or ';' after the last expression, or None
Print = _statement('Print', ('expressions', 'separators', 'trailing'))
Let = _statement('Let', ('variable', 'expression'))
Goto = _statement('Goto', ('target',))
# else_branch is None if there is no ELSE
If = _statement('If', ('condition', 'then_branch', 'else_branch'))
# step is None for the default step of 1
For = _statement('For', ('variable', 'start', 'stop', 'step'))
# variables is empty for a bare NEXT
Next = _statement('Next', ('variables',))
# values are floats or strs
Data = _statement('Data', ('values',))
Read = _statement('Read', ('variables',))
# target is None for a bare RESTORE
Restore = _statement('Restore', ('target',))
Dim = _statement('Dim', ('arrays',))
End = _statement('End', ())
Rem = _statement('Rem', ('comment',))

# one array in a DIM statement
ArrayDeclaration = namedtuple('ArrayDeclaration', ('name', 'dimensions'))

STATEMENTS = (Print, Let, Goto, If, For, Next, Data, Read, Restore, Dim, End, Rem)


###############################################################################
# expressions

NumberLiteral = namedtuple('NumberLiteral', ('value',))
StringLiteral = namedtuple('StringLiteral', ('value',))
# indices is empty for a scalar
Variable = namedtuple('Variable', ('name', 'indices'))
UnaryOp = namedtuple('UnaryOp', ('operator', 'operand'))
BinaryOp = namedtuple('BinaryOp', ('operator', 'left', 'right'))

EXPRESSIONS = (NumberLiteral, StringLiteral, Variable, UnaryOp, BinaryOp)
