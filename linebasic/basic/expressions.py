"""
LineBASIC - expressions.py
Expression evaluator

(c) 2013--2022 Rob Hagemans, 2026 LineBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

from .base import error
from . import nodes
from . import values
from .parser import operators as op


class Evaluator(object):
    """Computes the value of expression trees."""

    def __init__(self):
        """Initialise evaluator tables."""
        self._evaluators = {
            nodes.NumberLiteral: self._number_literal,
            nodes.StringLiteral: self._string_literal,
            nodes.Variable: self.get_variable,
            nodes.UnaryOp: self._unary,
            nodes.BinaryOp: self._binary,
        }

    def kinds(self):
        """Expression kinds handled by this evaluator."""
        return set(self._evaluators)

    def evaluate(self, expr, context):
        """Compute the value of an expression."""
        try:
            evaluator = self._evaluators[type(expr)]
        except KeyError:
            raise error.RunError(error.INTERNAL_ERROR, detail=type(expr).__name__)
        return evaluator(expr, context)

    def evaluate_indices(self, indices, context):
        """Compute integer array indices, left to right."""
        return [values.to_index(self.evaluate(_expr, context)) for _expr in indices]

    def get_variable(self, variable, context):
        """Retrieve the value of a scalar or array element."""
        if not variable.indices:
            return context.scalars.get(variable.name)
        # the array must exist before any index is computed
        context.arrays.check_dim(variable.name)
        index = self.evaluate_indices(variable.indices, context)
        return context.arrays.get(variable.name, index)

    def _number_literal(self, expr, context):
        return values.Number(expr.value)

    def _string_literal(self, expr, context):
        return values.String(expr.value)

    def _unary(self, expr, context):
        """Apply a prefix operator."""
        operand = self.evaluate(expr.operand, context)
        return op.UNARY[expr.operator](operand)

    def _binary(self, expr, context):
        """Apply a binary operator; both operands are always evaluated."""
        left = self.evaluate(expr.left, context)
        right = self.evaluate(expr.right, context)
        return op.BINARY[expr.operator](left, right)
