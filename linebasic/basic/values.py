"""
LineBASIC - values.py
Types, values and conversions

(c) 2013--2023 Rob Hagemans, 2026 LineBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

import re
import math
from decimal import Decimal

from .base import error
from .base import tokens as tk


# leading numeric text of a string, as far as it can be read as a number
_NUMBER_PREFIX = re.compile(
    r'\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))'
)

# exponent notation is used outside this range of decimal exponents
_MAX_POSITIONAL = 21
_MIN_POSITIONAL = -6


class Value(object):
    """Runtime value."""

    __slots__ = ('value',)

    def __init__(self, value):
        """Wrap a Python value."""
        self.value = value

    def __eq__(self, other):
        """Values are equal if of the same type and Python value."""
        return type(self) is type(other) and self.value == other.value

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash((type(self), self.value))

    def __repr__(self):
        """Debugging representation."""
        return '%s(%r)' % (type(self).__name__, self.value)


class Number(Value):
    """Numeric value, double precision."""

    __slots__ = ()

    def __init__(self, value=0.):
        Value.__init__(self, float(value))

    def to_str(self):
        """Canonical decimal text form."""
        return number_to_str(self.value)


class String(Value):
    """String value."""

    __slots__ = ()

    def __init__(self, value=''):
        Value.__init__(self, value)

    def to_str(self):
        return self.value


ZERO = Number(0)
EMPTY = String('')
TRUE = Number(1)
FALSE = Number(0)


def default_for(name):
    """Initial value of a variable, according to its name."""
    if name.endswith(tk.STR_SIGIL):
        return EMPTY
    return ZERO

def from_bool(boolean):
    """Numeric 1 for true, 0 for false."""
    return TRUE if boolean else FALSE

def from_data(item):
    """Convert a DATA pool entry by its own kind, not the target's name."""
    if isinstance(item, str):
        return String(item)
    return Number(item)


###############################################################################
# type checks and conversions

def check_value(inp):
    """Check if value is of Value type."""
    if not isinstance(inp, Value):
        raise TypeError('%s is not of class Value' % type(inp))

def pass_number(inp, err=error.TYPE_MISMATCH, detail=None):
    """Check if value is numeric."""
    if not isinstance(inp, Number):
        check_value(inp)
        raise error.RunError(err, detail=detail)
    return inp

def is_true(inp):
    """Truthiness: nonzero number or non-empty string."""
    return bool(inp.value)

def to_float(inp):
    """Numeric value of a value; text is read as a number, 0 if it isn't one."""
    if isinstance(inp, Number):
        return inp.value
    return str_to_float(inp.value)

def to_str(inp):
    """Rendered text of a value."""
    return inp.to_str()

def to_index(inp, detail='array indices must be numbers'):
    """Convert a numeric value to an integer index, truncating toward zero."""
    value = pass_number(inp, detail=detail).value
    # non-finite indices are out of range
    if math.isnan(value) or math.isinf(value):
        return -1
    return int(value)

def str_to_float(text):
    """Read the leading numeric text of a string; 0 on failure."""
    match = _NUMBER_PREFIX.match(text)
    if not match:
        return 0.
    return float(match.group(1).replace('Infinity', 'inf'))

def number_to_str(x):
    """Shortest decimal text that reads back as x."""
    if math.isnan(x):
        return 'NaN'
    if math.isinf(x):
        return 'Infinity' if x > 0 else '-Infinity'
    if x == 0:
        # includes negative zero
        return '0'
    sign = '-' if x < 0 else ''
    # repr gives the shortest round-trip digits
    _, digit_tuple, exponent = Decimal(repr(abs(x))).normalize().as_tuple()
    digits = ''.join(str(_d) for _d in digit_tuple)
    # position of the decimal point relative to the start of the digits
    point = len(digits) + exponent
    if len(digits) <= point <= _MAX_POSITIONAL:
        return sign + digits + '0' * (point - len(digits))
    if 0 < point <= _MAX_POSITIONAL:
        return sign + digits[:point] + '.' + digits[point:]
    if _MIN_POSITIONAL < point <= 0:
        return sign + '0.' + '0' * -point + digits
    mantissa = digits[0]
    if len(digits) > 1:
        mantissa += '.' + digits[1:]
    return '%s%se%+d' % (sign, mantissa, point - 1)


###############################################################################
# comparisons

def compare(left, right):
    """Three-way comparison: text if both are strings, numeric otherwise."""
    if isinstance(left, String) and isinstance(right, String):
        a, b = left.value, right.value
    else:
        a, b = to_float(left), to_float(right)
    if a < b:
        return -1
    if a > b:
        return 1
    return 0

def eq(left, right):
    """Return 1 if left == right, 0 otherwise."""
    return from_bool(compare(left, right) == 0)

def neq(left, right):
    """Return 1 if left <> right, 0 otherwise."""
    return from_bool(compare(left, right) != 0)

def gt(left, right):
    """Ordering: return 1 if left > right, 0 otherwise."""
    return from_bool(compare(left, right) > 0)

def gte(left, right):
    """Ordering: return 1 if left >= right, 0 otherwise."""
    return from_bool(compare(left, right) >= 0)

def lte(left, right):
    """Ordering: return 1 if left <= right, 0 otherwise."""
    return from_bool(compare(left, right) <= 0)

def lt(left, right):
    """Ordering: return 1 if left < right, 0 otherwise."""
    return from_bool(compare(left, right) < 0)


###############################################################################
# logical operators
# these work on truthiness, not on bits

def not_(inp):
    """Logical NOT."""
    return from_bool(not is_true(inp))

def and_(left, right):
    """Logical AND."""
    return from_bool(is_true(left) and is_true(right))

def or_(left, right):
    """Logical OR."""
    return from_bool(is_true(left) or is_true(right))


###############################################################################
# unary operations

def neg(inp):
    """Negation."""
    return Number(-to_float(inp))

def pos(inp):
    """Unary plus: numeric identity."""
    return Number(to_float(inp))


###############################################################################
# binary operations

def pow(left, right):
    """Left^right."""
    base, exponent = to_float(left), to_float(right)
    try:
        return Number(math.pow(base, exponent))
    except OverflowError:
        if base < 0 and exponent % 2 == 1:
            return Number(-math.inf)
        return Number(math.inf)
    except ValueError:
        # zero to a negative power, or negative base to a fractional power
        if base == 0:
            return Number(math.inf)
        return Number(math.nan)

def add(left, right):
    """Add two numbers or concatenate if either operand is a string."""
    if isinstance(left, String) or isinstance(right, String):
        return String(to_str(left) + to_str(right))
    return Number(left.value + right.value)

def sub(left, right):
    """Subtract two numbers."""
    return Number(to_float(left) - to_float(right))

def mul(left, right):
    """Left*right."""
    return Number(to_float(left) * to_float(right))

def div(left, right):
    """Left/right."""
    divisor = to_float(right)
    if divisor == 0:
        raise error.RunError(error.DIVISION_BY_ZERO)
    return Number(to_float(left) / divisor)
