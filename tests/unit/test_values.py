"""
LineBASIC test.values
unit tests for values

(c) 2020--2022 Rob Hagemans, 2026 LineBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

import math

from linebasic.basic import values
from linebasic.basic.values import Number, String
from linebasic.basic.base import error
from tests.unit.utils import TestCase, run_tests


class ValuesTest(TestCase):
    """Unit tests for values module."""

    tag = u'values'

    def test_pass_number(self):
        """Test pass_number()."""
        i = Number(1)
        s = String('1')
        assert values.pass_number(i) == i
        with self.assertRaises(error.RunError) as cm:
            values.pass_number(s)
        assert cm.exception.err == error.TYPE_MISMATCH
        with self.assertRaises(TypeError):
            values.pass_number(None)

    def test_equality(self):
        """Values are equal by type and content."""
        assert Number(1) == Number(1.)
        assert Number(1) != String('1')
        assert String('a') == String('a')

    def test_default_for(self):
        """Defaults follow the name sigil."""
        assert values.default_for('A') == Number(0)
        assert values.default_for('A$') == String('')

    def test_from_data(self):
        """DATA entries convert by their own kind."""
        assert values.from_data(42.) == Number(42)
        assert values.from_data('Hello') == String('Hello')

    def test_truthiness(self):
        """Nonzero numbers and non-empty strings are true."""
        assert values.is_true(Number(-1))
        assert not values.is_true(Number(0))
        assert values.is_true(String('0'))
        assert not values.is_true(String(''))

    def test_str_to_float(self):
        """Leading numeric text is used; otherwise zero."""
        assert values.str_to_float('12abc') == 12.
        assert values.str_to_float('  -3.5e2x') == -350.
        assert values.str_to_float('.5') == .5
        assert values.str_to_float('abc') == 0.
        assert values.str_to_float('') == 0.
        assert values.str_to_float('-Infinity') == -math.inf

    def test_to_index(self):
        """Indices are truncated toward zero."""
        assert values.to_index(Number(2.9)) == 2
        assert values.to_index(Number(-0.5)) == 0
        assert values.to_index(Number(-1.5)) == -1
        assert values.to_index(Number(math.nan)) == -1
        with self.assertRaises(error.RunError):
            values.to_index(String('1'))


class NumberToStrTest(TestCase):
    """Unit tests for canonical number rendering."""

    tag = u'number_to_str'

    def test_integers(self):
        """Integral values have no decimal point."""
        assert values.number_to_str(8.) == '8'
        assert values.number_to_str(-3.) == '-3'
        assert values.number_to_str(1e20) == '100000000000000000000'

    def test_zero(self):
        """Negative zero renders as zero."""
        assert values.number_to_str(0.) == '0'
        assert values.number_to_str(-0.) == '0'

    def test_fractions(self):
        """Shortest round-trip decimals."""
        assert values.number_to_str(2.5) == '2.5'
        assert values.number_to_str(0.1) == '0.1'
        assert values.number_to_str(0.1 + 0.2) == '0.30000000000000004'
        assert values.number_to_str(-0.000001) == '-0.000001'
        assert values.number_to_str(123.456) == '123.456'

    def test_exponent(self):
        """Exponent notation for very large and very small magnitudes."""
        assert values.number_to_str(1e21) == '1e+21'
        assert values.number_to_str(1.5e22) == '1.5e+22'
        assert values.number_to_str(1e-7) == '1e-7'
        assert values.number_to_str(-2.5e-8) == '-2.5e-8'

    def test_non_finite(self):
        """NaN and infinities."""
        assert values.number_to_str(math.nan) == 'NaN'
        assert values.number_to_str(math.inf) == 'Infinity'
        assert values.number_to_str(-math.inf) == '-Infinity'


class OperatorsTest(TestCase):
    """Unit tests for operators."""

    tag = u'operators'

    def test_add(self):
        """Addition and concatenation."""
        assert values.add(Number(5), Number(3)) == Number(8)
        assert values.add(String('A'), Number(1)) == String('A1')
        assert values.add(Number(1.5), String('B')) == String('1.5B')

    def test_numeric_coercion(self):
        """Text operands of numeric operators are read as numbers."""
        assert values.sub(String('10'), Number(3)) == Number(7)
        assert values.mul(String('x'), Number(3)) == Number(0)
        assert values.neg(String('4')) == Number(-4)

    def test_div(self):
        """Division by exactly zero is an error."""
        assert values.div(Number(1), Number(4)) == Number(.25)
        with self.assertRaises(error.RunError) as cm:
            values.div(Number(0), Number(0))
        assert cm.exception.err == error.DIVISION_BY_ZERO

    def test_pow(self):
        """Power, including edge cases."""
        assert values.pow(Number(2), Number(10)) == Number(1024)
        assert values.pow(Number(4), Number(.5)) == Number(2)
        assert values.pow(Number(2), Number(-1)) == Number(.5)
        assert math.isnan(values.pow(Number(-8), Number(1/3.)).value)
        assert values.pow(Number(0), Number(-1)) == Number(math.inf)
        assert values.pow(Number(10), Number(400)) == Number(math.inf)

    def test_comparisons(self):
        """Comparisons yield 1 or 0."""
        assert values.eq(Number(1), Number(1)) == Number(1)
        assert values.neq(Number(1), Number(1)) == Number(0)
        assert values.lt(String('ABC'), String('ABD')) == Number(1)
        assert values.gt(String('b'), String('a')) == Number(1)
        assert values.gte(Number(2), Number(2)) == Number(1)
        assert values.lte(Number(3), Number(2)) == Number(0)

    def test_mixed_comparison(self):
        """A string compared with a number is read as a number."""
        assert values.eq(String('5'), Number(5)) == Number(1)
        assert values.lt(String('abc'), Number(1)) == Number(1)

    def test_logical(self):
        """Logical operators work on truthiness."""
        assert values.and_(Number(2), Number(4)) == Number(1)
        assert values.and_(Number(2), String('')) == Number(0)
        assert values.or_(Number(0), String('x')) == Number(1)
        assert values.not_(Number(5)) == Number(0)
        assert values.not_(String('')) == Number(1)


if __name__ == '__main__':
    run_tests()
