"""
LineBASIC - scalars.py
Scalar variable management

(c) 2013--2022 Rob Hagemans, 2026 LineBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

from . import values


class Scalars(object):
    """Scalar variables."""

    def __init__(self):
        """Initialise scalars."""
        self.clear()

    def __repr__(self):
        """Debugging representation of variable dictionary."""
        return '\n'.join(
            '%s: %s' % (_name, _value) for _name, _value in self._vars.items()
        )

    def __contains__(self, name):
        """Check if a scalar has been assigned."""
        return name in self._vars

    def clear(self):
        """Clear scalar variables."""
        self._vars = {}

    def set(self, name, value):
        """Assign a value to a variable."""
        # the sigil is a naming convention only; any value can be stored
        values.check_value(value)
        self._vars[name] = value

    def get(self, name):
        """Retrieve the value of a scalar variable."""
        try:
            return self._vars[name]
        except KeyError:
            return values.default_for(name)

    def variables(self):
        """Names of all assigned variables."""
        return list(self._vars)
