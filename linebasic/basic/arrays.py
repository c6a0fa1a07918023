"""
LineBASIC - arrays.py
Array variable management

(c) 2013--2022 Rob Hagemans, 2026 LineBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

import logging

from .base import error
from . import values


class Arrays(object):
    """Array variables, stored flat with their dimensions."""

    def __init__(self):
        """Initialise arrays."""
        self.clear()

    def __repr__(self):
        """Debugging representation of array dictionary."""
        return '\n'.join(
            '%s%s: %s' % (_name, list(_dims), _lst)
            for _name, (_dims, _lst) in self._arrays.items()
        )

    def __contains__(self, name):
        """Check if an array has been dimensioned."""
        return name in self._arrays

    def clear(self):
        """Clear arrays."""
        self._arrays = {}

    @staticmethod
    def index(index, dimensions):
        """Return the flat index for a given dimensioned index, or None if out of range."""
        if len(index) != len(dimensions):
            return None
        bigindex = 0
        area = 1
        for i, d in zip(index, dimensions):
            # dimensions are the *maximum index number*
            if not 0 <= i <= d:
                return None
            bigindex += area * i
            area *= d + 1
        return bigindex

    @staticmethod
    def array_len(dimensions):
        """Return the flat length for given dimensioned size."""
        size = 1
        for d in dimensions:
            size *= d + 1
        return size

    def dim(self, name, dimensions):
        """Allocate a zeroed array, replacing any existing array of that name."""
        for d in dimensions:
            error.throw_if(d < 0, error.IFC, 'negative array dimension')
        if name in self._arrays:
            logging.debug('Redimensioning array %s', name)
        try:
            self._arrays[name] = (tuple(dimensions), [values.ZERO] * self.array_len(dimensions))
        except (OverflowError, MemoryError):
            raise error.RunError(error.OUT_OF_MEMORY, detail=name)

    def check_dim(self, name):
        """Check that an array has been dimensioned; return its dimensions."""
        try:
            dimensions, _ = self._arrays[name]
        except KeyError:
            raise error.RunError(error.UNDEFINED_ARRAY, detail=name)
        return dimensions

    def get(self, name, index):
        """Retrieve the value of an array element; zero if out of range."""
        dimensions = self.check_dim(name)
        bigindex = self.index(index, dimensions)
        if bigindex is None:
            return values.ZERO
        return self._arrays[name][1][bigindex]

    def set(self, name, index, value):
        """Assign a value to an array element; ignored if out of range."""
        values.check_value(value)
        dimensions = self.check_dim(name)
        bigindex = self.index(index, dimensions)
        if bigindex is None:
            logging.debug('Dropped write to %s%s outside %s', name, list(index), list(dimensions))
            return
        self._arrays[name][1][bigindex] = value
