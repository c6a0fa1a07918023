"""
LineBASIC - context.py
Execution context of a single program run

(c) 2026 LineBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

import logging

from .base import error
from . import scalars
from . import arrays


class ForLoop(object):
    """Live state of an open FOR loop."""

    __slots__ = ('variable', 'current', 'stop', 'step', 'for_index')

    def __init__(self, variable, current, stop, step, for_index):
        self.variable = variable
        self.current = current
        self.stop = stop
        self.step = step
        # table index of the FOR statement
        self.for_index = for_index

    def __repr__(self):
        return 'ForLoop(%r, current=%r, stop=%r, step=%r, for_index=%r)' % (
            self.variable, self.current, self.stop, self.step, self.for_index
        )

    def iterate(self):
        """Advance the loop value; return True if the loop continues."""
        self.current += self.step
        if self.step > 0:
            return self.current <= self.stop
        return self.current >= self.stop


class Context(object):
    """Mutable state of a program run: variables, pointers and loops."""

    def __init__(self, table, output):
        """Create fresh state for a run of the statement table."""
        self.table = table
        self.output = output
        self.scalars = scalars.Scalars()
        self.arrays = arrays.Arrays()
        # DATA pointer, into table.data
        self.data_pos = 0
        # index of the statement being executed
        self.pc = 0
        # index of the statement to execute after the current one
        self.next_pc = 0
        self.running = False
        # open loops by variable name, in order of opening
        self.for_loops = {}

    def jump(self, index):
        """Set the next statement to execute."""
        logging.debug('Jump from %d to %d', self.pc, index)
        self.next_pc = index

    def open_loop(self, loop):
        """Record a FOR loop, replacing any open loop on the same variable."""
        # re-insert so that a reopened loop counts as the most recent
        self.for_loops.pop(loop.variable, None)
        self.for_loops[loop.variable] = loop
        logging.debug('Opened loop %r', loop)

    def get_loop(self, name=None):
        """Find an open loop by variable name, or the most recently opened one."""
        if name is None:
            if not self.for_loops:
                raise error.RunError(error.NEXT_WITHOUT_FOR)
            name = list(self.for_loops)[-1]
        try:
            return self.for_loops[name]
        except KeyError:
            raise error.RunError(error.NEXT_WITHOUT_FOR, detail=name)

    def close_loop(self, loop):
        """Remove a finished loop."""
        del self.for_loops[loop.variable]
        logging.debug('Closed loop %r', loop)

    def read_data(self):
        """Read the next DATA pool entry and advance the pointer."""
        if self.data_pos >= len(self.table.data):
            raise error.RunError(error.OUT_OF_DATA)
        item = self.table.data[self.data_pos]
        self.data_pos += 1
        return item
