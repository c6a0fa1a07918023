"""
LineBASIC - program.py
Statement table, data pool and program line buffer

(c) 2013--2022 Rob Hagemans, 2026 LineBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

import re
import logging

from .base import error
from . import nodes


# numbered program line: line number, then the statement text
_LINE_NUMBER = re.compile(r'^\s*(\d+)\s*(.*)$', re.DOTALL)


class StatementTable(object):
    """Statements in execution order, with the DATA pool."""

    def __init__(self, statements):
        """Organise the parsed statements; the table is not changed after this."""
        numbered = [_stmt for _stmt in statements if _stmt.line is not None]
        unnumbered = [_stmt for _stmt in statements if _stmt.line is None]
        # sorted() is stable: statements sharing a line number keep source order
        self.statements = tuple(sorted(numbered, key=lambda _stmt: _stmt.line)) + tuple(unnumbered)
        self.data = tuple(
            _value
            for _stmt in self.statements if isinstance(_stmt, nodes.Data)
            for _value in _stmt.values
        )
        logging.debug(
            'Organised program: %d statements, %d DATA values', len(self.statements), len(self.data)
        )

    def __len__(self):
        """Number of statements in the table."""
        return len(self.statements)

    def __getitem__(self, index):
        """Statement at a table index."""
        return self.statements[index]

    def find_line(self, line_number):
        """Index of the first statement carrying a line number."""
        for index, statement in enumerate(self.statements):
            if statement.line == line_number:
                return index
        raise error.RunError(error.UNDEFINED_LINE_NUMBER, detail=line_number)

    def data_position(self, line_number):
        """Data pool position of the first DATA statement at or after a line number."""
        position = 0
        for statement in self.statements:
            if not isinstance(statement, nodes.Data):
                continue
            if statement.line is not None and statement.line >= line_number:
                break
            position += len(statement.values)
        # if there is no such statement, this is the end of the pool
        return position


class LineBuffer(object):
    """Numbered source lines being edited."""

    def __init__(self):
        """Initialise empty line buffer."""
        self.erase()

    def __len__(self):
        return len(self._lines)

    def erase(self):
        """Erase the program."""
        self._lines = {}
        self.last_stored = None

    @staticmethod
    def check_number_start(text):
        """Check if the text starts with a line number."""
        return _LINE_NUMBER.match(text) is not None

    def store_line(self, text):
        """Store, replace or delete a numbered line."""
        match = _LINE_NUMBER.match(text)
        if not match:
            raise ValueError('Line does not start with a line number: %r' % (text,))
        line_number, code = int(match.group(1)), match.group(2).strip()
        if code:
            self._lines[line_number] = '%d %s' % (line_number, code)
        elif line_number in self._lines:
            del self._lines[line_number]
        else:
            logging.debug('Line %d not in program, nothing deleted', line_number)
        self.last_stored = line_number

    def list_lines(self, from_line=None, to_line=None):
        """Program lines in ascending line number order."""
        return [
            self._lines[_num] for _num in sorted(self._lines)
            if (from_line is None or _num >= from_line) and (to_line is None or _num <= to_line)
        ]

    def get_source(self):
        """Program source text."""
        return '\n'.join(self.list_lines())
