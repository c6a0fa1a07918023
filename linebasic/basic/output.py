"""
LineBASIC - output.py
Output sink

(c) 2013--2022 Rob Hagemans, 2026 LineBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""


class Output(object):
    """Append-only sequence of rendered output entries."""

    def __init__(self, echoes=()):
        """Initialise empty output, with optional callbacks receiving each entry."""
        self.lines = []
        self._echoes = list(echoes)

    def __len__(self):
        return len(self.lines)

    def add_echo(self, echo):
        """Add a callback that receives each entry as it is written."""
        self._echoes.append(echo)

    def remove_echo(self, echo):
        """Remove an echo callback."""
        self._echoes.remove(echo)

    def write(self, text):
        """Append an entry."""
        self.lines.append(text)
        for echo in self._echoes:
            echo(text)
