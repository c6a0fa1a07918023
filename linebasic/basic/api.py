"""
LineBASIC - api.py
Session API

(c) 2013--2022 Rob Hagemans, 2026 LineBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

import logging

from .tokeniser import Tokeniser
from .parser import Parser
from .interpreter import Interpreter
from .program import LineBuffer
from .output import Output


class Session(object):
    """Public API to a BASIC session."""

    def __init__(self, echo=()):
        """Set up session object; echo callables receive each output entry as it is produced."""
        if callable(echo):
            echo = (echo,)
        self._echoes = list(echo)
        self._parser = None
        self._interpreter = None
        self.program = LineBuffer()

    def __enter__(self):
        """Context guard."""
        return self

    def __exit__(self, ex_type, ex_val, tb):
        """Context guard."""
        self.close()

    def start(self):
        """Start the session."""
        if not self._interpreter:
            self._parser = Parser()
            self._interpreter = Interpreter()
            return True
        return False

    def add_echo(self, echo):
        """Add a callable that receives each output entry."""
        self._echoes.append(echo)

    def remove_echo(self, echo):
        """Remove an echo callable."""
        self._echoes.remove(echo)

    def parse(self, source):
        """Tokenise and parse source text into a program."""
        self.start()
        return self._parser.parse(Tokeniser(source).tokenise())

    def interpret(self, program):
        """Run a parsed program; return its output entries."""
        self.start()
        return self._interpreter.interpret(program, Output(self._echoes))

    def execute(self, source):
        """Parse and run source text; return its output entries."""
        return self.interpret(self.parse(source))

    def store_line(self, text):
        """Add or replace a numbered program line; a bare line number deletes it."""
        self.program.store_line(text)

    def list_lines(self, from_line=None, to_line=None):
        """Stored program lines in line number order."""
        return self.program.list_lines(from_line, to_line)

    def new(self):
        """Erase the stored program."""
        self.program.erase()

    def run(self):
        """Run the stored program; return its output entries."""
        logging.debug('Running stored program of %d lines', len(self.program))
        return self.execute(self.program.get_source())

    def close(self):
        """Close the session."""
        self._parser = None
        self._interpreter = None
