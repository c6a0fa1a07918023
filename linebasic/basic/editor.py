"""
LineBASIC - editor.py
Direct mode environment

(c) 2013--2020 Rob Hagemans, 2026 LineBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

import sys
import logging
from contextlib import contextmanager

from .base import error


PROMPT_EMPTY = 'READY> '
PROMPT_PROGRAM = 'BASIC> '
FAREWELL = 'Goodbye!\n'

HELP = (
    'Lines starting with a number are stored in the program;\n'
    'a line number on its own deletes that line.\n'
    'Other lines are executed immediately.\n'
    'Commands:\n'
    '  RUN         run the program\n'
    '  LIST        list the program\n'
    '  NEW         erase the program\n'
    '  HELP        show this help\n'
    '  EXIT, QUIT  leave the editor\n'
    'Language:\n'
    '  Line numbers  10 PRINT "Hello"\n'
    '  Variables     LET A = 5 or A = 5; A$ holds text by convention\n'
    '  Arrays        DIM A(10), A(5) = 42\n'
    '  Control flow  GOTO, IF-THEN-ELSE, FOR-TO-STEP-NEXT, END\n'
    '  Data          DATA 1,2,3 / READ A,B,C / RESTORE\n'
    '  Output        PRINT "text"; A, B\n'
    '  Comments      REM This is a comment\n'
    '  Math          + - * / ^\n'
    '  Comparison    = <> < > <= >=\n'
    '  Logic         AND OR NOT\n'
)


class Editor(object):
    """Interactive environment."""

    def __init__(self, session, stdin=None, stdout=None, stderr=None):
        """Initialise environment on a session and text streams."""
        self._session = session
        self._stdin = stdin or sys.stdin
        self._stdout = stdout or sys.stdout
        self._stderr = stderr or sys.stderr
        self._running = False
        self._commands = {
            'RUN': self.run_,
            'LIST': self.list_,
            'NEW': self.new_,
            'HELP': self.help_,
            'EXIT': self.exit_,
            'QUIT': self.exit_,
        }

    def greet(self, name, version):
        """Emit the greeting."""
        self._stdout.write('%s %s\nType HELP for help.\n' % (name, version))

    def interact(self):
        """Read and handle lines until EXIT, QUIT or end of input."""
        self._running = True
        self._session.add_echo(self._stdout.write)
        try:
            while self._running:
                self._show_prompt()
                line = self._stdin.readline()
                if not line:
                    # end of input
                    self._stdout.write('\n')
                    break
                with self._handle_exceptions():
                    self.handle_line(line.rstrip('\r\n'))
        finally:
            self._session.remove_echo(self._stdout.write)
        self._stdout.write(FAREWELL)
        self._stdout.flush()

    def handle_line(self, line):
        """Store a program line, perform a command or execute a statement."""
        if not line.strip():
            return
        if self._session.program.check_number_start(line):
            self._session.store_line(line)
            return
        command = self._commands.get(line.strip().upper())
        if command:
            command()
        else:
            self._session.execute(line)

    def _show_prompt(self):
        """Show the prompt; it changes once the program holds lines."""
        if len(self._session.program):
            self._stdout.write(PROMPT_PROGRAM)
        else:
            self._stdout.write(PROMPT_EMPTY)
        self._stdout.flush()

    @contextmanager
    def _handle_exceptions(self):
        """Context guard to report BASIC syntax errors."""
        try:
            yield
        except error.ParseError as e:
            logging.debug('Syntax error: %r', e)
            self._stderr.write(e.get_message() + '\n')
            self._stderr.flush()

    ###########################################################################
    # commands

    def run_(self):
        """RUN: run the stored program."""
        if not len(self._session.program):
            self._stdout.write('No program to run.\n')
            return
        self._session.run()

    def list_(self):
        """LIST: show the stored program."""
        lines = self._session.list_lines()
        if not lines:
            self._stdout.write('No program loaded.\n')
        for line in lines:
            self._stdout.write(line + '\n')

    def new_(self):
        """NEW: erase the stored program."""
        self._session.new()
        self._stdout.write('Program cleared.\n')

    def help_(self):
        """HELP: show the editor commands."""
        self._stdout.write(HELP)

    def exit_(self):
        """EXIT, QUIT: leave the editor."""
        self._running = False
