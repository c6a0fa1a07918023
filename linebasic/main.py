"""
LineBASIC - line-numbered BASIC interpreter

(c) 2013--2022 Rob Hagemans, 2026 LineBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

import io
import sys
import logging
from contextlib import contextmanager

from . import config
from . import data
from .basic import Session, ParseError
from .basic import NAME, VERSION, COPYRIGHT
from .basic.editor import Editor


def main(*arguments):
    """Initialise, parse arguments and perform requested operations; return exit status."""
    settings = config.Settings(arguments)
    if settings.version:
        # print version and exit
        _show_version()
    elif settings.help:
        # print usage and exit
        _show_usage()
    else:
        return _run_session(**settings.launch_params)
    return 0


@contextmanager
def script_entry_point_guard():
    """Wrapper for entry points, to deal with Ctrl-C and sigpipe."""
    try:
        yield
    except KeyboardInterrupt:
        pass
    except BrokenPipeError:
        # downstream tool closed the pipe, e.g. `linebasic PROG.BAS | head`
        pass
    try:
        sys.stdout.flush()
    except EnvironmentError:
        pass


def _show_usage():
    """Show usage description."""
    sys.stdout.write(data.read_usage())

def _show_version():
    """Show version and copyright."""
    sys.stdout.write('%s %s\n%s\n' % (NAME, VERSION, COPYRIGHT))


def _run_session(prog='', commands=(), interact=False, greeting=True):
    """Run program and statements, then optionally start the editor."""
    with Session() as session:
        if prog:
            source = _read_program(prog)
            if source is None:
                return 1
            if not _execute(session, source):
                return 1
        for cmd in commands:
            if not _execute(session, cmd):
                return 1
        if interact:
            # the editor echoes output itself
            editor = Editor(session, sys.stdin, sys.stdout, sys.stderr)
            if greeting:
                editor.greet(NAME, VERSION)
            editor.interact()
    return 0

def _read_program(prog):
    """Read a program file; None if it can't be read."""
    try:
        with io.open(prog, 'r', encoding='utf-8', errors='replace') as f:
            return f.read()
    except EnvironmentError as e:
        logging.error('Could not read program file `%s`: %s', prog, e.strerror or e)
        return None

def _execute(session, source):
    """Execute source text; report syntax errors on stderr."""
    session.add_echo(sys.stdout.write)
    try:
        session.execute(source)
    except ParseError as e:
        sys.stderr.write(e.get_message() + '\n')
        return False
    finally:
        session.remove_echo(sys.stdout.write)
        sys.stdout.flush()
    return True
