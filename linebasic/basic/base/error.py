"""
LineBASIC - error.py
Error constants and exceptions

(c) 2013--2023 Rob Hagemans, 2026 LineBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

# error constants
# numbers follow GW-BASIC where an equivalent error exists
NEXT_WITHOUT_FOR = 1
OUT_OF_DATA = 4
ILLEGAL_FUNCTION_CALL = 5
OUT_OF_MEMORY = 7
UNDEFINED_LINE_NUMBER = 8
DIVISION_BY_ZERO = 11
TYPE_MISMATCH = 13
INTERNAL_ERROR = 51
# not in GW-BASIC, which dimensions arrays on first use
UNDEFINED_ARRAY = 100

# shorthand
IFC = ILLEGAL_FUNCTION_CALL


class BASICError(Exception):
    """Base type for errors reported to the user."""

    name = 'Error'

    def __init__(self, message, line=None):
        """Initialise error."""
        Exception.__init__(self, message)
        self.message = message
        self.line = line

    def __repr__(self):
        """String representation of exception."""
        return '%s(%r, line=%r)' % (type(self).__name__, self.message, self.line)


class ParseError(BASICError):
    """Lexical or syntax error, with source position."""

    name = 'SyntaxError'

    def __init__(self, message, line=None, column=None):
        """Initialise error."""
        BASICError.__init__(self, message, line)
        self.column = column

    def get_message(self):
        """Error message for display."""
        if self.line is None:
            return '%s: %s' % (self.name, self.message)
        if self.column is None:
            return '%s: %s\n  at line %i' % (self.name, self.message, self.line)
        return '%s: %s\n  at line %i, column %i' % (
            self.name, self.message, self.line, self.column
        )


class RunError(BASICError):
    """Runtime error."""

    name = 'Runtime Error'

    default_message = 'Unprintable error'
    messages = {
        1: 'NEXT without FOR',
        4: 'Out of DATA',
        5: 'Illegal function call',
        7: 'Out of memory',
        8: 'Undefined line number',
        11: 'Division by zero',
        13: 'Type mismatch',
        51: 'Internal error',
        100: 'Undefined array',
    }

    def __init__(self, value, line=None, detail=None):
        """Initialise error."""
        self.err = value
        self.detail = detail
        message = self.messages.get(value, self.default_message)
        if detail is not None:
            message = '%s: %s' % (message, detail)
        BASICError.__init__(self, message, line)

    def get_message(self):
        """Diagnostic line for the output."""
        if self.line is not None:
            return '%s: %s in %i\n' % (self.name, self.message, self.line)
        return '%s: %s\n' % (self.name, self.message)


def throw_if(condition, err=IFC, detail=None):
    """Raise a runtime error if condition is met."""
    if condition:
        raise RunError(err, detail=detail)
