"""
LineBASIC - tokens.py
BASIC token kinds and keywords

(c) 2014--2022 Rob Hagemans, 2026 LineBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

import string


DIGITS = string.digits
LETTERS = string.ascii_letters
# allowable as the first char of a name
NAME_START = LETTERS + '_'
# allowable as chars 2.. in a variable name
NAME_CHARS = NAME_START + DIGITS
# string type sigil
STR_SIGIL = '$'
# whitespace between tokens; newline is a token
BLANKS = ' \t\r'

# literals
NUMBER = 'NUMBER'
STRING = 'STRING'
IDENTIFIER = 'IDENTIFIER'

# keyword tokens
PRINT = 'PRINT'
LET = 'LET'
GOTO = 'GOTO'
IF = 'IF'
THEN = 'THEN'
ELSE = 'ELSE'
FOR = 'FOR'
TO = 'TO'
STEP = 'STEP'
NEXT = 'NEXT'
DATA = 'DATA'
READ = 'READ'
RESTORE = 'RESTORE'
DIM = 'DIM'
END = 'END'
REM = 'REM'
AND = 'AND'
OR = 'OR'
NOT = 'NOT'

# operators
O_PLUS = 'PLUS'
O_MINUS = 'MINUS'
O_TIMES = 'MULTIPLY'
O_DIV = 'DIVIDE'
O_CARET = 'POWER'
O_EQ = 'EQUAL'
O_NE = 'NOT_EQUAL'
O_LT = 'LESS'
O_GT = 'GREATER'
O_LE = 'LESS_EQUAL'
O_GE = 'GREATER_EQUAL'

# punctuation
COMMA = 'COMMA'
SEMICOLON = 'SEMICOLON'
LEFT_PAREN = 'LEFT_PAREN'
RIGHT_PAREN = 'RIGHT_PAREN'
LEFT_BRACKET = 'LEFT_BRACKET'
RIGHT_BRACKET = 'RIGHT_BRACKET'

# special
NEWLINE = 'NEWLINE'
EOF = 'EOF'

KEYWORDS = (
    PRINT, LET, GOTO, IF, THEN, ELSE, FOR, TO, STEP, NEXT, DATA, READ,
    RESTORE, DIM, END, REM, AND, OR, NOT,
)

# single-character operators and punctuation
SYMBOLS = {
    '+': O_PLUS,
    '-': O_MINUS,
    '*': O_TIMES,
    '/': O_DIV,
    '^': O_CARET,
    '=': O_EQ,
    '<': O_LT,
    '>': O_GT,
    ',': COMMA,
    ';': SEMICOLON,
    '(': LEFT_PAREN,
    ')': RIGHT_PAREN,
    '[': LEFT_BRACKET,
    ']': RIGHT_BRACKET,
}

# two-character operators
# key is the two-char sequence; value is (token, canonical text)
COMBINED = {
    '**': (O_CARET, '^'),
    '<=': (O_LE, '<='),
    '>=': (O_GE, '>='),
    '<>': (O_NE, '<>'),
    '!=': (O_NE, '<>'),
}

# tokens that end a statement
END_STATEMENT = (NEWLINE, EOF)
# tokens that end a statement inside an IF branch
END_BRANCH = END_STATEMENT + (ELSE,)
