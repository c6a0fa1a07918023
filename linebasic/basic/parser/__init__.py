"""
LineBASIC - parser
Statement and expression parsers

(c) 2013--2022 Rob Hagemans, 2026 LineBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

from .statements import Parser
from .expressions import ExpressionParser
