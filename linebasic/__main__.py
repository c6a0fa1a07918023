"""
LineBASIC - line-numbered BASIC interpreter

(c) 2013--2023 Rob Hagemans, 2026 LineBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

import sys

from .main import main, script_entry_point_guard

with script_entry_point_guard():
    sys.exit(main())
