"""
LineBASIC unit tests

(c) 2020--2022 Rob Hagemans, 2026 LineBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""
