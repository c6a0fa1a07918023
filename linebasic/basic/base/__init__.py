"""
LineBASIC - base
Basic constants and exceptions

(c) 2013--2022 Rob Hagemans, 2026 LineBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""
