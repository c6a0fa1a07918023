"""
LineBASIC tests
Run the unit tests: python3 -m tests

(c) 2020--2022 Rob Hagemans, 2026 LineBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

import os
import sys
import unittest

# make linebasic package accessible if run from top level
HERE = os.path.dirname(os.path.abspath(__file__))
sys.path = [os.path.dirname(HERE)] + sys.path

suite = unittest.defaultTestLoader.discover(os.path.join(HERE, 'unit'), top_level_dir=os.path.dirname(HERE))
result = unittest.TextTestRunner(verbosity=1).run(suite)
sys.exit(not result.wasSuccessful())
