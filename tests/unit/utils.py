"""
LineBASIC tests.utils
Shared testing utilities

(c) 2020--2023 Rob Hagemans, 2026 LineBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

import unittest
import os
import shutil
from unittest import main as run_tests

from linebasic.basic import Session


class TestCase(unittest.TestCase):
    """Base class for test cases."""

    tag = None

    def __init__(self, *args, **kwargs):
        """Define output dir name."""
        unittest.TestCase.__init__(self, *args, **kwargs)
        here = os.path.dirname(os.path.abspath(__file__))
        self._dir = os.path.join(here, u'output', self.tag or u'default')

    def setUp(self):
        """Ensure output directory exists and is empty."""
        try:
            shutil.rmtree(self._dir)
        except EnvironmentError:
            pass
        if not os.path.isdir(self._dir):
            os.makedirs(self._dir)

    def output_path(self, *names):
        """Output file name."""
        return os.path.join(self._dir, *names)

    def run_program(self, source):
        """Execute source text in a fresh session; return the output entries."""
        with Session() as s:
            return s.execute(source)
