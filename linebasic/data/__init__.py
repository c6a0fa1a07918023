"""
LineBASIC - data
Front-end resources

(c) 2026 LineBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

from importlib import resources


def read_usage():
    """Command-line usage text."""
    return resources.files(__package__).joinpath('USAGE.txt').read_text(errors='replace')
