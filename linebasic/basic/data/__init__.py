"""
LineBASIC - data

(c) 2021--2022 Rob Hagemans, 2026 LineBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

import json
from importlib import resources

# copyright metadata
_METADATA = json.loads(resources.files(__package__).joinpath('meta.json').read_bytes())
NAME, VERSION, AUTHOR, COPYRIGHT = (_METADATA[_key] for _key in (
    'name', 'version', 'author', 'copyright'
))
