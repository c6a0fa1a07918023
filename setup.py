#!/usr/bin/env python3
"""
LineBASIC install script

(c) 2015--2022 Rob Hagemans, 2026 LineBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

import os
import json
from io import open

from setuptools import find_packages, setup


###############################################################################
# get descriptions and version number

# file location
HERE = os.path.abspath(os.path.dirname(__file__))

# obtain metadata without importing the package
with open(os.path.join(HERE, 'linebasic', 'basic', 'data', 'meta.json'), 'r') as meta:
    _METADATA = json.load(meta)
    VERSION = _METADATA['version']
    AUTHOR = _METADATA['author']


###############################################################################
# setup parameters

SETUP_OPTIONS = dict(
    name='linebasic',
    version=VERSION,
    author=AUTHOR,
    description='Interpreter for a line-numbered BASIC dialect',
    license='GPLv3',
    python_requires='>=3.9',

    # contents
    # only include subpackages of linebasic: exclude tests
    packages=find_packages(include=['linebasic', 'linebasic.*']),
    package_data={
        'linebasic.basic.data': ['meta.json'],
        'linebasic.data': ['USAGE.txt'],
    },
    install_requires=[],
    extras_require={
        'test': ['pytest'],
    },
    # launchers
    entry_points=dict(
        console_scripts=['linebasic=linebasic:main'],
    ),
)

###############################################################################
# run the setup

setup(**SETUP_OPTIONS)
