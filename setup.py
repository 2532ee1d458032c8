#!/usr/bin/env python
# vim: set et sw=4 sts=4:

# Copyright 2012 Dave Hughes.
#
# This file is part of sqltidy.
#
# sqltidy is free software: you can redistribute it and/or modify it under the
# terms of the GNU General Public License as published by the Free Software
# Foundation, either version 3 of the License, or (at your option) any later
# version.
#
# sqltidy is distributed in the hope that it will be useful, but WITHOUT ANY
# WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR
# A PARTICULAR PURPOSE.  See the GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with
# sqltidy.  If not, see <http://www.gnu.org/licenses/>.

import os
import sys
from setuptools import setup, find_packages

HERE = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, HERE)
from utils import description, get_version, require_python

require_python(0x030600f0)

REQUIRES = []

EXTRA_REQUIRES = {
    'test': ['pytest'],
    }

CLASSIFIERS = [
    'Development Status :: 5 - Production/Stable',
    'Environment :: Console',
    'Intended Audience :: System Administrators',
    'Intended Audience :: Developers',
    'License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)',
    'Operating System :: Microsoft :: Windows',
    'Operating System :: POSIX',
    'Operating System :: Unix',
    'Programming Language :: Python :: 3',
    'Programming Language :: SQL',
    'Topic :: Database',
    'Topic :: Software Development :: Pre-processors',
    'Topic :: Text Processing :: Filters',
    ]

ENTRY_POINTS = {
    'console_scripts': [
        'sqltidy = sqltidy.main.sqltidy:main',
        ]
    }


def main():
    setup(
        name                 = 'sqltidy',
        version              = get_version(os.path.join(HERE, 'sqltidy/__init__.py')),
        description          = 'A lexical reformatter for SQL in several dialects',
        long_description     = description(os.path.join(HERE, 'README.rst')),
        classifiers          = CLASSIFIERS,
        author               = 'Dave Hughes',
        author_email         = 'dave@waveform.org.uk',
        url                  = 'http://www.waveform.org.uk/trac/sqltidy/',
        keywords             = 'sql formatter pretty-print',
        packages             = find_packages(exclude=['tests', 'tests.*', 'utils']),
        include_package_data = True,
        platforms            = 'ALL',
        python_requires      = '>=3.6',
        install_requires     = REQUIRES,
        extras_require       = EXTRA_REQUIRES,
        zip_safe             = False,
        entry_points         = ENTRY_POINTS,
        )

if __name__ == '__main__':
    main()
