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

"""Helper routines for setup.py"""

import io
import re
import sys


def description(filename):
    """Returns the first section of the README as the long description.

    The section ends at the first line consisting of a "Contents" heading or,
    if there's no such heading, at the end of the file.
    """
    with io.open(filename, 'r', encoding='utf-8') as f:
        lines = []
        for line in f:
            if line.strip() == 'Contents':
                break
            lines.append(line)
    return ''.join(lines).strip() + '\n'


def get_version(filename):
    """Extracts __version__ from the specified module without importing it"""
    with io.open(filename, 'r', encoding='utf-8') as f:
        for line in f:
            match = re.match(r"^__version__\s*=\s*['\"]([^'\"]*)['\"]", line)
            if match:
                return match.group(1)
    raise ValueError('Unable to find __version__ in %s' % filename)


def require_python(minimum):
    """Aborts if the running interpreter is older than minimum.

    The minimum is specified as a hex version number in the same format as
    sys.hexversion (e.g. 0x030600f0 for Python 3.6.0 final).
    """
    if sys.hexversion < minimum:
        hversion = hex(minimum)[2:]
        if len(hversion) % 2 != 0:
            hversion = '0' + hversion
        split = list(hversion)
        parts = []
        while split:
            parts.append(int(''.join((split.pop(0), split.pop(0))), 16))
        major, minor, micro, release = parts
        if release == 0xf0:
            print('Python {0}.{1}.{2} or better is required'.format(
                major, minor, micro))
        else:
            print('Python {0}.{1}.{2} ({3}) or better is required'.format(
                major, minor, micro, hex(release)[2:]))
        sys.exit(1)
