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

"""Defines general utility methods and functions.

This module defines a couple of generic recipes used throughout the package:
a cached property decorator (used by the dialect records to build their
lookup tables once) and a routine for querying the size of the console (used
by the command line utilities to wrap their help output).
"""

import os
import sys
import shutil

__all__ = ['cachedproperty', 'terminal_size']


class cachedproperty(property):
    """Convert a method into a cached property"""

    def __init__(self, method):
        private = '_' + method.__name__
        def fget(s):
            try:
                return getattr(s, private)
            except AttributeError:
                value = method(s)
                setattr(s, private, value)
                return value
        super(cachedproperty, self).__init__(fget, doc=method.__doc__)
        # Subclasses of property pick up the class docstring otherwise
        self.__doc__ = method.__doc__


def terminal_size():
    "Returns the size (cols, rows) of the console"
    # Query stderr first as it's the least likely to be redirected; otherwise
    # fall back to the COLUMNS and LINES environment variables, then 80x24
    try:
        size = os.get_terminal_size(sys.stderr.fileno())
    except (AttributeError, ValueError, OSError):
        size = shutil.get_terminal_size((80, 24))
    return (size.columns, size.lines)
