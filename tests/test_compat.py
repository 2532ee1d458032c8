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


from sqltidy.compat import cachedproperty, terminal_size


def test_terminal_size():
    (cols, rows) = terminal_size()
    assert cols > 0
    assert rows > 0

def test_cachedproperty():
    class Foo(object):
        calls = 0
        @cachedproperty
        def bar(self):
            "The bar"
            Foo.calls += 1
            return 42
    foo = Foo()
    assert foo.bar == 42
    assert foo.bar == 42
    assert Foo.calls == 1
    assert Foo.bar.__doc__ == 'The bar'
