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

"""Substitutes caller supplied values for placeholder tokens.

Placeholders come in three flavours: anonymous (?), which consume values in
order from a sequence; numbered (?1), which index a sequence or look up an
integer key; and named (:name, @"name"), which look up a mapping. Values are
inserted verbatim (via str()); no quoting or escaping is performed. Any
placeholder for which no value can be found is left untouched.
"""

import logging
from collections.abc import Mapping

from sqltidy.tokenizer import TT

__all__ = ['Params', 'resolve']

logger = logging.getLogger(__name__)


class Params(object):
    """Looks up placeholder values in a sequence or a mapping.

    A new instance must be constructed for each statement (or script) being
    formatted as the instance tracks the position of the next value to be
    consumed by anonymous placeholders.
    """

    def __init__(self, params):
        super(Params, self).__init__()
        self.params = params
        self.index = 0

    def get(self, token):
        """Returns the replacement text for token.

        If token is not a placeholder, or no value can be found for it, the
        original text of the token is returned.
        """
        if token.type != TT.PLACEHOLDER or self.params is None:
            return token.value
        if token.key is None:
            value = self._lookup(self.index)
            self.index += 1
        else:
            value = self._lookup(token.key)
        if value is None:
            logger.debug('No value for placeholder %s at %d:%d',
                token.value, token.line, token.column)
            return token.value
        return str(value)

    def _lookup(self, key):
        if isinstance(self.params, Mapping):
            for candidate in self._candidates(key):
                try:
                    return self.params[candidate]
                except KeyError:
                    pass
            return None
        elif isinstance(key, int):
            try:
                return self.params[key]
            except IndexError:
                return None
        elif key.isdigit():
            return self._lookup(int(key))
        else:
            return None

    def _candidates(self, key):
        yield key
        if isinstance(key, int):
            yield str(key)
        elif key.isdigit():
            yield int(key)


def resolve(tokens, params):
    """Returns a copy of tokens with placeholder values substituted.

    The params parameter is a sequence (for positional placeholders) or a
    mapping (for named or numbered placeholders), or None in which case the
    tokens are returned unchanged.
    """
    if params is None:
        return list(tokens)
    params = Params(params)
    return [
        token._replace(value=params.get(token))
        if token.type == TT.PLACEHOLDER else token
        for token in tokens
    ]
