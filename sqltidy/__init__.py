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

"""Reformats SQL source into a canonical, indented layout.

The format() function is the main entry point of the package. It selects a
dialect by name, tokenizes the source, substitutes any placeholder values and
finally lays out the tokens::

    >>> import sqltidy
    >>> print(sqltidy.format('select a, b from t where a = ?', params=[1]), end='')
    select
      a,
      b
    from
      t
    where
      a = 1

The layout is purely lexical: the SQL is never parsed or validated, hence
incomplete or invalid SQL is formatted as well as can be managed.
"""

import logging

from sqltidy.dialects import Error, ConfigurationError, get_dialect, dialect_names
from sqltidy.tokenizer import BaseTokenizer
from sqltidy.params import resolve
from sqltidy.formatter import Formatter

__version__ = '1.0.0'

__all__ = [
    'Error',
    'ConfigurationError',
    'DEFAULT_OPTIONS',
    'format',
    'tokenize',
    'get_dialect',
    'dialect_names',
]

logger = logging.getLogger(__name__)

DEFAULT_OPTIONS = {
    'language':              'sql',
    'indent':                '  ',
    'uppercase':             False,
    'lines_between_queries': 0,
    'params':                None,
    'inline_between_and':    False,
}

# Alternative spellings accepted for some options
OPTION_ALIASES = {
    'linesBetweenQueries': 'lines_between_queries',
    'inlineBetweenAnd':    'inline_between_and',
}


def _configure(options, kwargs):
    """Merges options and kwargs over the defaults, validating the result."""
    config = DEFAULT_OPTIONS.copy()
    supplied = {}
    if options:
        supplied.update(options)
    supplied.update(kwargs)
    for key, value in supplied.items():
        key = OPTION_ALIASES.get(key, key)
        if key not in DEFAULT_OPTIONS:
            raise ConfigurationError('Unknown formatting option %r' % key)
        config[key] = value
    if not isinstance(config['indent'], str):
        raise ConfigurationError(
            'The indent option must be a string, not %r' % (config['indent'],))
    try:
        config['lines_between_queries'] = int(config['lines_between_queries'] or 0)
    except (TypeError, ValueError):
        raise ConfigurationError(
            'The lines_between_queries option must be an integer, not %r' % (
                config['lines_between_queries'],))
    if config['lines_between_queries'] < 0:
        raise ConfigurationError('The lines_between_queries option must not be negative')
    return config


def tokenize(sql, language='sql'):
    """Returns the list of tokens in sql, using the named dialect."""
    return BaseTokenizer(get_dialect(language)).parse(sql)


def format(sql, options=None, **kwargs):
    """Returns sql reformatted according to the specified options.

    Options may be given as a dictionary (options) or as keyword arguments
    (which take precedence). The following options are recognized:

    language        The name of the SQL dialect (see dialect_names()),
                    default 'sql'
    indent          The string used for each level of indentation, default
                    two spaces
    uppercase       If True, convert keywords to uppercase, default False
    lines_between_queries
                    The number of line breaks following each semi-colon
                    (linesBetweenQueries is accepted as an alias), default 0
                    which is treated as 1
    params          A sequence or mapping of values to substitute for
                    placeholders, default None
    inline_between_and
                    If True, the AND of a BETWEEN predicate stays on the same
                    line, default False

    Raises ConfigurationError if the dialect or an option is invalid. The
    result always ends with a single line break.
    """
    config = _configure(options, kwargs)
    dialect = get_dialect(config['language'])
    logger.debug('Formatting %d characters of %s', len(sql), dialect.name)
    tokens = BaseTokenizer(dialect).parse(sql)
    tokens = resolve(tokens, config['params'])
    formatter = Formatter(
        indent=config['indent'],
        uppercase=config['uppercase'],
        lines_between_queries=config['lines_between_queries'],
        inline_between_and=config['inline_between_and'],
    )
    return formatter.format(tokens, dialect)
