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

"""Defines the dialect configuration record and the dialect registry.

Each SQL dialect supported by the package is described by a single Dialect
instance: the sets of keywords in each layout category, the operators the
tokenizer must recognize, the quoting, comment and placeholder conventions,
and the characters (beyond letters, digits and underscore) permitted in
unquoted identifiers. Dialect instances are pure data; neither the tokenizer
nor the formatter contain any dialect-specific branches.

The dialects themselves live in sub-modules of this package (standard, plsql,
db2, n1ql), each of which exposes a module-level "dialect" attribute. They are
imported on demand by get_dialect().
"""

import logging
import importlib
from collections import namedtuple

from sqltidy.compat import cachedproperty
from sqltidy.tokenizer import TT

__all__ = [
    'Error',
    'ConfigurationError',
    'Quote',
    'APOS',
    'NATIONAL',
    'QUOTE',
    'BACKTICK',
    'BRACKET',
    'DOLLAR',
    'CASE_KEYWORDS',
    'BASE_OPERATORS',
    'Dialect',
    'get_dialect',
    'dialect_names',
]

logger = logging.getLogger(__name__)


class Error(Exception):
    """Base class for errors in this package."""


class ConfigurationError(Error):
    """Raised when a dialect name or a formatting option is invalid."""


# A quoting convention: the characters opening and closing the quoted text, and
# whether a backslash escapes the following character. A doubled closing
# character never terminates the quoted text regardless of escapes.
Quote = namedtuple('Quote', ('open', 'close', 'escapes'))

APOS     = Quote("'", "'", True)       # 'string'
NATIONAL = Quote("N'", "'", True)      # N'national string'
QUOTE    = Quote('"', '"', True)       # "identifier" or "string"
BACKTICK = Quote('`', '`', False)      # `identifier`
BRACKET  = Quote('[', ']', False)      # [identifier]
DOLLAR   = Quote('$$', '$$', False)    # $$string$$

# The keywords making up a CASE block; these are common to all dialects as
# the formatter gives each of them a specific role
CASE_KEYWORDS = ('CASE', 'WHEN', 'THEN', 'ELSE', 'END')

# Multi-character operators recognized by all dialects. Single characters not
# otherwise claimed by the tokenizer are always treated as operators
BASE_OPERATORS = (
    '!=', '<>', '==', '<=', '>=', '!<', '!>', '||', '::', '->>', '->', '~~*',
    '~~', '!~~*', '!~~', '~*', '!~*', '!~', '<<', '>>', '||/', '|/',
)

# Order of precedence when the same phrase appears in several categories
_PRECEDENCE = (
    TT.CASE_KEYWORD,
    TT.TOP_LEVEL_KEYWORD,
    TT.NEWLINE_KEYWORD,
    TT.TOP_LEVEL_KEYWORD_NO_INDENT,
    TT.PLAIN_KEYWORD,
)


class Dialect(object):
    """Describes the lexical conventions and keyword tables of a SQL dialect.

    The constructor accepts the following parameters (all but name are
    optional):

    name            The canonical name of the dialect (e.g. 'pl/sql')
    top_level_keywords
                    Keywords and phrases which start a new clause and indent
                    its body (SELECT, FROM, GROUP BY, ...)
    top_level_keywords_no_indent
                    Keywords which start a new clause at the current level
                    without indenting what follows (UNION, MINUS, ...)
    newline_keywords
                    Keywords which start a new line at the current
                    indentation level (AND, OR, LEFT JOIN, ...)
    plain_keywords  All other reserved words (case conversion only)
    operators       Multi-character operators; longest match wins
    strings         Quote rules producing STRING tokens
    quoted_identifiers
                    Quote rules producing QUOTED_IDENTIFIER tokens
    line_comments   Markers starting a comment which runs to end of line
    block_comment   A (start, end) pair of block comment markers, or None
    nested_comments If True, block comments may be nested
    indexed_placeholders
                    Characters which, followed by optional digits, form a
                    positional or numbered placeholder (?, ?1)
    named_placeholders
                    Characters which, followed by a name or a quoted name,
                    form a named placeholder (:name, @"name")
    special_word_chars
                    Characters permitted in unquoted identifiers in addition
                    to letters, digits and underscore
    open_parens     Characters opening a parenthesized block
    close_parens    Characters closing a parenthesized block
    single_line_clauses
                    Top-level keywords whose body is never split at commas
    demotions       A mapping of keyword to the keywords which, when they
                    were the previous keyword, demote it to a plain keyword
    """

    def __init__(self, name, top_level_keywords=(),
            top_level_keywords_no_indent=(), newline_keywords=(),
            plain_keywords=(), operators=BASE_OPERATORS, strings=(APOS,),
            quoted_identifiers=(QUOTE,), line_comments=('--',),
            block_comment=('/*', '*/'), nested_comments=False,
            indexed_placeholders='?', named_placeholders='',
            special_word_chars='', open_parens='(', close_parens=')',
            single_line_clauses=('LIMIT',), demotions=None):
        super(Dialect, self).__init__()
        self.name = name
        self.top_level_keywords = frozenset(top_level_keywords)
        self.top_level_keywords_no_indent = frozenset(top_level_keywords_no_indent)
        self.newline_keywords = frozenset(newline_keywords)
        self.plain_keywords = frozenset(plain_keywords)
        self.operators = tuple(operators)
        self.strings = tuple(strings)
        self.quoted_identifiers = tuple(quoted_identifiers)
        self.line_comments = tuple(line_comments)
        self.block_comment = block_comment
        self.nested_comments = nested_comments
        self.indexed_placeholders = indexed_placeholders
        self.named_placeholders = named_placeholders
        self.special_word_chars = special_word_chars
        self.open_parens = open_parens
        self.close_parens = close_parens
        self.single_line_clauses = frozenset(w.upper() for w in single_line_clauses)
        self.demotions = dict(
            (keyword.upper(), frozenset(w.upper() for w in previous))
            for (keyword, previous) in (demotions or {}).items()
        )

    def __repr__(self):
        return '<Dialect %s>' % self.name

    @cachedproperty
    def phrases(self):
        """Maps the first word of each keyword phrase to its candidates.

        The result is a dictionary keyed by the upper-cased first word of
        every keyword (or keyword phrase) in the dialect. Each value is a list
        of (words, type) tuples where words is a tuple of upper-cased words,
        ordered so that longer phrases are tried first and, among phrases of
        equal length, the category with the highest precedence wins.
        """
        categories = {
            TT.CASE_KEYWORD:                CASE_KEYWORDS,
            TT.TOP_LEVEL_KEYWORD:           self.top_level_keywords,
            TT.TOP_LEVEL_KEYWORD_NO_INDENT: self.top_level_keywords_no_indent,
            TT.NEWLINE_KEYWORD:             self.newline_keywords,
            TT.PLAIN_KEYWORD:               self.plain_keywords,
        }
        seen = set()
        result = {}
        for type in _PRECEDENCE:
            for phrase in categories[type]:
                words = tuple(phrase.upper().split())
                if words and words not in seen:
                    seen.add(words)
                    result.setdefault(words[0], []).append((words, type))
        for candidates in result.values():
            candidates.sort(key=lambda c: (-len(c[0]), _PRECEDENCE.index(c[1])))
        return result

    @cachedproperty
    def operator_table(self):
        """Maps the first character of each operator to its candidates.

        Candidates are sorted by descending length so that the tokenizer can
        simply take the first one which matches the source.
        """
        result = {}
        for op in sorted(set(self.operators), key=len, reverse=True):
            result.setdefault(op[0], []).append(op)
        return result

    @cachedproperty
    def quote_table(self):
        """Returns a list of (quote, token type) tuples, longest opener first."""
        result = [(q, TT.STRING) for q in self.strings]
        result.extend((q, TT.QUOTED_IDENTIFIER) for q in self.quoted_identifiers)
        result.sort(key=lambda r: len(r[0].open), reverse=True)
        return result

    @cachedproperty
    def comment_starts(self):
        """Returns the set of characters which may start a comment."""
        result = set(marker[0] for marker in self.line_comments)
        if self.block_comment:
            result.add(self.block_comment[0][0])
        return result

    def is_word_char(self, char):
        """Returns True if char may appear in an unquoted identifier."""
        return char.isalnum() or char == '_' or char in self.special_word_chars


# Maps every recognized dialect name (and alias) to the module defining it
_DIALECTS = {
    'sql':      'sqltidy.dialects.standard',
    'standard': 'sqltidy.dialects.standard',
    'ansi':     'sqltidy.dialects.standard',
    'pl/sql':   'sqltidy.dialects.plsql',
    'plsql':    'sqltidy.dialects.plsql',
    'oracle':   'sqltidy.dialects.plsql',
    'db2':      'sqltidy.dialects.db2',
    'n1ql':     'sqltidy.dialects.n1ql',
}


def dialect_names():
    """Returns the sorted list of canonical dialect names."""
    return sorted(set(
        get_dialect(name).name for name in _DIALECTS
    ))


def get_dialect(name):
    """Returns the Dialect registered under name.

    The name is matched case-insensitively against the canonical dialect
    names and their aliases. A Dialect instance passed as name is returned
    unchanged. Raises ConfigurationError if the name is not recognized.
    """
    if isinstance(name, Dialect):
        return name
    try:
        module_name = _DIALECTS[name.strip().lower()]
    except (KeyError, AttributeError):
        raise ConfigurationError(
            'Unknown SQL dialect %r (expected one of %s)' % (
                name, ', '.join(sorted(_DIALECTS))))
    logger.debug('Loading dialect %s from %s', name, module_name)
    return importlib.import_module(module_name).dialect
