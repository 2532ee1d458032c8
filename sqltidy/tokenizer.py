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

"""Implements a dialect driven SQL tokenizer.

This unit implements a configurable SQL tokenizer class (BaseTokenizer) which
converts a string containing SQL source code into a list of classified tokens.
All dialect specific behaviour (keyword tables, operators, quoting, comment
and placeholder conventions) is supplied by a Dialect instance from the
sqltidy.dialects package; the tokenizer itself contains no dialect specific
branches.

The tokenizer never raises errors for malformed input: unterminated strings
and comments simply extend to the end of the source, and characters which are
not otherwise recognized are returned as single character operators.
"""

import re
import sys
from collections import namedtuple

__all__ = [
    'Token',
    'TokenTypes',
    'TT',
    'BaseTokenizer',
    'tokenize',
    'dump',
    'dump_token',
]


class TokenTypes(object):
    """Simple utility class for defining token type constants."""

    def __init__(self):
        super(TokenTypes, self).__init__()
        self.names = {}
        self._counter = 0

    def add(self, new_type, type_name=None):
        if hasattr(self, new_type):
            raise ValueError('%s is already registered as a token type' % new_type)
        if type_name is None:
            type_name = new_type
        setattr(self, new_type, self._counter)
        self.names[self._counter] = type_name
        self._counter += 1

# Replace the class with an instance of itself and a conveniently short alias
TokenTypes = TokenTypes()
TT = TokenTypes

# Define the set of tokens produced by the tokenizer below
for (type, name) in (
    ('WHITESPACE',                  '<space>'),          # Trailing whitespace at the end of the source
    ('TOP_LEVEL_KEYWORD',           '<top-keyword>'),    # Clause starting keywords (SELECT/FROM/etc.)
    ('TOP_LEVEL_KEYWORD_NO_INDENT', '<top-noindent>'),   # Set operators (UNION/MINUS/etc.)
    ('NEWLINE_KEYWORD',             '<newline-keyword>'),  # Keywords starting a line (AND/OR/JOIN/etc.)
    ('PLAIN_KEYWORD',               '<keyword>'),        # All other reserved words
    ('CASE_KEYWORD',                '<case-keyword>'),   # CASE/WHEN/THEN/ELSE/END
    ('OPERATOR',                    '<operator>'),       # An operator
    ('IDENTIFIER',                  '<name>'),           # An unquoted identifier
    ('QUOTED_IDENTIFIER',           '<quoted-name>'),    # A quoted identifier
    ('STRING',                      '<string>'),         # A string literal
    ('NUMBER',                      '<number>'),         # A numeric literal
    ('LINE_COMMENT',                '<line-comment>'),   # A comment running to the end of the line
    ('BLOCK_COMMENT',               '<block-comment>'),  # A delimited (and possibly nested) comment
    ('PLACEHOLDER',                 '<placeholder>'),    # A positional, numbered or named parameter
    ('OPEN_PAREN',                  '<open-paren>'),     # An opening bracket
    ('CLOSE_PAREN',                 '<close-paren>'),    # A closing bracket
    ('COMMA',                       '<comma>'),          # A comma
    ('SEMICOLON',                   '<semicolon>'),      # A statement terminator
):
    TT.add(type, name)

# The set of token types which represent reserved words
KEYWORD_TYPES = frozenset((
    TT.TOP_LEVEL_KEYWORD,
    TT.TOP_LEVEL_KEYWORD_NO_INDENT,
    TT.NEWLINE_KEYWORD,
    TT.PLAIN_KEYWORD,
    TT.CASE_KEYWORD,
))


class Token(namedtuple('Token', (
    'type',
    'value',
    'key',
    'whitespace',
    'line',
    'column'
))):
    """Represents a single token extracted from SQL source.

    The type element is one of the TT constants defined above. The value is
    the exact text of the token in the source (case preserved), and
    whitespace is the text preceding the token which the tokenizer skipped
    over. Hence, for any list of tokens returned by the tokenizer:

        sql == ''.join(t.whitespace + t.value for t in tokens)

    The key element is only meaningful for PLACEHOLDER tokens: it is an int
    for numbered placeholders (?1), a str for named placeholders (:name), or
    None for anonymous ones (?). The line and column elements give the
    1-based position of the start of the token in the source.
    """

    __slots__ = ()

    @property
    def newline_before(self):
        "Returns True if a line break preceded the token in the source"
        return '\n' in self.whitespace or '\r' in self.whitespace

    @property
    def blank_line_before(self):
        "Returns True if a blank line preceded the token in the source"
        space = self.whitespace.replace('\r\n', '\n').replace('\r', '\n')
        return space.count('\n') > 1


# Numeric literals: optionally negative integers, decimals, exponents, hex and
# binary values, none of which may run into a following word character
NUMBER_RE = re.compile(
    r'(?:-\s*)?(?:0x[0-9a-fA-F]+|0b[01]+|[0-9]+(?:\.[0-9]+)?(?:[eE][-+]?[0-9]+)?)\b'
)

# Characters permitted in the name of an unquoted named placeholder
PLACEHOLDER_CHARS = 'ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789._$'

# Characters which may quote the name of a named placeholder
PLACEHOLDER_QUOTES = '"\'`'


class BaseTokenizer(object):
    """SQL tokenizer class.

    This tokenizer class is used to convert a string containing SQL source
    code into a list of "tokens". See the parse() method for more information
    on the structure of tokens. The dialect parameter is a Dialect instance
    (see sqltidy.dialects) describing the keywords, operators, quoting and
    comment conventions of the SQL to be tokenized.
    """

    def __init__(self, dialect):
        super(BaseTokenizer, self).__init__()
        self.dialect = dialect

    def parse(self, sql):
        """Parses the provided source into a list of Token tuples.

        This is the only public method of the tokenizer class, called to
        tokenize the provided source. The method returns a list of Token
        tuples (see the Token class for a description of their content). If
        the source ends with whitespace, the final token is a WHITESPACE
        token with an empty value which carries it.
        """
        self._states = []
        self._source = sql
        self._index = 0
        self._marked_index = -1
        self._line = 1
        self._line_start = 0
        self._token_start = 0
        self._token_line = self.line
        self._token_column = self.column
        self._whitespace = ''
        self._last_keyword = None
        self._tokens = []
        self._init_jump()
        while not self._eof:
            self._handle_space()
            if self._eof:
                break
            self._token_start = self._index
            self._token_line = self.line
            self._token_column = self.column
            for handler in self._jump.get(self._char, ()):
                if handler():
                    break
            else:
                if not self._handle_ident():
                    self._handle_operator()
        if self._whitespace:
            self._token_start = self._index
            self._token_line = self.line
            self._token_column = self.column
            self._add_token(TT.WHITESPACE)
        return self._tokens

    def _init_jump(self):
        """Initializes a dictionary of character handlers.

        Each character maps to a list of handlers which are tried in order
        until one of them returns True. Characters which have no handlers, or
        for which none of the handlers succeed, are tried as the start of a
        word and finally as an operator (which always succeeds).
        """
        self._jump = {}
        def register(chars, handler):
            for char in chars:
                self._jump.setdefault(char, []).append(handler)
        register(self.dialect.comment_starts, self._handle_comment)
        register(set(quote.open[0] for (quote, _) in self.dialect.quote_table), self._handle_quote)
        register(self.dialect.open_parens, self._handle_open_paren)
        register(self.dialect.close_parens, self._handle_close_paren)
        register(',', self._handle_comma)
        register(';', self._handle_semicolon)
        register(
            set(self.dialect.indexed_placeholders) | set(self.dialect.named_placeholders),
            self._handle_placeholder)
        register('-0123456789', self._handle_number)

    def _add_token(self, type, key=None):
        """Adds the current token to the output list.

        This utility method adds the token which ends at the current _index to
        the output list (_tokens). The start of the token, and its line and
        column in the input are tracked by the internal _token_start,
        _token_line, and _token_column attributes. The whitespace skipped
        before the token is attached to it and then reset.
        """
        token = Token(
            type,
            self._source[self._token_start:self._index],
            key,
            self._whitespace,
            self._token_line,
            self._token_column
        )
        self._tokens.append(token)
        self._whitespace = ''
        self._token_start = self._index
        self._token_line = self.line
        self._token_column = self.column

    def _save_state(self):
        """Saves the current state of the tokenizer on a stack for later retrieval."""
        self._states.append((
            self._index,
            self._line,
            self._line_start,
        ))

    def _restore_state(self):
        """Restores the state of the tokenizer from the head of the save stack."""
        (
            self._index,
            self._line,
            self._line_start,
        ) = self._states.pop()

    def _forget_state(self):
        """Destroys the saved state at the head of the save stack."""
        self._states.pop()

    def _next(self, count=1):
        """Moves the position of the tokenizer forward count positions.

        The _index variable should never be modified directly by handler
        methods. Instead, use the _next() method and the _char property. The
        _next() method keeps track of the current line and column positions
        (treating CR, CR/LF, or just LF as a single line break), while the
        _char property reports all line breaks as plain LF characters.
        """
        source = self._source
        while count > 0 and self._index < len(source):
            count -= 1
            if source[self._index] == '\r':
                if source.startswith('\n', self._index + 1):
                    self._index += 2
                else:
                    self._index += 1
                self._line += 1
                self._line_start = self._index
            elif source[self._index] == '\n':
                self._index += 1
                self._line += 1
                self._line_start = self._index
            else:
                self._index += 1

    def _skip_to(self, index):
        """Moves the position of the tokenizer forward to index."""
        while self._index < index:
            self._next()

    @property
    def _eof(self):
        """Returns True if the tokenizer has reached the end of the source."""
        return self._index >= len(self._source)

    @property
    def _char(self):
        """Returns the current character at the position of the tokenizer.

        Returns the character in _source at _index, but converts all line
        breaks to a single LF character. Beyond the end of the source a NUL
        character is returned.
        """
        try:
            if self._source[self._index] == '\r':
                return '\n'
            else:
                return self._source[self._index]
        except IndexError:
            return '\0'

    def _peek(self, count=1):
        """Returns the character count positions ahead of the tokenizer."""
        self._save_state()
        try:
            self._next(count)
            return self._char
        finally:
            self._restore_state()

    def _startswith(self, s):
        """Returns True if the source at the current position starts with s."""
        return self._source.startswith(s, self._index)

    def _mark(self):
        """Marks the current position in the source for later retrieval."""
        self._marked_index = self._index

    @property
    def _marked_chars(self):
        """Returns the characters from the marked position to the current."""
        assert self._marked_index >= 0
        return self._source[self._marked_index:self._index]

    @property
    def line(self):
        """Returns the current 1-based line position."""
        return self._line

    @property
    def column(self):
        """Returns the current 1-based column position."""
        return (self._index - self._line_start) + 1

    def _extract_quoted(self, quote):
        """Skips over the body and closing delimiter of a quoted token.

        The current position is assumed to be just beyond the opening
        delimiter. A doubled (single character) closing delimiter does not
        terminate the content, and if the quote rule permits escapes, neither
        does a closing delimiter preceded by a backslash. If the closing
        delimiter is never found, the content extends to the end of the
        source.
        """
        while not self._eof:
            if quote.escapes and self._char == '\\':
                self._next(2)
            elif self._startswith(quote.close):
                self._next(len(quote.close))
                if len(quote.close) == 1 and self._startswith(quote.close):
                    self._next()
                else:
                    return True
            else:
                self._next()
        return False

    def _read_word(self):
        """Reads a run of word characters and returns it."""
        self._mark()
        while not self._eof and self.dialect.is_word_char(self._char):
            self._next()
        return self._marked_chars

    def _match_phrase(self, words):
        """Attempts to match the remaining words of a keyword phrase.

        The words must each be separated from their predecessor by at least
        one whitespace character (any amount and mixture of whitespace is
        accepted). If the match fails, the position of the tokenizer is left
        unchanged.
        """
        if not words:
            return True
        self._save_state()
        for word in words:
            if not self._char.isspace():
                self._restore_state()
                return False
            while not self._eof and self._char.isspace():
                self._next()
            if self._read_word().upper() != word:
                self._restore_state()
                return False
        self._forget_state()
        return True

    def _handle_space(self):
        """Skips whitespace characters in the source.

        Whitespace is not returned as a token; instead it is accumulated and
        attached to the following token.
        """
        self._mark()
        while not self._eof and self._char.isspace():
            self._next()
        self._whitespace += self._marked_chars

    def _handle_comment(self):
        """Parses line and block comments in the source."""
        for marker in self.dialect.line_comments:
            if self._startswith(marker):
                while not self._eof and self._char != '\n':
                    self._next()
                self._add_token(TT.LINE_COMMENT)
                return True
        if self.dialect.block_comment:
            start, end = self.dialect.block_comment
            if self._startswith(start):
                self._next(len(start))
                depth = 1
                while not self._eof:
                    if self.dialect.nested_comments and self._startswith(start):
                        self._next(len(start))
                        depth += 1
                    elif self._startswith(end):
                        self._next(len(end))
                        depth -= 1
                        if not depth:
                            break
                    else:
                        self._next()
                self._add_token(TT.BLOCK_COMMENT)
                return True
        return False

    def _handle_quote(self):
        """Parses quoted strings and identifiers in the source."""
        for (quote, type) in self.dialect.quote_table:
            if self._startswith(quote.open):
                self._next(len(quote.open))
                self._extract_quoted(quote)
                self._add_token(type)
                return True
        return False

    def _handle_open_paren(self):
        """Parses opening bracket characters in the source."""
        self._next()
        self._add_token(TT.OPEN_PAREN)
        return True

    def _handle_close_paren(self):
        """Parses closing bracket characters in the source."""
        self._next()
        self._add_token(TT.CLOSE_PAREN)
        return True

    def _handle_comma(self):
        """Parses a comma character (",") in the source."""
        self._next()
        self._add_token(TT.COMMA)
        return True

    def _handle_semicolon(self):
        """Parses semi-colon characters (";") in the source."""
        self._next()
        self._add_token(TT.SEMICOLON)
        return True

    def _handle_placeholder(self):
        """Parses positional, numbered and named placeholders in the source.

        An indexed sentinel (e.g. "?") followed by optional digits forms a
        numbered placeholder, or an anonymous one if no digits follow. A named
        sentinel (e.g. ":") may be followed by a name or a quoted name. A bare
        sentinel is an anonymous placeholder, unless it starts an operator
        such as "::".
        """
        if self._char in self.dialect.indexed_placeholders:
            self._next()
            self._mark()
            while self._char in '0123456789':
                self._next()
            digits = self._marked_chars
            self._add_token(TT.PLACEHOLDER, int(digits) if digits else None)
            return True
        following = self._peek()
        if following in PLACEHOLDER_QUOTES:
            self._next(2)
            self._mark()
            while not self._eof and self._char != following:
                if self._char == '\\':
                    self._next()
                self._next()
            key = self._marked_chars.replace('\\' + following, following)
            self._next()
            self._add_token(TT.PLACEHOLDER, key)
            return True
        elif following != '\0' and following in PLACEHOLDER_CHARS:
            self._next()
            self._mark()
            while not self._eof and self._char in PLACEHOLDER_CHARS:
                self._next()
            self._add_token(TT.PLACEHOLDER, self._marked_chars)
            return True
        for op in self.dialect.operator_table.get(self._char, ()):
            if self._startswith(op):
                return False
        self._next()
        self._add_token(TT.PLACEHOLDER)
        return True

    def _handle_number(self):
        """Parses numeric literals in the source."""
        match = NUMBER_RE.match(self._source, self._index)
        if match:
            self._skip_to(match.end())
            self._add_token(TT.NUMBER)
            return True
        return False

    def _handle_ident(self):
        """Parses words (keywords and unquoted identifiers) in the source.

        A word is matched against the keyword phrases of the dialect; the
        longest matching phrase wins. A word immediately following a "."
        operator is always an identifier (e.g. the "from" in
        customer_id.from).
        """
        if not self.dialect.is_word_char(self._char):
            return False
        word = self._read_word().upper()
        if self._tokens and self._tokens[-1].type == TT.OPERATOR and self._tokens[-1].value == '.':
            self._add_token(TT.IDENTIFIER)
            return True
        for (words, type) in self.dialect.phrases.get(word, ()):
            if self._match_phrase(words[1:]):
                keyword = ' '.join(words)
                if self._last_keyword in self.dialect.demotions.get(keyword, ()):
                    type = TT.PLAIN_KEYWORD
                self._last_keyword = keyword
                self._add_token(type)
                return True
        self._add_token(TT.IDENTIFIER)
        return True

    def _handle_operator(self):
        """Parses operators, and any otherwise unrecognized characters."""
        for op in self.dialect.operator_table.get(self._char, ()):
            if self._startswith(op):
                self._next(len(op))
                break
        else:
            self._next()
        self._add_token(TT.OPERATOR)
        return True


def tokenize(sql, dialect):
    """Tokenizes sql according to dialect, returning a list of Token tuples."""
    return BaseTokenizer(dialect).parse(sql)


def dump(tokens, stream=None):
    """Utility routine for debugging purposes: prints the tokens in a human readable format."""
    if stream is None:
        stream = sys.stderr
    stream.write('\n'.join(dump_token(token) for token in tokens))
    stream.write('\n')


def dump_token(token):
    """Formats a token for the dump routine above."""
    if token.type == TT.PLACEHOLDER:
        return '%-16s %-20s %-10r (%d:%d)' % (
            TT.names[token.type], repr(token.value), token.key, token.line, token.column)
    else:
        return '%-16s %-20s (%d:%d)' % (
            TT.names[token.type], repr(token.value), token.line, token.column)
