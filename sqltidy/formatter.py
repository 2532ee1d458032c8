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

"""Implements a class for reflowing tokenized SQL.

This unit implements a class (Formatter) which lays out a list of tokens
produced by the tokenizer. The layout is purely lexical: top-level keywords
(SELECT, FROM, WHERE, ...) start new clauses with indented bodies, newline
keywords (AND, OR, joins) start new lines, commas break lists, and bracketed
blocks are either kept on a single line (if short enough) or broken over
several lines with their content indented.

The formatter does not produce text directly. Instead it produces a list of
output tokens including INDENT tokens (representing a line break followed by
indentation to a given level) and WHITESPACE tokens (representing a space
between two tokens). A series of generator passes then converts these into
the final text, in the same manner as a compiler's back end.
"""

import re
import logging

from sqltidy.tokenizer import TT, Token, KEYWORD_TYPES

__all__ = [
    'INLINE_MAX_LENGTH',
    'Indentation',
    'InlineBlock',
    'Formatter',
    'convert_indent',
    'merge_whitespace',
    'strip_whitespace',
]

logger = logging.getLogger(__name__)

# Add some custom token types used by the formatter
TT.add('INDENT', None)  # A line break and indentation to the level in value

# The longest bracketed block (as rendered) which will be kept on one line
INLINE_MAX_LENGTH = 50

# Token types which prevent the source whitespace before an opening bracket
# from being removed
PRESERVE_SPACE_TYPES = frozenset((
    TT.OPEN_PAREN,
    TT.OPERATOR,
    TT.COMMA,
    TT.LINE_COMMENT,
))

# Token types which force a bracketed block to be broken over several lines
FORCE_BREAK_TYPES = frozenset((
    TT.TOP_LEVEL_KEYWORD,
    TT.TOP_LEVEL_KEYWORD_NO_INDENT,
    TT.NEWLINE_KEYWORD,
    TT.LINE_COMMENT,
    TT.BLOCK_COMMENT,
    TT.SEMICOLON,
))

space_re = re.compile(r'\s+')


def _show_length(token):
    if token.type in KEYWORD_TYPES:
        return len(space_re.sub(' ', token.value))
    else:
        return len(token.value)


def _is_case(token, value):
    return token.type == TT.CASE_KEYWORD and token.value.upper() == value


def _opens(token):
    return token.type == TT.OPEN_PAREN or _is_case(token, 'CASE')


def _closes(token):
    return token.type == TT.CLOSE_PAREN or _is_case(token, 'END')


def _look_behind(tokens, index, count=1):
    """Returns the count'th significant token before index, or None."""
    while index > 0:
        index -= 1
        if tokens[index].type != TT.WHITESPACE:
            count -= 1
            if not count:
                return tokens[index]
    return None


def _between_and(tokens, index):
    """Returns True if the AND at index belongs to a BETWEEN predicate."""
    before = _look_behind(tokens, index, 2)
    return (
        tokens[index].value.upper() == 'AND'
        and before is not None
        and before.type in KEYWORD_TYPES
        and before.value.upper() == 'BETWEEN'
    )


def _hugs_left(tokens, index):
    """Returns True if the token at index is printed without a preceding space."""
    token = tokens[index]
    if token.type in (TT.COMMA, TT.CLOSE_PAREN, TT.SEMICOLON):
        return True
    elif token.type == TT.OPERATOR and token.value in ('.', ':'):
        return True
    elif token.type == TT.OPEN_PAREN and not token.whitespace:
        previous = _look_behind(tokens, index)
        return previous is not None and previous.type not in PRESERVE_SPACE_TYPES
    return False


class Indentation(object):
    """Tracks the indentation of the output.

    Indentation is a stack of scopes, each of which is either a top-level
    scope (opened by a clause keyword like SELECT) or a block scope (opened
    by a bracket or CASE). The indentation level is simply the depth of the
    stack.
    """

    TOP_LEVEL = 'top-level'
    BLOCK_LEVEL = 'block-level'

    def __init__(self):
        super(Indentation, self).__init__()
        self._types = []

    @property
    def level(self):
        return len(self._types)

    def increase_top_level(self):
        self._types.append(self.TOP_LEVEL)

    def increase_block_level(self):
        self._types.append(self.BLOCK_LEVEL)

    def decrease_top_level(self):
        """Removes the innermost scope if it is a top-level scope."""
        if self._types and self._types[-1] == self.TOP_LEVEL:
            self._types.pop()

    def decrease_block_level(self):
        """Removes scopes up to and including the innermost block scope.

        If there is no block scope in the stack (unbalanced brackets), the
        stack is emptied.
        """
        while self._types:
            if self._types.pop() == self.BLOCK_LEVEL:
                break

    def reset(self):
        self._types = []


class InlineBlock(object):
    """Tracks bracketed blocks which are being printed on a single line.

    When a block is opened, begin_if_possible() scans forward through the
    tokens to determine whether the entire block will fit within max_length
    characters and contains nothing which must start a new line (clause or
    newline keywords, WHEN or ELSE, comments, statement terminators). Blocks
    nested within an inline block are always inline too.
    """

    def __init__(self, max_length=INLINE_MAX_LENGTH, inline_between_and=False):
        super(InlineBlock, self).__init__()
        self.max_length = max_length
        self.inline_between_and = inline_between_and
        self.level = 0

    @property
    def active(self):
        return self.level > 0

    def begin_if_possible(self, tokens, index):
        if self.level == 0 and self.is_inline_block(tokens, index):
            self.level = 1
        elif self.level > 0:
            self.level += 1
        else:
            self.level = 0

    def end(self):
        self.level -= 1

    def is_inline_block(self, tokens, index):
        """Returns True if the block opening at index fits on a single line."""
        length = 0
        depth = 0
        spaced = False
        for i in range(index, len(tokens)):
            token = tokens[i]
            if token.type == TT.WHITESPACE:
                continue
            if self._is_forbidden(tokens, i):
                return False
            if spaced and not _hugs_left(tokens, i):
                length += 1
            length += _show_length(token)
            if length > self.max_length:
                return False
            spaced = not (token.type == TT.OPEN_PAREN or token.value == '.')
            if _opens(token):
                depth += 1
            elif _closes(token):
                depth -= 1
                if not depth:
                    return True
        return False

    def _is_forbidden(self, tokens, index):
        token = tokens[index]
        if token.type in FORCE_BREAK_TYPES:
            return not (
                self.inline_between_and
                and token.type == TT.NEWLINE_KEYWORD
                and _between_and(tokens, index))
        return _is_case(token, 'WHEN') or _is_case(token, 'ELSE')


class Formatter(object):
    """Lays out a list of tokens as formatted SQL text.

    The constructor accepts the following parameters:

    indent          The string used for each level of indentation
    uppercase       If True, keywords are converted to uppercase
    lines_between_queries
                    The number of line breaks following each statement
                    terminator (at least one line break is always output)
    inline_between_and
                    If True, the AND of a BETWEEN predicate does not start a
                    new line
    """

    def __init__(self, indent='  ', uppercase=False, lines_between_queries=0,
            inline_between_and=False):
        super(Formatter, self).__init__()
        self.indent = indent
        self.uppercase = uppercase
        self.lines_between_queries = lines_between_queries
        self.inline_between_and = inline_between_and
        self._handlers = {
            TT.WHITESPACE:                  self._format_whitespace,
            TT.LINE_COMMENT:                self._format_line_comment,
            TT.BLOCK_COMMENT:               self._format_block_comment,
            TT.TOP_LEVEL_KEYWORD:           self._format_top_level_keyword,
            TT.TOP_LEVEL_KEYWORD_NO_INDENT: self._format_top_level_keyword_no_indent,
            TT.NEWLINE_KEYWORD:             self._format_newline_keyword,
            TT.PLAIN_KEYWORD:               self._format_keyword,
            TT.CASE_KEYWORD:                self._format_case_keyword,
            TT.OPEN_PAREN:                  self._format_open_paren,
            TT.CLOSE_PAREN:                 self._format_close_paren,
            TT.COMMA:                       self._format_comma,
            TT.SEMICOLON:                   self._format_semicolon,
            TT.OPERATOR:                    self._format_operator,
        }

    def format(self, tokens, dialect=None):
        """Returns the formatted text of the specified tokens.

        The optional dialect parameter supplies the single-line clauses
        (keywords like LIMIT whose comma separated content is never broken
        over several lines). The result always ends with a single line break.
        """
        self._tokens = tokens
        self._output = []
        self._indentation = Indentation()
        self._inline = InlineBlock(inline_between_and=self.inline_between_and)
        self._last_keyword = None
        self._saved_keywords = []
        if dialect is None:
            self._single_line_clauses = frozenset(('LIMIT',))
        else:
            self._single_line_clauses = dialect.single_line_clauses
        for self._index, token in enumerate(tokens):
            self._handlers.get(token.type, self._format_default)(token)
        output = self._output
        output = convert_indent(output, self.indent)
        output = merge_whitespace(output)
        output = strip_whitespace(output)
        result = ''.join(token.value for token in output).strip()
        logger.debug('Formatted %d tokens into %d lines', len(tokens), result.count('\n') + 1)
        return result + '\n'

    def show(self, token):
        """Returns the text of token as it should appear in the output."""
        if token.type in KEYWORD_TYPES:
            value = space_re.sub(' ', token.value)
            if self.uppercase:
                value = value.upper()
            return value
        return token.value

    def _add(self, token, value=None):
        """Appends token (with its text optionally replaced) to the output."""
        if value is None:
            value = self.show(token)
        self._output.append(Token(token.type, value, None, '', 0, 0))

    def _space(self):
        """Appends a single space to the output."""
        self._output.append(Token(TT.WHITESPACE, ' ', None, '', 0, 0))

    def _trim(self):
        """Removes trailing spaces from the output."""
        while self._output and self._output[-1].type == TT.WHITESPACE:
            self._output.pop()

    def _newline(self, allowempty=False):
        """Adds an INDENT token to the output.

        The _newline() method is called to start a new line in the output at
        the current indentation level. Later, the INDENT tokens are converted
        into a line break followed by the indentation string repeated
        according to the level. Unless allowempty is True, an INDENT token
        at the end of the output is replaced rather than duplicated (in other
        words, this parameter allows or disallows the insertion of empty
        lines). Line breaks are never added to an empty output.
        """
        self._trim()
        token = Token(TT.INDENT, self._indentation.level, None, '', 0, 0)
        if not self._output:
            return
        elif not allowempty and self._output[-1].type == TT.INDENT:
            self._output[-1] = token
        else:
            self._output.append(token)

    def _blank_line(self):
        """Starts a new line, preceded by a blank line."""
        self._newline()
        if len(self._output) > 1 and self._output[-2].type != TT.INDENT:
            self._output.insert(-1, Token(TT.INDENT, 0, None, '', 0, 0))

    def _format_whitespace(self, token):
        # Whitespace at the end of the source is ignored
        pass

    def _format_default(self, token):
        self._add(token)
        self._space()

    def _format_keyword(self, token):
        self._last_keyword = self.show(token).upper()
        self._add(token)
        self._space()

    def _format_operator(self, token):
        if token.value == '.':
            self._trim()
            self._add(token)
        elif token.value == ':':
            self._trim()
            self._add(token)
            self._space()
        else:
            self._add(token)
            self._space()

    def _format_line_comment(self, token):
        if token.blank_line_before:
            self._blank_line()
        elif token.newline_before:
            self._newline()
        self._add(token, token.value.rstrip())
        self._newline()

    def _format_block_comment(self, token):
        if token.blank_line_before:
            self._blank_line()
        else:
            self._newline()
        self._add(token, self._indent_comment(token))
        self._newline()

    def _indent_comment(self, token):
        """Re-indents the lines of a block comment.

        The first line of the comment is placed at the current indentation
        level; subsequent lines retain their indentation relative to the
        column at which the comment started in the source.
        """
        indent = self.indent * self._indentation.level
        lines = token.value.replace('\r\n', '\n').replace('\r', '\n').split('\n')
        result = [lines[0].rstrip()]
        for line in lines[1:]:
            content = line.lstrip(' \t')
            if content:
                offset = max(0, len(line) - len(content) - (token.column - 1))
                result.append(indent + ' ' * offset + content.rstrip())
            else:
                result.append('')
        return '\n'.join(result)

    def _format_top_level_keyword(self, token):
        self._last_keyword = self.show(token).upper()
        self._indentation.decrease_top_level()
        self._newline()
        self._indentation.increase_top_level()
        self._add(token)
        self._newline()

    def _format_top_level_keyword_no_indent(self, token):
        self._last_keyword = self.show(token).upper()
        self._indentation.decrease_top_level()
        self._newline()
        self._add(token)
        self._newline()

    def _format_newline_keyword(self, token):
        self._last_keyword = self.show(token).upper()
        if self.inline_between_and and _between_and(self._tokens, self._index):
            self._add(token)
            self._space()
        else:
            self._newline()
            self._add(token)
            self._space()

    def _format_case_keyword(self, token):
        keyword = token.value.upper()
        if keyword == 'CASE':
            self._saved_keywords.append(self._last_keyword)
            self._add(token)
            self._inline.begin_if_possible(self._tokens, self._index)
            if self._inline.active:
                self._space()
            else:
                self._indentation.increase_block_level()
                self._newline()
        elif keyword == 'END':
            self._format_close(token)
        elif keyword in ('WHEN', 'ELSE'):
            self._newline()
            self._add(token)
            self._space()
        else:
            self._add(token)
            self._space()

    def _format_open_paren(self, token):
        if _hugs_left(self._tokens, self._index):
            self._trim()
        self._saved_keywords.append(self._last_keyword)
        self._add(token)
        self._inline.begin_if_possible(self._tokens, self._index)
        if not self._inline.active:
            self._indentation.increase_block_level()
            self._newline()

    def _format_close_paren(self, token):
        if self._inline.active:
            self._trim()
        self._format_close(token)

    def _format_close(self, token):
        # The clause enclosing the scope applies again after it closes
        if self._saved_keywords:
            self._last_keyword = self._saved_keywords.pop()
        if self._inline.active:
            self._inline.end()
        else:
            self._indentation.decrease_block_level()
            self._newline()
        self._add(token)
        self._space()

    def _format_comma(self, token):
        self._trim()
        self._add(token)
        self._space()
        if not self._inline.active and self._last_keyword not in self._single_line_clauses:
            self._newline()

    def _format_semicolon(self, token):
        self._indentation.reset()
        del self._saved_keywords[:]
        self._trim()
        self._add(token)
        for i in range(max(1, self.lines_between_queries)):
            self._newline(allowempty=True)


def convert_indent(tokens, indent='  '):
    """Converts INDENT tokens into WHITESPACE.

    This generator function converts INDENT tokens into WHITESPACE tokens
    containing a line break followed by the characters specified by the
    indent parameter repeated according to the level of the INDENT token.
    """
    for token in tokens:
        if token.type == TT.INDENT:
            yield Token(TT.WHITESPACE, '\n' + indent * token.value, None, '', 0, 0)
        else:
            yield token


def merge_whitespace(tokens):
    """Merges consecutive WHITESPACE tokens.

    This generator function merges consecutive WHITESPACE tokens which can
    result from several line breaks following one another. It also ditches
    WHITESPACE tokens with no content.
    """
    space = ''
    for token in tokens:
        if token.type == TT.WHITESPACE:
            space += token.value
        else:
            if space:
                yield Token(TT.WHITESPACE, space, None, '', 0, 0)
                space = ''
            yield token
    if space:
        yield Token(TT.WHITESPACE, space, None, '', 0, 0)


def strip_whitespace(tokens):
    """Strips trailing whitespace from all lines of output.

    This generator function removes the spaces preceding any line break in
    WHITESPACE tokens (including the content of blank lines). The function
    assumes that WHITESPACE tokens have been merged (two will not appear
    consecutively).
    """
    for token in tokens:
        if token.type == TT.WHITESPACE and '\n' in token.value:
            (_, indent) = token.value.rsplit('\n', 1)
            yield Token(TT.WHITESPACE, '\n' * token.value.count('\n') + indent, None, '', 0, 0)
        else:
            yield token
