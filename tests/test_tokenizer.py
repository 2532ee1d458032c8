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


import io

from sqltidy import tokenize
from sqltidy.tokenizer import TT, dump


def types(sql, language='sql'):
    return [
        (TT.names[token.type], token.value)
        for token in tokenize(sql, language)
    ]

def test_source_reconstruction():
    sql = "SELECT a,\n  b -- comment\nFROM t /* x */ WHERE c = 'it''s'  \n"
    tokens = tokenize(sql)
    assert ''.join(t.whitespace + t.value for t in tokens) == sql
    assert tokens[-1].type == TT.WHITESPACE
    assert tokens[-1].value == ''

def test_keyword_categories():
    assert types('select a from b where c and d') == [
        ('<top-keyword>', 'select'),
        ('<name>', 'a'),
        ('<top-keyword>', 'from'),
        ('<name>', 'b'),
        ('<top-keyword>', 'where'),
        ('<name>', 'c'),
        ('<newline-keyword>', 'and'),
        ('<name>', 'd'),
    ]

def test_multi_word_keywords():
    assert types('ORDER \t BY x UNION ALL y') == [
        ('<top-keyword>', 'ORDER \t BY'),
        ('<name>', 'x'),
        ('<top-noindent>', 'UNION ALL'),
        ('<name>', 'y'),
    ]
    # The words of a phrase must be separated by whitespace
    assert types('ORDER(BY)')[0] == ('<keyword>', 'ORDER')

def test_case_keywords():
    assert [t for (t, v) in types('case when a then b else c end')] == [
        '<case-keyword>', '<case-keyword>', '<name>', '<case-keyword>',
        '<name>', '<case-keyword>', '<name>', '<case-keyword>',
    ]

def test_identifier_after_dot():
    assert types('a.from') == [
        ('<name>', 'a'),
        ('<operator>', '.'),
        ('<name>', 'from'),
    ]

def test_strings_and_identifiers():
    assert types("'it''s' \"a \\\" b\" `c` [d]") == [
        ('<string>', "'it''s'"),
        ('<quoted-name>', '"a \\" b"'),
        ('<quoted-name>', '`c`'),
        ('<quoted-name>', '[d]'),
    ]
    assert types("N'value'") == [('<string>', "N'value'")]

def test_unterminated_string():
    assert types("SELECT 'abc") == [
        ('<top-keyword>', 'SELECT'),
        ('<string>', "'abc"),
    ]

def test_numbers():
    assert types('1 -2 3.5 1e-9 3.5E12 0x1F 0b101') == [
        ('<number>', '1'),
        ('<number>', '-2'),
        ('<number>', '3.5'),
        ('<number>', '1e-9'),
        ('<number>', '3.5E12'),
        ('<number>', '0x1F'),
        ('<number>', '0b101'),
    ]
    assert types('v->2') == [
        ('<name>', 'v'),
        ('<operator>', '->'),
        ('<number>', '2'),
    ]

def test_operators():
    assert [v for (t, v) in types('a != b <> c ||/ d ~~* e !~~* f :: g')] == [
        'a', '!=', 'b', '<>', 'c', '||/', 'd', '~~*', 'e', '!~~*', 'f', '::', 'g',
    ]
    assert types('%') == [('<operator>', '%')]

def test_comments():
    assert types('a -- one\n# two\n/* three\n four */ b') == [
        ('<name>', 'a'),
        ('<line-comment>', '-- one'),
        ('<line-comment>', '# two'),
        ('<block-comment>', '/* three\n four */'),
        ('<name>', 'b'),
    ]

def test_unterminated_comment():
    assert types('a /* open') == [
        ('<name>', 'a'),
        ('<block-comment>', '/* open'),
    ]

def test_punctuation():
    assert types('f(a, b);') == [
        ('<name>', 'f'),
        ('<open-paren>', '('),
        ('<name>', 'a'),
        ('<comma>', ','),
        ('<name>', 'b'),
        ('<close-paren>', ')'),
        ('<semicolon>', ';'),
    ]

def test_placeholders():
    tokens = [t for t in tokenize('? ?12 :name @"quoted \\" name" @`x`') if t.type == TT.PLACEHOLDER]
    assert [(t.value, t.key) for t in tokens] == [
        ('?', None),
        ('?12', 12),
        (':name', 'name'),
        ('@"quoted \\" name"', 'quoted " name'),
        ('@`x`', 'x'),
    ]

def test_bare_placeholder_sentinel():
    tokens = tokenize('SELECT @ FROM t')
    assert [(TT.names[t.type], t.value, t.key) for t in tokens] == [
        ('<top-keyword>', 'SELECT', None),
        ('<placeholder>', '@', None),
        ('<top-keyword>', 'FROM', None),
        ('<name>', 't', None),
    ]
    assert types(': foo') == [
        ('<placeholder>', ':'),
        ('<name>', 'foo'),
    ]
    assert types('$', 'n1ql') == [('<placeholder>', '$')]

def test_operator_beats_bare_sentinel():
    assert types('a::int') == [
        ('<name>', 'a'),
        ('<operator>', '::'),
        ('<name>', 'int'),
    ]
    assert [v for (t, v) in types('x := 1', 'pl/sql')] == ['x', ':=', '1']

def test_positions():
    tokens = tokenize('SELECT\r\n  a,\n b')
    assert [(t.value, t.line, t.column) for t in tokens] == [
        ('SELECT', 1, 1),
        ('a', 2, 3),
        (',', 2, 4),
        ('b', 3, 2),
    ]
    assert tokens[1].newline_before
    assert not tokens[2].newline_before

def test_blank_line_before():
    tokens = tokenize('a\n\n  b\nc')
    assert tokens[1].blank_line_before
    assert not tokens[2].blank_line_before

def test_unicode_identifiers():
    assert types('SELECT тест') == [
        ('<top-keyword>', 'SELECT'),
        ('<name>', 'тест'),
    ]

def test_dump():
    stream = io.StringIO()
    dump(tokenize('SELECT ?1'), stream)
    lines = stream.getvalue().splitlines()
    assert len(lines) == 2
    assert lines[0].startswith('<top-keyword>')
    assert lines[0].endswith('(1:1)')
    assert lines[1].startswith('<placeholder>')
    assert '1' in lines[1].split()
