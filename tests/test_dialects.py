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


from textwrap import dedent

import pytest

import sqltidy
from sqltidy.dialects import (
    Dialect, ConfigurationError, Quote, get_dialect, dialect_names,
)
from sqltidy.tokenizer import TT


def types(sql, language):
    return [(TT.names[t.type], t.value) for t in sqltidy.tokenize(sql, language)]

def test_dialect_names():
    assert dialect_names() == ['db2', 'n1ql', 'pl/sql', 'sql']

@pytest.mark.parametrize('name, canonical', [
    ('sql', 'sql'),
    ('standard', 'sql'),
    ('ANSI', 'sql'),
    ('pl/sql', 'pl/sql'),
    (' PLSQL ', 'pl/sql'),
    ('oracle', 'pl/sql'),
    ('DB2', 'db2'),
    ('n1ql', 'n1ql'),
])
def test_aliases(name, canonical):
    assert get_dialect(name).name == canonical

def test_unknown_dialect():
    with pytest.raises(ConfigurationError) as exc:
        get_dialect('cobol')
    assert 'cobol' in str(exc.value)
    with pytest.raises(ConfigurationError):
        get_dialect(None)

def test_dialect_instance():
    dialect = get_dialect('sql')
    assert get_dialect(dialect) is dialect

def test_custom_dialect():
    dialect = Dialect(
        'custom',
        top_level_keywords=['FIND'],
        newline_keywords=['ALSO'],
        strings=(Quote('$$', '$$', False),),
        line_comments=('//',),
    )
    assert sqltidy.format('find a also b // note\n$$x$$', language=dialect) == dedent("""\
        find
          a
          also b // note
          $$x$$
        """)

def test_phrase_precedence():
    dialect = Dialect('custom', top_level_keywords=['GROUP BY'], plain_keywords=['GROUP', 'BY'])
    assert [w for (w, t) in dialect.phrases['GROUP']] == [('GROUP', 'BY'), ('GROUP',)]
    dialect = Dialect('custom', newline_keywords=['AND'], plain_keywords=['AND'])
    assert dialect.phrases['AND'] == [(('AND',), TT.NEWLINE_KEYWORD)]

def test_operator_table_longest_first():
    dialect = get_dialect('sql')
    ops = dialect.operator_table['!']
    assert ops == sorted(ops, key=len, reverse=True)

def test_db2_nested_comments():
    assert types('/* a /* b */ c */ SELECT', 'db2') == [
        ('<block-comment>', '/* a /* b */ c */'),
        ('<top-keyword>', 'SELECT'),
    ]
    assert types('/* a /* b */ c', 'sql') == [
        ('<block-comment>', '/* a /* b */'),
        ('<name>', 'c'),
    ]

def test_db2_strings():
    assert types("X'0F' gx'00AB' U&'x' 'a\\'", 'db2') == [
        ('<string>', "X'0F'"),
        ('<string>', "gx'00AB'"),
        ('<string>', "U&'x'"),
        ('<string>', "'a\\'"),
    ]

def test_db2_identifiers():
    assert types('"My Table" SYSIBM.SYSDUMMY1 $col#@', 'db2') == [
        ('<quoted-name>', '"My Table"'),
        ('<keyword>', 'SYSIBM'),
        ('<operator>', '.'),
        ('<name>', 'SYSDUMMY1'),
        ('<name>', '$col#@'),
    ]

def test_db2_operators():
    assert [v for (t, v) in types('a ^= b ¬= c => d', 'db2')] == [
        'a', '^=', 'b', '¬=', 'c', '=>', 'd',
    ]

def test_db2_format():
    assert sqltidy.format('select * from sysibm.sysdummy1 fetch first 1 rows only', language='db2') == dedent("""\
        select
          *
        from
          sysibm.sysdummy1
        fetch first
          1 rows only
        """)

def test_n1ql_brackets():
    assert sqltidy.format('SELECT [1, 2, 3] AS a, {"b": 1} AS c', language='n1ql') == dedent("""\
        SELECT
          [1, 2, 3] AS a,
          {"b": 1} AS c
        """)

def test_n1ql_strings_and_identifiers():
    assert types('"str" `name`', 'n1ql') == [
        ('<string>', '"str"'),
        ('<quoted-name>', '`name`'),
    ]

def test_n1ql_placeholders():
    tokens = [t for t in sqltidy.tokenize('$1 $name ?', 'n1ql') if t.type == TT.PLACEHOLDER]
    assert [(t.value, t.key) for t in tokens] == [('$1', '1'), ('$name', 'name')]
    assert sqltidy.format('SELECT $1, $name', language='n1ql',
        params={1: 'x', 'name': 'y'}) == 'SELECT\n  x,\n  y\n'

def test_n1ql_keywords():
    assert sqltidy.format('SELECT a FROM b USE KEYS "k" UNNEST c', language='n1ql') == dedent("""\
        SELECT
          a
        FROM
          b
        USE KEYS
          "k"
        UNNEST
          c
        """)
