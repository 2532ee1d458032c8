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

import sqltidy
from sqltidy.tokenizer import TT


def check(sql, expected, **options):
    assert sqltidy.format(sql, language='pl/sql', **options) == dedent(expected)


def test_fetch_first():
    check('SELECT col1 FROM tbl ORDER BY col2 DESC FETCH FIRST 20 ROWS ONLY;', """\
        SELECT
          col1
        FROM
          tbl
        ORDER BY
          col2 DESC
        FETCH FIRST
          20 ROWS ONLY;
        """)

def test_only_dashes_start_line_comments():
    check('SELECT col FROM\n-- This is a comment\nMyTable;\n', """\
        SELECT
          col
        FROM
          -- This is a comment
          MyTable;
        """)
    tokens = sqltidy.tokenize('a # b', 'pl/sql')
    assert [t.type for t in tokens] == [TT.IDENTIFIER, TT.IDENTIFIER, TT.IDENTIFIER]

def test_special_identifier_chars():
    check('SELECT my_col$1#, col.2@ FROM tbl\n', """\
        SELECT
          my_col$1#,
          col.2@
        FROM
          tbl
        """)

def test_short_create_table():
    check('CREATE TABLE items (a INT PRIMARY KEY, b TEXT);',
        'CREATE TABLE items (a INT PRIMARY KEY, b TEXT);\n')

def test_long_create_table():
    check('CREATE TABLE items (a INT PRIMARY KEY, b TEXT, c INT NOT NULL, d INT NOT NULL);', """\
        CREATE TABLE items (
          a INT PRIMARY KEY,
          b TEXT,
          c INT NOT NULL,
          d INT NOT NULL
        );
        """)

def test_insert_without_into():
    check("INSERT Customers (ID, MoneyBalance, Address, City) "
        "VALUES (12,-123.4, 'Skagen 2111','Stv');", """\
        INSERT
          Customers (ID, MoneyBalance, Address, City)
        VALUES
          (12, -123.4, 'Skagen 2111', 'Stv');
        """)

def test_alter_table_modify():
    check('ALTER TABLE supplier MODIFY supplier_name char(100) NOT NULL;', """\
        ALTER TABLE
          supplier
        MODIFY
          supplier_name char(100) NOT NULL;
        """)

def test_alter_table_alter_column():
    check('ALTER TABLE supplier ALTER COLUMN supplier_name VARCHAR(100) NOT NULL;', """\
        ALTER TABLE
          supplier
        ALTER COLUMN
          supplier_name VARCHAR(100) NOT NULL;
        """)

def test_numbered_placeholders():
    check('SELECT ?1, ?25, ?;', """\
        SELECT
          ?1,
          ?25,
          ?;
        """)

def test_numbered_placeholder_values():
    check('SELECT ?1, ?2, ?0;', """\
        SELECT
          second,
          third,
          first;
        """, params={0: 'first', 1: 'second', 2: 'third'})

def test_indexed_placeholder_values():
    check('SELECT ?, ?, ?;', """\
        SELECT
          first,
          second,
          third;
        """, params=['first', 'second', 'third'])

def test_named_placeholder_values():
    check('SELECT :a, :"b c", :missing;', """\
        SELECT
          1,
          2,
          :missing;
        """, params={'a': 1, 'b c': 2})

def test_cross_join():
    check('SELECT a, b FROM t CROSS JOIN t2 on t.id = t2.id_t', """\
        SELECT
          a,
          b
        FROM
          t
          CROSS JOIN t2 on t.id = t2.id_t
        """)

def test_apply():
    check('SELECT a, b FROM t CROSS APPLY fn(t.id)', """\
        SELECT
          a,
          b
        FROM
          t
          CROSS APPLY fn(t.id)
        """)
    check('SELECT a, b FROM t OUTER APPLY fn(t.id)', """\
        SELECT
          a,
          b
        FROM
          t
          OUTER APPLY fn(t.id)
        """)

def test_national_strings():
    check('SELECT N, M FROM t', """\
        SELECT
          N,
          M
        FROM
          t
        """)
    check("SELECT N'value'", """\
        SELECT
          N'value'
        """)

def test_case_without_expression():
    check("CASE WHEN option = 'foo' THEN 1 WHEN option = 'bar' THEN 2 "
        "WHEN option = 'baz' THEN 3 ELSE 4 END;", """\
        CASE
          WHEN option = 'foo' THEN 1
          WHEN option = 'bar' THEN 2
          WHEN option = 'baz' THEN 3
          ELSE 4
        END;
        """)

def test_case_in_select():
    check("SELECT foo, bar, CASE baz WHEN 'one' THEN 1 WHEN 'two' THEN 2 ELSE 3 END FROM table", """\
        SELECT
          foo,
          bar,
          CASE
            baz
            WHEN 'one' THEN 1
            WHEN 'two' THEN 2
            ELSE 3
          END
        FROM
          table
        """)

def test_case_with_expression():
    check("CASE toString(getNumber()) WHEN 'one' THEN 1 WHEN 'two' THEN 2 "
        "WHEN 'three' THEN 3 ELSE 4 END;", """\
        CASE
          toString(getNumber())
          WHEN 'one' THEN 1
          WHEN 'two' THEN 2
          WHEN 'three' THEN 3
          ELSE 4
        END;
        """)

def test_case_uppercase():
    check("case toString(getNumber()) when 'one' then 1 when 'two' then 2 "
        "when 'three' then 3 else 4 end;", """\
        CASE
          toString(getNumber())
          WHEN 'one' THEN 1
          WHEN 'two' THEN 2
          WHEN 'three' THEN 3
          ELSE 4
        END;
        """, uppercase=True)

RECURSIVE_QUERY = """
    WITH t1(id, parent_id) AS (
      -- Anchor member.
      SELECT
        id,
        parent_id
      FROM
        tab1
      WHERE
        parent_id IS NULL
      MINUS
        -- Recursive member.
      SELECT
        t2.id,
        t2.parent_id
      FROM
        tab1 t2,
        t1
      WHERE
        t2.parent_id = t1.id
    ) SEARCH BREADTH FIRST %s id %s order1,
    another AS (SELECT * FROM dual)
    SELECT id, parent_id FROM t1 ORDER BY order1;
    """

RECURSIVE_RESULT = """\
    WITH t1(id, parent_id) AS (
      -- Anchor member.
      SELECT
        id,
        parent_id
      FROM
        tab1
      WHERE
        parent_id IS NULL
      MINUS
      -- Recursive member.
      SELECT
        t2.id,
        t2.parent_id
      FROM
        tab1 t2,
        t1
      WHERE
        t2.parent_id = t1.id
    ) SEARCH BREADTH FIRST %s id %s order1,
    another AS (
      SELECT
        *
      FROM
        dual
    )
    SELECT
      id,
      parent_id
    FROM
      t1
    ORDER BY
      order1;
    """

def test_recursive_subquery():
    check(RECURSIVE_QUERY % ('BY', 'SET'), RECURSIVE_RESULT % ('BY', 'SET'))

def test_recursive_subquery_lowercase():
    check(RECURSIVE_QUERY % ('by', 'set'), RECURSIVE_RESULT % ('by', 'set'))

def test_set_after_by_is_demoted():
    tokens = sqltidy.tokenize('SEARCH DEPTH FIRST BY x SET y', 'pl/sql')
    assert tokens[-2].value == 'SET'
    assert tokens[-2].type == TT.PLAIN_KEYWORD
    tokens = sqltidy.tokenize('UPDATE x SET y = 1', 'pl/sql')
    assert tokens[2].type == TT.TOP_LEVEL_KEYWORD

def test_hierarchical_query():
    check('SELECT id FROM t START WITH parent IS NULL CONNECT BY PRIOR id = parent', """\
        SELECT
          id
        FROM
          t
        START WITH
          parent IS NULL
        CONNECT BY
          PRIOR id = parent
        """)

def test_assignment_operator():
    assert [t.value for t in sqltidy.tokenize('x := 2 ** 3', 'pl/sql')] == [
        'x', ':=', '2', '**', '3',
    ]
