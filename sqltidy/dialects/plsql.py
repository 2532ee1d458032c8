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

"""Defines the Oracle PL/SQL dialect."""

from sqltidy.dialects import (
    Dialect, APOS, NATIONAL, QUOTE, BACKTICK, BASE_OPERATORS,
)
from sqltidy.dialects.standard import (
    top_level_keywords, top_level_keywords_no_indent, newline_keywords,
)

__all__ = ['plsql_keywords', 'dialect']

# Set of reserved words in Oracle SQL and PL/SQL. Obtained from the
# V$RESERVED_WORDS view and the PL/SQL language reference

plsql_keywords = [
    'ACCESS', 'ADD', 'ALL', 'ALTER', 'AND', 'ANY', 'ARRAY', 'AS', 'ASC',
    'AT', 'AUDIT', 'AUTHID', 'AVG', 'BEGIN', 'BETWEEN', 'BINARY_INTEGER',
    'BODY', 'BOOLEAN', 'BULK', 'BY', 'CHAR', 'CHAR_BASE', 'CHECK', 'CLOSE',
    'CLUSTER', 'COLLECT', 'COLUMN', 'COMMENT', 'COMMIT', 'COMPRESS',
    'CONNECT', 'CONSTANT', 'CREATE', 'CURRENT', 'CURRVAL', 'CURSOR', 'DATE',
    'DAY', 'DECIMAL', 'DECLARE', 'DEFAULT', 'DELETE', 'DESC', 'DISTINCT',
    'DO', 'DROP', 'ELSE', 'ELSIF', 'EXCEPTION', 'EXCLUSIVE', 'EXECUTE',
    'EXISTS', 'EXIT', 'EXTENDS', 'EXTRACT', 'FALSE', 'FETCH', 'FILE', 'FLOAT',
    'FOR', 'FORALL', 'FROM', 'FUNCTION', 'GOTO', 'GRANT', 'GROUP', 'HAVING',
    'HEAP', 'HOUR', 'IDENTIFIED', 'IF', 'IMMEDIATE', 'IN', 'INCREMENT',
    'INDEX', 'INDICATOR', 'INITIAL', 'INSERT', 'INTEGER', 'INTERFACE',
    'INTERSECT', 'INTERVAL', 'INTO', 'IS', 'ISOLATION', 'JAVA', 'LEVEL',
    'LIKE', 'LIMITED', 'LOCK', 'LONG', 'LOOP', 'MAX', 'MAXEXTENTS', 'MIN',
    'MINUS', 'MINUTE', 'MLSLABEL', 'MOD', 'MODE', 'MODIFY', 'MONTH',
    'NATURAL', 'NATURALN', 'NEW', 'NEXTVAL', 'NOAUDIT', 'NOCOMPRESS', 'NOCOPY',
    'NOT', 'NOWAIT', 'NULL', 'NULLIF', 'NUMBER', 'NUMBER_BASE', 'OCIROWID',
    'OF', 'OFFLINE', 'ON', 'ONLINE', 'OPAQUE', 'OPEN', 'OPERATOR', 'OPTION',
    'OR', 'ORDER', 'ORGANIZATION', 'OTHERS', 'OUT', 'PACKAGE', 'PARTITION',
    'PCTFREE', 'PLS_INTEGER', 'POSITIVE', 'POSITIVEN', 'PRAGMA', 'PRIOR',
    'PRIVATE', 'PRIVILEGES', 'PROCEDURE', 'PUBLIC', 'RAISE', 'RANGE', 'RAW',
    'REAL', 'RECORD', 'REF', 'RELEASE', 'RENAME', 'RESOURCE', 'RETURN',
    'REVERSE', 'REVOKE', 'ROLLBACK', 'ROW', 'ROWID', 'ROWNUM', 'ROWS',
    'ROWTYPE', 'SAVEPOINT', 'SECOND', 'SELECT', 'SEPARATE', 'SESSION', 'SET',
    'SHARE', 'SIZE', 'SMALLINT', 'SPACE', 'SQL', 'SQLCODE', 'SQLERRM',
    'START', 'STDDEV', 'SUBTYPE', 'SUCCESSFUL', 'SUM', 'SYNONYM', 'SYSDATE',
    'TABLE', 'THEN', 'TIME', 'TIMESTAMP', 'TO', 'TRIGGER', 'TRUE', 'TYPE',
    'UID', 'UNION', 'UNIQUE', 'UPDATE', 'USE', 'USER', 'VALIDATE', 'VALUES',
    'VARCHAR', 'VARCHAR2', 'VARIANCE', 'VIEW', 'WHENEVER', 'WHERE', 'WHILE',
    'WITH', 'WORK', 'WRITE', 'YEAR', 'ZONE',
]

dialect = Dialect(
    'pl/sql',
    top_level_keywords=top_level_keywords + [
        'CONNECT BY', 'DELETE', 'START WITH',
    ],
    top_level_keywords_no_indent=top_level_keywords_no_indent,
    newline_keywords=newline_keywords,
    plain_keywords=plsql_keywords,
    operators=BASE_OPERATORS + ('**', ':='),
    strings=(APOS, NATIONAL),
    quoted_identifiers=(QUOTE, BACKTICK),
    line_comments=('--',),
    indexed_placeholders='?',
    named_placeholders=':',
    special_word_chars='_$#.@',
    # The SET of a hierarchical query's SEARCH or CYCLE clause (SEARCH DEPTH
    # FIRST BY col SET ordering_col) is not the start of an UPDATE clause
    demotions={'SET': ('BY',)},
)
