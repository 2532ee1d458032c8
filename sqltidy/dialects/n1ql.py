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

"""Defines the Couchbase N1QL dialect.

N1QL queries JSON documents, hence square brackets (arrays) and braces
(objects) are treated as brackets in addition to parentheses, and double
quotes delimit strings rather than identifiers (which are quoted with
backticks instead). Parameters are named ($name) or numbered ($1).
"""

from sqltidy.dialects import Dialect, APOS, QUOTE, BACKTICK, BASE_OPERATORS
from sqltidy.dialects.standard import (
    top_level_keywords_no_indent, newline_keywords,
)

__all__ = ['n1ql_keywords', 'dialect']

# Set of reserved words in N1QL. Obtained from the Couchbase Server N1QL
# language reference

n1ql_keywords = [
    'ALL', 'ALTER', 'ANALYZE', 'AND', 'ANY', 'ARRAY', 'AS', 'ASC', 'BEGIN',
    'BETWEEN', 'BINARY', 'BOOLEAN', 'BREAK', 'BUCKET', 'BUILD', 'BY', 'CALL',
    'CAST', 'CLUSTER', 'COLLATE', 'COLLECTION', 'COMMIT', 'CONNECT',
    'CONTINUE', 'CORRELATE', 'COVER', 'CREATE', 'DATABASE', 'DATASET',
    'DATASTORE', 'DECLARE', 'DECREMENT', 'DELETE', 'DERIVED', 'DESC',
    'DESCRIBE', 'DISTINCT', 'DO', 'DROP', 'EACH', 'ELEMENT', 'EVERY',
    'EXCLUDE', 'EXECUTE', 'EXISTS', 'FALSE', 'FETCH', 'FIRST', 'FLATTEN',
    'FOR', 'FORCE', 'FROM', 'FUNCTION', 'GRANT', 'GROUP', 'GSI', 'HAVING',
    'IF', 'IGNORE', 'ILIKE', 'IN', 'INCLUDE', 'INCREMENT', 'INDEX', 'INLINE',
    'INNER', 'INSERT', 'INTO', 'IS', 'JOIN', 'KEY', 'KEYS', 'KEYSPACE',
    'KNOWN', 'LAST', 'LEFT', 'LETTING', 'LIKE', 'LSM', 'MAP', 'MAPPING',
    'MATCHED', 'MATERIALIZED', 'MISSING', 'NAMESPACE', 'NOT', 'NULL',
    'NUMBER', 'OBJECT', 'OFFSET', 'ON', 'OPTION', 'OR', 'ORDER', 'OUTER',
    'OVER', 'PARSE', 'PARTITION', 'PASSWORD', 'PATH', 'POOL', 'PRIMARY',
    'PRIVATE', 'PRIVILEGE', 'PROCEDURE', 'PUBLIC', 'RAW', 'REALM', 'REDUCE',
    'RENAME', 'RETURN', 'RETURNING', 'REVOKE', 'RIGHT', 'ROLE', 'ROLLBACK',
    'SATISFIES', 'SCHEMA', 'SELF', 'SEMI', 'SHOW', 'SOME', 'START',
    'STATISTICS', 'STRING', 'SYSTEM', 'TO', 'TRANSACTION', 'TRIGGER', 'TRUE',
    'TRUNCATE', 'UNDER', 'UNIQUE', 'UNKNOWN', 'UNSET', 'USE', 'USER', 'USING',
    'VALIDATE', 'VALUE', 'VALUED', 'VIA', 'VIEW', 'WHILE', 'WITH', 'WITHIN',
    'WORK',
]

dialect = Dialect(
    'n1ql',
    top_level_keywords=[
        'DELETE FROM', 'EXCEPT', 'EXPLAIN DELETE FROM', 'EXPLAIN UPDATE',
        'EXPLAIN UPSERT', 'EXPLAIN', 'FROM', 'GROUP BY', 'HAVING', 'INFER',
        'INSERT INTO', 'LET', 'LIMIT', 'MERGE', 'NEST', 'ORDER BY', 'PREPARE',
        'SELECT', 'SET CURRENT SCHEMA', 'SET SCHEMA', 'SET', 'UNNEST',
        'UPDATE', 'UPSERT INTO', 'UPSERT', 'USE KEYS', 'VALUES', 'WHERE',
    ],
    top_level_keywords_no_indent=top_level_keywords_no_indent,
    newline_keywords=newline_keywords,
    plain_keywords=n1ql_keywords,
    operators=BASE_OPERATORS,
    strings=(APOS, QUOTE),
    quoted_identifiers=(BACKTICK,),
    line_comments=('#', '--'),
    indexed_placeholders='',
    named_placeholders='$',
    open_parens='([{',
    close_parens=')]}',
)
