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

"""Defines the standard (ANSI) SQL dialect.

The keyword tables defined here are shared by the other dialects, which
extend or override them as necessary.
"""

from sqltidy.dialects import (
    Dialect, APOS, NATIONAL, QUOTE, BACKTICK, BRACKET, BASE_OPERATORS,
)

__all__ = [
    'sql2003_keywords',
    'top_level_keywords',
    'top_level_keywords_no_indent',
    'newline_keywords',
    'dialect',
]

# Set of reserved keywords in ANSI SQL-2003. Obtained from
# <http://developer.mimer.com/validator/sql-reserved-words.tml>

sql2003_keywords = [
    'ADD', 'ALL', 'ALLOCATE', 'ALTER', 'AND', 'ANY', 'ARE', 'ARRAY', 'AS',
    'ASENSITIVE', 'ASYMMETRIC', 'AT', 'ATOMIC', 'AUTHORIZATION', 'BEGIN',
    'BETWEEN', 'BIGINT', 'BINARY', 'BLOB', 'BOOLEAN', 'BOTH', 'BY', 'CALL',
    'CALLED', 'CASCADED', 'CASE', 'CAST', 'CHAR', 'CHARACTER', 'CHECK', 'CLOB',
    'CLOSE', 'COLLATE', 'COLUMN', 'COMMIT', 'CONDITION', 'CONNECT',
    'CONSTRAINT', 'CONTINUE', 'CORRESPONDING', 'CREATE', 'CROSS', 'CUBE',
    'CURRENT', 'CURRENT_DATE', 'CURRENT_DEFAULT_TRANSFORM_GROUP',
    'CURRENT_PATH', 'CURRENT_ROLE', 'CURRENT_TIME', 'CURRENT_TIMESTAMP',
    'CURRENT_TRANSFORM_GROUP_FOR_TYPE', 'CURRENT_USER', 'CURSOR', 'CYCLE',
    'DATE', 'DAY', 'DEALLOCATE', 'DEC', 'DECIMAL', 'DECLARE', 'DEFAULT',
    'DELETE', 'DEREF', 'DESCRIBE', 'DETERMINISTIC', 'DISCONNECT', 'DISTINCT',
    'DO', 'DOUBLE', 'DROP', 'DYNAMIC', 'EACH', 'ELEMENT', 'ELSE', 'ELSEIF',
    'END', 'ESCAPE', 'EXCEPT', 'EXEC', 'EXECUTE', 'EXISTS', 'EXIT', 'EXTERNAL',
    'FALSE', 'FETCH', 'FILTER', 'FLOAT', 'FOR', 'FOREIGN', 'FREE', 'FROM',
    'FULL', 'FUNCTION', 'GET', 'GLOBAL', 'GRANT', 'GROUP', 'GROUPING',
    'HANDLER', 'HAVING', 'HOLD', 'HOUR', 'IDENTITY', 'IF', 'IMMEDIATE', 'IN',
    'INDICATOR', 'INNER', 'INOUT', 'INPUT', 'INSENSITIVE', 'INSERT', 'INT',
    'INTEGER', 'INTERSECT', 'INTERVAL', 'INTO', 'IS', 'ITERATE', 'JOIN',
    'LANGUAGE', 'LARGE', 'LATERAL', 'LEADING', 'LEAVE', 'LEFT', 'LIKE',
    'LOCAL', 'LOCALTIME', 'LOCALTIMESTAMP', 'LOOP', 'MATCH', 'MEMBER', 'MERGE',
    'METHOD', 'MINUTE', 'MODIFIES', 'MODULE', 'MONTH', 'MULTISET', 'NATIONAL',
    'NATURAL', 'NCHAR', 'NCLOB', 'NEW', 'NO', 'NONE', 'NOT', 'NULL', 'NUMERIC',
    'OF', 'OLD', 'ON', 'ONLY', 'OPEN', 'OR', 'ORDER', 'OUT', 'OUTER', 'OUTPUT',
    'OVER', 'OVERLAPS', 'PARAMETER', 'PARTITION', 'PRECISION', 'PREPARE',
    'PRIMARY', 'PROCEDURE', 'RANGE', 'READS', 'REAL', 'RECURSIVE', 'REF',
    'REFERENCES', 'REFERENCING', 'RELEASE', 'REPEAT', 'RESIGNAL', 'RESULT',
    'RETURN', 'RETURNS', 'REVOKE', 'RIGHT', 'ROLLBACK', 'ROLLUP', 'ROW',
    'ROWS', 'SAVEPOINT', 'SCOPE', 'SCROLL', 'SEARCH', 'SECOND', 'SELECT',
    'SENSITIVE', 'SESSION_USER', 'SET', 'SIGNAL', 'SIMILAR', 'SMALLINT',
    'SOME', 'SPECIFIC', 'SPECIFICTYPE', 'SQL', 'SQLEXCEPTION', 'SQLSTATE',
    'SQLWARNING', 'START', 'STATIC', 'SUBMULTISET', 'SYMMETRIC', 'SYSTEM',
    'SYSTEM_USER', 'TABLE', 'TABLESAMPLE', 'THEN', 'TIME', 'TIMESTAMP',
    'TIMEZONE_HOUR', 'TIMEZONE_MINUTE', 'TO', 'TRAILING', 'TRANSLATION',
    'TREAT', 'TRIGGER', 'TRUE', 'UNDO', 'UNION', 'UNIQUE', 'UNKNOWN', 'UNNEST',
    'UNTIL', 'UPDATE', 'USER', 'USING', 'VALUE', 'VALUES', 'VARCHAR',
    'VARYING', 'WHEN', 'WHENEVER', 'WHERE', 'WHILE', 'WINDOW', 'WITH',
    'WITHIN', 'WITHOUT', 'YEAR',
]

# Keywords which start a new clause; the content of the clause is indented
# beneath them

top_level_keywords = [
    'ADD', 'AFTER', 'ALTER COLUMN', 'ALTER TABLE', 'DELETE FROM',
    'FETCH FIRST', 'FROM', 'GO', 'GROUP BY', 'HAVING', 'INSERT INTO', 'INSERT',
    'LIMIT', 'MODIFY', 'ORDER BY', 'SELECT', 'SET CURRENT SCHEMA',
    'SET SCHEMA', 'SET', 'UPDATE', 'VALUES', 'WHERE',
]

# Keywords which start a new clause at the current indentation level

top_level_keywords_no_indent = [
    'EXCEPT', 'EXCEPT ALL', 'INTERSECT', 'INTERSECT ALL', 'MINUS',
    'MINUS ALL', 'UNION', 'UNION ALL',
]

# Keywords which start a new line within a clause

newline_keywords = [
    'AND', 'CROSS APPLY', 'CROSS JOIN', 'FULL JOIN', 'FULL OUTER JOIN',
    'INNER JOIN', 'JOIN', 'LEFT JOIN', 'LEFT OUTER JOIN', 'NATURAL JOIN', 'OR',
    'OUTER APPLY', 'OUTER JOIN', 'RIGHT JOIN', 'RIGHT OUTER JOIN', 'XOR',
]

dialect = Dialect(
    'sql',
    top_level_keywords=top_level_keywords,
    top_level_keywords_no_indent=top_level_keywords_no_indent,
    newline_keywords=newline_keywords,
    plain_keywords=sql2003_keywords,
    operators=BASE_OPERATORS,
    strings=(APOS, NATIONAL),
    quoted_identifiers=(QUOTE, BACKTICK, BRACKET),
    line_comments=('#', '--'),
    indexed_placeholders='?',
    named_placeholders='@:',
)
