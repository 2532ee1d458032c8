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

"""Defines the IBM DB2 for Linux/Unix/Windows dialect."""

from sqltidy.dialects import Dialect, Quote, BASE_OPERATORS
from sqltidy.dialects.standard import (
    top_level_keywords, top_level_keywords_no_indent, newline_keywords,
)

__all__ = ['db2luw_keywords', 'dialect']

# Set of reserved keywords in IBM DB2 UDB. Obtained from
# <http://publib.boulder.ibm.com/infocenter/db2luw/v8/index.jsp> (see node
# Reference / SQL / Reserved schema names and reserved words)

db2luw_keywords = [
    'ADD', 'AFTER', 'ALIAS', 'ALL', 'ALLOCATE', 'ALLOW', 'ALTER', 'AND', 'ANY',
    'APPLICATION', 'AS', 'ASSOCIATE', 'ASUTIME', 'AUDIT', 'AUTHORIZATION',
    'AUX', 'AUXILIARY', 'BEFORE', 'BEGIN', 'BETWEEN', 'BINARY', 'BUFFERPOOL',
    'BY', 'CACHE', 'CALL', 'CALLED', 'CAPTURE', 'CARDINALITY', 'CASCADED',
    'CASE', 'CAST', 'CCSID', 'CHAR', 'CHARACTER', 'CHECK', 'CLOSE', 'CLUSTER',
    'COLLECTION', 'COLLID', 'COLUMN', 'COMMENT', 'COMMIT', 'CONCAT',
    'CONDITION', 'CONNECT', 'CONNECTION', 'CONSTRAINT', 'CONTAINS', 'CONTINUE',
    'COUNT', 'COUNT_BIG', 'CREATE', 'CROSS', 'CURRENT', 'CURRENT_DATE',
    'CURRENT_LC_CTYPE', 'CURRENT_PATH', 'CURRENT_SERVER', 'CURRENT_TIME',
    'CURRENT_TIMESTAMP', 'CURRENT_TIMEZONE', 'CURRENT_USER', 'CURSOR', 'CYCLE',
    'DATA', 'DATABASE', 'DAY', 'DAYS', 'DB2GENERAL', 'DB2GENRL', 'DB2SQL',
    'DBINFO', 'DECLARE', 'DEFAULT', 'DEFAULTS', 'DEFINITION', 'DELETE',
    'DESCRIPTOR', 'DETERMINISTIC', 'DISALLOW', 'DISCONNECT', 'DISTINCT', 'DO',
    'DOUBLE', 'DROP', 'DSNHATTR', 'DSSIZE', 'DYNAMIC', 'EACH', 'EDITPROC',
    'ELSE', 'ELSEIF', 'ENCODING', 'END', 'ERASE', 'ESCAPE', 'EXCEPT',
    'EXCEPTION', 'EXCLUDING', 'EXECUTE', 'EXISTS', 'EXIT', 'EXTERNAL',
    'FENCED', 'FETCH', 'FIELDPROC', 'FILE', 'FINAL', 'FOR', 'FOREIGN', 'FREE',
    'FROM', 'FULL', 'FUNCTION', 'GENERAL', 'GENERATED', 'GET', 'GLOBAL', 'GO',
    'GOTO', 'GRANT', 'GRAPHIC', 'GROUP', 'HANDLER', 'HAVING', 'HOLD', 'HOUR',
    'HOURS', 'IDENTITY', 'IF', 'IMMEDIATE', 'IN', 'INCLUDING', 'INCREMENT',
    'INDEX', 'INDICATOR', 'INHERIT', 'INNER', 'INOUT', 'INSENSITIVE', 'INSERT',
    'INTEGRITY', 'INTO', 'IS', 'ISOBID', 'ISOLATION', 'ITERATE', 'JAR', 'JAVA',
    'JOIN', 'KEY', 'LABEL', 'LANGUAGE', 'LC_CTYPE', 'LEAVE', 'LEFT', 'LIKE',
    'LINKTYPE', 'LOCAL', 'LOCALE', 'LOCATOR', 'LOCATORS', 'LOCK', 'LOCKMAX',
    'LOCKSIZE', 'LONG', 'LOOP', 'MAXVALUE', 'MICROSECOND', 'MICROSECONDS',
    'MINUTE', 'MINUTES', 'MINVALUE', 'MODE', 'MODIFIES', 'MONTH', 'MONTHS',
    'NEW', 'NEW_TABLE', 'NO', 'NOCACHE', 'NOCYCLE', 'NODENAME', 'NODENUMBER',
    'NOMAXVALUE', 'NOMINVALUE', 'NOORDER', 'NOT', 'NULL', 'NULLS', 'NUMPARTS',
    'OBID', 'OF', 'OLD', 'OLD_TABLE', 'ON', 'OPEN', 'OPTIMIZATION',
    'OPTIMIZE', 'OPTION', 'OR', 'ORDER', 'OUT', 'OUTER', 'OVERRIDING',
    'PACKAGE', 'PARAMETER', 'PART', 'PARTITION', 'PATH', 'PIECESIZE', 'PLAN',
    'POSITION', 'PRECISION', 'PREPARE', 'PRIMARY', 'PRIQTY', 'PRIVILEGES',
    'PROCEDURE', 'PROGRAM', 'PSID', 'QUERYNO', 'READ', 'READS', 'RECOVERY',
    'REFERENCES', 'REFERENCING', 'RELEASE', 'RENAME', 'REPEAT', 'RESET',
    'RESIGNAL', 'RESTART', 'RESTRICT', 'RESULT', 'RESULT_SET_LOCATOR',
    'RETURN', 'RETURNS', 'REVOKE', 'RIGHT', 'ROLLBACK', 'ROUTINE', 'ROW',
    'ROWS', 'RRN', 'RUN', 'SAVEPOINT', 'SCHEMA', 'SCRATCHPAD', 'SECOND',
    'SECONDS', 'SECQTY', 'SECURITY', 'SELECT', 'SENSITIVE', 'SET', 'SIGNAL',
    'SIMPLE', 'SOME', 'SOURCE', 'SPECIFIC', 'SQL', 'SQLID', 'STANDARD',
    'START', 'STATIC', 'STAY', 'STOGROUP', 'STORES', 'STYLE', 'SUBPAGES',
    'SUBSTRING', 'SYNONYM', 'SYSFUN', 'SYSIBM', 'SYSPROC', 'SYSTEM', 'TABLE',
    'TABLESPACE', 'THEN', 'TO', 'TRANSACTION', 'TRIGGER', 'TRIM', 'TYPE',
    'UNDO', 'UNION', 'UNIQUE', 'UNTIL', 'UPDATE', 'USAGE', 'USER', 'USING',
    'VALIDPROC', 'VALUES', 'VARIABLE', 'VARIANT', 'VCAT', 'VIEW', 'VOLUMES',
    'WHEN', 'WHERE', 'WHILE', 'WITH', 'WLM', 'WRITE', 'YEAR', 'YEARS',
]

# Besides ordinary strings, DB2 accepts hexadecimal (X'..'), graphic (G'..'
# and N'..'), graphic hexadecimal (GX'..'), unicode hexadecimal (UX'..') and
# UTF-8 (U&'..') string literals; the prefixes are case insensitive. DB2
# does not treat backslash as an escape character in any of these
db2_strings = [Quote("'", "'", False)] + [
    Quote(prefix + "'", "'", False)
    for base in ('X', 'G', 'N', 'GX', 'UX', 'U&')
    for prefix in sorted(set((base, base.lower())))
]

dialect = Dialect(
    'db2',
    top_level_keywords=top_level_keywords,
    top_level_keywords_no_indent=top_level_keywords_no_indent,
    newline_keywords=newline_keywords,
    plain_keywords=db2luw_keywords,
    operators=BASE_OPERATORS + (
        '**', '=>', '..', '^=', '^<', '^>', '\xac=', '\xac<', '\xac>',
    ),
    strings=db2_strings,
    quoted_identifiers=(Quote('"', '"', False),),
    line_comments=('--',),
    # DB2 supports nested /*..*/ comments in accordance with SQL 2003
    nested_comments=True,
    indexed_placeholders='?',
    named_placeholders=':',
    special_word_chars='$#@',
)
