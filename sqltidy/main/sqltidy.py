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

import sys
import logging
import optparse
import configparser

import sqltidy
import sqltidy.main
from sqltidy.tokenizer import dump


class TidyConfigParser(configparser.ConfigParser):
    """Tweaked version of ConfigParser that preserves the case of keys"""
    def optionxform(self, optionstr):
        return optionstr


def parse_indent(value):
    """Converts an indent specification into an indentation string.

    A number is converted into that many spaces, and "tab" into a single tab
    character. Anything else is used literally.
    """
    if value.isdigit():
        return ' ' * int(value)
    elif value.lower() in ('tab', '\\t'):
        return '\t'
    else:
        return value


def parse_key(key):
    """Converts all-digit placeholder keys into integers."""
    if key.isdigit():
        return int(key)
    return key


class TidySqlUtility(sqltidy.main.Utility):
    """%prog [options] files...

    This utility reformats SQL for human consumption. Either specify the names
    of files containing the SQL to reformat, or specify - to indicate that
    stdin should be read (if no files are specified, stdin is read). The
    reformatted SQL will be written to stdout in either case. The available
    command line options are listed below.
    """

    def __init__(self):
        super(TidySqlUtility, self).__init__()
        self.parser.set_defaults(
            language=None,
            indent=None,
            uppercase=None,
            lines_between_queries=None,
            inline_between_and=None,
            params=None,
            config='',
            list_languages=False,
            tokens=False,
        )
        self.parser.add_option(
            '-L', '--language', dest='language',
            help='specify the SQL dialect of the input (default=sql)')
        self.parser.add_option(
            '-i', '--indent', dest='indent',
            help='specify the indentation; a number of spaces, "tab", or a '
            'literal string (default=2)')
        self.parser.add_option(
            '-u', '--uppercase', dest='uppercase', action='store_true',
            help='convert keywords to uppercase')
        self.parser.add_option(
            '-b', '--lines-between-queries', dest='lines_between_queries',
            type='int', metavar='N',
            help='specify the number of line breaks after each statement '
            '(default=1)')
        self.parser.add_option(
            '--inline-between-and', dest='inline_between_and',
            action='store_true',
            help='keep the AND of a BETWEEN predicate on the same line')
        self.parser.add_option(
            '-p', '--param', dest='params', action='append', metavar='KEY=VALUE',
            help='specify the value of a placeholder; may be given multiple '
            'times')
        self.parser.add_option(
            '-c', '--config', dest='config',
            help='specify the configuration file')
        self.parser.add_option(
            '--list-languages', dest='list_languages', action='store_true',
            help='list the supported SQL dialects and exit')
        self.parser.add_option(
            '--tokens', dest='tokens', action='store_true',
            help='output the tokens of the input instead of formatting it')

    def main(self, options, args):
        super(TidySqlUtility, self).main(options, args)
        if options.list_languages:
            for name in sqltidy.dialect_names():
                print(name)
            return sqltidy.main.EXIT_OK
        format_options, params = {}, {}
        if options.config:
            (format_options, params) = self.process_config(options.config)
        if options.language is not None:
            format_options['language'] = options.language
        if options.indent is not None:
            format_options['indent'] = parse_indent(options.indent)
        if options.uppercase is not None:
            format_options['uppercase'] = options.uppercase
        if options.lines_between_queries is not None:
            format_options['lines_between_queries'] = options.lines_between_queries
        if options.inline_between_and is not None:
            format_options['inline_between_and'] = options.inline_between_and
        for param in options.params or []:
            (key, sep, value) = param.partition('=')
            if not sep:
                raise optparse.OptionValueError(
                    'Placeholder values must be specified as KEY=VALUE, not %s' % param)
            params[parse_key(key)] = value
        if params:
            format_options['params'] = params
        # Validate the options before reading any input
        language = format_options.get('language', 'sql')
        sqltidy.get_dialect(language)
        sqltidy.format('', format_options)
        done_stdin = False
        for sql_file in args or ['-']:
            if sql_file == '-':
                if not done_stdin:
                    done_stdin = True
                    sql = sys.stdin.read()
                else:
                    raise IOError('Cannot read input from stdin multiple times')
            else:
                logging.info('Reading %s' % sql_file)
                with open(sql_file, 'r') as f:
                    sql = f.read()
            if options.tokens:
                dump(sqltidy.tokenize(sql, language), sys.stdout)
            else:
                sys.stdout.write(sqltidy.format(sql, format_options))
            sys.stdout.flush()
        return sqltidy.main.EXIT_OK

    def process_config(self, config_file):
        """Reads and parses an Ini-style configuration file.

        The config_file parameter specifies a configuration filename to
        process. The [options] section of the file may contain the language,
        indent, uppercase, lines_between_queries and inline_between_and
        options, while the [params] section may contain placeholder values.
        The method returns a tuple of (options, params) dictionaries.
        """
        config = TidyConfigParser(interpolation=None)
        logging.info('Reading configuration file %s' % config_file)
        if not config.read(config_file):
            raise IOError('Unable to read configuration file %s' % config_file)
        options = {}
        if config.has_section('options'):
            section = config['options']
            for key in section:
                if key == 'indent':
                    options[key] = parse_indent(section[key])
                elif key in ('uppercase', 'inline_between_and'):
                    options[key] = section.getboolean(key)
                elif key == 'lines_between_queries':
                    options[key] = section.getint(key)
                elif key == 'language':
                    options[key] = section[key]
                else:
                    raise sqltidy.ConfigurationError(
                        'Unknown option %s in configuration file %s' % (key, config_file))
        else:
            logging.warning('The configuration file %s has no [options] section' % config_file)
        params = {}
        if config.has_section('params'):
            params = dict(
                (parse_key(key), value)
                for (key, value) in config.items('params')
            )
        return (options, params)

main = TidySqlUtility()
