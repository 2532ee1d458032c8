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


"""Defines the base class of the command line utilities.

The Utility class provides the facilities common to all command line
utilities in the package: an option parser with a help formatter sized to the
console, logging configuration (-q, -v, -l and -D options), expansion of
@response files, and translation of exceptions into exit codes.
"""

import sys
mswindows = sys.platform == "win32"

import os
import glob
import logging
import optparse
import textwrap
import traceback

from sqltidy import __version__, Error
from sqltidy.compat import terminal_size

# Exit codes returned by Utility.__call__
EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130


def console_width():
    "Returns the width to which console output is wrapped"
    return min(130, terminal_size()[0] - 2)


def expand_path(path):
    "Returns the canonical form of a user supplied path"
    return os.path.normcase(os.path.realpath(os.path.abspath(os.path.expanduser(path))))


class HelpFormatter(optparse.IndentedHelpFormatter):
    # Option help starts a third of the way across the console
    def __init__(self):
        width = console_width()
        super(HelpFormatter, self).__init__(max_help_position=width // 3, width=width)


class OptionParser(optparse.OptionParser):
    # Raise parsing errors instead of printing them and exiting; Utility.handle
    # reports them along with a pointer to --help
    def error(self, msg):
        raise optparse.OptParseError(msg)


class Utility(object):
    """Abstract base class of the command line utilities.

    Descendents override main() to perform their work, and add their own
    options to the parser attribute in their constructor. The first line of
    the descendent's docstring is used as the usage string and the remainder
    as the description in the --help output. Instances are callable with an
    optional list of command line arguments (defaulting to sys.argv) and
    return an exit code suitable for passing to sys.exit().
    """

    console_format = '%(message)s'
    logfile_format = '%(asctime)s, %(levelname)s, %(message)s'

    def __init__(self, usage=None, version=None, description=None):
        super(Utility, self).__init__()
        doc = (self.__doc__ or '').split('\n')
        if usage is None:
            usage = doc[0]
        if version is None:
            version = '%%prog %s' % __version__
        if description is None:
            wrapper = textwrap.TextWrapper(width=console_width())
            description = wrapper.fill(' '.join(
                line.strip() for line in doc[1:] if line.strip()))
        self.parser = OptionParser(
            usage=usage,
            version=version,
            description=description,
            formatter=HelpFormatter()
        )
        self.parser.set_defaults(
            debug=False,
            logfile='',
            loglevel=logging.WARNING
        )
        self.parser.add_option('-q', '--quiet', dest='loglevel', action='store_const', const=logging.ERROR,
            help="""only report errors on the console""")
        self.parser.add_option('-v', '--verbose', dest='loglevel', action='store_const', const=logging.INFO,
            help="""report progress on the console""")
        self.parser.add_option('-l', '--log-file', dest='logfile',
            help="""log messages to the specified file""")
        self.parser.add_option('-D', '--debug', dest='debug', action='store_true',
            help="""enables debug mode (runs under PDB)""")

    def __call__(self, args=None):
        if args is None:
            args = sys.argv[1:]
        handlers = []
        try:
            (options, args) = self.parser.parse_args(self.expand_args(args))
            handlers = self.configure_logging(options)
            if options.debug:
                import pdb
                return pdb.runcall(self.main, options, args)
            else:
                return self.main(options, args) or EXIT_OK
        except (Exception, KeyboardInterrupt) as exc:
            return self.handle(exc)
        finally:
            root = logging.getLogger()
            for handler in handlers:
                root.removeHandler(handler)
                handler.close()

    def configure_logging(self, options):
        """Attaches console and log-file handlers to the root logger.

        Returns the list of handlers attached so that the caller can remove
        them once the utility has finished.
        """
        root = logging.getLogger()
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(logging.Formatter(self.console_format))
        console.setLevel(logging.DEBUG if options.debug else options.loglevel)
        handlers = [console]
        if options.logfile:
            logfile = logging.FileHandler(options.logfile)
            logfile.setFormatter(logging.Formatter(self.logfile_format))
            logfile.setLevel(logging.DEBUG)
            handlers.append(logfile)
        for handler in handlers:
            root.addHandler(handler)
        root.setLevel(logging.DEBUG if options.debug else logging.INFO)
        return handlers

    def expand_args(self, args):
        """Expands @response files and wildcards in the command line"""
        result = []
        for arg in args:
            if arg.startswith('@') and len(arg) > 1:
                result.extend(self.read_response_file(expand_path(arg[1:])))
            else:
                result.append(arg)
        # Windows shells don't glob, so do it for them
        if mswindows:
            result = [f for arg in result for f in self.glob_arg(arg)]
        return result

    def read_response_file(self, filename):
        """Returns the arguments listed (one per line) in a response file"""
        result = []
        try:
            with open(filename, 'r') as resp_file:
                for resp_arg in resp_file:
                    # Only strip the line break (whitespace is significant)
                    resp_arg = resp_arg.rstrip('\n')
                    if mswindows:
                        result.append(resp_arg)
                    else:
                        result.extend(self.glob_arg(resp_arg))
        except IOError as e:
            raise optparse.OptionValueError(str(e))
        return result

    def glob_arg(self, arg):
        """Performs shell-style globbing of arguments"""
        if set('*?[') & set(arg):
            matches = sorted(glob.glob(expand_path(arg)))
            if matches:
                return matches
        # Arguments without wildcards, or which match nothing, pass through
        return [arg]

    def handle(self, exc):
        """Logs exc and returns the corresponding exit code."""
        if isinstance(exc, KeyboardInterrupt):
            return EXIT_INTERRUPTED
        elif isinstance(exc, IOError):
            # The message of an I/O error (which includes the filename) is
            # enough for the user
            logging.critical(str(exc))
            return EXIT_FAILED
        elif isinstance(exc, (optparse.OptParseError, Error)):
            # Usage and configuration errors
            logging.critical(str(exc))
            logging.critical('Try the --help option for more information.')
            return EXIT_USAGE
        else:
            for line in traceback.format_exception(type(exc), exc, exc.__traceback__):
                for s in line.rstrip().split('\n'):
                    logging.critical(s)
            return EXIT_FAILED

    def main(self, options, args):
        pass
