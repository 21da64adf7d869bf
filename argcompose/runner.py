"""
This module runs composed parsers against the command line.

`parse` returns a result value and never prints or exits, which keeps parsers
testable. `options` is the thin outer layer turning help requests and errors
into the usual command-line behavior.
"""

import logging
import os
import sys
import typing

from .core import ArgumentParser
from .core import HelpRequest
from .core import Parser
from .core import UsageError
from .types import Description


T = typing.TypeVar('T')

logger = logging.getLogger(__name__)


class Success(typing.NamedTuple):
    """ The command line was parsed into *value*. """
    value: typing.Any


class HelpRequested(typing.NamedTuple):
    """ The help flag was given; *text* is the formatted help. """
    text: str


class ParseError(typing.NamedTuple):
    """ The command line did not match the parser. """
    message: str
    usage: str


Result = typing.Union[Success, HelpRequested, ParseError]


def build_parser(description: str, parser: Parser, *, prog: str = None,
                 defaults: typing.Mapping[str, str] = None) -> ArgumentParser:
    """
    Compile a composed parser into an argument parser.

    Raises `DefinitionError` if two arguments derive the same long flag.
    """
    argparser = ArgumentParser(prog=prog, description=Description(description),
                               defaults=defaults)
    argparser.add_parser(parser)
    return argparser


def wants_help(argv: typing.Sequence[str]) -> bool:
    """
    Check if a help flag appears in *argv*, before any `--` separator.
    """
    for item in argv:
        if item == '--':
            return False
        if item in ArgumentParser.HELP_FLAGS:
            return True
    return False


def parse(description: str, parser: Parser[T], argv: typing.Sequence[str] = None, *,
          prog: str = None, defaults: typing.Mapping[str, str] = None) -> Result:
    """
    Parse *argv*, or the process arguments if omitted, and return one of
    `Success`, `HelpRequested` or `ParseError`.

    The *description* is shown as the header of the help output. The *prog*
    argument is the program name used in usage lines and defaults to the name
    of the running script. The *defaults* argument maps argument names to raw
    default values, converted the same way as command-line tokens.

    The help flag takes priority over everything else: if it's present, the
    help text is returned even if other arguments are invalid.
    """
    argv = list(sys.argv[1:] if argv is None else argv)

    try:
        argparser = build_parser(description, parser, prog=prog, defaults=defaults)
    except UsageError as ex:
        logger.debug('invalid defaults: %s', ex.message)
        usage = build_parser(description, parser, prog=prog).format_usage()
        return ParseError(ex.message, usage)

    if wants_help(argv):
        logger.debug('help requested')
        return HelpRequested(argparser.format_help())

    try:
        namespace = argparser.parse_args(argv)
        value = parser.build(argparser.extract(namespace))
    except HelpRequest as ex:
        logger.debug('help requested')
        return HelpRequested(ex.text)
    except UsageError as ex:
        logger.debug('parse error: %s', ex.message)
        return ParseError(ex.message, ex.usage or argparser.format_usage())

    logger.debug('parsed arguments: %r', value)
    return Success(value)


def options(description: str, parser: Parser[T], *, argv: typing.Sequence[str] = None,
            prog: str = None, defaults: typing.Mapping[str, str] = None) -> T:
    """
    Parse the given options from the command line and return the result.

    If the help flag is given, the help text is printed to stdout and the process
    exits with status 0. If the command line is invalid, the usage and the error
    message are printed to stderr and the process exits with status 2.

    The arguments are the same as for `parse`.
    """
    result = parse(description, parser, argv, prog=prog, defaults=defaults)

    if isinstance(result, HelpRequested):
        sys.stdout.write(result.text)
        sys.exit(0)

    if isinstance(result, ParseError):
        prog = prog or os.path.basename(sys.argv[0])
        sys.stderr.write(result.usage)
        sys.stderr.write('{}: error: {}\n'.format(prog, result.message))
        sys.exit(2)

    return result.value
