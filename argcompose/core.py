"""
This module provides the composable `Parser` type and the `argparse` integration
that compiles parsers into a regular argument parser.

A `Parser` is an immutable description: a tuple of `Field` objects, each of which
registers one argument on an `argparse.ArgumentParser`, and a build function that
turns the values extracted for those fields into the parser's result. Nothing is
read from the command line until the parser is run (see `argcompose.runner`).
"""

import abc
import argparse
import copy
import logging
import re
import sys
import typing

from .types import ArgName
from .types import help_message


T = typing.TypeVar('T')
U = typing.TypeVar('U')

logger = logging.getLogger(__name__)


class _Missing():
    """
    Marker for a field that was neither given on the command line nor defaulted.
    """

    def __repr__(self) -> str:
        return 'MISSING'

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()


class DefinitionError(ValueError):
    """
    Raised when a parser cannot be compiled, such as when two arguments derive
    the same long flag. This is a programming error, not a command-line error.
    """


class UsageError(Exception):
    """
    Raised when the command line does not match the parser.
    """

    def __init__(self, message: str, usage: str = None) -> None:
        super().__init__(message)
        self.message = message
        self.usage = usage


class MissingArguments(UsageError):
    """
    Raised when required arguments are missing once parsing is done, such as when
    only some of the arguments of an optional group are given.
    """

    def __init__(self, fields: typing.List['Field'], usage: str = None) -> None:
        self.fields = list(fields)
        names = ', '.join(field.display_name for field in self.fields)
        super().__init__('the following arguments are required: {}'.format(names), usage)


class HelpRequest(Exception):
    """
    Raised by the injected help flag, carrying the formatted help text.
    """

    def __init__(self, text: str) -> None:
        super().__init__(text)
        self.text = text


class Field(metaclass=abc.ABCMeta):
    """
    This class is the base interface for a single command-line argument.
    """

    takes_value = True
    """ Whether the argument consumes a value token. """

    def __init__(self, name: str, help: typing.Optional[str] = None, *,  # pylint:disable=redefined-builtin
                 required: bool = True) -> None:
        """
        The *name* argument is the argument name, from which flags and the
        metavariable are derived. The *help* argument is the optional help text;
        `None` shows no text. When *required* is false, the argument may be
        omitted and extracts as `MISSING`.
        """
        self.name = ArgName(name)
        self.help = help_message(help)
        self.required = required

    @property
    def display_name(self) -> str:
        """
        Get the name used to refer to the argument in error messages.
        """
        return self.name.long_flag

    def optional(self) -> 'Field':
        """
        Get a copy of this field that is not required.
        """
        item = copy.copy(self)
        item.required = False
        return item

    def help_kwargs(self) -> dict:
        """
        Get the `add_argument` keyword arguments for the help text.
        """
        if self.help is None:
            return {}
        # argparse expands %-placeholders in help strings
        return {'help': str(self.help).replace('%', '%%')}

    @abc.abstractmethod
    def configure(self, parser: 'ArgumentParser', dest: str,
                  default: typing.Optional[str] = None) -> None:
        """
        This method registers the argument on *parser* so that its value is stored
        under *dest*. The *default* argument is the raw default text, if any.
        """

    def extract(self, namespace: argparse.Namespace, dest: str) -> typing.Any:
        """
        Get the value of the argument from the parsed namespace.
        """
        value = getattr(namespace, dest, MISSING)
        if value is MISSING and self.required and self.takes_value:
            raise MissingArguments([self])
        return value

    def __repr__(self) -> str:
        return '{}({!r})'.format(type(self).__name__, str(self.name))


class Parser(typing.Generic[T]):
    """
    An immutable description of how to extract a value from the command line.
    """

    __slots__ = ('fields', 'build')

    def __init__(self, fields: typing.Iterable[Field],
                 build: typing.Callable[[typing.Sequence[typing.Any]], T]) -> None:
        """
        The *fields* argument is the list of arguments the parser registers. The
        *build* argument receives the extracted values, one per field and in the
        same order, and returns the result.
        """
        self.fields = tuple(fields)
        self.build = build

    def map(self, func: typing.Callable[[T], U]) -> 'Parser[U]':
        """
        Get a parser applying *func* to the result of this parser.
        """
        build = self.build
        return Parser(self.fields, lambda values: func(build(values)))

    def __and__(self, other: 'Parser[U]') -> 'Parser[typing.Tuple[T, U]]':
        return pair(self, other)

    def __repr__(self) -> str:
        return 'Parser({})'.format(', '.join(repr(field) for field in self.fields))


def pure(value: T) -> Parser[T]:
    """
    Get a parser that reads nothing and always returns *value*.
    """
    return Parser((), lambda values: value)


def apply(func: typing.Callable[..., T], *parsers: Parser) -> Parser[T]:
    """
    Combine independent parsers, calling *func* with the result of each parser
    in order. The arguments of the parsers may appear in any order on the
    command line.

    Per example, `apply(Person, opt_text('name'), opt_integral('age'))` builds
    a `Person(name, age)` from `--name` and `--age`.
    """
    fields = []
    spans = []
    for item in parsers:
        start = len(fields)
        fields.extend(item.fields)
        spans.append((item.build, start, len(fields)))

    def build(values):
        return func(*[item(values[start:end]) for item, start, end in spans])

    return Parser(fields, build)


def pair(first: Parser[T], second: Parser[U]) -> Parser[typing.Tuple[T, U]]:
    """
    Combine two independent parsers into a parser of a tuple.
    """
    return apply(lambda a, b: (a, b), first, second)


def optional(parser: Parser[T], default: typing.Any = None) -> Parser[T]:
    """
    Get a parser whose arguments may be omitted.

    If none of the value-bearing arguments of *parser* is given, the result is
    *default*. If only some of them are given, parsing fails.
    """
    fields = [field.optional() for field in parser.fields]

    def build(values):
        absent = [field for field, value in zip(fields, values)
                  if field.takes_value and value is MISSING]
        if not absent:
            return parser.build(values)

        given = [field for field, value in zip(fields, values)
                 if field.takes_value and value is not MISSING]
        if given:
            raise MissingArguments(absent)

        return default

    return Parser(fields, build)


class HelpAction(argparse.Action):
    """
    Help flag action, raising `HelpRequest` instead of printing and exiting.
    """

    def __init__(self, option_strings, dest=argparse.SUPPRESS, default=argparse.SUPPRESS,
                 help=None):  # pylint:disable=redefined-builtin
        super().__init__(option_strings=option_strings, dest=dest, default=default,
                         nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        raise HelpRequest(parser.format_help())


class ArgumentParser(argparse.ArgumentParser):
    """
    Argument parser class override.
    """

    TEMP_PREFIX = '__arg_'
    """ The destination prefix of compiled fields. """

    HELP_FLAGS = ('-h', '--help')
    """ The flags reserved for the help action. """

    VALUE_PATTERN = re.compile(r'^-[\d.]')
    """ Tokens that start like a negative number are values, not flags. """

    def __init__(self, *args, defaults: typing.Mapping[str, str] = None, **kwargs) -> None:
        """
        This argument parser works the same way as the original, except that it
        never prints or exits: errors raise `UsageError` and the help flag raises
        `HelpRequest`. Abbreviated long flags are disabled.

        The *defaults* argument maps argument names to raw default values.
        """
        kwargs['add_help'] = False
        kwargs.setdefault('allow_abbrev', False)
        super().__init__(*args, **kwargs)
        self.fields = []
        self.defaults = dict(defaults or {})
        self.short_flags = set()
        self.long_flags = set()

        for flag in self.HELP_FLAGS:
            self.claim(flag)
        self.add_argument(*self.HELP_FLAGS, action=HelpAction,
                          help='show this help text and exit')

    def claim(self, flag: str) -> bool:
        """
        Reserve a flag, returning false if it was already taken.
        """
        flags = self.long_flags if flag.startswith('--') else self.short_flags
        if flag in flags:
            return False
        flags.add(flag)
        return True

    def flags_for(self, name: ArgName) -> typing.List[str]:
        """
        Get the flags of a named argument.

        The long flag must be unique. The short flag is given to the first
        argument claiming it; later arguments only get their long flag.
        """
        if not self.claim(name.long_flag):
            raise DefinitionError('conflicting flag: {}'.format(name.long_flag))

        flags = [name.long_flag]
        short_flag = name.short_flag
        if short_flag is not None and short_flag[1:].isdigit():
            # a digit flag makes argparse read negative numbers as flags
            logger.debug('short flag %s is a digit, %s gets none', short_flag, name.long_flag)
        elif short_flag is not None:
            if self.claim(short_flag):
                flags.insert(0, short_flag)
            else:
                logger.debug('short flag %s already taken, %s gets none', short_flag,
                             name.long_flag)
        return flags

    def add_field(self, field: Field) -> str:
        """
        Register a field and return its destination.
        """
        dest = '{}{}'.format(self.TEMP_PREFIX, len(self.fields))
        field.configure(self, dest, self.defaults.get(str(field.name)))
        self.fields.append((field, dest))
        return dest

    def add_parser(self, parser: Parser) -> None:
        """
        Register all the fields of a composed parser.
        """
        for field in parser.fields:
            self.add_field(field)

    def extract(self, namespace: argparse.Namespace) -> typing.Tuple:
        """
        Get the values of the registered fields, in registration order.
        """
        return tuple(field.extract(namespace, dest) for field, dest in self.fields)

    def join_values(self, argv: typing.Sequence[str]) -> typing.List[str]:
        """
        Attach the token following each value-taking flag to that flag, as in
        `--name=VALUE`, so the value is taken as is even if it starts with a dash.
        Tokens after a `--` separator are left alone.
        """
        result = []
        tokens = iter(argv)
        for item in tokens:
            if item == '--':
                result.append(item)
                result.extend(tokens)
                break

            action = self._option_string_actions.get(item)  # pylint:disable=protected-access
            if action is not None and action.nargs is None:
                value = next(tokens, None)
                if value == '--':
                    result.extend([item, value])
                    result.extend(tokens)
                    break
                if value is not None and value.startswith('-'):
                    item = '{}={}'.format(action.option_strings[-1], value)
                elif value is not None:
                    result.append(item)
                    item = value
            result.append(item)

        return result

    def parse_args(self, args=None, namespace=None):  # pylint:disable=signature-differs
        """
        Override the parent method to keep dash-led values attached to their flag.
        """
        if args is None:
            args = sys.argv[1:]
        return super().parse_args(self.join_values(args), namespace)

    def _parse_optional(self, arg_string):
        if self.VALUE_PATTERN.match(arg_string) and \
                arg_string not in self._option_string_actions:
            return None
        return super()._parse_optional(arg_string)

    def error(self, message: str) -> None:
        """
        Raise a `UsageError` rather than printing the message and exiting.
        """
        raise UsageError(message, self.format_usage())
