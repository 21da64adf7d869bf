"""
This module provides the builders for switches, flag-based options and
positional arguments.

Every builder takes the argument name and an optional help text, and returns a
`Parser`. The typed builders also take the conversion to apply to the raw token.
"""

import argparse
import fractions
import typing

from .core import MISSING
from .core import Field
from .core import Parser
from .core import UsageError
from .readers import Reader
from .readers import read_bool
from .readers import read_text
from .readers import reader


T = typing.TypeVar('T')
U = typing.TypeVar('U')

HelpText = typing.Optional[str]


def converter(func: Reader, name: str) -> typing.Callable[[str], typing.Any]:
    """
    Wrap a conversion function into an `argparse` type, turning a `None` result
    into an argument error.
    """
    def convert(text: str) -> typing.Any:
        value = func(text)
        if value is None:
            raise argparse.ArgumentTypeError('invalid value: {!r}'.format(text))
        return value

    convert.__name__ = name
    return convert


class SwitchField(Field):
    """
    Presence-only flag.
    """

    takes_value = False

    def configure(self, parser, dest, default=None):
        value = False
        if default is not None:
            value = read_bool(default)
            if value is None:
                raise UsageError('argument {}: invalid default: {!r}'.format(
                    self.display_name, default))

        if not self.name:
            parser.set_defaults(**{dest: value})
            return

        parser.add_argument(*parser.flags_for(self.name), dest=dest, action='store_true',
                            default=value, **self.help_kwargs())


class OptionField(Field):
    """
    Flag followed by a value token.
    """

    def __init__(self, func: Reader, *args, **kwargs) -> None:
        """
        The *func* argument is the conversion function applied to the value token.
        The other arguments are the same as for `Field`.
        """
        super().__init__(*args, **kwargs)
        self.func = func

    def configure(self, parser, dest, default=None):
        if not self.name:
            self.configure_unnamed(parser, dest, default)
            return

        kwargs = self.help_kwargs()
        if default is not None:
            kwargs['default'] = default
        elif self.required:
            kwargs['required'] = True
        else:
            kwargs['default'] = MISSING

        parser.add_argument(*parser.flags_for(self.name), dest=dest,
                            metavar=self.name.metavar,
                            type=converter(self.func, self.name.metavar),
                            **kwargs)

    def configure_unnamed(self, parser, dest, default):
        """
        An empty name derives the long flag `--`, which argparse reads as the end
        of options, so the value can only come from *default*.
        """
        value = MISSING
        if default is not None:
            value = self.func(default)
            if value is None:
                raise UsageError('argument {}: invalid value: {!r}'.format(
                    self.display_name, default))

        parser.set_defaults(**{dest: value})


class ArgumentField(OptionField):
    """
    Positional value.
    """

    @property
    def display_name(self):
        return self.name.metavar

    def configure(self, parser, dest, default=None):
        kwargs = self.help_kwargs()
        if default is not None:
            kwargs.update(nargs='?', default=default)
        elif not self.required:
            kwargs.update(nargs='?', default=MISSING)

        parser.add_argument(dest, metavar=self.name.metavar,
                            type=converter(self.func, self.name.metavar),
                            **kwargs)


def switch(name: str, help: HelpText = None) -> Parser[bool]:  # pylint:disable=redefined-builtin
    """
    Get a parser returning `True` if the flag is set and `False` if it's absent.
    """
    return Parser([SwitchField(name, help)], lambda values: values[0])


def opt(func: Reader, name: str, help: HelpText = None) -> Parser[T]:  # pylint:disable=redefined-builtin
    """
    Get a flag-based option parser for any type, given a text conversion function.

    The *func* argument receives the value token and returns the converted value,
    or `None` if the token is malformed, which fails the parse.
    """
    return Parser([OptionField(func, name, help)], lambda values: values[0])


def opt_text(name: str, help: HelpText = None) -> Parser[str]:  # pylint:disable=redefined-builtin
    """
    Parse a text value as a flag-based option.
    """
    return opt(read_text, name, help)


def opt_read(type_: typing.Callable[[str], T], name: str,
             help: HelpText = None) -> Parser[T]:  # pylint:disable=redefined-builtin
    """
    Parse a value of *type_* as a flag-based option, using the reader registered
    for that type (see `argcompose.readers.reader`).
    """
    return opt(reader(type_), name, help)


def opt_integral(name: str, help: HelpText = None, *,  # pylint:disable=redefined-builtin
                 to: typing.Callable[[int], U] = int) -> Parser[U]:
    """
    Parse an integer as a flag-based option, converted with *to*.
    """
    return opt_read(int, name, help).map(to)


def opt_fractional(name: str, help: HelpText = None, *,  # pylint:disable=redefined-builtin
                   to: typing.Callable[[fractions.Fraction], U] = float) -> Parser[U]:
    """
    Parse a rational number as a flag-based option, converted with *to*.

    This is most commonly used to parse a `float`.
    """
    return opt_read(fractions.Fraction, name, help).map(to)


def arg(func: Reader, name: str, help: HelpText = None) -> Parser[T]:  # pylint:disable=redefined-builtin
    """
    Get a positional argument parser for any type, given a text conversion function.
    """
    return Parser([ArgumentField(func, name, help)], lambda values: values[0])


def arg_text(name: str, help: HelpText = None) -> Parser[str]:  # pylint:disable=redefined-builtin
    return arg(read_text, name, help)


def arg_read(type_: typing.Callable[[str], T], name: str,
             help: HelpText = None) -> Parser[T]:  # pylint:disable=redefined-builtin
    return arg(reader(type_), name, help)


def arg_integral(name: str, help: HelpText = None, *,  # pylint:disable=redefined-builtin
                 to: typing.Callable[[int], U] = int) -> Parser[U]:
    """
    Parse an integer as a positional argument, converted with *to*.
    """
    return arg_read(int, name, help).map(to)


def arg_fractional(name: str, help: HelpText = None, *,  # pylint:disable=redefined-builtin
                   to: typing.Callable[[fractions.Fraction], U] = float) -> Parser[U]:
    """
    Parse a rational number as a positional argument, converted with *to*.
    """
    return arg_read(fractions.Fraction, name, help).map(to)
