"""
This module provides conversion functions, used to turn a raw argument token
into a typed value.

A conversion function takes the token text and returns the converted value, or
`None` if the text is malformed. Builders never guess the conversion from a type
annotation: the caller picks a reader explicitly, either directly or through
`reader()` with the target type.
"""

import ast
import decimal
import fractions
import typing


T = typing.TypeVar('T')
U = typing.TypeVar('U')

Reader = typing.Callable[[str], typing.Optional[T]]

TRUE_WORDS = frozenset(['true', 'yes', 'on', '1'])
FALSE_WORDS = frozenset(['false', 'no', 'off', '0'])


def read_text(text: str) -> str:
    """
    Return the text as is. This conversion never fails.
    """
    return text


def read_integer(text: str) -> typing.Optional[int]:
    """
    Parse a base 10 integer.

    >>> read_integer('42'), read_integer(' -7 '), read_integer('1_000')
    (42, -7, 1000)
    >>> read_integer('4.0') is None
    True
    """
    try:
        return int(text, 10)
    except ValueError:
        return None


def read_fraction(text: str) -> typing.Optional[fractions.Fraction]:
    """
    Parse a rational number, written either as a decimal or as a ratio.

    >>> read_fraction('1.5'), read_fraction('3/4')
    (Fraction(3, 2), Fraction(3, 4))
    """
    try:
        return fractions.Fraction(text.strip())
    except (ValueError, ZeroDivisionError):
        return None


def read_float(text: str) -> typing.Optional[float]:
    try:
        return float(text)
    except ValueError:
        return None


def read_complex(text: str) -> typing.Optional[complex]:
    try:
        return complex(text.strip())
    except ValueError:
        return None


def read_decimal(text: str) -> typing.Optional[decimal.Decimal]:
    try:
        return decimal.Decimal(text.strip())
    except decimal.InvalidOperation:
        return None


def read_bool(text: str) -> typing.Optional[bool]:
    """
    Parse a boolean word (`true`/`false`, `yes`/`no`, `on`/`off`, `1`/`0`),
    ignoring case.
    """
    word = text.strip().lower()
    if word in TRUE_WORDS:
        return True
    if word in FALSE_WORDS:
        return False
    return None


def read_literal(text: str) -> typing.Any:
    """
    Parse any Python literal (numbers, strings, tuples, lists, dicts, sets,
    booleans and `None`).

    Since `None` is itself a literal, the text `None` cannot be told apart from
    malformed input and is reported as a failure.
    """
    try:
        return ast.literal_eval(text.strip())
    except (ValueError, SyntaxError, TypeError, MemoryError, RecursionError):
        return None


READERS = {
    str: read_text,
    int: read_integer,
    float: read_float,
    complex: read_complex,
    bool: read_bool,
    fractions.Fraction: read_fraction,
    decimal.Decimal: read_decimal,
}


def register_reader(type_: type, func: Reader) -> None:
    """
    Register the conversion function used by `reader()` for *type_*.
    """
    READERS[type_] = func


def reader(type_: typing.Callable[[str], T]) -> Reader:
    """
    Get the conversion function for the target *type_*.

    Registered types use their registered reader. Any other type is called with
    the text as its only argument, with `ValueError` and `TypeError` taken as
    malformed input (e.g. `pathlib.Path`, `uuid.UUID`).
    """
    try:
        return READERS[type_]
    except (KeyError, TypeError):
        pass

    def read(text: str) -> typing.Optional[T]:
        try:
            return type_(text)
        except (ValueError, TypeError):
            return None

    read.__name__ = 'read_{}'.format(getattr(type_, '__name__', 'value'))
    return read


def compose(func: Reader, then: typing.Callable[[T], U]) -> Reader:
    """
    Chain a conversion function with a transform applied on success.
    """
    def read(text: str) -> typing.Optional[U]:
        value = func(text)
        if value is None:
            return None
        return then(value)

    return read


def integral(to: typing.Callable[[int], U] = int) -> Reader:
    """
    Get a reader parsing an integer and converting it with *to*.
    """
    return compose(read_integer, to)


def fractional(to: typing.Callable[[fractions.Fraction], U] = float) -> Reader:
    """
    Get a reader parsing a rational number and converting it with *to*.
    """
    return compose(read_fraction, to)
