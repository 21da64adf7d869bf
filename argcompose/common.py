"""
This module contains common parser definitions for things such as logging.
"""

import sys
import logging
import typing

from .core import Parser
from .core import apply
from .core import optional
from .options import opt
from .options import switch


LEVELS = ('debug', 'info', 'warning', 'error', 'critical')

FORMAT = '%(asctime)-25s %(levelname)-10s %(name)-20s: %(message)s'


def read_level(text: str) -> typing.Optional[str]:
    """
    Parse a log level name, ignoring case.
    """
    level = text.strip().lower()
    if level not in LEVELS:
        return None
    return level


def pick_level(log_level: typing.Optional[str], quiet: bool, verbose: bool) -> str:
    """
    Resolve the log level: an explicit level first, then verbose, then quiet.
    """
    return log_level or ('debug' if verbose else 'warning' if quiet else 'info')


def log_level(*, with_help: bool = True) -> Parser[str]:
    """
    Get a parser for the `--log-level`, `--quiet` and `--verbose` arguments,
    returning the resulting log level name.

    When *with_help* is false, the arguments are registered without help text.
    """
    helps = {
        'log-level': 'the log level to use ({})'.format(', '.join(LEVELS)),
        'quiet': 'suppress the output except warnings and errors',
        'verbose': 'enable additional debug output',
    }
    if not with_help:
        helps = dict.fromkeys(helps)

    return apply(
        pick_level,
        optional(opt(read_level, 'log-level', helps['log-level'])),
        switch('quiet', helps['quiet']),
        switch('verbose', helps['verbose']),
    )


def configure_logging(level: str, name: str = None, *, formatter: logging.Formatter = None,
                      handler: logging.Handler = None, log_file: str = None,
                      log_std: bool = False) -> logging.Logger:
    """
    Configure a logger from a parsed log level.

    The *name* argument is the name of the logger to configure. By default, the
    root logger is used.

    The *formatter* argument is an instance of `Formatter` that will be used.
    If omitted, it is automatically configured.

    The *handler* argument is an instance of a `Handler` that will be used for
    output. If omitted, it will log messages to stderr.

    When *log_file* is given, messages are also written to that file, and only
    to that file unless *log_std* is true.
    """
    formatter = formatter or logging.Formatter(FORMAT)
    logger = logging.getLogger(name)

    if not log_file or log_std:
        handler = handler or logging.StreamHandler(sys.stderr)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    if log_file:
        handler = logging.FileHandler(log_file)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(level.upper())
    return logger
