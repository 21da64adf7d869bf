"""
This module defines the text wrappers used to describe arguments and programs.
"""

import typing


class ArgName(str):
    """
    The name of a command-line argument.

    The name is used to infer the long flag, the short flag and the metavariable
    of the argument. Per example, a name of `name` creates a `--name` flag with a
    `-n` short flag and a `NAME` metavariable.
    """

    @property
    def long_flag(self) -> str:
        """
        Get the long flag, `--<name>`.
        """
        return '--{}'.format(self)

    @property
    def short_flag(self) -> typing.Optional[str]:
        """
        Get the short flag built from the first character of the name, or `None`
        if the name is empty.
        """
        if not self:
            return None
        return '-{}'.format(self[0])

    @property
    def metavar(self) -> str:
        """
        Get the metavariable shown in usage and help output.
        """
        return self.upper()


class Description(str):
    """
    A brief description of what the program does, shown as the header of the
    `--help` output.
    """


class HelpMessage(str):
    """
    A message explaining what an argument does, shown beside it in the
    `--help` output.
    """


def help_message(value: typing.Optional[str]) -> typing.Optional[HelpMessage]:
    """
    Wrap an optional help text. `None` stays absent; any string, including the
    empty string, is a present message.
    """
    if value is None:
        return None
    return HelpMessage(value)
