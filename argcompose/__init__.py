"""
Declarative option parsers for argparse.

argcompose lets one describe command-line arguments as small parser values (a
switch, a typed option, a positional argument) and combine them into a parser for
a structured result such as a tuple or a record. Long flags, short flags,
metavariables and the `--help` output are derived from the argument names, and
the actual parsing is left to the standard `argparse` module.

Example:

    parser = apply(Greeting, opt_text('name', 'your first name'),
                   opt_integral('age', 'your current age'))
    greeting = options('Greeting script', parser)
"""

from .types import ArgName
from .types import Description
from .types import HelpMessage
from .core import Parser
from .core import DefinitionError
from .core import apply
from .core import pair
from .core import pure
from .core import optional
from .options import switch
from .options import opt
from .options import opt_text
from .options import opt_read
from .options import opt_integral
from .options import opt_fractional
from .options import arg
from .options import arg_text
from .options import arg_read
from .options import arg_integral
from .options import arg_fractional
from .runner import Success
from .runner import HelpRequested
from .runner import ParseError
from .runner import parse
from .runner import options
