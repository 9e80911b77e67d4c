"""
cmdset - subcommand dispatch on top of argparse.
"""

__version__ = "0.3.0"

from cmdset.config import ErrorPolicy
from cmdset.errors import (
    CmdSetAbort,
    CmdSetError,
    CommandRegistrationError,
    HelpRequested,
    SubcommandNotSpecified,
    UnexpectedArguments,
    UnknownSubcommand,
)
from cmdset.registry import Cmd, CmdSet

__all__ = [
    "Cmd",
    "CmdSet",
    "CmdSetAbort",
    "CmdSetError",
    "CommandRegistrationError",
    "ErrorPolicy",
    "HelpRequested",
    "SubcommandNotSpecified",
    "UnexpectedArguments",
    "UnknownSubcommand",
]
