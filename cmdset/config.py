# cmdset/config.py
"""Error policies and fixed strings used by the command registry."""

import enum

# Exit code used by ErrorPolicy.EXIT for everything except a help request
EXIT_CODE_USAGE = 2
EXIT_CODE_HELP = 0

# First-argument spellings (after stripping leading dashes) that ask for help
HELP_ALIASES = ("h", "help")

USAGE_HEADER = "available subcommands for {prog}:\n"
USAGE_LINE = "\t{name} - {info}\n"
USAGE_HINT = 'use "<subcommand> --help" for available options of the specific command'


class ErrorPolicy(enum.Enum):
    """How a recoverable registry error is surfaced."""

    CONTINUE = "continue"
    EXIT = "exit"
    ABORT = "abort"


DEFAULT_ERROR_POLICY = ErrorPolicy.CONTINUE
