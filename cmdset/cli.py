"""
Demo CLI entry point built on CmdSet.
"""

import logging
import sys

from colorama import Fore, Style, just_fix_windows_console

from cmdset import CmdSet, ErrorPolicy
from cmdset.commands import COMMANDS
from cmdset.errors import CmdSetError, HelpRequested


def add_global_options(cmd):
    """Add options shared by every subcommand."""
    cmd.parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging'
    )


def configure_logging(verbose):
    """Send cmdset debug logging to stderr when verbose is set."""
    logging.basicConfig(format="%(levelname)s:%(name)s:%(message)s")
    logging.getLogger("cmdset").setLevel(logging.DEBUG if verbose else logging.WARNING)


def build_cmdset(output=None, prog=None):
    """
    Create a CmdSet holding all registered demo commands.

    Args:
        output: Stream usage is written to (defaults to stderr)
        prog (str): Program name shown in usage

    Returns:
        CmdSet: The populated command set
    """
    cmds = CmdSet(output=output, prog=prog)
    for command_class in COMMANDS.values():
        command = command_class(cmds)
        cmds.add(
            command.description,
            command.build_parser(),
            handler=command,
            allow_args=command.allow_args,
        )
    cmds.visit(add_global_options)
    return cmds


def main(argv=None):
    """Main CLI entry point."""
    just_fix_windows_console()
    cmds = build_cmdset()

    try:
        cmd = cmds.parse(argv, ErrorPolicy.CONTINUE)
    except HelpRequested:
        return 0
    except CmdSetError as e:
        print(f"\n{Fore.RED}Error: {e}{Style.RESET_ALL}", file=sys.stderr)
        return 1

    configure_logging(cmd.options.verbose)
    return cmd.handler(cmd)


if __name__ == "__main__":
    sys.exit(main())
