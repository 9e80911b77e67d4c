"""
CommandsCommand implementation for the cmdset demo program.
Lists the registered subcommands as a table.
"""

from colorama import Fore, Style
from tabulate import tabulate

from cmdset.commands.base import Command, register_command


@register_command
class CommandsCommand(Command):
    """Command that lists every registered subcommand."""

    name = 'commands'
    description = 'list available subcommands'

    def execute(self, cmd):
        if self.cmdset is None:
            print(f"{Fore.RED}Error: no command set attached{Style.RESET_ALL}")
            return 1

        table_data = [
            [name, sub.info, "yes" if sub.allow_args else "no"]
            for name, sub in sorted(self.cmdset.commands.items())
        ]
        print(tabulate(table_data, headers=["Command", "Description", "Arguments"], tablefmt="simple"))
        return 0
