"""
GreetCommand implementation for the cmdset demo program.
"""

from colorama import Fore, Style

from cmdset.commands.base import Command, register_command

GREETINGS = {
    'hi': 'Hi',
    'hello': 'Hello',
}


@register_command
class GreetCommand(Command):
    """Command that greets someone."""

    name = 'greet'
    description = 'print a greeting'

    @classmethod
    def register_arguments(cls, parser):
        """Register command-specific arguments."""
        parser.add_argument(
            '-type', '--type',
            dest='greeting',
            choices=sorted(GREETINGS),
            default='hello',
            help='Kind of greeting'
        )
        parser.add_argument(
            '--name',
            default='world',
            help='Who to greet'
        )

    def execute(self, cmd):
        greeting = GREETINGS[cmd.options.greeting]
        print(f"{Fore.GREEN}{greeting}, {cmd.options.name}!{Style.RESET_ALL}")
        return 0
