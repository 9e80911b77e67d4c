"""
EchoCommand implementation for the cmdset demo program.
Prints its positional arguments back.
"""

from cmdset.commands.base import Command, register_command


@register_command
class EchoCommand(Command):
    """Command that echoes its arguments."""

    name = 'echo'
    description = 'print the given words'
    allow_args = True

    @classmethod
    def register_arguments(cls, parser):
        parser.add_argument(
            '--upper',
            action='store_true',
            help='Print the words in upper case'
        )

    def execute(self, cmd):
        text = " ".join(cmd.args)
        if cmd.options.upper:
            text = text.upper()
        print(text)
        return 0
