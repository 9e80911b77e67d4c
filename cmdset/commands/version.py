"""
VersionCommand implementation for the cmdset demo program.
"""

from cmdset import __version__
from cmdset.commands.base import Command, register_command


@register_command
class VersionCommand(Command):
    """Command that prints the program version."""

    name = 'version'
    description = 'print the version'

    def execute(self, cmd):
        print(f"cmdset v{__version__}")
        return 0
