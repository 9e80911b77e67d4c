"""
Demo commands for the cmdset example program.
Importing this package registers every command class.
"""
from cmdset.commands.base import COMMANDS, Command, register_command
from cmdset.commands.greet import GreetCommand
from cmdset.commands.version import VersionCommand
from cmdset.commands.echo import EchoCommand
from cmdset.commands.listing import CommandsCommand
