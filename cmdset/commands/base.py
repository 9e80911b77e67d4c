"""
Command base class for the cmdset demo program.
Defines the interface that all demo commands implement.
"""

import argparse
import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)

# Command classes in registration order, keyed by name
COMMANDS = {}


def register_command(command_class):
    """
    Register a command class for the demo program.

    Args:
        command_class: A subclass of Command to register

    Returns:
        The command class (to allow use as a decorator)
    """
    COMMANDS[command_class.name] = command_class
    return command_class


class Command(ABC):
    """
    Abstract base class for demo subcommands.

    Instances are callable with the parsed Cmd, so they can be registered
    directly as CmdSet handlers.
    """

    name = None
    description = ""
    # Whether positional arguments are accepted after the options
    allow_args = False

    def __init__(self, cmdset=None):
        """
        Args:
            cmdset (CmdSet): The registry the command is added to
        """
        self.cmdset = cmdset

    @classmethod
    def register_arguments(cls, parser):
        """
        Register command-specific arguments.
        Override in subclasses that take options.

        Args:
            parser (argparse.ArgumentParser): The argument parser to add arguments to
        """

    @abstractmethod
    def execute(self, cmd):
        """
        Execute the command.

        Args:
            cmd (Cmd): The parsed subcommand, with options and args populated

        Returns:
            int: Exit code (0 for success, non-zero for errors)
        """

    def build_parser(self):
        """
        Build the command's argument parser.

        Returns:
            argparse.ArgumentParser: The command's parser
        """
        parser = argparse.ArgumentParser(
            prog=self.name,
            description=self.description,
        )
        self.register_arguments(parser)
        return parser

    def __call__(self, cmd):
        logger.debug("Running %s with options %s and args %s", self.name, cmd.options, cmd.args)
        return self.execute(cmd)
