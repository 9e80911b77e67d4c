# Registry of subcommands and their argument parsers

import argparse
import logging
import os
import sys

from cmdset.config import (
    DEFAULT_ERROR_POLICY,
    EXIT_CODE_HELP,
    EXIT_CODE_USAGE,
    HELP_ALIASES,
    USAGE_HEADER,
    USAGE_HINT,
    USAGE_LINE,
    ErrorPolicy,
)
from cmdset.errors import (
    CmdSetAbort,
    CmdSetError,
    CommandRegistrationError,
    HelpRequested,
    SubcommandNotSpecified,
    UnexpectedArguments,
    UnknownSubcommand,
)

logger = logging.getLogger(__name__)


class Cmd:
    """
    A single subcommand with its own argument parser.

    After a successful parse, ``options`` holds the parsed namespace and
    ``args`` the positional arguments the parser left over.
    """

    def __init__(self, name, info, parser, allow_args=False, handler=None):
        self.name = name
        self.info = info
        self.parser = parser
        self.allow_args = allow_args
        self.handler = handler
        self.options = None
        self.args = []

    def __repr__(self):
        return f"Cmd(name={self.name!r}, allow_args={self.allow_args})"


class CmdSet:
    """
    A set of subcommands.

    Use ``add`` or the ``command`` decorator to register subcommands, then
    ``parse`` or ``handle`` to route the process arguments to one of them.
    """

    def __init__(self, output=None, prog=None, exit_func=None):
        """
        Args:
            output: Text stream usage information is written to. Defaults to sys.stderr.
            prog (str): Program name shown in usage. Defaults to the basename of sys.argv[0].
            exit_func: Called with the exit code under ErrorPolicy.EXIT. Defaults to sys.exit.
        """
        self.commands = {}
        self.output = output if output is not None else sys.stderr
        self.prog = prog
        self.name_length = 0
        self._exit = exit_func if exit_func is not None else sys.exit

    def add(self, info, parser, handler=None, allow_args=False):
        """
        Add a subcommand described by info, with options parsed by parser.

        The command name is taken from ``parser.prog``. Names must be unique
        within a CmdSet.

        Args:
            info (str): One-line description shown in usage
            parser (argparse.ArgumentParser): Parser for the subcommand's options
            handler: Callable invoked with the Cmd by ``handle``
            allow_args (bool): Whether leftover positional arguments are accepted

        Returns:
            Cmd: The added command

        Raises:
            CommandRegistrationError: If the name is empty or already in use
        """
        name = parser.prog
        if not name or name in self.commands:
            raise CommandRegistrationError(f"invalid command name {name!r}")

        self.name_length = max(self.name_length, len(name))
        cmd = Cmd(name, info, parser, allow_args=allow_args, handler=handler)
        self.commands[name] = cmd
        logger.debug("Registered subcommand %s", name)
        return cmd

    def command(self, info, parser, allow_args=False):
        """
        Register the decorated function as the handler of a new subcommand.

        Returns:
            The decorator, which returns the function unchanged
        """
        def decorator(func):
            self.add(info, parser, handler=func, allow_args=allow_args)
            return func
        return decorator

    def visit(self, func):
        """Run func on every command, e.g. to add global options."""
        for cmd in self.commands.values():
            func(cmd)

    def print_usage(self):
        """Write the list of available subcommands to the output stream."""
        prog = self.prog or os.path.basename(sys.argv[0] if sys.argv else "")
        self.output.write(USAGE_HEADER.format(prog=prog))
        for name in sorted(self.commands):
            self.output.write(USAGE_LINE.format(
                name=name.ljust(self.name_length),
                info=self.commands[name].info,
            ))
        self.output.write(USAGE_HINT)

    def resolve(self, arguments=None):
        """
        Find the subcommand named by arguments[0].

        Usage is printed before any error is raised.

        Raises:
            SubcommandNotSpecified: If arguments is empty
            HelpRequested: If arguments[0] is -h, --help or similar
            UnknownSubcommand: If no subcommand matches arguments[0]
        """
        if arguments is None:
            arguments = sys.argv[1:]

        try:
            return self._find(arguments)
        except CmdSetError:
            self.print_usage()
            raise

    def _find(self, arguments):
        if not arguments:
            raise SubcommandNotSpecified()

        requested = arguments[0]
        if requested.lstrip("-").lower() in HELP_ALIASES:
            raise HelpRequested()

        for name, cmd in self.commands.items():
            if name.casefold() == requested.casefold():
                logger.debug("Resolved %r to subcommand %s", requested, name)
                return cmd

        raise UnknownSubcommand(requested)

    def parse(self, arguments=None, error_policy=DEFAULT_ERROR_POLICY):
        """
        Parse the subcommand from arguments[0] and its options from arguments[1:].

        Must be called after all subcommands are added. If arguments is None,
        sys.argv[1:] is used.

        Args:
            arguments (list): Argument strings, without the program name
            error_policy (ErrorPolicy): How registry errors are surfaced

        Returns:
            Cmd: The matched command with ``options`` and ``args`` populated

        Raises:
            CmdSetError: Under ErrorPolicy.CONTINUE
            CmdSetAbort: Under ErrorPolicy.ABORT
            argparse.ArgumentError: If the subcommand's parser has exit_on_error disabled
        """
        error_policy = ErrorPolicy(error_policy)
        if arguments is None:
            arguments = sys.argv[1:]

        try:
            cmd = self.resolve(arguments)
        except CmdSetError as e:
            self._handle_error(e, error_policy)

        cmd.options, cmd.args = self._parse_options(cmd.parser, list(arguments[1:]))

        if cmd.args and not cmd.allow_args:
            cmd.parser.print_help(self.output)
            self._handle_error(UnexpectedArguments(cmd.args), error_policy)

        return cmd

    def handle(self, arguments=None, error_policy=DEFAULT_ERROR_POLICY):
        """
        Parse the arguments and call the handler of the matched command.

        Returns:
            Whatever the handler returns
        """
        cmd = self.parse(arguments, error_policy)
        if cmd.handler is None:
            raise CommandRegistrationError(f"no handler for command {cmd.name!r}")
        logger.debug("Dispatching to %s", cmd.name)
        return cmd.handler(cmd)

    @staticmethod
    def _parse_options(parser, tokens):
        """Run parser over tokens, splitting leftovers into unknown options and positionals."""
        options, extras = parser.parse_known_args(tokens)

        if "--" in extras:
            split = extras.index("--")
            flagged, positional = extras[:split], extras[split + 1:]
        else:
            flagged, positional = extras, []

        unknown = [token for token in flagged if _looks_like_option(parser, token)]
        if unknown:
            message = "unrecognized arguments: " + " ".join(unknown)
            if parser.exit_on_error:
                parser.error(message)
            raise argparse.ArgumentError(None, message)

        return options, [token for token in flagged if token not in unknown] + positional

    def _handle_error(self, error, error_policy):
        if error_policy is ErrorPolicy.EXIT:
            self._exit(EXIT_CODE_HELP if isinstance(error, HelpRequested) else EXIT_CODE_USAGE)
        elif error_policy is ErrorPolicy.ABORT:
            raise CmdSetAbort(str(error)) from error
        raise error


def _looks_like_option(parser, token):
    if len(token) < 2 or token[0] not in parser.prefix_chars:
        return False
    try:
        float(token)
    except ValueError:
        return True
    return False
