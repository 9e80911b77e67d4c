"""
Exceptions raised by the command registry.
"""


class CmdSetError(Exception):
    """Base class for recoverable errors caused by the supplied arguments."""


class SubcommandNotSpecified(CmdSetError):
    def __init__(self):
        super().__init__("subcommand not specified")


class UnknownSubcommand(CmdSetError):
    def __init__(self, token):
        self.token = token
        super().__init__(f"invalid subcommand {token!r}")


class HelpRequested(CmdSetError):
    """The first argument asked for help. Not a real failure."""

    def __init__(self):
        super().__init__("help requested")


class UnexpectedArguments(CmdSetError):
    def __init__(self, args_list):
        self.args_list = list(args_list)
        super().__init__(f"arguments not supported - {self.args_list}")


class CommandRegistrationError(ValueError):
    """
    A subcommand was registered with an empty or already used name, or
    dispatched without a handler. This is a bug at the call site and is
    raised regardless of the error policy.
    """


class CmdSetAbort(RuntimeError):
    """Raised in place of a recoverable error under ErrorPolicy.ABORT."""
