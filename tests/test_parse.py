"""CmdSet resolve, parse and handle tests"""

import argparse
import io
import sys

import pytest

from cmdset import (
    CmdSet,
    CmdSetAbort,
    CmdSetError,
    CommandRegistrationError,
    ErrorPolicy,
    HelpRequested,
    SubcommandNotSpecified,
    UnexpectedArguments,
    UnknownSubcommand,
)


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def cmds(output):
    cmd_set = CmdSet(output=output, prog="X")
    greet = argparse.ArgumentParser(prog="greet", exit_on_error=False)
    greet.add_argument("-type", default="hello")
    cmd_set.add("says hello", greet, handler=lambda cmd: cmd.options.type)
    cmd_set.add("takes files", argparse.ArgumentParser(prog="files", exit_on_error=False), allow_args=True)
    cmd_set.add("no handler", argparse.ArgumentParser(prog="bare", exit_on_error=False))
    return cmd_set


def test_resolve_returns_matching_command(cmds, output):
    cmd = cmds.resolve(["greet", "-type=hi"])
    assert cmd is cmds.commands["greet"]
    assert output.getvalue() == ""


def test_resolve_is_case_insensitive(cmds):
    assert cmds.resolve(["GrEeT"]) is cmds.commands["greet"]


def test_resolve_empty(cmds, output):
    with pytest.raises(SubcommandNotSpecified):
        cmds.resolve([])
    assert output.getvalue().startswith("available subcommands for X:\n")


def test_resolve_unknown(cmds, output):
    with pytest.raises(UnknownSubcommand) as exc_info:
        cmds.resolve(["bogus"])
    assert exc_info.value.token == "bogus"
    assert "bogus" in str(exc_info.value)
    assert "\tgreet - says hello\n" in output.getvalue()


@pytest.mark.parametrize("token", ["-h", "--help", "HELP", "h", "-HeLP", "---h"])
def test_resolve_help(cmds, output, token):
    with pytest.raises(HelpRequested):
        cmds.resolve([token])
    assert output.getvalue().startswith("available subcommands for X:\n")


def test_resolve_defaults_to_sys_argv(cmds, monkeypatch):
    monkeypatch.setattr(sys, "argv", ["prog", "files", "a"])
    assert cmds.resolve() is cmds.commands["files"]


def test_errors_share_base_class():
    for error_class in (SubcommandNotSpecified, UnknownSubcommand, HelpRequested, UnexpectedArguments):
        assert issubclass(error_class, CmdSetError)


def test_parse_populates_options(cmds):
    cmd = cmds.parse(["greet", "-type=hi"])
    assert cmd is cmds.commands["greet"]
    assert cmd.options.type == "hi"
    assert cmd.args == []


def test_parse_accepts_policy_by_value(cmds):
    assert cmds.parse(["greet"], "continue").options.type == "hello"


def test_parse_rejects_extra_args(cmds, output):
    with pytest.raises(UnexpectedArguments) as exc_info:
        cmds.parse(["greet", "one", "two"])
    assert exc_info.value.args_list == ["one", "two"]
    usage = output.getvalue()
    assert "usage: greet" in usage
    assert "-h, --help" in usage
    assert "-type TYPE" in usage


def test_parse_allows_extra_args(cmds):
    cmd = cmds.parse(["files", "one", "two"])
    assert cmd.args == ["one", "two"]


def test_parse_negative_number_is_positional(cmds):
    cmd = cmds.parse(["files", "-5"])
    assert cmd.args == ["-5"]


def test_parse_unknown_option_surfaces_parser_error(cmds, output):
    with pytest.raises(argparse.ArgumentError):
        cmds.parse(["greet", "--bogus"], ErrorPolicy.ABORT)
    assert output.getvalue() == ""


def test_parse_unknown_option_exits_with_parser_policy(output):
    cmd_set = CmdSet(output=output, prog="X")
    cmd_set.add("", argparse.ArgumentParser(prog="strict"))
    with pytest.raises(SystemExit) as exc_info:
        cmd_set.parse(["strict", "--bogus"])
    assert exc_info.value.code == 2


@pytest.mark.parametrize(
    "args, error_class",
    [
        ([], SubcommandNotSpecified),
        (["foo"], UnknownSubcommand),
        (["greet", "extra"], UnexpectedArguments),
    ],
)
def test_parse_abort_policy(cmds, args, error_class):
    with pytest.raises(CmdSetAbort) as exc_info:
        cmds.parse(args, ErrorPolicy.ABORT)
    assert isinstance(exc_info.value.__cause__, error_class)


@pytest.mark.parametrize(
    "args, error_class",
    [
        ([], SubcommandNotSpecified),
        (["foo"], UnknownSubcommand),
        (["greet", "extra"], UnexpectedArguments),
    ],
)
def test_parse_continue_policy(cmds, args, error_class):
    with pytest.raises(error_class):
        cmds.parse(args, ErrorPolicy.CONTINUE)


@pytest.mark.parametrize("args", [[], ["foo"], ["greet", "extra"]])
def test_parse_exit_policy_exits_with_usage_code(cmds, args):
    with pytest.raises(SystemExit) as exc_info:
        cmds.parse(args, ErrorPolicy.EXIT)
    assert exc_info.value.code == 2


def test_parse_exit_policy_help_exits_cleanly(cmds):
    with pytest.raises(SystemExit) as exc_info:
        cmds.parse(["-HeLP"], ErrorPolicy.EXIT)
    assert exc_info.value.code == 0


def test_parse_exit_policy_uses_exit_func(output):
    codes = []
    cmd_set = CmdSet(output=output, exit_func=codes.append)
    with pytest.raises(HelpRequested):
        cmd_set.parse(["--help"], ErrorPolicy.EXIT)
    with pytest.raises(UnknownSubcommand):
        cmd_set.parse(["nope"], ErrorPolicy.EXIT)
    assert codes == [0, 2]


def test_handle_returns_handler_result(cmds):
    assert cmds.handle(["greet", "-type", "hi"]) == "hi"


def test_handle_does_not_call_handler_on_error(output):
    calls = []
    cmd_set = CmdSet(output=output)
    cmd_set.add("", argparse.ArgumentParser(prog="a"), handler=calls.append)
    with pytest.raises(UnexpectedArguments):
        cmd_set.handle(["a", "b"])
    assert calls == []


def test_handle_without_handler(cmds):
    with pytest.raises(CommandRegistrationError):
        cmds.handle(["bare"])
