"""Unit tests for the exit, echo and type builtins."""

from __future__ import annotations

from pathlib import Path

import pytest

from minish.commands.handlers.echo import EchoCommand
from minish.commands.handlers.exit import ExitCommand
from minish.commands.handlers.type import TypeCommand
from minish.commands.parser import CommandCall, parse_line
from minish.commands.registry import RUN_INTERNAL, build_default_registry
from minish.commands.types import (
    CommandContext,
    CommandStatus,
    OutcomeKind,
)
from minish.runtime.invoker import ExternalInvoker
from minish.runtime.locator import ExecutableLocator


def _context(search_path: str | None) -> CommandContext:
    """Build handler context over the default registry.

    Args:
        search_path: Search path to inject.

    Returns:
        Handler context.
    """
    locator = ExecutableLocator()
    registry = build_default_registry(locator, ExternalInvoker(locator))
    return CommandContext(registry=registry, search_path=search_path)


def _call(*tokens: str) -> CommandCall:
    """Build a call from explicit tokens."""
    return CommandCall(name=tokens[0], args=tokens[1:], raw=" ".join(tokens))


@pytest.mark.unit
@pytest.mark.parametrize(
    ("raw", "expected"), [("0", 0), ("42", 42), ("-1", -1), ("+5", 5)]
)
def test_exit_yields_terminate_with_code(raw: str, expected: int) -> None:
    """`exit <code>` requests termination with the parsed code."""
    result = ExitCommand().execute(_call("exit", raw), _context(None))

    assert result.kind == OutcomeKind.TERMINATE
    assert result.exit_code == expected


@pytest.mark.unit
@pytest.mark.parametrize(
    "tokens",
    [("exit",), ("exit", "1", "2"), ("exit", "", "0")],
)
def test_exit_wrong_arity_is_usage_failure(tokens: tuple[str, ...]) -> None:
    """Any arity other than two tokens fails and never terminates."""
    result = ExitCommand().execute(_call(*tokens), _context(None))

    assert result.status == CommandStatus.ERROR
    assert result.kind is None
    assert result.code == "invalid_args"
    assert result.message == "invalid exit command: exit <error_code>"


@pytest.mark.unit
@pytest.mark.parametrize(
    "raw", ["abc", "1.5", "", "2147483648", "1_0", "\u0663", " 0x1"]
)
def test_exit_non_integer_is_failure(raw: str) -> None:
    """Unparseable or out-of-range codes fail and never terminate."""
    result = ExitCommand().execute(_call("exit", raw), _context(None))

    assert result.status == CommandStatus.ERROR
    assert result.code == "invalid_exit_code"
    assert result.message == "invalid error code"


@pytest.mark.unit
def test_echo_preserves_interior_spacing() -> None:
    """Double spaces between words survive echo."""
    result = EchoCommand().execute(parse_line("echo a  b"), _context(None))

    assert result.kind == OutcomeKind.TEXT
    assert result.message == "a  b"


@pytest.mark.unit
def test_echo_without_args_yields_empty_text() -> None:
    """Bare echo succeeds with an empty body."""
    result = EchoCommand().execute(parse_line("echo"), _context(None))

    assert result.kind == OutcomeKind.TEXT
    assert result.message == ""


@pytest.mark.unit
def test_echo_keeps_extra_leading_spaces() -> None:
    """Only the single delimiter after the name is dropped."""
    result = EchoCommand().execute(parse_line("echo   hi"), _context(None))

    assert result.message == "  hi"


@pytest.mark.unit
@pytest.mark.parametrize("builtin", ["exit", "echo", "type"])
@pytest.mark.parametrize("with_shadowing_file", [False, True])
def test_type_reports_builtins_regardless_of_search_path(
    builtin: str,
    with_shadowing_file: bool,
    tmp_path: Path,
    make_script,
) -> None:
    """Builtins are reported as such even when a same-named file is on the path."""
    # Arrange - optionally shadow the builtin with an executable on the path
    search_path: str | None = None
    if with_shadowing_file:
        make_script(tmp_path, builtin, "exit 0")
        search_path = str(tmp_path)
    locator = ExecutableLocator()

    # Act - ask type about the builtin
    result = TypeCommand(locator).execute(
        _call("type", builtin), _context(search_path)
    )

    # Assert - always reported as builtin
    assert result.kind == OutcomeKind.TEXT
    assert result.message == f"{builtin} is a shell builtin"


@pytest.mark.unit
def test_type_reports_external_path(
    search_dirs: tuple[Path, Path], make_script
) -> None:
    """Non-builtin names resolve to their path on the search path."""
    first, second = search_dirs
    script = make_script(second, "tool", "exit 0")
    search_path = f"{first}:{second}"

    result = TypeCommand(ExecutableLocator()).execute(
        _call("type", "tool"), _context(search_path)
    )

    assert result.message == f"tool is {script}"
    assert result.code == "type_external"


@pytest.mark.unit
def test_type_reports_not_found(search_dirs: tuple[Path, Path]) -> None:
    """Unresolvable names produce a not-found text outcome."""
    first, _ = search_dirs

    result = TypeCommand(ExecutableLocator()).execute(
        _call("type", "nope"), _context(str(first))
    )

    assert result.kind == OutcomeKind.TEXT
    assert result.message == "nope: not found"


@pytest.mark.unit
def test_type_trims_the_queried_name() -> None:
    """Surrounding whitespace in the queried token is ignored."""
    result = TypeCommand(ExecutableLocator()).execute(
        _call("type", "echo\t"), _context(None)
    )

    assert result.message == "echo is a shell builtin"


@pytest.mark.unit
def test_type_hides_internal_sentinel() -> None:
    """The sentinel name is not reported as a builtin."""
    result = TypeCommand(ExecutableLocator()).execute(
        _call("type", RUN_INTERNAL), _context("")
    )

    assert result.message == f"{RUN_INTERNAL}: not found"


@pytest.mark.unit
def test_type_propagates_missing_search_path_as_failure() -> None:
    """Locator failures surface as per-line failures."""
    result = TypeCommand(ExecutableLocator()).execute(
        _call("type", "ls"), _context(None)
    )

    assert result.status == CommandStatus.ERROR
    assert result.code == "search_path_missing"
    assert result.message == "missing search path"


@pytest.mark.unit
@pytest.mark.parametrize("tokens", [("type",), ("type", "a", "b")])
def test_type_wrong_arity_is_usage_failure(tokens: tuple[str, ...]) -> None:
    """`type` requires exactly one name."""
    result = TypeCommand(ExecutableLocator()).execute(_call(*tokens), _context(None))

    assert result.status == CommandStatus.ERROR
    assert result.message == "invalid type command: type <command>"
