"""CLI result rendering and exit status policy."""

from __future__ import annotations

from rich.color import ColorSystem
from rich.console import Console
from rich.style import Style

from minish.cli.result_codes import ENVIRONMENT_ERROR_CODES, PROCESS_OUTPUT_CODES
from minish.commands.types import CommandResult, OutcomeKind

_ERROR_EXIT_STATUS = 1
_SIGNAL_EXIT_BASE = 128


def exit_status(result: CommandResult) -> int:
    """Map a result to the status a single-shot invocation exits with.

    Args:
        result: Dispatch result.

    Returns:
        Requested code for terminate, child code for external runs, ``0`` for
        text, ``1`` for failures. Children killed by a signal map to
        ``128 + signal``.
    """
    if result.is_error:
        return _ERROR_EXIT_STATUS
    if result.kind == OutcomeKind.TERMINATE:
        return result.exit_code or 0
    if result.kind == OutcomeKind.RUN:
        exit_code = result.exit_code or 0
        if exit_code < 0:
            return _SIGNAL_EXIT_BASE - exit_code
        return exit_code
    return 0


class CliRenderer:
    """Write results as plain lines with code-based styling."""

    def __init__(self, *, console: Console) -> None:
        """Store console used for rendering.

        Args:
            console: Rich console used for output rendering.
        """
        self._console = console

    def render(self, result: CommandResult) -> None:
        """Render one command result.

        Bodies are written byte-for-byte apart from trailing whitespace, so
        tabs and control characters reach the terminal unchanged. Terminate
        outcomes and empty bodies print nothing.

        Args:
            result: Dispatch result.
        """
        if result.kind == OutcomeKind.TERMINATE:
            return
        if result.is_error:
            style = (
                "bold red" if result.code in ENVIRONMENT_ERROR_CODES else "red"
            )
            self._write(result.message, style=style)
            return
        body = result.message.rstrip()
        if not body:
            return
        if result.code in PROCESS_OUTPUT_CODES and result.exit_code:
            self._write(body, style="yellow")
            return
        self._write(body)

    def _write(self, body: str, *, style: str | None = None) -> None:
        """Write one body line straight to the console file.

        Args:
            body: Text to write.
            style: Optional style applied only on colour terminals.
        """
        if style is not None and self._colors_enabled():
            body = Style.parse(style).render(body, color_system=ColorSystem.STANDARD)
        file = self._console.file
        file.write(body + "\n")
        file.flush()

    def _colors_enabled(self) -> bool:
        console = self._console
        return (
            console.is_terminal
            and not console.no_color
            and console.color_system is not None
        )
