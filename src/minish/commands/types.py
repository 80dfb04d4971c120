"""Shared command-domain types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Protocol

from pydantic import BaseModel, ConfigDict

from minish.commands.parser import CommandCall

NOT_FOUND_EXIT_CODE = 127


class CommandStatus(StrEnum):
    """Normalized command execution status."""

    OK = "ok"
    ERROR = "error"


class OutcomeKind(StrEnum):
    """Which variant of a successful outcome is active."""

    TERMINATE = "terminate"
    TEXT = "text"
    RUN = "run"


class CommandResult(BaseModel):
    """Outcome or failure produced by dispatching one line."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    status: CommandStatus
    code: str
    message: str
    kind: OutcomeKind | None = None
    exit_code: int | None = None
    data: dict[str, Any] | None = None

    @property
    def is_error(self) -> bool:
        """Return whether this result is a per-line failure."""
        return self.status == CommandStatus.ERROR

    @classmethod
    def terminate(cls, exit_code: int) -> CommandResult:
        """Construct a termination request.

        Args:
            exit_code: Status the interpreter process should exit with.

        Returns:
            Terminate outcome.
        """
        return cls(
            status=CommandStatus.OK,
            code="terminate",
            message="",
            kind=OutcomeKind.TERMINATE,
            exit_code=exit_code,
        )

    @classmethod
    def text(
        cls,
        body: str,
        *,
        code: str = "ok",
        data: dict[str, Any] | None = None,
    ) -> CommandResult:
        """Construct a text outcome produced by a builtin.

        Args:
            body: Text shown to the user.
            code: Stable machine-readable success code.
            data: Optional structured payload for downstream consumers.

        Returns:
            Text outcome.
        """
        return cls(
            status=CommandStatus.OK,
            code=code,
            message=body,
            kind=OutcomeKind.TEXT,
            data=data,
        )

    @classmethod
    def run(
        cls,
        body: str,
        *,
        exit_code: int,
        code: str = "process_exited",
        data: dict[str, Any] | None = None,
    ) -> CommandResult:
        """Construct an external-run outcome.

        Args:
            body: Captured stdout on success, captured stderr otherwise.
            exit_code: Child return code.
            code: Stable machine-readable code.
            data: Optional structured payload for downstream consumers.

        Returns:
            Run outcome.
        """
        return cls(
            status=CommandStatus.OK,
            code=code,
            message=body,
            kind=OutcomeKind.RUN,
            exit_code=exit_code,
            data=data,
        )

    @classmethod
    def error(
        cls,
        message: str,
        *,
        code: str = "error",
        data: dict[str, Any] | None = None,
    ) -> CommandResult:
        """Construct a per-line failure.

        Args:
            message: User-facing error payload.
            code: Stable machine-readable error code.
            data: Optional structured payload for downstream consumers.

        Returns:
            Failure result.
        """
        return cls(status=CommandStatus.ERROR, code=code, message=message, data=data)


class RegistryView(Protocol):
    """Read-only registry surface handed to command handlers."""

    def lookup(self, name: str) -> CommandHandler | None:
        """Return the first handler registered under ``name``."""

    def names(self) -> tuple[str, ...]:
        """Return every registered name in registration order."""

    def builtin_names(self) -> tuple[str, ...]:
        """Return user-visible builtin names in registration order."""

    def is_builtin(self, name: str) -> bool:
        """Return whether ``name`` is a user-visible builtin."""


@dataclass(frozen=True)
class CommandContext:
    """Per-line state a handler may read."""

    registry: RegistryView
    search_path: str | None


class CommandHandler(Protocol):
    """Protocol implemented by builtin command handlers."""

    def execute(self, call: CommandCall, context: CommandContext) -> CommandResult:
        """Execute a command call.

        Args:
            call: Tokenized command call.
            context: Read-only registry view and injected search path.
        """
