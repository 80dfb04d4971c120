"""External program invoker."""

from __future__ import annotations

import logging
from pathlib import Path

from minish.commands.parser import CommandCall
from minish.commands.types import NOT_FOUND_EXIT_CODE, CommandResult
from minish.runtime.locator import (
    ExecutableLocator,
    LocatorError,
    SearchPathMissingError,
)
from minish.runtime.run_cmd import (
    CompletedProcess,
    TimeoutExpired,
    child_env,
    run_subprocess,
)

_LOGGER = logging.getLogger(__name__)


class OutputDecodeError(ValueError):
    """Raised when captured child output is not valid UTF-8."""

    def __init__(self, stream: str, exc: UnicodeDecodeError) -> None:
        """Record which stream failed to decode.

        Args:
            stream: ``"stdout"`` or ``"stderr"``.
            exc: Underlying decode failure.
        """
        super().__init__(f"{stream} is not valid UTF-8: {exc.reason}")
        self.stream = stream


def _decode_strict(value: bytes | None, stream: str) -> str:
    if value is None:
        return ""
    try:
        return value.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise OutputDecodeError(stream, exc) from exc


def locator_failure(name: str, exc: LocatorError) -> CommandResult:
    """Convert a locator failure into a per-line failure result.

    Args:
        name: Command name being resolved.
        exc: Locator failure.

    Returns:
        Failure result with a stable code.
    """
    code = (
        "search_path_missing"
        if isinstance(exc, SearchPathMissingError)
        else "locator_failed"
    )
    return CommandResult.error(str(exc), code=code, data={"command": name})


class ExternalInvoker:
    """Resolve a program on the search path, run it, and capture its output."""

    def __init__(
        self,
        locator: ExecutableLocator,
        *,
        timeout_s: float | None = None,
    ) -> None:
        """Store locator and execution settings.

        Args:
            locator: Executable locator used for resolution.
            timeout_s: Optional timeout in seconds; ``None`` waits indefinitely.
        """
        self._locator = locator
        self._timeout_s = timeout_s

    def run(self, call: CommandCall, search_path: str | None) -> CommandResult:
        """Run ``call.name`` with ``call.args`` as an external program.

        Args:
            call: Tokenized command call; the name is the program to resolve.
            search_path: Injected search path.

        Returns:
            Run outcome, or a failure when resolution, spawning, waiting or
            decoding fails.
        """
        try:
            path = self._locator.locate(call.name, search_path)
        except LocatorError as exc:
            return locator_failure(call.name, exc)
        if path is None:
            return CommandResult.run(
                f"{call.name}: not found",
                exit_code=NOT_FOUND_EXIT_CODE,
                code="command_not_found",
                data={"command": call.name},
            )
        return self._spawn(call, path, search_path)

    def _spawn(
        self, call: CommandCall, path: Path, search_path: str | None
    ) -> CommandResult:
        """Spawn the resolved program and turn its completion into a result.

        Args:
            call: Tokenized command call.
            path: Resolved program path.
            search_path: Search path handed to the child as ``PATH``.

        Returns:
            Run outcome or failure.
        """
        argv = [str(path), *call.args]
        _LOGGER.debug("Spawning %s", argv)
        try:
            completed = run_subprocess(
                argv,
                env=child_env(search_path),
                timeout=self._timeout_s,
            )
        except TimeoutExpired as exc:
            return CommandResult.error(
                f"{call.name}: timed out after {exc.timeout}s",
                code="process_timeout",
                data={"command": call.name, "path": str(path)},
            )
        except OSError as exc:
            return CommandResult.error(
                f"{call.name}: {exc.strerror or exc}",
                code="spawn_failed",
                data={"command": call.name, "path": str(path)},
            )
        _LOGGER.debug("%s exited with %d", path, completed.returncode)
        return _completed_to_result(call, path, completed)


def _completed_to_result(
    call: CommandCall, path: Path, completed: CompletedProcess[bytes]
) -> CommandResult:
    """Pick stdout or stderr as the body based on the return code.

    Args:
        call: Tokenized command call.
        path: Resolved program path.
        completed: Finished child process.

    Returns:
        Run outcome carrying the preserved return code, or a decode failure.
    """
    succeeded = completed.returncode == 0
    stream = "stdout" if succeeded else "stderr"
    raw = completed.stdout if succeeded else completed.stderr
    try:
        body = _decode_strict(raw, stream)
    except OutputDecodeError as exc:
        return CommandResult.error(
            f"{call.name}: {exc}",
            code="output_decode_failed",
            data={
                "command": call.name,
                "stream": exc.stream,
                "returncode": completed.returncode,
            },
        )
    return CommandResult.run(
        body,
        exit_code=completed.returncode,
        code="process_exited" if succeeded else "process_failed",
        data={"command": call.name, "path": str(path)},
    )
