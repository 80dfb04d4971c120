"""Single place for subprocess invocation.

Uses shell=False, list args, and a controlled env. All bandit suppressions live here.
"""

from __future__ import annotations

import os
import subprocess  # nosec B404 - used with shell=False, list args, controlled env
from collections.abc import Mapping, Sequence

# Re-export so callers can catch/annotate without importing subprocess elsewhere.
TimeoutExpired = subprocess.TimeoutExpired
CompletedProcess = subprocess.CompletedProcess


def child_env(
    search_path: str | None,
    base: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Build the environment for a child process.

    The child inherits ``base`` (the current environment by default) with
    ``PATH`` pinned to the interpreter's injected search path.

    Args:
        search_path: Search path the interpreter resolved commands with.
        base: Environment to inherit from.

    Returns:
        Environment mapping for the child.
    """
    env = dict(os.environ if base is None else base)
    if search_path is None:
        env.pop("PATH", None)
    else:
        env["PATH"] = search_path
    return env


def run_subprocess(
    argv: Sequence[str],
    *,
    env: dict[str, str] | None = None,
    timeout: float | None = None,
) -> subprocess.CompletedProcess[bytes]:
    """Run a subprocess with shell=False and no terminal on stdin.

    Output is captured as raw bytes; decoding is the caller's decision.
    Returncode is not checked; caller inspects result.returncode.

    Args:
        argv: Program path and arguments as a list (no shell parsing).
        env: Environment dict; defaults to the current environment.
        timeout: Optional timeout in seconds. ``None`` waits indefinitely.

    Returns:
        CompletedProcess with stdout, stderr, returncode.
    """
    return subprocess.run(  # noqa: PLW1510  # nosec B603 - shell=False, list args, controlled env
        list(argv),
        env=env,
        stdin=subprocess.DEVNULL,
        capture_output=True,
        timeout=timeout,
        shell=False,
    )
