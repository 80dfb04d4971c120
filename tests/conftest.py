"""Pytest configuration and shared fixtures."""

from collections.abc import Callable
from pathlib import Path

import pytest

ScriptFactory = Callable[[Path, str, str], Path]


def write_script(directory: Path, name: str, body: str) -> Path:
    """Write an executable /bin/sh script into a directory.

    Args:
        directory: Target directory, created when missing.
        name: Script file name.
        body: Shell script body (without shebang).

    Returns:
        Path of the executable script.
    """
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_text(f"#!/bin/sh\n{body}\n", encoding="utf-8")
    path.chmod(0o755)
    return path


@pytest.fixture
def make_script() -> ScriptFactory:
    """Factory writing executable shell scripts for search-path tests."""
    return write_script


@pytest.fixture
def search_dirs(tmp_path: Path) -> tuple[Path, Path]:
    """Two empty candidate directories, in search order."""
    first = tmp_path / "d1"
    second = tmp_path / "d2"
    first.mkdir()
    second.mkdir()
    return first, second
