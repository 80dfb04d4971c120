"""Shell config models and loading helpers."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

SEARCH_PATH_ENV_VAR = "PATH"


class LocatorSettings(BaseModel):
    """Executable lookup behavior."""

    model_config = ConfigDict(extra="forbid")

    skip_unreadable_dirs: bool = True


class ExecutionSettings(BaseModel):
    """External program execution behavior."""

    model_config = ConfigDict(extra="forbid")

    timeout_s: float | None = Field(default=None, gt=0)


class ShellConfig(BaseModel):
    """Root shell configuration model."""

    model_config = ConfigDict(extra="forbid")

    prompt: str = "$ "
    search_path: str | None = None
    locator: LocatorSettings = LocatorSettings()
    execution: ExecutionSettings = ExecutionSettings()


class ShellConfigError(RuntimeError):
    """Raised when shell config cannot be decoded or validated."""


def _decode_config_payload(path: Path) -> dict[str, object]:
    """Decode shell config payload from JSON or YAML.

    Args:
        path: Config file path.

    Returns:
        Parsed mapping payload.

    Raises:
        ShellConfigError: If decode fails or payload is not an object.
    """
    raw = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ShellConfigError(f"Invalid shell config JSON: {exc}") from exc
    else:
        try:
            payload = yaml.safe_load(raw)
        except yaml.YAMLError as exc:
            raise ShellConfigError(f"Invalid shell config YAML: {exc}") from exc
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ShellConfigError("Invalid shell config payload: root must be an object")
    return payload


def load_shell_config(path: Path) -> ShellConfig:
    """Load shell config from disk, defaulting when missing.

    Args:
        path: Config file path.

    Returns:
        Parsed config payload, or defaults when file does not exist.

    Raises:
        ShellConfigError: If payload decode or validation fails.
    """
    if not path.exists():
        return ShellConfig()
    payload = _decode_config_payload(path)
    try:
        return ShellConfig.model_validate(payload)
    except ValidationError as exc:
        raise ShellConfigError(f"Invalid shell config payload: {exc}") from exc


def resolve_search_path(
    config: ShellConfig,
    environ: Mapping[str, str],
) -> str | None:
    """Pick the search path the interpreter resolves programs with.

    Args:
        config: Loaded shell config.
        environ: Process environment.

    Returns:
        Config override when set, else the ``PATH`` variable, else ``None``.
    """
    if config.search_path is not None:
        return config.search_path
    return environ.get(SEARCH_PATH_ENV_VAR)
