"""CLI bootstrap helpers: logging, config resolution, dispatcher wiring."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path

import yaml
from rich.console import Console
from rich.logging import RichHandler

from minish.commands.registry import build_default_registry
from minish.config import ShellConfig, load_shell_config, resolve_search_path
from minish.runtime.dispatcher import Dispatcher
from minish.runtime.invoker import ExternalInvoker
from minish.runtime.locator import ExecutableLocator

_LOGGING_CONFIGURED = False


def configure_logging(*, verbose: bool = False) -> None:
    """Configure Rich-backed logging on stderr once per process.

    Args:
        verbose: Emit DEBUG records instead of warnings only.
    """
    global _LOGGING_CONFIGURED  # noqa: PLW0603
    level = logging.DEBUG if verbose else logging.WARNING
    if _LOGGING_CONFIGURED:
        logging.getLogger().setLevel(level)
        return
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=Console(stderr=True),
                show_path=False,
                rich_tracebacks=True,
            )
        ],
    )
    _LOGGING_CONFIGURED = True


def default_config_file(root: Path) -> Path:
    """Return default config path for a workspace root.

    Args:
        root: Workspace root directory.

    Returns:
        Existing YAML or JSON config path, YAML path when neither exists.
    """
    config_dir = root / ".minish"
    yaml_path = config_dir / "config.yaml"
    json_path = config_dir / "config.json"
    if yaml_path.exists():
        return yaml_path
    if json_path.exists():
        return json_path
    return yaml_path


def load_effective_config(
    *,
    config_file: Path | None,
    search_path: str | None,
) -> ShellConfig:
    """Load config and apply command-line overrides.

    Args:
        config_file: Optional config path; defaults under the current directory.
        search_path: Optional search path override.

    Returns:
        Effective shell config.

    Raises:
        ShellConfigError: If the config file cannot be decoded or validated.
    """
    config = load_shell_config(config_file or default_config_file(Path.cwd()))
    if search_path is not None:
        config = config.model_copy(update={"search_path": search_path})
    return config


def build_dispatcher(config: ShellConfig, environ: Mapping[str, str]) -> Dispatcher:
    """Wire locator, invoker, registry and dispatcher from config.

    Args:
        config: Effective shell config.
        environ: Process environment the search path falls back to.

    Returns:
        Dispatcher ready to handle input lines.
    """
    locator = ExecutableLocator(
        skip_unreadable_dirs=config.locator.skip_unreadable_dirs
    )
    invoker = ExternalInvoker(locator, timeout_s=config.execution.timeout_s)
    registry = build_default_registry(locator, invoker)
    return Dispatcher(registry, search_path=resolve_search_path(config, environ))


def bootstrap_config(
    *,
    config_file: Path,
    overwrite_config: bool = False,
) -> tuple[tuple[str, str], ...]:
    """Write the default config template.

    Args:
        config_file: Target config path.
        overwrite_config: Whether to overwrite an existing config payload.

    Returns:
        Action rows as ``(resource, status)`` pairs.
    """
    actions: list[tuple[str, str]] = []
    config_dir = config_file.parent
    dir_existed = config_dir.exists()
    config_dir.mkdir(parents=True, exist_ok=True)
    actions.append(("config_dir", "exists" if dir_existed else "created"))
    config_existed = config_file.exists()
    if not config_existed or overwrite_config:
        payload = ShellConfig().model_dump(mode="json")
        if config_file.suffix.lower() == ".json":
            rendered = json.dumps(payload, indent=2) + "\n"
        else:
            rendered = yaml.safe_dump(payload, sort_keys=False)
        config_file.write_text(rendered, encoding="utf-8")
        actions.append(
            (
                "config_file",
                "overwritten" if config_existed else "created",
            )
        )
    else:
        actions.append(("config_file", "exists"))
    return tuple(actions)
