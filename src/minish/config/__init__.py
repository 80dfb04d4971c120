"""Shell configuration loading."""

from minish.config.shell_config import (
    SEARCH_PATH_ENV_VAR,
    ExecutionSettings,
    LocatorSettings,
    ShellConfig,
    ShellConfigError,
    load_shell_config,
    resolve_search_path,
)

__all__ = [
    "SEARCH_PATH_ENV_VAR",
    "ExecutionSettings",
    "LocatorSettings",
    "ShellConfig",
    "ShellConfigError",
    "load_shell_config",
    "resolve_search_path",
]
