"""Result code groupings used by CLI rendering policy."""

from __future__ import annotations

ENVIRONMENT_ERROR_CODES = frozenset(
    {
        "search_path_missing",
        "locator_failed",
        "spawn_failed",
        "process_timeout",
        "output_decode_failed",
    }
)

PROCESS_OUTPUT_CODES = frozenset(
    {
        "process_exited",
        "process_failed",
        "command_not_found",
    }
)
