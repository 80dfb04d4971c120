"""Handler for exit."""

from __future__ import annotations

import re

from minish.commands.parser import CommandCall
from minish.commands.types import CommandContext, CommandResult

_MIN_EXIT_CODE = -(2**31)
_MAX_EXIT_CODE = 2**31 - 1
_EXIT_CODE_PATTERN = re.compile(r"[+-]?[0-9]+")


class ExitCommand:
    """`exit <code>` builtin."""

    def execute(self, call: CommandCall, context: CommandContext) -> CommandResult:
        """Request interpreter termination with a status code.

        Args:
            call: Tokenized command call.
            context: Unused handler context.

        Returns:
            Terminate outcome, or a usage failure.
        """
        del context
        if len(call.tokens) != 2:
            return CommandResult.error(
                "invalid exit command: exit <error_code>",
                code="invalid_args",
                data={"command": call.name},
            )
        raw_code = call.args[0].strip()
        exit_code = None
        if _EXIT_CODE_PATTERN.fullmatch(raw_code):
            exit_code = int(raw_code)
        if exit_code is None or not _MIN_EXIT_CODE <= exit_code <= _MAX_EXIT_CODE:
            return CommandResult.error(
                "invalid error code",
                code="invalid_exit_code",
                data={"value": raw_code},
            )
        return CommandResult.terminate(exit_code)
