"""Handler for echo."""

from __future__ import annotations

from minish.commands.parser import TOKEN_DELIMITER, CommandCall
from minish.commands.types import CommandContext, CommandResult


class EchoCommand:
    """`echo <text...>` builtin."""

    def execute(self, call: CommandCall, context: CommandContext) -> CommandResult:
        """Echo the text after the command name with its spacing intact.

        The tokens are rejoined on the delimiter, so runs of spaces survive.

        Args:
            call: Tokenized command call.
            context: Unused handler context.

        Returns:
            Text outcome, or a usage failure when the rejoined line does not
            start with the command name.
        """
        del context
        line = TOKEN_DELIMITER.join(call.tokens)
        prefix = call.name + TOKEN_DELIMITER if call.args else call.name
        if not line.startswith(prefix):
            return CommandResult.error(
                "invalid echo command: echo <string>",
                code="invalid_args",
                data={"command": call.name},
            )
        return CommandResult.text(line[len(prefix) :], code="echoed")
