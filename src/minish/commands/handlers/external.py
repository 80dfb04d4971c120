"""Fallback handler for names that are not builtins."""

from __future__ import annotations

from minish.commands.parser import CommandCall
from minish.commands.types import CommandContext, CommandResult
from minish.runtime.invoker import ExternalInvoker


class ExternalRunCommand:
    """Delegates a command call to the external invoker."""

    def __init__(self, invoker: ExternalInvoker) -> None:
        """Store the invoker dependency.

        Args:
            invoker: External program invoker.
        """
        self._invoker = invoker

    def execute(self, call: CommandCall, context: CommandContext) -> CommandResult:
        """Run the call as an external program.

        Args:
            call: Tokenized command call.
            context: Handler context supplying the search path.

        Returns:
            Run outcome or failure from the invoker.
        """
        return self._invoker.run(call, context.search_path)
