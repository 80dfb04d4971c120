"""Handler for type."""

from __future__ import annotations

from minish.commands.parser import CommandCall
from minish.commands.types import CommandContext, CommandResult
from minish.runtime.invoker import locator_failure
from minish.runtime.locator import ExecutableLocator, LocatorError


class TypeCommand:
    """`type <name>` builtin."""

    def __init__(self, locator: ExecutableLocator) -> None:
        """Store locator used for non-builtin names.

        Args:
            locator: Executable locator.
        """
        self._locator = locator

    def execute(self, call: CommandCall, context: CommandContext) -> CommandResult:
        """Describe how a command name would be resolved.

        Args:
            call: Tokenized command call.
            context: Registry view and injected search path.

        Returns:
            Text outcome naming a builtin, a path, or "not found"; a failure on
            wrong arity or locator failure.
        """
        if len(call.tokens) != 2:
            return CommandResult.error(
                "invalid type command: type <command>",
                code="invalid_args",
                data={"command": call.name},
            )
        name = call.args[0].strip()
        if context.registry.is_builtin(name):
            return CommandResult.text(
                f"{name} is a shell builtin",
                code="type_builtin",
                data={"name": name},
            )
        try:
            path = self._locator.locate(name, context.search_path)
        except LocatorError as exc:
            return locator_failure(name, exc)
        if path is None:
            return CommandResult.text(
                f"{name}: not found",
                code="type_not_found",
                data={"name": name},
            )
        return CommandResult.text(
            f"{name} is {path}",
            code="type_external",
            data={"name": name, "path": str(path)},
        )
