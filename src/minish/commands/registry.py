"""Command registry."""

from __future__ import annotations

from minish.commands.handlers.echo import EchoCommand
from minish.commands.handlers.exit import ExitCommand
from minish.commands.handlers.external import ExternalRunCommand
from minish.commands.handlers.type import TypeCommand
from minish.commands.types import CommandHandler
from minish.runtime.invoker import ExternalInvoker
from minish.runtime.locator import ExecutableLocator

# Holds the fallback handler for external programs; never shown to users.
RUN_INTERNAL = "__run_internal__"


class CommandRegistry:
    """Ordered name to handler entries.

    Lookup returns the earliest entry with a matching name, so a duplicate
    registered later is unreachable.
    """

    def __init__(self) -> None:
        """Create an empty registry."""
        self._entries: list[tuple[str, CommandHandler]] = []

    def register(self, name: str, handler: CommandHandler) -> None:
        """Append an entry.

        Args:
            name: Command name.
            handler: Handler invoked for that name.
        """
        self._entries.append((name, handler))

    def lookup(self, name: str) -> CommandHandler | None:
        """Return the first handler registered under ``name``.

        Args:
            name: Command name.

        Returns:
            Handler, or ``None`` when no entry matches.
        """
        for entry_name, handler in self._entries:
            if entry_name == name:
                return handler
        return None

    def names(self) -> tuple[str, ...]:
        """Return every registered name in registration order, sentinel included."""
        return tuple(name for name, _ in self._entries)

    def builtin_names(self) -> tuple[str, ...]:
        """Return user-visible builtin names in registration order."""
        return tuple(name for name in self.names() if name != RUN_INTERNAL)

    def is_builtin(self, name: str) -> bool:
        """Return whether ``name`` is a user-visible builtin.

        Args:
            name: Command name.
        """
        return name in self.builtin_names()


def build_default_registry(
    locator: ExecutableLocator,
    invoker: ExternalInvoker,
) -> CommandRegistry:
    """Build the registry with the standard builtins.

    Args:
        locator: Executable locator used by `type`.
        invoker: External invoker registered under the sentinel name.

    Returns:
        Registry holding `exit`, `echo`, `type` and the sentinel entry.
    """
    registry = CommandRegistry()
    registry.register("exit", ExitCommand())
    registry.register("echo", EchoCommand())
    registry.register("type", TypeCommand(locator))
    registry.register(RUN_INTERNAL, ExternalRunCommand(invoker))
    return registry
