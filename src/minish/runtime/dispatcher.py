"""Dispatcher routing one input line to a builtin or an external program."""

from __future__ import annotations

import logging

from minish.commands.parser import CommandCall, CommandParseError, parse_line
from minish.commands.registry import RUN_INTERNAL, CommandRegistry
from minish.commands.types import CommandContext, CommandHandler, CommandResult

_LOGGER = logging.getLogger(__name__)


class Dispatcher:
    """Resolve token 0 against the registry, falling through to external runs."""

    def __init__(self, registry: CommandRegistry, *, search_path: str | None) -> None:
        """Store the registry and the injected search path.

        Args:
            registry: Command registry built at startup.
            search_path: Colon-delimited search path, ``None`` when unset.
        """
        self._registry = registry
        self._context = CommandContext(registry=registry, search_path=search_path)

    def handle_input(self, line: str) -> CommandResult:
        """Tokenize and dispatch one input line.

        Args:
            line: Input line without its terminator.

        Returns:
            Outcome of the command, or a failure.
        """
        try:
            call = parse_line(line)
        except CommandParseError as exc:
            return CommandResult.error(str(exc), code="command_not_specified")
        return self.dispatch(call)

    def dispatch(self, call: CommandCall) -> CommandResult:
        """Run a tokenized call through the matching handler.

        Args:
            call: Tokenized command call.

        Returns:
            Outcome of the command, or a failure.
        """
        handler = self._resolve(call.name)
        if handler is None:
            return CommandResult.error(
                f"{call.name}: command not found",
                code="unknown_command",
                data={"command": call.name},
            )
        return handler.execute(call, self._context)

    def _resolve(self, name: str) -> CommandHandler | None:
        """Return the builtin for ``name`` or the external-run fallback.

        Args:
            name: Command name from token 0.

        Returns:
            Handler to execute; ``None`` only if the fallback is not registered.
        """
        if name != RUN_INTERNAL:
            handler = self._registry.lookup(name)
            if handler is not None:
                _LOGGER.debug("Dispatching %r to builtin", name)
                return handler
        _LOGGER.debug("Dispatching %r to external invoker", name)
        return self._registry.lookup(RUN_INTERNAL)
