"""Single-space command line tokenizer."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

TOKEN_DELIMITER = " "


class CommandParseError(ValueError):
    """Raised when an input line does not name a command."""


class CommandCall(BaseModel):
    """One tokenized input line."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    args: tuple[str, ...] = ()
    raw: str

    @property
    def tokens(self) -> tuple[str, ...]:
        """Return the full token sequence, command name first."""
        return (self.name, *self.args)


def strip_line_terminator(line: str) -> str:
    """Remove one trailing line terminator, leaving other whitespace intact.

    Args:
        line: Line as read from the input stream.

    Returns:
        Line without its trailing ``\\n`` or ``\\r\\n``.
    """
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


def tokenize(line: str) -> tuple[str, ...]:
    """Split a line on single spaces without collapsing runs.

    Consecutive spaces yield empty-string tokens, so ``"a  b"`` becomes
    ``("a", "", "b")``. An empty line yields no tokens.

    Args:
        line: Input line without its terminator.

    Returns:
        Ordered token sequence.
    """
    if not line:
        return ()
    return tuple(line.split(TOKEN_DELIMITER))


def parse_line(line: str) -> CommandCall:
    """Tokenize a line into a command call.

    Args:
        line: Input line without its terminator.

    Returns:
        Command call whose name is token 0.

    Raises:
        CommandParseError: If the line holds no tokens.
    """
    tokens = tokenize(line)
    if not tokens:
        raise CommandParseError("command not specified")
    return CommandCall(name=tokens[0], args=tokens[1:], raw=line)
