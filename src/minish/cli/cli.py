"""Typer CLI entrypoint for minish."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from minish.cli.bootstrap import (
    bootstrap_config,
    build_dispatcher,
    configure_logging,
    default_config_file,
    load_effective_config,
)
from minish.cli.rendering import CliRenderer, exit_status
from minish.commands.parser import strip_line_terminator
from minish.commands.types import OutcomeKind
from minish.config import ShellConfig, ShellConfigError
from minish.runtime.dispatcher import Dispatcher

app = typer.Typer(help="minish: a minimal line-oriented command interpreter.")
_CONSOLE = Console()

ConfigFileOption = Annotated[
    Path | None,
    typer.Option(
        file_okay=True,
        dir_okay=False,
        help="Path to shell config YAML/JSON file.",
    ),
]
SearchPathOption = Annotated[
    str | None,
    typer.Option(help="Colon-delimited search path overriding PATH."),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Log dispatch decisions to stderr."),
]


def _startup(
    *,
    config_file: Path | None,
    search_path: str | None,
) -> tuple[ShellConfig, Dispatcher]:
    """Load config and build the dispatcher, exiting on config errors.

    Args:
        config_file: Optional config path override.
        search_path: Optional search path override.

    Returns:
        Effective config and dispatcher.

    Raises:
        Exit: Raised when the config file is invalid.
    """
    try:
        config = load_effective_config(
            config_file=config_file, search_path=search_path
        )
    except ShellConfigError as exc:
        _CONSOLE.print(
            f"Failed to load config: {exc}", style="bold red", markup=False
        )
        raise typer.Exit(code=1) from exc
    return config, build_dispatcher(config, os.environ)


@app.command("init")
def init_command(
    config_file: ConfigFileOption = None,
    overwrite_config: Annotated[
        bool,
        typer.Option(
            "--overwrite-config",
            help="Overwrite existing config file with default template.",
        ),
    ] = False,
) -> None:
    """Write the default shell config file.

    Args:
        config_file: Optional config file path override.
        overwrite_config: Whether to overwrite existing config payload.
    """
    configure_logging()
    effective_config_file = config_file or default_config_file(Path.cwd())
    actions = bootstrap_config(
        config_file=effective_config_file,
        overwrite_config=overwrite_config,
    )
    table = Table(title="minish init", show_header=True, header_style="bold cyan")
    table.add_column("Resource", style="bold")
    table.add_column("Status", style="green")
    for resource, status in actions:
        table.add_row(resource, status)
    _CONSOLE.print(table)
    _CONSOLE.print(
        Panel(
            f"Config: {effective_config_file}",
            title="Initialized",
            border_style="green",
            expand=True,
        )
    )


@app.command("run")
def run_command(
    text: Annotated[str, typer.Argument(help="Single input line to execute.")],
    config_file: ConfigFileOption = None,
    search_path: SearchPathOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Execute one input line and exit with its status.

    Args:
        text: Raw input line.
        config_file: Optional config file path override.
        search_path: Optional search path override.
        verbose: Whether to log dispatch decisions.

    Raises:
        Exit: Always raised with the line's exit status.
    """
    configure_logging(verbose=verbose)
    _, dispatcher = _startup(config_file=config_file, search_path=search_path)
    result = dispatcher.handle_input(strip_line_terminator(text))
    CliRenderer(console=_CONSOLE).render(result)
    raise typer.Exit(code=exit_status(result))


@app.command("repl")
def repl_command(
    config_file: ConfigFileOption = None,
    search_path: SearchPathOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Read, dispatch and render lines until `exit` or end of input.

    Args:
        config_file: Optional config file path override.
        search_path: Optional search path override.
        verbose: Whether to log dispatch decisions.

    Raises:
        Exit: Raised with the requested code on `exit`, or ``0`` at end of input.
    """
    configure_logging(verbose=verbose)
    config, dispatcher = _startup(config_file=config_file, search_path=search_path)
    renderer = CliRenderer(console=_CONSOLE)
    prompt = Text(config.prompt)
    while True:
        try:
            raw = _CONSOLE.input(prompt)
        except EOFError:
            _CONSOLE.out("")
            raise typer.Exit(code=0) from None
        except KeyboardInterrupt:
            _CONSOLE.out("")
            continue

        result = dispatcher.handle_input(strip_line_terminator(raw))
        if result.kind == OutcomeKind.TERMINATE:
            raise typer.Exit(code=exit_status(result))
        renderer.render(result)


if __name__ == "__main__":
    app()
