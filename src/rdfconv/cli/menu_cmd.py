"""Interactive single-keystroke menu.

Usage:
    rdfconv menu
    echo 2 | rdfconv menu
"""

from __future__ import annotations

import sys

import typer
from rich.console import Console

from rdfconv.cli._common import get_state
from rdfconv.cli.convert_cmd import run_convert
from rdfconv.cli.demo_cmd import run_demo
from rdfconv.cli.query_cmd import run_query

MENU_LINES = (
    "1-> Create a new model",
    "2-> Convert existing file",
    "3-> Query the database",
)


def menu(ctx: typer.Context) -> None:
    """Show the menu and run the chosen action.

    Reads a single character from stdin. Any character other than 1, 2 or 3
    does nothing.
    """
    state = get_state(ctx)
    cfg = state.settings
    console = Console()

    for line in MENU_LINES:
        typer.echo(line)

    choice = sys.stdin.read(1)
    state.logger.debug("Menu choice %r", choice)

    if choice == "1":
        run_demo(state, console, cfg.result_dir, cfg.demo_model_name)
    elif choice == "2":
        run_convert(state, console, cfg.demo_input_path, cfg.demo_output, cfg.result_dir)
    elif choice == "3":
        run_query(state, Console(stderr=True), cfg.demo_input_path, cfg.query_property)
    else:
        return

    typer.echo("Complete!")
