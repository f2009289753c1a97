"""Shared plumbing for CLI commands."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, NoReturn

import typer
from rich.markup import escape

from rdfconv.config import Settings

if TYPE_CHECKING:
    from rich.console import Console

    from rdfconv.converter import EmitReport
    from rdfconv.errors import ConverterError


@dataclass
class CliState:
    """Settings and logger handed from the root callback to commands."""

    settings: Settings
    logger: logging.Logger


def get_state(ctx: typer.Context) -> CliState:
    """Return the state set up by the root callback."""
    return ctx.obj


def fail(console: Console, state: CliState, error: ConverterError) -> NoReturn:
    """Report a converter error and exit with status 1."""
    state.logger.error("%s", error)
    console.print(f"[red]Error:[/red] {escape(str(error))}")
    raise typer.Exit(code=1) from error


def print_report(console: Console, report: EmitReport) -> None:
    """Print one line per emitted format."""
    for result in report.results:
        if result.ok:
            console.print(
                f"  [green]✓[/green] {result.format.label:<9} "
                f"{escape(str(result.path))} ({result.duration_s:.4f}s)"
            )
        else:
            console.print(
                f"  [red]✗[/red] {result.format.label:<9} {escape(str(result.error))}"
            )
