"""CLI command for building and emitting the demo graph.

Usage:
    rdfconv demo
    rdfconv demo --output-dir out --name basicModel
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from rdfconv.cli._common import CliState, get_state, print_report
from rdfconv.converter import GraphConverter
from rdfconv.demo import build_demo_graph, describe_statements
from rdfconv.observability.logging import LogContext


def demo(
    ctx: typer.Context,
    output_dir: Path | None = typer.Option(
        None,
        "--output-dir",
        "-o",
        help="Directory for the emitted files (default: settings.result_dir)",
    ),
    name: str | None = typer.Option(
        None,
        "--name",
        "-n",
        help="Base name for the emitted files (default: basicModel)",
    ),
) -> None:
    """Create the demo graph, print its statements and emit it."""
    state = get_state(ctx)
    run_demo(
        state,
        Console(),
        output_dir if output_dir is not None else state.settings.result_dir,
        name or state.settings.demo_model_name,
    )


def run_demo(state: CliState, console: Console, output_dir: Path, name: str) -> None:
    """Build, print and emit the demo graph."""
    logger = state.logger
    with LogContext(operation="demo"):
        logger.debug("Creating demo graph")
        graph = build_demo_graph()
        logger.debug("Demo graph created with %d statements", len(graph))

        logger.debug("Attempting to print graph")
        for line in describe_statements(graph):
            typer.echo(line)
        logger.debug("Printing success")

        converter = GraphConverter(output_dir=output_dir, logger=logger.getChild("converter"))
        report = converter.emit(graph, name)

    print_report(console, report)
    if not report.ok:
        raise typer.Exit(code=1)
