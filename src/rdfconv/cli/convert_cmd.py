"""CLI command for converting an RDF file into every supported format.

Usage:
    rdfconv convert res/ISWC2010.rdf
    rdfconv convert data.ttl --name data --output-dir out
    rdfconv convert dump.txt --input-format turtle
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from rdfconv.cli._common import CliState, fail, get_state, print_report
from rdfconv.converter import GraphConverter
from rdfconv.errors import ConverterError
from rdfconv.formats import RdfFormat
from rdfconv.observability.logging import LogContext


def parse_format(value: str | None) -> RdfFormat | None:
    """Turn an ``--input-format`` value into an RdfFormat."""
    if value is None:
        return None
    try:
        return RdfFormat.from_name(value)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e


def convert(
    ctx: typer.Context,
    input_path: Path = typer.Argument(
        ...,
        help="RDF file to convert",
    ),
    name: str | None = typer.Option(
        None,
        "--name",
        "-n",
        help="Base name for the emitted files (default: input file stem)",
    ),
    output_dir: Path | None = typer.Option(
        None,
        "--output-dir",
        "-o",
        help="Directory for the emitted files (default: settings.result_dir)",
    ),
    input_format: str | None = typer.Option(
        None,
        "--input-format",
        "-f",
        help="Input syntax (turtle, nt, nquads, xml, json-ld); detected from suffix if omitted",
    ),
) -> None:
    """Read an RDF file once and write it in every supported format."""
    state = get_state(ctx)
    run_convert(
        state,
        Console(),
        input_path,
        name or input_path.stem,
        output_dir if output_dir is not None else state.settings.result_dir,
        parse_format(input_format),
    )


def run_convert(
    state: CliState,
    console: Console,
    input_path: Path,
    name: str,
    output_dir: Path,
    input_format: RdfFormat | None = None,
) -> None:
    """Convert ``input_path`` and print the per-format outcome."""
    converter = GraphConverter(output_dir=output_dir, logger=state.logger.getChild("converter"))

    console.print(f"[blue]Converting:[/blue] {escape(str(input_path))}")
    with LogContext(operation="convert", source=input_path):
        try:
            report = converter.convert(input_path, name, input_format)
        except ConverterError as e:
            fail(console, state, e)

    print_report(console, report)
    if not report.ok:
        raise typer.Exit(code=1)
