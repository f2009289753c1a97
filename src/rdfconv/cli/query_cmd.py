"""CLI command for listing the literal values of one property.

Usage:
    rdfconv query res/ISWC2010.rdf
    rdfconv query people.ttl --property http://xmlns.com/foaf/0.1/nick
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from rdfconv.cli._common import CliState, fail, get_state
from rdfconv.cli.convert_cmd import parse_format
from rdfconv.converter import GraphConverter
from rdfconv.errors import ConverterError
from rdfconv.formats import RdfFormat
from rdfconv.observability.logging import LogContext
from rdfconv.query import query_by_subject_property


def query(
    ctx: typer.Context,
    input_path: Path = typer.Argument(
        ...,
        help="RDF file to query",
    ),
    property_uri: str | None = typer.Option(
        None,
        "--property",
        "-p",
        help="Predicate URI to match (default: foaf:name)",
    ),
    input_format: str | None = typer.Option(
        None,
        "--input-format",
        "-f",
        help="Input syntax; detected from suffix if omitted",
    ),
) -> None:
    """Print one matched literal value per line."""
    state = get_state(ctx)
    run_query(
        state,
        Console(stderr=True),
        input_path,
        property_uri or state.settings.query_property,
        parse_format(input_format),
    )


def run_query(
    state: CliState,
    console: Console,
    input_path: Path,
    property_uri: str,
    input_format: RdfFormat | None = None,
) -> None:
    """Load ``input_path`` and echo every literal of ``property_uri``."""
    converter = GraphConverter(logger=state.logger.getChild("converter"))

    with LogContext(operation="query", source=input_path):
        try:
            graph = converter.load(input_path, input_format)
            for value in query_by_subject_property(graph, property_uri):
                typer.echo(value)
        except ConverterError as e:
            fail(console, state, e)
