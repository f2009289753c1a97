"""CLI commands for rdfconv.

Provides command-line interface using Typer:
- rdfconv menu: Interactive 1/2/3 menu
- rdfconv demo: Build and emit the demo graph
- rdfconv convert: Convert an RDF file into every supported format
- rdfconv query: Print the literal values of a property
- rdfconv formats: List supported formats

Usage:
    rdfconv --help
    rdfconv convert res/ISWC2010.rdf
    rdfconv --log-level INFO query res/ISWC2010.rdf --property http://xmlns.com/foaf/0.1/name
"""

from pathlib import Path

import typer

from rdfconv.cli._common import CliState
from rdfconv.cli.convert_cmd import convert
from rdfconv.cli.demo_cmd import demo
from rdfconv.cli.formats_cmd import formats
from rdfconv.cli.menu_cmd import menu
from rdfconv.cli.query_cmd import query
from rdfconv.config import settings
from rdfconv.observability.logging import LOG_LEVELS, configure_logging

# Main CLI application
app = typer.Typer(
    name="rdfconv",
    help="rdfconv: read an RDF graph once, write it in every common syntax",
    no_args_is_help=True,
)

# Add subcommands
app.command("menu")(menu)
app.command("demo")(demo)
app.command("convert")(convert)
app.command("query")(query)
app.command("formats")(formats)


@app.callback()
def callback(
    ctx: typer.Context,
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Log level (default: settings.log_level)",
    ),
    log_file: Path | None = typer.Option(
        None,
        "--log-file",
        help="Append log records to this file (default: log/myLog.txt)",
    ),
    json_logs: bool = typer.Option(
        settings.json_logs,
        "--json-logs/--plain-logs",
        help="Emit console log records as JSON",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Echo all log records to stderr",
    ),
) -> None:
    """rdfconv: read an RDF graph once, write it in every common syntax."""
    level = (log_level or settings.log_level).upper()
    if level not in LOG_LEVELS:
        raise typer.BadParameter(
            f"{level!r} is not one of {', '.join(LOG_LEVELS)}", param_hint="--log-level"
        )

    logger = configure_logging(
        level=level,
        json_format=json_logs,
        log_file=log_file if log_file is not None else settings.log_file,
        verbose=verbose,
    )
    ctx.obj = CliState(settings=settings, logger=logger)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
