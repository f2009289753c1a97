"""CLI command listing the supported RDF formats.

Usage:
    rdfconv formats
"""

from __future__ import annotations

from rich.console import Console

from rdfconv.formats import EMIT_FORMATS


def formats() -> None:
    """Show each format with its output extension and MIME type."""
    console = Console()
    for fmt in EMIT_FORMATS:
        console.print(f"[bold]{fmt.label:<9}[/bold] .{fmt.extension:<6} {fmt.mime_type}")
