"""Read-once, write-many conversion of RDF graphs.

This module provides the GraphConverter class, which loads a serialized graph
into memory and re-emits the same graph in every supported syntax.

Example:
    from rdfconv.converter import GraphConverter

    converter = GraphConverter(output_dir="result")

    # Load, then write result/ISWC2010.{ttl,ntri,nquad,xml,json}
    graph = converter.load("res/ISWC2010.rdf")
    report = converter.emit(graph, "ISWC2010")

    for result in report.results:
        print(result.format.label, result.duration_s, result.ok)
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

from rdflib import Dataset, Graph

from rdfconv.errors import (
    ConverterError,
    NotFoundError,
    ParseError,
    SerializationError,
    WriteError,
)
from rdfconv.formats import EMIT_FORMATS, RdfFormat
from rdfconv.serializers import serialize_graph


@dataclass
class FormatResult:
    """Outcome of writing one output format."""

    format: RdfFormat
    path: Path
    duration_s: float
    error: ConverterError | None = None

    @property
    def ok(self) -> bool:
        """Whether the file was written."""
        return self.error is None


@dataclass
class EmitReport:
    """Per-format outcome of one emit run."""

    base_name: str
    output_dir: Path
    results: list[FormatResult] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True when every format was written."""
        return all(result.ok for result in self.results)

    @property
    def written(self) -> dict[RdfFormat, Path]:
        """Files that were written, keyed by format."""
        return {r.format: r.path for r in self.results if r.ok}

    @property
    def errors(self) -> dict[RdfFormat, ConverterError]:
        """Recorded failures, keyed by format."""
        return {r.format: r.error for r in self.results if r.error is not None}

    @property
    def durations(self) -> dict[RdfFormat, float]:
        """Wall-clock seconds spent per format."""
        return {r.format: r.duration_s for r in self.results}

    def raise_on_error(self) -> None:
        """Re-raise the first recorded failure, if any."""
        for result in self.results:
            if result.error is not None:
                raise result.error


class GraphConverter:
    """Loads RDF graphs and writes them out in every supported syntax.

    Attributes:
        output_dir: Directory that receives emitted files
        logger: Logger used for progress and timing messages
    """

    def __init__(
        self,
        output_dir: Path | str = "result",
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize the converter.

        Args:
            output_dir: Directory for emitted files, created on first emit.
            logger: Logger to report to. Defaults to this module's logger.
        """
        self.output_dir = Path(output_dir)
        self.logger = logger if logger is not None else logging.getLogger(__name__)

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    def load(self, path: Path | str, format: RdfFormat | None = None) -> Graph:
        """Read a serialized graph from disk.

        Args:
            path: File holding the serialized graph
            format: Input syntax; detected from the file suffix when omitted

        Returns:
            The fully materialized graph

        Raises:
            NotFoundError: If the path is missing or unreadable
            ParseError: If the content is not valid for the syntax
        """
        source = Path(path)
        fmt = format if format is not None else RdfFormat.from_path(source)

        self.logger.debug("Attempting to open %s", source)
        if not source.is_file():
            error = NotFoundError(source, "not a file" if source.exists() else "no such file")
            self.logger.error("File not found! %s", error)
            raise error

        try:
            with source.open("rb") as fh:
                data = fh.read()
        except OSError as e:
            self.logger.error("File not readable! %s", source)
            raise NotFoundError(source, e.strerror or str(e)) from e

        self.logger.debug("Reading from file as %s", fmt.label)
        graph = self._parse(source, data, fmt)
        self.logger.debug("Reading success, %d statements", len(graph))
        return graph

    def _parse(self, source: Path, data: bytes, fmt: RdfFormat) -> Graph:
        base = source.resolve().as_uri()
        try:
            if fmt.context_aware:
                return _flatten(_parse_dataset(data, fmt, base))
            graph = Graph()
            graph.parse(data=data, format=fmt.value, publicID=base)
            return graph
        # rdflib parsers raise unrelated exception types (SAX, BadSyntax, JSON, ...)
        except Exception as e:
            self.logger.error("Parsing %s as %s failed: %s", source, fmt.label, e)
            raise ParseError(source, fmt, str(e)) from e

    # -------------------------------------------------------------------------
    # Emitting
    # -------------------------------------------------------------------------

    def emit(self, graph: Graph, base_name: str) -> EmitReport:
        """Write the graph once per output format.

        Every format is attempted even when an earlier one fails; failures are
        recorded on the returned report instead of being raised.

        Args:
            graph: The graph to write
            base_name: Output file name without extension

        Returns:
            Report with the written paths, errors and timings
        """
        report = EmitReport(base_name=base_name, output_dir=self.output_dir)

        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            # Each format below records its own WriteError
            self.logger.error("Cannot create output directory %s: %s", self.output_dir, e)

        for fmt in EMIT_FORMATS:
            report.results.append(self._emit_format(graph, base_name, fmt))

        return report

    def _emit_format(self, graph: Graph, base_name: str, fmt: RdfFormat) -> FormatResult:
        target = self.output_dir / f"{base_name}.{fmt.extension}"

        self.logger.debug("Writing to file in %s Format", fmt.label)
        start = time.perf_counter()
        try:
            _write(graph, target, fmt)
        except ConverterError as e:
            duration = time.perf_counter() - start
            self.logger.error("Write failed. %s", e)
            return FormatResult(format=fmt, path=target, duration_s=duration, error=e)

        duration = time.perf_counter() - start
        self.logger.debug("Write success. Time taken = %s seconds", duration)
        return FormatResult(format=fmt, path=target, duration_s=duration)

    def convert(
        self,
        input_path: Path | str,
        output_base_name: str,
        format: RdfFormat | None = None,
    ) -> EmitReport:
        """Load ``input_path`` and emit it under ``output_base_name``.

        Raises:
            NotFoundError: If the input cannot be opened
            ParseError: If the input cannot be parsed
        """
        graph = self.load(input_path, format)
        return self.emit(graph, output_base_name)


def _write(graph: Graph, target: Path, fmt: RdfFormat) -> None:
    # Serialize first so a failing serializer never truncates an existing file
    try:
        text = serialize_graph(graph, fmt)
    except Exception as e:
        raise SerializationError(fmt, str(e)) from e

    try:
        with target.open("w", encoding="utf-8") as fh:
            fh.write(text)
    except OSError as e:
        raise WriteError(target, fmt, e.strerror or str(e)) from e


def _parse_dataset(data: bytes, fmt: RdfFormat, base: str) -> Dataset:
    dataset = Dataset()
    dataset.parse(data=data, format=fmt.value, publicID=base)
    return dataset


def _flatten(dataset: Dataset) -> Graph:
    """Merge every named graph of a dataset into one plain graph."""
    graph = Graph()
    for prefix, namespace in dataset.namespaces():
        graph.bind(prefix, namespace, override=False)
    for s, p, o, _ in dataset.quads((None, None, None, None)):
        graph.add((s, p, o))
    return graph
