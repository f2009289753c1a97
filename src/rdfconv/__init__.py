"""rdfconv: read an RDF graph once, write it in every common syntax.

Example:
    from rdfconv import GraphConverter

    converter = GraphConverter(output_dir="result")
    report = converter.convert("res/ISWC2010.rdf", "ISWC2010")
    report.raise_on_error()
"""

from rdfconv.converter import EmitReport, GraphConverter
from rdfconv.demo import build_demo_graph, describe_statements
from rdfconv.errors import (
    ConverterError,
    NotFoundError,
    ParseError,
    SerializationError,
    TypeMismatchError,
    WriteError,
)
from rdfconv.formats import EMIT_FORMATS, RdfFormat
from rdfconv.query import query_by_subject_property

__version__ = "0.1.0"

__all__ = [
    # Converter
    "GraphConverter",
    "EmitReport",
    # Formats
    "RdfFormat",
    "EMIT_FORMATS",
    # Query / demo
    "query_by_subject_property",
    "build_demo_graph",
    "describe_statements",
    # Errors
    "ConverterError",
    "NotFoundError",
    "ParseError",
    "WriteError",
    "SerializationError",
    "TypeMismatchError",
]
