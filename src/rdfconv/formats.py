"""RDF serialization formats known to the converter.

Each format maps to an rdflib plugin name, the file extension used when the
converter writes it, a MIME type and the file suffixes it is detected from on
input.

Example:
    from rdfconv.formats import RdfFormat

    RdfFormat.from_path("res/ISWC2010.rdf")  # RdfFormat.RDF_XML
    RdfFormat.N_QUADS.extension  # "nquad"
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Final


class RdfFormat(str, Enum):
    """Supported RDF serialization formats, valued by rdflib plugin name."""

    TURTLE = "turtle"
    N_TRIPLES = "nt"
    N_QUADS = "nquads"
    RDF_XML = "xml"
    JSON_LD = "json-ld"

    @classmethod
    def from_name(cls, name: str) -> RdfFormat:
        """Resolve a user supplied name such as ``ttl``, ``rdfxml`` or ``json-ld``.

        Raises:
            ValueError: If the name matches no format
        """
        key = name.strip().lower()
        for fmt in cls:
            if key in (fmt.value, fmt.name.lower(), fmt.extension) or key in _ALIASES[fmt]:
                return fmt
        raise ValueError(f"Unsupported RDF format: {name}")

    @classmethod
    def from_path(cls, path: Path | str, default: RdfFormat | None = None) -> RdfFormat:
        """Detect the input format from a file suffix.

        Unknown suffixes fall back to ``default``, or RDF/XML when no default
        is given.
        """
        suffix = Path(path).suffix.lower().lstrip(".")
        for fmt in cls:
            if suffix in _INPUT_SUFFIXES[fmt]:
                return fmt
        return default if default is not None else cls.RDF_XML

    @property
    def extension(self) -> str:
        """File extension used for emitted files."""
        return _EXTENSIONS[self]

    @property
    def mime_type(self) -> str:
        """Get MIME type for this format."""
        return _MIME_TYPES[self]

    @property
    def label(self) -> str:
        """Human readable name."""
        return _LABELS[self]

    @property
    def context_aware(self) -> bool:
        """Whether the syntax carries named graphs."""
        return self is RdfFormat.N_QUADS


_EXTENSIONS: Final[dict[RdfFormat, str]] = {
    RdfFormat.TURTLE: "ttl",
    RdfFormat.N_TRIPLES: "ntri",
    RdfFormat.N_QUADS: "nquad",
    RdfFormat.RDF_XML: "xml",
    RdfFormat.JSON_LD: "json",
}

_MIME_TYPES: Final[dict[RdfFormat, str]] = {
    RdfFormat.TURTLE: "text/turtle",
    RdfFormat.N_TRIPLES: "application/n-triples",
    RdfFormat.N_QUADS: "application/n-quads",
    RdfFormat.RDF_XML: "application/rdf+xml",
    RdfFormat.JSON_LD: "application/ld+json",
}

_LABELS: Final[dict[RdfFormat, str]] = {
    RdfFormat.TURTLE: "Turtle",
    RdfFormat.N_TRIPLES: "N-Triples",
    RdfFormat.N_QUADS: "N-Quads",
    RdfFormat.RDF_XML: "RDF/XML",
    RdfFormat.JSON_LD: "JSON-LD",
}

_INPUT_SUFFIXES: Final[dict[RdfFormat, frozenset[str]]] = {
    RdfFormat.TURTLE: frozenset({"ttl", "turtle"}),
    RdfFormat.N_TRIPLES: frozenset({"nt", "ntri", "ntriples"}),
    RdfFormat.N_QUADS: frozenset({"nq", "nquad", "nquads"}),
    RdfFormat.RDF_XML: frozenset({"rdf", "xml", "owl"}),
    RdfFormat.JSON_LD: frozenset({"json", "jsonld"}),
}

_ALIASES: Final[dict[RdfFormat, frozenset[str]]] = {
    RdfFormat.TURTLE: frozenset({"ttl"}),
    RdfFormat.N_TRIPLES: frozenset({"ntriples", "n-triples"}),
    RdfFormat.N_QUADS: frozenset({"nq", "n-quads"}),
    RdfFormat.RDF_XML: frozenset({"rdf", "rdfxml", "rdf/xml", "rdf_xml"}),
    RdfFormat.JSON_LD: frozenset({"jsonld", "json"}),
}

# Order in which emit() writes the battery of outputs
EMIT_FORMATS: Final[tuple[RdfFormat, ...]] = (
    RdfFormat.TURTLE,
    RdfFormat.N_TRIPLES,
    RdfFormat.N_QUADS,
    RdfFormat.RDF_XML,
    RdfFormat.JSON_LD,
)
