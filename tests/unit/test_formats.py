"""Tests for the RdfFormat registry."""

import pytest

from rdfconv.formats import EMIT_FORMATS, RdfFormat


class TestRdfFormat:
    """Test RdfFormat enum."""

    def test_emit_order_and_extensions(self) -> None:
        """Emit battery writes the five formats with their extensions."""
        assert [fmt.extension for fmt in EMIT_FORMATS] == ["ttl", "ntri", "nquad", "xml", "json"]

    def test_values_are_rdflib_plugin_names(self) -> None:
        """Enum values are what rdflib's parse/serialize expect."""
        assert RdfFormat.TURTLE.value == "turtle"
        assert RdfFormat.N_TRIPLES.value == "nt"
        assert RdfFormat.N_QUADS.value == "nquads"
        assert RdfFormat.RDF_XML.value == "xml"
        assert RdfFormat.JSON_LD.value == "json-ld"

    def test_mime_type_property(self) -> None:
        """Get MIME type from format."""
        assert RdfFormat.JSON_LD.mime_type == "application/ld+json"
        assert RdfFormat.TURTLE.mime_type == "text/turtle"
        assert RdfFormat.N_TRIPLES.mime_type == "application/n-triples"
        assert RdfFormat.N_QUADS.mime_type == "application/n-quads"
        assert RdfFormat.RDF_XML.mime_type == "application/rdf+xml"

    def test_only_nquads_is_context_aware(self) -> None:
        """Only N-Quads carries named graphs."""
        assert [fmt for fmt in RdfFormat if fmt.context_aware] == [RdfFormat.N_QUADS]


class TestFromPath:
    """Test suffix based input detection."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("data.ttl", RdfFormat.TURTLE),
            ("data.nt", RdfFormat.N_TRIPLES),
            ("data.ntri", RdfFormat.N_TRIPLES),
            ("data.nq", RdfFormat.N_QUADS),
            ("data.nquad", RdfFormat.N_QUADS),
            ("ISWC2010.rdf", RdfFormat.RDF_XML),
            ("ontology.OWL", RdfFormat.RDF_XML),
            ("data.jsonld", RdfFormat.JSON_LD),
            ("data.json", RdfFormat.JSON_LD),
        ],
    )
    def test_known_suffixes(self, name: str, expected: RdfFormat) -> None:
        """Known suffixes map to their format, case-insensitively."""
        assert RdfFormat.from_path(name) == expected

    def test_unknown_suffix_defaults_to_rdfxml(self) -> None:
        """Unknown suffixes fall back to RDF/XML."""
        assert RdfFormat.from_path("dump.txt") == RdfFormat.RDF_XML

    def test_unknown_suffix_uses_given_default(self) -> None:
        """An explicit default wins over RDF/XML."""
        assert RdfFormat.from_path("dump", default=RdfFormat.TURTLE) == RdfFormat.TURTLE


class TestFromName:
    """Test user supplied format names."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("turtle", RdfFormat.TURTLE),
            ("TTL", RdfFormat.TURTLE),
            ("n-triples", RdfFormat.N_TRIPLES),
            ("nquads", RdfFormat.N_QUADS),
            ("rdfxml", RdfFormat.RDF_XML),
            ("xml", RdfFormat.RDF_XML),
            ("json-ld", RdfFormat.JSON_LD),
            ("jsonld", RdfFormat.JSON_LD),
        ],
    )
    def test_aliases(self, name: str, expected: RdfFormat) -> None:
        """Names, extensions and aliases resolve."""
        assert RdfFormat.from_name(name) == expected

    def test_unknown_name(self) -> None:
        """Unknown names raise ValueError."""
        with pytest.raises(ValueError, match="Unsupported RDF format"):
            RdfFormat.from_name("trix")
