"""Tests for property lookups."""

import types

import pytest
from rdflib import BNode, Graph, Literal, URIRef

from rdfconv.errors import TypeMismatchError
from rdfconv.query import query_by_subject_property

FOAF_NAME = "http://xmlns.com/foaf/0.1/name"


def make_alice_graph() -> Graph:
    g = Graph()
    alice = URIRef("http://example.org/alice")
    g.add((alice, URIRef(FOAF_NAME), Literal("Alice")))
    g.add((alice, URIRef("http://xmlns.com/foaf/0.1/nick"), Literal("ally")))
    g.add((URIRef("http://example.org/bob"), URIRef("http://example.org/p"), Literal("Bob")))
    return g


class TestQueryBySubjectProperty:
    """Test query_by_subject_property."""

    def test_single_match(self) -> None:
        """Only the matching predicate's literal is returned."""
        assert list(query_by_subject_property(make_alice_graph(), FOAF_NAME)) == ["Alice"]

    def test_is_lazy(self) -> None:
        """Results are produced by a generator."""
        result = query_by_subject_property(make_alice_graph(), FOAF_NAME)

        assert isinstance(result, types.GeneratorType)

    def test_no_match(self) -> None:
        """Unknown predicates yield nothing."""
        assert list(query_by_subject_property(make_alice_graph(), "http://example.org/none")) == []

    def test_multiple_matches(self, alice_rdf) -> None:
        """Every statement with the predicate contributes one value."""
        g = Graph().parse(alice_rdf, format="xml")

        assert sorted(query_by_subject_property(g, FOAF_NAME)) == ["Alice", "Bob"]

    def test_typed_literal_returns_lexical_form(self) -> None:
        """Typed literals come back as their lexical value."""
        g = Graph()
        g.add((URIRef("http://example.org/a"), URIRef(FOAF_NAME), Literal(42)))

        assert list(query_by_subject_property(g, FOAF_NAME)) == ["42"]

    def test_uri_object_raises(self) -> None:
        """A resource object is reported, not stringified."""
        g = Graph()
        subject = URIRef("http://example.org/a")
        target = URIRef("http://example.org/b")
        g.add((subject, URIRef(FOAF_NAME), target))

        with pytest.raises(TypeMismatchError) as exc_info:
            list(query_by_subject_property(g, FOAF_NAME))

        assert exc_info.value.subject == subject
        assert exc_info.value.object == target
        assert "URIRef" in str(exc_info.value)

    def test_blank_node_object_raises(self) -> None:
        """Blank node objects are resources too."""
        g = Graph()
        g.add((URIRef("http://example.org/a"), URIRef(FOAF_NAME), BNode()))

        with pytest.raises(TypeMismatchError):
            list(query_by_subject_property(g, FOAF_NAME))
