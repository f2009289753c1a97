"""Global pytest configuration and fixtures."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from rdflib import XSD, BNode, Graph, Literal, Namespace, URIRef

EX = Namespace("http://example.org/ns#")
FOAF_NAME = URIRef("http://xmlns.com/foaf/0.1/name")

ALICE_TTL = """\
@prefix foaf: <http://xmlns.com/foaf/0.1/> .
@prefix ex: <http://example.org/ns#> .

<http://example.org/alice> foaf:name "Alice" ;
    ex:age 30 ;
    foaf:knows <http://example.org/bob> .

<http://example.org/bob> ex:nickname "bobby"@en .
"""

ALICE_RDFXML = """\
<?xml version="1.0" encoding="UTF-8"?>
<rdf:RDF xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#"
         xmlns:foaf="http://xmlns.com/foaf/0.1/">
  <foaf:Person rdf:about="http://example.org/alice">
    <foaf:name>Alice</foaf:name>
  </foaf:Person>
  <foaf:Person rdf:about="http://example.org/bob">
    <foaf:name>Bob</foaf:name>
  </foaf:Person>
</rdf:RDF>
"""


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo configure_logging() between tests."""
    yield
    package_logger = logging.getLogger("rdfconv")
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


@pytest.fixture
def sample_graph() -> Graph:
    """Graph mixing URIs, a blank node, typed and language-tagged literals."""
    g = Graph()
    g.bind("ex", EX)
    alice = URIRef("http://example.org/alice")
    address = BNode()
    g.add((alice, FOAF_NAME, Literal("Alice")))
    g.add((alice, EX.age, Literal(30, datatype=XSD.integer)))
    g.add((alice, EX.greeting, Literal("bonjour", lang="fr")))
    g.add((alice, EX.address, address))
    g.add((address, EX.city, Literal("Lyon")))
    return g


@pytest.fixture
def alice_ttl(tmp_path: Path) -> Path:
    """Turtle file without blank nodes."""
    path = tmp_path / "alice.ttl"
    path.write_text(ALICE_TTL, encoding="utf-8")
    return path


@pytest.fixture
def alice_rdf(tmp_path: Path) -> Path:
    """RDF/XML file with two foaf:name statements."""
    path = tmp_path / "alice.rdf"
    path.write_text(ALICE_RDFXML, encoding="utf-8")
    return path
