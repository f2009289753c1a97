"""Programmatic demo graph.

Builds the small vCard graph used to exercise the converter without an
input file, and renders a graph statement by statement for the console.
"""

from __future__ import annotations

from collections.abc import Iterator

from rdflib import BNode, Graph, Literal, URIRef

from rdfconv.vocab import VCARD, get_default_namespaces

PERSON_URI = "http://somewhere/JohnSmith"
GIVEN_NAME = "John"
FAMILY_NAME = "Smith"


def build_demo_graph(
    person_uri: str = PERSON_URI,
    given_name: str = GIVEN_NAME,
    family_name: str = FAMILY_NAME,
) -> Graph:
    """Build a person resource with a full name and a compound name node.

    The result holds four statements: ``vcard:FN`` and ``vcard:N`` on the
    person, ``vcard:Given`` and ``vcard:Family`` on the blank name node.
    """
    graph = Graph()
    for prefix, namespace in get_default_namespaces().items():
        graph.bind(prefix, namespace, replace=True)

    person = URIRef(person_uri)
    name = BNode()

    graph.add((person, VCARD.FN, Literal(f"{given_name} {family_name}")))
    graph.add((person, VCARD.N, name))
    graph.add((name, VCARD.Given, Literal(given_name)))
    graph.add((name, VCARD.Family, Literal(family_name)))
    return graph


def describe_statements(graph: Graph) -> Iterator[str]:
    """Render each statement as console lines.

    Literal objects are wrapped in double quotes; every statement ends with
    a ``...`` separator line.
    """
    for subject, predicate, obj in graph:
        yield f"Subject = {subject}"
        yield f"Predicate = {predicate}"
        if isinstance(obj, Literal):
            yield f'Object = "{obj}"'
        else:
            yield f"Object = {obj}"
        yield "..."
