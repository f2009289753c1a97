"""RDF serialization utilities.

Format-specific serialization functions for rdflib graphs, covering Turtle,
N-Triples, N-Quads, RDF/XML and JSON-LD.

Example:
    from rdflib import Graph
    from rdfconv.serializers import serialize_graph
    from rdfconv.formats import RdfFormat

    graph = Graph()
    # ... populate graph ...

    turtle = serialize_graph(graph, RdfFormat.TURTLE)
    jsonld = serialize_graph(graph, RdfFormat.JSON_LD)
"""

from __future__ import annotations

import json
from typing import Any

from rdflib import Graph

from rdfconv.formats import RdfFormat
from rdfconv.vocab import get_default_namespaces


def serialize_graph(graph: Graph, format: RdfFormat = RdfFormat.TURTLE) -> str:
    """Serialize an RDF graph to a string.

    Args:
        graph: The RDF graph to serialize
        format: Output format (default: Turtle)

    Returns:
        Serialized RDF string
    """
    if format == RdfFormat.JSON_LD:
        return serialize_to_jsonld(graph)
    elif format == RdfFormat.TURTLE:
        return serialize_to_turtle(graph)
    elif format == RdfFormat.N_TRIPLES:
        return serialize_to_ntriples(graph)
    elif format == RdfFormat.N_QUADS:
        return serialize_to_nquads(graph)
    elif format == RdfFormat.RDF_XML:
        return serialize_to_rdfxml(graph)
    else:
        raise ValueError(f"Unsupported format: {format}")


def serialize_to_turtle(graph: Graph) -> str:
    """Serialize graph to Turtle format.

    Turtle is a human-readable RDF format that uses prefix declarations
    and a compact syntax for triples.
    """
    return graph.serialize(format=RdfFormat.TURTLE.value)


def serialize_to_ntriples(graph: Graph) -> str:
    """Serialize graph to N-Triples format.

    N-Triples is a line-based, plain text format for RDF triples.
    Each line represents a single triple.
    """
    return graph.serialize(format=RdfFormat.N_TRIPLES.value)


def serialize_to_nquads(graph: Graph) -> str:
    """Serialize graph to N-Quads format.

    rdflib only writes N-Quads for context-aware stores. A plain graph has a
    single unnamed graph, and a quad in the default graph is written without
    a graph label, which makes every line an N-Triples line.
    """
    if graph.context_aware:
        return graph.serialize(format=RdfFormat.N_QUADS.value)
    return graph.serialize(format=RdfFormat.N_TRIPLES.value)


def serialize_to_rdfxml(graph: Graph) -> str:
    """Serialize graph to RDF/XML format.

    RDF/XML is the original W3C standard serialization format for RDF.
    """
    return graph.serialize(format=RdfFormat.RDF_XML.value)


def serialize_to_jsonld(graph: Graph, context: dict[str, Any] | None = None) -> str:
    """Serialize graph to JSON-LD format.

    The output carries a ``@context`` built from the graph's namespace
    bindings so that compacted IRIs stay readable, and is re-indented for
    stable diffs.

    Args:
        graph: The RDF graph to serialize
        context: Optional custom JSON-LD context to use

    Returns:
        JSON-LD-formatted string
    """
    if context is None:
        context = build_jsonld_context(graph)

    jsonld_str = graph.serialize(format=RdfFormat.JSON_LD.value, context=context)

    # Parse and re-format for consistent output
    jsonld_data = json.loads(jsonld_str)
    return json.dumps(jsonld_data, indent=2, ensure_ascii=False)


def build_jsonld_context(graph: Graph) -> dict[str, Any]:
    """Build a JSON-LD context from graph namespace bindings.

    Args:
        graph: The RDF graph

    Returns:
        JSON-LD context dictionary mapping prefixes to namespaces
    """
    context: dict[str, Any] = dict(get_default_namespaces())

    for prefix, namespace in graph.namespaces():
        prefix_str = str(prefix)
        if prefix_str and prefix_str not in context:
            context[prefix_str] = str(namespace)

    return context
