"""Property lookups over an in-memory graph."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from rdflib import Graph, Literal, URIRef

from rdfconv.errors import TypeMismatchError

logger = logging.getLogger(__name__)


def query_by_subject_property(graph: Graph, property_uri: str) -> Iterator[str]:
    """Yield the literal value of every statement using ``property_uri``.

    Values are produced lazily in the graph's iteration order, which is
    decided by the store and should be treated as unordered.

    Args:
        graph: The graph to search
        property_uri: Full URI of the predicate to match

    Yields:
        Lexical form of each matching literal object

    Raises:
        TypeMismatchError: If a matching object is a URI or blank node
    """
    predicate = URIRef(property_uri)
    logger.debug("Getting statements with predicate %s", predicate)

    for subject, obj in graph.subject_objects(predicate):
        if not isinstance(obj, Literal):
            raise TypeMismatchError(subject, predicate, obj)
        yield str(obj)

    logger.debug("Query success")
