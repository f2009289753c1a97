"""Error taxonomy for loading, emitting and querying graphs."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rdflib.term import Node

    from rdfconv.formats import RdfFormat


class ConverterError(Exception):
    """Base class for all rdfconv failures."""


class NotFoundError(ConverterError):
    """Raised when an input path does not resolve to a readable file."""

    def __init__(self, path: Path | str, reason: str = "") -> None:
        self.path = Path(path)
        message = f"Input file not found: {self.path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class ParseError(ConverterError):
    """Raised when input content is not valid for the chosen syntax."""

    def __init__(self, path: Path | str, format: RdfFormat, reason: str = "") -> None:
        self.path = Path(path)
        self.format = format
        message = f"Cannot parse {self.path} as {format.label}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class WriteError(ConverterError):
    """Raised when an output file cannot be created or written."""

    def __init__(self, path: Path | str, format: RdfFormat, reason: str = "") -> None:
        self.path = Path(path)
        self.format = format
        message = f"Cannot write {format.label} output to {self.path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class SerializationError(ConverterError):
    """Raised when the graph cannot be expressed in an output syntax."""

    def __init__(self, format: RdfFormat, reason: str = "") -> None:
        self.format = format
        message = f"Cannot serialize graph as {format.label}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class TypeMismatchError(ConverterError):
    """Raised when a query expects a literal but the object is a resource."""

    def __init__(self, subject: Node, predicate: Node, obj: Node) -> None:
        self.subject = subject
        self.predicate = predicate
        self.object = obj
        super().__init__(
            f"Expected a literal object for <{predicate}> on {subject.n3()}, "
            f"got {type(obj).__name__} {obj.n3()}"
        )
