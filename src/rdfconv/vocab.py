"""Namespaces used by the demo graph and the default query."""

from typing import Final

from rdflib import Namespace

# vCard in RDF, W3C note of 2001
VCARD_NAMESPACE: Final[str] = "http://www.w3.org/2001/vcard-rdf/3.0#"
FOAF_NAMESPACE: Final[str] = "http://xmlns.com/foaf/0.1/"

VCARD = Namespace(VCARD_NAMESPACE)

FOAF_NAME: Final[str] = f"{FOAF_NAMESPACE}name"


def get_default_namespaces() -> dict[str, str]:
    """Prefix mappings bound on graphs built by rdfconv."""
    return {
        "vcard": VCARD_NAMESPACE,
        "foaf": FOAF_NAMESPACE,
    }
