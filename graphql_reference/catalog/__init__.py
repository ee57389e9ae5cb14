"""
Schema catalog package.

Loads a GraphQL introspection document and groups its types into the
ordered catalogs that drive page generation.
"""

from .builder import build_catalog, find_root_query
from .loader import load_schema_document, parse_schema_document
from .types import CATALOG_KINDS, SchemaCatalog, SchemaDocument

__all__ = [
    "CATALOG_KINDS",
    "SchemaCatalog",
    "SchemaDocument",
    "build_catalog",
    "find_root_query",
    "load_schema_document",
    "parse_schema_document",
]
