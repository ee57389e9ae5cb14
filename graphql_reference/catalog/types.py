"""
Data classes for schema catalogs.
"""

from dataclasses import dataclass
from typing import Any, Iterator, Mapping, Optional

TypeDescriptor = Mapping[str, Any]

# Catalog name -> GraphQL kind, in page generation order.
CATALOG_KINDS: dict[str, str] = {
    "objects": "OBJECT",
    "interfaces": "INTERFACE",
    "scalars": "SCALAR",
    "enums": "ENUM",
    "unions": "UNION",
}

# Template stem used for each catalog's per-type page.
CATALOG_TEMPLATES: dict[str, str] = {
    "objects": "object",
    "interfaces": "interface",
    "scalars": "scalar",
    "enums": "enum",
    "unions": "union",
}

ROOT_QUERY_NAME = "Query"
INTROSPECTION_PREFIX = "__"


@dataclass(frozen=True)
class SchemaDocument:
    """Introspection schema as loaded from disk."""

    types: tuple[TypeDescriptor, ...]
    source: Optional[str] = None


@dataclass(frozen=True)
class SchemaCatalog:
    """Ordered type catalogs derived from a schema document."""

    objects: tuple[TypeDescriptor, ...] = ()
    interfaces: tuple[TypeDescriptor, ...] = ()
    scalars: tuple[TypeDescriptor, ...] = ()
    enums: tuple[TypeDescriptor, ...] = ()
    unions: tuple[TypeDescriptor, ...] = ()
    root_query: Optional[TypeDescriptor] = None

    def get(self, catalog_name: str) -> tuple[TypeDescriptor, ...]:
        """Return the catalog registered under its plural name."""
        if catalog_name not in CATALOG_KINDS:
            raise KeyError(f"Unknown catalog: {catalog_name}")
        return getattr(self, catalog_name)

    def items(self) -> Iterator[tuple[str, tuple[TypeDescriptor, ...]]]:
        for catalog_name in CATALOG_KINDS:
            yield catalog_name, getattr(self, catalog_name)

    def __len__(self) -> int:
        return sum(len(entries) for _, entries in self.items())
