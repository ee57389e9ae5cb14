"""
Schema catalog builder.

Groups the types of an introspection document into five catalogs
(objects, interfaces, scalars, enums, unions) sorted by name, and looks up
the root ``Query`` type.
"""

import logging
from typing import Iterable, Optional

from .types import (
    CATALOG_KINDS,
    INTROSPECTION_PREFIX,
    ROOT_QUERY_NAME,
    SchemaCatalog,
    SchemaDocument,
    TypeDescriptor,
)

logger = logging.getLogger(__name__)


def _is_listable(descriptor: TypeDescriptor) -> bool:
    name = descriptor.get("name")
    kind = descriptor.get("kind")
    if not isinstance(name, str) or not isinstance(kind, str):
        logger.debug(f"Skipping type descriptor without name or kind: {descriptor!r}")
        return False
    return not name.startswith(INTROSPECTION_PREFIX)


def _select(types: Iterable[TypeDescriptor], kind: str) -> tuple[TypeDescriptor, ...]:
    selected = [
        descriptor
        for descriptor in types
        if _is_listable(descriptor) and descriptor["kind"] == kind
    ]
    if kind == "OBJECT":
        selected = [d for d in selected if d["name"] != ROOT_QUERY_NAME]
    # str ordering is by code point, so "Color" sorts before "color".
    return tuple(sorted(selected, key=lambda d: d["name"]))


def find_root_query(document: SchemaDocument) -> Optional[TypeDescriptor]:
    """Return the first type named ``Query``, or ``None`` when the schema has none."""
    for descriptor in document.types:
        if descriptor.get("name") == ROOT_QUERY_NAME:
            return descriptor
    return None


def build_catalog(document: SchemaDocument) -> SchemaCatalog:
    """
    Build the ordered type catalogs for a schema document.

    Descriptors of other kinds (input objects, wrappers) or without a name
    or kind belong to no catalog and are left out.

    Args:
        document: Loaded introspection schema.

    Returns:
        SchemaCatalog holding the original descriptor objects.
    """
    catalogs = {
        catalog_name: _select(document.types, kind)
        for catalog_name, kind in CATALOG_KINDS.items()
    }
    root_query = find_root_query(document)
    if root_query is None:
        logger.warning("Schema has no root Query type")

    catalog = SchemaCatalog(root_query=root_query, **catalogs)
    logger.info(
        f"Built schema catalog with {len(catalog)} types "
        f"({', '.join(f'{len(entries)} {name}' for name, entries in catalog.items())})"
    )
    return catalog
