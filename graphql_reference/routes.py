"""
Page route registration records.

The catalog builder never talks to the renderer directly: it produces a
list of PageRoute records which the site builder applies.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from .catalog.types import CATALOG_KINDS, CATALOG_TEMPLATES, SchemaCatalog
from .utils.text import underscore

DEFAULT_URL_PREFIX = "/graphql"
TEMPLATE_DIR = "graphql_reference"

_KIND_CATALOGS = {kind: catalog_name for catalog_name, kind in CATALOG_KINDS.items()}


@dataclass(frozen=True)
class PageRoute:
    """One output page: where it goes, which template renders it and with what."""

    path: str
    template: str
    context: dict[str, Any] = field(default_factory=dict)
    ignore: bool = False
    title: Optional[str] = None


def catalog_path(catalog_name: str, name: str, url_prefix: str = DEFAULT_URL_PREFIX) -> str:
    return f"{url_prefix.rstrip('/')}/{catalog_name}/{underscore(name)}.html"


def type_path(kind: Optional[str], name: Optional[str], url_prefix: str = DEFAULT_URL_PREFIX) -> Optional[str]:
    """
    Return the page path of a named type.

    Args:
        kind: GraphQL kind of the type (``OBJECT``, ``ENUM``...).
        name: Type name.
        url_prefix: Root of the reference pages.

    Returns:
        The page path, or None when the type has no page of its own
        (input objects, introspection types). The root ``Query`` object
        links to the query reference page.
    """
    catalog_name = _KIND_CATALOGS.get(kind or "")
    if not catalog_name or not name or name.startswith("__"):
        return None
    if catalog_name == "objects" and name == "Query":
        return f"{url_prefix.rstrip('/')}/query.html"
    return catalog_path(catalog_name, name, url_prefix)


def build_routes(catalog: SchemaCatalog, url_prefix: str = DEFAULT_URL_PREFIX) -> list[PageRoute]:
    """
    Build one hidden page route per catalog entry.

    Routes are ordered by catalog (objects, interfaces, scalars, enums,
    unions) and by name within a catalog.
    """
    routes = []
    for catalog_name, entries in catalog.items():
        template = f"{TEMPLATE_DIR}/{CATALOG_TEMPLATES[catalog_name]}.html"
        for descriptor in entries:
            routes.append(
                PageRoute(
                    path=catalog_path(catalog_name, descriptor["name"], url_prefix),
                    template=template,
                    context={"obj": descriptor},
                    ignore=True,
                    title=descriptor["name"],
                )
            )
    return routes


def build_index_routes(catalog: SchemaCatalog, url_prefix: str = DEFAULT_URL_PREFIX) -> list[PageRoute]:
    """Build the catalog listing page and, when the schema has one, the root query page."""
    prefix = url_prefix.rstrip("/")
    routes = [
        PageRoute(
            path=f"{prefix}/index.html",
            template=f"{TEMPLATE_DIR}/index.html",
            title="Overview",
        )
    ]
    if catalog.root_query is not None:
        routes.append(
            PageRoute(
                path=f"{prefix}/query.html",
                template=f"{TEMPLATE_DIR}/query.html",
                context={"query": catalog.root_query},
                title="Query",
            )
        )
    return routes
