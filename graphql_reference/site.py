"""
Static site builder for the GraphQL reference.

Applies PageRoute records: each registered route is rendered with the
Django template engine and written below the output directory.
"""

import gzip
import logging
from pathlib import Path
from typing import Any, Iterable, Optional, Union

from django.template.loader import render_to_string

from .catalog import SchemaCatalog, SchemaDocument, build_catalog
from .config_proxy import get_setting
from .routes import PageRoute, build_index_routes, build_routes

logger = logging.getLogger(__name__)


class StaticSite:
    """
    Route registry and renderer for the reference pages.

    Routes are keyed by path: registering a second route at the same path
    replaces the first one.
    """

    def __init__(
        self,
        output_dir: Union[str, Path],
        catalog: Optional[SchemaCatalog] = None,
        gzip: bool = False,
        extra_context: Optional[dict[str, Any]] = None,
    ):
        self.output_dir = Path(output_dir)
        self.catalog = catalog
        self.gzip = gzip
        self.extra_context = dict(extra_context or {})
        self._routes: dict[str, PageRoute] = {}

    @property
    def routes(self) -> list[PageRoute]:
        return list(self._routes.values())

    def register(self, route: PageRoute) -> None:
        if route.path in self._routes:
            logger.warning(f"Route {route.path} registered twice, keeping the last registration")
        self._routes[route.path] = route

    def register_all(self, routes: Iterable[PageRoute]) -> None:
        for route in routes:
            self.register(route)

    def navigation(self) -> list[PageRoute]:
        """Routes that appear in the site navigation."""
        return [route for route in self._routes.values() if not route.ignore]

    def render(self, route: PageRoute) -> str:
        context = {
            "catalog": self.catalog,
            "current_path": route.path,
            "navigation": self.navigation(),
            **self.extra_context,
            **route.context,
        }
        return render_to_string(route.template, context)

    def output_path(self, route: PageRoute) -> Path:
        return self.output_dir / route.path.lstrip("/")

    def build(self) -> list[Path]:
        """
        Render and write every registered route.

        Returns:
            Paths of the written pages (gzip siblings not included).
        """
        written = []
        for route in self._routes.values():
            content = self.render(route)
            target = self.output_path(route)
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
            if self.gzip:
                gz_target = target.with_name(f"{target.name}.gz")
                gz_target.write_bytes(gzip.compress(content.encode("utf-8"), mtime=0))
            written.append(target)
        logger.info(f"Wrote {len(written)} pages to {self.output_dir}")
        return written


def build_reference_site(
    document: SchemaDocument,
    output_dir: Optional[Union[str, Path]] = None,
    gzip: Optional[bool] = None,
    url_prefix: Optional[str] = None,
) -> StaticSite:
    """
    Wire a loaded schema document into a ready-to-build StaticSite.

    Unset arguments fall back to the GRAPHQL_REFERENCE settings.
    """
    if output_dir is None:
        output_dir = get_setting("output_dir")
    if gzip is None:
        gzip = bool(get_setting("gzip", False))
    if url_prefix is None:
        url_prefix = get_setting("url_prefix")

    catalog = build_catalog(document)
    site = StaticSite(
        output_dir,
        catalog=catalog,
        gzip=gzip,
        extra_context={
            "site_title": get_setting("site_title"),
            "url_prefix": url_prefix.rstrip("/"),
        },
    )
    site.register_all(build_index_routes(catalog, url_prefix))
    site.register_all(build_routes(catalog, url_prefix))
    return site
