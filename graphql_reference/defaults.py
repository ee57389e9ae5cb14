"""
Default configuration for graphql-reference.

Every setting the library reads lives here; projects override them through
the ``GRAPHQL_REFERENCE`` Django setting.
"""

from __future__ import annotations

import os
from typing import Any

LIBRARY_DEFAULTS: dict[str, Any] = {
    # Introspection JSON produced by the GraphQL server
    "schema_path": os.environ.get("GRAPHQL_REFERENCE_SCHEMA_PATH", "data/graphql.json"),
    "output_dir": os.environ.get("GRAPHQL_REFERENCE_OUTPUT_DIR", "build"),
    "url_prefix": "/graphql",
    "gzip": False,
    "site_title": "GraphQL API reference",
}
