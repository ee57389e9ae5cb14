"""
Django app configuration for graphql-reference.
"""

import logging

from django.apps import AppConfig as BaseAppConfig

logger = logging.getLogger(__name__)


class AppConfig(BaseAppConfig):
    """Django app configuration for graphql-reference."""

    name = "graphql_reference"
    verbose_name = "GraphQL Reference"
    label = "graphql_reference"

    def ready(self):
        self._validate_configuration()

    def _validate_configuration(self):
        """Warn about settings that would produce broken links."""
        from .config_proxy import get_setting

        url_prefix = get_setting("url_prefix")
        if not str(url_prefix).startswith("/"):
            logger.warning(
                f"GRAPHQL_REFERENCE url_prefix '{url_prefix}' is not absolute; "
                "cross-reference links will be relative to each page"
            )
