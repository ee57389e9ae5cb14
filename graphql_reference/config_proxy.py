"""
Configuration management for graphql-reference.

Settings are resolved from the ``GRAPHQL_REFERENCE`` Django setting first and
fall back to the library defaults.
"""

from typing import Any, Optional

from django.conf import settings

from .defaults import LIBRARY_DEFAULTS


class SettingsProxy:
    """
    Proxy for accessing graphql-reference settings with hierarchical resolution.

    Settings are resolved in the following order:
    1. Django settings (GRAPHQL_REFERENCE)
    2. Library defaults (LIBRARY_DEFAULTS)
    """

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a setting value.

        Args:
            key: Setting key to retrieve (supports dot notation)
            default: Default value if setting is not found

        Returns:
            The setting value from the highest priority source
        """
        django_value = self._get_django_setting(key)
        if django_value is not None:
            return django_value

        library_value = self._get_nested_value(LIBRARY_DEFAULTS, key)
        if library_value is not None:
            return library_value

        return default

    def _get_django_setting(self, key: str) -> Any:
        return self._get_nested_value(getattr(settings, "GRAPHQL_REFERENCE", {}), key)

    def _get_nested_value(self, data: dict[str, Any], key: str) -> Any:
        """
        Get nested value from dictionary using dot notation.

        Args:
            data: Dictionary to search in
            key: Key to retrieve

        Returns:
            The value or None if not found
        """
        if not isinstance(data, dict):
            return None

        current = data
        for k in key.split("."):
            if not isinstance(current, dict) or k not in current:
                return None
            current = current[k]

        return current


settings_proxy = SettingsProxy()


def get_setting(key: str, default: Any = None) -> Any:
    """
    Get a setting value using the hierarchical settings system.

    Args:
        key: Setting key to retrieve
        default: Default value if setting is not found

    Returns:
        The setting value from the highest priority source
    """
    return settings_proxy.get(key, default)
