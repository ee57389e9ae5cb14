"""
Text helpers shared by page generation and link building.

Every place that turns a GraphQL type name into a URL segment must go
through :func:`underscore`; pages and cross-references are built
independently and only meet through this function.
"""

from graphene.utils.str_converters import to_snake_case


def underscore(value: str) -> str:
    """
    Convert a camel-cased name to its lowercase underscored form.

    Args:
        value: Type name such as ``AppVersion``.

    Returns:
        Underscored slug.

    Examples:
        >>> underscore("AppVersion")
        "app_version"
        >>> underscore("HTTPStatus")
        "http_status"
        >>> underscore("Field2Type")
        "field2_type"
    """
    if not value:
        return ""
    return to_snake_case(value)
