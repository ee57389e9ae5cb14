"""
Template helpers for the GraphQL reference pages.

Links to type pages are built with the same path function as the pages
themselves.
"""

from typing import Any, Mapping, Optional

from django import template
from django.utils.html import format_html

from ..config_proxy import get_setting
from ..routes import type_path
from ..utils.text import underscore as underscore_name

register = template.Library()

WRAPPER_KINDS = ("NON_NULL", "LIST")


def _url_prefix(context) -> str:
    url_prefix = context.get("url_prefix")
    if url_prefix is None:
        return get_setting("url_prefix")
    return url_prefix


def _named_type(type_ref: Optional[Mapping[str, Any]]) -> Optional[Mapping[str, Any]]:
    while type_ref and type_ref.get("kind") in WRAPPER_KINDS:
        type_ref = type_ref.get("ofType")
    return type_ref


@register.filter
def underscore(value):
    return underscore_name(str(value or ""))


@register.filter
def graphql_type_signature(type_ref: Optional[Mapping[str, Any]]) -> str:
    """Render an introspection type reference such as ``[User!]!``."""
    if not type_ref:
        return ""
    kind = type_ref.get("kind")
    if kind == "NON_NULL":
        return f"{graphql_type_signature(type_ref.get('ofType'))}!"
    if kind == "LIST":
        return f"[{graphql_type_signature(type_ref.get('ofType'))}]"
    return type_ref.get("name") or ""


@register.simple_tag(takes_context=True)
def graphql_type_url(context, type_ref) -> str:
    named = _named_type(type_ref)
    if not named:
        return ""
    return type_path(named.get("kind"), named.get("name"), _url_prefix(context)) or ""


@register.simple_tag(takes_context=True)
def graphql_type_link(context, type_ref):
    """Render a type reference with its named type linked to its page."""
    if not type_ref:
        return ""
    kind = type_ref.get("kind")
    if kind == "NON_NULL":
        return format_html("{}!", graphql_type_link(context, type_ref.get("ofType")))
    if kind == "LIST":
        return format_html("[{}]", graphql_type_link(context, type_ref.get("ofType")))

    name = type_ref.get("name") or ""
    path = type_path(kind, name, _url_prefix(context))
    if path is None:
        return format_html("<code>{}</code>", name)
    return format_html('<a href="{}"><code>{}</code></a>', path, name)


@register.simple_tag(takes_context=True)
def link_with_active(context, name, path):
    """Navigation link marked active on its own page."""
    if path == context.get("current_path"):
        return format_html('<a href="{}" class="active">{}</a>', path, name)
    return format_html('<a href="{}">{}</a>', path, name)
