"""
Introspection document loading.
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

from ..exceptions import SchemaDocumentError
from .types import SchemaDocument

logger = logging.getLogger(__name__)


def parse_schema_document(data: Any, source: Optional[str] = None) -> SchemaDocument:
    """
    Build a SchemaDocument from decoded introspection JSON.

    Accepts the full response shape ``{"data": {"__schema": ...}}`` as well as
    the bare ``{"__schema": ...}`` payload.
    """
    if not isinstance(data, dict):
        raise SchemaDocumentError("Introspection document must be a JSON object", path=source)

    payload = data.get("data", data)
    schema = payload.get("__schema") if isinstance(payload, dict) else None
    if not isinstance(schema, dict):
        raise SchemaDocumentError("Introspection document has no '__schema' section", path=source)

    types = schema.get("types")
    if not isinstance(types, list):
        raise SchemaDocumentError("Introspection '__schema.types' must be a list", path=source)

    return SchemaDocument(
        types=tuple(t for t in types if isinstance(t, dict)),
        source=source,
    )


def load_schema_document(path: Union[str, Path]) -> SchemaDocument:
    """
    Read an introspection JSON file.

    Args:
        path: Path of the JSON file.

    Returns:
        The loaded SchemaDocument.

    Raises:
        SchemaDocumentError: If the file is missing, unreadable or malformed.
    """
    source = str(path)
    try:
        raw = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise SchemaDocumentError(f"Cannot read schema document {source}: {exc}", path=source) from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise SchemaDocumentError(f"Invalid JSON in schema document {source}: {exc}", path=source) from exc

    document = parse_schema_document(data, source=source)
    logger.info(f"Loaded {len(document.types)} types from {source}")
    return document
