"""
Unit tests for introspection document loading.
"""

import json

import pytest

from graphql_reference.catalog import load_schema_document, parse_schema_document
from graphql_reference.exceptions import GraphQLReferenceError, SchemaDocumentError

pytestmark = pytest.mark.unit


def test_load_wrapped_response(schema_file):
    document = load_schema_document(schema_file)

    assert document.source == str(schema_file)
    assert len(document.types) == 11
    assert document.types[0]["name"] == "Query"


def test_parse_bare_schema_payload():
    document = parse_schema_document({"__schema": {"types": [{"name": "Query", "kind": "OBJECT"}]}})
    assert document.types == ({"name": "Query", "kind": "OBJECT"},)


def test_missing_file(tmp_path):
    missing = tmp_path / "nope.json"
    with pytest.raises(SchemaDocumentError) as excinfo:
        load_schema_document(missing)
    assert excinfo.value.path == str(missing)


def test_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(SchemaDocumentError, match="Invalid JSON"):
        load_schema_document(path)


@pytest.mark.parametrize(
    "payload",
    [
        [],
        {"data": {}},
        {"data": {"__schema": {}}},
        {"__schema": {"types": {"Query": {}}}},
    ],
)
def test_malformed_documents(tmp_path, payload):
    path = tmp_path / "schema.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    with pytest.raises(GraphQLReferenceError):
        load_schema_document(path)
