import json

import pytest

from graphql_reference.catalog import parse_schema_document


def named(kind, name):
    return {"kind": kind, "name": name, "ofType": None}


def non_null(of_type):
    return {"kind": "NON_NULL", "name": None, "ofType": of_type}


def list_of(of_type):
    return {"kind": "LIST", "name": None, "ofType": of_type}


INTROSPECTION_TYPES = [
    {
        "kind": "OBJECT",
        "name": "Query",
        "description": "Root query",
        "fields": [
            {
                "name": "app",
                "description": "Look up an app",
                "args": [
                    {
                        "name": "id",
                        "description": None,
                        "type": non_null(named("SCALAR", "ID")),
                        "defaultValue": None,
                    }
                ],
                "type": named("OBJECT", "App"),
                "isDeprecated": False,
                "deprecationReason": None,
            }
        ],
        "interfaces": [],
    },
    {
        "kind": "OBJECT",
        "name": "AppVersion",
        "description": "A deployed version",
        "fields": [
            {
                "name": "status",
                "description": None,
                "args": [],
                "type": non_null(named("ENUM", "HTTPStatus")),
                "isDeprecated": True,
                "deprecationReason": "Use state",
            }
        ],
        "interfaces": [named("INTERFACE", "Node")],
    },
    {
        "kind": "OBJECT",
        "name": "App",
        "description": None,
        "fields": [
            {
                "name": "versions",
                "description": "All versions",
                "args": [],
                "type": non_null(list_of(non_null(named("OBJECT", "AppVersion")))),
                "isDeprecated": False,
                "deprecationReason": None,
            }
        ],
        "interfaces": [named("INTERFACE", "Node")],
    },
    {
        "kind": "INTERFACE",
        "name": "Node",
        "description": "Anything with an id",
        "fields": [],
        "possibleTypes": [named("OBJECT", "App"), named("OBJECT", "AppVersion")],
    },
    {"kind": "SCALAR", "name": "ID", "description": None},
    {"kind": "SCALAR", "name": "DateTime", "description": "ISO-8601 timestamp"},
    {
        "kind": "ENUM",
        "name": "HTTPStatus",
        "description": None,
        "enumValues": [
            {"name": "OK", "description": "Fine", "isDeprecated": False, "deprecationReason": None},
            {"name": "GONE", "description": None, "isDeprecated": True, "deprecationReason": "Never used"},
        ],
    },
    {
        "kind": "UNION",
        "name": "SearchResult",
        "description": None,
        "possibleTypes": [named("OBJECT", "App")],
    },
    {"kind": "INPUT_OBJECT", "name": "AppFilter", "description": None, "inputFields": []},
    {"kind": "OBJECT", "name": "__Type", "description": None, "fields": []},
    {"kind": "ENUM", "name": "__TypeKind", "description": None, "enumValues": []},
]


@pytest.fixture
def introspection_data():
    return {"data": {"__schema": {"types": [dict(t) for t in INTROSPECTION_TYPES]}}}


@pytest.fixture
def schema_document(introspection_data):
    return parse_schema_document(introspection_data, source="fixture")


@pytest.fixture
def schema_file(tmp_path, introspection_data):
    path = tmp_path / "graphql.json"
    path.write_text(json.dumps(introspection_data), encoding="utf-8")
    return path
