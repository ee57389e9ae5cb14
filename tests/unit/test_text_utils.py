import pytest

from graphql_reference.utils import underscore

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    "name,expected",
    [
        ("AppVersion", "app_version"),
        ("Query", "query"),
        ("HTTPStatus", "http_status"),
        ("Field2Type", "field2_type"),
        ("DateTime", "date_time"),
        ("ID", "id"),
        ("already_snake", "already_snake"),
        ("URLsForAPI", "ur_ls_for_api"),
        ("X", "x"),
        ("", ""),
    ],
)
def test_underscore(name, expected):
    assert underscore(name) == expected
