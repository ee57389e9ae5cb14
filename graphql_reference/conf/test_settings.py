from .framework_settings import *  # noqa: F403

ENVIRONMENT = "testing"

GRAPHQL_REFERENCE = {
    "output_dir": "build-test",
    "site_title": "Test GraphQL reference",
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
}
