"""
Base settings for projects building a GraphQL reference site.
Users import * from this file in their project's settings.py.
"""

import os
from pathlib import Path

BASE_DIR = Path(os.getcwd())

SECRET_KEY = os.environ.get(
    "DJANGO_SECRET_KEY", "django-insecure-graphql-reference-default-key"
)

DEBUG = os.environ.get("DJANGO_DEBUG", "False").lower() == "true"

INSTALLED_APPS = [
    # Third-party apps
    "graphene_django",
    # Framework apps
    "graphql_reference",
]

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [BASE_DIR / "templates"],
        "APP_DIRS": True,
        "OPTIONS": {},
    },
]

DATABASES = {}

GRAPHENE = {
    "MIDDLEWARE": [],
}

GRAPHQL_REFERENCE = {
    "schema_path": os.environ.get("GRAPHQL_REFERENCE_SCHEMA_PATH", str(BASE_DIR / "data" / "graphql.json")),
    "output_dir": os.environ.get("GRAPHQL_REFERENCE_OUTPUT_DIR", str(BASE_DIR / "build")),
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "{levelname} {asctime} {name} {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "loggers": {
        "graphql_reference": {
            "handlers": ["console"],
            "level": "DEBUG" if DEBUG else "INFO",
            "propagate": False,
        },
    },
}
