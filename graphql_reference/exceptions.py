"""
Custom exceptions for GraphQL reference generation.
"""

from typing import Optional


class GraphQLReferenceError(Exception):
    """Base exception for reference generation errors."""


class SchemaDocumentError(GraphQLReferenceError):
    """Raised when the introspection schema document cannot be loaded."""

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        super().__init__(message)
