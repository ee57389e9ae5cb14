"""
Utility modules for GraphQL reference generation.
"""

from .text import underscore

__all__ = ["underscore"]
