"""
Data models for superconf documents and parser settings.
"""

from .document import Document, Entry, Nested, Scalar
from .settings import DEFAULT_SEPARATOR, ParserSettings

__all__ = ['Document', 'Entry', 'Nested', 'Scalar', 'DEFAULT_SEPARATOR', 'ParserSettings']
