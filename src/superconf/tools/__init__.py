"""
Tools for writing superconf documents.
"""

from .serializer import dumps, to_yaml

__all__ = ['dumps', 'to_yaml']
