"""
Type definitions for the Elasticsearch client.
"""

from .primitives import Endpoint, IndexStats

__all__ = [
    "Endpoint",
    "IndexStats",
]
