"""
Primitive tools for Elasticsearch operations.
"""

from .search import search_documents, count_documents
from .documents import fetch_document
from .stats import get_index_stats, list_indices, cluster_health

__all__ = [
    # Search operations
    "search_documents",
    "count_documents",
    # Document operations
    "fetch_document",
    # Stats and cluster operations
    "get_index_stats",
    "list_indices",
    "cluster_health",
]
