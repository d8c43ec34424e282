"""
FastMCP Elasticsearch Server.

Exposes read-only tools over the async Elasticsearch client:
- health: Check Elasticsearch connectivity
- search_documents: Query DSL search
- count_documents: Document count, optionally filtered
- get_document: Fetch a document by ID
- list_indices: Cat indices listing
- get_index_stats: Per-index statistics
"""

import logging
import sys
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv
from fastmcp import FastMCP

from elastic_driver.config import get_log_level
from elastic_driver.tools.primitives import (
    cluster_health,
    count_documents as count_documents_primitive,
    fetch_document,
    get_index_stats as get_index_stats_primitive,
    list_indices as list_indices_primitive,
    search_documents as search_documents_primitive,
)

# Initialize MCP server
mcp = FastMCP("elastic-driver")


@mcp.tool()
async def health() -> Dict[str, Any]:
    """
    Check connectivity and configuration for Elasticsearch.
    """
    return await cluster_health()


@mcp.tool()
async def search_documents(
    index: str,
    query: Dict[str, Any],
    size: int = 10,
    from_offset: int = 0,
    sort: Optional[List[Dict[str, Any]]] = None,
) -> Dict[str, Any]:
    """
    Search an index with the Elasticsearch Query DSL.
    
    Args:
        index: Index name or pattern (e.g., "logs-*")
        query: Query DSL query, e.g. {"term": {"status.keyword": "open"}}
        size: Number of results (1-10000)
        from_offset: Pagination offset
        sort: Sort criteria
    """
    return await search_documents_primitive(index, query, size, from_offset, sort)


@mcp.tool()
async def count_documents(index: str, query: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Count documents in an index, optionally restricted by a Query DSL query.
    """
    return await count_documents_primitive(index, query)


@mcp.tool()
async def get_document(index: str, id: str) -> Dict[str, Any]:
    """
    Fetch a single document by index and ID.
    """
    return await fetch_document(index, id)


@mcp.tool()
async def list_indices(index: Optional[str] = None) -> List[Dict[str, Any]]:
    """
    List indices with health, status and document counts.
    """
    return await list_indices_primitive(index)


@mcp.tool()
async def get_index_stats(index: str, metric: str = "_all") -> Dict[str, Dict[str, Any]]:
    """
    Get document, store, indexing and search statistics for matching indices.
    """
    return await get_index_stats_primitive(index, metric)


def main() -> None:
    load_dotenv()
    # stdout carries the MCP stdio transport
    logging.basicConfig(
        level=get_log_level(),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    mcp.run()


if __name__ == "__main__":
    main()
