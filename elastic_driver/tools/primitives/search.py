"""
Primitive search operations for Elasticsearch.
"""

from typing import Dict, Any, List, Optional

from elastic_driver.utils.connection import get_client
from elastic_driver.utils.response_parser import parse_hits, parse_total_hits
from elastic_driver.utils.validation import validate_index_name, validate_size


async def search_documents(
    index: str,
    query: Dict[str, Any],
    size: int = 10,
    from_offset: int = 0,
    sort: Optional[List[Dict[str, Any]]] = None,
) -> Dict[str, Any]:
    """
    Run a Query DSL search against an index.
    
    Args:
        index: Index name, comma separated list or pattern (e.g. "logs-*")
        query: Elasticsearch Query DSL query (the value of "query")
        size: Number of results (1-10000)
        from_offset: Pagination offset
        sort: Sort criteria
        
    Returns:
        Dictionary with took, timed_out, total and hits
        
    Raises:
        ValueError: If index is empty
        RequestError: If Elasticsearch rejects the search
    """
    validate_index_name(index)
    body: Dict[str, Any] = {
        "query": query,
        "size": validate_size(size),
        "from": max(0, from_offset),
    }
    if sort:
        body["sort"] = sort
    
    async with get_client() as client:
        response = await client.search(body, index)
    
    return {
        "took": response.get("took", 0),
        "timed_out": response.get("timed_out", False),
        "total": parse_total_hits(response),
        "hits": parse_hits(response),
    }


async def count_documents(
    index: str,
    query: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Count documents in an index.
    
    Args:
        index: Index name or pattern
        query: Optional Query DSL query restricting the count
        
    Returns:
        Dictionary with index and count
    """
    validate_index_name(index)
    body = {"query": query} if query else None
    
    async with get_client() as client:
        response = await client.count(index, query=body)
    
    return {"index": index, "count": response.get("count", 0)}
