"""
Response parsing utilities for Elasticsearch.
"""

from typing import Dict, Any, List, Optional


def parse_hits(response: Optional[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """
    Extract hits from search response.
    
    Args:
        response: Elasticsearch response
        
    Returns:
        List of hit documents
    """
    if not response:
        return []
    return response.get("hits", {}).get("hits", [])


def parse_total_hits(response: Optional[Dict[str, Any]]) -> int:
    """
    Extract the total hit count, accepting both the object and the legacy integer form.
    """
    if not response:
        return 0
    total = response.get("hits", {}).get("total", 0)
    if isinstance(total, dict):
        return total.get("value", 0)
    return total


def parse_bulk_items(response: Optional[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """
    Extract per-action results from a bulk response.
    
    Args:
        response: Bulk API response
        
    Returns:
        List of item results, one per action
    """
    if not response:
        return []
    return response.get("items", [])


def bulk_has_errors(response: Optional[Dict[str, Any]]) -> bool:
    """True if the bulk response reports at least one failed action."""
    if not response:
        return False
    return bool(response.get("errors", False))


def parse_cat_rows(response: Any) -> List[Dict[str, Any]]:
    """
    Normalize a cat API response to a list of rows.

    Cat endpoints answer with a JSON array when ``format=json`` is requested
    (the client's ``Accept`` header does this implicitly); anything else
    yields an empty list.
    """
    if isinstance(response, list):
        return response
    return []
