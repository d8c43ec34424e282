"""
Primitive stats and cluster operations for Elasticsearch.
"""

from datetime import datetime, timezone
from typing import Dict, Any, List, Optional

from elastic_driver.config import get_current_environment
from elastic_driver.es_types import IndexStats
from elastic_driver.utils.connection import fetch_cluster_health, get_client
from elastic_driver.utils.response_parser import parse_cat_rows
from elastic_driver.utils.validation import validate_index_name


async def get_index_stats(
    index: str,
    metric: str = "_all",
) -> Dict[str, Dict[str, Any]]:
    """
    Get index statistics from Elasticsearch.
    
    Args:
        index: Index name or pattern to get stats for
        metric: Specific metric or "_all" for all metrics
        
    Returns:
        Dictionary mapping index names to stats summaries
    """
    validate_index_name(index)
    
    async with get_client() as client:
        response = await client.stats_index(index, metric)
    
    results = {}
    for index_name, index_data in response.get("indices", {}).items():
        results[index_name] = IndexStats.from_dict(index_name, index_data).to_dict()
    return results


async def list_indices(index: Optional[str] = None) -> List[Dict[str, Any]]:
    """
    List indices through the cat API.
    
    Args:
        index: Optional index name or pattern to restrict the listing
        
    Returns:
        One row per index (health, status, index, docs.count, ...)
    """
    async with get_client() as client:
        response = await client.cat_indices(index, {"format": "json"})
    return parse_cat_rows(response)


async def cluster_health() -> Dict[str, Any]:
    """
    Check Elasticsearch connectivity and cluster health.

    Failures are reported as ``connected: False`` rather than raised.
    
    Returns:
        Connection flag, cat health rows, environment and timestamp
    """
    async with get_client() as client:
        rows = await fetch_cluster_health(client)
    
    return {
        "service": "elasticsearch",
        "connected": rows is not None,
        "cluster": rows or [],
        "environment": get_current_environment(),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
