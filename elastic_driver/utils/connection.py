"""
Elasticsearch connection management.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from elastic_driver.client import ElasticClient
from elastic_driver.config import get_elasticsearch_config
from elastic_driver.errors import RequestError, ResponseTooLargeError
from elastic_driver.utils.response_parser import parse_cat_rows

logger = logging.getLogger(__name__)


def get_client(environment: Optional[str] = None) -> ElasticClient:
    """
    Create an Elasticsearch client for the specified environment.

    The returned client owns its transport; close it with ``aclose()``
    or use it as an async context manager.
    
    Args:
        environment: Environment name (uses current if not specified)
        
    Returns:
        Configured Elasticsearch client
    """
    config = get_elasticsearch_config(environment)
    return ElasticClient(config["url"], body_size_limit=config["body_size_limit"])


async def fetch_cluster_health(client: ElasticClient) -> Optional[List[Dict[str, Any]]]:
    """
    Fetch cat health rows, reporting any failure as None.
    
    Args:
        client: Client to test
        
    Returns:
        Health rows, or None if the cluster did not answer with any
    """
    try:
        response = await client.cat_health({"format": "json"})
    except (RequestError, ResponseTooLargeError, httpx.HTTPError, ValueError) as e:
        logger.warning(f"Elasticsearch connectivity check failed: {e!r}")
        return None
    rows = parse_cat_rows(response)
    return rows or None


async def check_connection(client: ElasticClient) -> bool:
    """
    Test Elasticsearch connectivity with a cat health request.
    
    Returns:
        True if the cluster answered with a health row
    """
    return await fetch_cluster_health(client) is not None
