"""
Default HTTP transport for the Elasticsearch client.
"""

from typing import Any, Dict, Optional

import httpx

from elastic_driver.config import get_elasticsearch_config


def build_async_client(config: Optional[Dict[str, Any]] = None) -> httpx.AsyncClient:
    """
    Create an ``httpx.AsyncClient`` from Elasticsearch configuration.
    
    Args:
        config: Elasticsearch config dict (read from the environment if None)
        
    Returns:
        Configured async HTTP client
    """
    config = config or get_elasticsearch_config()
    return httpx.AsyncClient(timeout=config["timeout_ms"] / 1000.0)
