"""
Environment configuration management.
"""

import os
from typing import Dict, Any, Optional


DEFAULT_BODY_SIZE_LIMIT = 15_000_000


def _load_config() -> Dict[str, Any]:
    """Build the configuration dict from environment variables."""
    return {
        "name": "default",
        "elasticsearch": {
            "url": os.getenv("ELASTIC_URL", os.getenv("ELASTICSEARCH_URL", "http://localhost:9200")),
            "timeout_ms": int(os.getenv("ELASTIC_TIMEOUT", os.getenv("ELASTICSEARCH_TIMEOUT", "30000"))),
            "body_size_limit": int(os.getenv("ELASTIC_BODY_SIZE_LIMIT", str(DEFAULT_BODY_SIZE_LIMIT))),
        },
        "logging": {
            "level": os.getenv("ELASTIC_LOG_LEVEL", "INFO").upper(),
        },
    }


def get_current_environment() -> str:
    """
    Get the current environment name.
    
    Returns:
        Always returns 'default' since we use a single environment
    """
    return "default"


def get_environment_config(environment: Optional[str] = None) -> Dict[str, Any]:
    """
    Get configuration for the environment.

    Environment variables are read on every call so that values loaded
    by ``load_dotenv()`` after import are honoured.
    
    Args:
        environment: Ignored (kept for compatibility)
        
    Returns:
        Environment configuration dictionary
    """
    return _load_config()


def get_elasticsearch_config(environment: Optional[str] = None) -> Dict[str, Any]:
    """
    Get Elasticsearch configuration.
    
    Args:
        environment: Ignored (kept for compatibility)
        
    Returns:
        Elasticsearch configuration dictionary
    """
    return get_environment_config(environment)["elasticsearch"]


def get_log_level(environment: Optional[str] = None) -> str:
    """Log level name for the server entry point."""
    return get_environment_config(environment)["logging"]["level"]
