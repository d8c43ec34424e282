"""
Configuration management for the Elasticsearch client.
"""

from .environments import (
    DEFAULT_BODY_SIZE_LIMIT,
    get_current_environment,
    get_elasticsearch_config,
    get_environment_config,
    get_log_level,
)

__all__ = [
    "DEFAULT_BODY_SIZE_LIMIT",
    "get_current_environment",
    "get_elasticsearch_config",
    "get_environment_config",
    "get_log_level",
]
