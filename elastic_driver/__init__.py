"""
Asynchronous client for the Elasticsearch HTTP API.
"""

from .client import ElasticClient
from .errors import RequestError, ResponseTooLargeError

__all__ = [
    "ElasticClient",
    "RequestError",
    "ResponseTooLargeError",
]

__version__ = "0.1.0"
