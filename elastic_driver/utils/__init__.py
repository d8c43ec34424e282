"""
Utility functions for the Elasticsearch client.

``elastic_driver.utils.connection`` is not re-exported here because it
depends on the client module itself.
"""

from .uri import build_uri, build_query_string, encode_segment
from .bulk import encode_bulk_body, build_bulk_actions, chunked
from .validation import validate_index_name, validate_size, clamp_value
from .response_parser import (
    parse_hits,
    parse_total_hits,
    parse_bulk_items,
    bulk_has_errors,
    parse_cat_rows,
)

__all__ = [
    # URI building
    "build_uri",
    "build_query_string",
    "encode_segment",
    # Bulk payloads
    "encode_bulk_body",
    "build_bulk_actions",
    "chunked",
    # Validation
    "validate_index_name",
    "validate_size",
    "clamp_value",
    # Response parsing
    "parse_hits",
    "parse_total_hits",
    "parse_bulk_items",
    "bulk_has_errors",
    "parse_cat_rows",
]
