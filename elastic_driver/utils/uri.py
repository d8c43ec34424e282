"""
URI construction helpers for Elasticsearch endpoints.
"""

from typing import Any, Iterable, Mapping, Optional
from urllib.parse import quote, urlencode


def encode_segment(segment: str) -> str:
    """Percent-encode a single path segment, including ``/`` and ``,``."""
    return quote(segment, safe="")


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_query_string(options: Optional[Mapping[str, Any]]) -> str:
    """
    Serialize an options map as a URL query string.
    
    Args:
        options: Query options (string keys, scalar values)
        
    Returns:
        Encoded query string without the leading ``?``, or ``""`` if empty
        
    Raises:
        TypeError: If a key is not a string
    """
    if not options:
        return ""
    pairs = []
    for key, value in options.items():
        if not isinstance(key, str):
            raise TypeError(f"Option keys must be strings, got {type(key).__name__}")
        if value is None:
            continue
        pairs.append((key, _stringify(value)))
    return urlencode(pairs)


def build_uri(
    base_uri: str,
    segments: Iterable[str],
    options: Optional[Mapping[str, Any]] = None,
) -> str:
    """
    Join the base URI with encoded path segments and append options.
    
    Args:
        base_uri: Cluster base URI without trailing slash
        segments: Path segments in order
        options: Query options; appended only when non-empty
        
    Returns:
        Full request URI
    """
    uri = "/".join([base_uri] + [encode_segment(s) for s in segments])
    query_string = build_query_string(options)
    if query_string:
        uri += "?" + query_string
    return uri
