"""
Bulk API payload helpers.
"""

import json
from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence, TypeVar, Union

T = TypeVar("T")

BulkBody = Union[str, Sequence[Any]]


def encode_bulk_body(body: BulkBody) -> str:
    """
    Encode a bulk request body as newline-delimited JSON.
    
    A string is taken as already serialized. A sequence is encoded item
    by item and joined with newlines. Either way a trailing newline is
    appended, as the bulk API requires.
    
    Args:
        body: Pre-serialized payload or sequence of action/source items
        
    Returns:
        NDJSON payload
    """
    if isinstance(body, str):
        return body + "\n"
    return "\n".join(json.dumps(item) for item in body) + "\n"


def build_bulk_actions(
    documents: Iterable[Dict[str, Any]],
    action: str = "index",
    id_field: Optional[str] = None,
) -> List[Dict[str, Any]]:
    """
    Expand documents into action/source line pairs.
    
    Args:
        documents: Documents to send
        action: Bulk action name ("index" or "create")
        id_field: Document field to use as ``_id`` (server assigns ids if None)
        
    Returns:
        Flat list alternating action metadata and document source
    """
    lines: List[Dict[str, Any]] = []
    for document in documents:
        meta: Dict[str, Any] = {}
        if id_field is not None and id_field in document:
            meta["_id"] = document[id_field]
        lines.append({action: meta})
        lines.append(document)
    return lines


def chunked(items: Iterable[T], size: int) -> Iterator[List[T]]:
    """
    Split items into lists of at most ``size`` elements.
    
    Raises:
        ValueError: If size is less than 1
    """
    if size < 1:
        raise ValueError("Chunk size must be at least 1")
    chunk: List[T] = []
    for item in items:
        chunk.append(item)
        if len(chunk) == size:
            yield chunk
            chunk = []
    if chunk:
        yield chunk
