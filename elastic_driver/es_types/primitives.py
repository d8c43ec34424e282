"""
Primitive type definitions.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping, Tuple, Union

from elastic_driver.utils.uri import build_uri


@dataclass(frozen=True)
class Endpoint:
    """
    HTTP method, path segments and query options for one request.

    Segments and options are copied into tuples on construction, so an
    endpoint is unaffected by later changes to the caller's list or dict.
    """
    method: str
    segments: Tuple[str, ...] = ()
    options: Union[Tuple[Tuple[str, Any], ...], Mapping[str, Any], None] = ()

    def __post_init__(self):
        object.__setattr__(self, "segments", tuple(self.segments))
        options: Iterable[Tuple[str, Any]] = ()
        if isinstance(self.options, Mapping):
            options = self.options.items()
        elif self.options:
            options = self.options
        object.__setattr__(self, "options", tuple(options))

    def to_uri(self, base_uri: str) -> str:
        """Render against the cluster base URI."""
        return build_uri(base_uri, self.segments, dict(self.options))


@dataclass
class IndexStats:
    """Elasticsearch index statistics."""
    index: str
    docs_count: int
    docs_deleted: int
    store_size_bytes: int
    indexing_index_total: int
    search_query_total: int
    
    @classmethod
    def from_dict(cls, index: str, data: Dict[str, Any]) -> "IndexStats":
        """Create from one entry of a ``_stats`` response ``indices`` map."""
        total = data.get("total", {})
        docs = total.get("docs", {})
        store = total.get("store", {})
        indexing = total.get("indexing", {})
        search = total.get("search", {})
        
        return cls(
            index=index,
            docs_count=docs.get("count", 0),
            docs_deleted=docs.get("deleted", 0),
            store_size_bytes=store.get("size_in_bytes", 0),
            indexing_index_total=indexing.get("index_total", 0),
            search_query_total=search.get("query_total", 0),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "docs_count": self.docs_count,
            "docs_deleted": self.docs_deleted,
            "store_size_bytes": self.store_size_bytes,
            "indexing_index_total": self.indexing_index_total,
            "search_query_total": self.search_query_total,
        }
