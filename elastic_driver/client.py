"""
Asynchronous Elasticsearch REST client.

Every operation maps to exactly one HTTP request: it builds an endpoint,
serializes the optional JSON body, dispatches it through the injected
``httpx.AsyncClient`` and decodes the response.
"""

import json
import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence

import httpx

from elastic_driver.config import DEFAULT_BODY_SIZE_LIMIT
from elastic_driver.errors import RequestError, ResponseTooLargeError
from elastic_driver.es_types import Endpoint
from elastic_driver.utils.bulk import BulkBody, encode_bulk_body
from elastic_driver.utils.transport import build_async_client

logger = logging.getLogger(__name__)

JSON_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}

Options = Optional[Mapping[str, Any]]


class ElasticClient:
    """Client for the Elasticsearch HTTP API."""

    def __init__(
        self,
        base_uri: str,
        http_client: Optional[httpx.AsyncClient] = None,
        body_size_limit: int = DEFAULT_BODY_SIZE_LIMIT,
    ):
        """
        Args:
            base_uri: Cluster URL, e.g. ``http://127.0.0.1:9200``
            http_client: Transport to use; a default one is built and owned otherwise
            body_size_limit: Maximum response body size in bytes
        """
        self._owns_http_client = http_client is None
        self._http_client = http_client or build_async_client()
        self._base_uri = base_uri.rstrip("/")
        self._body_size_limit = body_size_limit
        logger.debug(f"Elasticsearch client created for {self._base_uri}")

    @property
    def base_uri(self) -> str:
        return self._base_uri

    async def aclose(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_http_client:
            await self._http_client.aclose()

    async def __aenter__(self) -> "ElasticClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    # ========== INDICES ==========

    async def create_index(self, index: str, body: Optional[Dict[str, Any]] = None) -> Any:
        """Create an index, optionally with settings and mappings."""
        return await self._request(Endpoint("PUT", [index]), body)

    async def exists_index(self, index: str) -> None:
        """Returns None if the index exists; raises RequestError(404) otherwise."""
        return await self._request(Endpoint("HEAD", [index]))

    async def get_index(self, index: str) -> Any:
        return await self._request(Endpoint("GET", [index]))

    async def delete_index(self, index: str) -> Any:
        return await self._request(Endpoint("DELETE", [index]))

    async def stats_index(self, index: str, metric: str = "_all", options: Options = None) -> Any:
        """
        Get index statistics.
        
        Args:
            index: Index name or comma separated list
            metric: Stats metric ("_all", "docs", "indexing", ...)
            options: Query options
        """
        return await self._request(Endpoint("GET", [index, "_stats", metric], options))

    # ========== DOCUMENTS ==========

    async def index_document(
        self,
        index: str,
        id: str,
        body: Dict[str, Any],
        options: Options = None,
        doc_type: str = "_doc",
    ) -> Any:
        """
        Index a document.
        
        An empty ``id`` lets Elasticsearch assign one (POST); otherwise the
        document is stored under ``id`` (PUT).
        
        Args:
            index: Target index
            id: Document ID, or "" for an automatic one
            body: Document source
            options: Query options (e.g. ``{"refresh": "true"}``)
            doc_type: Document type path segment
        """
        method = "POST" if id == "" else "PUT"
        return await self._request(Endpoint(method, [index, doc_type, id], options), body)

    async def exists_document(self, index: str, id: str, doc_type: str = "_doc") -> None:
        """Returns None if the document exists; raises RequestError(404) otherwise."""
        return await self._request(Endpoint("HEAD", [index, doc_type, id]))

    async def get_document(
        self,
        index: str,
        id: str,
        options: Options = None,
        doc_type: str = "_doc",
    ) -> Any:
        return await self._request(Endpoint("GET", [index, doc_type, id], options))

    async def delete_document(
        self,
        index: str,
        id: str,
        options: Options = None,
        doc_type: str = "_doc",
    ) -> Any:
        return await self._request(Endpoint("DELETE", [index, doc_type, id], options))

    # ========== SEARCH ==========

    async def uri_search_one_index(self, index: str, query: str, options: Options = None) -> Any:
        return await self._uri_search(index, query, options)

    async def uri_search_many_indices(
        self,
        indices: Sequence[str],
        query: str,
        options: Options = None,
    ) -> Any:
        return await self._uri_search(",".join(indices), query, options)

    async def uri_search_all_indices(self, query: str, options: Options = None) -> Any:
        return await self._uri_search("_all", query, options)

    async def search(
        self,
        query: Dict[str, Any],
        index: Optional[str] = None,
        options: Options = None,
    ) -> Any:
        """
        Run a Query DSL search.
        
        Args:
            query: Search request body (``{"query": {...}, ...}``)
            index: Index name or comma separated list (all indices if None)
            options: Query options
        """
        return await self._request(Endpoint("POST", _optional_index(index, "_search"), options), query)

    async def count(
        self,
        index: str,
        options: Options = None,
        query: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Count documents, optionally restricted by a query body."""
        return await self._request(Endpoint("GET", [index, "_count"], options), query)

    async def update_by_query(
        self,
        body: Dict[str, Any],
        index: Optional[str] = None,
        options: Options = None,
    ) -> Any:
        return await self._request(
            Endpoint("POST", _optional_index(index, "_update_by_query"), options), body
        )

    # ========== BULK ==========

    async def bulk(self, body: BulkBody, index: Optional[str] = None, options: Options = None) -> Any:
        """
        Send a bulk request.
        
        Args:
            body: Pre-serialized NDJSON string, or a sequence of action and
                source items encoded one per line
            index: Default index for actions that do not name one
            options: Query options
        """
        endpoint = Endpoint("POST", _optional_index(index, "_bulk"), options)
        return await self._send(endpoint, encode_bulk_body(body))

    # ========== CAT / CLUSTER ==========

    async def cat_indices(self, index: Optional[str] = None, options: Options = None) -> Any:
        segments = ["_cat", "indices"]
        if index:
            segments.append(index)
        return await self._request(Endpoint("GET", segments, options))

    async def cat_health(self, options: Options = None) -> Any:
        return await self._request(Endpoint("GET", ["_cat", "health"], options))

    async def refresh(self, index: Optional[str] = None, options: Options = None) -> Any:
        """Make recent changes searchable on one, several (comma separated) or all indices."""
        return await self._request(Endpoint("POST", _optional_index(index, "_refresh"), options))

    # ========== DISPATCH ==========

    async def _uri_search(self, index_spec: str, query: str, options: Options) -> Any:
        params: Dict[str, Any] = dict(options or {})
        if query:
            params["q"] = query
        return await self._request(Endpoint("GET", [index_spec, "_search"], params))

    async def _request(self, endpoint: Endpoint, body: Optional[Any] = None) -> Any:
        content = json.dumps(body) if body is not None else None
        return await self._send(endpoint, content)

    async def _send(self, endpoint: Endpoint, content: Optional[str] = None) -> Any:
        """
        Issue one request and interpret the response.
        
        Returns:
            Decoded JSON, or None for an empty 2xx body
            
        Raises:
            RequestError: If the status code is not 2xx
            ResponseTooLargeError: If the body exceeds the size limit
        """
        uri = endpoint.to_uri(self._base_uri)
        async with self._http_client.stream(
            endpoint.method,
            uri,
            headers=JSON_HEADERS,
            content=content,
        ) as response:
            raw = await self._read_body(response)
        status = response.status_code
        logger.debug(f"{endpoint.method} {uri} -> {status}")

        text = raw.decode("utf-8", errors="replace")
        if status // 100 != 2:
            raise RequestError(text, status)
        if text == "":
            return None
        return json.loads(text)

    async def _read_body(self, response: httpx.Response) -> bytes:
        chunks = []
        received = 0
        async for chunk in response.aiter_bytes():
            received += len(chunk)
            if received > self._body_size_limit:
                raise ResponseTooLargeError(self._body_size_limit)
            chunks.append(chunk)
        return b"".join(chunks)


def _optional_index(index: Optional[str], action: str) -> List[str]:
    if index:
        return [index, action]
    return [action]
