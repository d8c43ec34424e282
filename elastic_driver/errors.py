"""
Exceptions raised by the Elasticsearch client.
"""


class RequestError(Exception):
    """
    Non-2xx response from Elasticsearch.

    The message is the raw response body; callers distinguish conditions
    (e.g. 404 "not found") by ``status_code``.
    """

    def __init__(self, body: str, status_code: int):
        super().__init__(body)
        self.body = body
        self.status_code = status_code

    def __repr__(self) -> str:
        return f"RequestError(status_code={self.status_code}, body={self.body!r})"


class ResponseTooLargeError(Exception):
    """Response body exceeded the configured size ceiling."""

    def __init__(self, limit: int):
        super().__init__(f"Response body exceeds limit of {limit} bytes")
        self.limit = limit
