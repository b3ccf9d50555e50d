"""Protocol definitions for the connection abstraction."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional, Protocol


@dataclass(frozen=True)
class HttpResponse:
    """
    Immutable HTTP response returned by a Connection.

    Attributes:
        status_code: HTTP status code (200, 404, etc.)
        content: Raw response content as bytes
        content_type: Content-Type header value
        headers: All response headers
        url: Final URL after any redirects
    """

    status_code: int
    content: bytes
    content_type: str
    headers: dict[str, str]
    url: str


class Connection(Protocol):
    """
    One HTTP connection, owned by exactly one in-flight request.

    This abstraction allows for:
    - Test doubles that record what was sent and whether close() ran
    - Different backends (aiohttp, httpx, etc.)
    """

    async def send(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: Optional[bytes] = None,
    ) -> HttpResponse:
        """
        Send the request and read the whole response body.

        Args:
            method: HTTP method name ("GET" or "POST")
            url: Full request URL including the query string
            headers: Request headers, sent verbatim
            body: Request body bytes, or None for no body

        Returns:
            HttpResponse with status, content, and headers

        Raises:
            NetworkError: On connection, timeout or I/O failures
        """
        ...

    async def close(self) -> None:
        """Release the connection. Safe to call more than once."""
        ...


class ConnectionFactory(Protocol):
    """Opens a fresh Connection for each dispatched request."""

    def open(self) -> Connection:
        """Create a new, unshared connection."""
        ...
