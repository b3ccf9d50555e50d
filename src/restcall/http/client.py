"""aiohttp-backed connections, one session per request."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from types import TracebackType
from typing import Optional

import aiohttp

from ..errors import NetworkError
from ..models.config import ClientConfig
from .protocols import HttpResponse

logger = logging.getLogger(__name__)


class AiohttpConnection:
    """
    A single HTTP connection backed by its own aiohttp session.

    The session is created on the first send() and torn down by close(), so
    nothing is pooled or shared between requests.

    Example:
        connection = AiohttpConnection(ClientConfig())
        try:
            response = await connection.send("GET", "https://example.com", {})
            print(response.content.decode())
        finally:
            await connection.close()
    """

    # Exceptions translated into NetworkError
    NETWORK_EXCEPTIONS = (
        aiohttp.ClientError,
        asyncio.TimeoutError,
        OSError,
    )

    def __init__(self, config: ClientConfig) -> None:
        """
        Initialize the connection.

        Args:
            config: Timeouts, size limit and User-Agent to apply
        """
        self._config = config
        self._session: aiohttp.ClientSession | None = None
        self._closed = False

    @property
    def closed(self) -> bool:
        """True once close() has run."""
        return self._closed

    def _create_session(self) -> aiohttp.ClientSession:
        connector = aiohttp.TCPConnector(limit=1, force_close=True)
        headers = {}
        if self._config.user_agent:
            headers["User-Agent"] = self._config.user_agent
        return aiohttp.ClientSession(
            connector=connector,
            headers=headers,
            timeout=aiohttp.ClientTimeout(
                total=self._config.timeout,
                connect=self._config.connect_timeout,
            ),
        )

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
            method: HTTP method name
            url: Full request URL including the query string
            headers: Request headers, sent verbatim
            body: Request body bytes, or None for no body

        Returns:
            HttpResponse with status, content, and headers

        Raises:
            NetworkError: On connection, timeout, I/O errors or oversized content
            RuntimeError: If the connection was already closed
        """
        if self._closed:
            raise RuntimeError("Connection already closed")
        if self._session is None:
            self._session = self._create_session()

        max_size = self._config.max_content_size
        try:
            async with self._session.request(
                method,
                url,
                headers=dict(headers),
                data=body,
                skip_auto_headers=("Content-Type",),
                allow_redirects=self._config.allow_redirects,
            ) as response:
                # Check Content-Length if available
                content_length = response.headers.get("Content-Length")
                if content_length and content_length.isdigit() and int(content_length) > max_size:
                    raise NetworkError(f"Content too large: {content_length} bytes", response.status)

                # Read content with size limit
                content = b""
                async for chunk in response.content.iter_chunked(8192):
                    content += chunk
                    if len(content) > max_size:
                        raise NetworkError(f"Content size limit exceeded: >{max_size} bytes", response.status)

                return HttpResponse(
                    status_code=response.status,
                    content=content,
                    content_type=response.headers.get("Content-Type", ""),
                    headers=dict(response.headers),
                    url=str(response.url),
                )

        except asyncio.TimeoutError as e:
            raise NetworkError(f"Timed out requesting {url}") from e
        except self.NETWORK_EXCEPTIONS as e:
            raise NetworkError(f"HTTP error for {url}: {e}") from e

    async def close(self) -> None:
        """Close the underlying session."""
        self._closed = True
        if self._session is not None:
            await self._session.close()
            self._session = None

    async def __aenter__(self) -> AiohttpConnection:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.close()


class AiohttpConnectionFactory:
    """Opens a new AiohttpConnection for every request."""

    def __init__(self, config: Optional[ClientConfig] = None) -> None:
        self._config = config or ClientConfig()

    def open(self) -> AiohttpConnection:
        logger.debug("Opening connection")
        return AiohttpConnection(self._config)
