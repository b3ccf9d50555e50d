"""Dispatcher that runs requests off the caller's path and reports back once."""

from __future__ import annotations

import asyncio
import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from functools import partial
from typing import Any, Callable, Optional, Union
from urllib.parse import urlparse

from .errors import (
    AuthenticationError,
    ConfigurationError,
    ErrorKind,
    HttpStatusError,
    RestError,
)
from .http.auth import basic_auth_header
from .http.client import AiohttpConnectionFactory
from .http.protocols import ConnectionFactory, HttpResponse
from .http.url import build_url
from .models.config import ClientConfig
from .models.request import DataType, Method, RestRequest
from .models.result import RestResult
from .parsing import decode_body, parse_body

logger = logging.getLogger(__name__)

# Type alias for completion callbacks
CompletionCallback = Callable[[RestResult], Any]

AUTH_FAILURE_STATUSES = frozenset({401, 403})


def _resolve_method(method: Union[Method, str]) -> Method:
    if isinstance(method, Method):
        return method
    try:
        return Method(str(method).upper())
    except ValueError as e:
        raise ConfigurationError(f"Unsupported HTTP method: {method!r}") from e


def _resolve_data_type(data_type: Union[DataType, str]) -> DataType:
    if isinstance(data_type, DataType):
        return data_type
    try:
        return DataType(str(data_type).lower())
    except ValueError as e:
        raise ConfigurationError(f"Unsupported data type: {data_type!r}") from e


def _validate_base_url(base_url: str) -> None:
    if not base_url:
        raise ConfigurationError("Request has no base URL")
    parsed = urlparse(base_url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigurationError(f"Invalid URL: {base_url}")


class Dispatcher:
    """
    Performs REST requests in the background and hands each result to a
    completion callback exactly once.

    Inside a running event loop, execute() schedules the request as a task
    on that loop and the callback runs on the loop once the task finishes.
    Without a running loop, the request runs on a worker thread (each with
    its own event loop) and the callback runs on that worker thread.

    The callback always receives a RestResult. Failures never escape as
    exceptions; check result.ok and result.error_kind instead.

    Example:
        def on_complete(result: RestResult) -> None:
            if result.ok:
                print(result.response.content)

        with Dispatcher() as dispatcher:
            request = RestRequest("https://api.example.com/items", DataType.JSON)
            dispatcher.execute(request, on_complete).result()
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        connection_factory: Optional[ConnectionFactory] = None,
    ) -> None:
        """
        Initialize the dispatcher.

        Args:
            config: Client configuration (defaults to ClientConfig())
            connection_factory: Source of per-request connections. Defaults
                                to an aiohttp factory built from config.
        """
        self.config = config or ClientConfig()
        self._connection_factory = connection_factory or AiohttpConnectionFactory(self.config)
        self._executor: Optional[ThreadPoolExecutor] = None
        self._executor_lock = threading.Lock()
        self._tasks: set[asyncio.Task[RestResult]] = set()

    @property
    def executor(self) -> ThreadPoolExecutor:
        """Get or create the worker thread pool."""
        with self._executor_lock:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=self.config.max_workers,
                    thread_name_prefix="restcall-worker-",
                )
            return self._executor

    def execute(
        self,
        request: RestRequest,
        on_complete: CompletionCallback,
    ) -> Union[asyncio.Task[RestResult], Future[RestResult]]:
        """
        Dispatch a request and return immediately.

        on_complete is invoked exactly once with the RestResult, never from
        within this call.

        Args:
            request: The request to perform
            on_complete: Callback receiving the result

        Returns:
            The asyncio.Task (inside a running loop) or concurrent Future
            (otherwise) that resolves to the same RestResult
        """
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            loop = None

        if loop is not None:
            task = loop.create_task(self.fetch(request))
            self._tasks.add(task)
            task.add_done_callback(partial(self._on_task_done, on_complete))
            return task

        return self.executor.submit(self._run_in_worker, request, on_complete)

    def execute_blocking(self, request: RestRequest) -> RestResult:
        """
        Perform a request synchronously and return its result.

        Convenience wrapper for sync code. Do not call from within a running
        event loop; use fetch() or execute() there instead.

        Raises:
            RuntimeError: If called from async context
        """
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            return asyncio.run(self.fetch(request))
        raise RuntimeError("execute_blocking() called from async context. Use 'await dispatcher.fetch()' instead.")

    async def fetch(self, request: RestRequest) -> RestResult:
        """
        Perform a request and parse its body.

        Never raises for request failures; they are logged and returned as
        a failed RestResult carrying the error kind.

        Args:
            request: The request to perform

        Returns:
            RestResult with the parsed response or the failure details
        """
        url: Optional[str] = None
        try:
            method = _resolve_method(request.method)
            data_type = _resolve_data_type(request.data_type)
            _validate_base_url(request.base_url)

            url = build_url(request.base_url, request.arguments, encode=self.config.encode_query)
            response = await self._send(method, url, self._build_headers(request), self._build_body(method, request))

            if response.status_code in AUTH_FAILURE_STATUSES:
                raise AuthenticationError(f"HTTP {response.status_code} for {url}", response.status_code)
            if response.status_code >= 400:
                raise HttpStatusError(f"HTTP {response.status_code} for {url}", response.status_code)

            parsed = parse_body(data_type, decode_body(response.content))
            logger.debug(f"Completed {method.value} {url}: HTTP {response.status_code}, {len(response.content)} bytes")
            return RestResult.success(parsed, status_code=response.status_code, url=response.url)

        except RestError as e:
            logger.error(f"Request to {url or request.base_url} failed ({e.kind.value}): {e.message}", exc_info=True)
            return RestResult.from_error(e, url)

        except Exception as e:
            logger.exception(f"Unexpected error requesting {url or request.base_url}: {e}")
            return RestResult.failure(ErrorKind.UNKNOWN, str(e) or type(e).__name__, url=url)

    async def _send(
        self,
        method: Method,
        url: str,
        headers: dict[str, str],
        body: Optional[bytes],
    ) -> HttpResponse:
        """Send over a fresh connection, closing it on every path."""
        connection = self._connection_factory.open()
        try:
            logger.debug(f"Sending {method.value} {url}")
            return await connection.send(method.value, url, headers, body)
        finally:
            await connection.close()

    def _build_headers(self, request: RestRequest) -> dict[str, str]:
        headers = dict(request.headers)
        if request.has_credentials:
            has_authorization = any(name.lower() == "authorization" for name in headers)
            if not has_authorization:
                headers["Authorization"] = basic_auth_header(request.http_username, request.http_password)
        return headers

    def _build_body(self, method: Method, request: RestRequest) -> Optional[bytes]:
        if method == Method.POST:
            return (request.post_data or "").encode("utf-8")
        if request.post_data is not None:
            logger.debug(f"Ignoring post_data for {method.value} request to {request.base_url}")
        return None

    def _run_in_worker(self, request: RestRequest, on_complete: CompletionCallback) -> RestResult:
        result = asyncio.run(self.fetch(request))
        self._deliver(on_complete, result)
        return result

    def _on_task_done(self, on_complete: CompletionCallback, task: asyncio.Task[RestResult]) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            result = RestResult.failure(ErrorKind.UNKNOWN, "Request was cancelled")
        else:
            result = task.result()
        self._deliver(on_complete, result)

    @staticmethod
    def _deliver(on_complete: CompletionCallback, result: RestResult) -> None:
        try:
            on_complete(result)
        except Exception:
            logger.exception("Completion callback raised")

    def shutdown(self, wait: bool = True) -> None:
        """
        Shutdown the worker thread pool.

        Args:
            wait: If True, wait for in-flight worker requests to complete
        """
        with self._executor_lock:
            executor, self._executor = self._executor, None
        if executor is not None:
            executor.shutdown(wait=wait)

    def __enter__(self) -> Dispatcher:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.shutdown(wait=True)

    async def __aenter__(self) -> Dispatcher:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)
        self.shutdown(wait=True)


_default_dispatcher: Optional[Dispatcher] = None
_default_lock = threading.Lock()


def get_default_dispatcher() -> Dispatcher:
    """Return the shared dispatcher used by execute_request(), creating it on first use."""
    global _default_dispatcher
    with _default_lock:
        if _default_dispatcher is None:
            _default_dispatcher = Dispatcher()
        return _default_dispatcher


def set_default_dispatcher(dispatcher: Optional[Dispatcher]) -> None:
    """Replace the shared dispatcher. Passing None resets it to a fresh default on next use."""
    global _default_dispatcher
    with _default_lock:
        _default_dispatcher = dispatcher


def execute_request(
    request: RestRequest,
    on_complete: CompletionCallback,
) -> Union[asyncio.Task[RestResult], Future[RestResult]]:
    """
    Run a REST request with the shared dispatcher.

    Args:
        request: The request to perform
        on_complete: Callback invoked exactly once with the RestResult

    Returns:
        Handle resolving to the same RestResult (see Dispatcher.execute)

    Example:
        request = RestRequest.get(
            "https://api.example.com/search",
            DataType.JSON,
            arguments={"q": "python"},
        )
        execute_request(request, lambda result: print(result.response))
    """
    return get_default_dispatcher().execute(request, on_complete)
