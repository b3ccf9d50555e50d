"""Request descriptor for a single REST call."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class Method(str, Enum):
    """HTTP methods the dispatcher knows how to send."""

    GET = "GET"
    POST = "POST"


class DataType(str, Enum):
    """Response body formats, used to select the parser."""

    JSON = "json"
    XML = "xml"
    PLAIN_TEXT = "plain_text"


@dataclass
class RestRequest:
    """
    Everything needed to build and send one HTTP call.

    A URL and the expected data type are required. The method defaults to
    GET. Arguments are appended to the URL as query parameters, headers are
    sent verbatim, and post_data is a caller-formatted body (JSON text, form
    encoded values, etc.) that is only sent for POST requests.

    When both http_username and http_password are set, basic authentication
    is sent with the request.

    No validation happens here; a bad URL or unsupported method is reported
    when the request is dispatched.

    Example:
        request = RestRequest("https://api.example.com/items", DataType.JSON)
        request.add_argument("page", "2")
        request.add_header("Accept", "application/json")
    """

    base_url: str
    data_type: DataType
    method: Method = Method.GET
    arguments: dict[str, str] = field(default_factory=dict)
    headers: dict[str, str] = field(default_factory=dict)
    post_data: Optional[str] = None
    http_username: Optional[str] = None
    http_password: Optional[str] = None

    @classmethod
    def get(
        cls,
        base_url: str,
        data_type: DataType,
        arguments: Optional[dict[str, str]] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> RestRequest:
        """Build a GET request with optional query arguments and headers."""
        return cls(
            base_url,
            data_type,
            Method.GET,
            arguments=dict(arguments or {}),
            headers=dict(headers or {}),
        )

    @classmethod
    def post(
        cls,
        base_url: str,
        data_type: DataType,
        post_data: Optional[str] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> RestRequest:
        """Build a POST request carrying post_data as its body."""
        return cls(
            base_url,
            data_type,
            Method.POST,
            headers=dict(headers or {}),
            post_data=post_data,
        )

    @classmethod
    def with_basic_auth(
        cls,
        base_url: str,
        data_type: DataType,
        username: str,
        password: str,
        method: Method = Method.GET,
        arguments: Optional[dict[str, str]] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> RestRequest:
        """Build a request that authenticates with HTTP basic auth."""
        return cls(
            base_url,
            data_type,
            method,
            arguments=dict(arguments or {}),
            headers=dict(headers or {}),
            http_username=username,
            http_password=password,
        )

    @property
    def has_credentials(self) -> bool:
        """True when both basic auth username and password are set."""
        return self.http_username is not None and self.http_password is not None

    def add_header(self, name: str, value: str) -> None:
        """Add or replace a request header."""
        self.headers[name] = value

    def remove_header(self, name: str) -> None:
        """Remove a request header if present."""
        self.headers.pop(name, None)

    def add_argument(self, name: str, value: str) -> None:
        """Add or replace a query argument."""
        self.arguments[name] = value

    def remove_argument(self, name: str) -> None:
        """Remove a query argument if present."""
        self.arguments.pop(name, None)
