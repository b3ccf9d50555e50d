"""HTTP connections and URL helpers for restcall."""

from .auth import basic_auth_header
from .client import AiohttpConnection, AiohttpConnectionFactory
from .protocols import Connection, ConnectionFactory, HttpResponse
from .url import build_url

__all__ = [
    "AiohttpConnection",
    "AiohttpConnectionFactory",
    "Connection",
    "ConnectionFactory",
    "HttpResponse",
    "basic_auth_header",
    "build_url",
]
