"""Restcall request, response and configuration models."""

from .config import ClientConfig
from .request import DataType, Method, RestRequest
from .responses import (
    JsonResponse,
    PlainTextResponse,
    ResponseKind,
    ResponseVariant,
    XmlResponse,
)
from .result import RestResult

__all__ = [
    # Config
    "ClientConfig",
    # Request
    "DataType",
    "Method",
    "RestRequest",
    # Responses
    "JsonResponse",
    "PlainTextResponse",
    "ResponseKind",
    "ResponseVariant",
    "XmlResponse",
    # Result
    "RestResult",
]
