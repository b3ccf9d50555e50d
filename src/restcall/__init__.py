"""
restcall - Fire-and-callback REST requests with typed, parsed responses.

Usage:
    from restcall import DataType, RestRequest, RestResult, execute_request

    def on_complete(result: RestResult) -> None:
        if result.ok:
            print(result.response.kind, result.response.content)
        else:
            print(result.error_kind, result.error_message)

    request = RestRequest("https://api.example.com/items", DataType.JSON)
    request.add_argument("page", "1")
    execute_request(request, on_complete)
"""

__version__ = "1.0.0"

from .dispatcher import (
    CompletionCallback,
    Dispatcher,
    execute_request,
    get_default_dispatcher,
    set_default_dispatcher,
)
from .errors import (
    AuthenticationError,
    ConfigurationError,
    ErrorKind,
    HttpStatusError,
    NetworkError,
    ParseError,
    RestError,
)
from .logging_config import setup_logging
from .models import (
    ClientConfig,
    DataType,
    JsonResponse,
    Method,
    PlainTextResponse,
    ResponseKind,
    ResponseVariant,
    RestRequest,
    RestResult,
    XmlResponse,
)

__all__ = [
    "__version__",
    # Core
    "CompletionCallback",
    "Dispatcher",
    "execute_request",
    "get_default_dispatcher",
    "set_default_dispatcher",
    # Models
    "ClientConfig",
    "DataType",
    "Method",
    "RestRequest",
    "RestResult",
    # Responses
    "JsonResponse",
    "PlainTextResponse",
    "ResponseKind",
    "ResponseVariant",
    "XmlResponse",
    # Errors
    "AuthenticationError",
    "ConfigurationError",
    "ErrorKind",
    "HttpStatusError",
    "NetworkError",
    "ParseError",
    "RestError",
    # Logging
    "setup_logging",
]
