"""Exception hierarchy for restcall.

Every failure on the dispatch path is raised as a RestError subclass and
turned into a failed RestResult by the dispatcher, so callers can tell a
network outage apart from a bad payload.
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Categories of dispatch failures."""

    NETWORK = "network"
    AUTHENTICATION = "authentication"
    HTTP_STATUS = "http_status"
    PARSE = "parse"
    CONFIGURATION = "configuration"
    UNKNOWN = "unknown"


class RestError(Exception):
    """Base class for all restcall errors."""

    kind = ErrorKind.UNKNOWN

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class NetworkError(RestError):
    """DNS, connect, timeout or I/O failure while talking to the server."""

    kind = ErrorKind.NETWORK


class AuthenticationError(RestError):
    """Server rejected the credentials (HTTP 401 or 403)."""

    kind = ErrorKind.AUTHENTICATION


class HttpStatusError(RestError):
    """Server answered with an error status other than 401/403."""

    kind = ErrorKind.HTTP_STATUS


class ParseError(RestError):
    """Response body could not be parsed as the declared data type."""

    kind = ErrorKind.PARSE


class ConfigurationError(RestError):
    """Request descriptor cannot be dispatched as configured."""

    kind = ErrorKind.CONFIGURATION


_ERRORS_BY_KIND: dict[ErrorKind, type[RestError]] = {
    ErrorKind.NETWORK: NetworkError,
    ErrorKind.AUTHENTICATION: AuthenticationError,
    ErrorKind.HTTP_STATUS: HttpStatusError,
    ErrorKind.PARSE: ParseError,
    ErrorKind.CONFIGURATION: ConfigurationError,
    ErrorKind.UNKNOWN: RestError,
}


def error_for_kind(kind: ErrorKind) -> type[RestError]:
    """Return the exception class matching an error kind."""
    return _ERRORS_BY_KIND[kind]
