"""Completion value handed to dispatcher callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..errors import ErrorKind, RestError, error_for_kind
from .responses import ResponseVariant


@dataclass(frozen=True)
class RestResult:
    """
    Outcome of one dispatched request.

    Exactly one of response or error_kind is set. Use the success() and
    failure() constructors rather than building instances directly.

    Example:
        def on_complete(result: RestResult) -> None:
            if result.ok:
                print(result.response.content)
            elif result.error_kind == ErrorKind.AUTHENTICATION:
                print("Bad credentials")
            else:
                print(f"Failed: {result.error_message}")
    """

    response: Optional[ResponseVariant] = None
    error_kind: Optional[ErrorKind] = None
    error_message: Optional[str] = None
    status_code: Optional[int] = None
    url: Optional[str] = None

    @classmethod
    def success(
        cls,
        response: ResponseVariant,
        status_code: Optional[int] = None,
        url: Optional[str] = None,
    ) -> RestResult:
        """Build a successful result wrapping a parsed response."""
        return cls(response=response, status_code=status_code, url=url)

    @classmethod
    def failure(
        cls,
        kind: ErrorKind,
        message: str,
        status_code: Optional[int] = None,
        url: Optional[str] = None,
    ) -> RestResult:
        """Build a failed result."""
        return cls(error_kind=kind, error_message=message, status_code=status_code, url=url)

    @classmethod
    def from_error(cls, error: RestError, url: Optional[str] = None) -> RestResult:
        """Build a failed result from a raised RestError."""
        return cls.failure(error.kind, error.message, error.status_code, url)

    @property
    def ok(self) -> bool:
        """True when the request produced a parsed response."""
        return self.response is not None

    def unwrap(self) -> ResponseVariant:
        """
        Return the response or raise the error this result carries.

        Raises:
            RestError: The subclass matching error_kind, if the call failed
        """
        if self.response is not None:
            return self.response
        kind = self.error_kind or ErrorKind.UNKNOWN
        raise error_for_kind(kind)(self.error_message or "Request failed", self.status_code)
