"""Parsed response bodies, one variant per data type."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union
from xml.dom.minidom import Document


class ResponseKind(str, Enum):
    """Tag identifying which response variant a value is."""

    JSON = "json"
    XML = "xml"
    PLAIN_TEXT = "plain_text"


@dataclass(frozen=True)
class JsonResponse:
    """
    Parsed JSON body.

    Attributes:
        content: The decoded JSON object (dict) or array (list)
        kind: Always ResponseKind.JSON
    """

    content: Union[dict[str, Any], list[Any]]
    kind: ResponseKind = field(default=ResponseKind.JSON, init=False)


@dataclass(frozen=True)
class XmlResponse:
    """
    Parsed XML body.

    Attributes:
        content: The DOM document (namespace-unaware)
        kind: Always ResponseKind.XML
    """

    content: Document
    kind: ResponseKind = field(default=ResponseKind.XML, init=False)


@dataclass(frozen=True)
class PlainTextResponse:
    """Raw body text, possibly empty."""

    content: str
    kind: ResponseKind = field(default=ResponseKind.PLAIN_TEXT, init=False)


ResponseVariant = Union[JsonResponse, XmlResponse, PlainTextResponse]
