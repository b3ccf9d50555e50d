"""Response body decoding and parsing per declared data type."""

import json
import logging
from xml.dom.minidom import Document
from xml.parsers.expat import ExpatError

from defusedxml import DefusedXmlException, expatbuilder

from .errors import ConfigurationError, ParseError
from .models.request import DataType
from .models.responses import JsonResponse, PlainTextResponse, ResponseVariant, XmlResponse

logger = logging.getLogger(__name__)


def decode_body(content: bytes) -> str:
    """
    Decode a raw response body as UTF-8.

    Raises:
        ParseError: If the bytes are not valid UTF-8
    """
    try:
        return content.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ParseError(f"Response body is not valid UTF-8: {e}") from e


def _reject_constant(name: str) -> None:
    raise ParseError(f"Invalid JSON: {name} is not a JSON value")


def parse_json(text: str) -> JsonResponse:
    """
    Parse a body holding a single JSON object or array.

    Raises:
        ParseError: On malformed JSON, NaN/Infinity, excessive nesting or a
            scalar top-level value
    """
    try:
        value = json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON: {e}") from e
    except RecursionError as e:
        raise ParseError("Invalid JSON: nesting too deep") from e

    if not isinstance(value, (dict, list)):
        raise ParseError(f"Expected a JSON object or array, got {type(value).__name__}")
    return JsonResponse(value)


def parse_xml(text: str) -> XmlResponse:
    """
    Parse a body as a namespace-unaware XML DOM document.

    Uses defusedxml so entity expansion and external references are refused.

    Raises:
        ParseError: On malformed or forbidden XML
    """
    try:
        document: Document = expatbuilder.parseString(text.encode("utf-8"), namespaces=False)
    except (ExpatError, DefusedXmlException) as e:
        raise ParseError(f"Invalid XML: {e}") from e
    return XmlResponse(document)


def parse_plain_text(text: str) -> PlainTextResponse:
    """Wrap the body unchanged."""
    return PlainTextResponse(text)


_PARSERS = {
    DataType.JSON: parse_json,
    DataType.XML: parse_xml,
    DataType.PLAIN_TEXT: parse_plain_text,
}


def parse_body(data_type: DataType, text: str) -> ResponseVariant:
    """
    Parse a decoded body into the response variant for data_type.

    Args:
        data_type: Declared format of the body
        text: Decoded response body

    Returns:
        JsonResponse, XmlResponse or PlainTextResponse

    Raises:
        ParseError: If the body does not match the declared format
        ConfigurationError: If data_type is not a known DataType
    """
    try:
        parser = _PARSERS[DataType(data_type)]
    except (KeyError, ValueError) as e:
        raise ConfigurationError(f"Unsupported data type: {data_type!r}") from e

    logger.debug(f"Parsing {len(text)} characters as {data_type}")
    return parser(text)
