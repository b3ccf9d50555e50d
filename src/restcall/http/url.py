"""Query string construction for request URLs."""

from collections.abc import Mapping
from urllib.parse import urlencode, urlsplit, urlunsplit


def build_url(base_url: str, arguments: Mapping[str, str], encode: bool = True) -> str:
    """
    Append query arguments to a base URL.

    Pairs are joined with '&' after a single '?'. If the base URL already
    carries a query string, the new pairs are appended with '&' instead.
    Any fragment stays at the end, after the query.

    Args:
        base_url: The target endpoint
        arguments: Query parameters to append
        encode: Percent-encode keys and values. When False, pairs are
                concatenated raw and the caller is responsible for escaping.

    Returns:
        The full request URL

    Example:
        >>> build_url("https://example.com/api", {"q": "a b"})
        'https://example.com/api?q=a+b'
    """
    if not arguments:
        return base_url

    if encode:
        query = urlencode(list(arguments.items()))
    else:
        query = "&".join(f"{key}={value}" for key, value in arguments.items())

    parts = urlsplit(base_url)
    existing = parts.query.rstrip("&")
    if existing:
        query = f"{existing}&{query}"
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))
