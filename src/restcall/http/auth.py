"""HTTP basic authentication helpers."""

import base64


def basic_auth_header(username: str, password: str) -> str:
    """
    Build the value of an Authorization header for basic auth.

    Credentials travel with each request; nothing is registered globally.
    """
    credentials = f"{username}:{password}"
    encoded = base64.b64encode(credentials.encode("utf-8")).decode("ascii")
    return f"Basic {encoded}"
