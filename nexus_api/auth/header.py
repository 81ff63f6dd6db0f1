"""HTTP Basic authentication header construction."""

import base64


def encode_credentials(username: str, password: str) -> str:
    """
    Base64-encode ``username:password`` for the Basic scheme.
    Standard RFC 4648 Base64 over the UTF-8 bytes, no line breaks.
    """
    credentials = f"{username}:{password}"
    return base64.b64encode(credentials.encode("utf-8")).decode("ascii")


def authorization_header(username: str, password: str) -> dict[str, str]:
    """Return ``{"Authorization": "Basic <credentials>"}`` for the given user."""
    return {"Authorization": "Basic " + encode_credentials(username, password)}
