"""HTTP session factory for the Nexus REST API client."""

import requests

from .config import API_PATH, USER_AGENT


def build_session() -> requests.Session:
    """Return a requests.Session carrying the client's identifying headers.

    A session is built for a single call and closed right after it, so no
    connection is kept open between requests.
    """
    session = requests.Session()
    session.headers["User-Agent"] = USER_AGENT
    return session


def base_url(hostname: str) -> str:
    """Return the REST API root for *hostname*, e.g. 'https://nexus.example.com/service/rest/v1/'."""
    return f"https://{hostname}{API_PATH}"
