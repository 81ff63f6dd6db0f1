"""
Authenticated transport for the Nexus Repository Manager REST API.

``NexusConnection`` sends every request to
``https://{hostname}/service/rest/v1/{endpoint}`` with a Basic
``Authorization`` header and never lets a ``requests`` exception escape:
a failed request is logged and surfaces as ``None`` (or ``False`` / ``{}``
for the higher-level helpers).

Two pagination styles are offered:

* the stored cursor – ``get_response(..., paginate=True)`` continues from
  ``continuation_token``, which every decoded JSON object overwrites;
* explicit pages – ``get_page`` / ``iter_pages`` hand the token back in a
  :class:`Page` and leave the stored cursor alone, so several listings can
  be walked on one connection at the same time.
"""

import json
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

import requests
from requests.structures import CaseInsensitiveDict

from ..auth.header import authorization_header
from ..config import (
    CONTINUATION_PARAM,
    DEFAULT_HEADERS,
    REQUEST_TIMEOUT,
    VALID_RESPONSE_CODES,
)
from ..logging_setup import log
from ..session import base_url, build_session
from .decode import carries_cursor, cursor_of, decode_body, payload_of
from .result import RequestFailure, RequestResult, classify


@dataclass(frozen=True)
class Page:
    """One decoded page of a listing and the token that leads to the next one."""

    value: Any
    continuation_token: str | None = None

    @property
    def has_next(self) -> bool:
        return self.continuation_token is not None

    @property
    def items(self) -> list:
        """The page value as a list; a non-list value becomes its only element."""
        if isinstance(self.value, list):
            return self.value
        return [self.value]


def with_continuation(endpoint: str, token: str | None) -> str:
    """Append ``&continuationToken=<token>`` to *endpoint* when *token* is usable."""
    # Nexus answers an empty continuationToken with an
    # ArrayIndexOutOfBoundsException, so blank tokens are never sent
    if token is None or not str(token).strip():
        return endpoint
    return f"{endpoint}&{CONTINUATION_PARAM}={token}"


def valid(response: requests.Response | None) -> bool:
    """True when a response exists and its status is 200 or 204."""
    if response is None:
        return False
    return response.status_code in VALID_RESPONSE_CODES


class NexusConnection:
    """
    Connection to one Nexus instance for one user.

    Credentials and hostname are fixed at construction.  Each call builds
    its own session through *session_factory* and closes it before
    returning.
    """

    def __init__(
        self,
        username: str,
        password: str,
        hostname: str,
        timeout: float | None = REQUEST_TIMEOUT,
        session_factory: Callable[[], requests.Session] = build_session,
    ) -> None:
        self._username = username
        self._password = password
        self._hostname = hostname
        self.timeout = timeout
        self._session_factory = session_factory

        self.continuation_token: str | None = None
        self.last_failure: RequestFailure | None = None

    @property
    def username(self) -> str:
        return self._username

    @property
    def password(self) -> str:
        return self._password

    @property
    def hostname(self) -> str:
        return self._hostname

    @property
    def authorization_header(self) -> dict[str, str]:
        return authorization_header(self._username, self._password)

    @property
    def paginate(self) -> bool:
        """True while a continuation token from the last listing is held."""
        return self.continuation_token is not None

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get_response(
        self,
        endpoint: str,
        paginate: bool = False,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """
        GET *endpoint* and return its decoded body.

        The ``items`` of a list envelope are returned on their own; any other
        JSON value is returned as parsed, and a body that is not JSON comes
        back as the raw text.  A failed request returns an empty dict.
        """
        if not paginate:
            # A non-paginated read starts a new listing
            self.continuation_token = None
        response = self.send_get(endpoint, paginate, headers)
        if response is None:
            return {}
        decoded = decode_body(response.text)
        if carries_cursor(decoded):
            self.continuation_token = cursor_of(decoded)
        return payload_of(decoded)

    def get(
        self,
        endpoint: str,
        paginate: bool = False,
        headers: dict[str, str] | None = None,
    ) -> bool:
        return valid(self.send_get(endpoint, paginate, headers))

    def get_page(
        self,
        endpoint: str,
        continuation_token: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> Page | None:
        """Fetch a single page; returns None if the request failed."""
        response = self.send_request(
            "GET",
            with_continuation(endpoint, continuation_token),
            headers=headers,
        )
        if response is None:
            return None
        decoded = decode_body(response.text)
        return Page(payload_of(decoded), cursor_of(decoded))

    def iter_pages(
        self,
        endpoint: str,
        headers: dict[str, str] | None = None,
    ) -> Iterator[Page]:
        """Yield every page of a listing, stopping at the last one or the first failure."""
        token = None
        while True:
            page = self.get_page(endpoint, token, headers)
            if page is None:
                return
            yield page
            if not page.has_next:
                return
            if page.continuation_token == token:
                log.warning(
                    "Server returned the same continuation token twice for %s – stopping",
                    endpoint,
                )
                return
            token = page.continuation_token

    def list_all(
        self,
        endpoint: str,
        headers: dict[str, str] | None = None,
    ) -> list:
        items: list = []
        for page in self.iter_pages(endpoint, headers):
            items.extend(page.items)
        return items

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def post(
        self,
        endpoint: str,
        parameters: Any = "",
        headers: dict[str, str] | None = None,
    ) -> bool:
        return valid(self.send_request("POST", endpoint, parameters, headers))

    def put(
        self,
        endpoint: str,
        parameters: Any = "",
        headers: dict[str, str] | None = None,
    ) -> bool:
        return valid(self.send_request("PUT", endpoint, parameters, headers))

    def delete(
        self,
        endpoint: str,
        headers: dict[str, str] | None = None,
    ) -> bool:
        return valid(self.send_request("DELETE", endpoint, headers=headers))

    # ------------------------------------------------------------------
    # Absolute URLs
    # ------------------------------------------------------------------

    def head(self, asset_url: str) -> requests.Response | None:
        """HEAD an absolute URL without credentials (assets may live off-server)."""
        # trust_env off: a ~/.netrc entry must not add credentials here
        return self._dispatch(
            "HEAD", asset_url, headers={}, trust_env=False
        ).response

    def content_length(self, asset_url: str) -> int:
        """Size in bytes reported by a HEAD of *asset_url*, or -1 if unknown."""
        response = self.head(asset_url)
        headers = getattr(response, "headers", None)
        if not headers:
            return -1
        value = headers.get("Content-Length")
        if value is None:
            return -1
        try:
            return int(value)
        except ValueError:
            log.warning("Unparseable Content-Length %r for %s", value, asset_url)
            return -1

    def download(self, url: str) -> requests.Response | None:
        return self._dispatch("GET", url, headers=self.authorization_header).response

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def send_get(
        self,
        endpoint: str,
        paginate: bool,
        headers: dict[str, str] | None = None,
    ) -> requests.Response | None:
        # `paginate` is the caller asking to continue; `self.paginate` is
        # whether there is anything to continue from
        if paginate:
            endpoint = with_continuation(endpoint, self.continuation_token)
        return self.send_request("GET", endpoint, headers=headers)

    def send_request(
        self,
        method: str,
        endpoint: str,
        parameters: Any = "",
        headers: dict[str, str] | None = None,
    ) -> requests.Response | None:
        return self.request(method, endpoint, parameters, headers).response

    def request(
        self,
        method: str,
        endpoint: str,
        parameters: Any = "",
        headers: dict[str, str] | None = None,
    ) -> RequestResult:
        """Send *method* to the REST API and report the outcome as a RequestResult."""
        return self._dispatch(
            method.upper(),
            base_url(self._hostname) + endpoint,
            headers=self._merge_headers(headers),
            **self._body(parameters),
        )

    def _merge_headers(self, headers: dict[str, str] | None) -> CaseInsensitiveDict:
        merged = CaseInsensitiveDict(DEFAULT_HEADERS if headers is None else headers)
        # Applied last: a caller-supplied Authorization never wins
        merged.update(self.authorization_header)
        return merged

    @staticmethod
    def _body(parameters: Any) -> dict[str, Any]:
        if parameters is None or parameters == "":
            return {}
        if isinstance(parameters, (str, bytes)):
            return {"data": parameters}
        return {"data": json.dumps(parameters)}

    def _dispatch(
        self, method: str, url: str, trust_env: bool = True, **kwargs: Any
    ) -> RequestResult:
        self.last_failure = None
        try:
            with self._session_factory() as session:
                session.trust_env = trust_env
                response = session.request(
                    method, url, timeout=self.timeout, allow_redirects=True, **kwargs
                )
                response.raise_for_status()
        except requests.RequestException as exc:
            failure = classify(exc)
            self.last_failure = failure
            log.error("Request failed: %s %s (%s)", method, url, failure.describe())
            return RequestResult.failed(failure)

        log.debug("%s %s -> %s", method, url, response.status_code)
        return RequestResult.success(response)
