"""
Outcome of a single dispatched request.

A request either produced a response (even one whose status the validator
will reject) or failed with one of the failure kinds below.
"""

from dataclasses import dataclass
from enum import Enum

import requests


class FailureKind(str, Enum):
    NETWORK = "network"             # DNS, refused connection, timeout
    UNAUTHORIZED = "unauthorized"   # HTTP 401
    HTTP = "http"                   # any other 4xx/5xx
    NO_DATA = "no_data"             # request could not be sent, no response


@dataclass(frozen=True)
class RequestFailure:
    kind: FailureKind
    message: str
    status_code: int | None = None
    body: str | None = None

    def describe(self) -> str:
        """One-line description used in log output."""
        if self.status_code is None:
            return f"{self.kind.value}: {self.message}"
        text = f"{self.kind.value}: HTTP {self.status_code} {self.message}"
        if self.body:
            text += f" – {self.body[:200]}"
        return text


@dataclass(frozen=True)
class RequestResult:
    response: requests.Response | None = None
    failure: RequestFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None and self.response is not None

    @classmethod
    def success(cls, response: requests.Response) -> "RequestResult":
        return cls(response=response)

    @classmethod
    def failed(cls, failure: RequestFailure) -> "RequestResult":
        return cls(failure=failure)


def classify(exc: requests.RequestException) -> RequestFailure:
    """Map an exception raised by ``requests`` onto a :class:`RequestFailure`."""
    response = getattr(exc, "response", None)
    if isinstance(exc, requests.HTTPError) and response is not None:
        kind = (
            FailureKind.UNAUTHORIZED
            if response.status_code == 401
            else FailureKind.HTTP
        )
        return RequestFailure(
            kind=kind,
            message=response.reason or "",
            status_code=response.status_code,
            body=response.text,
        )
    if isinstance(exc, (requests.ConnectionError, requests.Timeout)):
        return RequestFailure(kind=FailureKind.NETWORK, message=str(exc))
    return RequestFailure(kind=FailureKind.NO_DATA, message=str(exc))
