"""
Response body decoding and continuation-token extraction.

Nexus list endpoints answer with an envelope::

    {"items": [...], "continuationToken": "88491cd1d185dd136f143f20c4e7d50c"}

``decode_body`` classifies a body into exactly one of four shapes so the
caller never has to inspect the parsed JSON itself:

* ``ListEnvelope`` – a JSON object with an ``items`` key
* ``ObjectBody``   – any other JSON object
* ``RawValue``     – a JSON value that is not an object (array, number, …)
* ``ParseFailure`` – a body that is not JSON at all
"""

import json
from dataclasses import dataclass
from typing import Any

from ..config import CONTINUATION_PARAM, ITEMS_KEY, NIL_TOKEN


@dataclass(frozen=True)
class ListEnvelope:
    items: Any
    continuation_token: str | None


@dataclass(frozen=True)
class ObjectBody:
    value: dict
    continuation_token: str | None


@dataclass(frozen=True)
class RawValue:
    value: Any


@dataclass(frozen=True)
class ParseFailure:
    body: str


Decoded = ListEnvelope | ObjectBody | RawValue | ParseFailure


def continuation_token_for(obj: dict) -> str | None:
    """Return the usable continuation token of a JSON object, or None.

    Nexus reports "no more pages" either by omitting the token, by sending
    null, or by sending the literal string "nil".
    """
    token = obj.get(CONTINUATION_PARAM)
    if token is None or token == NIL_TOKEN:
        return None
    return token


def decode_body(text: str) -> Decoded:
    try:
        value = json.loads(text)
    except ValueError:
        return ParseFailure(text)

    if not isinstance(value, dict):
        return RawValue(value)

    token = continuation_token_for(value)
    # A null or false "items" is not an envelope; the object is returned as is
    items = value.get(ITEMS_KEY)
    if items is not None and items is not False:
        return ListEnvelope(items, token)
    return ObjectBody(value, token)


def payload_of(decoded: Decoded) -> Any:
    """Return the value a caller of ``get_response`` receives."""
    if isinstance(decoded, ListEnvelope):
        return decoded.items
    if isinstance(decoded, (ObjectBody, RawValue)):
        return decoded.value
    if isinstance(decoded, ParseFailure):
        return decoded.body
    raise TypeError(f"Unknown decoded body: {decoded!r}")


def carries_cursor(decoded: Decoded) -> bool:
    """True when *decoded* is a JSON object and so settles the cursor."""
    return isinstance(decoded, (ListEnvelope, ObjectBody))


def cursor_of(decoded: Decoded) -> str | None:
    """Continuation token carried by *decoded* (None for non-object bodies)."""
    if carries_cursor(decoded):
        return decoded.continuation_token
    return None
