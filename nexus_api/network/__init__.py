"""
Network operations module: request dispatch, response validation and
body decoding for the Nexus REST API.
"""

from nexus_api.network.client import NexusConnection, Page, valid, with_continuation
from nexus_api.network.decode import (
    ListEnvelope,
    ObjectBody,
    ParseFailure,
    RawValue,
    continuation_token_for,
    decode_body,
)
from nexus_api.network.result import (
    FailureKind,
    RequestFailure,
    RequestResult,
)

__all__ = [
    "NexusConnection",
    "Page",
    "valid",
    "with_continuation",
    "ListEnvelope",
    "ObjectBody",
    "ParseFailure",
    "RawValue",
    "continuation_token_for",
    "decode_body",
    "FailureKind",
    "RequestFailure",
    "RequestResult",
]
