"""
nexus_api
=========
Authenticated client for the Nexus Repository Manager REST API
(``https://{hostname}/service/rest/v1/``).

Package structure
-----------------
nexus_api/
├── __init__.py       – package init and public API
├── config.py         – configuration constants
├── logging_setup.py  – package logger and colorlog handler
├── session.py        – requests.Session factory, REST base URL
├── cli.py            – argparse CLI (``python -m nexus_api``)
├── auth/             – Basic Authorization header
├── network/
│   ├── client.py     – NexusConnection: dispatch, validation, pagination
│   ├── decode.py     – JSON body classification, continuation tokens
│   └── result.py     – RequestResult / RequestFailure
└── utils/            – file helpers

Quick start
-----------
    from nexus_api import NexusConnection

    connection = NexusConnection(
        username="admin",
        password="admin123",
        hostname="nexus.example.com",
    )
    # every page, following continuation tokens until the last one
    assets = connection.list_all("assets?repository=maven-releases")

    # or one page at a time
    for page in connection.iter_pages("assets?repository=maven-releases"):
        print(len(page.items), "assets")
"""

from .network import (
    FailureKind,
    NexusConnection,
    Page,
    RequestFailure,
    RequestResult,
    valid,
)
from .auth import authorization_header

__all__ = [
    "NexusConnection",
    "Page",
    "valid",
    "FailureKind",
    "RequestFailure",
    "RequestResult",
    "authorization_header",
]
