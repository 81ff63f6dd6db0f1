"""Authentication submodule – Basic auth header construction."""

from nexus_api.auth.header import authorization_header, encode_credentials

__all__ = [
    "authorization_header",
    "encode_credentials",
]
