"""Utility subpackage for the Nexus REST API client."""

from .files import save_file

__all__ = ["save_file"]
