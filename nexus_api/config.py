"""Configuration constants for the Nexus REST API client."""

import os

# Connection defaults can be supplied via NEXUS_HOSTNAME / NEXUS_USERNAME /
# NEXUS_PASSWORD env vars
DEFAULT_HOSTNAME = os.environ.get("NEXUS_HOSTNAME", "")
DEFAULT_USERNAME = os.environ.get("NEXUS_USERNAME", "")
DEFAULT_PASSWORD = os.environ.get("NEXUS_PASSWORD", "")

API_PATH = "/service/rest/v1/"

REQUEST_TIMEOUT = 30    # seconds per HTTP request
USER_AGENT      = "nexus-api/1.0.0"

DEFAULT_HEADERS: dict[str, str] = {"Content-Type": "application/json"}

# Only these codes count as success for write operations and `get`
VALID_RESPONSE_CODES: frozenset[int] = frozenset([200, 204])

# Pagination envelope:  {"items": [...], "continuationToken": "..."}
ITEMS_KEY          = "items"
CONTINUATION_PARAM = "continuationToken"
# Nexus sometimes reports the last page as the string "nil" instead of null
NIL_TOKEN          = "nil"
