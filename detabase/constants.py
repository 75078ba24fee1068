"""
Constants for Deta Base operations.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

# Remote service
SERVICE_HOST = "database.deta.sh"
API_VERSION = "v1"
DEFAULT_TIMEOUT = 30.0  # seconds, per request

# HTTP headers
HEADER_API_KEY = "X-API-Key"
HEADER_CONTENT_TYPE = "Content-Type"
CONTENT_TYPE_JSON = "application/json"

# Relative paths under the base URL
PATH_ITEMS = "items"
PATH_QUERY = "query"

# Item attribute names
ATTR_KEY = "key"
ATTR_VALUE = "value"

# Status code the KV layer treats as "key absent"
STATUS_NOT_FOUND = 404

# Environment variables read by the CLI
ENV_PROJECT_ID = "DETABASE_PROJECTID"
ENV_BASE_NAME = "DETABASE_BASENAME"
ENV_API_KEY = "DETABASE_APIKEY"

# CLI exit codes
EXIT_NOT_FOUND = 1
EXIT_USAGE = 2
EXIT_SERVICE_ERROR = 3
