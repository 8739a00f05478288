"""
Shared constants for the project.

Wire-level values that must have a single source of truth.
"""

# The only content type this system produces
JSON_CONTENT_TYPE = "application/json; charset=utf-8"

# Default connect/read timeout in seconds for the shared HTTP session
DEFAULT_TIMEOUT_SECONDS = 10

# Environment variables consulted by the command-line entry point
ENV_SOURCE_URL = "PRODUCT_SOURCE_URL"
ENV_DESTINATION_URL = "PRODUCT_DESTINATION_URL"
