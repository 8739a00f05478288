# Common utilities
from .config_loader import load_config, load_relay_settings
from .constants import DEFAULT_TIMEOUT_SECONDS, JSON_CONTENT_TYPE
from .errors import (
    DecodeError,
    EmptyResponse,
    ProductRelayError,
    RequestFailed,
    TransportError,
)
from .log_config import setup_logging
