"""
Workflow client modules.

Modules:
    json_api_client - fetch / send / fetch-then-send operations
    serialization   - JSON <-> Product / ProductBatch translation
"""

from .json_api_client import JsonApiClient
from .serialization import decode_batch, decode_products, encode_batch

__all__ = [
    'JsonApiClient',
    'decode_batch',
    'decode_products',
    'encode_batch',
]
