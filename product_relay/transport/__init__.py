"""
HTTP transport.

Modules:
    http_client - Pooled GET/POST executor with uniform failure classification
"""

from .http_client import HttpTransport

__all__ = ['HttpTransport']
