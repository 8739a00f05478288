"""
Error Taxonomy

Every failure surfaced by the transport and the workflow client is one of
the classes below, so callers can branch on the failure kind instead of
parsing message text.
"""

from typing import Optional


class ProductRelayError(Exception):
    """Base class for all product relay failures."""


class TransportError(ProductRelayError):
    """No HTTP response was obtained (DNS failure, refused connection, timeout)."""

    def __init__(self, url: str, cause: BaseException):
        self.url = url
        self.cause = cause
        super().__init__(f"Request to {url} failed: {cause}")


class RequestFailed(ProductRelayError):
    """An HTTP response was obtained but its status is outside 200-299."""

    def __init__(self, status_code: int, body: str = "", message_prefix: str = "HTTP request failed"):
        self.status_code = status_code
        self.body = body or ""
        self.message_prefix = message_prefix
        super().__init__(f"{message_prefix}: {status_code} - {self.body}")


class EmptyResponse(ProductRelayError):
    """A successful GET response carried no body text."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(
            f"No content in response body for successful request (Status: {status_code})"
        )


class DecodeError(ProductRelayError):
    """A response body could not be parsed into the expected entity shape."""

    def __init__(self, message: str, document: Optional[str] = None):
        self.document = document
        super().__init__(message)
