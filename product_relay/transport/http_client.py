"""
HTTP Transport

Thin synchronous GET/POST executor over one reusable requests.Session.
Converts every transport-level outcome into a body string or one of the
failure kinds in product_relay.common.errors.
"""

import logging
from typing import Optional

import requests

from ..common.constants import DEFAULT_TIMEOUT_SECONDS
from ..common.errors import EmptyResponse, RequestFailed, TransportError

logger = logging.getLogger(__name__)


class HttpTransport:
    """
    Shared HTTP transport backed by a pooled requests.Session.

    Construct once at process start and pass it to the clients that need it.
    Responses are closed after every call, so the pool can reuse sockets.

    Usage:
        with HttpTransport() as transport:
            body = transport.get("https://catalog.example.com/api/products")
            ack = transport.post(url, payload, "application/json; charset=utf-8")

    Failures:
        RequestFailed  - response status outside 200-299
        EmptyResponse  - GET succeeded but the body is empty
        TransportError - no response at all (DNS, refused connection, timeout)
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT_SECONDS, session: Optional[requests.Session] = None):
        """
        Initialize the transport.

        Args:
            timeout: Connect/read timeout in seconds applied to every request
            session: Pre-configured session (a new one is created if omitted)
        """
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.session.close()

    def close(self):
        self.session.close()

    @staticmethod
    def is_success(status_code: int) -> bool:
        return 200 <= status_code <= 299

    def get(self, url: str) -> str:
        """
        Execute a GET request and return its body text.

        Args:
            url: Absolute URL to fetch

        Returns:
            Response body, unchanged

        Raises:
            RequestFailed: Non-2xx status
            EmptyResponse: 2xx status with an empty body
            TransportError: Network-level failure
        """
        logger.debug("GET %s", url)
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.error("GET %s failed: %s", url, e)
            raise TransportError(url, e) from e

        try:
            if not self.is_success(response.status_code):
                logger.error("GET %s returned HTTP %d", url, response.status_code)
                raise RequestFailed(response.status_code, response.text, "HTTP GET failed")

            body = response.text
            if not body:
                logger.warning("GET %s returned HTTP %d with no body", url, response.status_code)
                raise EmptyResponse(response.status_code)

            return body
        finally:
            response.close()

    def post(
        self,
        url: str,
        body: str,
        content_type: str,
        failure_message: str = "HTTP POST failed"
    ) -> str:
        """
        Execute a POST request and return the response body text.

        Unlike get(), an empty body on a 2xx response is a valid result.

        Args:
            url: Absolute URL to post to
            body: Request body text (encoded as UTF-8)
            content_type: Value for the Content-Type header
            failure_message: Message prefix used for RequestFailed

        Returns:
            Response body, possibly empty

        Raises:
            RequestFailed: Non-2xx status
            TransportError: Network-level failure
        """
        logger.debug("POST %s (%d bytes)", url, len(body))
        try:
            response = self.session.post(
                url,
                data=body.encode("utf-8"),
                headers={"Content-Type": content_type},
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.error("POST %s failed: %s", url, e)
            raise TransportError(url, e) from e

        try:
            if not self.is_success(response.status_code):
                logger.error("POST %s returned HTTP %d", url, response.status_code)
                raise RequestFailed(response.status_code, response.text, failure_message)

            return response.text or ""
        finally:
            response.close()
