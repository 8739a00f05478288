"""
JSON API Client

Fetches products from a source API, packages them into a timestamped
ProductBatch and submits the batch to a destination API.

Every step is fail-fast: the first failure aborts the operation and is
raised to the caller unchanged. Nothing is retried.
"""

import logging
import time
import uuid
from typing import List, Optional

from ..common.constants import JSON_CONTENT_TYPE
from ..models import Product, ProductBatch
from ..transport import HttpTransport
from .serialization import decode_products, encode_batch

logger = logging.getLogger(__name__)


def current_time_millis() -> int:
    """Wall-clock time in milliseconds since the epoch."""
    return int(time.time() * 1000)


class JsonApiClient:
    """
    Workflow client for the fetch -> assemble -> send pipeline.

    Usage:
        with HttpTransport() as transport:
            client = JsonApiClient(transport)
            ack = client.process_products_and_send_batch(source_url, destination_url, "B001")
    """

    SEND_FAILURE_MESSAGE = "Failed to send product batch"

    def __init__(self, transport: HttpTransport):
        self.transport = transport

    def fetch_products(self, url: str) -> List[Product]:
        """
        Fetch the product list from the source API.

        Args:
            url: Source endpoint returning a JSON array of products

        Returns:
            Products in the order the source returned them (may be empty)

        Raises:
            RequestFailed, EmptyResponse, TransportError: from the transport
            DecodeError: Body is not a JSON array of product objects
        """
        body = self.transport.get(url)
        products = decode_products(body)
        logger.info("Fetched %d products from %s", len(products), url)
        return products

    def send_product_batch(self, url: str, batch: ProductBatch) -> str:
        """
        Post a batch to the destination API.

        Returns:
            The destination's response body verbatim, possibly empty

        Raises:
            RequestFailed: Destination answered with a non-2xx status
            TransportError: No response from the destination
        """
        payload = encode_batch(batch)
        logger.info("Sending batch %s with %d products to %s",
                    batch.batch_id, len(batch.products), url)
        return self.transport.post(
            url,
            payload,
            JSON_CONTENT_TYPE,
            failure_message=self.SEND_FAILURE_MESSAGE,
        )

    def process_products_and_send_batch(
        self,
        source_url: str,
        destination_url: str,
        batch_id: Optional[str] = None
    ) -> str:
        """
        Fetch products, wrap them in a new batch and send it.

        The batch timestamp is taken when the batch is built, after the
        fetch has completed. If the fetch fails the destination is never
        contacted.

        Args:
            source_url: Source endpoint
            destination_url: Destination endpoint
            batch_id: Batch identifier (a random UUID when omitted)

        Returns:
            The destination's response body
        """
        products = self.fetch_products(source_url)

        batch = ProductBatch(
            batch_id=batch_id if batch_id is not None else str(uuid.uuid4()),
            products=products,
            timestamp=current_time_millis(),
        )
        return self.send_product_batch(destination_url, batch)
