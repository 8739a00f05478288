#!/usr/bin/env python3
"""
Product Batch Sync

Fetches the product list from the source API, wraps it in a timestamped
batch and posts the batch to the destination API. The destination's
acknowledgement is printed to stdout.

Usage:
    python3 sync_products.py
    python3 sync_products.py --batch-id BATCH_XYZ
    python3 sync_products.py --source http://localhost:8089/api/products \\
        --destination http://localhost:8089/api/product-batches
    python3 sync_products.py --config config/staging.yaml --verbose

Endpoints (in order of precedence):
    1. --source / --destination flags
    2. PRODUCT_SOURCE_URL / PRODUCT_DESTINATION_URL environment variables (.env supported)
    3. config/relay.yaml (or the file given with --config)

Exit codes:
    0 - batch accepted by the destination
    1 - fetch or send failed
    2 - no source or destination URL configured
"""

import argparse
import logging
import os
import sys

from dotenv import load_dotenv

from product_relay.client import JsonApiClient
from product_relay.common.config_loader import load_relay_settings
from product_relay.common.constants import (
    DEFAULT_TIMEOUT_SECONDS,
    ENV_DESTINATION_URL,
    ENV_SOURCE_URL,
)
from product_relay.common.errors import ProductRelayError
from product_relay.common.log_config import setup_logging
from product_relay.transport import HttpTransport

load_dotenv()

logger = logging.getLogger("product_relay.sync")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Fetch products from a source API and send them as one batch",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--source", metavar="URL", help=f"Source products URL (default: {ENV_SOURCE_URL})")
    parser.add_argument(
        "--destination",
        metavar="URL",
        help=f"Destination batch URL (default: {ENV_DESTINATION_URL})",
    )
    parser.add_argument("--batch-id", metavar="ID", help="Batch identifier (default: random UUID)")
    parser.add_argument("--config", metavar="FILE", help="YAML settings file (default: config/relay.yaml)")
    parser.add_argument("--verbose", action="store_true")
    parser.add_argument("--quiet", action="store_true")
    return parser.parse_args(argv)


def resolve_settings(args: argparse.Namespace) -> dict:
    """Merge flags, environment and YAML settings."""
    try:
        settings = load_relay_settings(args.config)
    except FileNotFoundError:
        if args.config:
            raise
        logger.debug("No relay.yaml found, using flags and environment only")
        settings = {
            "source_url": None,
            "destination_url": None,
            "timeout_seconds": DEFAULT_TIMEOUT_SECONDS,
        }

    settings["source_url"] = args.source or os.environ.get(ENV_SOURCE_URL) or settings["source_url"]
    settings["destination_url"] = (
        args.destination or os.environ.get(ENV_DESTINATION_URL) or settings["destination_url"]
    )
    return settings


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(verbose=args.verbose, quiet=args.quiet)

    settings = resolve_settings(args)
    if not settings["source_url"] or not settings["destination_url"]:
        logger.error(
            "Source and destination URLs are required. Use --source / --destination, "
            "set %s / %s, or add them to config/relay.yaml.",
            ENV_SOURCE_URL, ENV_DESTINATION_URL,
        )
        return 2

    with HttpTransport(timeout=settings["timeout_seconds"]) as transport:
        client = JsonApiClient(transport)
        try:
            ack = client.process_products_and_send_batch(
                settings["source_url"],
                settings["destination_url"],
                args.batch_id,
            )
        except ProductRelayError as e:
            logger.error("%s: %s", type(e).__name__, e)
            return 1

    print(ack)
    return 0


if __name__ == "__main__":
    sys.exit(main())
