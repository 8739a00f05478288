"""
JSON Serialization

Translates between the wire JSON documents of the source/destination APIs
and the Product / ProductBatch models.

Wire shapes:
    product: {"id", "name", "price", "category", "inStock"}
    batch:   {"batchId", "products": [...], "timestamp"}
"""

import json
from typing import Any, Dict, List

from ..common.errors import DecodeError
from ..models import Product, ProductBatch


def product_to_dict(product: Product) -> Dict[str, Any]:
    return {
        "id": product.id,
        "name": product.name,
        "price": product.price,
        "category": product.category,
        "inStock": product.in_stock,
    }


def batch_to_dict(batch: ProductBatch) -> Dict[str, Any]:
    return {
        "batchId": batch.batch_id,
        "products": [product_to_dict(p) for p in batch.products],
        "timestamp": batch.timestamp,
    }


def encode_batch(batch: ProductBatch) -> str:
    """Encode a batch as its canonical JSON document."""
    return json.dumps(batch_to_dict(batch), ensure_ascii=False, allow_nan=False)


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a valid price
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _string_field(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DecodeError(f"Field '{key}' must be a string, got {type(value).__name__}")
    return value


def product_from_dict(data: Dict[str, Any]) -> Product:
    """
    Build a Product from a decoded JSON object.

    Unknown keys are ignored and missing optional fields take zero values.
    A missing id or a value of the wrong type raises DecodeError.
    """
    if not isinstance(data, dict):
        raise DecodeError(f"Expected a product object, got {type(data).__name__}")

    product_id = data.get("id")
    if product_id is None:
        raise DecodeError("Product object is missing 'id'")
    if not isinstance(product_id, str):
        raise DecodeError(f"Field 'id' must be a string, got {type(product_id).__name__}")

    price = data.get("price")
    if price is None:
        price = 0.0
    elif not _is_number(price):
        raise DecodeError(f"Field 'price' must be numeric, got {type(price).__name__}")

    in_stock = data.get("inStock")
    if in_stock is None:
        in_stock = False
    elif not isinstance(in_stock, bool):
        raise DecodeError(f"Field 'inStock' must be a boolean, got {type(in_stock).__name__}")

    try:
        price = float(price)
    except OverflowError as e:
        raise DecodeError(f"Field 'price' is out of range for product '{product_id}'") from e

    try:
        return Product(
            id=product_id,
            name=_string_field(data, "name"),
            price=price,
            category=_string_field(data, "category"),
            in_stock=in_stock,
        )
    except ValueError as e:
        raise DecodeError(f"Invalid product '{product_id}': {e}") from e


def _reject_constant(token: str) -> Any:
    raise ValueError(f"Non-standard JSON constant {token}")


def _load_json(text: str) -> Any:
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        raise DecodeError(f"Response is not valid JSON: {e}", document=text) from e


def decode_products(text: str) -> List[Product]:
    """
    Decode a JSON array of product objects, preserving order.

    Raises:
        DecodeError: Invalid JSON, a non-array document, or a malformed element
    """
    data = _load_json(text)
    if not isinstance(data, list):
        raise DecodeError(
            f"Expected a JSON array of products, got {type(data).__name__}", document=text
        )
    return [product_from_dict(item) for item in data]


def decode_batch(text: str) -> ProductBatch:
    """
    Decode a batch document. Key order in the document does not matter.

    Raises:
        DecodeError: Invalid JSON or a document that is not a batch object
    """
    data = _load_json(text)
    if not isinstance(data, dict):
        raise DecodeError(f"Expected a batch object, got {type(data).__name__}", document=text)

    batch_id = data.get("batchId")
    if not isinstance(batch_id, str):
        raise DecodeError("Batch field 'batchId' must be a string", document=text)

    products = data.get("products")
    if products is None:
        products = []
    elif not isinstance(products, list):
        raise DecodeError("Batch field 'products' must be an array", document=text)

    timestamp = data.get("timestamp", 0)
    if not isinstance(timestamp, int) or isinstance(timestamp, bool):
        raise DecodeError("Batch field 'timestamp' must be an integer", document=text)

    return ProductBatch(
        batch_id=batch_id,
        products=[product_from_dict(item) for item in products],
        timestamp=timestamp,
    )
