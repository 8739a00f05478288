"""
Product data models.

Pure value objects for the product records relayed between the
source and destination APIs. No HTTP or JSON logic lives here.
"""

import math
import uuid
from dataclasses import dataclass, field
from typing import Sequence, Union

Identifier = Union[str, uuid.UUID]


@dataclass(frozen=True)
class Product:
    """A single product record as served by the source API."""
    id: Identifier
    name: str = ""
    price: float = 0.0
    category: str = ""
    in_stock: bool = False   # "inStock" on the wire

    def __post_init__(self):
        """Normalize the identifier and validate the price."""
        if isinstance(self.id, uuid.UUID):
            object.__setattr__(self, "id", str(self.id))
        if not isinstance(self.price, (int, float)) or isinstance(self.price, bool):
            raise ValueError(f"Product price must be a number, got {type(self.price).__name__}")
        if (isinstance(self.price, float) and not math.isfinite(self.price)) or self.price < 0:
            raise ValueError(f"Product price must be a finite non-negative number, got {self.price}")


@dataclass(frozen=True)
class ProductBatch:
    """
    A named collection of products submitted to the destination API as one unit.

    Products keep the order in which the source API returned them.
    The timestamp is milliseconds since the epoch at batch construction.
    """
    batch_id: Identifier
    products: Sequence[Product] = field(default_factory=tuple)
    timestamp: int = 0

    def __post_init__(self):
        if isinstance(self.batch_id, uuid.UUID):
            object.__setattr__(self, "batch_id", str(self.batch_id))
        if not isinstance(self.products, tuple):
            object.__setattr__(self, "products", tuple(self.products))

