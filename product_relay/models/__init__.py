"""
Data models for relayed products.

This module contains pure data classes with no business logic.
"""

from .product import Product, ProductBatch

__all__ = ['Product', 'ProductBatch']
