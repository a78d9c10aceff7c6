from .types import EntitySchema
from .price import price_schema
from .product import product_schema


__all__ = [
    'EntitySchema',
    'price_schema',
    'product_schema',
]
