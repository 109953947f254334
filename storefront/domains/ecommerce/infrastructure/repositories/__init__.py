"""
E-commerce Repository Implementations

In-memory adapters for the e-commerce ports.
"""

from .checkout_method_repository import (
    InMemoryPaymentMethodRepository,
    InMemoryShippingMethodRepository,
)
from .order_repository import InMemoryOrderRepository
from .product_repository import InMemoryProductRepository

__all__ = [
    "InMemoryProductRepository",
    "InMemoryShippingMethodRepository",
    "InMemoryPaymentMethodRepository",
    "InMemoryOrderRepository",
]
