"""
E-commerce Use Cases

Business use cases for the e-commerce domain.
Each use case represents a single business operation.
"""

from .calculate_cart import (
    CalculateCartRequest,
    CalculateCartUseCase,
    CartItemInput,
)
from .create_order import (
    CreateOrderRequest,
    CreateOrderUseCase,
    CustomerInput,
    OrderItemInput,
    ShippingAddressInput,
)
from .find_variants import (
    FindVariantsRequest,
    FindVariantsUseCase,
)

__all__ = [
    # Calculate cart
    "CalculateCartUseCase",
    "CalculateCartRequest",
    "CartItemInput",
    # Create order
    "CreateOrderUseCase",
    "CreateOrderRequest",
    "OrderItemInput",
    "CustomerInput",
    "ShippingAddressInput",
    # Find variants
    "FindVariantsUseCase",
    "FindVariantsRequest",
]
