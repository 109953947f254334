"""
E-commerce Domain Layer

Domain-Driven Design implementation for e-commerce bounded context.

This module contains:
- Entities: Business objects with identity (Product, SKU, Order) and the transient Cart
- Value Objects: Immutable domain primitives (identifiers, OrderNumber, OrderStatus)
"""

from storefront.domains.ecommerce.domain.entities import (
    SKU,
    Cart,
    CartItem,
    Category,
    Color,
    ColorName,
    Order,
    OrderItem,
    OrderPricing,
    OrderTimestamps,
    PaymentInfo,
    PaymentMethod,
    Product,
    ProductImage,
    ShippingInfo,
    ShippingMethod,
    Stock,
    Tag,
    VariantAttributes,
    build_order_items,
)
from storefront.domains.ecommerce.domain.value_objects import (
    CategoryId,
    ColorId,
    CustomerId,
    CustomerInfo,
    DeliveryInfoId,
    OrderId,
    OrderNumber,
    OrderStatus,
    PaymentMethodId,
    PersonalInfo,
    ProductId,
    ShippingMethodId,
    SKUId,
    SKUStatus,
)

__all__ = [
    # Entities
    "Product",
    "SKU",
    "Stock",
    "VariantAttributes",
    "Color",
    "ColorName",
    "Category",
    "ProductImage",
    "Tag",
    "ShippingMethod",
    "PaymentMethod",
    "Cart",
    "CartItem",
    "Order",
    "OrderItem",
    "OrderPricing",
    "OrderTimestamps",
    "ShippingInfo",
    "PaymentInfo",
    "build_order_items",
    # Value Objects
    "ProductId",
    "SKUId",
    "OrderId",
    "CustomerId",
    "CategoryId",
    "DeliveryInfoId",
    "ColorId",
    "ShippingMethodId",
    "PaymentMethodId",
    "OrderNumber",
    "OrderStatus",
    "SKUStatus",
    "PersonalInfo",
    "CustomerInfo",
]
