"""
E-commerce Domain Entities

Business entities and aggregates for the e-commerce domain.
"""

from storefront.domains.ecommerce.domain.entities.cart import Cart, CartItem
from storefront.domains.ecommerce.domain.entities.catalog import (
    Category,
    Color,
    ColorName,
    ProductImage,
    Tag,
)
from storefront.domains.ecommerce.domain.entities.checkout_method import (
    PaymentMethod,
    ShippingMethod,
)
from storefront.domains.ecommerce.domain.entities.order import (
    Order,
    OrderItem,
    OrderPricing,
    OrderTimestamps,
    PaymentInfo,
    ShippingInfo,
    build_order_items,
)
from storefront.domains.ecommerce.domain.entities.product import Product
from storefront.domains.ecommerce.domain.entities.sku import SKU, Stock, VariantAttributes

__all__ = [
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
]
