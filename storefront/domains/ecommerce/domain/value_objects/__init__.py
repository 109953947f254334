"""
E-commerce Domain Value Objects

Immutable value objects for the e-commerce domain.
"""

from storefront.domains.ecommerce.domain.value_objects.customer_info import (
    CustomerInfo,
    PersonalInfo,
)
from storefront.domains.ecommerce.domain.value_objects.identifiers import (
    CategoryId,
    ColorId,
    CustomerId,
    DeliveryInfoId,
    OrderId,
    PaymentMethodId,
    ProductId,
    ShippingMethodId,
    SKUId,
)
from storefront.domains.ecommerce.domain.value_objects.order_number import OrderNumber
from storefront.domains.ecommerce.domain.value_objects.order_status import (
    OrderStatus,
    SKUStatus,
)

__all__ = [
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
