"""
Ecommerce Application Ports

Interface definitions (ports) for the Ecommerce domain.
Uses Protocol for structural typing.
"""

from contextlib import AbstractAsyncContextManager
from typing import Protocol, runtime_checkable

from storefront.domains.ecommerce.application.dto import SKUSummary, VariantDTO
from storefront.domains.ecommerce.domain.entities import SKU, Order, PaymentMethod, ShippingMethod
from storefront.domains.ecommerce.domain.value_objects import (
    OrderId,
    OrderNumber,
    PaymentMethodId,
    ShippingMethodId,
    SKUId,
)


@runtime_checkable
class ISKURepository(Protocol):
    """
    Interface for SKU repository.

    Lookups by id return only the SKUs that exist; callers detect gaps.
    """

    async def find_summaries_by_ids(self, sku_ids: list[SKUId]) -> list[SKUSummary]:
        """Get read-only summaries for the given SKUs"""
        ...

    async def find_by_ids(self, sku_ids: list[SKUId]) -> list[SKU]:
        """Get SKU entities for the given ids"""
        ...

    async def find_variants_by_ids(self, sku_ids: list[SKUId]) -> list[VariantDTO]:
        """Get variant display data for the given SKUs"""
        ...

    async def save_all(self, skus: list[SKU]) -> None:
        """Persist SKUs (stock reservations included); called before the order is saved"""
        ...

    def reservation_lock(self) -> AbstractAsyncContextManager:
        """Context manager serializing read-check-reserve-save of stock"""
        ...


@runtime_checkable
class IShippingMethodRepository(Protocol):
    """Interface for shipping method repository."""

    async def find_by_id(self, method_id: ShippingMethodId) -> ShippingMethod | None:
        """Get shipping method by ID"""
        ...


@runtime_checkable
class IPaymentMethodRepository(Protocol):
    """Interface for payment method repository."""

    async def find_by_id(self, method_id: PaymentMethodId) -> PaymentMethod | None:
        """Get payment method by ID"""
        ...


@runtime_checkable
class IOrderRepository(Protocol):
    """
    Interface for order repository.

    Defines the contract for order data access.
    """

    async def save(self, order: Order) -> None:
        """Store an order and its items"""
        ...

    async def generate_order_number(self) -> OrderNumber:
        """Return an order number not used by any stored order"""
        ...

    async def get_by_id(self, order_id: OrderId) -> Order | None:
        """Get order by ID"""
        ...


__all__ = [
    "ISKURepository",
    "IShippingMethodRepository",
    "IPaymentMethodRepository",
    "IOrderRepository",
]
