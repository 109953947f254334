"""
Checkout Method Repository Implementations

In-memory implementations of IShippingMethodRepository and
IPaymentMethodRepository.
"""

from collections.abc import Iterable

from storefront.domains.ecommerce.application.ports import (
    IPaymentMethodRepository,
    IShippingMethodRepository,
)
from storefront.domains.ecommerce.domain.entities import PaymentMethod, ShippingMethod
from storefront.domains.ecommerce.domain.value_objects import PaymentMethodId, ShippingMethodId


class InMemoryShippingMethodRepository(IShippingMethodRepository):
    def __init__(self, methods: Iterable[ShippingMethod] | None = None):
        self._methods = {method.id.value: method for method in methods or []}

    async def find_by_id(self, method_id: ShippingMethodId) -> ShippingMethod | None:
        return self._methods.get(method_id.value)

    def add(self, method: ShippingMethod) -> None:
        self._methods[method.id.value] = method


class InMemoryPaymentMethodRepository(IPaymentMethodRepository):
    def __init__(self, methods: Iterable[PaymentMethod] | None = None):
        self._methods = {method.id.value: method for method in methods or []}

    async def find_by_id(self, method_id: PaymentMethodId) -> PaymentMethod | None:
        return self._methods.get(method_id.value)

    def add(self, method: PaymentMethod) -> None:
        self._methods[method.id.value] = method
