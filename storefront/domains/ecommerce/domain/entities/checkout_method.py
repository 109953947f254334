"""
Checkout Method Entities for E-commerce Domain

Shipping and payment options a customer picks at checkout. Each carries a
flat fee and can be switched off without being deleted.
"""

from dataclasses import dataclass

from storefront.core.domain import Money, ValidationException

from ..value_objects.identifiers import PaymentMethodId, ShippingMethodId


def _clean_name(name: str, label: str) -> str:
    if not isinstance(name, str) or not name.strip():
        raise ValidationException(f"{label} name cannot be empty", field="name")
    return name.strip()


@dataclass(frozen=True)
class ShippingMethod:
    id: ShippingMethodId
    name: str
    fee: Money
    description: str | None = None
    is_active: bool = True

    @classmethod
    def create(
        cls,
        method_id: ShippingMethodId,
        name: str,
        fee: Money,
        description: str | None = None,
        is_active: bool = True,
    ) -> "ShippingMethod":
        return cls(
            id=method_id,
            name=_clean_name(name, "Shipping method"),
            fee=fee,
            description=description,
            is_active=is_active,
        )

    def is_available(self) -> bool:
        return self.is_active


@dataclass(frozen=True)
class PaymentMethod:
    id: PaymentMethodId
    name: str
    fee: Money
    description: str | None = None
    is_active: bool = True

    @classmethod
    def create(
        cls,
        method_id: PaymentMethodId,
        name: str,
        fee: Money,
        description: str | None = None,
        is_active: bool = True,
    ) -> "PaymentMethod":
        return cls(
            id=method_id,
            name=_clean_name(name, "Payment method"),
            fee=fee,
            description=description,
            is_active=is_active,
        )

    def is_available(self) -> bool:
        return self.is_active
