"""
Typed Identifiers for E-commerce Domain

Each identifier kind is its own frozen value object so a ProductId can never
be passed where a SKUId is expected. Kinds share validation routines, not a
base class.
"""

import re
from dataclasses import dataclass
from typing import Any
from uuid import uuid4

from storefront.core.domain import InvalidIdentifierException, ValueObject

UUID_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}",
    re.IGNORECASE | re.ASCII,
)

METHOD_ID_MAX_LENGTH = 50


def _validate_uuid(identifier_type: str, value: Any) -> None:
    if not isinstance(value, str) or not UUID_PATTERN.fullmatch(value):
        raise InvalidIdentifierException(identifier_type, value, "Invalid UUID format")


def _validate_method_id(identifier_type: str, value: Any) -> None:
    if not isinstance(value, str) or not value.strip():
        raise InvalidIdentifierException(identifier_type, value, f"{identifier_type} cannot be empty")
    if len(value) > METHOD_ID_MAX_LENGTH:
        raise InvalidIdentifierException(
            identifier_type, value, f"{identifier_type} cannot exceed {METHOD_ID_MAX_LENGTH} characters"
        )


@dataclass(frozen=True)
class ProductId(ValueObject):
    value: str

    def _validate(self) -> None:
        _validate_uuid("ProductId", self.value)

    @classmethod
    def new(cls) -> "ProductId":
        return cls(str(uuid4()))

    @classmethod
    def from_uuid(cls, value: str) -> "ProductId":
        return cls(value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class SKUId(ValueObject):
    value: str

    def _validate(self) -> None:
        _validate_uuid("SKUId", self.value)

    @classmethod
    def new(cls) -> "SKUId":
        return cls(str(uuid4()))

    @classmethod
    def from_uuid(cls, value: str) -> "SKUId":
        return cls(value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class OrderId(ValueObject):
    value: str

    def _validate(self) -> None:
        _validate_uuid("OrderId", self.value)

    @classmethod
    def new(cls) -> "OrderId":
        return cls(str(uuid4()))

    @classmethod
    def from_uuid(cls, value: str) -> "OrderId":
        return cls(value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CustomerId(ValueObject):
    value: str

    def _validate(self) -> None:
        _validate_uuid("CustomerId", self.value)

    @classmethod
    def new(cls) -> "CustomerId":
        return cls(str(uuid4()))

    @classmethod
    def from_uuid(cls, value: str) -> "CustomerId":
        return cls(value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CategoryId(ValueObject):
    value: str

    def _validate(self) -> None:
        _validate_uuid("CategoryId", self.value)

    @classmethod
    def new(cls) -> "CategoryId":
        return cls(str(uuid4()))

    @classmethod
    def from_uuid(cls, value: str) -> "CategoryId":
        return cls(value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class DeliveryInfoId(ValueObject):
    value: str

    def _validate(self) -> None:
        _validate_uuid("DeliveryInfoId", self.value)

    @classmethod
    def new(cls) -> "DeliveryInfoId":
        return cls(str(uuid4()))

    @classmethod
    def from_uuid(cls, value: str) -> "DeliveryInfoId":
        return cls(value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ColorId(ValueObject):
    """Numeric color identifier; must be a positive integer."""

    value: int

    def _validate(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidIdentifierException("ColorId", self.value, "ColorId must be an integer")
        if self.value <= 0:
            raise InvalidIdentifierException("ColorId", self.value, "ColorId cannot be zero or negative")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class ShippingMethodId(ValueObject):
    """Shipping method code such as ``standard`` or ``express``."""

    value: str

    def _validate(self) -> None:
        _validate_method_id("ShippingMethodId", self.value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PaymentMethodId(ValueObject):
    """Payment method code such as ``credit_card`` or ``cod``."""

    value: str

    def _validate(self) -> None:
        _validate_method_id("PaymentMethodId", self.value)

    def __str__(self) -> str:
        return self.value
