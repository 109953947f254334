"""
Base Value Object Classes for Domain-Driven Design

Value Objects are immutable domain primitives that have no identity.
They are compared by their values, not by reference.
"""

import re
from dataclasses import dataclass
from decimal import ROUND_CEILING, Decimal
from enum import Enum
from typing import ClassVar, Self

from storefront.core.domain.exceptions import (
    InvalidAmountException,
    MoneyOverflowException,
    ValidationException,
)

# Largest integer a JSON/JavaScript client can round-trip without precision loss
MAX_SAFE_INTEGER = 2**53 - 1

# 10% consumption tax
TAX_MULTIPLIER = Decimal("1.1")


@dataclass(frozen=True)
class ValueObject:
    """
    Base class for all value objects.

    Value objects are:
    - Immutable (frozen=True)
    - Compared by value (dataclass equality)
    - Have no identity

    Example:
        ```python
        @dataclass(frozen=True)
        class Email(ValueObject):
            value: str

            def _validate(self):
                if "@" not in self.value:
                    raise ValidationException("Invalid email address")
        ```
    """

    def __post_init__(self):
        """Override `_validate` to add validation logic."""
        self._validate()

    def _validate(self) -> None:
        """Validate the value object. Override in subclasses."""
        pass


def _as_decimal_factor(factor: int | float | Decimal, label: str) -> Decimal:
    if isinstance(factor, bool) or not isinstance(factor, (int, float, Decimal)):
        raise InvalidAmountException(f"{label} must be a number", factor)
    # str() keeps the shortest decimal repr of a float, so 1.1 stays 1.1
    value = Decimal(str(factor))
    if not value.is_finite():
        raise InvalidAmountException(f"{label} must be finite", factor)
    return value


@dataclass(frozen=True, order=True)
class Money(ValueObject):
    """
    Money value object in Japanese yen.

    Yen has no subunit, so the amount is a plain non-negative integer.
    Every multiplication rounds up (ceiling), which is also how the 10%
    consumption tax is applied.

    Example:
        ```python
        price = Money.from_yen(1000)
        price.with_tax()            # Money(amount=1100)
        Money.from_yen(101).with_tax()  # Money(amount=112)
        ```
    """

    amount: int

    def _validate(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise InvalidAmountException("Money amount must be an integer", self.amount)
        if self.amount < 0:
            raise InvalidAmountException("Money amount cannot be negative", self.amount)
        if self.amount > MAX_SAFE_INTEGER:
            raise InvalidAmountException("Money amount exceeds maximum value", self.amount)

    @classmethod
    def zero(cls) -> "Money":
        """Create a zero Money value."""
        return cls(amount=0)

    @classmethod
    def from_yen(cls, yen: int | float | Decimal) -> "Money":
        """
        Create Money from a yen amount.

        Integral floats/decimals (``100.0``) are accepted; fractional values are not.
        """
        if isinstance(yen, bool) or not isinstance(yen, (int, float, Decimal)):
            raise InvalidAmountException("Money amount must be an integer", yen)
        if isinstance(yen, int):
            return cls(amount=yen)
        value = Decimal(str(yen))
        if not value.is_finite() or value != value.to_integral_value():
            raise InvalidAmountException("Money amount must be an integer", yen)
        if value < 0:
            raise InvalidAmountException("Money amount cannot be negative", yen)
        if value > MAX_SAFE_INTEGER:
            raise InvalidAmountException("Money amount exceeds maximum value", yen)
        return cls(amount=int(value))

    @classmethod
    def from_string(cls, amount_str: str) -> "Money":
        """Create Money from a decimal integer string such as ``"1500"``."""
        try:
            amount = int(amount_str.strip(), 10)
        except (AttributeError, ValueError) as e:
            raise InvalidAmountException("Invalid money amount format", amount_str) from e
        return cls.from_yen(amount)

    def add(self, other: "Money") -> "Money":
        new_amount = self.amount + other.amount
        if new_amount > MAX_SAFE_INTEGER:
            raise MoneyOverflowException("addition")
        return Money(amount=new_amount)

    def subtract(self, other: "Money") -> "Money":
        if self.amount < other.amount:
            raise InvalidAmountException(
                "Cannot subtract larger amount from smaller amount",
                self.amount - other.amount,
            )
        return Money(amount=self.amount - other.amount)

    def multiply(self, factor: int | float | Decimal) -> "Money":
        """Multiply by a non-negative factor, rounding the result up."""
        value = _as_decimal_factor(factor, "Money multiplication factor")
        if value < 0:
            raise InvalidAmountException("Money multiplication factor cannot be negative", factor)
        product = (Decimal(self.amount) * value).to_integral_value(rounding=ROUND_CEILING)
        if product > MAX_SAFE_INTEGER:
            raise MoneyOverflowException("multiplication")
        return Money(amount=int(product))

    def with_tax(self) -> "Money":
        """Amount including 10% consumption tax, rounded up."""
        return self.multiply(TAX_MULTIPLIER)

    def tax_amount(self) -> "Money":
        return self.with_tax().subtract(self)

    def percentage(self, rate: int | float | Decimal) -> "Money":
        """Portion of this amount for a rate between 0.0 and 1.0."""
        value = _as_decimal_factor(rate, "Percentage")
        if value < 0 or value > 1:
            raise InvalidAmountException("Percentage must be between 0.0 and 1.0", rate)
        return self.multiply(value)

    def apply_discount(self, discount_percent: int | float | Decimal) -> "Money":
        """Subtract a percentage discount (0-100); the discount itself rounds up."""
        value = _as_decimal_factor(discount_percent, "Discount percent")
        if value < 0 or value > 100:
            raise InvalidAmountException("Discount percent must be between 0 and 100", discount_percent)
        discount = self.multiply(value / 100)
        return self.subtract(discount)

    def is_zero(self) -> bool:
        return self.amount == 0

    def is_positive(self) -> bool:
        return self.amount > 0

    @property
    def yen(self) -> int:
        return self.amount

    def format_jpy(self) -> str:
        return f"¥{self.amount:,}"

    def __str__(self) -> str:
        return self.format_jpy()

    def __repr__(self) -> str:
        return f"Money(amount={self.amount})"


def _clean_text(value: object, label: str, field: str) -> str:
    if not isinstance(value, str):
        raise ValidationException(f"{label} must be a string", field=field)
    return value.strip()


@dataclass(frozen=True)
class Email(ValueObject):
    """
    Email address value object.

    Requires a conventional ``local@domain.tld`` shape.
    """

    value: str

    EMAIL_PATTERN: ClassVar[re.Pattern] = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}", re.ASCII)
    MAX_LENGTH: ClassVar[int] = 255

    def _validate(self) -> None:
        value = _clean_text(self.value, "Email", "email")
        if not value:
            raise ValidationException("Email cannot be empty", field="email")
        if len(value) > self.MAX_LENGTH:
            raise ValidationException(f"Email cannot exceed {self.MAX_LENGTH} characters", field="email")
        if not self.EMAIL_PATTERN.fullmatch(value):
            raise ValidationException(f"Invalid email format: {value}", field="email")
        object.__setattr__(self, "value", value)

    def get_domain(self) -> str:
        return self.value.split("@")[1]

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PhoneNumber(ValueObject):
    """
    Japanese phone number value object.

    Accepts hyphenated (``03-1234-5678``, ``090-1234-5678``) or contiguous
    (``0312345678``, ``09012345678``) landline and mobile numbers.
    """

    value: str

    PHONE_PATTERN: ClassVar[re.Pattern] = re.compile(r"0\d{1,4}-\d{1,4}-\d{1,4}|0\d{9,10}", re.ASCII)
    MAX_LENGTH: ClassVar[int] = 20

    def _validate(self) -> None:
        value = _clean_text(self.value, "Phone number", "phone")
        if not value:
            raise ValidationException("Phone number is required", field="phone")
        if len(value) > self.MAX_LENGTH:
            raise ValidationException(
                f"Phone number cannot exceed {self.MAX_LENGTH} characters", field="phone"
            )
        if not self.PHONE_PATTERN.fullmatch(value):
            raise ValidationException(f"Invalid Japanese phone number: {value}", field="phone")
        object.__setattr__(self, "value", value)

    def formatted(self) -> str:
        """
        Re-hyphenate 10 digit numbers as XX-XXXX-XXXX and 11 digit numbers as
        XXX-XXXX-XXXX. Other lengths are returned as entered.
        """
        digits = self.value.replace("-", "")
        if len(digits) == 10:
            return f"{digits[:2]}-{digits[2:6]}-{digits[6:]}"
        if len(digits) == 11:
            return f"{digits[:3]}-{digits[3:7]}-{digits[7:]}"
        return self.value

    def __str__(self) -> str:
        return self.formatted()


@dataclass(frozen=True)
class Address(ValueObject):
    """
    Japanese postal address value object.
    """

    postal_code: str
    prefecture: str
    city: str
    street: str
    building: str | None = None

    POSTAL_CODE_PATTERN: ClassVar[re.Pattern] = re.compile(r"\d{3}-\d{4}", re.ASCII)
    MAX_FIELD_LENGTH: ClassVar[int] = 100

    def _validate(self) -> None:
        postal_code = _clean_text(self.postal_code, "Postal code", "postal_code")
        if not self.is_valid_postal_code(postal_code):
            raise ValidationException("Postal code must use the 123-4567 format", field="postal_code")
        object.__setattr__(self, "postal_code", postal_code)

        for field_name, label in (("prefecture", "Prefecture"), ("city", "City"), ("street", "Street")):
            value = _clean_text(getattr(self, field_name), label, field_name)
            if not value:
                raise ValidationException(f"{label} is required", field=field_name)
            if len(value) > self.MAX_FIELD_LENGTH:
                raise ValidationException(
                    f"{label} cannot exceed {self.MAX_FIELD_LENGTH} characters", field=field_name
                )
            object.__setattr__(self, field_name, value)

        if self.building is not None:
            building = _clean_text(self.building, "Building", "building")
            if len(building) > self.MAX_FIELD_LENGTH:
                raise ValidationException(
                    f"Building cannot exceed {self.MAX_FIELD_LENGTH} characters", field="building"
                )
            object.__setattr__(self, "building", building or None)

    @classmethod
    def is_valid_postal_code(cls, postal_code: str) -> bool:
        return bool(cls.POSTAL_CODE_PATTERN.fullmatch(postal_code))

    def full_address(self) -> str:
        building_part = f" {self.building}" if self.building else ""
        return f"〒{self.postal_code} {self.prefecture} {self.city} {self.street}{building_part}"

    def __str__(self) -> str:
        return self.full_address()


class StatusEnum(str, Enum):
    """
    Base class for status enums.

    Provides common functionality for all status value objects.
    """

    @classmethod
    def values(cls) -> list[str]:
        """Get all possible values."""
        return [e.value for e in cls]

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Create from string value (case-insensitive)."""
        for member in cls:
            if member.value.lower() == value.lower():
                return member
        raise ValidationException(f"Invalid {cls.__name__}: {value}", field="status")

    def __str__(self) -> str:
        return self.value
