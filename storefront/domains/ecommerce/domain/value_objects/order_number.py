"""
Order Number Value Object for E-commerce Domain

Human-readable order reference: ``ORD`` + 8 digit date + 6 digit time suffix,
e.g. ``ORD20240721123456``.
"""

import re
from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar

from storefront.core.domain import ValidationException, ValueObject, utc_now


@dataclass(frozen=True)
class OrderNumber(ValueObject):
    """
    Order number value object.

    Example:
        ```python
        number = OrderNumber.generate()
        parsed = OrderNumber.from_string("ORD20240721123456")
        ```
    """

    value: str

    ORDER_NUMBER_PATTERN: ClassVar[re.Pattern] = re.compile(r"ORD\d{8}\d{6}", re.ASCII)

    def _validate(self) -> None:
        if not isinstance(self.value, str) or not self.ORDER_NUMBER_PATTERN.fullmatch(self.value):
            raise ValidationException("Invalid order number format", field="order_number")

    @classmethod
    def generate(cls, now: datetime | None = None) -> "OrderNumber":
        """
        Build an order number from the current time.

        The suffix is the last 6 digits of the epoch milliseconds, so two
        numbers generated in the same millisecond collide. Repositories are
        responsible for retrying on collision.
        """
        now = now or utc_now()
        millis = int(now.timestamp() * 1000)
        return cls(f"ORD{now:%Y%m%d}{millis % 1_000_000:06d}")

    @classmethod
    def from_string(cls, value: str) -> "OrderNumber":
        if not isinstance(value, str) or not value.strip():
            raise ValidationException("Order number cannot be empty", field="order_number")
        return cls(value.strip())

    def __str__(self) -> str:
        return self.value
