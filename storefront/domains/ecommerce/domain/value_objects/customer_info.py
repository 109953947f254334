"""
Customer Info Value Objects for E-commerce Domain

Contact details captured on an order.
"""

from dataclasses import dataclass
from typing import ClassVar

from storefront.core.domain import Email, PhoneNumber, ValidationException, ValueObject


@dataclass(frozen=True)
class PersonalInfo(ValueObject):
    first_name: str
    last_name: str

    MAX_NAME_LENGTH: ClassVar[int] = 50

    def _validate(self) -> None:
        for field_name, label in (("first_name", "First name"), ("last_name", "Last name")):
            value = getattr(self, field_name)
            if not isinstance(value, str) or not value.strip():
                raise ValidationException(f"{label} cannot be empty", field=field_name)
            value = value.strip()
            if len(value) > self.MAX_NAME_LENGTH:
                raise ValidationException(
                    f"{label} cannot exceed {self.MAX_NAME_LENGTH} characters", field=field_name
                )
            object.__setattr__(self, field_name, value)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True)
class CustomerInfo(ValueObject):
    """
    Customer contact snapshot.

    Example:
        ```python
        customer = CustomerInfo.create("Taro", "Yamada", "taro@example.jp", "090-1234-5678")
        customer.full_name  # "Taro Yamada"
        ```
    """

    personal_info: PersonalInfo
    email: Email
    phone_number: PhoneNumber

    @classmethod
    def create(cls, first_name: str, last_name: str, email: str, phone_number: str) -> "CustomerInfo":
        return cls(
            personal_info=PersonalInfo(first_name, last_name),
            email=Email(email),
            phone_number=PhoneNumber(phone_number),
        )

    @property
    def first_name(self) -> str:
        return self.personal_info.first_name

    @property
    def last_name(self) -> str:
        return self.personal_info.last_name

    @property
    def full_name(self) -> str:
        return self.personal_info.full_name
