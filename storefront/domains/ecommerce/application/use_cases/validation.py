"""
Request validation shared by the e-commerce use cases.
"""

from collections.abc import Sequence
from typing import Protocol

from storefront.core.domain import ValidationException
from storefront.domains.ecommerce.domain.value_objects import SKUId


class LineInput(Protocol):
    sku_id: str
    quantity: int


def require_text(value: str | None, message: str, field: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ValidationException(message, field=field)


def validate_lines(items: Sequence[LineInput] | None, empty_message: str) -> None:
    """Check that lines exist, name a SKU and ask for a positive quantity."""
    if not items:
        raise ValidationException(empty_message, field="items")
    for item in items:
        require_text(item.sku_id, "SKU ID is required for all items", "sku_id")
        quantity = item.quantity
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
            raise ValidationException("Quantity must be positive for all items", field="quantity")


def parse_sku_ids(raw_ids: Sequence[str]) -> list[SKUId]:
    """
    Parse SKU ids, naming the first malformed one.

    Raises:
        ValidationException: If an id is not a valid UUID
    """
    sku_ids = []
    for raw_id in raw_ids:
        try:
            sku_ids.append(SKUId.from_uuid(raw_id))
        except ValidationException as e:
            raise ValidationException(
                f"Invalid SKU ID format: {raw_id}",
                field="sku_id",
                details={"sku_id": str(raw_id)},
            ) from e
    return sku_ids


def unique_ids(sku_ids: Sequence[SKUId]) -> list[SKUId]:
    """Drop repeated ids, keeping first-seen order."""
    return list(dict.fromkeys(sku_ids))
