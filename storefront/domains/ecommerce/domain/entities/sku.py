"""
SKU Entity for E-commerce Domain

A SKU is one purchasable variant of a product (color/size/material) and the
sole owner of its stock.
"""

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal

from storefront.core.domain import (
    BusinessRuleViolationException,
    Entity,
    InsufficientStockException,
    Money,
    NotPurchasableException,
    ValidationException,
)

from ..value_objects.identifiers import ColorId, ProductId, SKUId
from ..value_objects.order_status import SKUStatus

DEFAULT_LOW_STOCK_THRESHOLD = 10


def _require_quantity(value: int, label: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationException(f"{label} must be an integer", field="quantity")


@dataclass
class Stock:
    """
    Quantity tracker for a single SKU.

    ``available = total - reserved`` and ``0 <= reserved <= total`` always hold.
    """

    total_quantity: int
    reserved_quantity: int = 0

    def __post_init__(self):
        _require_quantity(self.total_quantity, "Total quantity")
        _require_quantity(self.reserved_quantity, "Reserved quantity")
        if self.total_quantity < 0:
            raise ValidationException("Total quantity cannot be negative", field="total_quantity")
        if self.reserved_quantity < 0:
            raise ValidationException("Reserved quantity cannot be negative", field="reserved_quantity")
        if self.reserved_quantity > self.total_quantity:
            raise ValidationException(
                "Reserved quantity cannot exceed total quantity", field="reserved_quantity"
            )

    def available_quantity(self) -> int:
        return self.total_quantity - self.reserved_quantity

    def reserve(self, quantity: int) -> None:
        """
        Reserve units for an order.

        Raises:
            ValidationException: If quantity is not positive
            InsufficientStockException: If quantity exceeds available stock
        """
        _require_quantity(quantity, "Reservation quantity")
        if quantity <= 0:
            raise ValidationException("Reservation quantity must be positive", field="quantity")
        available = self.available_quantity()
        if quantity > available:
            raise InsufficientStockException(requested=quantity, available=available)
        self.reserved_quantity += quantity

    def release_reservation(self, quantity: int) -> None:
        _require_quantity(quantity, "Release quantity")
        if quantity <= 0:
            raise ValidationException("Release quantity must be positive", field="quantity")
        if quantity > self.reserved_quantity:
            raise ValidationException("Cannot release more than reserved", field="quantity")
        self.reserved_quantity -= quantity

    def adjust(self, adjustment: int) -> None:
        """Change the total by a signed delta without dropping below reservations."""
        _require_quantity(adjustment, "Stock adjustment")
        new_total = self.total_quantity + adjustment
        if new_total < 0:
            raise BusinessRuleViolationException(
                "NON_NEGATIVE_STOCK",
                "Stock adjustment would result in negative quantity",
                {"total": self.total_quantity, "adjustment": adjustment},
            )
        if new_total < self.reserved_quantity:
            raise BusinessRuleViolationException(
                "STOCK_COVERS_RESERVATIONS",
                "Stock adjustment would result in insufficient stock for reservations",
                {"reserved": self.reserved_quantity, "adjustment": adjustment},
            )
        self.total_quantity = new_total

    def is_low_stock(self, threshold: int = DEFAULT_LOW_STOCK_THRESHOLD) -> bool:
        return self.available_quantity() <= threshold

    def is_out_of_stock(self) -> bool:
        return self.available_quantity() == 0


@dataclass(frozen=True)
class VariantAttributes:
    """Optional attributes distinguishing variants of the same product."""

    color_id: ColorId | None = None
    dimensions: str | None = None
    material: str | None = None

    def is_empty(self) -> bool:
        return self.color_id is None and not self.dimensions and not self.material


@dataclass(eq=False, kw_only=True)
class SKU(Entity[SKUId]):
    """
    SKU entity.

    Contains business logic for:
    - Stock reservation and adjustment
    - Sale pricing and discount display
    - Availability status

    Example:
        ```python
        sku = SKU.create(
            sku_id=SKUId.new(),
            product_id=product.id,
            sku_code="DESK-OAK-W120",
            name="Oak Desk",
            variant_attributes=VariantAttributes(dimensions="W120"),
            base_price=Money.from_yen(45000),
            initial_stock=8,
        )
        sku.set_sale_price(Money.from_yen(39800))
        sku.reserve_stock(2)
        ```
    """

    product_id: ProductId
    code: str
    name: str
    base_price: Money
    stock: Stock
    variant_attributes: VariantAttributes = field(default_factory=VariantAttributes)
    sale_price: Money | None = None
    status: SKUStatus = SKUStatus.ACTIVE
    display_order: int = 0

    def __post_init__(self):
        if not self.code or not self.code.strip():
            raise ValidationException("SKU code cannot be empty", field="sku_code")
        if not self.name or not self.name.strip():
            raise ValidationException("SKU name cannot be empty", field="name")
        if not self.base_price.is_positive():
            raise ValidationException("Base price must be positive", field="base_price")
        if self.sale_price is not None and self.sale_price >= self.base_price:
            raise ValidationException("Sale price must be less than base price", field="sale_price")

    @classmethod
    def create(
        cls,
        sku_id: SKUId,
        product_id: ProductId,
        sku_code: str,
        name: str,
        variant_attributes: VariantAttributes,
        base_price: Money,
        initial_stock: int,
        display_order: int = 0,
    ) -> "SKU":
        """Create a new active SKU with no sale price."""
        if not isinstance(sku_code, str) or not sku_code.strip():
            raise ValidationException("SKU code cannot be empty", field="sku_code")
        if not isinstance(name, str) or not name.strip():
            raise ValidationException("SKU name cannot be empty", field="name")
        return cls(
            id=sku_id,
            product_id=product_id,
            code=sku_code.strip(),
            name=name.strip(),
            variant_attributes=variant_attributes,
            base_price=base_price,
            stock=Stock(initial_stock),
            display_order=display_order,
        )

    # Stock Management

    def reserve_stock(self, quantity: int) -> None:
        """
        Reserve stock for an order.

        Raises:
            NotPurchasableException: If the SKU is inactive or sold out
            InsufficientStockException: If not enough stock
        """
        if not self.is_purchasable():
            raise NotPurchasableException(sku_id=str(self.id), status=self.status.value)
        try:
            self.stock.reserve(quantity)
        except InsufficientStockException as e:
            raise InsufficientStockException(
                requested=e.requested,
                available=e.available,
                sku_id=str(self.id),
            ) from e
        self.touch()

    def release_reservation(self, quantity: int) -> None:
        self.stock.release_reservation(quantity)
        self.touch()

    def adjust_stock(self, adjustment: int) -> None:
        self.stock.adjust(adjustment)
        self.touch()

    def available_quantity(self) -> int:
        return self.stock.available_quantity()

    def is_low_stock(self, threshold: int = DEFAULT_LOW_STOCK_THRESHOLD) -> bool:
        return self.stock.is_low_stock(threshold)

    def is_out_of_stock(self) -> bool:
        return self.stock.is_out_of_stock()

    # Pricing

    def set_sale_price(self, price: Money) -> None:
        """
        Put the SKU on sale.

        Raises:
            ValidationException: If price is not strictly below the base price
        """
        if price >= self.base_price:
            raise ValidationException("Sale price must be less than base price", field="sale_price")
        self.sale_price = price
        self.touch()

    def clear_sale_price(self) -> None:
        self.sale_price = None
        self.touch()

    def current_price(self) -> Money:
        return self.sale_price if self.sale_price is not None else self.base_price

    def is_on_sale(self) -> bool:
        return self.sale_price is not None

    def discount_percentage(self) -> int | None:
        """Whole-number discount percentage, rounded half up, or None when not on sale."""
        if self.sale_price is None:
            return None
        discount = self.base_price.subtract(self.sale_price)
        ratio = Decimal(discount.yen) * 100 / Decimal(self.base_price.yen)
        return int(ratio.quantize(Decimal("1"), rounding=ROUND_HALF_UP))

    def savings_amount(self) -> Money:
        if self.sale_price is None:
            return Money.zero()
        return self.base_price.subtract(self.sale_price)

    # Status Management

    def activate(self) -> None:
        self.status = SKUStatus.ACTIVE
        self.touch()

    def deactivate(self) -> None:
        self.status = SKUStatus.INACTIVE
        self.touch()

    def discontinue(self) -> None:
        self.status = SKUStatus.DISCONTINUED
        self.touch()

    def is_purchasable(self) -> bool:
        return self.status.is_available_for_sale() and not self.stock.is_out_of_stock()

    # Display

    @property
    def color_id(self) -> ColorId | None:
        return self.variant_attributes.color_id

    @property
    def dimensions(self) -> str | None:
        return self.variant_attributes.dimensions

    @property
    def material(self) -> str | None:
        return self.variant_attributes.material

    def full_display_name(self) -> str:
        """Name followed by its variant attributes, e.g. ``Desk (Color: 3, Size: W120)``."""
        attributes = []
        if self.color_id is not None:
            attributes.append(f"Color: {self.color_id}")
        if self.dimensions:
            attributes.append(f"Size: {self.dimensions}")
        if self.material:
            attributes.append(f"Material: {self.material}")

        if not attributes:
            return self.name
        return f"{self.name} ({', '.join(attributes)})"

    def is_simple_sku(self) -> bool:
        return self.variant_attributes.is_empty()
