"""
Cart Aggregate for E-commerce Domain

Transient aggregate built per calculation request: never persisted.
"""

from dataclasses import dataclass, field

from storefront.core.domain import (
    BusinessRuleViolationException,
    EntityNotFoundException,
    Money,
    ValidationException,
)

from ..value_objects.identifiers import ProductId, SKUId
from .checkout_method import PaymentMethod, ShippingMethod

MAX_ITEM_QUANTITY = 999


def _check_quantity(quantity: int, message: str = "Quantity must be positive") -> None:
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise ValidationException("Quantity must be an integer", field="quantity")
    if quantity <= 0:
        raise ValidationException(message, field="quantity")


@dataclass(eq=False)
class CartItem:
    """
    Line in a cart.

    Quantity stays within 1..999; the same SKU appears at most once per cart.
    """

    sku_id: SKUId
    product_id: ProductId
    product_name: str
    unit_price: Money
    quantity: int

    def __post_init__(self):
        if not isinstance(self.product_name, str) or not self.product_name.strip():
            raise ValidationException("Product name cannot be empty", field="product_name")
        if not isinstance(self.unit_price, Money) or not self.unit_price.is_positive():
            raise ValidationException("Unit price must be positive", field="unit_price")
        _check_quantity(self.quantity)
        if self.quantity > MAX_ITEM_QUANTITY:
            raise ValidationException(f"Quantity cannot exceed {MAX_ITEM_QUANTITY}", field="quantity")

    @classmethod
    def create(
        cls,
        sku_id: SKUId,
        product_id: ProductId,
        product_name: str,
        unit_price: Money,
        quantity: int,
    ) -> "CartItem":
        if not isinstance(product_name, str):
            raise ValidationException("Product name cannot be empty", field="product_name")
        return cls(
            sku_id=sku_id,
            product_id=product_id,
            product_name=product_name.strip(),
            unit_price=unit_price,
            quantity=quantity,
        )

    def subtotal(self) -> Money:
        return self.unit_price.multiply(self.quantity)

    def update_quantity(self, new_quantity: int) -> None:
        _check_quantity(new_quantity)
        if new_quantity > MAX_ITEM_QUANTITY:
            raise ValidationException(f"Quantity cannot exceed {MAX_ITEM_QUANTITY}", field="quantity")
        self.quantity = new_quantity

    def increase_quantity(self, additional: int) -> None:
        _check_quantity(additional, "Additional quantity must be positive")
        new_quantity = self.quantity + additional
        if new_quantity > MAX_ITEM_QUANTITY:
            raise ValidationException(f"Total quantity cannot exceed {MAX_ITEM_QUANTITY}", field="quantity")
        self.quantity = new_quantity

    def decrease_quantity(self, reduction: int) -> None:
        _check_quantity(reduction, "Reduction quantity must be positive")
        if reduction >= self.quantity:
            raise ValidationException("Cannot reduce quantity below 1", field="quantity")
        self.quantity -= reduction

    def __eq__(self, other: object) -> bool:
        return isinstance(other, CartItem) and self.sku_id == other.sku_id

    def __hash__(self) -> int:
        return hash(self.sku_id)


@dataclass
class Cart:
    """
    Shopping cart aggregate.

    Example:
        ```python
        cart = Cart()
        cart.add_item(CartItem.create(sku_id, product_id, "Oak Desk", Money.from_yen(1000), 2))
        cart.apply_shipping_method(standard)
        cart.apply_payment_method(credit_card)
        cart.validate_for_checkout()
        cart.total()  # (subtotal + fees) with 10% tax, rounded up
        ```
    """

    _items: dict[str, CartItem] = field(default_factory=dict, repr=False)
    shipping_method: ShippingMethod | None = None
    payment_method: PaymentMethod | None = None

    # Item Management

    def add_item(self, item: CartItem) -> None:
        """Add a line, merging quantities when the SKU is already in the cart."""
        existing = self._items.get(item.sku_id.value)
        if existing is not None:
            existing.increase_quantity(item.quantity)
        else:
            self._items[item.sku_id.value] = item

    def remove_item(self, sku_id: SKUId) -> None:
        self._items.pop(sku_id.value, None)

    def update_item_quantity(self, sku_id: SKUId, quantity: int) -> None:
        """
        Set a line's quantity; zero or less removes the line.

        Raises:
            EntityNotFoundException: If the SKU is not in the cart
        """
        item = self._items.get(sku_id.value)
        if item is None:
            raise EntityNotFoundException("CartItem", sku_id.value, "Item not found in cart")
        if quantity <= 0:
            self.remove_item(sku_id)
        else:
            item.update_quantity(quantity)

    # Calculations

    def subtotal(self) -> Money:
        total = Money.zero()
        for item in self._items.values():
            total = total.add(item.subtotal())
        return total

    def shipping_fee(self) -> Money:
        return self.shipping_method.fee if self.shipping_method else Money.zero()

    def payment_fee(self) -> Money:
        return self.payment_method.fee if self.payment_method else Money.zero()

    def total_before_tax(self) -> Money:
        return self.subtotal().add(self.shipping_fee()).add(self.payment_fee())

    def tax_amount(self) -> Money:
        return self.total_before_tax().tax_amount()

    def total(self) -> Money:
        return self.total_before_tax().with_tax()

    # Shipping & Payment

    def apply_shipping_method(self, method: ShippingMethod) -> None:
        self.shipping_method = method

    def apply_payment_method(self, method: PaymentMethod) -> None:
        self.payment_method = method

    def clear_shipping_method(self) -> None:
        self.shipping_method = None

    def clear_payment_method(self) -> None:
        self.payment_method = None

    # Queries

    def total_quantity(self) -> int:
        return sum(item.quantity for item in self._items.values())

    def item_count(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def contains_sku(self, sku_id: SKUId) -> bool:
        return sku_id.value in self._items

    def get_item(self, sku_id: SKUId) -> CartItem | None:
        return self._items.get(sku_id.value)

    @property
    def items(self) -> list[CartItem]:
        return list(self._items.values())

    def clear(self) -> None:
        self._items.clear()
        self.shipping_method = None
        self.payment_method = None

    def validate_for_checkout(self) -> None:
        """
        Raises:
            BusinessRuleViolationException: If the cart is empty or a method is missing
        """
        if self.is_empty():
            raise BusinessRuleViolationException("CART_NOT_EMPTY", "Cart is empty")
        if self.shipping_method is None:
            raise BusinessRuleViolationException("SHIPPING_METHOD_REQUIRED", "Shipping method is required")
        if self.payment_method is None:
            raise BusinessRuleViolationException("PAYMENT_METHOD_REQUIRED", "Payment method is required")
