"""
Order Aggregate for E-commerce Domain

Represents a customer order with frozen item prices, a one-time pricing
snapshot and status tracking.
"""

from collections import Counter
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from datetime import datetime

from storefront.core.domain import (
    Address,
    BusinessRuleViolationException,
    EntityNotFoundException,
    InsufficientStockException,
    InvalidStatusTransitionException,
    Money,
    NotPurchasableException,
    ValidationException,
    utc_now,
)

from ..value_objects.customer_info import CustomerInfo
from ..value_objects.identifiers import OrderId, PaymentMethodId, ProductId, ShippingMethodId, SKUId
from ..value_objects.order_number import OrderNumber
from ..value_objects.order_status import OrderStatus
from .checkout_method import PaymentMethod, ShippingMethod
from .sku import SKU

MAX_NOTE_LENGTH = 1000


def _require_text(value: str, message: str, field_name: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ValidationException(message, field=field_name)


def _require_fee(fee: Money) -> None:
    if not isinstance(fee, Money):
        raise ValidationException("Fee must be a Money amount", field="fee")


@dataclass(frozen=True)
class OrderItem:
    """
    Line item captured at order creation.

    The unit price is a snapshot; later SKU price changes do not affect it.
    """

    sku_id: SKUId
    product_id: ProductId
    product_name: str
    sku_name: str
    unit_price: Money
    quantity: int

    def __post_init__(self):
        _require_text(self.product_name, "Product name cannot be empty", "product_name")
        _require_text(self.sku_name, "SKU name cannot be empty", "sku_name")
        if not isinstance(self.unit_price, Money) or not self.unit_price.is_positive():
            raise ValidationException("Unit price must be positive", field="unit_price")
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int) or self.quantity <= 0:
            raise ValidationException("Quantity must be positive", field="quantity")

    @classmethod
    def create(
        cls,
        sku_id: SKUId,
        product_id: ProductId,
        product_name: str,
        sku_name: str,
        unit_price: Money,
        quantity: int,
    ) -> "OrderItem":
        _require_text(product_name, "Product name cannot be empty", "product_name")
        _require_text(sku_name, "SKU name cannot be empty", "sku_name")
        return cls(
            sku_id=sku_id,
            product_id=product_id,
            product_name=product_name.strip(),
            sku_name=sku_name.strip(),
            unit_price=unit_price,
            quantity=quantity,
        )

    @classmethod
    def from_sku(cls, sku: SKU, quantity: int, product_name: str | None = None) -> "OrderItem":
        """Snapshot a SKU at its current price."""
        return cls.create(
            sku_id=sku.id,
            product_id=sku.product_id,
            product_name=product_name or sku.name,
            sku_name=sku.name,
            unit_price=sku.current_price(),
            quantity=quantity,
        )

    def subtotal(self) -> Money:
        return self.unit_price.multiply(self.quantity)

    @property
    def full_display_name(self) -> str:
        return f"{self.product_name} - {self.sku_name}"


@dataclass(frozen=True)
class OrderPricing:
    """
    Pricing computed once when the order is created.

    ``total = ceil((subtotal + shipping_fee + payment_fee) * 1.1)``
    """

    subtotal: Money
    shipping_fee: Money
    payment_fee: Money
    tax_amount: Money
    total: Money

    @classmethod
    def calculate(cls, subtotal: Money, shipping_fee: Money, payment_fee: Money) -> "OrderPricing":
        before_tax = subtotal.add(shipping_fee).add(payment_fee)
        return cls(
            subtotal=subtotal,
            shipping_fee=shipping_fee,
            payment_fee=payment_fee,
            tax_amount=before_tax.tax_amount(),
            total=before_tax.with_tax(),
        )

    @property
    def total_before_tax(self) -> Money:
        return self.subtotal.add(self.shipping_fee).add(self.payment_fee)


@dataclass(frozen=True)
class ShippingInfo:
    """Snapshot of the chosen shipping method and delivery address."""

    method_id: ShippingMethodId
    method_name: str
    fee: Money
    address: Address

    def __post_init__(self):
        _require_text(self.method_name, "Shipping method name cannot be empty", "shipping_method")
        _require_fee(self.fee)
        if not isinstance(self.address, Address):
            raise ValidationException("Shipping address is required", field="shipping_address")

    @classmethod
    def create(
        cls,
        method_id: ShippingMethodId,
        method_name: str,
        fee: Money,
        address: Address,
    ) -> "ShippingInfo":
        return cls(method_id=method_id, method_name=method_name, fee=fee, address=address)

    @classmethod
    def create_from_method(cls, method: ShippingMethod, address: Address) -> "ShippingInfo":
        """
        Raises:
            BusinessRuleViolationException: If the method is inactive
        """
        if not method.is_active:
            raise BusinessRuleViolationException(
                "SHIPPING_METHOD_ACTIVE",
                f"Shipping method {method.id} is not available",
                {"shipping_method_id": str(method.id)},
            )
        return cls.create(method.id, method.name, method.fee, address)


@dataclass(frozen=True)
class PaymentInfo:
    """Snapshot of the chosen payment method."""

    method_id: PaymentMethodId
    method_name: str
    fee: Money

    def __post_init__(self):
        _require_text(self.method_name, "Payment method name cannot be empty", "payment_method")
        _require_fee(self.fee)

    @classmethod
    def create(cls, method_id: PaymentMethodId, method_name: str, fee: Money) -> "PaymentInfo":
        return cls(method_id=method_id, method_name=method_name, fee=fee)

    @classmethod
    def create_from_method(cls, method: PaymentMethod) -> "PaymentInfo":
        """
        Raises:
            BusinessRuleViolationException: If the method is inactive
        """
        if not method.is_active:
            raise BusinessRuleViolationException(
                "PAYMENT_METHOD_ACTIVE",
                f"Payment method {method.id} is not available",
                {"payment_method_id": str(method.id)},
            )
        return cls.create(method.id, method.name, method.fee)


@dataclass
class OrderTimestamps:
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)
    paid_at: datetime | None = None
    shipped_at: datetime | None = None
    delivered_at: datetime | None = None
    cancelled_at: datetime | None = None

    def update(self) -> None:
        self.updated_at = utc_now()

    def mark_paid(self) -> None:
        self.paid_at = utc_now()
        self.update()

    def mark_shipped(self) -> None:
        self.shipped_at = utc_now()
        self.update()

    def mark_delivered(self) -> None:
        self.delivered_at = utc_now()
        self.update()

    def mark_cancelled(self) -> None:
        self.cancelled_at = utc_now()
        self.update()


def build_order_items(
    lines: Iterable[tuple[SKUId, int]],
    skus: Sequence[SKU],
    product_names: Mapping[str, str] | None = None,
) -> list[OrderItem]:
    """
    Check the requested lines against their SKUs and snapshot them.

    Stock is checked against the total requested per SKU, so repeated lines
    for one SKU are judged together.

    Args:
        lines: ``(sku_id, quantity)`` pairs in request order
        skus: Loaded SKUs
        product_names: Product name per SKU id value; falls back to the SKU name

    Raises:
        EntityNotFoundException: If a SKU is missing from ``skus``
        NotPurchasableException: If a SKU is inactive or sold out
        InsufficientStockException: If a SKU cannot cover the quantity
    """
    lines = list(lines)
    product_names = product_names or {}
    skus_by_id = {sku.id.value: sku for sku in skus}
    requested = Counter()
    for sku_id, quantity in lines:
        requested[sku_id.value] += quantity

    items = []
    for sku_id, quantity in lines:
        sku = skus_by_id.get(sku_id.value)
        if sku is None:
            raise EntityNotFoundException("SKU", sku_id.value)
        if not sku.is_purchasable():
            raise NotPurchasableException(sku_id=sku_id.value, status=sku.status.value)
        if sku.available_quantity() < requested[sku_id.value]:
            raise InsufficientStockException(
                requested=requested[sku_id.value],
                available=sku.available_quantity(),
                sku_id=sku_id.value,
            )
        items.append(OrderItem.from_sku(sku, quantity, product_names.get(sku_id.value)))
    return items


def _items_subtotal(items: Iterable[OrderItem]) -> Money:
    subtotal = Money.zero()
    for item in items:
        subtotal = subtotal.add(item.subtotal())
    return subtotal


@dataclass(eq=False)
class Order:
    """
    Order aggregate root for e-commerce domain.

    Pricing is frozen at creation; afterwards only the status and the notes
    change.

    Example:
        ```python
        order = Order.create(
            order_id=OrderId.new(),
            order_number=OrderNumber.generate(),
            customer_info=customer,
            items=[OrderItem.from_sku(sku, 2)],
            shipping_info=shipping,
            payment_info=payment,
        )
        order.update_status(OrderStatus.PAID)
        order.cancel("Customer request")
        ```
    """

    id: OrderId
    order_number: OrderNumber
    customer_info: CustomerInfo
    items: tuple[OrderItem, ...]
    shipping_info: ShippingInfo
    payment_info: PaymentInfo
    pricing: OrderPricing
    status: OrderStatus = OrderStatus.PENDING
    timestamps: OrderTimestamps = field(default_factory=OrderTimestamps)
    notes: str | None = None

    def __post_init__(self):
        if not self.items:
            raise ValidationException("Order must have at least one item", field="items")
        self.items = tuple(self.items)
        if not isinstance(self.shipping_info, ShippingInfo):
            raise ValidationException("Shipping information is required", field="shipping_info")
        if not isinstance(self.payment_info, PaymentInfo):
            raise ValidationException("Payment information is required", field="payment_info")
        expected = OrderPricing.calculate(
            _items_subtotal(self.items), self.shipping_info.fee, self.payment_info.fee
        )
        if self.pricing != expected:
            raise ValidationException("Order pricing does not match its items and fees", field="pricing")

    @classmethod
    def create(
        cls,
        order_id: OrderId,
        order_number: OrderNumber,
        customer_info: CustomerInfo,
        items: Sequence[OrderItem],
        shipping_info: ShippingInfo,
        payment_info: PaymentInfo,
    ) -> "Order":
        """
        Create a pending order and compute its pricing.

        Raises:
            ValidationException: If there are no items
        """
        items = tuple(items or ())
        pricing = OrderPricing.calculate(_items_subtotal(items), shipping_info.fee, payment_info.fee)
        return cls(
            id=order_id,
            order_number=order_number,
            customer_info=customer_info,
            items=items,
            shipping_info=shipping_info,
            payment_info=payment_info,
            pricing=pricing,
        )

    @classmethod
    def create_from_skus(
        cls,
        order_id: OrderId,
        order_number: OrderNumber,
        customer_info: CustomerInfo,
        lines: Iterable[tuple[SKUId, int]],
        skus: Sequence[SKU],
        shipping_method: ShippingMethod,
        shipping_address: Address,
        payment_method: PaymentMethod,
        product_names: Mapping[str, str] | None = None,
    ) -> "Order":
        """Check requested lines against loaded SKUs and methods, then create the order."""
        items = build_order_items(lines, skus, product_names)
        shipping_info = ShippingInfo.create_from_method(shipping_method, shipping_address)
        payment_info = PaymentInfo.create_from_method(payment_method)
        return cls.create(order_id, order_number, customer_info, items, shipping_info, payment_info)

    # Status Management

    def update_status(self, new_status: OrderStatus) -> None:
        """
        Move to a new status, stamping the matching timestamp.

        Raises:
            InvalidStatusTransitionException: If the transition is not allowed
        """
        if not self.status.can_transition_to(new_status):
            raise InvalidStatusTransitionException(self.status.value, new_status.value)

        self.status = new_status
        if new_status == OrderStatus.PAID:
            self.timestamps.mark_paid()
        elif new_status == OrderStatus.SHIPPED:
            self.timestamps.mark_shipped()
        elif new_status == OrderStatus.DELIVERED:
            self.timestamps.mark_delivered()
        elif new_status == OrderStatus.CANCELLED:
            self.timestamps.mark_cancelled()
        else:
            self.timestamps.update()

    def cancel(self, reason: str | None = None) -> None:
        if not self.can_be_cancelled():
            raise InvalidStatusTransitionException(
                self.status.value,
                OrderStatus.CANCELLED.value,
                f"Cannot cancel order with status: {self.status.value}",
            )
        self.update_status(OrderStatus.CANCELLED)
        if reason and reason.strip():
            self.add_note(f"Cancelled: {reason.strip()}")

    def add_note(self, note: str) -> None:
        """Append a note on its own line."""
        if not isinstance(note, str) or not note.strip():
            raise ValidationException("Note cannot be empty", field="notes")
        note = note.strip()
        if len(note) > MAX_NOTE_LENGTH:
            raise ValidationException(f"Note cannot exceed {MAX_NOTE_LENGTH} characters", field="notes")
        self.notes = f"{self.notes}\n{note}" if self.notes else note
        self.timestamps.update()

    # Queries

    def can_be_cancelled(self) -> bool:
        return self.status.can_be_cancelled()

    def can_be_modified(self) -> bool:
        return self.status.can_be_modified()

    def total_item_count(self) -> int:
        return sum(item.quantity for item in self.items)

    @property
    def created_at(self) -> datetime:
        return self.timestamps.created_at

    @property
    def updated_at(self) -> datetime:
        return self.timestamps.updated_at

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Order) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
