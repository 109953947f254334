"""
Create Order Use Case

Business logic for creating new orders.
"""

from collections import Counter
from dataclasses import dataclass

from storefront.core.domain import (
    Address,
    DomainException,
    EntityNotFoundException,
    ValidationException,
)
from storefront.core.shared import get_use_case_logger
from storefront.domains.ecommerce.application.dto import CreateOrderResult
from storefront.domains.ecommerce.application.ports import (
    IOrderRepository,
    IPaymentMethodRepository,
    IShippingMethodRepository,
    ISKURepository,
)
from storefront.domains.ecommerce.domain.entities import (
    SKU,
    Order,
    OrderItem,
    PaymentInfo,
    PaymentMethod,
    ShippingInfo,
    ShippingMethod,
    build_order_items,
)
from storefront.domains.ecommerce.domain.value_objects import (
    CustomerInfo,
    OrderId,
    PaymentMethodId,
    ShippingMethodId,
)

from .validation import parse_sku_ids, require_text, unique_ids, validate_lines

logger = get_use_case_logger("create_order")


@dataclass
class OrderItemInput:
    """Input for order item."""

    sku_id: str
    quantity: int


@dataclass
class CustomerInput:
    """Customer contact details as entered."""

    first_name: str
    last_name: str
    email: str
    phone: str


@dataclass
class ShippingAddressInput:
    """Delivery address as entered."""

    postal_code: str
    prefecture: str
    city: str
    street_address: str
    building: str | None = None


@dataclass
class CreateOrderRequest:
    """Request for creating an order."""

    items: list[OrderItemInput]
    customer: CustomerInput | None
    shipping_address: ShippingAddressInput | None
    shipping_method_id: str
    payment_method_id: str


class CreateOrderUseCase:
    """
    Use Case: Create Order

    Creates a pending order from current SKU prices and reserves its stock.

    Responsibilities:
    - Validate request and customer details
    - Check SKUs exist, are purchasable and have enough stock
    - Snapshot item prices and checkout methods
    - Reserve stock and persist the order
    """

    def __init__(
        self,
        sku_repository: ISKURepository,
        shipping_method_repository: IShippingMethodRepository,
        payment_method_repository: IPaymentMethodRepository,
        order_repository: IOrderRepository,
    ):
        """
        Initialize use case with dependencies.

        Args:
            sku_repository: Repository for SKU entities and stock
            shipping_method_repository: Repository for shipping methods
            payment_method_repository: Repository for payment methods
            order_repository: Repository for order persistence
        """
        self.sku_repository = sku_repository
        self.shipping_method_repository = shipping_method_repository
        self.payment_method_repository = payment_method_repository
        self.order_repository = order_repository

    async def execute(self, request: CreateOrderRequest) -> CreateOrderResult:
        """
        Create a new order.

        Nothing is stored unless every check passes.

        Args:
            request: Order creation request

        Returns:
            CreateOrderResult with id, number, total and status

        Raises:
            ValidationException: If the request or customer details are malformed
            EntityNotFoundException: If a SKU or method does not exist
            BusinessRuleViolationException: If a SKU or method cannot be used
        """
        try:
            self._validate_input(request)
            customer_info = self._create_customer_info(request)
            sku_ids = parse_sku_ids([item.sku_id for item in request.items])
            lines = [(sku_id, item.quantity) for sku_id, item in zip(sku_ids, request.items, strict=True)]

            async with self.sku_repository.reservation_lock():
                skus = await self.sku_repository.find_by_ids(unique_ids(sku_ids))
                product_names = await self._get_product_names(skus)
                order_items = build_order_items(lines, skus, product_names)

                shipping_method = await self._get_shipping_method(request.shipping_method_id)
                payment_method = await self._get_payment_method(request.payment_method_id)
                address = self._create_address(request)
                shipping_info = ShippingInfo.create_from_method(shipping_method, address)
                payment_info = PaymentInfo.create_from_method(payment_method)

                reserved = self._reserve_stock(order_items, skus)

                order_number = await self.order_repository.generate_order_number()
                order = Order.create(
                    order_id=OrderId.new(),
                    order_number=order_number,
                    customer_info=customer_info,
                    items=order_items,
                    shipping_info=shipping_info,
                    payment_info=payment_info,
                )

                await self._persist(order, reserved)
        except DomainException as e:
            logger.warning("Order creation failed", error=e.code, reason=e.message)
            raise

        logger.info(
            f"Order created: {order.order_number}",
            order_id=order.id.value,
            total=order.pricing.total.yen,
            item_count=order.total_item_count(),
        )
        return CreateOrderResult(
            order_id=order.id.value,
            order_number=order.order_number.value,
            total=order.pricing.total.yen,
            status=order.status.value,
            created_at=order.created_at,
        )

    def _validate_input(self, request: CreateOrderRequest) -> None:
        validate_lines(request.items, "Order must have at least one item")
        if request.customer is None:
            raise ValidationException("Customer information is required", field="customer")
        if request.shipping_address is None:
            raise ValidationException("Shipping address is required", field="shipping_address")
        require_text(request.shipping_method_id, "Shipping method ID is required", "shipping_method_id")
        require_text(request.payment_method_id, "Payment method ID is required", "payment_method_id")

    def _create_customer_info(self, request: CreateOrderRequest) -> CustomerInfo:
        customer = request.customer
        return CustomerInfo.create(
            first_name=customer.first_name,
            last_name=customer.last_name,
            email=customer.email,
            phone_number=customer.phone,
        )

    def _create_address(self, request: CreateOrderRequest) -> Address:
        address = request.shipping_address
        return Address(
            postal_code=address.postal_code,
            prefecture=address.prefecture,
            city=address.city,
            street=address.street_address,
            building=address.building,
        )

    async def _get_shipping_method(self, raw_id: str) -> ShippingMethod:
        method = await self.shipping_method_repository.find_by_id(ShippingMethodId(raw_id))
        if method is None:
            raise EntityNotFoundException("Shipping method", raw_id)
        return method

    async def _get_payment_method(self, raw_id: str) -> PaymentMethod:
        method = await self.payment_method_repository.find_by_id(PaymentMethodId(raw_id))
        if method is None:
            raise EntityNotFoundException("Payment method", raw_id)
        return method

    async def _get_product_names(self, skus: list[SKU]) -> dict[str, str]:
        summaries = await self.sku_repository.find_summaries_by_ids([sku.id for sku in skus])
        return {summary.id.value: summary.product_name for summary in summaries}

    def _reserve_stock(self, order_items: list[OrderItem], skus: list[SKU]) -> list[tuple[SKU, int]]:
        """Reserve the total ordered per SKU; returns each SKU with its reserved quantity."""
        skus_by_id = {sku.id.value: sku for sku in skus}
        requested = Counter()
        for item in order_items:
            requested[item.sku_id.value] += item.quantity

        reserved = []
        for sku_id, quantity in requested.items():
            sku = skus_by_id[sku_id]
            sku.reserve_stock(quantity)
            reserved.append((sku, quantity))
        return reserved

    async def _persist(self, order: Order, reserved: list[tuple[SKU, int]]) -> None:
        """
        Store the reserved stock, then the order.

        If the order cannot be stored, the reservations are released again so
        that stock is never held for an order that does not exist.
        """
        skus = [sku for sku, _ in reserved]
        await self.sku_repository.save_all(skus)
        try:
            await self.order_repository.save(order)
        except Exception:
            for sku, quantity in reserved:
                sku.release_reservation(quantity)
            await self.sku_repository.save_all(skus)
            raise


__all__ = [
    "CreateOrderUseCase",
    "CreateOrderRequest",
    "OrderItemInput",
    "CustomerInput",
    "ShippingAddressInput",
]
