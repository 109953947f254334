"""
Calculate Cart Use Case

Prices a prospective cart without changing any stored data.
"""

from collections import Counter
from dataclasses import dataclass

from storefront.core.domain import (
    DomainException,
    EntityNotFoundException,
    InsufficientStockException,
    NotPurchasableException,
)
from storefront.core.shared import get_use_case_logger
from storefront.domains.ecommerce.application.dto import (
    CalculatedCartItem,
    CalculateCartResult,
    SKUSummary,
)
from storefront.domains.ecommerce.application.ports import (
    IPaymentMethodRepository,
    IShippingMethodRepository,
    ISKURepository,
)
from storefront.domains.ecommerce.domain.entities import (
    Cart,
    CartItem,
    PaymentMethod,
    ShippingMethod,
)
from storefront.domains.ecommerce.domain.value_objects import (
    PaymentMethodId,
    ShippingMethodId,
    SKUId,
)

from .validation import parse_sku_ids, require_text, unique_ids, validate_lines

logger = get_use_case_logger("calculate_cart")


@dataclass
class CartItemInput:
    """Input for a cart line."""

    sku_id: str
    quantity: int


@dataclass
class CalculateCartRequest:
    """Request for pricing a cart."""

    items: list[CartItemInput]
    shipping_method_id: str
    payment_method_id: str


class CalculateCartUseCase:
    """
    Use Case: Calculate Cart

    Builds a transient Cart from current SKU prices and the chosen
    shipping/payment methods and returns its totals.

    Responsibilities:
    - Validate request shape
    - Check SKUs exist, are purchasable and have enough stock
    - Resolve shipping and payment methods
    - Compute subtotal, fees, tax and total
    """

    def __init__(
        self,
        sku_repository: ISKURepository,
        shipping_method_repository: IShippingMethodRepository,
        payment_method_repository: IPaymentMethodRepository,
    ):
        """
        Initialize use case with dependencies.

        Args:
            sku_repository: Repository for SKU summaries
            shipping_method_repository: Repository for shipping methods
            payment_method_repository: Repository for payment methods
        """
        self.sku_repository = sku_repository
        self.shipping_method_repository = shipping_method_repository
        self.payment_method_repository = payment_method_repository

    async def execute(self, request: CalculateCartRequest) -> CalculateCartResult:
        """
        Price the requested cart.

        Args:
            request: Cart lines and chosen methods

        Returns:
            CalculateCartResult with per-line subtotals and totals in yen

        Raises:
            ValidationException: If the request is malformed
            EntityNotFoundException: If a SKU or method does not exist
            BusinessRuleViolationException: If a SKU cannot be bought in that quantity
        """
        try:
            self._validate_input(request)
            sku_ids = parse_sku_ids([item.sku_id for item in request.items])

            summaries = await self.sku_repository.find_summaries_by_ids(unique_ids(sku_ids))
            summaries_by_id = {summary.id.value: summary for summary in summaries}
            self._check_lines(request.items, sku_ids, summaries_by_id)

            shipping_method = await self._get_shipping_method(request.shipping_method_id)
            payment_method = await self._get_payment_method(request.payment_method_id)

            cart = self._build_cart(request.items, sku_ids, summaries_by_id)
            cart.apply_shipping_method(shipping_method)
            cart.apply_payment_method(payment_method)

            result = self._to_result(cart, summaries_by_id, shipping_method, payment_method)
        except DomainException as e:
            logger.warning("Cart calculation failed", error=e.code, reason=e.message)
            raise

        logger.info(
            "Cart calculated",
            item_count=len(result.items),
            total=result.total,
        )
        return result

    def _validate_input(self, request: CalculateCartRequest) -> None:
        validate_lines(request.items, "Cart items are required")
        require_text(request.shipping_method_id, "Shipping method ID is required", "shipping_method_id")
        require_text(request.payment_method_id, "Payment method ID is required", "payment_method_id")

    def _check_lines(
        self,
        items: list[CartItemInput],
        sku_ids: list[SKUId],
        summaries_by_id: dict[str, SKUSummary],
    ) -> None:
        """Existence first, then purchasability, then stock for the total asked per SKU."""
        requested = Counter()
        for item, sku_id in zip(items, sku_ids, strict=True):
            requested[sku_id.value] += item.quantity

        for sku_id in sku_ids:
            summary = summaries_by_id.get(sku_id.value)
            if summary is None:
                raise EntityNotFoundException("SKU", sku_id.value)
            if not summary.is_purchasable:
                raise NotPurchasableException(sku_id=sku_id.value, status="unavailable")
            if summary.available_stock < requested[sku_id.value]:
                raise InsufficientStockException(
                    requested=requested[sku_id.value],
                    available=summary.available_stock,
                    sku_id=sku_id.value,
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

    def _build_cart(
        self,
        items: list[CartItemInput],
        sku_ids: list[SKUId],
        summaries_by_id: dict[str, SKUSummary],
    ) -> Cart:
        cart = Cart()
        for item, sku_id in zip(items, sku_ids, strict=True):
            summary = summaries_by_id[sku_id.value]
            cart.add_item(
                CartItem.create(
                    sku_id=summary.id,
                    product_id=summary.product_id,
                    product_name=summary.product_name,
                    unit_price=summary.current_price,
                    quantity=item.quantity,
                )
            )
        return cart

    def _to_result(
        self,
        cart: Cart,
        summaries_by_id: dict[str, SKUSummary],
        shipping_method: ShippingMethod,
        payment_method: PaymentMethod,
    ) -> CalculateCartResult:
        items = [
            CalculatedCartItem(
                sku_id=item.sku_id.value,
                product_id=item.product_id.value,
                product_name=item.product_name,
                sku_name=summaries_by_id[item.sku_id.value].name,
                unit_price=item.unit_price.yen,
                quantity=item.quantity,
                subtotal=item.subtotal().yen,
            )
            for item in cart.items
        ]
        return CalculateCartResult(
            items=items,
            subtotal=cart.subtotal().yen,
            shipping_fee=cart.shipping_fee().yen,
            payment_fee=cart.payment_fee().yen,
            tax_amount=cart.tax_amount().yen,
            total=cart.total().yen,
            shipping_method_id=shipping_method.id.value,
            shipping_method_name=shipping_method.name,
            payment_method_id=payment_method.id.value,
            payment_method_name=payment_method.name,
        )


__all__ = ["CalculateCartUseCase", "CalculateCartRequest", "CartItemInput"]
