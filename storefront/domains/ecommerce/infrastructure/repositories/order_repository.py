"""
Order Repository Implementation

In-memory implementation of IOrderRepository.
"""

import asyncio
import copy

from storefront.core.domain import BusinessRuleViolationException
from storefront.core.shared import get_repository_logger
from storefront.domains.ecommerce.application.ports import IOrderRepository
from storefront.domains.ecommerce.domain.entities import Order
from storefront.domains.ecommerce.domain.value_objects import OrderId, OrderNumber

logger = get_repository_logger("order")


class InMemoryOrderRepository(IOrderRepository):
    """
    In-memory implementation of order repository.

    Order numbers are time based; a number already taken is retried after a
    millisecond, up to ``max_number_attempts`` times.
    """

    def __init__(self, max_number_attempts: int = 5):
        """
        Initialize repository.

        Args:
            max_number_attempts: Attempts to draw an unused order number
        """
        self._orders: dict[str, Order] = {}
        self._numbers: set[str] = set()
        self.max_number_attempts = max_number_attempts

    async def save(self, order: Order) -> None:
        """
        Store an order.

        Raises:
            BusinessRuleViolationException: If another order already uses the number
        """
        existing = self._orders.get(order.id.value)
        number = order.order_number.value
        if number in self._numbers and (existing is None or existing.order_number.value != number):
            raise BusinessRuleViolationException(
                "UNIQUE_ORDER_NUMBER",
                f"Order number {number} is already in use",
                {"order_number": number},
            )
        self._orders[order.id.value] = copy.deepcopy(order)
        self._numbers.add(number)
        logger.info("Order saved", order_id=order.id.value, order_number=number)

    async def generate_order_number(self) -> OrderNumber:
        """
        Raises:
            BusinessRuleViolationException: If no unused number was found
        """
        for attempt in range(1, self.max_number_attempts + 1):
            number = OrderNumber.generate()
            if number.value not in self._numbers:
                return number
            logger.debug("Order number collision", order_number=number.value, attempt=attempt)
            await asyncio.sleep(0.001)

        raise BusinessRuleViolationException(
            "UNIQUE_ORDER_NUMBER",
            f"Could not generate a unique order number after {self.max_number_attempts} attempts",
        )

    async def get_by_id(self, order_id: OrderId) -> Order | None:
        order = self._orders.get(order_id.value)
        return copy.deepcopy(order) if order else None

    def count(self) -> int:
        return len(self._orders)
