"""
E-commerce Domain Container.

Single Responsibility: Wire all e-commerce domain dependencies.
"""

import logging
from typing import TYPE_CHECKING

from storefront.domains.ecommerce.application.use_cases import (
    CalculateCartUseCase,
    CreateOrderUseCase,
    FindVariantsUseCase,
)
from storefront.domains.ecommerce.infrastructure.repositories import (
    InMemoryOrderRepository,
    InMemoryPaymentMethodRepository,
    InMemoryProductRepository,
    InMemoryShippingMethodRepository,
)

if TYPE_CHECKING:
    from storefront.core.container.base import BaseContainer

logger = logging.getLogger(__name__)


class EcommerceContainer:
    """
    E-commerce domain container.

    Single Responsibility: Create e-commerce repositories and use cases.
    Repositories are created once so every use case sees the same store.
    """

    def __init__(self, base: "BaseContainer"):
        """
        Initialize e-commerce container.

        Args:
            base: BaseContainer with shared settings
        """
        self._base = base
        self._product_repository: InMemoryProductRepository | None = None
        self._shipping_method_repository: InMemoryShippingMethodRepository | None = None
        self._payment_method_repository: InMemoryPaymentMethodRepository | None = None
        self._order_repository: InMemoryOrderRepository | None = None

    # ==================== REPOSITORIES ====================

    def get_product_repository(self) -> InMemoryProductRepository:
        """Get Product/SKU Repository (singleton)."""
        if self._product_repository is None:
            self._product_repository = InMemoryProductRepository(
                low_stock_threshold=self._base.settings.LOW_STOCK_THRESHOLD
            )
        return self._product_repository

    def get_shipping_method_repository(self) -> InMemoryShippingMethodRepository:
        """Get Shipping Method Repository (singleton)."""
        if self._shipping_method_repository is None:
            self._shipping_method_repository = InMemoryShippingMethodRepository()
        return self._shipping_method_repository

    def get_payment_method_repository(self) -> InMemoryPaymentMethodRepository:
        """Get Payment Method Repository (singleton)."""
        if self._payment_method_repository is None:
            self._payment_method_repository = InMemoryPaymentMethodRepository()
        return self._payment_method_repository

    def get_order_repository(self) -> InMemoryOrderRepository:
        """Get Order Repository (singleton)."""
        if self._order_repository is None:
            attempts = self._base.settings.ORDER_NUMBER_MAX_ATTEMPTS
            logger.info(f"Creating order repository (max number attempts: {attempts})")
            self._order_repository = InMemoryOrderRepository(max_number_attempts=attempts)
        return self._order_repository

    # ==================== USE CASES ====================

    def create_calculate_cart_use_case(self) -> CalculateCartUseCase:
        """Create CalculateCartUseCase with dependencies."""
        return CalculateCartUseCase(
            sku_repository=self.get_product_repository(),
            shipping_method_repository=self.get_shipping_method_repository(),
            payment_method_repository=self.get_payment_method_repository(),
        )

    def create_create_order_use_case(self) -> CreateOrderUseCase:
        """Create CreateOrderUseCase with dependencies."""
        return CreateOrderUseCase(
            sku_repository=self.get_product_repository(),
            shipping_method_repository=self.get_shipping_method_repository(),
            payment_method_repository=self.get_payment_method_repository(),
            order_repository=self.get_order_repository(),
        )

    def create_find_variants_use_case(self) -> FindVariantsUseCase:
        """Create FindVariantsUseCase with dependencies."""
        return FindVariantsUseCase(sku_repository=self.get_product_repository())
