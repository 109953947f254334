"""
Unit tests for the dependency container.
"""

import pytest

from storefront.core.container import DependencyContainer, EcommerceContainer
from storefront.core.domain import Money
from storefront.domains.ecommerce.application.use_cases import (
    CalculateCartRequest,
    CalculateCartUseCase,
    CartItemInput,
    CreateOrderUseCase,
    FindVariantsUseCase,
)


@pytest.fixture
def container(test_settings) -> DependencyContainer:
    return DependencyContainer(settings=test_settings)


@pytest.mark.unit
class TestDependencyContainer:
    def test_exposes_settings(self, container, test_settings):
        assert container.settings is test_settings
        assert isinstance(container.ecommerce, EcommerceContainer)

    def test_get_config(self, container):
        assert container.get_config() == {
            "environment": "test",
            "low_stock_threshold": 5,
            "order_number_max_attempts": 3,
            "domains": ["ecommerce"],
        }

    def test_repositories_are_singletons(self, container):
        ecommerce = container.ecommerce

        assert ecommerce.get_product_repository() is ecommerce.get_product_repository()
        assert ecommerce.get_order_repository() is ecommerce.get_order_repository()

    def test_repositories_read_settings(self, container):
        ecommerce = container.ecommerce

        assert ecommerce.get_order_repository().max_number_attempts == 3
        assert ecommerce.get_product_repository().low_stock_threshold == 5

    def test_use_case_factories(self, container):
        ecommerce = container.ecommerce

        assert isinstance(ecommerce.create_calculate_cart_use_case(), CalculateCartUseCase)
        assert isinstance(ecommerce.create_find_variants_use_case(), FindVariantsUseCase)

        create_order = ecommerce.create_create_order_use_case()
        assert isinstance(create_order, CreateOrderUseCase)
        assert create_order.sku_repository is ecommerce.get_product_repository()
        assert create_order.order_repository is ecommerce.get_order_repository()

    @pytest.mark.asyncio
    async def test_wired_use_case_runs(self, container, desk_product, sku_a, standard_shipping, credit_card_payment):
        # Arrange
        ecommerce = container.ecommerce
        await ecommerce.get_product_repository().save(desk_product)
        ecommerce.get_shipping_method_repository().add(standard_shipping)
        ecommerce.get_payment_method_repository().add(credit_card_payment)

        # Act
        result = await ecommerce.create_calculate_cart_use_case().execute(
            CalculateCartRequest(
                items=[CartItemInput(sku_id=sku_a.id.value, quantity=1)],
                shipping_method_id="standard",
                payment_method_id="credit_card",
            )
        )

        # Assert
        assert result.total == Money(1500).with_tax().yen
