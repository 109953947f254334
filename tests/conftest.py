"""
Shared pytest fixtures for all tests.

This module provides sample catalog data, in-memory repositories, mocked
ports and other shared testing utilities.
"""

import asyncio
import os
from unittest.mock import AsyncMock, MagicMock

import pytest

from storefront.config.settings import Settings
from storefront.core.domain import Address, Money
from storefront.domains.ecommerce.domain.entities import (
    SKU,
    PaymentMethod,
    Product,
    ProductImage,
    ShippingMethod,
    VariantAttributes,
)
from storefront.domains.ecommerce.domain.value_objects import (
    CategoryId,
    ColorId,
    CustomerInfo,
    PaymentMethodId,
    ProductId,
    ShippingMethodId,
    SKUId,
)
from storefront.domains.ecommerce.infrastructure.repositories import (
    InMemoryOrderRepository,
    InMemoryPaymentMethodRepository,
    InMemoryProductRepository,
    InMemoryShippingMethodRepository,
)

# Ensure test environment
os.environ["ENVIRONMENT"] = "test"


# ============================================================================
# IDENTIFIERS
# ============================================================================

PRODUCT_ID = "5f0c6a3e-8a1b-4c2d-9e3f-1a2b3c4d5e6f"
SKU_A_ID = "0b7e2f1a-3c4d-4e5f-8a9b-0c1d2e3f4a5b"
SKU_B_ID = "1c8f3a2b-4d5e-4f6a-9b0c-1d2e3f4a5b6c"
CATEGORY_ID = "2d9a4b3c-5e6f-4a7b-8c1d-2e3f4a5b6c7d"
UNKNOWN_SKU_ID = "3eab5c4d-6f7a-4b8c-9d2e-3f4a5b6c7d8e"


@pytest.fixture
def product_id() -> ProductId:
    return ProductId(PRODUCT_ID)


@pytest.fixture
def category_id() -> CategoryId:
    return CategoryId(CATEGORY_ID)


# ============================================================================
# CATALOG FIXTURES
# ============================================================================


@pytest.fixture
def make_sku(product_id):
    """Factory for SKUs belonging to the sample product."""

    def _make(
        sku_id: str | None = None,
        code: str = "DESK-OAK-W120",
        name: str = "Oak Desk W120",
        price: int = 1000,
        stock: int = 10,
        variant_attributes: VariantAttributes | None = None,
        display_order: int = 0,
    ) -> SKU:
        return SKU.create(
            sku_id=SKUId(sku_id) if sku_id else SKUId.new(),
            product_id=product_id,
            sku_code=code,
            name=name,
            variant_attributes=variant_attributes or VariantAttributes(),
            base_price=Money.from_yen(price),
            initial_stock=stock,
            display_order=display_order,
        )

    return _make


@pytest.fixture
def sku_a(make_sku) -> SKU:
    """Oak desk, 1000 yen, 10 in stock."""
    return make_sku(
        sku_id=SKU_A_ID,
        code="DESK-OAK-W120",
        name="Oak Desk W120",
        price=1000,
        stock=10,
        variant_attributes=VariantAttributes(color_id=ColorId(1), dimensions="W120", material="Oak"),
    )


@pytest.fixture
def sku_b(make_sku) -> SKU:
    """Walnut desk, 500 yen, 3 in stock."""
    return make_sku(
        sku_id=SKU_B_ID,
        code="DESK-WAL-W90",
        name="Walnut Desk W90",
        price=500,
        stock=3,
        variant_attributes=VariantAttributes(color_id=ColorId(2), dimensions="W90", material="Walnut"),
        display_order=1,
    )


@pytest.fixture
def desk_product(product_id, category_id, sku_a, sku_b) -> Product:
    product = Product.create(
        product_id=product_id,
        name="Writing Desk",
        description="Solid wood writing desk",
        category_id=category_id,
    )
    product.add_sku(sku_a)
    product.add_sku(sku_b)
    product.add_image(
        ProductImage.create(
            image_id="img-1",
            product_id=product_id,
            url="https://cdn.example.com/desk.jpg",
            alt_text="Writing desk",
            is_main=True,
        )
    )
    return product


# ============================================================================
# CHECKOUT FIXTURES
# ============================================================================


@pytest.fixture
def standard_shipping() -> ShippingMethod:
    return ShippingMethod.create(ShippingMethodId("standard"), "Standard Delivery", Money.from_yen(500))


@pytest.fixture
def inactive_shipping() -> ShippingMethod:
    return ShippingMethod.create(
        ShippingMethodId("same_day"), "Same Day Delivery", Money.from_yen(1500), is_active=False
    )


@pytest.fixture
def credit_card_payment() -> PaymentMethod:
    return PaymentMethod.create(PaymentMethodId("credit_card"), "Credit Card", Money.zero())


@pytest.fixture
def cod_payment() -> PaymentMethod:
    return PaymentMethod.create(PaymentMethodId("cod"), "Cash on Delivery", Money.from_yen(330))


@pytest.fixture
def tokyo_address() -> Address:
    return Address(
        postal_code="150-0001",
        prefecture="Tokyo",
        city="Shibuya-ku",
        street="Jingumae 1-2-3",
        building="Omotesando Hills 4F",
    )


@pytest.fixture
def customer_info() -> CustomerInfo:
    return CustomerInfo.create("Taro", "Yamada", "taro@example.jp", "090-1234-5678")


# ============================================================================
# REPOSITORY FIXTURES
# ============================================================================


@pytest.fixture
def product_repository(desk_product) -> InMemoryProductRepository:
    return InMemoryProductRepository([desk_product])


@pytest.fixture
def shipping_method_repository(standard_shipping, inactive_shipping) -> InMemoryShippingMethodRepository:
    return InMemoryShippingMethodRepository([standard_shipping, inactive_shipping])


@pytest.fixture
def payment_method_repository(credit_card_payment, cod_payment) -> InMemoryPaymentMethodRepository:
    return InMemoryPaymentMethodRepository([credit_card_payment, cod_payment])


@pytest.fixture
def order_repository() -> InMemoryOrderRepository:
    return InMemoryOrderRepository()


@pytest.fixture
def mock_sku_repository():
    """Create a mock SKU repository."""
    mock = AsyncMock()
    mock.find_summaries_by_ids = AsyncMock(return_value=[])
    mock.find_by_ids = AsyncMock(return_value=[])
    mock.find_variants_by_ids = AsyncMock(return_value=[])
    mock.save_all = AsyncMock()
    mock.reservation_lock = MagicMock(return_value=asyncio.Lock())
    return mock


@pytest.fixture
def mock_order_repository():
    """Create a mock order repository."""
    mock = AsyncMock()
    mock.save = AsyncMock()
    mock.get_by_id = AsyncMock(return_value=None)
    return mock


# ============================================================================
# SETTINGS FIXTURES
# ============================================================================


@pytest.fixture
def test_settings() -> Settings:
    """Settings isolated from the environment and any local .env file."""
    return Settings(
        _env_file=None,
        ENVIRONMENT="test",
        LOG_LEVEL="DEBUG",
        LOG_FORMAT="plain",
        LOW_STOCK_THRESHOLD=5,
        ORDER_NUMBER_MAX_ATTEMPTS=3,
    )
