"""
Unit tests for the Product aggregate.
"""

import pytest

from storefront.core.domain import BusinessRuleViolationException, Money, ValidationException
from storefront.domains.ecommerce.domain.entities import Product, ProductImage, Tag, VariantAttributes
from storefront.domains.ecommerce.domain.value_objects import ColorId, ProductId


@pytest.fixture
def empty_product(product_id, category_id) -> Product:
    return Product.create(
        product_id=product_id,
        name="Writing Desk",
        description="Solid wood writing desk",
        category_id=category_id,
    )


@pytest.mark.unit
@pytest.mark.domain
class TestProductCreation:
    def test_create(self, empty_product):
        assert empty_product.name == "Writing Desk"
        assert empty_product.is_available
        assert not empty_product.is_best_seller
        assert empty_product.skus == {}
        assert empty_product.version == 0

    @pytest.mark.parametrize("name,description", [("", "desc"), ("Desk", "  ")])
    def test_blank_fields_rejected(self, product_id, category_id, name, description):
        with pytest.raises(ValidationException):
            Product.create(product_id, name, description, category_id)


@pytest.mark.unit
@pytest.mark.domain
class TestProductSkus:
    def test_add_and_find_sku(self, empty_product, make_sku):
        sku = make_sku()

        empty_product.add_sku(sku)

        assert empty_product.find_sku_by_id(sku.id) is sku
        assert not empty_product.has_variants()

    def test_duplicate_sku_code_rejected(self, empty_product, make_sku):
        empty_product.add_sku(make_sku(code="DESK-1"))

        with pytest.raises(BusinessRuleViolationException) as exc_info:
            empty_product.add_sku(make_sku(code="DESK-1"))

        assert exc_info.value.rule == "UNIQUE_SKU_CODE"

    def test_sku_from_other_product_rejected(self, category_id, make_sku):
        other = Product.create(ProductId.new(), "Chair", "Oak chair", category_id)

        with pytest.raises(BusinessRuleViolationException) as exc_info:
            other.add_sku(make_sku())

        assert exc_info.value.rule == "SKU_BELONGS_TO_PRODUCT"

    def test_remove_sku(self, desk_product, sku_a):
        removed = desk_product.remove_sku(sku_a.id)

        assert removed == sku_a
        assert desk_product.find_sku_by_id(sku_a.id) is None
        assert desk_product.remove_sku(sku_a.id) is None

    def test_get_skus_sorted_by_display_order(self, empty_product, make_sku):
        late = make_sku(code="B", display_order=5)
        early = make_sku(code="A", display_order=1)
        empty_product.add_sku(late)
        empty_product.add_sku(early)

        assert empty_product.get_skus() == [early, late]
        assert empty_product.has_variants()


@pytest.mark.unit
@pytest.mark.domain
class TestProductQueries:
    def test_price_range_uses_current_prices(self, desk_product, sku_a):
        sku_a.set_sale_price(Money(800))

        assert desk_product.price_range() == (Money(500), Money(800))

    def test_price_range_ignores_unpurchasable(self, desk_product, sku_b):
        sku_b.deactivate()

        assert desk_product.price_range() == (Money(1000), Money(1000))

    def test_price_range_none_without_purchasable(self, empty_product):
        assert empty_product.price_range() is None

    def test_total_available_stock(self, desk_product, sku_a):
        sku_a.reserve_stock(4)

        assert desk_product.total_available_stock() == 6 + 3

    def test_available_colors(self, desk_product, make_sku):
        desk_product.add_sku(
            make_sku(code="DESK-OAK-W150", variant_attributes=VariantAttributes(color_id=ColorId(1)))
        )

        assert desk_product.available_colors() == [ColorId(1), ColorId(2)]

    def test_low_stock_skus(self, desk_product, sku_b):
        assert desk_product.low_stock_skus(threshold=5) == [sku_b]

    def test_is_available_for_purchase(self, desk_product, sku_a, sku_b):
        assert desk_product.is_available_for_purchase()

        sku_a.deactivate()
        sku_b.deactivate()

        assert not desk_product.is_available_for_purchase()


@pytest.mark.unit
@pytest.mark.domain
class TestProductLifecycle:
    def test_publish_requires_sku(self, empty_product):
        with pytest.raises(BusinessRuleViolationException) as exc_info:
            empty_product.publish()

        assert exc_info.value.rule == "PUBLISH_REQUIRES_SKU"

    def test_publish_requires_purchasable_sku(self, empty_product, make_sku):
        sku = make_sku()
        sku.deactivate()
        empty_product.add_sku(sku)

        with pytest.raises(BusinessRuleViolationException) as exc_info:
            empty_product.publish()

        assert exc_info.value.rule == "PUBLISH_REQUIRES_PURCHASABLE_SKU"

    def test_discontinue_cascades_to_skus(self, desk_product):
        desk_product.discontinue()

        assert not desk_product.is_available
        assert all(not sku.is_purchasable() for sku in desk_product.skus.values())

        with pytest.raises(BusinessRuleViolationException):
            desk_product.publish()

    def test_best_seller_flag(self, desk_product):
        desk_product.mark_as_best_seller()
        assert desk_product.is_best_seller

        desk_product.unmark_as_best_seller()
        assert not desk_product.is_best_seller


@pytest.mark.unit
@pytest.mark.domain
class TestProductImagesAndTags:
    def test_main_image(self, desk_product):
        assert desk_product.main_image().url == "https://cdn.example.com/desk.jpg"

    def test_image_from_other_product_rejected(self, desk_product):
        image = ProductImage.create("img-9", ProductId.new(), "https://cdn.example.com/x.jpg", "Other")

        with pytest.raises(BusinessRuleViolationException) as exc_info:
            desk_product.add_image(image)

        assert exc_info.value.rule == "IMAGE_BELONGS_TO_PRODUCT"

    def test_add_tag_once(self, desk_product):
        tag = Tag.create("tag-1", "Solid Wood")

        desk_product.add_tag(tag)
        desk_product.add_tag(tag)

        assert desk_product.tags == [tag]
