"""
Unit tests for catalog entities: Color, Category, ProductImage, Tag and
checkout methods.
"""

import pytest

from storefront.core.domain import Money, ValidationException
from storefront.domains.ecommerce.domain.entities import (
    Category,
    Color,
    PaymentMethod,
    ProductImage,
    ShippingMethod,
    Tag,
)
from storefront.domains.ecommerce.domain.value_objects import (
    CategoryId,
    ColorId,
    PaymentMethodId,
    ShippingMethodId,
)


@pytest.mark.unit
@pytest.mark.domain
class TestColor:
    def test_create(self):
        color = Color.create(ColorId(1), " Natural Oak ", "#C8A165")

        assert str(color.name) == "Natural Oak"
        assert str(color) == "Natural Oak (#C8A165)"

    @pytest.mark.parametrize("hex_code", ["C8A165", "#C8A16", "#GGGGGG", "#c8a1651"])
    def test_invalid_hex_code(self, hex_code):
        with pytest.raises(ValidationException) as exc_info:
            Color.create(ColorId(1), "Oak", hex_code)

        assert exc_info.value.field == "hex_code"

    def test_name_length_limit(self):
        with pytest.raises(ValidationException):
            Color.create(ColorId(1), "x" * 51, "#FFFFFF")

    def test_updates(self):
        color = Color.create(ColorId(1), "Oak", "#FFFFFF")

        color.update_name("Walnut")
        color.update_hex_code("#5C4033")

        assert str(color.name) == "Walnut"
        assert color.hex_code == "#5C4033"
        with pytest.raises(ValidationException):
            color.update_hex_code("brown")

    def test_equality_by_id(self):
        assert Color.create(ColorId(1), "Oak", "#FFFFFF") == Color.create(ColorId(1), "Pine", "#000000")


@pytest.mark.unit
@pytest.mark.domain
class TestCategory:
    def test_slug_is_lowercased(self):
        category = Category.create(CategoryId.new(), "Desks", "Office-Desks")

        assert category.slug == "office-desks"
        assert category.is_root()

    def test_subcategory(self):
        parent = Category.create(CategoryId.new(), "Furniture", "furniture")

        child = Category.create(CategoryId.new(), "Desks", "desks", parent_id=parent.id)

        assert child.is_subcategory()
        assert not child.is_root()

    @pytest.mark.parametrize("slug", ["", "office desks", "desks!"])
    def test_invalid_slug(self, slug):
        with pytest.raises(ValidationException):
            Category.create(CategoryId.new(), "Desks", slug)

    def test_update(self):
        category = Category.create(CategoryId.new(), "Desks", "desks")

        category.update_name("Standing Desks")
        category.update_slug("Standing-Desks")

        assert category.name == "Standing Desks"
        assert category.slug == "standing-desks"


@pytest.mark.unit
@pytest.mark.domain
class TestProductImage:
    def test_create(self, product_id):
        image = ProductImage.create("img-1", product_id, "https://cdn.example.com/a.jpg", "Desk", is_main=True)

        assert image.is_main
        assert image.display_order == 0

    @pytest.mark.parametrize("url", ["", "desk.jpg", "/images/desk.jpg", "https://"])
    def test_invalid_url(self, product_id, url):
        with pytest.raises(ValidationException):
            ProductImage.create("img-1", product_id, url, "Desk")

    def test_updates(self, product_id):
        image = ProductImage.create("img-1", product_id, "https://cdn.example.com/a.jpg", "Desk")

        image.update_url("https://cdn.example.com/b.jpg")
        image.update_alt_text("Desk from the side")

        assert image.url == "https://cdn.example.com/b.jpg"
        assert image.alt_text == "Desk from the side"
        with pytest.raises(ValidationException):
            image.update_alt_text(" ")


@pytest.mark.unit
@pytest.mark.domain
class TestTag:
    def test_slug_generated_from_name(self):
        tag = Tag.create("tag-1", "  Solid Wood & Oak!  ")

        assert tag.name == "Solid Wood & Oak!"
        assert tag.slug == "solid-wood-oak"

    def test_explicit_slug(self):
        assert Tag.create("tag-1", "Solid Wood", slug="wood").slug == "wood"

    @pytest.mark.parametrize("slug", ["-wood", "wood-", "solid wood"])
    def test_invalid_slug(self, slug):
        with pytest.raises(ValidationException):
            Tag.create("tag-1", "Wood", slug=slug)

    def test_name_that_yields_no_slug(self):
        with pytest.raises(ValidationException):
            Tag.create("tag-1", "!!!")

    def test_update_name_regenerates_slug(self):
        tag = Tag.create("tag-1", "Oak")

        tag.update_name("Dark Walnut")

        assert tag.slug == "dark-walnut"


@pytest.mark.unit
@pytest.mark.domain
class TestCheckoutMethods:
    def test_shipping_method(self):
        method = ShippingMethod.create(ShippingMethodId("express"), " Express ", Money(800), "Next day")

        assert method.name == "Express"
        assert method.is_available()

    def test_inactive_payment_method(self):
        method = PaymentMethod.create(PaymentMethodId("cod"), "Cash on Delivery", Money(330), is_active=False)

        assert not method.is_available()

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationException):
            PaymentMethod.create(PaymentMethodId("cod"), "  ", Money(330))
