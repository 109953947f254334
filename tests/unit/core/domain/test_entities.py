"""
Unit tests for the Entity base class and StatusEnum helpers.
"""

import pytest

from storefront.core.domain import ValidationException
from storefront.domains.ecommerce.domain.value_objects import OrderStatus, SKUId, SKUStatus


@pytest.mark.unit
@pytest.mark.domain
class TestEntityIdentity:
    def test_same_id_means_equal(self, make_sku):
        sku_id = SKUId.new()
        first = make_sku(sku_id=sku_id.value, name="First")
        second = make_sku(sku_id=sku_id.value, name="Second")

        assert first == second
        assert hash(first) == hash(second)
        assert len({first, second}) == 1

    def test_different_id_means_different(self, make_sku):
        assert make_sku() != make_sku()

    def test_touch_moves_updated_at(self, make_sku):
        sku = make_sku()
        before = sku.updated_at

        sku.touch()

        assert sku.updated_at >= before
        assert sku.created_at <= sku.updated_at


@pytest.mark.unit
@pytest.mark.domain
class TestStatusEnum:
    def test_values(self):
        assert SKUStatus.values() == ["active", "inactive", "discontinued"]

    def test_from_string_is_case_insensitive(self):
        assert OrderStatus.from_string("SHIPPED") is OrderStatus.SHIPPED

    def test_from_string_unknown(self):
        with pytest.raises(ValidationException, match="Invalid OrderStatus"):
            OrderStatus.from_string("lost")

    def test_str_is_value(self):
        assert str(OrderStatus.PENDING) == "pending"
