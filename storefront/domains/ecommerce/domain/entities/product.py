"""
Product Entity for E-commerce Domain

Represents a product in the catalog together with the SKUs it owns.
"""

from dataclasses import dataclass, field

from storefront.core.domain import (
    AggregateRoot,
    BusinessRuleViolationException,
    Money,
    ValidationException,
)

from ..value_objects.identifiers import CategoryId, ColorId, ProductId, SKUId
from .catalog import ProductImage, Tag
from .sku import DEFAULT_LOW_STOCK_THRESHOLD, SKU


@dataclass(eq=False, kw_only=True)
class Product(AggregateRoot[ProductId]):
    """
    Product aggregate root for e-commerce domain.

    Contains business logic for:
    - SKU (variant) management
    - Availability and price range across variants
    - Product lifecycle (publish/discontinue)

    Example:
        ```python
        product = Product.create(
            product_id=ProductId.new(),
            name="Oak Desk",
            description="Solid oak writing desk",
            category_id=desks.id,
        )
        product.add_sku(sku)
        product.publish()
        low, high = product.price_range()
        ```
    """

    name: str
    description: str
    category_id: CategoryId
    is_best_seller: bool = False
    is_quick_ship: bool = False
    is_available: bool = True
    skus: dict[str, SKU] = field(default_factory=dict)
    images: list[ProductImage] = field(default_factory=list)
    tags: list[Tag] = field(default_factory=list)

    @classmethod
    def create(
        cls,
        product_id: ProductId,
        name: str,
        description: str,
        category_id: CategoryId,
    ) -> "Product":
        if not isinstance(name, str) or not name.strip():
            raise ValidationException("Product name cannot be empty", field="name")
        if not isinstance(description, str) or not description.strip():
            raise ValidationException("Product description cannot be empty", field="description")
        return cls(
            id=product_id,
            name=name.strip(),
            description=description.strip(),
            category_id=category_id,
        )

    # SKU Management

    def add_sku(self, sku: SKU) -> None:
        """
        Add a SKU to the product.

        Raises:
            BusinessRuleViolationException: If the code is taken or the SKU belongs elsewhere
        """
        if any(existing.code == sku.code for existing in self.skus.values()):
            raise BusinessRuleViolationException(
                "UNIQUE_SKU_CODE",
                f"SKU with code {sku.code} already exists",
                {"sku_code": sku.code},
            )
        if sku.product_id != self.id:
            raise BusinessRuleViolationException(
                "SKU_BELONGS_TO_PRODUCT",
                "SKU does not belong to this product",
                {"sku_id": str(sku.id), "product_id": str(self.id)},
            )
        self.skus[sku.id.value] = sku
        self.touch()

    def remove_sku(self, sku_id: SKUId) -> SKU | None:
        sku = self.skus.pop(sku_id.value, None)
        if sku is not None:
            self.touch()
        return sku

    def find_sku_by_id(self, sku_id: SKUId) -> SKU | None:
        return self.skus.get(sku_id.value)

    def get_skus(self) -> list[SKU]:
        return sorted(self.skus.values(), key=lambda sku: sku.display_order)

    def has_variants(self) -> bool:
        return len(self.skus) > 1

    def _purchasable_skus(self) -> list[SKU]:
        return [sku for sku in self.skus.values() if sku.is_purchasable()]

    # Catalog Queries

    def is_available_for_purchase(self) -> bool:
        return self.is_available and bool(self._purchasable_skus())

    def total_available_stock(self) -> int:
        return sum(sku.available_quantity() for sku in self._purchasable_skus())

    def price_range(self) -> tuple[Money, Money] | None:
        """Lowest and highest current price over purchasable SKUs."""
        prices = [sku.current_price() for sku in self._purchasable_skus()]
        if not prices:
            return None
        return min(prices), max(prices)

    def available_colors(self) -> list[ColorId]:
        colors: list[ColorId] = []
        for sku in self._purchasable_skus():
            if sku.color_id is not None and sku.color_id not in colors:
                colors.append(sku.color_id)
        return colors

    def low_stock_skus(self, threshold: int = DEFAULT_LOW_STOCK_THRESHOLD) -> list[SKU]:
        return [sku for sku in self.skus.values() if sku.is_low_stock(threshold)]

    # Images and Tags

    def add_image(self, image: ProductImage) -> None:
        if image.product_id != self.id:
            raise BusinessRuleViolationException(
                "IMAGE_BELONGS_TO_PRODUCT",
                "Image does not belong to this product",
                {"image_id": image.id, "product_id": str(self.id)},
            )
        self.images.append(image)
        self.touch()

    def main_image(self) -> ProductImage | None:
        for image in self.images:
            if image.is_main:
                return image
        return None

    def add_tag(self, tag: Tag) -> None:
        """Attach a tag; attaching the same tag twice is a no-op."""
        if tag in self.tags:
            return
        self.tags.append(tag)
        self.touch()

    # Lifecycle

    def publish(self) -> None:
        """
        Make the product available.

        Raises:
            BusinessRuleViolationException: If it has no SKUs or none is purchasable
        """
        if not self.skus:
            raise BusinessRuleViolationException("PUBLISH_REQUIRES_SKU", "Cannot publish product without SKUs")
        if not self._purchasable_skus():
            raise BusinessRuleViolationException(
                "PUBLISH_REQUIRES_PURCHASABLE_SKU",
                "Cannot publish product without purchasable SKUs",
            )
        self.is_available = True
        self.touch()

    def discontinue(self) -> None:
        """Withdraw the product and discontinue every SKU it owns."""
        self.is_available = False
        for sku in self.skus.values():
            sku.discontinue()
        self.touch()

    def mark_as_best_seller(self) -> None:
        self.is_best_seller = True
        self.touch()

    def unmark_as_best_seller(self) -> None:
        self.is_best_seller = False
        self.touch()
