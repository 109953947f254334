"""
Product Repository Implementation

In-memory implementation of ISKURepository backed by Product aggregates.
"""

import asyncio
import copy
from collections.abc import Iterable

from storefront.core.domain import EntityNotFoundException
from storefront.core.shared import get_repository_logger
from storefront.domains.ecommerce.application.dto import SKUSummary, VariantDTO
from storefront.domains.ecommerce.application.ports import ISKURepository
from storefront.domains.ecommerce.domain.entities import SKU, Product
from storefront.domains.ecommerce.domain.entities.sku import DEFAULT_LOW_STOCK_THRESHOLD
from storefront.domains.ecommerce.domain.value_objects import ProductId, SKUId

logger = get_repository_logger("product")


class InMemoryProductRepository(ISKURepository):
    """
    In-memory implementation of the SKU/product repository.

    Stored aggregates are copied on the way in and out, so callers can only
    change stored state through ``save``/``save_all``.
    """

    def __init__(
        self,
        products: Iterable[Product] | None = None,
        low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
    ):
        """
        Initialize repository.

        Args:
            products: Products to seed the store with
            low_stock_threshold: Available quantity at or below which a SKU is low on stock
        """
        self._products: dict[str, Product] = {}
        self.low_stock_threshold = low_stock_threshold
        self._lock = asyncio.Lock()
        for product in products or []:
            self._products[product.id.value] = copy.deepcopy(product)

    async def save(self, product: Product) -> None:
        """Insert or replace a product with all its SKUs."""
        self._products[product.id.value] = copy.deepcopy(product)
        logger.debug("Product saved", product_id=product.id.value, sku_count=len(product.skus))

    async def get_by_id(self, product_id: ProductId) -> Product | None:
        product = self._products.get(product_id.value)
        return copy.deepcopy(product) if product else None

    async def find_summaries_by_ids(self, sku_ids: list[SKUId]) -> list[SKUSummary]:
        summaries = []
        for product, sku in self._locate(sku_ids):
            summaries.append(
                SKUSummary(
                    id=sku.id,
                    product_id=product.id,
                    product_name=product.name,
                    name=sku.name,
                    sku_code=sku.code,
                    current_price=sku.current_price(),
                    is_purchasable=sku.is_purchasable(),
                    available_stock=sku.available_quantity(),
                    color_id=sku.color_id,
                    dimensions=sku.dimensions,
                    material=sku.material,
                )
            )
        return summaries

    async def find_by_ids(self, sku_ids: list[SKUId]) -> list[SKU]:
        return [copy.deepcopy(sku) for _, sku in self._locate(sku_ids)]

    async def find_variants_by_ids(self, sku_ids: list[SKUId]) -> list[VariantDTO]:
        variants = []
        for product, sku in self._locate(sku_ids):
            image = product.main_image() or (product.images[0] if product.images else None)
            variants.append(
                VariantDTO(
                    sku_id=sku.id.value,
                    price=sku.base_price.yen,
                    sale_price=sku.sale_price.yen if sku.sale_price else None,
                    image_url=image.url if image else None,
                    material=sku.material,
                    dimensions=sku.dimensions,
                )
            )
        return variants

    async def save_all(self, skus: list[SKU]) -> None:
        """
        Replace stored SKUs with the given versions.

        Raises:
            EntityNotFoundException: If a SKU's product is not stored
        """
        for sku in skus:
            if sku.product_id.value not in self._products:
                raise EntityNotFoundException("Product", sku.product_id.value)

        for sku in skus:
            self._products[sku.product_id.value].skus[sku.id.value] = copy.deepcopy(sku)
        logger.debug("SKUs saved", count=len(skus))

    async def find_low_stock_skus(self) -> list[SKU]:
        """SKUs whose available quantity is at or below the threshold."""
        low_stock = []
        for product in self._products.values():
            low_stock.extend(copy.deepcopy(sku) for sku in product.low_stock_skus(self.low_stock_threshold))
        return low_stock

    def reservation_lock(self) -> asyncio.Lock:
        return self._lock

    def _locate(self, sku_ids: list[SKUId]) -> list[tuple[Product, SKU]]:
        """Find each SKU and its product; unknown ids are skipped."""
        wanted = {sku_id.value for sku_id in sku_ids}
        found = []
        for product in self._products.values():
            for sku_key, sku in product.skus.items():
                if sku_key in wanted:
                    found.append((product, sku))
        return found
