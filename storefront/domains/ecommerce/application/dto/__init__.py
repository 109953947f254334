"""
Ecommerce Application DTOs

Data Transfer Objects for the Ecommerce domain.
"""

from dataclasses import dataclass, field
from datetime import datetime

from storefront.core.domain import Money
from storefront.domains.ecommerce.domain.value_objects import ColorId, ProductId, SKUId

# ==================== SKU DTOs ====================


@dataclass(frozen=True)
class SKUSummary:
    """Read model of a SKU used for cart calculation"""

    id: SKUId
    product_id: ProductId
    product_name: str
    name: str
    sku_code: str
    current_price: Money
    is_purchasable: bool
    available_stock: int
    color_id: ColorId | None = None
    dimensions: str | None = None
    material: str | None = None


@dataclass(frozen=True)
class VariantDTO:
    """Variant data shown when a customer compares SKUs"""

    sku_id: str
    price: int
    sale_price: int | None
    image_url: str | None
    material: str | None
    dimensions: str | None


# ==================== Cart DTOs ====================


@dataclass(frozen=True)
class CalculatedCartItem:
    """Priced cart line"""

    sku_id: str
    product_id: str
    product_name: str
    sku_name: str
    unit_price: int
    quantity: int
    subtotal: int


@dataclass(frozen=True)
class CalculateCartResult:
    """Cart totals in yen"""

    items: list[CalculatedCartItem] = field(default_factory=list)
    subtotal: int = 0
    shipping_fee: int = 0
    payment_fee: int = 0
    tax_amount: int = 0
    total: int = 0
    shipping_method_id: str = ""
    shipping_method_name: str = ""
    payment_method_id: str = ""
    payment_method_name: str = ""


# ==================== Order DTOs ====================


@dataclass(frozen=True)
class CreateOrderResult:
    """Summary of a newly created order"""

    order_id: str
    order_number: str
    total: int
    status: str
    created_at: datetime


__all__ = [
    "SKUSummary",
    "VariantDTO",
    "CalculatedCartItem",
    "CalculateCartResult",
    "CreateOrderResult",
]
