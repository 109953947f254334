"""
Find Variants Use Case

Looks up display data for a set of SKUs.
"""

from dataclasses import dataclass, field

from storefront.core.shared import get_use_case_logger
from storefront.domains.ecommerce.application.dto import VariantDTO
from storefront.domains.ecommerce.application.ports import ISKURepository

from .validation import parse_sku_ids, unique_ids

logger = get_use_case_logger("find_variants")


@dataclass
class FindVariantsRequest:
    """Request for variant lookup."""

    sku_ids: list[str] = field(default_factory=list)


class FindVariantsUseCase:
    """
    Use Case: Find Variants

    Returns variant data for the requested SKUs. Unknown ids are skipped.
    """

    def __init__(self, sku_repository: ISKURepository):
        self.sku_repository = sku_repository

    async def execute(self, request: FindVariantsRequest) -> list[VariantDTO]:
        """
        Raises:
            ValidationException: If an id is not a valid UUID
        """
        if not request.sku_ids:
            return []

        sku_ids = parse_sku_ids(request.sku_ids)
        variants = await self.sku_repository.find_variants_by_ids(unique_ids(sku_ids))
        logger.debug("Variants found", requested=len(sku_ids), found=len(variants))
        return variants


__all__ = ["FindVariantsUseCase", "FindVariantsRequest"]
