"""
Catalog Entities for E-commerce Domain

Supporting catalog data attached to products: colors, categories, images
and tags.
"""

import re
from dataclasses import dataclass
from typing import ClassVar
from urllib.parse import urlparse

from storefront.core.domain import ValidationException, ValueObject

from ..value_objects.identifiers import CategoryId, ColorId, ProductId

HEX_CODE_PATTERN = re.compile(r"#[0-9A-Fa-f]{6}")
SLUG_PATTERN = re.compile(r"[a-zA-Z0-9-]+")


def _require_text(value: str, message: str, field: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationException(message, field=field)
    return value.strip()


@dataclass(frozen=True)
class ColorName(ValueObject):
    value: str

    MAX_LENGTH: ClassVar[int] = 50

    def _validate(self) -> None:
        value = _require_text(self.value, "Color name cannot be empty", "name")
        if len(value) > self.MAX_LENGTH:
            raise ValidationException(f"Color name cannot exceed {self.MAX_LENGTH} characters", field="name")
        object.__setattr__(self, "value", value)

    def __str__(self) -> str:
        return self.value


@dataclass(eq=False)
class Color:
    """Named swatch with a ``#RRGGBB`` hex code."""

    id: ColorId
    name: ColorName
    hex_code: str

    def __post_init__(self):
        self.validate_hex_code(self.hex_code)

    @classmethod
    def create(cls, color_id: ColorId, name: str, hex_code: str) -> "Color":
        return cls(id=color_id, name=ColorName(name), hex_code=hex_code)

    @staticmethod
    def validate_hex_code(hex_code: str) -> None:
        if not isinstance(hex_code, str) or not HEX_CODE_PATTERN.fullmatch(hex_code):
            raise ValidationException("Hex code must be # followed by 6 hexadecimal digits", field="hex_code")

    def update_name(self, name: str) -> None:
        self.name = ColorName(name)

    def update_hex_code(self, hex_code: str) -> None:
        self.validate_hex_code(hex_code)
        self.hex_code = hex_code

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Color) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return f"{self.name} ({self.hex_code})"


@dataclass(eq=False)
class Category:
    """
    Product category. Root categories have no parent.

    Slugs are stored lowercase.
    """

    id: CategoryId
    name: str
    slug: str
    parent_id: CategoryId | None = None
    display_order: int = 0

    @classmethod
    def create(
        cls,
        category_id: CategoryId,
        name: str,
        slug: str,
        parent_id: CategoryId | None = None,
        display_order: int = 0,
    ) -> "Category":
        return cls(
            id=category_id,
            name=_require_text(name, "Category name cannot be empty", "name"),
            slug=cls._normalize_slug(slug),
            parent_id=parent_id,
            display_order=display_order,
        )

    @staticmethod
    def _normalize_slug(slug: str) -> str:
        value = _require_text(slug, "Category slug cannot be empty", "slug")
        if not SLUG_PATTERN.fullmatch(value):
            raise ValidationException(
                "Category slug must contain only alphanumeric characters and hyphens", field="slug"
            )
        return value.lower()

    def is_root(self) -> bool:
        return self.parent_id is None

    def is_subcategory(self) -> bool:
        return self.parent_id is not None

    def update_name(self, name: str) -> None:
        self.name = _require_text(name, "Category name cannot be empty", "name")

    def update_slug(self, slug: str) -> None:
        self.slug = self._normalize_slug(slug)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Category) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


def _is_absolute_url(url: str) -> bool:
    parsed = urlparse(url)
    return bool(parsed.scheme and parsed.netloc)


@dataclass(eq=False)
class ProductImage:
    id: str
    product_id: ProductId
    url: str
    alt_text: str
    display_order: int = 0
    is_main: bool = False

    @classmethod
    def create(
        cls,
        image_id: str,
        product_id: ProductId,
        url: str,
        alt_text: str,
        display_order: int = 0,
        is_main: bool = False,
    ) -> "ProductImage":
        return cls(
            id=_require_text(image_id, "Product image ID cannot be empty", "id"),
            product_id=product_id,
            url=cls._clean_url(url),
            alt_text=_require_text(alt_text, "Product image alt text cannot be empty", "alt_text"),
            display_order=display_order,
            is_main=is_main,
        )

    @staticmethod
    def _clean_url(url: str) -> str:
        value = _require_text(url, "Product image URL cannot be empty", "url")
        if not _is_absolute_url(value):
            raise ValidationException("Product image URL is not valid", field="url")
        return value

    def update_url(self, url: str) -> None:
        self.url = self._clean_url(url)

    def update_alt_text(self, alt_text: str) -> None:
        self.alt_text = _require_text(alt_text, "Product image alt text cannot be empty", "alt_text")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ProductImage) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


@dataclass(eq=False)
class Tag:
    """Free-form product label with a URL slug."""

    id: str
    name: str
    slug: str

    MAX_NAME_LENGTH: ClassVar[int] = 50

    @classmethod
    def create(cls, tag_id: str, name: str, slug: str | None = None) -> "Tag":
        clean_name = cls._clean_name(name)
        final_slug = slug or cls.generate_slug(clean_name)
        cls._validate_slug(final_slug)
        return cls(
            id=_require_text(tag_id, "Tag ID cannot be empty", "id"),
            name=clean_name,
            slug=final_slug,
        )

    @classmethod
    def _clean_name(cls, name: str) -> str:
        value = _require_text(name, "Tag name cannot be empty", "name")
        if len(value) > cls.MAX_NAME_LENGTH:
            raise ValidationException(f"Tag name cannot exceed {cls.MAX_NAME_LENGTH} characters", field="name")
        return value

    @staticmethod
    def generate_slug(name: str) -> str:
        """Lowercase ASCII slug: spaces become hyphens, other symbols are dropped."""
        slug = re.sub(r"[^a-zA-Z0-9\s-]", "", name.strip().lower())
        slug = re.sub(r"\s+", "-", slug)
        slug = re.sub(r"-+", "-", slug)
        return slug.strip("-")

    @staticmethod
    def _validate_slug(slug: str) -> None:
        if not SLUG_PATTERN.fullmatch(slug) or slug.startswith("-") or slug.endswith("-"):
            raise ValidationException(
                "Tag slug must contain only alphanumeric characters and hyphens", field="slug"
            )

    def update_name(self, name: str) -> None:
        """Rename the tag and regenerate its slug."""
        clean_name = self._clean_name(name)
        slug = self.generate_slug(clean_name)
        self._validate_slug(slug)
        self.name = clean_name
        self.slug = slug

    def update_slug(self, slug: str) -> None:
        self._validate_slug(slug)
        self.slug = slug

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Tag) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return self.name
