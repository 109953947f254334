"""
Base Entity Classes for Domain-Driven Design

Entities are domain objects with identity and lifecycle.
They maintain their identity regardless of their attributes.
"""

from abc import ABC
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Generic, TypeVar

# Type variable for entity ID (typed identifier value objects)
TId = TypeVar("TId")


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


@dataclass(eq=False, kw_only=True)
class Entity(ABC, Generic[TId]):
    """
    Base class for all domain entities.

    An entity is a domain object that has a distinct identity
    that runs through time and different states. Subclasses must be
    declared with ``eq=False`` so identity equality is kept.

    Type Parameters:
        TId: Type of entity identifier (ProductId, SKUId, ...)

    Example:
        ```python
        @dataclass(eq=False, kw_only=True)
        class SKU(Entity[SKUId]):
            name: str
            base_price: Money

            def set_sale_price(self, price: Money) -> None:
                ...
        ```
    """

    id: TId
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    def __eq__(self, other: object) -> bool:
        """Entities are equal if they are the same kind and have the same ID."""
        if not isinstance(other, Entity) or type(other) is not type(self):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on ID for use in sets and dicts."""
        return hash(self.id)

    def touch(self) -> None:
        """Update the updated_at timestamp."""
        self.updated_at = utc_now()


@dataclass(eq=False, kw_only=True)
class AggregateRoot(Entity[TId], Generic[TId]):
    """
    Base class for aggregate roots.

    An aggregate root is the entry point to an aggregate.
    It controls access to all members of the aggregate
    and ensures invariants are maintained.
    """

    version: int = field(default=0)

    def increment_version(self) -> None:
        """Increment version for optimistic concurrency."""
        self.version += 1
