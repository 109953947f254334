"""
Domain Layer - Core DDD building blocks

This module provides base classes for Domain-Driven Design:
- Entities: Objects with identity and lifecycle
- Value Objects: Immutable objects compared by value
- Exceptions: Domain-specific error handling
"""

from storefront.core.domain.entities import (
    AggregateRoot,
    Entity,
    utc_now,
)
from storefront.core.domain.exceptions import (
    BusinessRuleViolationException,
    DomainException,
    EntityNotFoundException,
    InsufficientStockException,
    InvalidAmountException,
    InvalidIdentifierException,
    InvalidStatusTransitionException,
    MoneyOverflowException,
    NotPurchasableException,
    ValidationException,
)
from storefront.core.domain.value_objects import (
    MAX_SAFE_INTEGER,
    Address,
    Email,
    Money,
    PhoneNumber,
    StatusEnum,
    ValueObject,
)

__all__ = [
    # Entities
    "Entity",
    "AggregateRoot",
    "utc_now",
    # Value Objects
    "ValueObject",
    "Money",
    "MAX_SAFE_INTEGER",
    "Email",
    "PhoneNumber",
    "Address",
    "StatusEnum",
    # Exceptions
    "DomainException",
    "ValidationException",
    "InvalidAmountException",
    "MoneyOverflowException",
    "InvalidIdentifierException",
    "EntityNotFoundException",
    "BusinessRuleViolationException",
    "InsufficientStockException",
    "NotPurchasableException",
    "InvalidStatusTransitionException",
]
