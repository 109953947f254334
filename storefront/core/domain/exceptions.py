"""
Domain Exceptions for Domain-Driven Design

These exceptions represent business rule violations and domain-specific errors.
They should be caught and translated to appropriate responses by the outer layers.
"""

from typing import Any


class DomainException(Exception):
    """
    Base exception for all domain-related errors.

    Provides a standardized way to communicate business rule violations.
    """

    def __init__(self, message: str, code: str | None = None, details: dict[str, Any] | None = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "INSUFFICIENT_STOCK")
            details: Additional context about the error
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__.upper()
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(DomainException):
    """
    Raised when domain validation fails.

    Use for invalid entity states, value object creation failures, etc.
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
        code: str = "VALIDATION_ERROR",
    ):
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, code, details)
        self.field = field


class InvalidAmountException(ValidationException):
    """Raised when a money amount or factor is out of range."""

    def __init__(self, message: str, amount: Any = None):
        details = {} if amount is None else {"amount": str(amount)}
        super().__init__(message, field="amount", details=details, code="INVALID_AMOUNT")
        self.amount = amount


class MoneyOverflowException(DomainException):
    """Raised when money arithmetic exceeds the safe integer range."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(
            f"Money overflow during {operation}",
            "MONEY_OVERFLOW",
            {"operation": operation},
        )


class InvalidIdentifierException(ValidationException):
    """Raised when an identifier value is malformed."""

    def __init__(self, identifier_type: str, value: Any, reason: str):
        self.identifier_type = identifier_type
        self.value = value
        super().__init__(
            f"Invalid {identifier_type}: {reason}",
            field=identifier_type,
            details={"value": str(value)},
            code="INVALID_IDENTIFIER",
        )


class EntityNotFoundException(DomainException):
    """
    Raised when an entity is not found.
    """

    def __init__(
        self,
        entity_type: str,
        entity_id: Any,
        message: str | None = None,
    ):
        self.entity_type = entity_type
        self.entity_id = entity_id
        msg = message or f"{entity_type} with ID {entity_id} not found"
        super().__init__(
            msg,
            "ENTITY_NOT_FOUND",
            {"entity_type": entity_type, "entity_id": str(entity_id)},
        )


class BusinessRuleViolationException(DomainException):
    """
    Raised when a business rule is violated.

    Use for invariant violations, precondition failures, etc.
    """

    def __init__(
        self,
        rule: str,
        message: str | None = None,
        details: dict[str, Any] | None = None,
        code: str = "BUSINESS_RULE_VIOLATION",
    ):
        self.rule = rule
        msg = message or f"Business rule violated: {rule}"
        details = details or {}
        details["rule"] = rule
        super().__init__(msg, code, details)


class InsufficientStockException(BusinessRuleViolationException):
    """Raised when there's not enough stock for an operation."""

    def __init__(self, requested: int, available: int, sku_id: str | None = None):
        self.sku_id = sku_id
        self.requested = requested
        self.available = available
        subject = f"SKU {sku_id}" if sku_id else "reservation"
        super().__init__(
            "SUFFICIENT_STOCK",
            f"Insufficient stock for {subject}. Requested: {requested}, Available: {available}",
            {
                "sku_id": sku_id,
                "requested": requested,
                "available": available,
            },
            code="INSUFFICIENT_STOCK",
        )


class NotPurchasableException(BusinessRuleViolationException):
    """Raised when an inactive or sold-out SKU is asked to reserve stock."""

    def __init__(self, sku_id: str, status: str):
        self.sku_id = sku_id
        self.status = status
        super().__init__(
            "SKU_PURCHASABLE",
            f"SKU {sku_id} is not available for purchase",
            {"sku_id": sku_id, "status": status},
            code="NOT_PURCHASABLE",
        )


class InvalidStatusTransitionException(DomainException):
    """Raised when a status change is not allowed from the current state."""

    def __init__(self, current_status: str, requested_status: str, message: str | None = None):
        self.current_status = current_status
        self.requested_status = requested_status
        msg = message or f"Invalid status transition from {current_status} to {requested_status}"
        super().__init__(
            msg,
            "INVALID_STATUS_TRANSITION",
            {"current_status": current_status, "requested_status": requested_status},
        )
