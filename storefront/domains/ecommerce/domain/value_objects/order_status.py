"""
Status Value Objects for E-commerce Domain

Represents the lifecycle states of orders and SKUs.
"""

from storefront.core.domain import StatusEnum


class OrderStatus(StatusEnum):
    """
    Order lifecycle states.

    Valid transitions:
    - PENDING -> PAID, CANCELLED
    - PAID -> PROCESSING, CANCELLED
    - PROCESSING -> SHIPPED, CANCELLED
    - SHIPPED -> DELIVERED
    - CANCELLED -> REFUNDED
    - DELIVERED, REFUNDED -> (terminal states)
    """

    PENDING = "pending"
    PAID = "paid"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"
    REFUNDED = "refunded"

    def can_transition_to(self, new_status: "OrderStatus") -> bool:
        """
        Check if transition to new status is valid.

        Args:
            new_status: Target status

        Returns:
            True if transition is allowed
        """
        return new_status in _VALID_TRANSITIONS[self]

    def get_valid_transitions(self) -> list["OrderStatus"]:
        """Get list of valid next statuses."""
        return list(_VALID_TRANSITIONS[self])

    def is_terminal(self) -> bool:
        """Check if this is a terminal (final) state."""
        return not _VALID_TRANSITIONS[self]

    def can_be_cancelled(self) -> bool:
        """Check if order can be cancelled in this state."""
        return self not in (OrderStatus.DELIVERED, OrderStatus.CANCELLED, OrderStatus.REFUNDED)

    def can_be_modified(self) -> bool:
        """Only pending orders accept changes."""
        return self == OrderStatus.PENDING


# Transition rules: status -> valid next statuses
_VALID_TRANSITIONS: dict[OrderStatus, tuple[OrderStatus, ...]] = {
    OrderStatus.PENDING: (OrderStatus.PAID, OrderStatus.CANCELLED),
    OrderStatus.PAID: (OrderStatus.PROCESSING, OrderStatus.CANCELLED),
    OrderStatus.PROCESSING: (OrderStatus.SHIPPED, OrderStatus.CANCELLED),
    OrderStatus.SHIPPED: (OrderStatus.DELIVERED,),
    OrderStatus.DELIVERED: (),  # Terminal state
    OrderStatus.CANCELLED: (OrderStatus.REFUNDED,),
    OrderStatus.REFUNDED: (),  # Terminal state
}


class SKUStatus(StatusEnum):
    """SKU availability status. Changes are unconditional setters."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    DISCONTINUED = "discontinued"

    def is_available_for_sale(self) -> bool:
        """Check if the SKU can be purchased, stock permitting."""
        return self == SKUStatus.ACTIVE
