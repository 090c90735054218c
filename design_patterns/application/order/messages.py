"""Order messages."""
from typing import Optional

from design_patterns.application.base.messages import Command, Notification
from design_patterns.domain.core.exceptions import ValidationError


class CreateOrder(Command):
    """Request to create an order."""

    order_id: Optional[str] = None

    def validate_message(self) -> None:
        if self.order_id is not None and not self.order_id.strip():
            raise ValidationError("order_id must not be blank", details={"order_id": self.order_id})


class OrderCreated(Notification):
    """Broadcast after an order has been created."""

    order_id: Optional[str] = None
