# pizza_crm/models/order.py
import uuid
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field

ORDER_STATUSES = (
    "pending",
    "preparing",
    "ready",
    "delivering",
    "completed",
    "cancelled",
)

# Orders in these states no longer hold a courier
TERMINAL_STATUSES = frozenset({"completed", "cancelled"})


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class OrderItem(SQLModel):
    """
    Line item embedded in an order.

    `pizza_name` and `price` are snapshots; `pizza_id` may dangle once the
    pizza is removed from the menu.
    """

    pizza_id: str
    pizza_name: str = Field(
        default="",
        description="Pizza name at time of order",
    )
    quantity: int = Field(
        gt=0,
        description="Quantity ordered (>=1)",
    )
    price: float = Field(
        default=0.0,
        description="Unit price at time of order",
    )


class Order(SQLModel):
    """
    Customer order.

    `total` is computed once at creation and is not recomputed later.
    `courier_id` / `courier_name` are kept after completion as history;
    the courier side of the binding is what gets released.
    """

    id: str = Field(
        default_factory=lambda: str(uuid.uuid4()),
        description="Server-generated identifier",
    )

    customer_name: str
    customer_phone: str
    customer_address: str

    items: list[OrderItem] = Field(default_factory=list)

    total: float = Field(
        default=0.0,
        description="Sum of price * quantity over items at creation",
    )

    # pending | preparing | ready | delivering | completed | cancelled
    status: str = Field(
        default="pending",
        description="Order status; any status may follow any other",
    )

    courier_id: str | None = None
    courier_name: str | None = None

    created_at: datetime = Field(
        default_factory=utcnow,
        description="Creation timestamp (UTC)",
    )
    updated_at: datetime = Field(
        default_factory=utcnow,
        description="Last mutation timestamp (UTC)",
    )

    @property
    def is_active(self) -> bool:
        return self.status not in TERMINAL_STATUSES

    def touch(self) -> None:
        self.updated_at = utcnow()
