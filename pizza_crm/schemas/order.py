# pizza_crm/schemas/order.py
from datetime import datetime
from typing import Literal

from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel, Field

OrderStatus = Literal[
    "pending",
    "preparing",
    "ready",
    "delivering",
    "completed",
    "cancelled",
]

# active = not completed/cancelled, history = completed/cancelled
OrderScope = Literal["active", "history"]


class OrderLineCreate(SQLModel):
    """
    One requested line: which pizza and how many.
    """

    model_config = ConfigDict(extra="forbid")

    pizza_id: str
    quantity: int = Field(gt=0)


class OrderCreate(SQLModel):
    """
    Payload for creating an order.

    Backend derives:
      - pizza_name / price snapshots per line
      - total
      - status = 'pending', no courier
      - created_at / updated_at
    """

    model_config = ConfigDict(extra="forbid")

    customer_name: str
    customer_phone: str
    customer_address: str
    items: list[OrderLineCreate] = Field(min_length=1)

    @field_validator("customer_name", "customer_phone", "customer_address")
    @classmethod
    def not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("field cannot be empty")
        return v


class OrderUpdate(SQLModel):
    """
    Generic partial update for an order.

    Items, total and courier fields are not editable here; use the
    courier assignment endpoint to change the courier.
    """

    model_config = ConfigDict(extra="forbid")

    customer_name: str | None = None
    customer_phone: str | None = None
    customer_address: str | None = None
    status: OrderStatus | None = None

    @field_validator("customer_name", "customer_phone", "customer_address")
    @classmethod
    def not_empty(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("field cannot be empty")
        return v


class OrderStatusUpdate(SQLModel):
    """
    Payload to change order status. Any status may follow any other.
    """

    model_config = ConfigDict(extra="forbid")

    status: OrderStatus


class CourierAssign(SQLModel):
    """
    Payload for assigning (or reassigning) a courier to an order.
    """

    model_config = ConfigDict(extra="forbid")

    courier_id: str


class OrderItemRead(SQLModel):
    """
    Representation of a single order line item.
    """

    pizza_id: str
    pizza_name: str
    quantity: int
    price: float
    line_total: float


class OrderRead(SQLModel):
    """
    Full order view including items.
    """

    id: str
    customer_name: str
    customer_phone: str
    customer_address: str
    items: list[OrderItemRead]
    total: float
    status: OrderStatus
    courier_id: str | None = None
    courier_name: str | None = None
    created_at: datetime
    updated_at: datetime
