# pizza_crm/schemas/courier.py
from typing import Literal

from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel, Field

CourierStatus = Literal["free", "busy"]


class CourierCreate(SQLModel):
    """
    Payload for adding a courier.

    New couriers always start as "free" with no current order.
    """

    model_config = ConfigDict(extra="forbid")

    name: str = Field(max_length=100)
    phone: str = Field(max_length=32)

    @field_validator("name", "phone")
    @classmethod
    def not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("field cannot be empty")
        return v


class CourierUpdate(SQLModel):
    """
    Partial update payload for couriers.

    `status` is accepted but may only repeat the current value; busy/free
    follows order assignment.
    """

    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(default=None, max_length=100)
    phone: str | None = Field(default=None, max_length=32)
    status: CourierStatus | None = None

    @field_validator("name", "phone")
    @classmethod
    def not_empty(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("field cannot be empty")
        return v


class CourierRead(SQLModel):
    """Courier representation for clients."""

    id: str
    name: str
    phone: str
    status: CourierStatus
    current_order_id: str | None = None
