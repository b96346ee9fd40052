# pizza_crm/models/courier.py
import uuid

from sqlmodel import SQLModel, Field

COURIER_FREE = "free"
COURIER_BUSY = "busy"


class Courier(SQLModel):
    """
    Delivery courier.

    Invariant:
      - status == "busy"  <=> current_order_id is set
      - status == "free"  <=> current_order_id is None

    Only the order coordinator writes `status` and `current_order_id`.
    """

    id: str = Field(
        default_factory=lambda: str(uuid.uuid4()),
        description="Server-generated identifier",
    )

    name: str
    phone: str

    # free | busy
    status: str = Field(
        default=COURIER_FREE,
        description="Availability, derived from the current order binding",
    )

    current_order_id: str | None = Field(
        default=None,
        description="Back-reference to the order this courier is delivering",
    )

    def bind(self, order_id: str) -> None:
        self.status = COURIER_BUSY
        self.current_order_id = order_id

    def release(self) -> None:
        self.status = COURIER_FREE
        self.current_order_id = None
