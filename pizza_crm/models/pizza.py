# pizza_crm/models/pizza.py
import uuid

from sqlmodel import SQLModel, Field


class Pizza(SQLModel):
    """
    Menu item.

    Orders copy `name` and `price` at creation time, so editing or deleting
    a pizza never changes historical orders.
    """

    id: str = Field(
        default_factory=lambda: str(uuid.uuid4()),
        description="Server-generated identifier",
    )

    name: str = Field(description="Display name on the menu")

    description: str = Field(default="")

    price: float = Field(
        ge=0,
        description="Unit price",
    )

    image: str = Field(
        default="",
        description="Image URI",
    )

    available: bool = Field(
        default=True,
        description="Whether the pizza can be put into new orders",
    )
