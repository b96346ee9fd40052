# pizza_crm/schemas/pizza.py
from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel, Field


class PizzaCreate(SQLModel):
    """
    Payload for adding a pizza to the menu.
    """

    model_config = ConfigDict(extra="forbid")

    name: str = Field(max_length=100)
    description: str = ""
    price: float = Field(ge=0)
    image: str = ""
    available: bool = True

    @field_validator("name")
    @classmethod
    def not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty")
        return v


class PizzaUpdate(SQLModel):
    """
    Partial update payload for pizzas.
    All fields are optional.
    """

    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(default=None, max_length=100)
    description: str | None = None
    price: float | None = Field(default=None, ge=0)
    image: str | None = None
    available: bool | None = None

    @field_validator("name")
    @classmethod
    def not_empty(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty")
        return v


class PizzaRead(SQLModel):
    """Menu item representation for clients."""

    id: str
    name: str
    description: str
    price: float
    image: str
    available: bool
