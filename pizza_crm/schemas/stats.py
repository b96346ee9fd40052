# pizza_crm/schemas/stats.py
from pydantic import ConfigDict
from sqlmodel import SQLModel


class DashboardStats(SQLModel):
    """
    Read-side projection over the three collections.
    """
    model_config = ConfigDict(extra="forbid")

    total_orders: int
    active_orders: int
    completed_orders: int
    revenue: float

    total_couriers: int
    free_couriers: int
    busy_couriers: int

    total_pizzas: int
    available_pizzas: int
