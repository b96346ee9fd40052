# pizza_crm/routers/stats.py
from fastapi import APIRouter, Depends

from pizza_crm.repositories.courier_repo import CourierRepository
from pizza_crm.repositories.order_repo import OrderRepository
from pizza_crm.repositories.pizza_repo import PizzaRepository
from pizza_crm.schemas.stats import DashboardStats
from pizza_crm.services.stats_service import StatsService
from pizza_crm.store import EntityStore, get_store

router = APIRouter(prefix="/stats", tags=["Stats"])

service = StatsService(OrderRepository(), CourierRepository(), PizzaRepository())


@router.get("", response_model=DashboardStats)
def get_dashboard_stats(store: EntityStore = Depends(get_store)):
    """
    Counters for the dashboard: orders, revenue, couriers, menu.

    Revenue sums the totals of completed orders only.
    """
    return service.get_dashboard_stats(store)
