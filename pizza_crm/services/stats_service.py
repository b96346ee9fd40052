# pizza_crm/services/stats_service.py
from pizza_crm.models.courier import COURIER_BUSY, COURIER_FREE
from pizza_crm.repositories.courier_repo import CourierRepository
from pizza_crm.repositories.order_repo import OrderRepository
from pizza_crm.repositories.pizza_repo import PizzaRepository
from pizza_crm.schemas.stats import DashboardStats
from pizza_crm.store import EntityStore


class StatsService:
    """
    Dashboard counters recomputed from the raw collections on each call.
    """

    def __init__(
        self,
        order_repo: OrderRepository,
        courier_repo: CourierRepository,
        pizza_repo: PizzaRepository,
    ):
        self.order_repo = order_repo
        self.courier_repo = courier_repo
        self.pizza_repo = pizza_repo

    def get_dashboard_stats(self, store: EntityStore) -> DashboardStats:
        # one consistent view of all three collections
        with store.reading():
            orders = [o.model_copy() for o in self.order_repo.list_all(store)]
            couriers = [c.model_copy() for c in self.courier_repo.list(store)]
            pizzas = [p.model_copy() for p in self.pizza_repo.list(store)]

        completed = [o for o in orders if o.status == "completed"]

        # Revenue only counts completed orders
        revenue = 0.0
        for o in completed:
            revenue += o.total

        return DashboardStats(
            total_orders=len(orders),
            active_orders=sum(1 for o in orders if o.is_active),
            completed_orders=len(completed),
            revenue=round(revenue, 2),
            total_couriers=len(couriers),
            free_couriers=sum(1 for c in couriers if c.status == COURIER_FREE),
            busy_couriers=sum(1 for c in couriers if c.status == COURIER_BUSY),
            total_pizzas=len(pizzas),
            available_pizzas=sum(1 for p in pizzas if p.available),
        )
