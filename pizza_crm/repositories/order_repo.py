# pizza_crm/repositories/order_repo.py
from pizza_crm.models.order import Order, TERMINAL_STATUSES
from pizza_crm.store import EntityStore


class OrderRepository:
    """
    Data access layer for orders.

    NOTE:
      - No locking here; order writes also touch couriers, so the
        service owns the transaction (`store.transaction()`).
    """

    def get_by_id(self, store: EntityStore, order_id: str) -> Order | None:
        return store.orders.get(order_id)

    def list_all(
        self,
        store: EntityStore,
        skip: int = 0,
        limit: int | None = None,
    ) -> list[Order]:
        orders = list(store.orders.values())
        end = None if limit is None else skip + limit
        return orders[skip:end]

    def list_active(
        self,
        store: EntityStore,
        skip: int = 0,
        limit: int | None = None,
    ) -> list[Order]:
        orders = [o for o in store.orders.values() if o.status not in TERMINAL_STATUSES]
        end = None if limit is None else skip + limit
        return orders[skip:end]

    def list_history(
        self,
        store: EntityStore,
        skip: int = 0,
        limit: int | None = None,
    ) -> list[Order]:
        orders = [o for o in store.orders.values() if o.status in TERMINAL_STATUSES]
        end = None if limit is None else skip + limit
        return orders[skip:end]

    def create(self, store: EntityStore, order: Order) -> Order:
        store.orders[order.id] = order
        return order

    def update(self, store: EntityStore, order: Order) -> Order:
        store.orders[order.id] = order
        return order

    def delete(self, store: EntityStore, order: Order) -> None:
        store.orders.pop(order.id, None)
