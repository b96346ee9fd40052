# pizza_crm/store.py
import threading
from contextlib import contextmanager
from typing import Iterator

from sqlmodel import SQLModel

from pizza_crm.models.courier import Courier
from pizza_crm.models.order import Order
from pizza_crm.models.pizza import Pizza

# ---------------------------------------------------------
# In-memory entity store
#
# - one dict per collection, keyed by id (insertion ordered)
# - state is transient and resets on process restart
# - one re-entrant lock for the whole store, held by writers
#   AND readers: the coordinator mutates an order and a courier
#   together, and sync routes run in a threadpool, so a reader
#   must never see one side of that pair without the other
# ---------------------------------------------------------


class EntityStore:
    """
    Sole source of truth for pizzas, couriers and orders.

    Writers go through `transaction()`:

        with store.transaction():
            order.courier_id = courier.id
            courier.bind(order.id)

    Readers go through `reading()`, which waits for any running
    transaction to finish.

    If a transaction block raises, every record is put back to the
    values it had when that block started. Records are restored in
    place, so objects fetched by an enclosing transaction stay
    attached to the store.
    """

    def __init__(self) -> None:
        self.pizzas: dict[str, Pizza] = {}
        self.couriers: dict[str, Courier] = {}
        self.orders: dict[str, Order] = {}
        self._lock = threading.RLock()

    @contextmanager
    def reading(self) -> Iterator["EntityStore"]:
        with self._lock:
            yield self

    @contextmanager
    def transaction(self) -> Iterator["EntityStore"]:
        with self._lock:
            snapshot = [
                _snapshot(self.pizzas),
                _snapshot(self.couriers),
                _snapshot(self.orders),
            ]
            try:
                yield self
            except Exception:
                _restore(self.pizzas, snapshot[0])
                _restore(self.couriers, snapshot[1])
                _restore(self.orders, snapshot[2])
                raise

    def clear(self) -> None:
        with self._lock:
            self.pizzas.clear()
            self.couriers.clear()
            self.orders.clear()


def _snapshot(collection: dict) -> list[tuple[str, SQLModel, SQLModel]]:
    return [(key, obj, obj.model_copy(deep=True)) for key, obj in collection.items()]


def _restore(collection: dict, snapshot: list[tuple[str, SQLModel, SQLModel]]) -> None:
    collection.clear()
    for key, obj, saved in snapshot:
        for field in type(saved).model_fields:
            setattr(obj, field, getattr(saved, field))
        collection[key] = obj


store = EntityStore()


def get_store() -> EntityStore:
    """
    FastAPI dependency handing routes the process-wide store.

    Tests swap it out through `app.dependency_overrides[get_store]`
    to run each case against an empty store.
    """
    return store
