# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from pizza_crm.main import app
from pizza_crm.models.courier import Courier
from pizza_crm.models.pizza import Pizza
from pizza_crm.repositories.courier_repo import CourierRepository
from pizza_crm.repositories.order_repo import OrderRepository
from pizza_crm.repositories.pizza_repo import PizzaRepository
from pizza_crm.services.courier_service import CourierService
from pizza_crm.services.order_service import OrderService
from pizza_crm.services.pizza_service import PizzaService
from pizza_crm.store import EntityStore, get_store


@pytest.fixture
def store() -> EntityStore:
    return EntityStore()


@pytest.fixture
def pizza_service() -> PizzaService:
    return PizzaService(PizzaRepository())


@pytest.fixture
def courier_service() -> CourierService:
    return CourierService(CourierRepository())


@pytest.fixture
def order_service() -> OrderService:
    return OrderService(OrderRepository(), CourierRepository(), PizzaRepository())


@pytest.fixture
def menu(store: EntityStore) -> dict[str, Pizza]:
    """Margherita (450) and Pepperoni (550)."""
    margherita = Pizza(id="p-margherita", name="Margherita", price=450)
    pepperoni = Pizza(id="p-pepperoni", name="Pepperoni", price=550)
    store.pizzas[margherita.id] = margherita
    store.pizzas[pepperoni.id] = pepperoni
    return {"margherita": margherita, "pepperoni": pepperoni}


@pytest.fixture
def couriers(store: EntityStore) -> dict[str, Courier]:
    x = Courier(id="c-x", name="Courier X", phone="+1 555 0100")
    y = Courier(id="c-y", name="Courier Y", phone="+1 555 0101")
    store.couriers[x.id] = x
    store.couriers[y.id] = y
    return {"x": x, "y": y}


@pytest.fixture
def client(store: EntityStore):
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def check_binding(store: EntityStore):
    """busy <=> current_order_id set, and the order points back."""

    def _check() -> None:
        holders: set[str] = set()
        for c in store.couriers.values():
            assert (c.status == "busy") == (c.current_order_id is not None)
            if c.current_order_id is not None:
                order = store.orders[c.current_order_id]
                assert order.courier_id == c.id
                assert c.current_order_id not in holders
                holders.add(c.current_order_id)

    return _check
