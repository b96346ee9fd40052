# tests/test_order_service.py
import pytest
from fastapi import HTTPException

from pizza_crm.repositories.courier_repo import CourierRepository
from pizza_crm.repositories.order_repo import OrderRepository
from pizza_crm.repositories.pizza_repo import PizzaRepository
from pizza_crm.schemas.order import (
    CourierAssign,
    OrderCreate,
    OrderLineCreate,
    OrderStatusUpdate,
    OrderUpdate,
)
from pizza_crm.schemas.pizza import PizzaUpdate
from pizza_crm.services.order_service import OrderService


def _create(order_service, store, menu, lines=None):
    lines = lines or [
        OrderLineCreate(pizza_id=menu["margherita"].id, quantity=2),
        OrderLineCreate(pizza_id=menu["pepperoni"].id, quantity=1),
    ]
    payload = OrderCreate(
        customer_name="Anna",
        customer_phone="+1 555 0199",
        customer_address="10 Main St",
        items=lines,
    )
    return order_service.create_order(store, payload)


def _set_status(order_service, store, order_id, new_status):
    return order_service.update_status(store, order_id, OrderStatusUpdate(status=new_status))


def _assign(order_service, store, order_id, courier_id):
    return order_service.assign_courier(store, order_id, CourierAssign(courier_id=courier_id))


# -------- create --------


def test_create_order_snapshots_and_totals(order_service, store, menu):
    order = _create(order_service, store, menu)

    assert order.total == 1450
    assert order.status == "pending"
    assert order.courier_id is None
    assert order.courier_name is None
    assert order.created_at == order.updated_at
    assert [(i.pizza_name, i.price, i.quantity) for i in order.items] == [
        ("Margherita", 450, 2),
        ("Pepperoni", 550, 1),
    ]
    assert [i.line_total for i in order.items] == [900, 550]
    assert order.id in store.orders


def test_create_order_with_missing_pizza_falls_back(order_service, store, menu):
    order = _create(
        order_service,
        store,
        menu,
        lines=[
            OrderLineCreate(pizza_id="gone", quantity=3),
            OrderLineCreate(pizza_id=menu["margherita"].id, quantity=1),
        ],
    )

    assert order.items[0].pizza_name == ""
    assert order.items[0].price == 0
    assert order.total == 450


def test_snapshot_survives_menu_changes(order_service, pizza_service, store, menu):
    order = _create(order_service, store, menu)
    pizza_service.update_pizza(store, menu["margherita"].id, PizzaUpdate(price=999, name="New"))
    pizza_service.delete_pizza(store, menu["pepperoni"].id)

    stored = order_service.get_order(store, order.id)
    assert stored.total == 1450
    assert stored.items[0].pizza_name == "Margherita"
    assert stored.items[0].price == 450
    assert stored.items[1].pizza_id == menu["pepperoni"].id


def test_order_ids_are_unique(order_service, store, menu):
    ids = {_create(order_service, store, menu).id for _ in range(5)}
    assert len(ids) == 5


# -------- assign --------


def test_assign_free_courier(order_service, store, menu, couriers, check_binding):
    order = _create(order_service, store, menu)

    result = _assign(order_service, store, order.id, "c-x")

    assert result.status == "delivering"
    assert result.courier_id == "c-x"
    assert result.courier_name == "Courier X"
    assert result.updated_at >= result.created_at
    x = store.couriers["c-x"]
    assert x.status == "busy"
    assert x.current_order_id == order.id
    check_binding()


def test_reassign_releases_previous_courier(order_service, store, menu, couriers, check_binding):
    order = _create(order_service, store, menu)
    _assign(order_service, store, order.id, "c-x")

    result = _assign(order_service, store, order.id, "c-y")

    assert result.courier_id == "c-y"
    assert result.courier_name == "Courier Y"
    assert store.couriers["c-x"].status == "free"
    assert store.couriers["c-x"].current_order_id is None
    assert store.couriers["c-y"].current_order_id == order.id
    check_binding()


def test_reassign_same_courier_is_stable(order_service, store, menu, couriers, check_binding):
    order = _create(order_service, store, menu)
    _assign(order_service, store, order.id, "c-x")
    _assign(order_service, store, order.id, "c-x")

    assert store.couriers["c-x"].current_order_id == order.id
    check_binding()


def test_courier_moved_to_second_order_is_not_double_booked(
    order_service, store, menu, couriers, check_binding
):
    order1 = _create(order_service, store, menu)
    order2 = _create(order_service, store, menu)

    _assign(order_service, store, order1.id, "c-x")
    _assign(order_service, store, order2.id, "c-x")

    x = store.couriers["c-x"]
    assert x.current_order_id == order2.id
    # order1 keeps the reference as history, but nobody holds it
    assert store.orders[order1.id].courier_id == "c-x"
    assert all(c.current_order_id != order1.id for c in store.couriers.values())
    check_binding()

    # finishing the old order must not free the courier from the new one
    _set_status(order_service, store, order1.id, "completed")
    assert x.status == "busy"
    assert x.current_order_id == order2.id
    check_binding()


def test_strict_assignment_refuses_busy_courier(store, menu, couriers, check_binding):
    service = OrderService(
        OrderRepository(),
        CourierRepository(),
        PizzaRepository(),
        strict_assignment=True,
    )
    order1 = _create(service, store, menu)
    order2 = _create(service, store, menu)
    _assign(service, store, order1.id, "c-x")

    with pytest.raises(HTTPException) as exc:
        _assign(service, store, order2.id, "c-x")

    assert exc.value.status_code == 409
    assert store.couriers["c-x"].current_order_id == order1.id
    assert store.orders[order2.id].courier_id is None
    assert store.orders[order2.id].status == "pending"
    check_binding()


@pytest.mark.parametrize("order_id, courier_id", [("missing", "c-x"), (None, "missing")])
def test_assign_unknown_ids_raise_not_found(order_service, store, menu, couriers, order_id, courier_id):
    order = _create(order_service, store, menu)

    with pytest.raises(HTTPException) as exc:
        _assign(order_service, store, order_id or order.id, courier_id)

    assert exc.value.status_code == 404
    assert store.orders[order.id].status == "pending"
    assert store.couriers["c-x"].status == "free"


# -------- status --------


def test_completing_order_releases_courier(order_service, store, menu, couriers, check_binding):
    order = _create(order_service, store, menu)
    _assign(order_service, store, order.id, "c-x")

    result = _set_status(order_service, store, order.id, "completed")

    assert result.status == "completed"
    assert result.courier_id == "c-x"
    assert result.courier_name == "Courier X"
    assert store.couriers["c-x"].status == "free"
    assert store.couriers["c-x"].current_order_id is None
    check_binding()


def test_cancelling_order_releases_courier(order_service, store, menu, couriers, check_binding):
    order = _create(order_service, store, menu)
    _assign(order_service, store, order.id, "c-x")

    _set_status(order_service, store, order.id, "cancelled")

    assert store.couriers["c-x"].status == "free"
    check_binding()


def test_release_is_idempotent(order_service, store, menu, couriers):
    order = _create(order_service, store, menu)
    _assign(order_service, store, order.id, "c-x")

    _set_status(order_service, store, order.id, "completed")
    first = store.couriers["c-x"].model_dump()
    _set_status(order_service, store, order.id, "completed")

    assert store.couriers["c-x"].model_dump() == first


def test_any_status_transition_is_allowed(order_service, store, menu):
    order = _create(order_service, store, menu)

    for new_status in ["ready", "pending", "delivering", "preparing", "cancelled", "ready"]:
        assert _set_status(order_service, store, order.id, new_status).status == new_status


def test_status_change_refreshes_updated_at(order_service, store, menu):
    order = _create(order_service, store, menu)

    result = _set_status(order_service, store, order.id, "preparing")

    assert result.updated_at >= order.updated_at
    assert result.created_at == order.created_at


def test_reopening_order_drops_stale_courier(order_service, store, menu, couriers, check_binding):
    order = _create(order_service, store, menu)
    _assign(order_service, store, order.id, "c-x")
    _set_status(order_service, store, order.id, "completed")

    result = _set_status(order_service, store, order.id, "pending")

    assert result.courier_id is None
    assert result.courier_name is None
    assert store.couriers["c-x"].status == "free"
    check_binding()


def test_update_order_customer_fields_keeps_total(order_service, store, menu):
    order = _create(order_service, store, menu)

    result = order_service.update_order(
        store,
        order.id,
        OrderUpdate(customer_address="22 Side St", status="ready"),
    )

    assert result.customer_address == "22 Side St"
    assert result.customer_name == "Anna"
    assert result.status == "ready"
    assert result.total == 1450


def test_update_unknown_order_raises_not_found(order_service, store):
    with pytest.raises(HTTPException) as exc:
        _set_status(order_service, store, "missing", "completed")
    assert exc.value.status_code == 404


# -------- delete --------


def test_delete_order_releases_courier(order_service, store, menu, couriers, check_binding):
    order = _create(order_service, store, menu)
    _assign(order_service, store, order.id, "c-x")

    order_service.delete_order(store, order.id)

    assert order.id not in store.orders
    assert store.couriers["c-x"].status == "free"
    assert store.couriers["c-x"].current_order_id is None
    check_binding()


def test_delete_old_order_keeps_courier_on_new_one(order_service, store, menu, couriers, check_binding):
    order1 = _create(order_service, store, menu)
    order2 = _create(order_service, store, menu)
    _assign(order_service, store, order1.id, "c-x")
    _assign(order_service, store, order2.id, "c-x")

    order_service.delete_order(store, order1.id)

    assert store.couriers["c-x"].current_order_id == order2.id
    check_binding()


def test_delete_unknown_order_raises_not_found(order_service, store):
    with pytest.raises(HTTPException) as exc:
        order_service.delete_order(store, "missing")
    assert exc.value.status_code == 404


# -------- reads --------


def test_list_orders_by_scope(order_service, store, menu):
    active = _create(order_service, store, menu)
    done = _create(order_service, store, menu)
    dropped = _create(order_service, store, menu)
    _set_status(order_service, store, done.id, "completed")
    _set_status(order_service, store, dropped.id, "cancelled")

    assert [o.id for o in order_service.list_orders(store)] == [active.id, done.id, dropped.id]
    assert [o.id for o in order_service.list_orders(store, scope="active")] == [active.id]
    assert [o.id for o in order_service.list_orders(store, scope="history")] == [done.id, dropped.id]


def test_courier_candidates(order_service, store, menu, couriers):
    order1 = _create(order_service, store, menu)
    order2 = _create(order_service, store, menu)
    _assign(order_service, store, order1.id, "c-x")

    assert [c.id for c in order_service.list_courier_candidates(store, order1.id)] == ["c-x", "c-y"]
    assert [c.id for c in order_service.list_courier_candidates(store, order2.id)] == ["c-y"]


def test_no_courier_candidates_for_finished_orders(order_service, store, menu, couriers):
    order = _create(order_service, store, menu)
    _assign(order_service, store, order.id, "c-x")

    _set_status(order_service, store, order.id, "completed")
    assert order_service.list_courier_candidates(store, order.id) == []

    _set_status(order_service, store, order.id, "cancelled")
    assert order_service.list_courier_candidates(store, order.id) == []


def test_courier_candidates_skip_courier_moved_elsewhere(order_service, store, menu, couriers):
    order1 = _create(order_service, store, menu)
    order2 = _create(order_service, store, menu)
    _assign(order_service, store, order1.id, "c-x")
    _assign(order_service, store, order2.id, "c-x")

    # order1 still names c-x as history, but c-x now delivers order2
    assert store.orders[order1.id].courier_id == "c-x"
    assert [c.id for c in order_service.list_courier_candidates(store, order1.id)] == ["c-y"]
    assert [c.id for c in order_service.list_courier_candidates(store, order2.id)] == ["c-x", "c-y"]
