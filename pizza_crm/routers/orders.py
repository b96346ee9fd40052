# pizza_crm/routers/orders.py
from fastapi import APIRouter, Depends, status

from pizza_crm.core.config import get_settings
from pizza_crm.repositories.courier_repo import CourierRepository
from pizza_crm.repositories.order_repo import OrderRepository
from pizza_crm.repositories.pizza_repo import PizzaRepository
from pizza_crm.schemas.courier import CourierRead
from pizza_crm.schemas.order import (
    CourierAssign,
    OrderCreate,
    OrderRead,
    OrderScope,
    OrderStatusUpdate,
    OrderUpdate,
)
from pizza_crm.services.order_service import OrderService
from pizza_crm.store import EntityStore, get_store

router = APIRouter(prefix="/orders", tags=["Orders"])

settings = get_settings()

order_repo = OrderRepository()
courier_repo = CourierRepository()
pizza_repo = PizzaRepository()
service = OrderService(
    order_repo,
    courier_repo,
    pizza_repo,
    strict_assignment=settings.STRICT_COURIER_ASSIGNMENT,
)


@router.get("", response_model=list[OrderRead])
def list_orders(
    store: EntityStore = Depends(get_store),
    scope: OrderScope | None = None,
    skip: int = 0,
    limit: int = 100,
):
    """
    List orders.

    - `scope=active`  : not completed/cancelled
    - `scope=history` : completed or cancelled
    """
    return service.list_orders(store, scope=scope, skip=skip, limit=limit)


@router.get("/{order_id}", response_model=OrderRead)
def get_order(
    order_id: str,
    store: EntityStore = Depends(get_store),
):
    return service.get_order(store, order_id)


@router.get(
    "/{order_id}/courier-candidates",
    response_model=list[CourierRead],
)
def list_courier_candidates(
    order_id: str,
    store: EntityStore = Depends(get_store),
):
    """
    Couriers that can be offered for this order: all free couriers
    plus the one currently assigned.
    """
    return service.list_courier_candidates(store, order_id)


@router.post(
    "",
    response_model=OrderRead,
    status_code=status.HTTP_201_CREATED,
)
def create_order(
    payload: OrderCreate,
    store: EntityStore = Depends(get_store),
):
    """
    Create a pending order; prices and names are copied from the menu.
    """
    return service.create_order(store, payload)


@router.patch("/{order_id}", response_model=OrderRead)
def update_order(
    order_id: str,
    payload: OrderUpdate,
    store: EntityStore = Depends(get_store),
):
    """
    Partially update an order (customer details and/or status).
    """
    return service.update_order(store, order_id, payload)


@router.patch("/{order_id}/status", response_model=OrderRead)
def update_order_status(
    order_id: str,
    payload: OrderStatusUpdate,
    store: EntityStore = Depends(get_store),
):
    """
    Change order status. Any status may follow any other.

      completed / cancelled -> the assigned courier becomes free
    """
    return service.update_status(store, order_id, payload)


@router.post("/{order_id}/courier", response_model=OrderRead)
def assign_courier(
    order_id: str,
    payload: CourierAssign,
    store: EntityStore = Depends(get_store),
):
    """
    Assign or reassign a courier; the order moves to 'delivering'.
    """
    return service.assign_courier(store, order_id, payload)


@router.delete(
    "/{order_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
def delete_order(
    order_id: str,
    store: EntityStore = Depends(get_store),
):
    """
    Delete an order, freeing its courier first.
    """
    service.delete_order(store, order_id)
    return None
