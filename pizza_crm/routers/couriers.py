# pizza_crm/routers/couriers.py
from fastapi import APIRouter, Depends, status

from pizza_crm.repositories.courier_repo import CourierRepository
from pizza_crm.schemas.courier import (
    CourierCreate,
    CourierRead,
    CourierStatus,
    CourierUpdate,
)
from pizza_crm.services.courier_service import CourierService
from pizza_crm.store import EntityStore, get_store

router = APIRouter(prefix="/couriers", tags=["Couriers"])

repo = CourierRepository()
service = CourierService(repo)


@router.get("", response_model=list[CourierRead])
def list_couriers(
    store: EntityStore = Depends(get_store),
    skip: int = 0,
    limit: int = 100,
    status: CourierStatus | None = None,
):
    """
    List the roster, optionally only free or only busy couriers.
    """
    return service.list_couriers(store, skip=skip, limit=limit, status_filter=status)


@router.get("/{courier_id}", response_model=CourierRead)
def get_courier(
    courier_id: str,
    store: EntityStore = Depends(get_store),
):
    return service.get_courier(store, courier_id)


@router.post(
    "",
    response_model=CourierRead,
    status_code=status.HTTP_201_CREATED,
)
def create_courier(
    payload: CourierCreate,
    store: EntityStore = Depends(get_store),
):
    """
    Add a courier. New couriers are always free.
    """
    return service.create_courier(store, payload)


@router.patch("/{courier_id}", response_model=CourierRead)
def update_courier(
    courier_id: str,
    payload: CourierUpdate,
    store: EntityStore = Depends(get_store),
):
    """
    Edit a courier's contact details.

    Busy/free cannot be flipped here (409); it follows order assignment.
    """
    return service.update_courier(store, courier_id, payload)


@router.delete(
    "/{courier_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
def delete_courier(
    courier_id: str,
    store: EntityStore = Depends(get_store),
):
    """
    Remove a courier.

    Refused with 409 while the courier holds an active order.
    """
    service.delete_courier(store, courier_id)
    return None
