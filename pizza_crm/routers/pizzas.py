# pizza_crm/routers/pizzas.py
from fastapi import APIRouter, Depends, status

from pizza_crm.repositories.pizza_repo import PizzaRepository
from pizza_crm.schemas.pizza import PizzaCreate, PizzaRead, PizzaUpdate
from pizza_crm.services.pizza_service import PizzaService
from pizza_crm.store import EntityStore, get_store

router = APIRouter(prefix="/pizzas", tags=["Pizzas"])

repo = PizzaRepository()
service = PizzaService(repo)


@router.get("", response_model=list[PizzaRead])
def list_pizzas(
    store: EntityStore = Depends(get_store),
    skip: int = 0,
    limit: int = 100,
    only_available: bool = False,
):
    """
    List the menu.

    - `only_available=True` hides pizzas that cannot be ordered.
    """
    return service.list_pizzas(
        store, skip=skip, limit=limit, only_available=only_available
    )


@router.get("/{pizza_id}", response_model=PizzaRead)
def get_pizza(
    pizza_id: str,
    store: EntityStore = Depends(get_store),
):
    return service.get_pizza(store, pizza_id)


@router.post(
    "",
    response_model=PizzaRead,
    status_code=status.HTTP_201_CREATED,
)
def create_pizza(
    payload: PizzaCreate,
    store: EntityStore = Depends(get_store),
):
    """
    Add a pizza to the menu.
    """
    return service.create_pizza(store, payload)


@router.patch("/{pizza_id}", response_model=PizzaRead)
def update_pizza(
    pizza_id: str,
    payload: PizzaUpdate,
    store: EntityStore = Depends(get_store),
):
    """
    Partially update a pizza.
    """
    return service.update_pizza(store, pizza_id, payload)


@router.delete(
    "/{pizza_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
def delete_pizza(
    pizza_id: str,
    store: EntityStore = Depends(get_store),
):
    """
    Remove a pizza. Existing orders keep their snapshotted lines.
    """
    service.delete_pizza(store, pizza_id)
    return None
