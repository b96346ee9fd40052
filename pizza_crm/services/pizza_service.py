# pizza_crm/services/pizza_service.py
from fastapi import HTTPException, status

from pizza_crm.models.pizza import Pizza
from pizza_crm.repositories.pizza_repo import PizzaRepository
from pizza_crm.schemas.pizza import PizzaCreate, PizzaUpdate
from pizza_crm.store import EntityStore


class PizzaService:
    """
    Menu (catalog) operations.

    No cross-entity rules: orders hold snapshots of name/price, so
    deleting a pizza does not cascade.

    Returned pizzas are copies taken under the store lock; they are
    safe to serialize while other requests keep writing.
    """

    def __init__(self, repo: PizzaRepository):
        self.repo = repo

    def list_pizzas(
        self,
        store: EntityStore,
        skip: int = 0,
        limit: int | None = None,
        only_available: bool = False,
    ) -> list[Pizza]:
        with store.reading():
            pizzas = self.repo.list(
                store, skip=skip, limit=limit, only_available=only_available
            )
            return [p.model_copy() for p in pizzas]

    def get_pizza(self, store: EntityStore, pizza_id: str) -> Pizza:
        with store.reading():
            return self._get_pizza(store, pizza_id).model_copy()

    def create_pizza(self, store: EntityStore, payload: PizzaCreate) -> Pizza:
        pizza = Pizza(**payload.model_dump())
        with store.transaction():
            return self.repo.create(store, pizza).model_copy()

    def update_pizza(
        self,
        store: EntityStore,
        pizza_id: str,
        payload: PizzaUpdate,
    ) -> Pizza:
        """
        Merge the provided fields into the existing record.
        """
        with store.transaction():
            pizza = self._get_pizza(store, pizza_id)
            for field, value in payload.model_dump(exclude_unset=True).items():
                if value is not None:
                    setattr(pizza, field, value)
            return self.repo.update(store, pizza).model_copy()

    def delete_pizza(self, store: EntityStore, pizza_id: str) -> None:
        with store.transaction():
            pizza = self._get_pizza(store, pizza_id)
            self.repo.delete(store, pizza)

    def _get_pizza(self, store: EntityStore, pizza_id: str) -> Pizza:
        pizza = self.repo.get_by_id(store, pizza_id)
        if not pizza:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Pizza not found",
            )
        return pizza
