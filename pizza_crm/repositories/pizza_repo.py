# pizza_crm/repositories/pizza_repo.py
from pizza_crm.models.pizza import Pizza
from pizza_crm.store import EntityStore


class PizzaRepository:
    """
    Data access layer for the menu.

    - Pure collection operations.
    - No FastAPI, no business logic.
    """

    def get_by_id(self, store: EntityStore, pizza_id: str) -> Pizza | None:
        return store.pizzas.get(pizza_id)

    def list(
        self,
        store: EntityStore,
        skip: int = 0,
        limit: int | None = None,
        only_available: bool = False,
    ) -> list[Pizza]:
        pizzas = list(store.pizzas.values())
        if only_available:
            pizzas = [p for p in pizzas if p.available]
        end = None if limit is None else skip + limit
        return pizzas[skip:end]

    def create(self, store: EntityStore, pizza: Pizza) -> Pizza:
        store.pizzas[pizza.id] = pizza
        return pizza

    def update(self, store: EntityStore, pizza: Pizza) -> Pizza:
        store.pizzas[pizza.id] = pizza
        return pizza

    def delete(self, store: EntityStore, pizza: Pizza) -> None:
        store.pizzas.pop(pizza.id, None)
