# pizza_crm/repositories/courier_repo.py
from pizza_crm.models.courier import Courier
from pizza_crm.store import EntityStore


class CourierRepository:
    """
    Data access layer for the courier roster.
    """

    def get_by_id(self, store: EntityStore, courier_id: str) -> Courier | None:
        return store.couriers.get(courier_id)

    def list(
        self,
        store: EntityStore,
        skip: int = 0,
        limit: int | None = None,
        status: str | None = None,
    ) -> list[Courier]:
        couriers = list(store.couriers.values())
        if status is not None:
            couriers = [c for c in couriers if c.status == status]
        end = None if limit is None else skip + limit
        return couriers[skip:end]

    def create(self, store: EntityStore, courier: Courier) -> Courier:
        store.couriers[courier.id] = courier
        return courier

    def update(self, store: EntityStore, courier: Courier) -> Courier:
        store.couriers[courier.id] = courier
        return courier

    def delete(self, store: EntityStore, courier: Courier) -> None:
        store.couriers.pop(courier.id, None)
