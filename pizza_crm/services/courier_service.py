# pizza_crm/services/courier_service.py
import logging

from fastapi import HTTPException, status

from pizza_crm.models.courier import Courier, COURIER_FREE
from pizza_crm.repositories.courier_repo import CourierRepository
from pizza_crm.schemas.courier import CourierCreate, CourierUpdate
from pizza_crm.store import EntityStore

logger = logging.getLogger(__name__)


class CourierService:
    """
    Courier roster operations.

    Responsibilities:
      - new couriers start free with no order
      - contact details are freely editable
      - busy/free and current_order_id are left to OrderService
      - a courier holding an order cannot be deleted
    """

    def __init__(self, repo: CourierRepository):
        self.repo = repo

    def list_couriers(
        self,
        store: EntityStore,
        skip: int = 0,
        limit: int | None = None,
        status_filter: str | None = None,
    ) -> list[Courier]:
        with store.reading():
            couriers = self.repo.list(store, skip=skip, limit=limit, status=status_filter)
            return [c.model_copy() for c in couriers]

    def get_courier(self, store: EntityStore, courier_id: str) -> Courier:
        with store.reading():
            return self._get_courier(store, courier_id).model_copy()

    def _get_courier(self, store: EntityStore, courier_id: str) -> Courier:
        courier = self.repo.get_by_id(store, courier_id)
        if not courier:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Courier not found",
            )
        return courier

    def create_courier(self, store: EntityStore, payload: CourierCreate) -> Courier:
        courier = Courier(
            name=payload.name,
            phone=payload.phone,
            status=COURIER_FREE,
            current_order_id=None,
        )
        with store.transaction():
            return self.repo.create(store, courier).model_copy()

    def update_courier(
        self,
        store: EntityStore,
        courier_id: str,
        payload: CourierUpdate,
    ) -> Courier:
        """
        Partial update of name/phone.

        A `status` that differs from the current one is refused (409):
        flipping busy/free by hand would break the order binding.
        """
        with store.transaction():
            courier = self._get_courier(store, courier_id)

            if payload.status is not None and payload.status != courier.status:
                logger.warning(
                    "Refused manual status change for courier %s (%s -> %s)",
                    courier.id,
                    courier.status,
                    payload.status,
                )
                raise HTTPException(
                    status_code=status.HTTP_409_CONFLICT,
                    detail="Courier status is managed through order assignment",
                )

            if payload.name is not None:
                courier.name = payload.name

            if payload.phone is not None:
                courier.phone = payload.phone

            return self.repo.update(store, courier).model_copy()

    def delete_courier(self, store: EntityStore, courier_id: str) -> None:
        """
        Remove a courier from the roster.

        Raises:
            HTTPException(409): courier currently holds an order.
        """
        with store.transaction():
            courier = self._get_courier(store, courier_id)
            if courier.current_order_id:
                logger.warning(
                    "Refused to delete courier %s: busy on order %s",
                    courier.id,
                    courier.current_order_id,
                )
                raise HTTPException(
                    status_code=status.HTTP_409_CONFLICT,
                    detail="Cannot delete a courier with an active order",
                )
            self.repo.delete(store, courier)
