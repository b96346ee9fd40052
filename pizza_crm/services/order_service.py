# pizza_crm/services/order_service.py
import logging

from fastapi import HTTPException, status

from pizza_crm.models.courier import Courier, COURIER_FREE
from pizza_crm.models.order import Order, OrderItem, TERMINAL_STATUSES
from pizza_crm.repositories.courier_repo import CourierRepository
from pizza_crm.repositories.order_repo import OrderRepository
from pizza_crm.repositories.pizza_repo import PizzaRepository
from pizza_crm.schemas.order import (
    OrderCreate,
    OrderRead,
    OrderItemRead,
    OrderUpdate,
    OrderStatusUpdate,
    CourierAssign,
)
from pizza_crm.store import EntityStore

logger = logging.getLogger(__name__)


class OrderService:
    """
    Order coordinator.

    Responsibilities:
      - Create orders, snapshotting pizza name/price and computing total
      - Apply status changes (no restricted transition graph)
      - Assign / reassign couriers
      - Keep courier status and current_order_id in step with orders

    Every write that touches both an order and a courier runs inside a
    single `store.transaction()`, so nobody observes one side updated
    without the other.

    Courier binding rules:
      - a courier is busy exactly while current_order_id is set
      - completing, cancelling or deleting an order releases the courier
        bound to it; the order keeps courier_id/courier_name as history
      - reassigning releases the previous courier first
    """

    def __init__(
        self,
        order_repo: OrderRepository,
        courier_repo: CourierRepository,
        pizza_repo: PizzaRepository,
        strict_assignment: bool = False,
    ):
        self.order_repo = order_repo
        self.courier_repo = courier_repo
        self.pizza_repo = pizza_repo
        self.strict_assignment = strict_assignment

    # -------- Reads --------

    def list_orders(
        self,
        store: EntityStore,
        scope: str | None = None,
        skip: int = 0,
        limit: int | None = None,
    ) -> list[OrderRead]:
        """
        List orders in creation order.

        scope:
          - None      : all orders
          - "active"  : not completed/cancelled
          - "history" : completed or cancelled
        """
        with store.reading():
            if scope == "active":
                orders = self.order_repo.list_active(store, skip, limit)
            elif scope == "history":
                orders = self.order_repo.list_history(store, skip, limit)
            else:
                orders = self.order_repo.list_all(store, skip, limit)
            return [self._build_order_dto(o) for o in orders]

    def get_order(self, store: EntityStore, order_id: str) -> OrderRead:
        with store.reading():
            return self._build_order_dto(self._get_order(store, order_id))

    def list_courier_candidates(
        self,
        store: EntityStore,
        order_id: str,
    ) -> list[Courier]:
        """
        Couriers that may be offered for this order: every free courier,
        plus the courier currently holding it.

        Completed and cancelled orders take no courier, so they get none.
        """
        with store.reading():
            order = self._get_order(store, order_id)
            if not order.is_active:
                return []
            return [
                c.model_copy()
                for c in self.courier_repo.list(store)
                if c.status == COURIER_FREE or c.current_order_id == order.id
            ]

    # -------- Writes --------

    def create_order(self, store: EntityStore, payload: OrderCreate) -> OrderRead:
        """
        Create a pending order without courier.

        A line whose pizza no longer exists is kept with an empty name and
        zero price instead of failing the whole order.
        """
        with store.transaction():
            items: list[OrderItem] = []
            for line in payload.items:
                pizza = self.pizza_repo.get_by_id(store, line.pizza_id)
                items.append(
                    OrderItem(
                        pizza_id=line.pizza_id,
                        pizza_name=pizza.name if pizza else "",
                        quantity=line.quantity,
                        price=pizza.price if pizza else 0.0,
                    )
                )

            total = 0.0
            for it in items:
                total += it.price * it.quantity

            order = Order(
                customer_name=payload.customer_name,
                customer_phone=payload.customer_phone,
                customer_address=payload.customer_address,
                items=items,
                total=total,
                status="pending",
            )
            order.updated_at = order.created_at
            order = self.order_repo.create(store, order)
            result = self._build_order_dto(order)

        logger.info("Created order %s (total=%s)", result.id, result.total)
        return result

    def update_order(
        self,
        store: EntityStore,
        order_id: str,
        payload: OrderUpdate,
    ) -> OrderRead:
        """
        Generic partial update (customer fields and/or status).

        Status side effects:
          - moving to completed/cancelled releases the bound courier
          - moving from completed/cancelled back to an active status
            drops a courier reference that no longer holds the order
        """
        with store.transaction():
            order = self._get_order(store, order_id)

            if payload.customer_name is not None:
                order.customer_name = payload.customer_name

            if payload.customer_phone is not None:
                order.customer_phone = payload.customer_phone

            if payload.customer_address is not None:
                order.customer_address = payload.customer_address

            if payload.status is not None:
                self._apply_status(store, order, payload.status)

            order.touch()
            self.order_repo.update(store, order)
            return self._build_order_dto(order)

    def update_status(
        self,
        store: EntityStore,
        order_id: str,
        payload: OrderStatusUpdate,
    ) -> OrderRead:
        return self.update_order(store, order_id, OrderUpdate(status=payload.status))

    def assign_courier(
        self,
        store: EntityStore,
        order_id: str,
        payload: CourierAssign,
    ) -> OrderRead:
        """
        Bind a courier to an order and mark the order as delivering.

        Steps (one transaction):
          1. Resolve order and courier (404 if either is missing).
          2. Release the previously assigned courier, if it is a
             different one and still holds this order.
          3. Mark the new courier busy on this order.
          4. Set courier_id/courier_name, status='delivering', updated_at.

        A courier already busy on another order is moved over unless
        strict assignment is enabled, in which case 409 is raised.
        """
        with store.transaction():
            order = self._get_order(store, order_id)
            courier = self.courier_repo.get_by_id(store, payload.courier_id)
            if not courier:
                raise HTTPException(
                    status_code=status.HTTP_404_NOT_FOUND,
                    detail="Courier not found",
                )

            if courier.current_order_id and courier.current_order_id != order.id:
                if self.strict_assignment:
                    logger.warning(
                        "Refused to assign courier %s to order %s: busy on order %s",
                        courier.id,
                        order.id,
                        courier.current_order_id,
                    )
                    raise HTTPException(
                        status_code=status.HTTP_409_CONFLICT,
                        detail="Courier is busy with another order",
                    )
                logger.warning(
                    "Courier %s moved from order %s to order %s",
                    courier.id,
                    courier.current_order_id,
                    order.id,
                )

            if order.courier_id and order.courier_id != courier.id:
                self._release_courier(store, order)

            courier.bind(order.id)
            self.courier_repo.update(store, courier)

            order.courier_id = courier.id
            order.courier_name = courier.name
            order.status = "delivering"
            order.touch()
            self.order_repo.update(store, order)
            result = self._build_order_dto(order)

        logger.info("Courier %s assigned to order %s", payload.courier_id, order_id)
        return result

    def delete_order(self, store: EntityStore, order_id: str) -> None:
        """
        Remove an order, releasing its courier first.
        """
        with store.transaction():
            order = self._get_order(store, order_id)
            if order.courier_id:
                self._release_courier(store, order)
            self.order_repo.delete(store, order)

        logger.info("Deleted order %s", order_id)

    # -------- Helpers --------

    def _get_order(self, store: EntityStore, order_id: str) -> Order:
        order = self.order_repo.get_by_id(store, order_id)
        if not order:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Order not found",
            )
        return order

    def _apply_status(self, store: EntityStore, order: Order, new_status: str) -> None:
        was_terminal = order.status in TERMINAL_STATUSES
        order.status = new_status

        if new_status in TERMINAL_STATUSES:
            if order.courier_id:
                self._release_courier(store, order)
            return

        if was_terminal and order.courier_id:
            courier = self.courier_repo.get_by_id(store, order.courier_id)
            if courier is None or courier.current_order_id != order.id:
                order.courier_id = None
                order.courier_name = None

    def _release_courier(self, store: EntityStore, order: Order) -> None:
        """
        Free the courier referenced by `order` if it is still bound to it.

        A courier that has moved to another order, or no longer exists,
        is left untouched. Calling this twice is harmless.
        """
        courier = self.courier_repo.get_by_id(store, order.courier_id)
        if courier is None or courier.current_order_id != order.id:
            return
        courier.release()
        self.courier_repo.update(store, courier)
        logger.info("Courier %s released from order %s", courier.id, order.id)

    def _build_order_dto(self, order: Order) -> OrderRead:
        item_dtos: list[OrderItemRead] = []
        for it in order.items:
            item_dtos.append(
                OrderItemRead(
                    pizza_id=it.pizza_id,
                    pizza_name=it.pizza_name,
                    quantity=it.quantity,
                    price=it.price,
                    line_total=it.price * it.quantity,
                )
            )

        return OrderRead(
            id=order.id,
            customer_name=order.customer_name,
            customer_phone=order.customer_phone,
            customer_address=order.customer_address,
            items=item_dtos,
            total=order.total,
            status=order.status,  # Literal
            courier_id=order.courier_id,
            courier_name=order.courier_name,
            created_at=order.created_at,
            updated_at=order.updated_at,
        )
