# pizza_crm/core/seed.py
from datetime import datetime, timezone

from pizza_crm.models.courier import Courier, COURIER_BUSY
from pizza_crm.models.order import Order, OrderItem
from pizza_crm.models.pizza import Pizza
from pizza_crm.store import EntityStore


def seed_demo_data(store: EntityStore) -> None:
    """
    Load the demo menu, roster and orders into an empty store.

    Courier "3" is busy on order "1", which points back at it; the
    seeded state satisfies the courier/order binding invariant.
    Does nothing if the store already holds data.
    """
    with store.transaction():
        if store.pizzas or store.couriers or store.orders:
            return

        pizzas = [
            Pizza(
                id="1",
                name="Margherita",
                description="Tomato sauce, mozzarella, basil",
                price=450,
                image="https://images.unsplash.com/photo-1574071318508-1cdbab80d002",
                available=True,
            ),
            Pizza(
                id="2",
                name="Pepperoni",
                description="Tomato sauce, mozzarella, pepperoni, oregano",
                price=550,
                image="https://images.unsplash.com/photo-1628840042765-356cda07504e",
                available=True,
            ),
            Pizza(
                id="3",
                name="Vegetarian",
                description="Tomato sauce, mozzarella, mushrooms, peppers, olives, tomatoes",
                price=500,
                image="https://images.unsplash.com/photo-1617343251257-b5d709934ddd",
                available=True,
            ),
            Pizza(
                id="4",
                name="Hawaiian",
                description="Tomato sauce, mozzarella, ham, pineapple",
                price=520,
                image="https://images.unsplash.com/photo-1565299624946-b28f40a0ae38",
                available=False,
            ),
        ]
        for pizza in pizzas:
            store.pizzas[pizza.id] = pizza

        couriers = [
            Courier(id="1", name="Ivan Petrov", phone="+7 (999) 123-45-67"),
            Courier(id="2", name="Maria Sidorova", phone="+7 (999) 234-56-78"),
            Courier(
                id="3",
                name="Alexey Kozlov",
                phone="+7 (999) 345-67-89",
                status=COURIER_BUSY,
                current_order_id="1",
            ),
        ]
        for courier in couriers:
            store.couriers[courier.id] = courier

        orders = [
            Order(
                id="1",
                customer_name="Anna Ivanova",
                customer_phone="+7 (999) 111-22-33",
                customer_address="10 Pushkin St, apt 5",
                items=[
                    OrderItem(pizza_id="1", pizza_name="Margherita", quantity=2, price=450),
                    OrderItem(pizza_id="2", pizza_name="Pepperoni", quantity=1, price=550),
                ],
                total=1450,
                status="delivering",
                courier_id="3",
                courier_name="Alexey Kozlov",
                created_at=datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc),
                updated_at=datetime(2024, 1, 15, 11, 0, tzinfo=timezone.utc),
            ),
            Order(
                id="2",
                customer_name="Petr Smirnov",
                customer_phone="+7 (999) 222-33-44",
                customer_address="45 Lenin Ave, apt 12",
                items=[
                    OrderItem(pizza_id="3", pizza_name="Vegetarian", quantity=3, price=500),
                ],
                total=1500,
                status="preparing",
                created_at=datetime(2024, 1, 15, 11, 0, tzinfo=timezone.utc),
                updated_at=datetime(2024, 1, 15, 11, 0, tzinfo=timezone.utc),
            ),
        ]
        for order in orders:
            store.orders[order.id] = order
