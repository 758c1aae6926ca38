import logging
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from restaurant_ops.db.collection import Collection
from restaurant_ops.exceptions import NotFoundError, ValidationError
from restaurant_ops.models import Order, OrderStatusEnum
from restaurant_ops.models.order import utcnow
from restaurant_ops.schemas.order import OrderCreate

logger = logging.getLogger(__name__)

# порядок статусов на кухонной доске
STATUS_SEQUENCE = [OrderStatusEnum.new, OrderStatusEnum.in_progress, OrderStatusEnum.ready]


def _orders(db: AsyncSession) -> Collection[Order]:
    return Collection(db, Order)


async def get_orders(db: AsyncSession) -> List[Order]:
    """
    Возвращает список заказов.
    Сортируем по created_at (новые первыми).
    """
    return await _orders(db).find_all(Order.created_at.desc())


async def get_order_by_id(db: AsyncSession, order_id: str) -> Order:
    order = await _orders(db).find_by_id(order_id)
    if order is None:
        raise NotFoundError("Order", order_id)
    return order


async def create_order(db: AsyncSession, order_in: OrderCreate) -> Order:
    """
    Создаём заказ; позиции хранятся как снимок {name, quantity}, без ссылок на меню.
    """
    order = await _orders(db).insert(
        {
            "display_id": order_in.display_id,
            "customer_name": order_in.customer.name,
            "items": [line.model_dump() for line in order_in.items],
            "total": order_in.total,
            "status": order_in.status,
        }
    )
    logger.info("Order %s (%s) created for %s", order.display_id, order.id, order.customer_name)
    return order


def check_transition(current: OrderStatusEnum, status: OrderStatusEnum) -> None:
    """
    Только вперёд по STATUS_SEQUENCE; повторно выставить текущий статус можно.
    """
    if STATUS_SEQUENCE.index(status) < STATUS_SEQUENCE.index(current):
        raise ValidationError(
            f"Cannot move order from '{current.value}' back to '{status.value}'"
        )


async def update_order_status(
    db: AsyncSession,
    order_id: str,
    status: OrderStatusEnum,
    forward_only: bool = False,
) -> Order:
    """
    Обновляет статус заказа. По умолчанию любой статус может сменить любой другой.
    """
    if forward_only:
        current = await get_order_by_id(db, order_id)
        check_transition(current.status, status)

    # updated_at двигаем явно: при том же статусе UPDATE иначе не выполняется
    order = await _orders(db).update_by_id(order_id, {"status": status, "updated_at": utcnow()})
    if order is None:
        raise NotFoundError("Order", order_id)
    logger.info("Order %s (%s) moved to %s", order.display_id, order.id, order.status.value)
    return order


async def delete_order(db: AsyncSession, order_id: str) -> None:
    """
    Удаляет заказ (снимает его с доски).
    """
    order = await _orders(db).delete_by_id(order_id)
    if order is None:
        raise NotFoundError("Order", order_id)
    logger.info("Order %s (%s) removed", order.display_id, order_id)
