import logging
from typing import List

from sqlalchemy import case
from sqlalchemy.ext.asyncio import AsyncSession

from restaurant_ops.db.collection import Collection
from restaurant_ops.exceptions import NotFoundError, ValidationError
from restaurant_ops.models import MenuItem, MenuItemStatus
from restaurant_ops.schemas.menu_item import MenuItemCreate, MenuItemUpdate

logger = logging.getLogger(__name__)

NON_NULL_FIELDS = ("name", "price", "category", "status")


def _menu_items(db: AsyncSession) -> Collection[MenuItem]:
    return Collection(db, MenuItem)


async def get_menu_items(db: AsyncSession) -> List[MenuItem]:
    """
    Возвращает все позиции меню в порядке хранения.
    """
    return await _menu_items(db).find_all()


async def get_menu_item(db: AsyncSession, item_id: str) -> MenuItem:
    item = await _menu_items(db).find_by_id(item_id)
    if item is None:
        raise NotFoundError("Menu item", item_id)
    return item


async def create_menu_item(db: AsyncSession, item_in: MenuItemCreate) -> MenuItem:
    item = await _menu_items(db).insert(item_in.model_dump())
    logger.info("Menu item %s created (%s)", item.id, item.name)
    return item


async def update_menu_item(db: AsyncSession, item_id: str, item_in: MenuItemUpdate) -> MenuItem:
    """
    Заменяет только переданные поля, остальные остаются прежними.
    """
    update_data = item_in.model_dump(exclude_unset=True)

    for key in NON_NULL_FIELDS:
        if key in update_data and update_data[key] is None:
            raise ValidationError(f"Field '{key}' cannot be null")

    if not update_data:
        return await get_menu_item(db, item_id)

    item = await _menu_items(db).update_by_id(item_id, update_data)
    if item is None:
        raise NotFoundError("Menu item", item_id)
    logger.info("Menu item %s updated: %s", item_id, sorted(update_data))
    return item


async def delete_menu_item(db: AsyncSession, item_id: str) -> None:
    item = await _menu_items(db).delete_by_id(item_id)
    if item is None:
        raise NotFoundError("Menu item", item_id)
    logger.info("Menu item %s deleted", item_id)


async def toggle_menu_item_availability(db: AsyncSession, item_id: str) -> MenuItem:
    """
    Переключает available <-> unavailable одним UPDATE,
    поэтому два одновременных переключения не теряют друг друга.
    """
    flipped = case(
        (MenuItem.status == MenuItemStatus.available, MenuItemStatus.unavailable.value),
        else_=MenuItemStatus.available.value,
    )
    item = await _menu_items(db).apply_by_id(item_id, {"status": flipped})
    if item is None:
        raise NotFoundError("Menu item", item_id)
    logger.info("Menu item %s is now %s", item_id, item.status.value)
    return item
