from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path
from sqlalchemy.ext.asyncio import AsyncSession

from restaurant_ops.crud.menu_item import create_menu_item, delete_menu_item, get_menu_item
from restaurant_ops.crud.menu_item import get_menu_items, toggle_menu_item_availability, update_menu_item
from restaurant_ops.db.session import get_async_session
from restaurant_ops.exceptions import StoreError
from restaurant_ops.schemas.menu_item import MenuItemCreate, MenuItemRead, MenuItemUpdate


router = APIRouter(prefix="/api/menu-items", tags=["menu"])


@router.get("", response_model=List[MenuItemRead])
async def list_menu_items(db: AsyncSession = Depends(get_async_session)):
    """
    Возвращает все позиции меню.
    """
    try:
        return await get_menu_items(db)
    except StoreError:
        raise HTTPException(status_code=500, detail="Error fetching menu items")


@router.get("/{item_id}", response_model=MenuItemRead)
async def get_menu_item_endpoint(
    item_id: str = Path(..., description="ID позиции меню"),
    db: AsyncSession = Depends(get_async_session),
):
    try:
        return await get_menu_item(db, item_id)
    except StoreError:
        raise HTTPException(status_code=500, detail="Error fetching menu item")


@router.post("", response_model=MenuItemRead, status_code=201)
async def create_menu_item_endpoint(
    item_in: MenuItemCreate,
    db: AsyncSession = Depends(get_async_session),
):
    """
    Возвращает созданную позицию (status по умолчанию available).
    """
    try:
        return await create_menu_item(db, item_in)
    except StoreError:
        raise HTTPException(status_code=400, detail="Error saving menu item")


@router.put("/{item_id}", response_model=MenuItemRead)
async def update_menu_item_endpoint(
    item_id: str,
    item_in: MenuItemUpdate,
    db: AsyncSession = Depends(get_async_session),
):
    """
    Частичное обновление: меняются только переданные поля.
    """
    try:
        return await update_menu_item(db, item_id, item_in)
    except StoreError:
        raise HTTPException(status_code=400, detail="Error updating menu item")


@router.delete("/{item_id}", status_code=204)
async def remove_menu_item(item_id: str, db: AsyncSession = Depends(get_async_session)):
    try:
        await delete_menu_item(db, item_id)
    except StoreError:
        raise HTTPException(status_code=500, detail="Error deleting menu item")


@router.patch("/{item_id}/status", response_model=MenuItemRead)
async def toggle_menu_item_status(item_id: str, db: AsyncSession = Depends(get_async_session)):
    """
    Переключает доступность: available <-> unavailable.
    """
    try:
        return await toggle_menu_item_availability(db, item_id)
    except StoreError:
        raise HTTPException(status_code=500, detail="Error changing menu item status")
