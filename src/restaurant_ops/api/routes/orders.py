from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, Request
from sqlalchemy.ext.asyncio import AsyncSession

from restaurant_ops.crud.order import create_order, delete_order, get_order_by_id, get_orders
from restaurant_ops.crud.order import update_order_status
from restaurant_ops.db.session import get_async_session
from restaurant_ops.exceptions import StoreError
from restaurant_ops.schemas.order import OrderCreate, OrderRead, OrderStatusUpdate


router = APIRouter(prefix="/api/orders", tags=["orders"])


@router.get("", response_model=List[OrderRead])
async def list_orders(db: AsyncSession = Depends(get_async_session)):
    """
    Возвращает список заказов, новые первыми.
    """
    try:
        orders = await get_orders(db)
    except StoreError:
        raise HTTPException(status_code=500, detail="Error fetching orders")
    return [OrderRead.from_orm_row(o) for o in orders]


@router.get("/{order_id}", response_model=OrderRead)
async def get_order(
    order_id: str = Path(..., description="ID заказа"),
    db: AsyncSession = Depends(get_async_session),
):
    try:
        order = await get_order_by_id(db, order_id)
    except StoreError:
        raise HTTPException(status_code=500, detail="Error fetching order")
    return OrderRead.from_orm_row(order)


@router.post("", response_model=OrderRead, status_code=201)
async def create_order_endpoint(order_in: OrderCreate, db: AsyncSession = Depends(get_async_session)):
    """
    Возвращает созданный заказ (status по умолчанию new).
    """
    try:
        order = await create_order(db, order_in)
    except StoreError:
        raise HTTPException(status_code=400, detail="Error saving order")
    return OrderRead.from_orm_row(order)


@router.patch("/{order_id}/status", response_model=OrderRead)
async def patch_order_status(
    order_id: str,
    status_in: OrderStatusUpdate,
    request: Request,
    db: AsyncSession = Depends(get_async_session),
):
    """
    Меняет статус заказа: new, in-progress, ready.
    """
    forward_only = request.app.state.settings.ORDER_STATUS_FORWARD_ONLY
    try:
        order = await update_order_status(db, order_id, status_in.status, forward_only=forward_only)
    except StoreError:
        raise HTTPException(status_code=500, detail="Error updating order status")
    return OrderRead.from_orm_row(order)


@router.delete("/{order_id}", status_code=204)
async def remove_order(order_id: str, db: AsyncSession = Depends(get_async_session)):
    """
    Удаляет заказ.
    """
    try:
        await delete_order(db, order_id)
    except StoreError:
        raise HTTPException(status_code=500, detail="Error deleting order")
