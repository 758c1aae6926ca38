from .menu_item import MenuItem, MenuItemStatus
from .order import Order, OrderStatusEnum

__all__ = [
    "MenuItem",
    "MenuItemStatus",
    "Order",
    "OrderStatusEnum",
]
