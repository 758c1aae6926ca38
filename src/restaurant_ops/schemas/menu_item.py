from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from restaurant_ops.models.menu_item import MenuItemStatus


class MenuItemRead(BaseModel):
    id: str
    name: str
    price: float
    category: str
    status: MenuItemStatus

    model_config = ConfigDict(from_attributes=True)


class MenuItemCreate(BaseModel):
    name: str = Field(..., min_length=1)
    price: float
    category: str = Field(..., min_length=1)
    status: MenuItemStatus = MenuItemStatus.available


class MenuItemUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    price: Optional[float] = None
    category: Optional[str] = Field(None, min_length=1)
    status: Optional[MenuItemStatus] = None
