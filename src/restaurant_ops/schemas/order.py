from datetime import datetime
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from restaurant_ops.models.order import OrderStatusEnum


class Customer(BaseModel):
    name: str = Field(..., min_length=1)


class OrderLine(BaseModel):
    name: str
    quantity: Union[int, float]


class OrderRead(BaseModel):
    id: str
    display_id: str = Field(..., alias="displayId")
    customer: Customer
    items: List[OrderLine] = []
    total: float
    status: OrderStatusEnum
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_orm_row(cls, order):
        return cls(
            id=order.id,
            display_id=order.display_id,
            customer=Customer(name=order.customer_name),
            items=[OrderLine(**line) for line in order.items or []],
            total=order.total,
            status=order.status,
            created_at=order.created_at,
            updated_at=order.updated_at,
        )


class OrderCreate(BaseModel):
    display_id: str = Field(..., alias="displayId", min_length=1)
    customer: Customer
    items: List[OrderLine] = []
    total: float
    status: OrderStatusEnum = OrderStatusEnum.new

    model_config = ConfigDict(populate_by_name=True)


class OrderStatusUpdate(BaseModel):
    status: OrderStatusEnum
