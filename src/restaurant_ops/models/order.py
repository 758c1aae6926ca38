import enum
from datetime import datetime, timezone

from sqlalchemy import Column, String, Float, DateTime, JSON, Enum as SAEnum
from ..db.base import Base, new_id


class OrderStatusEnum(str, enum.Enum):
    new = "new"
    in_progress = "in-progress"
    ready = "ready"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Order(Base):
    __tablename__ = "orders"

    id = Column(String(32), primary_key=True, default=new_id)
    display_id = Column(String(64), nullable=False)  # номер заказа для кухни и клиента
    customer_name = Column(String(128), nullable=False)
    # [{"name": ..., "quantity": ...}], снимок позиций меню на момент заказа
    items = Column(JSON, nullable=False, default=list)
    total = Column(Float, nullable=False)
    status = Column(
        SAEnum(
            OrderStatusEnum,
            name="order_status",
            native_enum=False,
            values_callable=lambda statuses: [s.value for s in statuses],
        ),
        nullable=False,
        default=OrderStatusEnum.new,
    )
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)
