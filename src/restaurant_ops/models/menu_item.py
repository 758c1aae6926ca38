import enum

from sqlalchemy import Column, String, Float, Enum as SAEnum
from ..db.base import Base, new_id


class MenuItemStatus(str, enum.Enum):
    available = "available"
    unavailable = "unavailable"


class MenuItem(Base):
    __tablename__ = "menu_items"

    id = Column(String(32), primary_key=True, default=new_id)
    name = Column(String(128), nullable=False)
    price = Column(Float, nullable=False)
    category = Column(String(64), nullable=False)  # кофе, еда, десерт и т.д.
    status = Column(
        SAEnum(
            MenuItemStatus,
            name="menu_item_status",
            native_enum=False,
            values_callable=lambda statuses: [s.value for s in statuses],
        ),
        nullable=False,
        default=MenuItemStatus.available,
    )
