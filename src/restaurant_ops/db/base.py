import uuid

from sqlalchemy.orm import DeclarativeBase


def new_id() -> str:
    return uuid.uuid4().hex


# Base для моделей
class Base(DeclarativeBase):
    pass
