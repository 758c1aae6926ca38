import logging
from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from restaurant_ops.db.base import Base
from restaurant_ops.exceptions import StoreError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class Collection(Generic[ModelT]):
    """
    Доступ к одной таблице как к коллекции документов: вставка, поиск, обновление, удаление по id.

    Любая ошибка SQLAlchemy откатывается и пробрасывается как StoreError.
    """

    def __init__(self, db: AsyncSession, model: Type[ModelT]):
        self.db = db
        self.model = model

    async def _fail(self, action: str, exc: SQLAlchemyError) -> StoreError:
        logger.error("%s failed on %s: %s", action, self.model.__tablename__, exc)
        await self.db.rollback()
        return StoreError(f"Could not {action} {self.model.__tablename__}")

    async def insert(self, values: dict[str, Any]) -> ModelT:
        record = self.model(**values)
        try:
            self.db.add(record)
            await self.db.commit()
            await self.db.refresh(record)
        except SQLAlchemyError as e:
            raise await self._fail("insert into", e) from e
        return record

    async def find_all(self, *order_by) -> List[ModelT]:
        stmt = select(self.model)
        if order_by:
            stmt = stmt.order_by(*order_by)
        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as e:
            raise await self._fail("read", e) from e
        return list(result.scalars().all())

    async def find_by_id(self, record_id: str) -> Optional[ModelT]:
        try:
            return await self.db.get(self.model, record_id, populate_existing=True)
        except SQLAlchemyError as e:
            raise await self._fail("read", e) from e

    async def update_by_id(self, record_id: str, values: dict[str, Any]) -> Optional[ModelT]:
        """
        Частичное обновление. Возвращает обновлённую запись или None, если id не найден.
        """
        try:
            record = await self.db.get(self.model, record_id)
            if record is None:
                return None
            for key, value in values.items():
                setattr(record, key, value)
            await self.db.commit()
            await self.db.refresh(record)
        except SQLAlchemyError as e:
            raise await self._fail("update", e) from e
        return record

    async def apply_by_id(self, record_id: str, values: dict[str, Any]) -> Optional[ModelT]:
        """
        Один UPDATE-запрос, поэтому значения могут быть SQL-выражениями от текущей
        строки. Возвращает обновлённую запись или None, если id не найден.
        """
        stmt = (
            update(self.model)
            .where(self.model.id == record_id)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self.db.execute(stmt)
            await self.db.commit()
        except SQLAlchemyError as e:
            raise await self._fail("update", e) from e
        if result.rowcount == 0:
            return None
        return await self.find_by_id(record_id)

    async def delete_by_id(self, record_id: str) -> Optional[ModelT]:
        try:
            record = await self.db.get(self.model, record_id)
            if record is None:
                return None
            await self.db.delete(record)
            await self.db.commit()
        except SQLAlchemyError as e:
            raise await self._fail("delete from", e) from e
        return record
