"""
Generic repository over an AsyncSession.

Every query filters out soft-deleted rows. Writes commit immediately so each
public operation maps to a single relational statement; constraint violations
are rolled back and surfaced as DuplicateRecordError.
"""
import logging
from datetime import datetime, timezone
from typing import Generic, List, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType")


class RepositoryError(Exception):
    """Base exception for repository errors."""
    pass


class RecordNotFoundError(RepositoryError):
    """Raised when a record is missing or soft-deleted."""
    pass


class DuplicateRecordError(RepositoryError):
    """Raised when a write violates a unique or not-null constraint."""
    pass


class BaseRepository(Generic[ModelType]):
    model: Type[ModelType]

    def __init__(self, session: AsyncSession):
        self.session = session

    @property
    def label(self) -> str:
        return self.model.__name__

    def _active(self):
        return select(self.model).where(self.model.deleted_at.is_(None))

    async def _commit(self):
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise DuplicateRecordError(f"{self.label} conflicts with an existing record: {e.orig}") from e

    async def create(self, record: ModelType) -> ModelType:
        self.session.add(record)
        await self._commit()
        await self.session.refresh(record)
        logger.debug(f"Created {self.label} {record.id}")
        return record

    async def create_from(self, data: BaseModel) -> ModelType:
        return await self.create(self.model(**data.model_dump()))

    async def get_by_id(self, record_id: int) -> ModelType:
        result = await self.session.execute(self._active().where(self.model.id == record_id))
        record = result.scalar_one_or_none()
        if record is None:
            raise RecordNotFoundError(f"{self.label} {record_id} not found")
        return record

    async def find_by(self, **filters) -> Optional[ModelType]:
        query = self._active().filter_by(**filters).order_by(self.model.id).limit(1)
        result = await self.session.execute(query)
        return result.scalars().first()

    async def get_by(self, **filters) -> ModelType:
        record = await self.find_by(**filters)
        if record is None:
            raise RecordNotFoundError(f"{self.label} not found for {filters}")
        return record

    async def list(self, offset: int, limit: int) -> Tuple[List[ModelType], int]:
        """Newest first page of records plus the total count"""
        total = await self.session.scalar(
            select(func.count()).select_from(self.model).where(self.model.deleted_at.is_(None))
        )
        result = await self.session.execute(
            self._active()
            .order_by(self.model.created_at.desc(), self.model.id.desc())
            .offset(offset)
            .limit(limit)
        )
        return list(result.scalars().all()), total or 0

    async def save(self, record: ModelType) -> ModelType:
        """Commit pending changes on an already loaded record"""
        await self._commit()
        await self.session.refresh(record)
        return record

    async def update(self, record_id: int, patch: BaseModel) -> ModelType:
        """Apply only the fields the caller explicitly set on the patch"""
        record = await self.get_by_id(record_id)
        for field, value in patch.model_dump(exclude_unset=True).items():
            setattr(record, field, value)
        return await self.save(record)

    async def soft_delete(self, record_id: int) -> None:
        record = await self.get_by_id(record_id)
        record.deleted_at = datetime.now(timezone.utc)
        await self._commit()
        logger.debug(f"Soft deleted {self.label} {record_id}")
