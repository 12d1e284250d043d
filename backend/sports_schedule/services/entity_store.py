"""Entity Store — create/read/replace/delete by id and by filter over the ORM models.

Invariants:
    - Every method takes an already-validated EntityId (routes parse before calling)
    - Single-record writes commit immediately; multi-record writes go through IntegrityEngine
    - replace() is full-record replacement: every mutable column is overwritten
    - Missing records raise ResourceNotFoundError, never return a half-applied write
"""

import logging
from typing import Any, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from sports_schedule.core.domain_types import EntityId
from sports_schedule.core.errors import ResourceNotFoundError
from sports_schedule.db.base import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


def _label(model: type[Base]) -> str:
    return model.__name__


class EntityStore:
    """Thin async CRUD layer shared by all resource routes."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, model: type[ModelT], values: dict[str, Any]) -> ModelT:
        record = model(**values)
        self.db.add(record)
        await self.db.commit()
        await self.db.refresh(record)
        logger.info(
            f"Created {_label(model)}",
            extra={"entity": _label(model), "entity_id": record.id},
        )
        return record

    async def get(self, model: type[ModelT], entity_id: EntityId) -> ModelT | None:
        return await self.db.get(model, entity_id)

    async def get_or_404(self, model: type[ModelT], entity_id: EntityId) -> ModelT:
        record = await self.get(model, entity_id)
        if record is None:
            raise ResourceNotFoundError(_label(model), entity_id)
        return record

    async def list_all(self, model: type[ModelT], *where, order_by=None) -> list[ModelT]:
        """All records matching the predicates, ordered by order_by or id."""
        query = select(model)
        for clause in where:
            query = query.where(clause)
        query = query.order_by(order_by if order_by is not None else model.id)
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def ids_where(self, model: type[ModelT], *where) -> frozenset[EntityId]:
        query = select(model.id)
        for clause in where:
            query = query.where(clause)
        result = await self.db.execute(query)
        return frozenset(EntityId(row) for row in result.scalars().all())

    async def replace(
        self, model: type[ModelT], entity_id: EntityId, values: dict[str, Any],
    ) -> ModelT:
        record = await self.get_or_404(model, entity_id)
        for column, value in values.items():
            setattr(record, column, value)
        await self.db.commit()
        await self.db.refresh(record)
        logger.info(
            f"Replaced {_label(model)}",
            extra={"entity": _label(model), "entity_id": entity_id},
        )
        return record

    async def delete(self, model: type[ModelT], entity_id: EntityId) -> None:
        """Delete one record with no dependents. Not-found is decided by affected rows."""
        result = await self.db.execute(
            delete(model).where(model.id == entity_id)
            .execution_options(synchronize_session=False),
        )
        if result.rowcount == 0:
            await self.db.rollback()
            raise ResourceNotFoundError(_label(model), entity_id)
        await self.db.commit()
        logger.info(
            f"Deleted {_label(model)}",
            extra={"entity": _label(model), "entity_id": entity_id},
        )
