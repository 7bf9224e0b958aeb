"""
SQLAlchemy Implementation of Generic Repository
Concrete async repository using SQLAlchemy 2.x
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Generic, Iterator, Type, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from shared.domain.base_entity import BaseEntity
from shared.exceptions import ConflictError, StorageError
from shared.infrastructure.database.base_model import Base
from shared.infrastructure.observability.logger import get_logger

logger = get_logger(__name__)

TEntity = TypeVar("TEntity", bound=BaseEntity)
TModel = TypeVar("TModel", bound=Base)


class SQLAlchemyRepository(Generic[TEntity, TModel]):
    """
    Generic async SQLAlchemy repository implementation.

    Provides CRUD operations for domain entities by mapping to/from ORM models.
    Driver failures surface as `StorageError` (or `ConflictError` for
    constraint violations) with the failing action in the message.

    Type Parameters:
        TEntity: Domain entity type
        TModel: SQLAlchemy ORM model type

    Attributes:
        session: Async SQLAlchemy session
        model_class: ORM model class
        entity_class: Domain entity class
        entity_label: Human-readable entity name used in error messages
    """

    entity_label: str = "entity"

    def __init__(
        self,
        session: AsyncSession,
        model_class: Type[TModel],
        entity_class: Type[TEntity],
    ) -> None:
        self.session = session
        self.model_class = model_class
        self.entity_class = entity_class

    def _to_entity(self, model: TModel) -> TEntity:
        """Convert ORM model to domain entity. Subclasses must implement."""
        raise NotImplementedError("Subclass must implement _to_entity")

    def _to_model(self, entity: TEntity) -> TModel:
        """Convert domain entity to ORM model. Subclasses must implement."""
        raise NotImplementedError("Subclass must implement _to_model")

    def _conflict_message(self, error: IntegrityError) -> str:
        """Message for a constraint violation; subclasses map unique columns."""
        if "foreign key" in str(error.orig).lower():
            return f"{self.entity_label} is referenced by other records"
        return f"{self.entity_label} already exists"

    @contextmanager
    def _errors(self, action: str, **context: Any) -> Iterator[None]:
        """
        Translate SQLAlchemy failures raised inside the block.

        Args:
            action: What was being attempted, e.g. "get patient"
            **context: Extra fields for the error log entry
        """
        try:
            yield
        except IntegrityError as e:
            logger.warning(f"Constraint violation: {action}", error=str(e.orig), **context)
            raise ConflictError(self._conflict_message(e)) from e
        except SQLAlchemyError as e:
            logger.error(f"Failed to {action}", error=str(e), **context)
            raise StorageError(f"failed to {action}") from e

    async def add(self, entity: TEntity) -> TEntity:
        """Persist a new entity and return it as stored."""
        with self._errors(f"create {self.entity_label}", entity_id=entity.id):
            model = self._to_model(entity)
            self.session.add(model)
            await self.session.flush()
            await self.session.refresh(model)

        logger.info(f"Created {self.entity_label}", entity_id=entity.id)
        return self._to_entity(model)

    async def get_by_id(self, entity_id: str) -> TEntity | None:
        """Retrieve entity by its identifier, None if absent."""
        with self._errors(f"get {self.entity_label}", entity_id=entity_id):
            stmt = select(self.model_class).where(self.model_class.id == entity_id)
            result = await self.session.execute(stmt)
            model = result.scalar_one_or_none()

        if model is None:
            logger.debug(f"{self.entity_label} not found", entity_id=entity_id)
            return None
        return self._to_entity(model)

    async def update(self, entity: TEntity) -> TEntity:
        """Write every field of an existing entity back to storage."""
        entity.mark_updated()
        with self._errors(f"update {self.entity_label}", entity_id=entity.id):
            merged = await self.session.merge(self._to_model(entity))
            await self.session.flush()
            await self.session.refresh(merged)

        logger.info(f"Updated {self.entity_label}", entity_id=entity.id)
        return self._to_entity(merged)

    async def delete(self, entity_id: str) -> bool:
        """Delete entity by ID. Returns True if a row was removed."""
        with self._errors(f"delete {self.entity_label}", entity_id=entity_id):
            stmt = delete(self.model_class).where(self.model_class.id == entity_id)
            result = await self.session.execute(stmt)
            await self.session.flush()

        deleted = result.rowcount > 0
        if deleted:
            logger.info(f"Deleted {self.entity_label}", entity_id=entity_id)
        return deleted

