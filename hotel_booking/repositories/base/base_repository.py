"""
Base repository with standardized CRUD operations, transaction management
and error handling.

Every domain repository wraps one model class and one session. Write
operations commit by default; pass ``commit=False`` to flush only and let
the caller commit as part of a larger unit of work.
"""

from contextlib import contextmanager
from typing import Any, Callable, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from hotel_booking.core.exceptions import (
    BaseAppException,
    DatabaseError,
    DuplicateEntryError,
    ResourceNotFoundError,
)
from hotel_booking.core.logging import get_logger
from hotel_booking.models.base import BaseModel

logger = get_logger(__name__)

# Type variable for model classes
ModelType = TypeVar("ModelType", bound=BaseModel)


class BaseRepository(Generic[ModelType]):
    """
    Generic repository providing CRUD operations for one model.
    """

    #: Factory for the exception raised by ``get_by_id``; receives the id
    not_found_error: Optional[Callable[[Any], BaseAppException]] = None

    def __init__(self, model: Type[ModelType], db: Session):
        """
        Initialize repository.

        Args:
            model: SQLAlchemy model class
            db: Database session
        """
        self.model = model
        self.db = db

    # ==================== Transaction Management ====================

    @contextmanager
    def transaction(self):
        """
        Transaction context manager with automatic rollback.

        Usage:
            with repository.transaction():
                repository.create(entity, commit=False)
                repository.update(entity, data, commit=False)
        """
        try:
            yield self.db
            self.db.commit()
        except BaseAppException:
            self.db.rollback()
            raise
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"Transaction rollback on integrity error: {e.orig}")
            raise DuplicateEntryError(f"{self.model.__name__} already exists") from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Transaction rollback: {e}", exc_info=True)
            raise DatabaseError(
                f"Transaction failed: {e}",
                operation="transaction",
                table=self.model.__tablename__,
            ) from e

    def _finish(self, entity: Optional[ModelType], commit: bool, operation: str) -> None:
        """Commit (and refresh) or flush after a write."""
        try:
            if commit:
                self.db.commit()
                if entity is not None:
                    self.db.refresh(entity)
            else:
                self.db.flush()
        except IntegrityError as e:
            self.db.rollback()
            raise DuplicateEntryError(f"{self.model.__name__} already exists") from e
        except SQLAlchemyError as e:
            self.db.rollback()
            raise DatabaseError(
                f"{operation.capitalize()} failed: {e}",
                operation=operation,
                table=self.model.__tablename__,
            ) from e

    # ==================== Create Operations ====================

    def create(self, entity: ModelType, commit: bool = True) -> ModelType:
        """
        Persist a new entity.

        Raises:
            DuplicateEntryError: If a unique constraint is violated
            DatabaseError: On any other database failure
        """
        self.db.add(entity)
        self._finish(entity, commit, "create")
        logger.info(f"Created {self.model.__name__} with id: {entity.id}")
        return entity

    # ==================== Read Operations ====================

    def find_by_id(self, id: Any) -> Optional[ModelType]:
        """Find entity by primary key or return None."""
        try:
            return self.db.get(self.model, id)
        except SQLAlchemyError as e:
            raise DatabaseError(
                f"Find by ID failed: {e}", operation="read", table=self.model.__tablename__
            ) from e

    def get_by_id(self, id: Any) -> ModelType:
        """
        Get entity by ID or raise.

        Raises:
            ResourceNotFoundError: (or the repository's specific subclass)
        """
        entity = self.find_by_id(id)
        if entity is None:
            if self.not_found_error is not None:
                raise self.not_found_error(id)
            raise ResourceNotFoundError(self.model.__name__, id)
        return entity

    def find_all(self, order_by: Optional[List[str]] = None) -> List[ModelType]:
        """Return every entity, optionally ordered."""
        return self.find_by_criteria({}, order_by=order_by)

    def find_by_criteria(
        self,
        criteria: Dict[str, Any],
        order_by: Optional[List[str]] = None,
    ) -> List[ModelType]:
        """
        Find entities matching equality criteria.

        Args:
            criteria: Filter criteria as column/value pairs; None values are skipped
            order_by: Fields to order by (prefix with - for desc)
        """
        stmt = select(self.model)
        for key, value in criteria.items():
            if value is None or not hasattr(self.model, key):
                continue
            column = getattr(self.model, key)
            if isinstance(value, (list, tuple, set)):
                stmt = stmt.where(column.in_(value))
            else:
                stmt = stmt.where(column == value)

        for field in order_by or ["id"]:
            if field.startswith('-'):
                stmt = stmt.order_by(getattr(self.model, field[1:]).desc())
            else:
                stmt = stmt.order_by(getattr(self.model, field))

        try:
            return list(self.db.scalars(stmt).all())
        except SQLAlchemyError as e:
            raise DatabaseError(
                f"Find by criteria failed: {e}", operation="read", table=self.model.__tablename__
            ) from e

    # ==================== Update Operations ====================

    def update(self, entity: ModelType, data: Dict[str, Any], commit: bool = True) -> ModelType:
        """
        Apply field values to an entity.

        Unknown keys are ignored.
        """
        for key, value in data.items():
            if hasattr(entity, key):
                setattr(entity, key, value)

        self._finish(entity, commit, "update")
        logger.info(f"Updated {self.model.__name__} with id: {entity.id}")
        return entity

    # ==================== Delete Operations ====================

    def delete(self, entity: ModelType, commit: bool = True) -> None:
        """Hard delete an entity (ORM cascades apply)."""
        entity_id = entity.id
        self.db.delete(entity)
        self._finish(None, commit, "delete")
        logger.info(f"Deleted {self.model.__name__} with id: {entity_id}")
