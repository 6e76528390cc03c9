"""Shared repository plumbing."""
from contextlib import contextmanager
from typing import Any, Dict, Generic, Optional, Type, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from football_api.app_logging import get_logger
from football_api.errors import ConflictError, InternalError

logger = get_logger(__name__)

ModelT = TypeVar("ModelT")


class BaseRepository(Generic[ModelT]):
    """CRUD against one table.

    Writes commit immediately. Constraint violations raised by the store come
    back as ``ConflictError`` and any other database failure as
    ``InternalError``; the session is rolled back either way.
    """

    model: Type[ModelT]
    entity_name: str = "record"

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, entity_id: int) -> Optional[ModelT]:
        return self.db.get(self.model, entity_id)

    def exists(self, entity_id: int) -> bool:
        return self.db.query(self.model.id).filter(self.model.id == entity_id).first() is not None

    def create(self, values: Dict[str, Any]) -> ModelT:
        entity = self.model(**values)
        with self._writing(f"failed to create {self.entity_name}"):
            self.db.add(entity)
        self.db.refresh(entity)
        return entity

    def update(self, entity_id: int, values: Dict[str, Any]) -> Optional[ModelT]:
        """Apply ``values`` to the row; ``None`` when no row matched."""
        entity = self.get_by_id(entity_id)
        if entity is None:
            return None

        with self._writing(f"failed to update {self.entity_name}"):
            for key, value in values.items():
                setattr(entity, key, value)
        self.db.refresh(entity)
        return entity

    def delete(self, entity_id: int) -> bool:
        """Delete the row; ``False`` when no row matched."""
        with self._writing(f"failed to delete {self.entity_name}"):
            deleted = (
                self.db.query(self.model)
                .filter(self.model.id == entity_id)
                .delete(synchronize_session="fetch")
            )
        return deleted > 0

    @contextmanager
    def _writing(self, failure: str):
        try:
            yield
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.info(f"{failure}: constraint violation: {e.orig}")
            raise ConflictError(f"{self.entity_name} conflicts with existing data: {e.orig}") from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception(failure)
            raise InternalError(f"{failure}: storage error") from e
