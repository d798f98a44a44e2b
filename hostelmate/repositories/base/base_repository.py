"""
Generic data access shared by the user and complaint repositories.

Every write commits (or rolls back) inside the repository, and database
failures surface as application exceptions rather than SQLAlchemy ones.
"""

import logging
from contextlib import contextmanager
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.sql import Select

from hostelmate.core.exceptions import ConflictError, DatabaseError
from hostelmate.models.base import BaseModel

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=BaseModel)


class BaseRepository(Generic[ModelType]):
    """Session-bound access to one mapped table."""

    def __init__(self, model: Type[ModelType], db: Session):
        self.model = model
        self.db = db

    @property
    def _name(self) -> str:
        return self.model.__name__

    # -- transactions --

    @contextmanager
    def transaction(self):
        """
        Commit on clean exit, roll back on any error.

        ``IntegrityError`` becomes ``ConflictError``; other SQLAlchemy
        failures become ``DatabaseError``. Anything else is re-raised as is.
        """
        try:
            yield self.db
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.error(f"{self._name} write rolled back: {e}")
            raise ConflictError(f"{self._name} violates a uniqueness constraint") from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"{self._name} write rolled back: {e}", exc_info=True)
            raise DatabaseError(f"Transaction failed on {self._name}") from e
        except Exception:
            self.db.rollback()
            raise

    # -- writes --

    def create(self, entity: ModelType, commit: bool = True) -> ModelType:
        """
        Add ``entity`` to the session.

        With ``commit=False`` the row is only flushed, so its defaults are
        populated but the caller owns the commit.
        """
        try:
            self.db.add(entity)
            if commit:
                self.db.commit()
                self.db.refresh(entity)
            else:
                self.db.flush()
        except IntegrityError as e:
            self.db.rollback()
            raise ConflictError(f"{self._name} already exists") from e
        except SQLAlchemyError as e:
            self.db.rollback()
            raise DatabaseError(f"Could not insert {self._name}", operation="create") from e

        logger.info(f"Inserted {self._name} {entity.id}")
        return entity

    def update(self, entity: ModelType, data: Dict[str, Any]) -> ModelType:
        """Set each attribute in ``data`` on ``entity`` and commit; unknown keys are skipped."""
        with self.transaction():
            for key, value in data.items():
                if hasattr(entity, key):
                    setattr(entity, key, value)
        self.db.refresh(entity)
        logger.info(f"Updated {self._name} {entity.id}")
        return entity

    # -- reads --

    def find_by_id(self, id: str) -> Optional[ModelType]:
        return self.db.get(self.model, id)

    def find_one(self, **filters: Any) -> Optional[ModelType]:
        """First row whose columns equal ``filters``, or None."""
        return self.db.execute(select(self.model).filter_by(**filters)).scalars().first()

    def find_all(self, query: Optional[Select] = None) -> List[ModelType]:
        if query is None:
            query = select(self.model)
        return list(self.db.execute(query).scalars().all())

    def count(self, query: Optional[Select] = None) -> int:
        """Number of rows ``query`` would return, ignoring its ordering and paging."""
        if query is None:
            query = select(self.model)
        subquery = query.order_by(None).limit(None).offset(None).subquery()
        return self.db.execute(select(func.count()).select_from(subquery)).scalar_one()
