"""
Base service class providing common functionality for all services.
"""

import logging
from typing import Generic, TypeVar

from sqlalchemy.orm import Session

from hostelmate.repositories.base.base_repository import BaseRepository

TRepo = TypeVar("TRepo", bound=BaseRepository)


class BaseService(Generic[TRepo]):
    """
    Base service with common behaviors:
    - Shared logger and db session
    - Access to the primary repository

    Services raise application exceptions; the API layer renders them.
    """

    def __init__(self, repository: TRepo, db_session: Session):
        """
        Initialize base service.

        Args:
            repository: Repository instance for data access
            db_session: SQLAlchemy database session
        """
        self.repository: TRepo = repository
        self.db: Session = db_session
        self._logger = logging.getLogger(
            f"{self.__class__.__module__}.{self.__class__.__name__}"
        )
