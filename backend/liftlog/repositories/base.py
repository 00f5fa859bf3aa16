# liftlog/repositories/base.py
from __future__ import annotations
import logging
from typing import Generic, TypeVar

from sqlalchemy.exc import DataError, IntegrityError
from sqlalchemy.orm import Session

from liftlog.errors import InvalidValue, classify_integrity_error

T = TypeVar("T")  # SQLAlchemy model type

log = logging.getLogger(__name__)

class BaseRepository(Generic[T]):
    """Lightweight base for repositories using SQLAlchemy 2.0 style."""
    def __init__(self, db: Session):
        self.db = db

    def commit(self) -> None:
        """Commit, turning constraint violations into domain errors."""
        self._guarded(self.db.commit)

    def flush(self) -> None:
        self._guarded(self.db.flush)

    def _guarded(self, op) -> None:
        try:
            op()
        except IntegrityError as e:
            self.db.rollback()
            err = classify_integrity_error(e)
            log.info("integrity error in %s: %s", type(self).__name__, err.message)
            raise err from e
        except DataError as e:
            self.db.rollback()
            err = InvalidValue()
            log.info("rejected value in %s: %s", type(self).__name__, e.orig)
            raise err from e

    def add_and_refresh(self, entity: T) -> T:
        self.db.add(entity)
        self.commit()
        self.db.refresh(entity)
        return entity
