"""
Service base class and the timing decorator used by service operations.
"""

import time
from contextlib import contextmanager
from functools import wraps
from typing import Any, Generic, Iterator, List, TypeVar

from sqlalchemy.orm import Session

from hotel_booking.core.exceptions import BaseAppException
from hotel_booking.core.logging import get_logger
from hotel_booking.repositories.base import BaseRepository

TModel = TypeVar("TModel")
TRepo = TypeVar("TRepo", bound=BaseRepository)

logger = get_logger(__name__)


def track_performance(operation_name: str):
    """
    Log the duration of a service call.

    Unexpected failures are logged at error level with the elapsed time;
    application exceptions pass through quietly since their handler logs them.
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            started = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except BaseAppException:
                raise
            except Exception as e:
                logger.error(
                    f"{operation_name} failed: {e}",
                    extra={"operation": operation_name, "duration": time.perf_counter() - started},
                )
                raise
            logger.debug(
                f"{operation_name} done",
                extra={"operation": operation_name, "duration": time.perf_counter() - started},
            )
            return result
        return wrapper
    return decorator


class BaseService(Generic[TModel, TRepo]):
    """Holds the session and primary repository; provides get/list/delete."""

    def __init__(self, repository: TRepo, db_session: Session):
        self.repository: TRepo = repository
        self.db: Session = db_session
        self._logger = get_logger(type(self).__module__).bind(service=type(self).__name__)

    @contextmanager
    def transaction(self) -> Iterator[Session]:
        """
        Commit on success, roll back on any error.

        Repository writes inside the block should pass ``commit=False``.
        """
        try:
            yield self.db
            self.db.commit()
        except BaseAppException:
            self.db.rollback()
            raise
        except Exception:
            self.db.rollback()
            self._logger.exception("Transaction rolled back")
            raise

    def get(self, entity_id: Any) -> TModel:
        return self.repository.get_by_id(entity_id)

    def list_all(self) -> List[TModel]:
        return self.repository.find_all()

    def delete(self, entity_id: Any) -> None:
        self.repository.delete(self.repository.get_by_id(entity_id))
