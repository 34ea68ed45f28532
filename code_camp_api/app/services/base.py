"""
Helpers shared by the resource services.

``operation_boundary`` wraps the body of a service operation: typed
``ServiceError`` exceptions pass through untouched, anything else is
logged with its traceback and replaced by an ``OperationFailedError``
of kind ``UNEXPECTED``.  ``commit`` runs the unit of work and raises a
``PERSISTENCE`` failure when nothing was written.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from ..core.errors import FailureKind, OperationFailedError, ServiceError
from ..data.repository import CampRepository


@contextmanager
def operation_boundary(
    logger: logging.Logger,
    action: str,
    failure_detail: Optional[str] = None,
) -> Iterator[None]:
    try:
        yield
    except ServiceError:
        raise
    except Exception as exc:
        logger.exception("%s exception", action)
        raise OperationFailedError(FailureKind.UNEXPECTED, failure_detail) from exc


async def commit(
    repository: CampRepository,
    logger: logging.Logger,
    warning: str,
    failure_detail: Optional[str] = None,
) -> None:
    if not await repository.save_all():
        logger.warning(warning)
        raise OperationFailedError(FailureKind.PERSISTENCE, failure_detail)
