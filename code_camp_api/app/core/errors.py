"""
Error taxonomy shared by the resource services.

Every failure a service reports is a ``ServiceError`` carrying the HTTP
status and the detail shown to the client.  ``OperationFailedError``
keeps the reason (a commit that persisted nothing, or an unexpected
exception) in ``kind`` while exposing a single generic detail, so
callers see one response for both.
"""

import enum
from typing import Optional

from fastapi import status


class ServiceError(Exception):
    """Base class for errors raised by the service layer."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, detail: Optional[str] = None):
        super().__init__(detail or self.__class__.__name__)
        self.detail = detail


class NotFoundError(ServiceError):
    """The requested id has no entity."""

    status_code = status.HTTP_404_NOT_FOUND


class ScopeMismatchError(ServiceError):
    """The speaker exists but belongs to another camp."""

    def __init__(self, detail: Optional[str] = "Speaker not in specified camp"):
        super().__init__(detail)


class BadInputError(ServiceError):
    """The request references something that cannot be used, e.g. an unknown camp moniker."""


class FailureKind(enum.Enum):
    PERSISTENCE = "persistence"
    UNEXPECTED = "unexpected"


class OperationFailedError(ServiceError):
    """Generic failure of a write or lookup."""

    def __init__(self, kind: FailureKind, detail: Optional[str] = None):
        super().__init__(detail)
        self.kind = kind
