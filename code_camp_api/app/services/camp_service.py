"""
Business logic for camps.

``CampService`` works against a ``CampRepository`` unit of work and a
``CampMapper``.  Every operation either completes and commits or
raises a ``ServiceError``; lookups and writes that fail for an
unexpected reason are reported as a generic ``OperationFailedError``.
"""

import logging
from datetime import date
from typing import List

from ..core.errors import NotFoundError
from ..data.entities import Camp
from ..data.repository import CampRepository
from ..schemas.camp import CampCreate, CampRead, CampUpdate
from .base import commit, operation_boundary
from .mapping import CampMapper

logger = logging.getLogger(__name__)


def apply_camp_patch(camp: Camp, patch: CampUpdate) -> Camp:
    """Copy the provided values of ``patch`` onto ``camp``.

    A value counts as provided when it is a non-empty string, a length
    greater than zero or an event date other than ``None``/``date.min``.
    """
    camp.name = patch.name or camp.name
    camp.description = patch.description or camp.description
    camp.location = patch.location or camp.location
    if patch.length is not None and patch.length > 0:
        camp.length = patch.length
    if patch.event_date is not None and patch.event_date != date.min:
        camp.event_date = patch.event_date
    return camp


class CampService:
    """Service for managing camps."""

    def __init__(self, repository: CampRepository, mapper: CampMapper):
        self.repository = repository
        self.mapper = mapper

    async def list_camps(self) -> List[CampRead]:
        return [self.mapper.to_transfer_model(camp) for camp in self.repository.list_camps()]

    async def get_camp(self, camp_id: int, include_speakers: bool = False) -> CampRead:
        """Return one camp, with its speakers when ``include_speakers`` is set."""
        with operation_boundary(logger, "get camp"):
            if include_speakers:
                camp = self.repository.get_camp_with_speakers(camp_id)
            else:
                camp = self.repository.get_camp(camp_id)
            if camp is None:
                raise NotFoundError(f"Camp {camp_id} not found.")
            return self.mapper.to_transfer_model(camp)

    async def create_camp(self, data: CampCreate) -> CampRead:
        """Persist a new camp and return it with its assigned id."""
        with operation_boundary(logger, "Save camp"):
            logger.info("Creating new camp %s", data.moniker)
            camp = self.mapper.to_entity(data)
            self.repository.add(camp)
            await commit(self.repository, logger, "Could not save camp.")
            return self.mapper.to_transfer_model(camp)

    async def update_camp(self, camp_id: int, patch: CampUpdate) -> CampRead:
        """Apply a partial update.

        Fields missing from ``patch`` keep their stored values.  A patch
        that changes nothing is not an error.
        """
        with operation_boundary(logger, "update camp"):
            camp = self.repository.get_camp(camp_id)
            if camp is None:
                raise NotFoundError(f"Could not find camp id {camp_id}")
            apply_camp_patch(camp, patch)
            if self.repository.has_changes():
                await commit(self.repository, logger, f"Could not update camp {camp_id}.")
            return self.mapper.to_transfer_model(camp)

    async def delete_camp(self, camp_id: int) -> None:
        with operation_boundary(logger, "delete camp"):
            camp = self.repository.get_camp(camp_id)
            if camp is None:
                raise NotFoundError(f"Could not find camp id {camp_id}")
            self.repository.delete(camp)
            await commit(self.repository, logger, f"Could not delete camp {camp_id}.")
            logger.info("Deleted camp %s (%s)", camp_id, camp.moniker)
