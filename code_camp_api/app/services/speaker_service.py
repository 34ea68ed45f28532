"""
Business logic for speakers.

Speakers are always addressed through the moniker of their camp.  A
speaker that exists but belongs to a different camp is reported as a
``ScopeMismatchError`` rather than as missing.
"""

import logging
from typing import List

from ..core.errors import BadInputError, NotFoundError, ScopeMismatchError
from ..data.entities import Speaker
from ..data.repository import CampRepository
from ..schemas.speaker import SpeakerModel, SpeakerRead
from .base import commit, operation_boundary
from .mapping import SpeakerMapper

logger = logging.getLogger(__name__)

CREATE_ERROR = "create speaker error"
UPDATE_ERROR = "update speaker error"
DELETE_ERROR = "delete speaker error"


def ensure_in_camp(speaker: Speaker, moniker: str) -> Speaker:
    if speaker.camp is None or speaker.camp.moniker != moniker:
        raise ScopeMismatchError()
    return speaker


class SpeakerService:
    """Service for managing the speakers of a camp."""

    def __init__(self, repository: CampRepository, mapper: SpeakerMapper):
        self.repository = repository
        self.mapper = mapper

    def _load(self, moniker: str, speaker_id: int) -> Speaker:
        speaker = self.repository.get_speaker(speaker_id)
        if speaker is None:
            raise NotFoundError(f"Speaker {speaker_id} not found.")
        return ensure_in_camp(speaker, moniker)

    async def list_speakers(self, moniker: str) -> List[SpeakerRead]:
        with operation_boundary(logger, "list speakers"):
            speakers = self.repository.list_speakers_by_moniker(moniker)
            return [self.mapper.to_transfer_model(s) for s in speakers]

    async def get_speaker(self, moniker: str, speaker_id: int) -> SpeakerRead:
        with operation_boundary(logger, "get speaker"):
            return self.mapper.to_transfer_model(self._load(moniker, speaker_id))

    async def create_speaker(self, moniker: str, data: SpeakerModel) -> SpeakerRead:
        """Attach a new speaker to the camp named by ``moniker``."""
        with operation_boundary(logger, "create speaker", CREATE_ERROR):
            camp = self.repository.get_camp_by_moniker(moniker)
            if camp is None:
                raise BadInputError(f"could not find camp moniker {moniker}")
            speaker = self.mapper.to_entity(data)
            speaker.camp = camp
            self.repository.add(speaker)
            await commit(self.repository, logger, "Could not save speaker.", CREATE_ERROR)
            logger.info("Created speaker %s in camp %s", speaker.id, moniker)
            return self.mapper.to_transfer_model(speaker)

    async def update_speaker(self, moniker: str, speaker_id: int, data: SpeakerModel) -> SpeakerRead:
        """Replace every profile field of the speaker with ``data``."""
        with operation_boundary(logger, "update speaker", UPDATE_ERROR):
            speaker = self._load(moniker, speaker_id)
            self.mapper.apply_model_to_entity(data, speaker)
            if self.repository.has_changes():
                await commit(self.repository, logger, f"Could not update speaker {speaker_id}.", UPDATE_ERROR)
            return self.mapper.to_transfer_model(speaker)

    async def delete_speaker(self, moniker: str, speaker_id: int) -> None:
        with operation_boundary(logger, "delete speaker", DELETE_ERROR):
            speaker = self._load(moniker, speaker_id)
            self.repository.delete(speaker)
            await commit(self.repository, logger, f"Could not delete speaker {speaker_id}.", DELETE_ERROR)
