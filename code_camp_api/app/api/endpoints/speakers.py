"""
Speaker endpoints, nested under ``/camps/{moniker}/speakers``.

Every single-speaker route checks that the speaker belongs to the camp
named in the path and answers 400 when it does not.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from ...core.errors import ServiceError
from ...core.security import require_authorization
from ...schemas.speaker import SpeakerModel, SpeakerRead
from ...services.speaker_service import SpeakerService
from ..deps import get_speaker_service, to_http_exception

router = APIRouter()


@router.get("", response_model=List[SpeakerRead])
async def list_speakers(
    moniker: str,
    service: SpeakerService = Depends(get_speaker_service),
) -> List[SpeakerRead]:
    try:
        return await service.list_speakers(moniker)
    except ServiceError as e:
        raise to_http_exception(e) from e


@router.get("/{speaker_id}", response_model=SpeakerRead, name="get_speaker")
async def get_speaker(
    moniker: str,
    speaker_id: int,
    service: SpeakerService = Depends(get_speaker_service),
) -> SpeakerRead:
    try:
        return await service.get_speaker(moniker, speaker_id)
    except ServiceError as e:
        raise to_http_exception(e) from e


@router.post(
    "",
    response_model=SpeakerRead,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_authorization)],
)
async def create_speaker(
    moniker: str,
    speaker: SpeakerModel,
    response: Response,
    service: SpeakerService = Depends(get_speaker_service),
) -> SpeakerRead:
    """Add a speaker to the camp identified by ``moniker``."""
    try:
        created = await service.create_speaker(moniker, speaker)
    except ServiceError as e:
        raise to_http_exception(e) from e
    response.headers["Location"] = created.url
    return created


@router.api_route(
    "/{speaker_id}",
    methods=["PUT", "PATCH"],
    response_model=SpeakerRead,
    dependencies=[Depends(require_authorization)],
)
async def update_speaker(
    moniker: str,
    speaker_id: int,
    speaker: SpeakerModel,
    service: SpeakerService = Depends(get_speaker_service),
) -> SpeakerRead:
    """Replace the speaker's profile with the request body."""
    try:
        return await service.update_speaker(moniker, speaker_id, speaker)
    except ServiceError as e:
        raise to_http_exception(e) from e


@router.delete(
    "/{speaker_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_authorization)],
)
async def delete_speaker(
    moniker: str,
    speaker_id: int,
    service: SpeakerService = Depends(get_speaker_service),
) -> None:
    try:
        await service.delete_speaker(moniker, speaker_id)
    except ServiceError as e:
        raise to_http_exception(e) from e
    return None
