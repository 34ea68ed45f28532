"""
Camp endpoints.

Listing and reading camps is public.  Creating, updating and deleting
require the caller to pass the application's authorization policy.
``PUT`` and ``PATCH`` share one handler and both perform a partial
update.
"""

from typing import List

from fastapi import APIRouter, Depends, Query, Response, status

from ...core.errors import ServiceError
from ...core.security import require_authorization
from ...schemas.camp import CampCreate, CampRead, CampUpdate
from ...services.camp_service import CampService
from ..deps import get_camp_service, to_http_exception

router = APIRouter()


@router.get("", response_model=List[CampRead])
async def list_camps(service: CampService = Depends(get_camp_service)) -> List[CampRead]:
    """Return all camps."""
    return await service.list_camps()


@router.get("/{camp_id}", response_model=CampRead, name="get_camp")
async def get_camp(
    camp_id: int,
    include_speakers: bool = Query(False, alias="includeSpeakers"),
    service: CampService = Depends(get_camp_service),
) -> CampRead:
    """Retrieve a single camp, optionally with its speakers.

    Raises 404 if the camp does not exist.
    """
    try:
        return await service.get_camp(camp_id, include_speakers)
    except ServiceError as e:
        raise to_http_exception(e) from e


@router.post(
    "",
    response_model=CampRead,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_authorization)],
)
async def create_camp(
    camp: CampCreate,
    response: Response,
    service: CampService = Depends(get_camp_service),
) -> CampRead:
    """Create a camp.  The ``Location`` header points at the new resource."""
    try:
        created = await service.create_camp(camp)
    except ServiceError as e:
        raise to_http_exception(e) from e
    response.headers["Location"] = created.url
    return created


@router.api_route(
    "/{camp_id}",
    methods=["PUT", "PATCH"],
    response_model=CampRead,
    dependencies=[Depends(require_authorization)],
)
async def update_camp(
    camp_id: int,
    updates: CampUpdate,
    service: CampService = Depends(get_camp_service),
) -> CampRead:
    """Update the provided fields of a camp; everything else is kept."""
    try:
        return await service.update_camp(camp_id, updates)
    except ServiceError as e:
        raise to_http_exception(e) from e


@router.delete(
    "/{camp_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_authorization)],
)
async def delete_camp(camp_id: int, service: CampService = Depends(get_camp_service)) -> None:
    """Delete a camp together with its speakers."""
    try:
        await service.delete_camp(camp_id)
    except ServiceError as e:
        raise to_http_exception(e) from e
    return None
