"""
FastAPI dependencies that assemble a service per request.

Each request opens its own SQLite connection wrapped in a
``CampRepository`` (its unit of work) and closes it when the response
has been produced.
"""

from typing import AsyncIterator

from fastapi import Depends, HTTPException, Request

from ..core.config import Settings
from ..core.db import get_connection
from ..core.errors import ServiceError
from ..data.repository import CampRepository
from ..services.camp_service import CampService
from ..services.mapping import CampMapper, SpeakerMapper, UrlResolver
from ..services.speaker_service import SpeakerService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


async def get_repository(settings: Settings = Depends(get_settings)) -> AsyncIterator[CampRepository]:
    conn = get_connection(settings.database_path)
    try:
        yield CampRepository(conn)
    finally:
        conn.close()


def get_url_resolver(request: Request) -> UrlResolver:
    def resolve(name: str, **path_params) -> str:
        return str(request.url_for(name, **path_params))

    return resolve


def get_camp_service(
    repository: CampRepository = Depends(get_repository),
    url_resolver: UrlResolver = Depends(get_url_resolver),
) -> CampService:
    return CampService(repository, CampMapper(url_resolver))


def get_speaker_service(
    repository: CampRepository = Depends(get_repository),
    url_resolver: UrlResolver = Depends(get_url_resolver),
) -> SpeakerService:
    return SpeakerService(repository, SpeakerMapper(url_resolver))


def to_http_exception(error: ServiceError) -> HTTPException:
    """Translate a service error into the response the client sees."""
    return HTTPException(status_code=error.status_code, detail=error.detail)
