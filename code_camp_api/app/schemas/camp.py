"""
Pydantic models for camp data.

``CampCreate`` validates new camps, ``CampUpdate`` carries a partial
update where every field is optional, and ``CampRead`` is the response
shape.  ``CampRead.speakers`` is ``null`` unless the caller asked for
speakers to be included.
"""

from datetime import date
from typing import List, Optional

from pydantic import Field

from .base import ApiModel
from .speaker import SpeakerRead

MONIKER_PATTERN = r"^[A-Za-z0-9_-]+$"


class CampCreate(ApiModel):
    """Schema for creating a camp."""

    moniker: str = Field(..., min_length=1, max_length=50, pattern=MONIKER_PATTERN, examples=["cc2024"])
    name: str = Field(..., min_length=1, max_length=100, examples=["Code Camp"])
    description: Optional[str] = Field(None, max_length=4096)
    location: Optional[str] = Field(None, max_length=255, examples=["Atlanta, GA"])
    length: int = Field(1, gt=0, description="Duration in days")
    event_date: Optional[date] = Field(None, examples=["2024-06-01"])


class CampUpdate(ApiModel):
    """Schema for updating a camp.

    Empty strings, a ``length`` of zero or less and a missing
    ``eventDate`` all mean "keep the stored value".
    """

    name: Optional[str] = Field(None, max_length=100)
    description: Optional[str] = Field(None, max_length=4096)
    location: Optional[str] = Field(None, max_length=255)
    length: Optional[int] = None
    event_date: Optional[date] = None


class CampRead(ApiModel):
    """Camp as returned by the API."""

    id: int
    url: Optional[str] = None
    moniker: str
    name: str
    description: Optional[str] = None
    location: Optional[str] = None
    length: int
    event_date: Optional[date] = None
    speakers: Optional[List[SpeakerRead]] = None
