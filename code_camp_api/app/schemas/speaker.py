"""
Pydantic models for speaker data.

``SpeakerModel`` is the request body for both creating and updating a
speaker.  Updates overwrite every field, so omitted optional fields are
cleared.  ``SpeakerRead`` adds the server generated values.
"""

from typing import Optional

from pydantic import Field

from .base import ApiModel


class SpeakerModel(ApiModel):
    name: str = Field(..., min_length=1, max_length=100, examples=["Jane Doe"])
    company_name: Optional[str] = Field(None, max_length=100)
    phone_number: Optional[str] = Field(None, max_length=50)
    website_url: Optional[str] = Field(None, max_length=255)
    twitter_name: Optional[str] = Field(None, max_length=100)
    github_name: Optional[str] = Field(None, max_length=100)
    bio: Optional[str] = Field(None, max_length=4096)
    head_shot_url: Optional[str] = Field(None, max_length=255)


class SpeakerRead(SpeakerModel):
    """Speaker as returned by the API."""

    id: int
    url: Optional[str] = None
    camp_moniker: Optional[str] = None
