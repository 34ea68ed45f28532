"""
Persistent entities.

These are the objects the repository loads and tracks.  They are never
returned to clients directly; the mappers in ``services.mapping`` turn
them into transfer models.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional


@dataclass
class Camp:
    moniker: str
    name: str
    description: Optional[str] = None
    location: Optional[str] = None
    length: int = 1
    event_date: Optional[date] = None
    id: Optional[int] = None
    # ``None`` means the speakers were not loaded, not that there are none.
    speakers: Optional[List["Speaker"]] = field(default=None, repr=False, compare=False)


@dataclass
class Speaker:
    name: str
    company_name: Optional[str] = None
    phone_number: Optional[str] = None
    website_url: Optional[str] = None
    twitter_name: Optional[str] = None
    github_name: Optional[str] = None
    bio: Optional[str] = None
    head_shot_url: Optional[str] = None
    id: Optional[int] = None
    camp: Optional[Camp] = field(default=None, repr=False, compare=False)
