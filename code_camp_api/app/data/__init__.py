"""
Persistence layer: entities and the SQLite repository.
"""

from .entities import Camp, Speaker  # noqa: F401
from .repository import CampRepository  # noqa: F401
