"""
SQLite repository for camps and speakers.

``CampRepository`` wraps one connection and acts as a unit of work:
entities it loads are tracked together with a snapshot of their column
values, ``add`` and ``delete`` only queue work, and ``save_all`` writes
every pending insert, update and delete in one transaction.  Nothing is
visible to other connections until ``save_all`` commits, and a failing
``save_all`` rolls the whole transaction back.

One repository is created per request; instances are not shared.
"""

from __future__ import annotations

import logging
import sqlite3
from datetime import date
from typing import Dict, List, Optional, Tuple, Union

from .entities import Camp, Speaker

logger = logging.getLogger(__name__)

Entity = Union[Camp, Speaker]

CAMP_COLUMNS = ("moniker", "name", "description", "location", "length", "event_date")
SPEAKER_COLUMNS = (
    "name",
    "company_name",
    "phone_number",
    "website_url",
    "twitter_name",
    "github_name",
    "bio",
    "head_shot_url",
)

_TABLES = {Camp: ("camps", CAMP_COLUMNS), Speaker: ("speakers", SPEAKER_COLUMNS)}

# SQLite INTEGER is a signed 64-bit value.
MIN_ROW_ID = -(2 ** 63)
MAX_ROW_ID = 2 ** 63 - 1


def _storable_id(value: int) -> bool:
    return MIN_ROW_ID <= value <= MAX_ROW_ID


def _column_values(entity: Entity) -> tuple:
    _, columns = _TABLES[type(entity)]
    values = []
    for column in columns:
        value = getattr(entity, column)
        if isinstance(value, date):
            value = value.isoformat()
        values.append(value)
    if isinstance(entity, Speaker):
        values.append(entity.camp.id if entity.camp is not None else None)
    return tuple(values)


class CampRepository:
    """Data access and unit of work over a single SQLite connection."""

    def __init__(self, conn: sqlite3.Connection):
        self._conn = conn
        self._tracked: Dict[Tuple[type, int], Tuple[Entity, tuple]] = {}
        self._added: List[Entity] = []
        self._deleted: List[Entity] = []

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_camps(self) -> List[Camp]:
        rows = self._conn.execute("SELECT * FROM camps ORDER BY id").fetchall()
        return [self._camp_from_row(row) for row in rows]

    def get_camp(self, camp_id: int) -> Optional[Camp]:
        if not _storable_id(camp_id):
            return None
        row = self._conn.execute("SELECT * FROM camps WHERE id = ?", (camp_id,)).fetchone()
        return self._camp_from_row(row) if row else None

    def get_camp_with_speakers(self, camp_id: int) -> Optional[Camp]:
        camp = self.get_camp(camp_id)
        if camp is not None:
            rows = self._conn.execute(
                "SELECT * FROM speakers WHERE camp_id = ? ORDER BY id", (camp.id,)
            ).fetchall()
            camp.speakers = [self._speaker_from_row(row, camp) for row in rows]
        return camp

    def get_camp_by_moniker(self, moniker: str) -> Optional[Camp]:
        row = self._conn.execute("SELECT * FROM camps WHERE moniker = ?", (moniker,)).fetchone()
        return self._camp_from_row(row) if row else None

    def get_speaker(self, speaker_id: int) -> Optional[Speaker]:
        if not _storable_id(speaker_id):
            return None
        row = self._conn.execute("SELECT * FROM speakers WHERE id = ?", (speaker_id,)).fetchone()
        if not row:
            return None
        return self._speaker_from_row(row, self.get_camp(row["camp_id"]))

    def list_speakers_by_moniker(self, moniker: str) -> List[Speaker]:
        camp = self.get_camp_by_moniker(moniker)
        if camp is None:
            return []
        rows = self._conn.execute(
            "SELECT * FROM speakers WHERE camp_id = ? ORDER BY id", (camp.id,)
        ).fetchall()
        return [self._speaker_from_row(row, camp) for row in rows]

    # ------------------------------------------------------------------
    # Unit of work
    # ------------------------------------------------------------------

    def add(self, entity: Entity) -> None:
        self._added.append(entity)

    def delete(self, entity: Entity) -> None:
        self._deleted.append(entity)

    def has_changes(self) -> bool:
        """Whether ``save_all`` would write anything."""
        return bool(self._added or self._deleted or self._dirty())

    async def save_all(self) -> bool:
        """Persist all pending changes in one transaction.

        Returns ``True`` if at least one row was written.  Any error
        rolls the transaction back and is re-raised.
        """
        deleted_ids = {id(entity) for entity in self._deleted}
        affected = 0
        try:
            cursor = self._conn.cursor()
            # Camps first so speakers added in the same unit can reference them.
            for entity in sorted(self._added, key=lambda e: not isinstance(e, Camp)):
                affected += self._insert(cursor, entity)
            for entity in self._dirty():
                if id(entity) not in deleted_ids:
                    affected += self._update(cursor, entity)
            for entity in self._deleted:
                table, _ = _TABLES[type(entity)]
                cursor.execute(f"DELETE FROM {table} WHERE id = ?", (entity.id,))
                affected += cursor.rowcount
            self._conn.commit()
        except Exception:
            self._conn.rollback()
            raise

        for entity in self._added:
            self._track(entity)
        for entity in self._deleted:
            self._tracked.pop((type(entity), entity.id), None)
        for key, (entity, _) in list(self._tracked.items()):
            self._tracked[key] = (entity, _column_values(entity))
        self._added.clear()
        self._deleted.clear()
        logger.debug("Unit of work wrote %s row(s)", affected)
        return affected > 0

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _dirty(self) -> List[Entity]:
        return [
            entity
            for entity, snapshot in self._tracked.values()
            if _column_values(entity) != snapshot
        ]

    def _insert(self, cursor: sqlite3.Cursor, entity: Entity) -> int:
        table, columns = _TABLES[type(entity)]
        if isinstance(entity, Speaker):
            if entity.camp is None or entity.camp.id is None:
                raise ValueError("Speaker must belong to a saved camp")
            columns = columns + ("camp_id",)
        placeholders = ", ".join("?" for _ in columns)
        cursor.execute(
            f"INSERT INTO {table} ({', '.join(columns)}) VALUES ({placeholders})",
            _column_values(entity),
        )
        entity.id = cursor.lastrowid
        return cursor.rowcount

    def _update(self, cursor: sqlite3.Cursor, entity: Entity) -> int:
        table, columns = _TABLES[type(entity)]
        if isinstance(entity, Speaker):
            columns = columns + ("camp_id",)
        assignments = ", ".join(f"{column} = ?" for column in columns)
        cursor.execute(
            f"UPDATE {table} SET {assignments} WHERE id = ?",
            _column_values(entity) + (entity.id,),
        )
        return cursor.rowcount

    def _track(self, entity: Entity) -> Entity:
        key = (type(entity), entity.id)
        if key in self._tracked:
            return self._tracked[key][0]
        self._tracked[key] = (entity, _column_values(entity))
        return entity

    def _camp_from_row(self, row: sqlite3.Row) -> Camp:
        tracked = self._tracked.get((Camp, row["id"]))
        if tracked is not None:
            return tracked[0]
        camp = Camp(
            id=row["id"],
            moniker=row["moniker"],
            name=row["name"],
            description=row["description"],
            location=row["location"],
            length=row["length"],
            event_date=date.fromisoformat(row["event_date"]) if row["event_date"] else None,
        )
        return self._track(camp)

    def _speaker_from_row(self, row: sqlite3.Row, camp: Optional[Camp]) -> Speaker:
        tracked = self._tracked.get((Speaker, row["id"]))
        if tracked is not None:
            return tracked[0]
        speaker = Speaker(
            id=row["id"],
            camp=camp,
            **{column: row[column] for column in SPEAKER_COLUMNS},
        )
        return self._track(speaker)
