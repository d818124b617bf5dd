"""Anonymous capture of simulated voting intentions.

:class:`IntentionRecorder` stores one row per session and one row per ballot
column each time a voter checks a ballot. Capture is fire and forget: storage
errors are logged and never reach the simulator, which keeps working offline or
with a read-only database.
"""

from __future__ import annotations

import logging
import sqlite3
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, List, Optional

from ballot.selection import BallotSelection
from ballot.validator import BallotClassification, VoteStatus
from roster.models import OfficeType, SimulatorDataset

from .session import SessionContext

__all__ = ["IntentionRecorder", "VoteIntention", "build_intentions"]

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class VoteIntention:
    """Outcome of one ballot column, without any voter identity."""

    office: OfficeType
    organization_id: Optional[int]
    organization_name: str
    is_blank: bool
    is_null: bool
    is_valid: bool

    def as_tuple(self, session: SessionContext) -> tuple:
        return (
            session.token,
            self.office.value,
            self.organization_id,
            self.organization_name,
            int(self.is_blank),
            int(self.is_null),
            int(self.is_valid),
            session.region,
            datetime.now(timezone.utc).isoformat(),
        )


def build_intentions(
    selection: BallotSelection,
    classification: BallotClassification,
    dataset: SimulatorDataset | None = None,
) -> List[VoteIntention]:
    """Derive one :class:`VoteIntention` per ballot column.

    Organization names are resolved through ``dataset`` when available.
    Unmarked columns are reported as blank.
    """

    intentions: List[VoteIntention] = []
    for office in OfficeType:
        if office is OfficeType.PRESIDENTIAL_TICKET:
            list_id = selection.presidential_ticket
        else:
            column = selection.column(office)
            list_id = column.list_id if column is not None else None

        if list_id is None:
            intentions.append(
                VoteIntention(
                    office=office,
                    organization_id=None,
                    organization_name="",
                    is_blank=True,
                    is_null=False,
                    is_valid=False,
                )
            )
            continue

        name = ""
        if dataset is not None:
            electoral_list = dataset.find_list(office, list_id)
            if electoral_list is not None:
                name = electoral_list.organization.name
        result = classification.columns.get(office)
        is_null = result is not None and result.status is VoteStatus.NULL
        intentions.append(
            VoteIntention(
                office=office,
                organization_id=list_id,
                organization_name=name,
                is_blank=False,
                is_null=is_null,
                is_valid=not is_null,
            )
        )
    return intentions


class IntentionRecorder:
    """Persist anonymous sessions and voting intentions in SQLite."""

    def __init__(self, db_path: Path | str = Path("data/analytics.db")) -> None:
        """Open or create the analytics database.

        Raises
        ------
        sqlite3.Error, OSError
            If the database cannot be created; callers decide whether to run
            without analytics.
        """

        self.db_path = Path(db_path)
        if self.db_path.parent:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._initialise_db()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def start_session(self, session: SessionContext) -> bool:
        """Store ``session`` once; returns ``False`` when storage failed."""

        try:
            with sqlite3.connect(self.db_path) as conn:
                conn.execute(
                    """
                    INSERT INTO sessions (
                        session_token,
                        country,
                        region,
                        is_mobile,
                        utm_source,
                        utm_medium,
                        utm_campaign,
                        referrer,
                        created_at
                    ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                    ON CONFLICT(session_token) DO NOTHING
                    """,
                    (
                        session.token,
                        session.country,
                        session.region,
                        int(session.is_mobile),
                        session.utm_source,
                        session.utm_medium,
                        session.utm_campaign,
                        session.referrer,
                        datetime.now(timezone.utc).isoformat(),
                    ),
                )
                conn.commit()
        except sqlite3.Error as exc:
            LOGGER.warning("Could not store analytics session: %s", exc)
            return False
        return True

    def record(self, session: SessionContext, intentions: Iterable[VoteIntention]) -> int:
        """Store ``intentions`` for ``session`` and return the number written."""

        rows = [intention.as_tuple(session) for intention in intentions]
        if not session.token or not rows:
            return 0
        try:
            with sqlite3.connect(self.db_path) as conn:
                conn.executemany(
                    """
                    INSERT INTO vote_intentions (
                        session_token,
                        office,
                        organization_id,
                        organization_name,
                        is_blank,
                        is_null,
                        is_valid,
                        session_region,
                        created_at
                    ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    rows,
                )
                conn.commit()
        except sqlite3.Error as exc:
            LOGGER.warning("Could not store %d voting intentions: %s", len(rows), exc)
            return 0
        return len(rows)

    def fetch_intentions(self, session_token: str) -> List[dict]:
        """Return the intentions stored for ``session_token``, oldest first.

        Diagnostic helper for tests and offline inspection; the API never reads
        intentions back.
        """

        with sqlite3.connect(self.db_path) as conn:
            conn.row_factory = sqlite3.Row
            cursor = conn.execute(
                """
                SELECT office, organization_id, organization_name, is_blank, is_null, is_valid
                FROM vote_intentions
                WHERE session_token = ?
                ORDER BY id
                """,
                (session_token,),
            )
            return [dict(row) for row in cursor.fetchall()]

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _initialise_db(self) -> None:
        with sqlite3.connect(self.db_path) as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS sessions (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    session_token TEXT NOT NULL UNIQUE,
                    country TEXT,
                    region TEXT,
                    is_mobile INTEGER NOT NULL DEFAULT 0,
                    utm_source TEXT,
                    utm_medium TEXT,
                    utm_campaign TEXT,
                    referrer TEXT,
                    created_at TEXT NOT NULL
                )
                """
            )
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS vote_intentions (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    session_token TEXT NOT NULL,
                    office TEXT NOT NULL,
                    organization_id INTEGER,
                    organization_name TEXT,
                    is_blank INTEGER NOT NULL,
                    is_null INTEGER NOT NULL,
                    is_valid INTEGER NOT NULL,
                    session_region TEXT,
                    created_at TEXT NOT NULL
                )
                """
            )
            conn.commit()
