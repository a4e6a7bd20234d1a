"""
SQLite pursuit store — durable backend for the three participant maps.

Each mutating call commits immediately, so a crash never loses an
acknowledged write. Tables are independent: deleting a pursuit row
does not touch the priority or deadline rows for the same key.
"""

import logging
import sqlite3
from typing import Dict, Optional

from pursuit_registry.models.pursuit import DeadlineEntry, PriorityEntry, PursuitRecord
from pursuit_registry.store.base import PursuitStore

logger = logging.getLogger(__name__)


class SQLitePursuitStore(PursuitStore):
    """
    Pursuit store backed by SQLite.
    Defaults to an in-memory database; pass a file path to persist.
    """

    def __init__(self, db_path: str = ":memory:"):
        self.db_path = db_path
        self._conn = sqlite3.connect(db_path, check_same_thread=False)
        self._conn.row_factory = sqlite3.Row
        self._init_schema()

    def _init_schema(self) -> None:
        """Create the three tables if they don't exist."""
        self._conn.execute("""
            CREATE TABLE IF NOT EXISTS pursuits (
                participant TEXT PRIMARY KEY,
                description TEXT NOT NULL,
                completed INTEGER NOT NULL DEFAULT 0
            )
        """)
        self._conn.execute("""
            CREATE TABLE IF NOT EXISTS priorities (
                participant TEXT PRIMARY KEY,
                weight INTEGER NOT NULL
            )
        """)
        self._conn.execute("""
            CREATE TABLE IF NOT EXISTS deadlines (
                participant TEXT PRIMARY KEY,
                target INTEGER NOT NULL,
                alert INTEGER NOT NULL DEFAULT 0
            )
        """)
        self._conn.commit()
        logger.debug(f"Pursuit store schema ready at {self.db_path}")

    def _delete(self, table: str, participant: str) -> bool:
        cursor = self._conn.execute(
            f"DELETE FROM {table} WHERE participant = ?", (participant,)
        )
        self._conn.commit()
        return cursor.rowcount > 0

    # --- Pursuit map ---

    def get_pursuit(self, participant: str) -> Optional[PursuitRecord]:
        row = self._conn.execute(
            "SELECT description, completed FROM pursuits WHERE participant = ?",
            (participant,),
        ).fetchone()
        if not row:
            return None
        return PursuitRecord(
            description=row["description"],
            completed=bool(row["completed"]),
        )

    def put_pursuit(self, participant: str, record: PursuitRecord) -> None:
        self._conn.execute(
            """
            INSERT INTO pursuits (participant, description, completed)
            VALUES (?, ?, ?)
            ON CONFLICT(participant) DO UPDATE SET
                description = excluded.description,
                completed = excluded.completed
            """,
            (participant, record.description, int(record.completed)),
        )
        self._conn.commit()

    def delete_pursuit(self, participant: str) -> bool:
        return self._delete("pursuits", participant)

    def all_pursuits(self) -> Dict[str, PursuitRecord]:
        rows = self._conn.execute(
            "SELECT participant, description, completed FROM pursuits ORDER BY rowid"
        ).fetchall()
        return {
            r["participant"]: PursuitRecord(
                description=r["description"],
                completed=bool(r["completed"]),
            )
            for r in rows
        }

    # --- Priority map ---

    def get_priority(self, participant: str) -> Optional[PriorityEntry]:
        row = self._conn.execute(
            "SELECT weight FROM priorities WHERE participant = ?", (participant,)
        ).fetchone()
        return PriorityEntry(weight=row["weight"]) if row else None

    def put_priority(self, participant: str, entry: PriorityEntry) -> None:
        self._conn.execute(
            """
            INSERT INTO priorities (participant, weight) VALUES (?, ?)
            ON CONFLICT(participant) DO UPDATE SET weight = excluded.weight
            """,
            (participant, entry.weight),
        )
        self._conn.commit()

    def delete_priority(self, participant: str) -> bool:
        return self._delete("priorities", participant)

    def all_priorities(self) -> Dict[str, PriorityEntry]:
        rows = self._conn.execute(
            "SELECT participant, weight FROM priorities ORDER BY rowid"
        ).fetchall()
        return {r["participant"]: PriorityEntry(weight=r["weight"]) for r in rows}

    # --- Deadline map ---

    def get_deadline(self, participant: str) -> Optional[DeadlineEntry]:
        row = self._conn.execute(
            "SELECT target, alert FROM deadlines WHERE participant = ?",
            (participant,),
        ).fetchone()
        if not row:
            return None
        return DeadlineEntry(target=row["target"], alert=bool(row["alert"]))

    def put_deadline(self, participant: str, entry: DeadlineEntry) -> None:
        self._conn.execute(
            """
            INSERT INTO deadlines (participant, target, alert) VALUES (?, ?, ?)
            ON CONFLICT(participant) DO UPDATE SET
                target = excluded.target,
                alert = excluded.alert
            """,
            (participant, entry.target, int(entry.alert)),
        )
        self._conn.commit()

    def delete_deadline(self, participant: str) -> bool:
        return self._delete("deadlines", participant)

    def all_deadlines(self) -> Dict[str, DeadlineEntry]:
        rows = self._conn.execute(
            "SELECT participant, target, alert FROM deadlines ORDER BY rowid"
        ).fetchall()
        return {
            r["participant"]: DeadlineEntry(target=r["target"], alert=bool(r["alert"]))
            for r in rows
        }

    def delete_participant(self, participant: str) -> bool:
        """Delete all three rows for a key in a single transaction."""
        with self._conn:
            cursor = self._conn.execute(
                "DELETE FROM pursuits WHERE participant = ?", (participant,)
            )
            self._conn.execute(
                "DELETE FROM priorities WHERE participant = ?", (participant,)
            )
            self._conn.execute(
                "DELETE FROM deadlines WHERE participant = ?", (participant,)
            )
        return cursor.rowcount > 0

    def close(self) -> None:
        """Close the database connection."""
        self._conn.close()
