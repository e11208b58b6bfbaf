"""SQLite-backed entity storage and user directory."""

import json
import logging
import sqlite3
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterable, Optional

from behat_endpoint.models.entity import Entity, User, get_entity_type_info

from .base import EntityStorage, as_entity_id

logger = logging.getLogger(__name__)


class SqliteBackend(EntityStorage):
    """
    SQLite store for entities of every type plus users.
    Ids are allocated per entity type (nids and tids count independently).
    """

    def __init__(self, db_path: str | Path = "behat_endpoint.db"):
        self._db_path = Path(db_path)
        self._ensure_schema()

    def _connection(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self._db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def _ensure_schema(self) -> None:
        schema_path = Path(__file__).parent / "schema.sql"
        with self._connection() as conn:
            conn.executescript(schema_path.read_text())

    def _serialize_values(self, values: dict[str, Any]) -> str:
        return json.dumps(values, default=str)

    def _row_to_entity(self, row: sqlite3.Row) -> Entity:
        return Entity(
            entity_type=row["entity_type"],
            id=row["id"],
            bundle=row["bundle"],
            label=row["label"],
            values=json.loads(row["data"]),
        )

    def create(self, entity_type: str, values: dict[str, Any]) -> Entity:
        info = get_entity_type_info(entity_type)
        bundle, label = self._describe(entity_type, values)
        now = datetime.now(timezone.utc).isoformat()
        with self._connection() as conn:
            entity_id = self._next_id(conn, entity_type)
            stored = dict(values)
            stored[info.id_key] = entity_id
            conn.execute(
                """
                INSERT INTO entities (entity_type, id, bundle, label, data, created_at)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (entity_type, entity_id, bundle, label, self._serialize_values(stored), now),
            )
            conn.commit()
        logger.debug("Stored %s %d in %s", entity_type, entity_id, self._db_path)
        return Entity(entity_type=entity_type, id=entity_id, bundle=bundle, label=label, values=stored)

    def _next_id(self, conn: sqlite3.Connection, entity_type: str) -> int:
        """Allocate the next id for an entity type. Ids of deleted entities are never reused."""
        conn.execute(
            "INSERT OR IGNORE INTO sequences (entity_type, next_id) "
            "SELECT ?, COALESCE(MAX(id), 0) + 1 FROM entities WHERE entity_type = ?",
            (entity_type, entity_type),
        )
        row = conn.execute(
            "SELECT next_id FROM sequences WHERE entity_type = ?",
            (entity_type,),
        ).fetchone()
        conn.execute(
            "UPDATE sequences SET next_id = next_id + 1 WHERE entity_type = ?",
            (entity_type,),
        )
        return row["next_id"]

    def load(self, entity_type: str, entity_id: int) -> Optional[Entity]:
        with self._connection() as conn:
            row = conn.execute(
                "SELECT * FROM entities WHERE entity_type = ? AND id = ?",
                (entity_type, entity_id),
            ).fetchone()
        return self._row_to_entity(row) if row else None

    def delete(self, entity: Entity) -> None:
        with self._connection() as conn:
            conn.execute(
                "DELETE FROM entities WHERE entity_type = ? AND id = ?",
                (entity.entity_type, entity.id),
            )
            conn.commit()

    def find_ids(self, entity_type: str, value: Any, bundles: Optional[Iterable[str]] = None) -> list[int]:
        if entity_type == "user":
            return self._find_user_ids(value)
        query = "SELECT id FROM entities WHERE entity_type = ? AND (id = ? OR label = ?)"
        params: list[Any] = [entity_type, as_entity_id(value), str(value)]
        bundle_list = list(bundles or [])
        if bundle_list:
            query += f" AND bundle IN ({', '.join('?' for _ in bundle_list)})"
            params.extend(bundle_list)
        with self._connection() as conn:
            rows = conn.execute(query + " ORDER BY id", params).fetchall()
        return [r["id"] for r in rows]

    def _find_user_ids(self, value: Any) -> list[int]:
        with self._connection() as conn:
            rows = conn.execute(
                "SELECT uid FROM users WHERE uid = ? OR name = ? ORDER BY uid",
                (as_entity_id(value), str(value)),
            ).fetchall()
        return [r["uid"] for r in rows]

    def find_user_by_name(self, name: str) -> Optional[User]:
        with self._connection() as conn:
            row = conn.execute("SELECT uid, name FROM users WHERE name = ?", (name,)).fetchone()
        return User(uid=row["uid"], name=row["name"]) if row else None

    def add_user(self, name: str) -> User:
        """Add a user; returns the existing one when the name is taken."""
        existing = self.find_user_by_name(name)
        if existing:
            return existing
        now = datetime.now(timezone.utc).isoformat()
        with self._connection() as conn:
            cursor = conn.execute(
                "INSERT INTO users (name, created_at) VALUES (?, ?)",
                (name, now),
            )
            conn.commit()
            uid = cursor.lastrowid or 0
        return User(uid=uid, name=name)
