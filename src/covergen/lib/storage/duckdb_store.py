"""DuckDB-backed storage for saved panel state."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import duckdb

from covergen.lib.storage.base import StateStore


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DuckDBStateStore(StateStore):
    """Persistence layer for the panel's session record."""

    def __init__(self, db_path: str | Path = ":memory:") -> None:
        self.db_path = str(db_path)
        self._con = duckdb.connect(self.db_path)
        self.ensure_schema()

    def close(self) -> None:
        self._con.close()

    def ensure_schema(self) -> None:
        self._con.execute(
            """
            CREATE TABLE IF NOT EXISTS app_state (
              state_key TEXT PRIMARY KEY,
              value_json TEXT,
              updated_at TIMESTAMP
            )
            """
        )

    def load(self, key: str) -> dict[str, Any] | None:
        row = self._con.execute(
            "SELECT value_json FROM app_state WHERE state_key = ?", [key]
        ).fetchone()
        if not row or row[0] is None:
            return None
        return json.loads(row[0])

    def save(self, key: str, data: dict[str, Any]) -> None:
        self._con.execute(
            """
            INSERT INTO app_state (state_key, value_json, updated_at)
            VALUES (?, ?, ?)
            ON CONFLICT (state_key) DO UPDATE SET
              value_json = excluded.value_json,
              updated_at = excluded.updated_at
            """,
            [key, json.dumps(data), _utcnow()],
        )

    def delete(self, key: str) -> None:
        self._con.execute("DELETE FROM app_state WHERE state_key = ?", [key])
