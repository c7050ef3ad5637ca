"""Row and timestamp helpers shared by the SQLite repositories."""

from __future__ import annotations

import sqlite3
from datetime import UTC, datetime
from typing import Any


def now_iso() -> str:
    """Current UTC time as an ISO-8601 string, as stored in ``created_at``."""
    return datetime.now(UTC).isoformat()


def row_to_dict(row: sqlite3.Row | None) -> dict[str, Any]:
    return dict(row) if row is not None else {}
