"""
SQLite-backed snapshot of the content library.

Consumers that prefer a key-value store over the JSON bundle read topic
records from here by id.

Schema
──────
table: topics
  id           TEXT PRIMARY KEY
  category     TEXT           (first category listing the topic, or NULL)
  title        TEXT NOT NULL
  published_at TEXT NOT NULL  (ISO-8601 UTC)
  record       TEXT NOT NULL  (TopicContent serialised as camelCase JSON)
"""

from __future__ import annotations

import logging
import os
import sqlite3
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path

from fundamentals.catalog import Catalog
from fundamentals.models import StoredTopic, TopicContent

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = Path(__file__).parent.parent / "data" / "content.db"


def _db_path(override: Path | None = None) -> Path:
    """Return the database file path: ``override``, else DB_PATH, else the default."""
    if override is not None:
        return Path(override)
    env = os.getenv("DB_PATH")
    return Path(env) if env else DEFAULT_DB_PATH


@contextmanager
def _connect(db_path: Path | None = None):
    """Yield a connected sqlite3.Connection, creating the file/dir if needed."""
    path = _db_path(db_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(path))
    conn.row_factory = sqlite3.Row
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def init_db(db_path: Path | None = None) -> None:
    """Create the topics table if it doesn't exist yet."""
    with _connect(db_path) as conn:
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS topics (
                id           TEXT PRIMARY KEY,
                category     TEXT,
                title        TEXT NOT NULL,
                published_at TEXT NOT NULL,
                record       TEXT NOT NULL
            )
            """
        )
    logger.info("Content store initialised at %s", _db_path(db_path))


def publish(catalog: Catalog, db_path: Path | None = None) -> int:
    """Write every catalog record to the store and drop rows no longer in it.

    Args:
        catalog: The loaded catalog to snapshot.
        db_path: Database file to write instead of the configured one.

    Returns:
        The number of records written.
    """
    now = datetime.now(timezone.utc).isoformat()
    rows = []
    for topic in catalog:
        category = catalog.category_of(topic.id)
        rows.append(
            (
                topic.id,
                category.key if category else None,
                topic.title,
                now,
                topic.model_dump_json(by_alias=True, exclude_none=True),
            )
        )

    with _connect(db_path) as conn:
        conn.executemany(
            "INSERT INTO topics (id, category, title, published_at, record) "
            "VALUES (?, ?, ?, ?, ?) "
            "ON CONFLICT(id) DO UPDATE SET category = excluded.category, "
            "title = excluded.title, published_at = excluded.published_at, "
            "record = excluded.record",
            rows,
        )
        existing = {row["id"] for row in conn.execute("SELECT id FROM topics")}
        stale = sorted(existing - set(catalog.ids))
        conn.executemany("DELETE FROM topics WHERE id = ?", [(topic_id,) for topic_id in stale])

    if stale:
        logger.info("Removed %d stale topics: %s", len(stale), ", ".join(stale))
    logger.info("Published %d topics to %s", len(rows), _db_path(db_path))
    return len(rows)


def list_entries(category: str | None = None) -> list[StoredTopic]:
    """Return stored topics ordered by title, optionally for one category.

    Args:
        category: Category key to filter on, or ``None`` for all topics.

    Returns:
        A list of StoredTopic objects.
    """
    query = "SELECT id, category, title, published_at FROM topics"
    params: tuple = ()
    if category is not None:
        query += " WHERE category = ?"
        params = (category,)
    query += " ORDER BY title COLLATE NOCASE"

    with _connect() as conn:
        rows = conn.execute(query, params).fetchall()

    entries: list[StoredTopic] = []
    for row in rows:
        try:
            entries.append(
                StoredTopic(
                    id=row["id"],
                    category=row["category"],
                    title=row["title"],
                    published_at=datetime.fromisoformat(row["published_at"]),
                )
            )
        except ValueError as exc:
            logger.warning("Skipping corrupt topic row id=%s: %s", row["id"], exc)

    return entries


def get_by_id(topic_id: str) -> TopicContent | None:
    """Fetch a single topic record by id.

    Args:
        topic_id: The topic slug to look up.

    Returns:
        A TopicContent, or None if not found.
    """
    with _connect() as conn:
        row = conn.execute("SELECT record FROM topics WHERE id = ?", (topic_id,)).fetchone()

    if row is None:
        return None

    return TopicContent.model_validate_json(row["record"])


def delete(topic_id: str) -> bool:
    """Delete a topic row by id.

    Args:
        topic_id: The topic slug to delete.

    Returns:
        True if a row was deleted, False if not found.
    """
    with _connect() as conn:
        cursor = conn.execute("DELETE FROM topics WHERE id = ?", (topic_id,))
    deleted = cursor.rowcount > 0
    if deleted:
        logger.info("Deleted topic id=%s", topic_id)
    return deleted
