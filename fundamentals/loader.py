"""
Load hand-authored topic documents into a ``Catalog``.

Layout of a content directory
─────────────────────────────
<content_dir>/
  categories.json        ordered list of {key, name, topics: [topic ids]}
  topics/**/*.json       one topic object, or a list of topic objects, per file

Every problem is reported as a ``ContentError`` naming the file at fault.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from fundamentals.catalog import Catalog
from fundamentals.models import Category, TopicContent

logger = logging.getLogger(__name__)

#: Content shipped inside the package.
CONTENT_DIR = Path(__file__).parent / "content"
CATEGORIES_FILE = "categories.json"
TOPICS_DIR = "topics"


class ContentError(ValueError):
    """Malformed or inconsistent content."""

    def __init__(self, message: str, source: Path | None = None) -> None:
        self.source = source
        if source is not None:
            message = f"{source}: {message}"
        super().__init__(message)


def _read_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8-sig"))
    except FileNotFoundError:
        raise ContentError("file not found", path) from None
    except json.JSONDecodeError as exc:
        raise ContentError(f"invalid JSON: {exc}", path) from exc


def _read_topics(path: Path) -> list[TopicContent]:
    """Parse one topic file, which may hold a single object or a list of them."""
    raw = _read_json(path)
    items = raw if isinstance(raw, list) else [raw]
    topics: list[TopicContent] = []
    for item in items:
        if not isinstance(item, dict):
            raise ContentError(f"expected a topic object, got {type(item).__name__}", path)
        try:
            topics.append(TopicContent.model_validate(item))
        except ValidationError as exc:
            label = item.get("id", "<no id>")
            raise ContentError(f"topic {label!r} is invalid:\n{exc}", path) from exc
    return topics


def load_topics(directory: Path) -> dict[str, TopicContent]:
    """Load every ``*.json`` topic file below ``directory``.

    Args:
        directory: Root of the topic documents; searched recursively.

    Returns:
        Records keyed by id, in sorted file order.

    Raises:
        ContentError: On unreadable files, invalid records, or duplicate ids.
    """
    if not directory.is_dir():
        raise ContentError("topic directory not found", directory)

    topics: dict[str, TopicContent] = {}
    sources: dict[str, Path] = {}
    for file_path in sorted(directory.rglob("*.json")):
        for topic in _read_topics(file_path):
            previous = sources.get(topic.id)
            if previous is not None:
                raise ContentError(
                    f"duplicate topic id {topic.id!r} (also defined in {previous})", file_path
                )
            topics[topic.id] = topic
            sources[topic.id] = file_path
    return topics


def load_categories(path: Path) -> list[Category]:
    """Load the ordered category index.

    Raises:
        ContentError: If the file is not a list of valid, uniquely keyed categories.
    """
    raw = _read_json(path)
    if not isinstance(raw, list):
        raise ContentError("category index must be a JSON list", path)

    categories: list[Category] = []
    seen: set[str] = set()
    for item in raw:
        try:
            category = Category.model_validate(item)
        except ValidationError as exc:
            raise ContentError(f"invalid category:\n{exc}", path) from exc
        if category.key in seen:
            raise ContentError(f"duplicate category key {category.key!r}", path)
        seen.add(category.key)
        categories.append(category)
    return categories


def _validate_category_refs(
    topics: dict[str, TopicContent], categories: list[Category], source: Path
) -> None:
    """Validate that every category only lists known topics."""
    for category in categories:
        for topic_id in category.topics:
            if topic_id not in topics:
                raise ContentError(
                    f"category {category.key!r} references unknown topic {topic_id!r}", source
                )


def load_catalog(content_dir: Path | str | None = None) -> Catalog:
    """Load topics and categories from ``content_dir`` (the bundled content by default).

    Args:
        content_dir: Directory holding ``categories.json`` and ``topics/``.

    Returns:
        A ``Catalog`` over the loaded records.

    Raises:
        ContentError: On any content problem.
    """
    root = Path(content_dir) if content_dir is not None else CONTENT_DIR
    categories_path = root / CATEGORIES_FILE

    topics = load_topics(root / TOPICS_DIR)
    categories = load_categories(categories_path)
    _validate_category_refs(topics, categories, categories_path)

    logger.info("Loaded %d topics in %d categories from %s", len(topics), len(categories), root)
    return Catalog(topics, categories)
