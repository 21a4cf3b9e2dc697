"""
Id-keyed lookup over the loaded topic records plus the ordered category index.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from typing import Any

from fundamentals.models import Category, TopicContent


class Catalog:
    """Read-only view over a loaded corpus.

    Topics keep the order they were loaded in; categories keep the order of
    the category index. Build one with ``fundamentals.loader.load_catalog``,
    which checks that every category only references known topics.
    """

    def __init__(self, topics: Mapping[str, TopicContent], categories: Sequence[Category]) -> None:
        self._topics: dict[str, TopicContent] = dict(topics)
        self._categories: tuple[Category, ...] = tuple(categories)
        self._by_key: dict[str, Category] = {c.key: c for c in self._categories}

    # ── Topics ─────────────────────────────────────────────────────────────

    def get(self, topic_id: str) -> TopicContent | None:
        return self._topics.get(topic_id)

    def __getitem__(self, topic_id: str) -> TopicContent:
        return self._topics[topic_id]

    def __contains__(self, topic_id: object) -> bool:
        return topic_id in self._topics

    def __iter__(self) -> Iterator[TopicContent]:
        return iter(self._topics.values())

    def __len__(self) -> int:
        return len(self._topics)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Catalog):
            return NotImplemented
        return self._topics == other._topics and self._categories == other._categories

    @property
    def ids(self) -> list[str]:
        return list(self._topics)

    # ── Categories ─────────────────────────────────────────────────────────

    @property
    def categories(self) -> tuple[Category, ...]:
        return self._categories

    def category(self, key: str) -> Category | None:
        return self._by_key.get(key)

    def topics_in(self, key: str) -> list[TopicContent]:
        """Return the records of category ``key`` in display order.

        Raises:
            KeyError: If no category has that key.
        """
        category = self._by_key[key]
        return [self._topics[topic_id] for topic_id in category.topics]

    def first_topic(self, key: str) -> TopicContent:
        """The topic shown when a reader switches to category ``key``."""
        return self.topics_in(key)[0]

    def category_of(self, topic_id: str) -> Category | None:
        """Return the first category that lists ``topic_id``, if any."""
        for category in self._categories:
            if topic_id in category.topics:
                return category
        return None

    # ── Export ─────────────────────────────────────────────────────────────

    def to_bundle(self) -> dict[str, Any]:
        """Serialise the whole catalog as one JSON-ready document."""
        return {
            "categories": [category.to_json_dict() for category in self._categories],
            "topics": {topic.id: topic.to_json_dict() for topic in self._topics.values()},
        }
