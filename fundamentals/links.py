"""Link aggregation and per-category prioritisation.

Responsibilities:
- Deduplicate a topic's links by URL
- Group links by resource kind (documentation / article / video / …)
- Order sections based on the category the topic is read in
- Return a clean, prioritised list of (kind, links) tuples

Study categories lead with reference material; the interview category
leads with practice platforms and community discussions.
"""

from __future__ import annotations

import logging
from collections import defaultdict

from fundamentals.categorizer import ResourceType
from fundamentals.models import Link, TopicContent

logger = logging.getLogger(__name__)


# ── Category → resource kind priority mappings ─────────────────────────────────

#: Maps category key → preferred display order for resource sections.
CATEGORY_PRIORITY: dict[str, list[ResourceType]] = {
    "interview": [
        ResourceType.PRACTICE, ResourceType.DISCUSSION, ResourceType.ARTICLE,
        ResourceType.VIDEO, ResourceType.BOOK, ResourceType.TUTORIAL,
        ResourceType.DOCUMENTATION, ResourceType.TOOL,
    ],
}

#: Fallback order for study categories and unknown keys.
_DEFAULT_PRIORITY: list[ResourceType] = [
    ResourceType.DOCUMENTATION, ResourceType.ARTICLE, ResourceType.TUTORIAL,
    ResourceType.VIDEO, ResourceType.TOOL, ResourceType.BOOK,
    ResourceType.PRACTICE, ResourceType.DISCUSSION,
]


# ── Deduplication ──────────────────────────────────────────────────────────────


def normalise_url(url: str) -> str:
    return url.rstrip("/").lower()


def deduplicate(links: list[Link]) -> list[Link]:
    """Remove duplicate links by URL, keeping the first occurrence.

    ``https://example.com/`` and ``https://EXAMPLE.com`` count as the same
    link.

    Args:
        links: Resources and discussions in display order.

    Returns:
        Deduplicated list in original order.
    """
    seen: set[str] = set()
    unique: list[Link] = []

    for link in links:
        normalised = normalise_url(link.url)
        if normalised and normalised not in seen:
            seen.add(normalised)
            unique.append(link)

    return unique


# ── Grouping ───────────────────────────────────────────────────────────────────


def group_by_kind(links: list[Link]) -> dict[ResourceType, list[Link]]:
    """Group links by their effective ``kind``.

    Returns:
        Dict mapping kind → links in input order. Always a regular ``dict``.
    """
    groups: dict[ResourceType, list[Link]] = defaultdict(list)
    for link in links:
        groups[link.kind].append(link)
    return dict(groups)


# ── Prioritisation ─────────────────────────────────────────────────────────────


def prioritize_sections(
    grouped: dict[ResourceType, list[Link]],
    category: str | None,
) -> list[tuple[ResourceType, list[Link]]]:
    """Order link sections by category-based priority.

    Sections with zero links are omitted. Kinds not listed in the priority
    map are appended at the end in the order they were first seen.

    Args:
        grouped: Dict mapping kind → links (from ``group_by_kind``).
        category: Category key the topic is displayed under, or ``None``.

    Returns:
        List of ``(kind, links)`` tuples, highest priority first.
    """
    priority_order = CATEGORY_PRIORITY.get(category or "", _DEFAULT_PRIORITY)

    ordered: list[tuple[ResourceType, list[Link]]] = []
    appended: set[ResourceType] = set()

    for kind in priority_order:
        if grouped.get(kind):
            ordered.append((kind, grouped[kind]))
            appended.add(kind)

    for kind, links in grouped.items():
        if kind not in appended and links:
            ordered.append((kind, links))

    return ordered


# ── Public pipeline ────────────────────────────────────────────────────────────


def arrange(
    topic: TopicContent,
    category: str | None = None,
) -> list[tuple[ResourceType, list[Link]]]:
    """Full pipeline for one topic: deduplicate → group → prioritise.

    This is the entry point used by ``web/app.py``.

    Args:
        topic: The record whose resources and discussions are arranged.
        category: Category key the topic is shown under.

    Returns:
        Prioritised list of ``(kind, links)`` tuples.
    """
    links = list(topic.links)
    unique = deduplicate(links)
    if len(unique) < len(links):
        logger.debug("Dropped %d duplicate links from %s", len(links) - len(unique), topic.id)
    return prioritize_sections(group_by_kind(unique), category)
