"""
Content-quality audit over a loaded catalog.

The loader already rejects structurally broken records. The audit reports
the softer problems a reviewer should look at before publishing: orphaned
topics, repeated or insecure links, unknown labels, and duplicated
questions.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from fundamentals.catalog import Catalog
from fundamentals.categorizer import ResourceType
from fundamentals.links import normalise_url
from fundamentals.models import TopicContent

logger = logging.getLogger(__name__)

#: Language labels used by the code examples in this library.
KNOWN_LANGUAGES: frozenset[str] = frozenset([
    "bash", "c", "cpp", "csharp", "go", "html", "java", "javascript", "json",
    "python", "rust", "shell", "sql", "text", "typescript", "yaml",
])

# "unknown" is what classification yields, not a label an author should write
_RESOURCE_TYPES: frozenset[str] = frozenset(
    kind.value for kind in ResourceType if kind is not ResourceType.UNKNOWN
)


@dataclass(frozen=True)
class Issue:
    topic_id: str
    code: str
    message: str

    def __str__(self) -> str:
        return f"[{self.code}] {self.topic_id}: {self.message}"


# ── Per-topic checks ───────────────────────────────────────────────────────


def _check_links(topic: TopicContent) -> Iterator[Issue]:
    seen: set[str] = set()
    for link in topic.links:
        normalised = normalise_url(link.url)
        if normalised in seen:
            yield Issue(topic.id, "duplicate-url", f"{link.url} is linked more than once")
        seen.add(normalised)
        if link.url.lower().startswith("http://"):
            yield Issue(topic.id, "insecure-url", f"{link.url} does not use https")

    for resource in topic.resources:
        if resource.type and resource.type.strip().lower() not in _RESOURCE_TYPES:
            yield Issue(
                topic.id,
                "unknown-resource-type",
                f"resource {resource.title!r} has type {resource.type!r}; "
                f"treated as {resource.kind.value}",
            )


def _check_examples(topic: TopicContent) -> Iterator[Issue]:
    for example in topic.code_examples:
        if example.language and example.language.strip().lower() not in KNOWN_LANGUAGES:
            yield Issue(
                topic.id,
                "unknown-language",
                f"code example {example.title!r} is labelled {example.language!r}",
            )
        if example.has_source and example.is_html:
            yield Issue(
                topic.id,
                "mixed-example",
                f"code example {example.title!r} has both code and HTML content",
            )


def _check_text(topic: TopicContent) -> Iterator[Issue]:
    for index, point in enumerate(topic.key_points, start=1):
        if not point.strip():
            yield Issue(topic.id, "blank-key-point", f"key point {index} is empty")

    seen: set[str] = set()
    for item in topic.questions + topic.behavioral_questions:
        text = " ".join(item.question.lower().split())
        if text in seen:
            yield Issue(topic.id, "duplicate-question", f"{item.question!r} is asked twice")
        seen.add(text)


_TOPIC_CHECKS = (_check_links, _check_examples, _check_text)


# ── Public interface ───────────────────────────────────────────────────────


def audit_topic(topic: TopicContent) -> list[Issue]:
    return [issue for check in _TOPIC_CHECKS for issue in check(topic)]


def audit_catalog(catalog: Catalog) -> list[Issue]:
    """Run every check over every topic in ``catalog``.

    Args:
        catalog: A loaded catalog.

    Returns:
        Issues in corpus order; an empty list means the content is clean.
    """
    listed = {topic_id for category in catalog.categories for topic_id in category.topics}

    issues: list[Issue] = []
    for topic in catalog:
        if topic.id not in listed:
            issues.append(Issue(topic.id, "orphan-topic", "not listed in any category"))
        issues.extend(audit_topic(topic))

    logger.debug("Audit found %d issues across %d topics", len(issues), len(catalog))
    return issues
