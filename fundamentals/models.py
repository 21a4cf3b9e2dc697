"""
Pydantic models for the CS Fundamentals content library.

Every model is frozen and every sequence field is a tuple, so a loaded
record cannot be changed after construction. Serialised keys are camelCase
(``keyPoints``, ``codeExamples``) to match the authored JSON documents.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from fundamentals.categorizer import ResourceType, classify_link

_SLUG_RE = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
_URL_RE = re.compile(r"^https?://[^\s/$.?#][^\s]*$", re.IGNORECASE)


def _require_text(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


def _require_slug(value: str) -> str:
    if not _SLUG_RE.match(value):
        raise ValueError(f"{value!r} is not a lowercase dash-separated slug")
    return value


def _require_url(value: str) -> str:
    if not _URL_RE.match(value):
        raise ValueError(f"{value!r} is not a well-formed http(s) URL")
    return value


Text = Annotated[str, AfterValidator(_require_text)]
Slug = Annotated[str, AfterValidator(_require_slug)]
Url = Annotated[str, AfterValidator(_require_url)]


class _Record(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_json_dict(self) -> dict:
        """Dump with camelCase keys and without unset optional fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# ── Parts of a topic ───────────────────────────────────────────────────────


class CodeExample(_Record):
    """An illustrative snippet: ``language`` + ``code``, or an HTML ``content`` body."""

    title: Text
    description: str = ""
    language: Optional[str] = None
    code: Optional[str] = None
    content: Optional[str] = None

    @model_validator(mode="after")
    def _check_body(self) -> CodeExample:
        if not (self.has_source or self.is_html):
            raise ValueError(
                f"code example {self.title!r} needs 'language' and 'code', or 'content'"
            )
        return self

    @property
    def has_source(self) -> bool:
        return bool(self.language and self.language.strip() and self.code and self.code.strip())

    @property
    def is_html(self) -> bool:
        return bool(self.content and self.content.strip())


class Link(_Record):
    """A titled external URL."""

    title: Text
    url: Url
    description: str = ""

    @property
    def kind(self) -> ResourceType:
        return classify_link(self)


class Resource(Link):
    """A learning resource. ``type`` is the author's label and is kept as written."""

    type: Optional[str] = None

    @property
    def kind(self) -> ResourceType:
        if self.type:
            try:
                labelled = ResourceType(self.type.strip().lower())
            except ValueError:
                labelled = ResourceType.UNKNOWN
            if labelled is not ResourceType.UNKNOWN:
                return labelled
        return classify_link(self)


class Discussion(Link):
    """A community forum or interview-experience board."""

    @property
    def kind(self) -> ResourceType:
        return ResourceType.DISCUSSION


class Question(_Record):
    question: Text
    answer: Text


# ── Topic record ───────────────────────────────────────────────────────────


class TopicContent(_Record):
    """One topic's complete teaching content."""

    id: Slug
    title: Text
    subtitle: str = ""
    summary: Text
    analogy: str = ""
    visual_concept: str = ""
    real_world_use: str = ""
    explanation: Text
    diagram: Optional[str] = None
    key_points: tuple[str, ...] = ()
    code_examples: tuple[CodeExample, ...] = ()
    resources: tuple[Resource, ...] = ()
    questions: tuple[Question, ...] = ()
    behavioral_questions: tuple[Question, ...] = ()
    discussions: tuple[Discussion, ...] = ()

    @property
    def links(self) -> tuple[Link, ...]:
        """Resources followed by discussions."""
        return self.resources + self.discussions


class Category(_Record):
    """A named, ordered group of topic ids (one navigation tab)."""

    key: Slug
    name: Text
    topics: tuple[Slug, ...] = Field(min_length=1)

    @model_validator(mode="after")
    def _check_unique_topics(self) -> Category:
        seen: set[str] = set()
        for topic_id in self.topics:
            if topic_id in seen:
                raise ValueError(f"category {self.key!r} lists {topic_id!r} twice")
            seen.add(topic_id)
        return self


class StoredTopic(BaseModel):
    """A topic row in the SQLite snapshot."""

    id: str
    title: str
    category: Optional[str] = None
    published_at: datetime
