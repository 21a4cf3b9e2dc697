"""Tests for fundamentals/links.py: dedup, grouping and section ordering."""

from __future__ import annotations

from fundamentals.categorizer import ResourceType
from fundamentals.links import arrange, deduplicate, group_by_kind, prioritize_sections
from fundamentals.models import Discussion, Resource, TopicContent


def _resource(url: str, title: str = "R", type: str | None = None) -> Resource:
    return Resource(title=title, url=url, type=type)


DOCS = _resource("https://dev.mysql.com/doc/", "MySQL docs")
VIDEO = _resource("https://www.youtube.com/watch?v=1", "Talk")
PRACTICE = _resource("https://leetcode.com/problems/x/", "Problem")
FORUM = Discussion(title="r/cscareerquestions", url="https://www.reddit.com/r/cscareerquestions/")


class TestDeduplicate:
    def test_keeps_first_occurrence(self):
        first = _resource("https://example.com/a", "first")
        second = _resource("https://EXAMPLE.com/a/", "second")
        assert deduplicate([first, second]) == [first]

    def test_distinct_urls_kept_in_order(self):
        assert deduplicate([VIDEO, DOCS]) == [VIDEO, DOCS]


class TestGroupByKind:
    def test_groups_by_effective_kind(self):
        grouped = group_by_kind([DOCS, VIDEO, FORUM, _resource("https://vimeo.com/1")])
        assert list(grouped) == [ResourceType.DOCUMENTATION, ResourceType.VIDEO, ResourceType.DISCUSSION]
        assert len(grouped[ResourceType.VIDEO]) == 2
        assert isinstance(grouped, dict)


class TestPrioritizeSections:
    def test_study_category_leads_with_documentation(self):
        grouped = group_by_kind([VIDEO, PRACTICE, DOCS])
        kinds = [kind for kind, _ in prioritize_sections(grouped, "dbms")]
        assert kinds == [ResourceType.DOCUMENTATION, ResourceType.VIDEO, ResourceType.PRACTICE]

    def test_interview_category_leads_with_practice(self):
        grouped = group_by_kind([DOCS, FORUM, PRACTICE])
        kinds = [kind for kind, _ in prioritize_sections(grouped, "interview")]
        assert kinds == [ResourceType.PRACTICE, ResourceType.DISCUSSION, ResourceType.DOCUMENTATION]

    def test_empty_sections_dropped_and_unlisted_appended(self):
        grouped = {
            ResourceType.UNKNOWN: [DOCS],
            ResourceType.VIDEO: [],
            ResourceType.ARTICLE: [VIDEO],
        }
        kinds = [kind for kind, _ in prioritize_sections(grouped, None)]
        assert kinds == [ResourceType.ARTICLE, ResourceType.UNKNOWN]


class TestArrange:
    def test_resources_and_discussions_combined(self):
        topic = TopicContent(
            id="prep",
            title="Prep",
            summary="S",
            explanation="E",
            resources=[DOCS, PRACTICE, DOCS],
            discussions=[FORUM],
        )
        sections = arrange(topic, "interview")
        assert [kind for kind, _ in sections] == [
            ResourceType.PRACTICE,
            ResourceType.DISCUSSION,
            ResourceType.DOCUMENTATION,
        ]
        assert sections[2][1] == [DOCS]

    def test_topic_without_links(self):
        topic = TopicContent(id="bare", title="Bare", summary="S", explanation="E")
        assert arrange(topic) == []
