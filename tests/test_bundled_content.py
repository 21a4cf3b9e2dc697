"""
Integrity checks over the content shipped in fundamentals/content.

Run with: pytest tests/test_bundled_content.py
"""

from __future__ import annotations

import re

import pytest

from fundamentals.audit import audit_catalog
from fundamentals.loader import load_catalog

_URL_RE = re.compile(r"^https?://[^\s/$.?#][^\s]*$", re.IGNORECASE)

CATALOG = load_catalog()
TOPICS = list(CATALOG)


def _nonblank(value: object) -> bool:
    return isinstance(value, str) and bool(value.strip())


class TestCorpus:
    def test_ids_are_unique_and_nonblank(self):
        ids = [topic.id for topic in TOPICS]
        assert all(_nonblank(topic_id) for topic_id in ids)
        assert len(ids) == len(set(ids))

    @pytest.mark.parametrize("topic", TOPICS, ids=lambda t: t.id)
    def test_required_text_present(self, topic):
        assert _nonblank(topic.title)
        assert _nonblank(topic.summary)
        assert _nonblank(topic.explanation)

    @pytest.mark.parametrize("topic", TOPICS, ids=lambda t: t.id)
    def test_code_examples_have_a_body(self, topic):
        for example in topic.code_examples:
            has_source = _nonblank(example.language) and _nonblank(example.code)
            assert has_source or _nonblank(example.content)

    @pytest.mark.parametrize("topic", TOPICS, ids=lambda t: t.id)
    def test_link_urls_are_well_formed(self, topic):
        for link in topic.links:
            assert _URL_RE.match(link.url), link.url

    @pytest.mark.parametrize("topic", TOPICS, ids=lambda t: t.id)
    def test_questions_have_text_and_answers(self, topic):
        for item in topic.questions + topic.behavioral_questions:
            assert _nonblank(item.question)
            assert _nonblank(item.answer)

    def test_every_category_has_topics(self):
        assert [c.key for c in CATALOG.categories] == ["oop", "os", "dbms", "cn", "interview"]
        for category in CATALOG.categories:
            assert CATALOG.topics_in(category.key)

    def test_loading_twice_is_deep_equal(self):
        again = load_catalog()
        assert again == CATALOG
        assert again.to_bundle() == CATALOG.to_bundle()

    def test_audit_is_clean(self):
        assert [str(issue) for issue in audit_catalog(CATALOG)] == []


class TestKnownTopics:
    def test_btree_vs_bplustree(self):
        record = CATALOG["btree-vs-bplustree"]
        assert record.id == "btree-vs-bplustree"
        assert len(record.code_examples) == 3
        assert record.code_examples[0].language == "python"

    def test_dns_examples(self):
        record = CATALOG["dns-working"]
        assert [e.title for e in record.code_examples] == [
            "DNS Resolver Implementation",
            "DNS Zone File Manager",
        ]
        assert [e.language for e in record.code_examples] == ["python", "java"]
        assert all(e.has_source and not e.is_html for e in record.code_examples)

    def test_interview_questions_carry_behavioral_section(self):
        assert CATALOG["interview-questions"].behavioral_questions

    def test_discussion_links_topic(self):
        record = CATALOG["community-discussion-links"]
        assert record.discussions
        assert record.resources == ()

    @pytest.mark.parametrize(
        "topic_id",
        ["icmp-protocol", "mac-address", "cap-theorem", "optimistic-pessimistic-locking", "performance-tuning"],
    )
    def test_spec_topics_present(self, topic_id):
        assert topic_id in CATALOG
