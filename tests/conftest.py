"""Shared fixtures: minimal topic documents and throwaway content directories."""

from __future__ import annotations

import json
from pathlib import Path

import pytest


def make_topic(topic_id: str, **overrides) -> dict:
    """Return a minimal valid topic document (camelCase keys, as authored)."""
    topic = {
        "id": topic_id,
        "title": topic_id.replace("-", " ").title(),
        "summary": f"Summary of {topic_id}.",
        "explanation": f"What is {topic_id}?\n- first point\nA paragraph.",
        "keyPoints": ["One", "Two"],
        "codeExamples": [
            {"title": "Example", "language": "python", "code": "print('hi')"},
        ],
        "resources": [
            {
                "type": "documentation",
                "title": "Docs",
                "url": "https://docs.python.org/3/",
                "description": "Reference",
            },
        ],
        "questions": [{"question": "Why?", "answer": "Because."}],
    }
    topic.update(overrides)
    return topic


def write_content(root: Path, topics: dict[str, object], categories: list[dict]) -> Path:
    """Write ``topics`` (relative file name → document) and the category index under ``root``."""
    topic_dir = root / "topics"
    topic_dir.mkdir(parents=True, exist_ok=True)
    for name, document in topics.items():
        path = topic_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(document), encoding="utf-8")
    (root / "categories.json").write_text(json.dumps(categories), encoding="utf-8")
    return root


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    """A small valid corpus: two categories, three topics, one list-file."""
    return write_content(
        tmp_path / "content",
        {
            "db/alpha.json": make_topic("alpha"),
            "db/beta-gamma.json": [make_topic("beta"), make_topic("gamma")],
        },
        [
            {"key": "db", "name": "Databases", "topics": ["beta", "alpha"]},
            {"key": "extra", "name": "Extra", "topics": ["gamma", "alpha"]},
        ],
    )
