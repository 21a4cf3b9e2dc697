"""
Flask JSON API for the CS Fundamentals content library.

Routes
──────
GET /api/categories                 Category tabs with topic counts (JSON)
GET /api/categories/<key>           Topic list for one category (JSON)
GET /api/topics/<topic_id>          Full topic record (JSON)
GET /api/topics/<topic_id>/outline  Explanation split into display blocks (JSON)
GET /api/topics/<topic_id>/links    Resources and discussions grouped by kind (JSON)
GET /api/bundle                     Whole catalog as one document (JSON)
"""

from __future__ import annotations

import logging
import os
import sys

from dotenv import load_dotenv
from flask import Flask, jsonify, request

# Allow running as `python web/app.py` from the project root
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

load_dotenv()

from config.settings import Settings
from fundamentals.categorizer import RESOURCE_TYPE_LABELS
from fundamentals.links import arrange
from fundamentals.loader import load_catalog
from fundamentals.outline import parse_explanation

settings = Settings()
settings.validate()

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = Flask(__name__)
app.json.sort_keys = False

# Load the content once on startup; records are immutable
catalog = load_catalog(settings.content_dir)


def _not_found(what: str, value: str):
    return jsonify({"error": f"Unknown {what}: {value}"}), 404


# ── Categories ─────────────────────────────────────────────────────────────

@app.route("/api/categories")
def list_categories():
    """Return every category tab in display order."""
    return jsonify(
        [
            {
                "key": c.key,
                "name": c.name,
                "topicCount": len(c.topics),
                "firstTopic": c.topics[0],
            }
            for c in catalog.categories
        ]
    )


@app.route("/api/categories/<key>")
def get_category(key: str):
    """Return the sidebar topic list for one category."""
    category = catalog.category(key)
    if category is None:
        return _not_found("category", key)
    return jsonify(
        {
            "key": category.key,
            "name": category.name,
            "topics": [
                {"id": t.id, "title": t.title, "subtitle": t.subtitle}
                for t in catalog.topics_in(key)
            ],
        }
    )


# ── Topics ─────────────────────────────────────────────────────────────────

@app.route("/api/topics/<topic_id>")
def get_topic(topic_id: str):
    """Return a full topic record."""
    topic = catalog.get(topic_id)
    if topic is None:
        return _not_found("topic", topic_id)
    return jsonify(topic.to_json_dict())


@app.route("/api/topics/<topic_id>/outline")
def get_outline(topic_id: str):
    """Return the explanation as heading / list item / paragraph blocks."""
    topic = catalog.get(topic_id)
    if topic is None:
        return _not_found("topic", topic_id)
    return jsonify(
        {
            "id": topic.id,
            "blocks": [block.to_dict() for block in parse_explanation(topic.explanation)],
        }
    )


@app.route("/api/topics/<topic_id>/links")
def get_links(topic_id: str):
    """Return resources and discussions grouped into prioritised sections.

    Query params:
      category  (optional) category the topic is shown under; defaults to
                            the first category listing it
    """
    topic = catalog.get(topic_id)
    if topic is None:
        return _not_found("topic", topic_id)

    category_key = request.args.get("category", "").strip()
    if not category_key:
        category = catalog.category_of(topic_id)
        category_key = category.key if category else ""

    sections = arrange(topic, category_key or None)
    return jsonify(
        {
            "id": topic.id,
            "sections": [
                {
                    "kind": kind.value,
                    "label": RESOURCE_TYPE_LABELS[kind],
                    "items": [link.to_json_dict() for link in links],
                }
                for kind, links in sections
            ],
        }
    )


# ── Bundle ─────────────────────────────────────────────────────────────────

@app.route("/api/bundle")
def get_bundle():
    """Return the entire catalog as one JSON document."""
    return jsonify(catalog.to_bundle())


@app.errorhandler(404)
def handle_not_found(error):
    return jsonify({"error": "Not found"}), 404


@app.errorhandler(500)
def handle_server_error(error):
    original = getattr(error, "original_exception", None) or error
    logger.error("Unhandled error serving %s", request.path, exc_info=original)
    return jsonify({"error": "Internal server error"}), 500


# ── Entry point ────────────────────────────────────────────────────────────

if __name__ == "__main__":
    app.run(debug=settings.debug, host=settings.host, port=settings.port)
