"""
Command-line interface for the content library.

Commands
────────
check [--strict]          Load and audit the content
list [CATEGORY]           List categories, or the topics of one category
show TOPIC_ID [--outline] Print a topic record (or its explanation outline) as JSON
export PATH               Write the static JSON bundle
publish [--db PATH]       Write the SQLite snapshot
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from config.settings import Settings
from fundamentals import __version__, store
from fundamentals.audit import audit_catalog
from fundamentals.catalog import Catalog
from fundamentals.loader import ContentError, load_catalog
from fundamentals.outline import parse_explanation

logger = logging.getLogger(__name__)


def _dump(data: object) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


# ── Commands ───────────────────────────────────────────────────────────────


def _cmd_check(catalog: Catalog, args: argparse.Namespace, settings: Settings) -> int:
    issues = audit_catalog(catalog)
    for issue in issues:
        logger.warning("%s", issue)

    print(f"{len(catalog)} topics, {len(catalog.categories)} categories, {len(issues)} issues")
    if issues and (args.strict or settings.strict_audit):
        return 1
    return 0


def _cmd_list(catalog: Catalog, args: argparse.Namespace, settings: Settings) -> int:
    if args.category is None:
        for category in catalog.categories:
            print(f"{category.key:<12} {category.name} ({len(category.topics)})")
        return 0

    if catalog.category(args.category) is None:
        print(f"Unknown category: {args.category}", file=sys.stderr)
        return 1
    for topic in catalog.topics_in(args.category):
        print(f"{topic.id:<36} {topic.title}")
    return 0


def _cmd_show(catalog: Catalog, args: argparse.Namespace, settings: Settings) -> int:
    topic = catalog.get(args.topic_id)
    if topic is None:
        print(f"Unknown topic: {args.topic_id}", file=sys.stderr)
        return 1

    if args.outline:
        _dump([block.to_dict() for block in parse_explanation(topic.explanation)])
    else:
        _dump(topic.to_json_dict())
    return 0


def _cmd_export(catalog: Catalog, args: argparse.Namespace, settings: Settings) -> int:
    path = Path(args.path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(catalog.to_bundle(), indent=2, ensure_ascii=False) + "\n",
        encoding="utf-8",
    )
    logger.info("Wrote bundle with %d topics to %s", len(catalog), path)
    return 0


def _cmd_publish(catalog: Catalog, args: argparse.Namespace, settings: Settings) -> int:
    db_path = Path(args.db) if args.db else None
    store.init_db(db_path)
    count = store.publish(catalog, db_path)
    print(f"Published {count} topics")
    return 0


# ── Parser ─────────────────────────────────────────────────────────────────


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cs-fundamentals", description=__doc__.splitlines()[1])
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--content-dir", help="Directory with categories.json and topics/")
    sub = parser.add_subparsers(dest="command", required=True)

    check = sub.add_parser("check", help="Load and audit the content")
    check.add_argument("--strict", action="store_true", help="Fail when the audit reports issues")
    check.set_defaults(handler=_cmd_check)

    listing = sub.add_parser("list", help="List categories or the topics of one category")
    listing.add_argument("category", nargs="?")
    listing.set_defaults(handler=_cmd_list)

    show = sub.add_parser("show", help="Print one topic as JSON")
    show.add_argument("topic_id")
    show.add_argument("--outline", action="store_true", help="Print the explanation outline")
    show.set_defaults(handler=_cmd_show)

    export = sub.add_parser("export", help="Write the static JSON bundle")
    export.add_argument("path")
    export.set_defaults(handler=_cmd_export)

    publish = sub.add_parser("publish", help="Write the SQLite snapshot")
    publish.add_argument("--db", help="SQLite file (defaults to DB_PATH)")
    publish.set_defaults(handler=_cmd_publish)

    return parser


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    settings = Settings()
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    content_dir = Path(args.content_dir) if args.content_dir else settings.content_dir
    try:
        catalog = load_catalog(content_dir)
    except ContentError as exc:
        print(f"Content error: {exc}", file=sys.stderr)
        return 1

    return args.handler(catalog, args, settings)
