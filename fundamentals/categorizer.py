"""Resource link classification.

Classifies a learning-resource link into one of the resource kinds used to
group links on a topic page, based on domain patterns and title/description
heuristics:

- DOCUMENTATION  📘  Official docs, standards, RFCs
- ARTICLE        📰  Blog posts, reference articles (the default)
- TUTORIAL       🎓  Step-by-step tutorial sites
- VIDEO          🎥  YouTube, course platforms, talks
- TOOL           🛠  Analyzers, lookups, online utilities
- PRACTICE       🧩  Coding-problem platforms, mock interviews
- DISCUSSION     💬  Forums, Q&A sites, community boards
- BOOK           📚  Books and book companion sites
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from urllib.parse import urlparse

logger = logging.getLogger(__name__)


# ── Resource kind enum ─────────────────────────────────────────────────────────


class ResourceType(str, Enum):
    """Taxonomy for a learning-resource link."""

    DOCUMENTATION = "documentation"
    ARTICLE = "article"
    TUTORIAL = "tutorial"
    VIDEO = "video"
    TOOL = "tool"
    PRACTICE = "practice"
    DISCUSSION = "discussion"
    BOOK = "book"
    UNKNOWN = "unknown"


#: Human-readable emoji labels for each resource kind.
RESOURCE_TYPE_LABELS: dict[ResourceType, str] = {
    ResourceType.DOCUMENTATION: "📘 Documentation",
    ResourceType.ARTICLE: "📰 Articles",
    ResourceType.TUTORIAL: "🎓 Tutorials",
    ResourceType.VIDEO: "🎥 Videos",
    ResourceType.TOOL: "🛠 Tools",
    ResourceType.PRACTICE: "🧩 Practice",
    ResourceType.DISCUSSION: "💬 Discussions",
    ResourceType.BOOK: "📚 Books",
    ResourceType.UNKNOWN: "📌 Other",
}


# ── Domain allow-lists ─────────────────────────────────────────────────────────

_DOCUMENTATION_DOMAINS: frozenset[str] = frozenset([
    "docs.oracle.com", "docs.python.org", "developer.mozilla.org",
    "dev.mysql.com", "postgresql.org", "wiki.postgresql.org",
    "docs.mongodb.com", "mongodb.com", "cassandra.apache.org",
    "rfc-editor.org", "tools.ietf.org", "datatracker.ietf.org",
    "icann.org", "standards-oui.ieee.org", "learn.microsoft.com",
    "kubernetes.io", "redis.io",
])

_TUTORIAL_DOMAINS: frozenset[str] = frozenset([
    "programiz.com", "tutorialspoint.com", "w3schools.com",
    "javatpoint.com", "baeldung.com", "refactoring.guru",
    "use-the-index-luke.com", "realpython.com",
])

_VIDEO_DOMAINS: frozenset[str] = frozenset([
    "youtube.com", "youtu.be", "vimeo.com", "coursera.org",
    "udemy.com", "edx.org", "ted.com",
])

_TOOL_DOMAINS: frozenset[str] = frozenset([
    "wireshark.org", "ping.eu", "nslookup.io", "macvendorlookup.com",
    "cs.usfca.edu", "regex101.com", "dbfiddle.uk", "sqlfiddle.com",
])

_PRACTICE_DOMAINS: frozenset[str] = frozenset([
    "leetcode.com", "hackerrank.com", "interviewbit.com", "pramp.com",
    "codewars.com", "interviewquery.com", "careercup.com",
])

_DISCUSSION_DOMAINS: frozenset[str] = frozenset([
    "reddit.com", "news.ycombinator.com", "stackoverflow.com",
    "stackexchange.com", "quora.com", "teamblind.com", "dev.to",
    "glassdoor.com", "indeed.com", "levels.fyi",
])

_BOOK_DOMAINS: frozenset[str] = frozenset([
    "oreilly.com", "jcip.net", "crackingthecodinginterview.com",
    "manning.com", "pragprog.com",
])

_DOMAIN_KINDS: tuple[tuple[frozenset[str], ResourceType], ...] = (
    (_DOCUMENTATION_DOMAINS, ResourceType.DOCUMENTATION),
    (_TUTORIAL_DOMAINS, ResourceType.TUTORIAL),
    (_VIDEO_DOMAINS, ResourceType.VIDEO),
    (_TOOL_DOMAINS, ResourceType.TOOL),
    (_PRACTICE_DOMAINS, ResourceType.PRACTICE),
    (_DISCUSSION_DOMAINS, ResourceType.DISCUSSION),
    (_BOOK_DOMAINS, ResourceType.BOOK),
)


def _host(url: str) -> str:
    try:
        host = urlparse(url).hostname or ""
    except ValueError:
        logger.debug("Failed to parse URL for classification: %r", url)
        return ""
    return host.lower().removeprefix("www.")


def _lookup(host: str) -> ResourceType | None:
    """Match ``host`` or any parent domain against the allow-lists."""
    labels = host.split(".")
    for start in range(len(labels) - 1):
        candidate = ".".join(labels[start:])
        for domains, kind in _DOMAIN_KINDS:
            if candidate in domains:
                return kind
    return None


# ── URL-based classification ───────────────────────────────────────────────────


def classify_url(url: str) -> ResourceType:
    """Classify a URL into a ``ResourceType`` based on its domain.

    Args:
        url: The full URL string to classify.

    Returns:
        The detected ``ResourceType``, or ``ResourceType.UNKNOWN`` when the
        URL has no host.

    Examples:
        >>> classify_url("https://www.youtube.com/watch?v=aZjYr87r1b8")
        <ResourceType.VIDEO: 'video'>
        >>> classify_url("https://stackoverflow.com/questions/870218")
        <ResourceType.DISCUSSION: 'discussion'>
        >>> classify_url("https://www.rfc-editor.org/rfc/rfc1035")
        <ResourceType.DOCUMENTATION: 'documentation'>
    """
    host = _host(url)
    if not host:
        return ResourceType.UNKNOWN

    kind = _lookup(host)
    if kind is not None:
        return kind

    return ResourceType.ARTICLE  # Default: assume an article or blog post


# ── Text-based heuristics (fallback) ──────────────────────────────────────────

_DOCUMENTATION_RE = re.compile(
    r"\b(?:documentation|docs|reference manual|rfc\s?\d+|specification|official)\b",
    re.IGNORECASE,
)
_VIDEO_RE = re.compile(
    r"\b(?:video|youtube|lecture|watch|screencast|talk)\b",
    re.IGNORECASE,
)
_PRACTICE_RE = re.compile(
    r"\b(?:practice problems?|coding challenges?|mock interviews?|exercises)\b",
    re.IGNORECASE,
)
_TUTORIAL_RE = re.compile(
    r"\b(?:tutorial|step[- ]by[- ]step|beginner|guide|how to)\b",
    re.IGNORECASE,
)
_TOOL_RE = re.compile(
    r"\b(?:tool|visuali[sz]ation|visuali[sz]er|analy[sz]er|lookup|simulator|calculator)\b",
    re.IGNORECASE,
)
_DISCUSSION_RE = re.compile(
    r"\b(?:forum|discussion|thread|community|q&a)\b",
    re.IGNORECASE,
)
_BOOK_RE = re.compile(r"\b(?:book|edition|chapter)\b", re.IGNORECASE)

_TEXT_KINDS: tuple[tuple[re.Pattern[str], ResourceType], ...] = (
    (_DOCUMENTATION_RE, ResourceType.DOCUMENTATION),
    (_VIDEO_RE, ResourceType.VIDEO),
    (_PRACTICE_RE, ResourceType.PRACTICE),
    (_TUTORIAL_RE, ResourceType.TUTORIAL),
    (_TOOL_RE, ResourceType.TOOL),
    (_DISCUSSION_RE, ResourceType.DISCUSSION),
    (_BOOK_RE, ResourceType.BOOK),
)


def classify_by_text(title: str, description: str) -> ResourceType:
    """Classify a link using title and description heuristics when the URL fails.

    Args:
        title: The link title.
        description: The author's one-line description.

    Returns:
        The inferred ``ResourceType``.
    """
    combined = f"{title} {description}"

    for pattern, kind in _TEXT_KINDS:
        if pattern.search(combined):
            return kind

    return ResourceType.ARTICLE


# ── Public interface ───────────────────────────────────────────────────────────


def classify_link(link: object) -> ResourceType:
    """Classify a resource or discussion link into a ``ResourceType``.

    Tries URL-based classification first; falls back to title/description
    heuristics.

    Args:
        link: A ``Link`` instance (typed as ``object`` to avoid a circular
            import; expects ``.url``, ``.title``, ``.description`` attrs).

    Returns:
        The detected ``ResourceType``.
    """
    url: str = getattr(link, "url", "") or ""
    title: str = getattr(link, "title", "") or ""
    description: str = getattr(link, "description", "") or ""

    kind = classify_url(url)
    if kind not in (ResourceType.ARTICLE, ResourceType.UNKNOWN):
        # URL matched a specific domain pattern; trust it
        return kind

    if kind is ResourceType.UNKNOWN and not (title or description):
        return kind

    # URL defaulted to ARTICLE; try text heuristics to see if it's something else
    return classify_by_text(title, description)
