# =============================================================================
# core/knowledge_base.py  —  Knowledge-Base Topic Scanner
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns the raw knowledge-base document into an ordered list of TopicEntry
#   values.  The document is free-form markdown; only lines shaped like
#
#       KA 12 - Caching Strategies: cache-aside, write-through, TTLs
#       └┬┘ └┬┘   └───────┬────────┘ └──────────────┬─────────────┘
#      marker code       title                  body (optional)
#
#   become topics.  Everything else (headings, prose, blank lines) is skipped
#   without error.
#
# THE MARKER:
#   "KA" is only the default.  The marker is a regular expression supplied
#   by configuration (STUDY_PLANNER_TOPIC_MARKER), so a knowledge base that
#   tags topics with "TOPIC" or "§" works without touching this module.
# =============================================================================

import re
from functools import lru_cache

from core.models import TopicEntry

DEFAULT_MARKER = "KA"


@lru_cache(maxsize=16)
def compile_topic_pattern(marker: str = DEFAULT_MARKER) -> re.Pattern[str]:
    """Build the anchored topic-line pattern for a marker regex.

    Raises:
        re.error: If ``marker`` is not a valid regular expression.
    """
    return re.compile(
        rf"^(?:{marker})\s+(?P<code>\d+)\s+-\s+"
        r"(?P<title>[^:]*[^:\s][^:]*?)\s*(?::(?P<body>.*))?$"
    )


def parse_topics(text: str, marker: str = DEFAULT_MARKER) -> list[TopicEntry]:
    """Scan a knowledge-base document for topic lines.

    Args:
        text: The full document text.
        marker: Regex matching the tag that starts a topic line.

    Returns:
        One TopicEntry per matching line, in document order.  Duplicate
        codes and titles are kept.
    """
    pattern = compile_topic_pattern(marker)
    topics = []
    for line in text.splitlines():
        match = pattern.match(line)
        if match is None:
            continue
        topics.append(
            TopicEntry(
                code=int(match.group("code")),
                title=match.group("title").strip(),
                raw_line=line,
            )
        )
    return topics


def list_titles(topics: list[TopicEntry]) -> list[str]:
    """Titles of ``topics`` in their original order."""
    return [topic.title for topic in topics]
