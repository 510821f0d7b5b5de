# =============================================================================
# core/matching.py  —  Focus-Area Filtering
# =============================================================================
#
# A topic is relevant when any requested focus area appears, ignoring case,
# anywhere in its source line.  The body after the colon counts too, so
# "redis" finds "KA 12 - Caching Strategies: redis, memcached".
#
# An empty result is an error, not an empty plan.  The caller gets the full
# list of titles back so it can pick better keywords.
# =============================================================================

from typing import Sequence

from core.errors import NoMatchingTopics
from core.knowledge_base import list_titles
from core.models import TopicEntry


def match_topics(topics: Sequence[TopicEntry], focus_areas: Sequence[str]) -> list[TopicEntry]:
    """Keep the topics whose source line mentions at least one focus area.

    Args:
        topics: Every topic parsed from the knowledge base, in document order.
        focus_areas: Keywords requested by the caller.

    Returns:
        The matching topics, in their original order.

    Raises:
        NoMatchingTopics: If nothing matches.  The exception carries every
            title from ``topics``.
    """
    needles = [area.casefold() for area in focus_areas]
    matched = [
        topic for topic in topics
        if any(needle in topic.raw_line.casefold() for needle in needles)
    ]
    if not matched:
        raise NoMatchingTopics(focus_areas, list_titles(list(topics)))
    return matched
