# =============================================================================
# core/scheduler.py  —  Week-by-Week Topic Assignment
# =============================================================================
#
# Round-robin over the matched topics:
#
#   matched = [Testing, Scaling]          weeks = 5
#   week:      1        2        3        4        5
#   topic:  Testing  Scaling  Testing  Scaling  Testing
#
# No reordering, no weighting.  The output depends only on the two inputs.
# =============================================================================

from typing import Sequence

from core.models import ScheduleEntry, TopicEntry


def build_schedule(matched_topics: Sequence[TopicEntry], weeks_duration: int) -> list[ScheduleEntry]:
    """Assign one topic to every week, cycling through ``matched_topics``.

    Args:
        matched_topics: Non-empty output of ``match_topics``.
        weeks_duration: Number of weeks in the plan (at least 1).

    Returns:
        Exactly ``weeks_duration`` entries, weeks numbered from 1.

    Raises:
        ValueError: If there are no topics or no weeks to schedule.
    """
    if not matched_topics:
        raise ValueError("cannot schedule an empty topic list")
    if weeks_duration < 1:
        raise ValueError(f"weeks_duration must be at least 1, got {weeks_duration}")

    count = len(matched_topics)
    return [
        ScheduleEntry(week=week, topic_title=matched_topics[(week - 1) % count].title)
        for week in range(1, weeks_duration + 1)
    ]
