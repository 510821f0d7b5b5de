# =============================================================================
# core/renderer.py  —  Study Plan Markdown Rendering
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Formats the final plan document.  The layout is fixed:
#
#     # Study Plan for BACKEND Developer
#     Generated on: 2024-06-01
#     Duration: 3 weeks
#
#     ## Focus Areas
#     - caching
#
#     ## Weekly Breakdown
#
#     ### Week 1: Caching Strategies
#     - Study the concept in depth
#     - Complete practice exercises
#     - <role-specific implementation line>
#     - Review what you built and note open questions
#     ...
#
#     ## Resources
#     ...
#
#   The date is an argument.  Nothing in here reads the clock, so the same
#   inputs always produce the same text.
# =============================================================================

from datetime import date
from typing import Sequence

from core.models import ScheduleEntry

# One implementation line per role.  Every role in core.models.ROLES has one.
ROLE_PRACTICE: dict[str, str] = {
    "frontend": "Implement it in a UI component or browser feature",
    "backend": "Implement it in an API endpoint or backend service",
    "fullstack": "Implement it end to end, from the UI down to the data layer",
    "devops": "Implement it in a deployment pipeline or infrastructure config",
    "ml-engineer": "Implement it in a model training or serving workflow",
}

STUDY_LINE = "Study the concept in depth"
PRACTICE_LINE = "Complete practice exercises"
REVIEW_LINE = "Review what you built and note open questions"

RESOURCES_SECTION = """## Resources
- Concepts from the knowledge base (concepts://src)
- Industry best practices and official documentation
- Hands-on projects
"""


def _pluralize_weeks(weeks: int) -> str:
    return f"{weeks} week" if weeks == 1 else f"{weeks} weeks"


def render_week(entry: ScheduleEntry, role: str) -> str:
    """Render the block for a single week, without a trailing newline."""
    actions = [STUDY_LINE, PRACTICE_LINE, ROLE_PRACTICE[role], REVIEW_LINE]
    lines = [f"### Week {entry.week}: {entry.topic_title}"]
    lines.extend(f"- {action}" for action in actions)
    return "\n".join(lines)


def render_plan(
    role: str,
    generated_date: date,
    weeks_duration: int,
    focus_areas: Sequence[str],
    schedule: Sequence[ScheduleEntry],
) -> str:
    """Render a complete study plan as markdown.

    Args:
        role: One of ``core.models.ROLES``; upper-cased in the title.
        generated_date: Calendar date printed in the header.
        weeks_duration: Plan length in weeks.
        focus_areas: Requested keywords, listed in request order.
        schedule: Output of ``build_schedule``.

    Returns:
        The plan document, ending with a newline.

    Raises:
        KeyError: If ``role`` has no implementation line.
    """
    focus_lines = "\n".join(f"- {area}" for area in focus_areas)
    weeks = "\n\n".join(render_week(entry, role) for entry in schedule)

    return (
        f"# Study Plan for {role.upper()} Developer\n"
        f"Generated on: {generated_date.isoformat()}\n"
        f"Duration: {_pluralize_weeks(weeks_duration)}\n"
        f"\n"
        f"## Focus Areas\n"
        f"{focus_lines}\n"
        f"\n"
        f"## Weekly Breakdown\n"
        f"\n"
        f"{weeks}\n"
        f"\n"
        f"{RESOURCES_SECTION}"
    )
