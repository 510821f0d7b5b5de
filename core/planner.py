# =============================================================================
# core/planner.py  —  The Plan-Generation Pipeline
# =============================================================================
#
# One call, one plan:
#
#   store.read(knowledge)  →  parse_topics  →  match_topics
#        →  build_schedule  →  render_plan  →  store.write(plan)
#
# The search and analysis steps are separate functions in their own modules
# so each can be tested alone.  This module only composes them.
#
# Failures are raised, never formatted.  The tool layer turns them into text.
# =============================================================================

from datetime import date

from core.config import CONCEPTS_PLACEHOLDER, Settings
from core.knowledge_base import parse_topics
from core.matching import match_topics
from core.models import FocusRequest, StudyPlan
from core.plan_store import PlanStore
from core.renderer import render_plan
from core.scheduler import build_schedule


def generate_study_plan(
    request: FocusRequest,
    store: PlanStore,
    settings: Settings,
    today: date | None = None,
) -> StudyPlan:
    """Build, render and persist a study plan.

    Args:
        request: Validated role, duration and focus areas.
        store: Sandboxed storage holding the knowledge base and the plan.
        settings: File names and topic marker.
        today: Date printed on the plan.  Defaults to ``date.today()``.

    Returns:
        The generated StudyPlan, including its rendered text.

    Raises:
        AccessDenied: If a configured path escapes the sandbox.
        NoMatchingTopics: If no topic matches the focus areas.
        PlanStorageError: If the plan document can't be written.
    """
    # An unreadable knowledge base reads as the placeholder, which has no
    # topic lines, so it surfaces below as NoMatchingTopics.
    knowledge = store.read(settings.knowledge_file, fallback=CONCEPTS_PLACEHOLDER)
    topics = parse_topics(knowledge, marker=settings.topic_marker)
    matched = match_topics(topics, request.focus_areas)
    schedule = build_schedule(matched, request.weeks_duration)

    generated_date = today or date.today()
    rendered = render_plan(
        request.role,
        generated_date,
        request.weeks_duration,
        request.focus_areas,
        schedule,
    )
    store.write(settings.plan_file, rendered)

    return StudyPlan(
        role=request.role,
        generated_date=generated_date,
        weeks_duration=request.weeks_duration,
        focus_areas=request.focus_areas,
        schedule_entries=schedule,
        rendered_text=rendered,
    )
