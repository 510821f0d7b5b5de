# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the study planner)
# =============================================================================
#
# These dataclasses define the shape of every piece of information that flows
# through the plan-generation pipeline:
#
#   knowledge text ──▶ TopicEntry[] ──▶ ScheduleEntry[] ──▶ StudyPlan
#                        (parser)        (scheduler)        (renderer)
#
# FocusRequest is what arrives from the tool boundary.  By the time one is
# built, the MCP schema layer has already checked the role, the week range
# and the number of focus areas.
# =============================================================================

from dataclasses import dataclass, field
from datetime import date
from typing import Literal, get_args


# -----------------------------------------------------------------------------
# Roles
# -----------------------------------------------------------------------------
# The tool schema uses the Literal directly, so the enumeration only lives here.
# -----------------------------------------------------------------------------
Role = Literal["frontend", "backend", "fullstack", "devops", "ml-engineer"]
ROLES: tuple[str, ...] = get_args(Role)

MIN_WEEKS = 1
MAX_WEEKS = 52
MIN_FOCUS_AREAS = 1
MAX_FOCUS_AREAS = 5


# -----------------------------------------------------------------------------
# TopicEntry — one recognized line of the knowledge base
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class TopicEntry:
    """A single topic parsed from the knowledge-base document.

    Codes are copied as written; two entries may share a code.
    """

    code: int                          # Numeric code after the marker ("KA 12" → 12)
    title: str                         # "Caching Strategies"; no marker, code or body
    raw_line: str                      # Full source line; focus matching searches this


# -----------------------------------------------------------------------------
# FocusRequest — the validated input of one generation call
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class FocusRequest:
    """Who the plan is for, how long it runs, and what it should cover."""

    role: str                          # One of ROLES
    weeks_duration: int                # MIN_WEEKS..MAX_WEEKS
    focus_areas: tuple[str, ...]       # 1-5 keywords, in the caller's order


# -----------------------------------------------------------------------------
# ScheduleEntry — one week of the plan
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ScheduleEntry:
    """The topic assigned to a single (1-based) week."""

    week: int
    topic_title: str


# -----------------------------------------------------------------------------
# StudyPlan — the deliverable
# -----------------------------------------------------------------------------
# Built once per request and rendered straight away.  Nothing keeps it in
# memory afterwards: the persisted markdown is what later reads return.
# -----------------------------------------------------------------------------
@dataclass
class StudyPlan:
    """A generated plan together with its rendered markdown."""

    role: str
    generated_date: date
    weeks_duration: int
    focus_areas: tuple[str, ...]
    schedule_entries: list[ScheduleEntry] = field(default_factory=list)
    rendered_text: str = ""
