# =============================================================================
# core/config.py  —  Runtime Settings
# =============================================================================
#
# Every knob comes from an environment variable, with a default that works
# straight out of a checkout:
#
#   STUDY_PLANNER_ROOT            sandbox root           (<repo>/workspace)
#   STUDY_PLANNER_KNOWLEDGE_FILE  knowledge document     (concepts.md)
#   STUDY_PLANNER_PLAN_FILE       generated plan         (study-plan.md)
#   STUDY_PLANNER_TOPIC_MARKER    topic-line marker      (KA)
#   STUDY_PLANNER_PREVIEW_CHARS   tool preview length    (500)
#   STUDY_PLANNER_LOG_LEVEL       server log level       (INFO)
#
# The entry points call load_dotenv() first, so a .env file in the working
# directory is honoured too.
# =============================================================================

import os
import re
from dataclasses import dataclass
from pathlib import Path

from core.knowledge_base import DEFAULT_MARKER, compile_topic_pattern

PROJECT_ROOT = Path(__file__).resolve().parent.parent
DEFAULT_ROOT = PROJECT_ROOT / "workspace"

CONCEPTS_PLACEHOLDER = "# Software Engineering Concepts\n\nNo concepts available yet."
PLAN_PLACEHOLDER = "# Study Plan\n\nNo study plan generated yet."


@dataclass(frozen=True)
class Settings:
    """Where the planner's documents live and how it reads them."""

    root: Path = DEFAULT_ROOT
    knowledge_file: str = "concepts.md"
    plan_file: str = "study-plan.md"
    topic_marker: str = DEFAULT_MARKER
    preview_chars: int = 500
    log_level: str = "INFO"


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def load_settings() -> Settings:
    """Build Settings from the environment.

    Raises:
        ValueError: If a numeric variable is malformed or the topic marker
            is not a valid regular expression.
    """
    marker = os.getenv("STUDY_PLANNER_TOPIC_MARKER", DEFAULT_MARKER)
    try:
        compile_topic_pattern(marker)
    except re.error as exc:
        raise ValueError(f"STUDY_PLANNER_TOPIC_MARKER is not a valid regex: {exc}") from exc

    return Settings(
        root=Path(os.getenv("STUDY_PLANNER_ROOT", str(DEFAULT_ROOT))).expanduser(),
        knowledge_file=os.getenv("STUDY_PLANNER_KNOWLEDGE_FILE", "concepts.md"),
        plan_file=os.getenv("STUDY_PLANNER_PLAN_FILE", "study-plan.md"),
        topic_marker=marker,
        preview_chars=_int_from_env("STUDY_PLANNER_PREVIEW_CHARS", 500),
        log_level=os.getenv("STUDY_PLANNER_LOG_LEVEL", "INFO").upper(),
    )
