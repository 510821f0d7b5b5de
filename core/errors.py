# =============================================================================
# core/errors.py  —  Error kinds raised by the plan-generation pipeline
# =============================================================================
#
# The core never turns a failure into text.  It raises one of the exceptions
# below and the tool layer (tools/mcp_server.py) decides what the agent sees.
#
#   StudyPlanError
#     ├── AccessDenied        path resolves outside the sandbox root
#     ├── NoMatchingTopics    focus areas matched nothing in the knowledge base
#     └── PlanStorageError    the plan document could not be written
#
# Input validation (role, week range, focus-area count) happens in the MCP
# schema before any of this code runs, so there is no validation error here.
# =============================================================================

from pathlib import Path
from typing import Iterable


class StudyPlanError(Exception):
    """Base class for every failure the pipeline reports to its caller."""


class AccessDenied(StudyPlanError):
    """A requested path resolves to a location outside the sandbox root."""

    def __init__(self, path: str | Path, root: Path):
        self.path = str(path)
        self.root = root
        super().__init__(
            f"Access denied: '{self.path}' resolves outside of {root}"
        )


class NoMatchingTopics(StudyPlanError):
    """No topic line contains any of the requested focus areas.

    The message lists every title in the knowledge base so the caller can
    retry with keywords that exist.
    """

    def __init__(self, focus_areas: Iterable[str], available_titles: Iterable[str]):
        self.focus_areas = list(focus_areas)
        self.available_titles = list(available_titles)
        if self.available_titles:
            available = ", ".join(self.available_titles)
        else:
            available = "(the knowledge base has no topics)"
        super().__init__(
            f"No topics match focus areas {self.focus_areas}. "
            f"Available topics: {available}"
        )


class PlanStorageError(StudyPlanError):
    """Writing a document failed; generation is aborted."""

    def __init__(self, path: Path, cause: BaseException):
        self.path = path
        self.cause = cause
        super().__init__(f"Could not write {path.name}: {cause}")
