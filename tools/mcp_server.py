# =============================================================================
# tools/mcp_server.py  —  FastMCP Server (tools + resources in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes the study planner to an agent over MCP.  Each handler is a thin
#   wrapper around core/: it logs the call, runs the core function, and
#   turns core exceptions into text the agent can read.
#
# SURFACE:
#   Tools
#     - generateStudyPlan(role, weeksDuration, focusAreas) → text
#     - add(a, b)                                         → int
#   Resources
#     - concepts://src      the knowledge base (or a placeholder)
#     - study-plan://src    the last generated plan (or a placeholder)
#     - greeting://{name}   "Hello, {name}!"
#
# VALIDATION:
#   The tool signature IS the input schema.  FastMCP builds a pydantic model
#   from the annotations, so a bad role, an out-of-range week count or too
#   many focus areas are rejected before generate_study_plan ever runs.
#
# RUNNING THIS SERVER:
#     a) python -m tools.mcp_server       (stdio transport)
#     b) study-planner-server             (console script, same thing)
#     c) Spawned by the study coach agent (agent/study_agent.py)
# =============================================================================

import json
import logging
import sys
from datetime import date
from typing import Annotated

from dotenv import load_dotenv
from fastmcp import FastMCP
from pydantic import Field

from core.config import CONCEPTS_PLACEHOLDER, PLAN_PLACEHOLDER, Settings, load_settings
from core.errors import StudyPlanError
from core.models import (
    MAX_FOCUS_AREAS,
    MAX_WEEKS,
    MIN_FOCUS_AREAS,
    MIN_WEEKS,
    FocusRequest,
    Role,
)
from core.plan_store import PlanStore
from core.planner import generate_study_plan

# =============================================================================
# Logging Setup
# =============================================================================
# STDOUT carries the MCP stdio transport, so every log line goes to STDERR.
#   - CYAN for incoming requests (tool name + parameters)
#   - GREEN for responses
#   - YELLOW for intermediate status messages
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)


def _log_request(name: str, **params) -> None:
    """Log an incoming tool call or resource read in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logging.info(f"{_CYAN}{name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(name: str, result):
    """Log the response (compact JSON, or a length for documents) in GREEN."""
    if isinstance(result, str):
        summary = f"{len(result)} chars"
    else:
        summary = json.dumps(result, separators=(",", ":"))
    logging.info(f"{_GREEN}  ← {name} response: {summary}{_RESET}")
    return result


# =============================================================================
# Server factory
# =============================================================================
# Building the server in a function lets tests point it at a temporary
# sandbox or an in-memory repository, and pin the date.
# =============================================================================
def create_server(
    settings: Settings,
    store: PlanStore | None = None,
    today: date | None = None,
) -> FastMCP:
    """Create the study-planner FastMCP server.

    Args:
        settings: Sandbox root, file names, marker and preview length.
        store: Storage to use.  Defaults to files under ``settings.root``.
        today: Fixed generation date.  Defaults to the current date per call.
    """
    store = store if store is not None else PlanStore(settings.root)
    mcp = FastMCP("study-planner")

    # =========================================================================
    # TOOL: generateStudyPlan
    # =========================================================================
    # Parameter names are camelCase because they are the wire names agents
    # already send.
    # =========================================================================
    @mcp.tool(name="generateStudyPlan")
    def generate_study_plan_tool(
        role: Role,
        weeksDuration: Annotated[int, Field(ge=MIN_WEEKS, le=MAX_WEEKS)],
        focusAreas: Annotated[
            list[Annotated[str, Field(min_length=1)]],
            Field(min_length=MIN_FOCUS_AREAS, max_length=MAX_FOCUS_AREAS),
        ],
    ) -> str:
        """Generate a personalized, week-by-week study plan.

        WHEN TO CALL THIS: When the user wants a study plan for a role.
        Read concepts://src first if you don't know which topics exist; a
        focus area only matches topics whose line in the knowledge base
        contains it (case-insensitive).

        Args:
            role: One of "frontend", "backend", "fullstack", "devops",
                  "ml-engineer".
            weeksDuration: Plan length in weeks (1-52).
            focusAreas: 1-5 keywords, e.g. ["testing", "caching"].

        Returns:
            A success message with the first part of the plan, or an error
            message.  When no topic matches, the error lists every
            available topic so you can retry.  The full plan is available
            afterwards at study-plan://src.
        """
        _log_request("generateStudyPlan", role=role,
                     weeksDuration=weeksDuration, focusAreas=focusAreas)

        request = FocusRequest(
            role=role,
            weeks_duration=weeksDuration,
            focus_areas=tuple(focusAreas),
        )
        try:
            plan = generate_study_plan(request, store, settings, today=today)
        except StudyPlanError as exc:
            _log_status(f"Generation failed: {exc}")
            return _log_response("generateStudyPlan", f"Error generating study plan: {exc}")
        except Exception as exc:
            logging.exception("Unexpected error in study plan generation")
            return _log_response(
                "generateStudyPlan",
                f"Error generating study plan: unexpected {type(exc).__name__}: {exc}",
            )

        topics = sorted({entry.topic_title for entry in plan.schedule_entries})
        _log_status(f"Scheduled {len(plan.schedule_entries)} weeks over topics: {topics}")

        preview = plan.rendered_text[: settings.preview_chars]
        return _log_response(
            "generateStudyPlan",
            f"Study plan generated successfully! Check {settings.plan_file} for details.\n"
            f"Preview:\n{preview}...",
        )

    # =========================================================================
    # TOOL: add
    # =========================================================================
    @mcp.tool()
    def add(a: int, b: int) -> int:
        """Add two numbers."""
        _log_request("add", a=a, b=b)
        return _log_response("add", a + b)

    # =========================================================================
    # RESOURCES
    # =========================================================================
    # Documents are read fresh on every request.  A missing or unreadable
    # file comes back as a placeholder, never as an error.
    # =========================================================================
    @mcp.resource(
        "concepts://src",
        name="concepts",
        description="Software engineering concepts the study plans are built from",
        mime_type="text/markdown",
    )
    def get_concepts() -> str:
        _log_request("concepts://src")
        text = store.read(settings.knowledge_file, fallback=CONCEPTS_PLACEHOLDER)
        return _log_response("concepts://src", text)

    @mcp.resource(
        "study-plan://src",
        name="study-plan",
        description="The most recently generated study plan",
        mime_type="text/markdown",
    )
    def get_study_plan() -> str:
        _log_request("study-plan://src")
        text = store.read(settings.plan_file, fallback=PLAN_PLACEHOLDER)
        return _log_response("study-plan://src", text)

    @mcp.resource("greeting://{name}", name="greeting", description="Dynamic greeting")
    def get_greeting(name: str) -> str:
        return f"Hello, {name}!"

    return mcp


# =============================================================================
# Module-level server
# =============================================================================
# `fastmcp run tools/mcp_server.py` and the agent both pick this instance up.
# =============================================================================
load_dotenv()
_settings = load_settings()
mcp = create_server(_settings)


def main() -> None:
    """Run the server over stdio."""
    logging.getLogger().setLevel(_settings.log_level)
    logging.info(f"Study planner serving documents from {_settings.root}")
    mcp.run()


if __name__ == "__main__":
    main()
