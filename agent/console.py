# =============================================================================
# agent/console.py  —  Terminal helpers for the study coach
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Everything main.py prints that is about study plans rather than about
#   ADK plumbing:
#     - slash commands that read the sandbox directly (/topics, /plan)
#     - one-line descriptions of generateStudyPlan calls and their results,
#       including the topic list when the focus areas matched nothing
#     - the week outline of the freshly written plan
#
#   No ADK imports here, so the helpers are tested without a model.
# =============================================================================

from core.config import CONCEPTS_PLACEHOLDER, PLAN_PLACEHOLDER, Settings
from core.knowledge_base import list_titles, parse_topics
from core.plan_store import PlanStore

GENERATE_TOOL = "generateStudyPlan"
ERROR_PREFIX = "Error generating study plan:"
AVAILABLE_MARKER = "Available topics: "

HELP_TEXT = """Commands:
  /topics   list the topics in the knowledge base
  /plan     print the most recent study plan
  /help     show this message
  quit      exit"""


def list_topics(store: PlanStore, settings: Settings) -> str:
    """Bulleted topic titles from the knowledge base."""
    text = store.read(settings.knowledge_file, fallback=CONCEPTS_PLACEHOLDER)
    titles = list_titles(parse_topics(text, marker=settings.topic_marker))
    if not titles:
        return f"No topics found in {settings.knowledge_file}."
    return "\n".join(f"  - {title}" for title in titles)


def plan_outline(plan_text: str) -> list[str]:
    """The "### Week N: Title" headings of a rendered plan, without the hashes."""
    return [
        line.removeprefix("### ")
        for line in plan_text.splitlines()
        if line.startswith("### Week ")
    ]


def handle_command(command: str, store: PlanStore, settings: Settings) -> str | None:
    """Run a slash command locally.  Returns None if ``command`` isn't one."""
    name = command.strip().lower()
    if name == "/topics":
        return list_topics(store, settings)
    if name == "/plan":
        return store.read(settings.plan_file, fallback=PLAN_PLACEHOLDER)
    if name == "/help":
        return HELP_TEXT
    return None


def tool_response_text(response: dict | None) -> str:
    """Pull the text out of a serialized MCP tool result.

    ADK hands function responses over as the dumped CallToolResult, i.e.
    ``{"content": [{"type": "text", "text": ...}], "isError": ...}``.
    """
    if not response:
        return ""
    parts = response.get("content") or []
    return "\n".join(part.get("text", "") for part in parts if part.get("type") == "text")


def describe_tool_call(name: str, args: dict | None) -> str:
    args = args or {}
    if name == GENERATE_TOOL:
        focus = ", ".join(args.get("focusAreas", []))
        return (
            f"📋 Generating a {args.get('weeksDuration')}-week "
            f"{args.get('role')} plan focused on: {focus}"
        )
    return f"🔧 Calling tool: {name}"


def describe_tool_result(name: str, text: str, store: PlanStore, settings: Settings) -> str | None:
    """Summarize a generateStudyPlan result for the terminal.

    On success the saved plan is re-read and its week outline printed.  On
    a no-match error the available topics are listed one per line.
    """
    if name != GENERATE_TOOL:
        return None

    if text.startswith(ERROR_PREFIX):
        if AVAILABLE_MARKER in text:
            available = text.split(AVAILABLE_MARKER, 1)[1].split(", ")
            lines = ["⚠️  No topics matched those focus areas. Available topics:"]
            lines.extend(f"  - {title}" for title in available)
            return "\n".join(lines)
        return f"⚠️  {text}"

    plan_text = store.read(settings.plan_file, fallback=PLAN_PLACEHOLDER)
    lines = [f"✅ Plan saved to {store.resolve(settings.plan_file)}"]
    lines.extend(f"  {week}" for week in plan_outline(plan_text))
    return "\n".join(lines)
