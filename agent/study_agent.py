# =============================================================================
# agent/study_agent.py  —  Google ADK Agent Configuration
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Creates the study coach: a Google ADK agent whose only capabilities are
#   the tools and resources of the study-planner MCP server.
#
#   ┌───────────────────────────────┐
#   │ Google ADK Agent              │
#   │  prompt ──▶ LLM (LiteLlm) ──▶ │── MCPToolset (stdio) ──┐
#   └───────────────────────────────┘                        ▼
#                                               ┌─────────────────────────┐
#                                               │ tools/mcp_server.py     │
#                                               │  • generateStudyPlan    │
#                                               │  • concepts://src       │
#                                               │  • study-plan://src     │
#                                               └────────────┬────────────┘
#                                                            ▼
#                                               ┌─────────────────────────┐
#                                               │ core/ (pure Python)     │
#                                               └─────────────────────────┘
#
# MODEL:
#   LiteLlm routes to any provider.  The default goes through OpenRouter
#   (reads OPENROUTER_API_KEY); set STUDY_COACH_MODEL to use another one.
# =============================================================================

import os
import sys

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from mcp import StdioServerParameters

from agent.prompt import get_study_coach_prompt

DEFAULT_MODEL = "openrouter/openai/gpt-4o"


def create_agent() -> Agent:
    """Create the study coach agent.

    The MCP server is started as a subprocess with the current interpreter,
    from the project root, so it sees the same environment (including
    STUDY_PLANNER_* variables) as this process.

    Returns:
        A configured Google ADK Agent instance.
    """
    project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

    mcp_tools = MCPToolset(
        connection_params=StdioServerParameters(
            command=sys.executable,
            args=["-m", "tools.mcp_server"],
            cwd=project_root,
        ),
    )

    return Agent(
        name="study_coach",
        model=LiteLlm(model=os.getenv("STUDY_COACH_MODEL", DEFAULT_MODEL)),
        instruction=get_study_coach_prompt(),
        tools=[mcp_tools],
    )
