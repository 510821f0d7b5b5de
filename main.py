# =============================================================================
# main.py  —  Entry Point for the Study Coach Agent
# =============================================================================
#
# HOW TO RUN:
#   python main.py          (or the `study-coach` console script)
#
# WHAT HAPPENS:
#   1. Creates the Google ADK agent (agent/study_agent.py), which spawns the
#      study-planner MCP server over stdio
#   2. Opens an in-memory session
#   3. Each turn, either runs a local slash command (/topics, /plan) against
#      the same sandbox the server uses, or sends the message to the agent
#   4. While the agent works, generateStudyPlan calls are narrated: the
#      requested role/weeks/focus, then either the saved plan's week outline
#      or the list of topics to choose from when nothing matched
#
# To run only the MCP server (for another MCP client), use
#   python -m tools.mcp_server
# =============================================================================

import asyncio

from dotenv import load_dotenv

# LiteLlm reads the provider key (e.g. OPENROUTER_API_KEY) when the agent is
# created, so the .env file has to be loaded first.
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.console import (
    HELP_TEXT,
    describe_tool_call,
    describe_tool_result,
    handle_command,
    tool_response_text,
)
from agent.study_agent import create_agent
from core.config import load_settings
from core.plan_store import PlanStore

APP_NAME = "study_coach"
USER_ID = "local_user"


async def _ask_agent(runner: Runner, session_id: str, message: str, store: PlanStore, settings) -> str:
    """Send one message, narrate study-plan tool traffic, return the final text."""
    final_response = ""
    async for event in runner.run_async(
        user_id=USER_ID,
        session_id=session_id,
        new_message=types.Content(role="user", parts=[types.Part(text=message)]),
    ):
        if not (event.content and event.content.parts):
            continue
        for part in event.content.parts:
            if part.function_call:
                print(f"  {describe_tool_call(part.function_call.name, part.function_call.args)}")
            elif part.function_response:
                text = tool_response_text(part.function_response.response)
                summary = describe_tool_result(part.function_response.name, text, store, settings)
                if summary:
                    print(summary)
            elif part.text:
                final_response = part.text
    return final_response


async def run_agent():
    """Run the study coach interactively until the user quits."""
    settings = load_settings()
    store = PlanStore(settings.root)

    print("=" * 70)
    print("  STUDY COACH")
    print(f"  Knowledge base: {store.resolve(settings.knowledge_file)}")
    print("=" * 70)
    agent = create_agent()

    session_service = InMemorySessionService()
    runner = Runner(agent=agent, app_name=APP_NAME, session_service=session_service)
    session = await session_service.create_session(app_name=APP_NAME, user_id=USER_ID)

    print("\n💬 Tell the coach your role, how many weeks you have, and what to focus on.")
    print(HELP_TEXT)

    while True:
        try:
            user_input = input("\n🧑 You: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n\n👋 Goodbye!")
            break

        if user_input.lower() in ("quit", "exit", "q"):
            print("\n👋 Goodbye!")
            break
        if not user_input:
            continue

        local = handle_command(user_input, store, settings)
        if local is not None:
            print(f"\n{local}")
            continue

        print("-" * 70)
        answer = await _ask_agent(runner, session.id, user_input, store, settings)
        print("-" * 70)
        if answer:
            print(f"\n🤖 Coach:\n\n{answer}")
        else:
            print("\n⚠️  No response generated. Try /plan to see the last saved plan.")


def main() -> None:
    asyncio.run(run_agent())


if __name__ == "__main__":
    main()
