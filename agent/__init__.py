# =============================================================================
# agent/__init__.py
# =============================================================================
# This package contains the Google ADK "study coach" agent.
#
# ARCHITECTURAL ROLE:
#   The agent/ layer talks to the user and decides WHEN to call the
#   study-planner tools.  It:
#     1. Collects role, duration and focus areas from the user
#     2. Reads the knowledge base to pick keywords that exist
#     3. Calls generateStudyPlan through MCP
#     4. Explains the resulting plan
#
# WHAT THE AGENT IS NOT:
#   - It is NOT the planning logic (that's in core/)
#   - It is NOT the tool implementations (that's in tools/)
# =============================================================================
