# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP server for the study planner.
#
# ARCHITECTURAL ROLE:
#   tools/ is the translation layer between an MCP client and core/:
#     1. It declares tool and resource contracts (names, typed parameters,
#        docstrings the LLM reads)
#     2. It validates input through those typed signatures
#     3. It calls core/ and converts core exceptions into readable text
#     4. It logs every call to STDERR
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT parse, match, schedule or render (that's in core/)
#   - They do NOT know about Google ADK (that's in agent/)
# =============================================================================
