# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL business logic for the study planner: parsing
# the knowledge base, matching focus areas, scheduling weeks, rendering the
# plan and storing it inside the sandbox.
#
# Nothing in this package imports FastMCP, Google ADK, or any other agent
# framework.  Every module here can be imported and tested offline.
# =============================================================================
