# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP tool definitions, one module per group
# (politicians, affairs, votes, legislation, factchecks, parties, elections,
# mandates, departments), plus the server assembly and HTTP binding.
#
# ARCHITECTURAL ROLE:
#   tools/ is the translation layer between the MCP protocol and core/.
#   Each tool:
#     1. Declares its input schema (typed, bounded, defaulted parameters)
#     2. GETs the upstream endpoint through core.api
#     3. Hands the parsed response to a core/ renderer
#     4. Returns the narrative as text content and the dict as structured
#        content
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT format text (that's in core/)
#   - They do NOT talk HTTP directly (that's core/api.py)
#   - They do NOT keep state between calls
# =============================================================================
