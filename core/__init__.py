# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL domain logic for the Poligraph MCP server:
# the API adapter, response models, label tables and the renderers that
# turn API responses into markdown + structured data.
#
# CRITICAL ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP or any protocol framework.
#   The only third-party import is httpx, confined to core/api.py.  Every
#   renderer is a pure function of a parsed response and can be tested
#   without a server.
# =============================================================================
