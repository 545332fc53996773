# =============================================================================
# tools/http_app.py  —  Streamable HTTP Binding
# =============================================================================
#
# Wraps the assembled FastMCP server as an ASGI application serving the MCP
# streamable-HTTP protocol on a single route (/mcp, all methods).  Used by
# `main.py --transport http` (uvicorn) and by api/mcp.py (serverless).
#
# The app is stateless: every request is handled on its own, no session
# is kept between calls, so any number of workers can serve it.
# CORS is wide open so browser-based MCP clients can connect.
# =============================================================================

from typing import Optional

from fastmcp import FastMCP
from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware

MCP_PATH = "/mcp"

CORS_MIDDLEWARE = Middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Mcp-Session-Id"],
    expose_headers=["Mcp-Session-Id"],
)


def create_http_app(server: Optional[FastMCP] = None) -> Starlette:
    """ASGI app exposing ``server`` (default: the shared instance) over HTTP."""
    if server is None:
        from tools.mcp_server import mcp as server

    return server.http_app(
        path=MCP_PATH,
        middleware=[CORS_MIDDLEWARE],
        stateless_http=True,
    )
