# =============================================================================
# main.py  —  Entry Point for the Poligraph MCP Server
# =============================================================================
#
# HOW TO RUN:
#   python main.py                            # stdio (desktop MCP clients)
#   python main.py --transport http           # streamable HTTP on /mcp
#   python main.py --transport http --port 8080 --host 0.0.0.0
#
#   Installed as a package, the same entry point is `poligraph-mcp`.
#
# WHAT HAPPENS:
#   1. Loads .env (POLIGRAPH_BASE_URL, PORT, LOG_LEVEL, ...)
#   2. Builds the FastMCP server with all 19 tools (tools/mcp_server.py)
#   3. Serves it over the chosen transport until interrupted
#
# STDIO vs HTTP:
#   stdio is what desktop clients spawn as a subprocess: MCP messages go
#   over stdin/stdout, logs go to stderr.  HTTP serves the same tools to
#   networked clients, one stateless request at a time.
# =============================================================================

import argparse
import logging

from dotenv import load_dotenv

# Load environment variables from .env file.
# This must happen BEFORE importing the server, because settings are read
# once when tools.mcp_server builds the shared server instance.
load_dotenv()

import uvicorn  # noqa: E402

from core.config import get_settings  # noqa: E402
from tools.http_app import MCP_PATH, create_http_app  # noqa: E402
from tools.mcp_server import mcp  # noqa: E402

logger = logging.getLogger("poligraph.main")


def parse_args(argv=None) -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Serveur MCP Poligraph (données politiques françaises)")
    parser.add_argument(
        "--transport",
        choices=("stdio", "http"),
        default="stdio",
        help="stdio (défaut) ou http (streamable HTTP sur /mcp)",
    )
    parser.add_argument("--host", default=settings.host, help="Adresse d'écoute HTTP (défaut: MCP_HOST)")
    parser.add_argument("--port", type=int, default=settings.port, help="Port HTTP (défaut: PORT)")
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)

    if args.transport == "stdio":
        logger.info("Poligraph MCP server running on stdio")
        mcp.run()
        return

    logger.info(f"Poligraph MCP server on http://{args.host}:{args.port}{MCP_PATH}")
    uvicorn.run(
        create_http_app(mcp),
        host=args.host,
        port=args.port,
        log_level=get_settings().log_level.lower(),
    )


# =============================================================================
# Script entry point
# =============================================================================
if __name__ == "__main__":
    main()
