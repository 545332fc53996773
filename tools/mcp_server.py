# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (assembly of all tool groups)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Builds the FastMCP server and registers the nine tool groups against a
#   single PoligraphClient.  Each group lives in its own tools/<group>.py
#   and only knows how to call core/ renderers.
#
# HOW IT WORKS (the flow):
#   1. An MCP client (desktop app, agent, web client) calls a tool by name
#   2. FastMCP validates the arguments against the tool's pydantic schema;
#      invalid input is rejected here, before any HTTP request
#   3. The tool handler GETs the Poligraph API through core.api
#   4. core/<group>.py turns the parsed response into markdown + a dict
#   5. The client receives both (text content + structured content)
#
# TOOL NAMING CONVENTIONS:
#   - search_* / list_*  → paginated queries with filters
#   - get_*              → one entity, or one statistics report
#   All tools are read-only and idempotent.
#
# RUNNING THIS SERVER:
#   a) python main.py                       (stdio)
#   b) python main.py --transport http      (streamable HTTP on /mcp)
#   c) python -m tools.mcp_server           (stdio, no .env loading)
# =============================================================================

import logging
import sys
from typing import Optional

from fastmcp import FastMCP

from core.api import PoligraphClient
from core.config import SERVER_VERSION, get_settings
from tools import affairs, departments, elections, factchecks, legislation, mandates, parties, politicians, votes

# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because the stdio transport uses STDOUT for MCP JSON
# messages.  Anything printed to stdout would corrupt the protocol stream.
# =============================================================================
logging.basicConfig(
    level=getattr(logging, get_settings().log_level, logging.INFO),
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)

SERVER_NAME = "poligraph"

INSTRUCTIONS = """\
Outils de consultation des données politiques françaises de Poligraph \
(https://poligraph.fr) : politiciens, mandats, affaires judiciaires, votes \
parlementaires, partis, fact-checks, élections et statistiques par département.

Les identifiants "slug" (ex: 'emmanuel-macron') renvoyés par les recherches \
servent aux outils de détail.  Les listes sont paginées : quand la réponse \
indique "Page suivante : page=N", rappelez l'outil avec ce numéro de page.

Toute personne mise en examen est présumée innocente jusqu'à décision de \
justice définitive ; les réponses le rappellent pour les affaires en cours.\
"""

TOOL_GROUPS = (
    politicians,
    affairs,
    votes,
    legislation,
    factchecks,
    parties,
    elections,
    mandates,
    departments,
)


def create_server(api: Optional[PoligraphClient] = None) -> FastMCP:
    """Build a FastMCP server with every Poligraph tool registered.

    Args:
        api: The API adapter the tools call.  Defaults to a client built from
             the environment; tests pass one wired to an httpx.MockTransport.
    """
    api = api or PoligraphClient()
    server = FastMCP(SERVER_NAME, instructions=INSTRUCTIONS, version=SERVER_VERSION)
    for group in TOOL_GROUPS:
        group.register(server, api)
    logging.getLogger(__name__).debug("Registered tool groups against %s", api.base_url)
    return server


# =============================================================================
# The server instance every transport binds
# =============================================================================
mcp = create_server()


if __name__ == "__main__":
    mcp.run()
