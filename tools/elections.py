# =============================================================================
# tools/elections.py  —  Election Tools
# =============================================================================
#
#   list_elections  GET /api/elections
#   get_election    GET /api/elections/{slug}
# =============================================================================

from typing import Annotated, Optional

from fastmcp import FastMCP
from fastmcp.tools.tool import ToolResult
from pydantic import Field

from core.api import PoligraphClient, encode_slug
from core.elections import render_election, render_election_list
from core.labels import ElectionStatusFilter, ElectionTypeFilter
from core.models import ElectionDetail, ElectionList
from tools.common import (
    READ_ONLY,
    Limit,
    Page,
    _log_request,
    _log_status,
    fetch,
    invocation_meta,
    respond,
)


def register(mcp: FastMCP, api: PoligraphClient) -> None:

    @mcp.tool(
        annotations=READ_ONLY,
        meta=invocation_meta("Recherche d'élections...", "Élections trouvées"),
    )
    async def list_elections(
        type: Annotated[Optional[ElectionTypeFilter], Field(description="Filtrer par type d'élection")] = None,
        status: Annotated[
            Optional[ElectionStatusFilter], Field(description="Filtrer par état d'avancement de l'élection")
        ] = None,
        page: Page = 1,
        limit: Limit = 20,
    ) -> ToolResult:
        """Lister les élections françaises (présidentielle, législatives, municipales...) passées et à venir."""
        _log_request("list_elections", type=type, status=status, page=page, limit=limit)
        result = await fetch(api, "list_elections", ElectionList, "/api/elections", {
            "type": type,
            "status": status,
            "page": page,
            "limit": limit,
        })
        _log_status(f"{result.pagination.total} elections")
        return respond("list_elections", render_election_list(result))

    @mcp.tool(
        annotations=READ_ONLY,
        meta=invocation_meta("Chargement de l'élection...", "Élection chargée"),
    )
    async def get_election(
        slug: Annotated[
            str, Field(min_length=1, description="Identifiant de l'élection (ex: 'presidentielle-2027')")
        ],
    ) -> ToolResult:
        """Obtenir le détail d'une élection : calendrier, tours, participation et candidatures."""
        _log_request("get_election", slug=slug)
        election = await fetch(api, "get_election", ElectionDetail, f"/api/elections/{encode_slug(slug)}")
        _log_status(f"{len(election.candidacies)} candidacies, {len(election.rounds)} rounds")
        return respond("get_election", render_election(election))
