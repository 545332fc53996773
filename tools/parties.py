# =============================================================================
# tools/parties.py  —  Political Party Tools
# =============================================================================
#
#   list_parties  GET /api/partis
#   get_party     GET /api/partis/{slug}
# =============================================================================

from typing import Annotated, Optional

from fastmcp import FastMCP
from fastmcp.tools.tool import ToolResult
from pydantic import Field

from core.api import PoligraphClient, encode_slug
from core.labels import PositionFilter
from core.models import PartyDetail, PartyList
from core.parties import render_party, render_party_list
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
        meta=invocation_meta("Recherche de partis politiques...", "Partis trouvés"),
    )
    async def list_parties(
        search: Annotated[
            Optional[str], Field(description="Recherche par nom ou abréviation (ex: 'LFI', 'Républicains')")
        ] = None,
        position: Annotated[
            Optional[PositionFilter], Field(description="Filtrer par position sur l'échiquier politique")
        ] = None,
        active: Annotated[
            Optional[bool],
            Field(description="true = partis actifs (non dissous avec des membres), false = partis dissous"),
        ] = None,
        page: Page = 1,
        limit: Limit = 20,
    ) -> ToolResult:
        """Lister les partis politiques français avec filtres par position politique et statut."""
        _log_request("list_parties", search=search, position=position, active=active, page=page, limit=limit)
        result = await fetch(api, "list_parties", PartyList, "/api/partis", {
            "search": search,
            "position": position,
            "active": active,
            "page": page,
            "limit": limit,
        })
        _log_status(f"{result.pagination.total} parties")
        return respond("list_parties", render_party_list(result))

    @mcp.tool(
        annotations=READ_ONLY,
        meta=invocation_meta("Chargement du parti...", "Parti chargé"),
    )
    async def get_party(
        slug: Annotated[
            str,
            Field(
                min_length=1,
                description="Identifiant du parti (ex: 'renaissance', 'rassemblement-national', 'la-france-insoumise')",
            ),
        ],
    ) -> ToolResult:
        """Obtenir la fiche complète d'un parti politique : membres, position, filiation, liens externes."""
        _log_request("get_party", slug=slug)
        party = await fetch(api, "get_party", PartyDetail, f"/api/partis/{encode_slug(slug)}")
        _log_status(f"{party.name}: {len(party.members)} members listed")
        return respond("get_party", render_party(party))
