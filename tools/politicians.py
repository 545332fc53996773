# =============================================================================
# tools/politicians.py  —  Politician Tools
# =============================================================================
#
#   search_politicians        GET /api/politiques
#   get_politician            GET /api/politiques/{slug}
#   get_politician_relations  GET /api/politiques/{slug}/relations
#
# The docstrings below are the tool descriptions clients see, so they are
# written in French like the rest of the output.
# =============================================================================

from typing import Annotated, Optional

from fastmcp import FastMCP
from fastmcp.tools.tool import ToolResult
from pydantic import Field

from core.api import PoligraphClient, encode_slug
from core.labels import PoliticianMandateFilter
from core.models import PoliticianDetail, PoliticianList, RelationGraph
from core.politicians import render_politician, render_politician_list, render_relations
from tools.common import (
    READ_ONLY,
    Limit,
    Page,
    PoliticianSlug,
    _log_request,
    _log_status,
    fetch,
    invocation_meta,
    respond,
)


def register(mcp: FastMCP, api: PoligraphClient) -> None:

    @mcp.tool(
        annotations=READ_ONLY,
        meta=invocation_meta("Recherche de politiciens...", "Politiciens trouvés"),
    )
    async def search_politicians(
        query: Annotated[Optional[str], Field(description="Recherche par nom (ex: 'Macron', 'Marine')")] = None,
        party: Annotated[Optional[str], Field(description="Filtrer par ID de parti")] = None,
        mandateType: Annotated[
            Optional[PoliticianMandateFilter], Field(description="Filtrer par type de mandat")
        ] = None,
        hasAffairs: Annotated[
            Optional[bool], Field(description="Filtrer les politiciens ayant des affaires judiciaires")
        ] = None,
        page: Page = 1,
        limit: Limit = 20,
    ) -> ToolResult:
        """Rechercher des politiciens français par nom, parti ou type de mandat. Retourne une liste paginée."""
        _log_request("search_politicians", query=query, party=party, mandateType=mandateType,
                     hasAffairs=hasAffairs, page=page, limit=limit)
        result = await fetch(api, "search_politicians", PoliticianList, "/api/politiques", {
            "search": query,
            "partyId": party,
            "mandateType": mandateType,
            "hasAffairs": hasAffairs,
            "page": page,
            "limit": limit,
        })
        _log_status(f"{result.pagination.total} politicians match")
        return respond("search_politicians", render_politician_list(result))

    @mcp.tool(
        annotations=READ_ONLY,
        meta=invocation_meta("Chargement du politicien...", "Politicien chargé"),
    )
    async def get_politician(slug: PoliticianSlug) -> ToolResult:
        """Obtenir la fiche complète d'un politicien : mandats, déclarations de patrimoine, nombre d'affaires."""
        _log_request("get_politician", slug=slug)
        politician = await fetch(api, "get_politician", PoliticianDetail, f"/api/politiques/{encode_slug(slug)}")
        _log_status(f"{len(politician.mandates)} mandates, {politician.affairs_count} affairs")
        return respond("get_politician", render_politician(politician))

    @mcp.tool(
        annotations=READ_ONLY,
        meta=invocation_meta("Chargement des relations...", "Relations chargées"),
    )
    async def get_politician_relations(
        slug: PoliticianSlug,
        types: Annotated[
            Optional[str],
            Field(
                description=(
                    "Types de relations séparés par virgule (ex: 'SAME_PARTY,SAME_GOVERNMENT'). "
                    "Types : SAME_PARTY, SAME_GOVERNMENT, SAME_LEGISLATURE, SAME_CONSTITUENCY, "
                    "SAME_EUROPEAN_GROUP, PARTY_HISTORY"
                )
            ),
        ] = None,
        limit: Annotated[int, Field(ge=1, le=50, description="Nombre max de connexions par type (max 50)")] = 10,
    ) -> ToolResult:
        """Obtenir les relations d'un politicien : même parti, gouvernement, législature, département, groupe européen."""
        _log_request("get_politician_relations", slug=slug, types=types, limit=limit)
        graph = await fetch(
            api,
            "get_politician_relations",
            RelationGraph,
            f"/api/politiques/{encode_slug(slug)}/relations",
            {"types": types, "limit": limit},
        )
        _log_status(f"{graph.total_connections} connections across {len(graph.by_type)} types")
        return respond("get_politician_relations", render_relations(graph))
