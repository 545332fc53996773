# =============================================================================
# tools/factchecks.py  —  Fact-check Tools
# =============================================================================
#
#   list_factchecks            GET /api/factchecks
#   get_politician_factchecks  GET /api/politiques/{slug}/factchecks
#   get_factcheck_stats        GET /api/factchecks/stats
# =============================================================================

from typing import Annotated, Optional

from fastmcp import FastMCP
from fastmcp.tools.tool import ToolResult
from pydantic import Field

from core.api import PoligraphClient, encode_slug
from core.factchecks import render_factcheck_list, render_factcheck_stats, render_politician_factchecks
from core.labels import VerdictFilter
from core.models import FactCheckList, FactCheckStats, PoliticianFactChecks
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
        meta=invocation_meta("Recherche de fact-checks...", "Fact-checks trouvés"),
    )
    async def list_factchecks(
        search: Annotated[
            Optional[str], Field(description="Recherche dans le titre ou la déclaration vérifiée")
        ] = None,
        politician: Annotated[
            Optional[str], Field(description="Filtrer par slug du politicien (ex: 'marine-le-pen')")
        ] = None,
        source: Annotated[
            Optional[str], Field(description="Filtrer par source (ex: 'AFP Factuel', 'Les Décodeurs')")
        ] = None,
        verdict: Annotated[
            Optional[VerdictFilter], Field(description="Filtrer par verdict : TRUE, FALSE, MISLEADING, etc.")
        ] = None,
        page: Page = 1,
        limit: Limit = 20,
    ) -> ToolResult:
        """Lister les fact-checks sur des politiciens français. Sources : AFP Factuel, Les Décodeurs, etc."""
        _log_request("list_factchecks", search=search, politician=politician, source=source,
                     verdict=verdict, page=page, limit=limit)
        result = await fetch(api, "list_factchecks", FactCheckList, "/api/factchecks", {
            "search": search,
            "politician": politician,
            "source": source,
            "verdict": verdict,
            "page": page,
            "limit": limit,
        })
        _log_status(f"{result.pagination.total} fact-checks")
        return respond("list_factchecks", render_factcheck_list(result))

    @mcp.tool(
        annotations=READ_ONLY,
        meta=invocation_meta("Chargement des fact-checks...", "Fact-checks chargés"),
    )
    async def get_politician_factchecks(
        slug: Annotated[str, Field(min_length=1, description="Identifiant du politicien (ex: 'marine-le-pen')")],
        page: Page = 1,
        limit: Limit = 20,
    ) -> ToolResult:
        """Obtenir les fact-checks mentionnant un politicien spécifique."""
        _log_request("get_politician_factchecks", slug=slug, page=page, limit=limit)
        result = await fetch(
            api,
            "get_politician_factchecks",
            PoliticianFactChecks,
            f"/api/politiques/{encode_slug(slug)}/factchecks",
            {"page": page, "limit": limit},
        )
        _log_status(f"{result.total} fact-checks for {result.politician.full_name}")
        return respond("get_politician_factchecks", render_politician_factchecks(result))

    @mcp.tool(
        annotations=READ_ONLY,
        meta=invocation_meta("Calcul des statistiques de fact-checks...", "Statistiques calculées"),
    )
    async def get_factcheck_stats() -> ToolResult:
        """Statistiques globales des fact-checks : répartition par verdict, par source et par parti."""
        _log_request("get_factcheck_stats")
        stats = await fetch(api, "get_factcheck_stats", FactCheckStats, "/api/factchecks/stats")
        _log_status(f"{stats.total} fact-checks, {len(stats.by_source)} sources")
        return respond("get_factcheck_stats", render_factcheck_stats(stats))
