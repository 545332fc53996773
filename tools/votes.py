# =============================================================================
# tools/votes.py  —  Parliamentary Vote Tools
# =============================================================================
#
#   list_votes            GET /api/votes
#   get_politician_votes  GET /api/politiques/{slug}/votes
#   get_vote_stats        GET /api/votes/stats
# =============================================================================

from typing import Annotated, Optional

from fastmcp import FastMCP
from fastmcp.tools.tool import ToolResult
from pydantic import Field

from core.api import PoligraphClient, encode_slug
from core.labels import ChamberFilter, VoteResultFilter
from core.models import PoliticianVotes, ScrutinList, VoteStats
from core.votes import render_politician_votes, render_scrutin_list, render_vote_stats
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
        meta=invocation_meta("Recherche de scrutins...", "Scrutins trouvés"),
    )
    async def list_votes(
        search: Annotated[Optional[str], Field(description="Recherche dans le titre du scrutin")] = None,
        result: Annotated[
            Optional[VoteResultFilter], Field(description="Filtrer par résultat : ADOPTED ou REJECTED")
        ] = None,
        legislature: Annotated[Optional[int], Field(description="Filtrer par législature (ex: 16, 17)")] = None,
        page: Page = 1,
        limit: Limit = 20,
    ) -> ToolResult:
        """Lister les scrutins parlementaires (Assemblée nationale et Sénat) avec filtres."""
        _log_request("list_votes", search=search, result=result, legislature=legislature, page=page, limit=limit)
        scrutins = await fetch(api, "list_votes", ScrutinList, "/api/votes", {
            "search": search,
            "result": result,
            "legislature": legislature,
            "page": page,
            "limit": limit,
        })
        _log_status(f"{scrutins.pagination.total} scrutins")
        return respond("list_votes", render_scrutin_list(scrutins))

    @mcp.tool(
        annotations=READ_ONLY,
        meta=invocation_meta("Chargement des votes...", "Votes chargés"),
    )
    async def get_politician_votes(
        slug: Annotated[str, Field(min_length=1, description="Identifiant du politicien (ex: 'jean-luc-melenchon')")],
        page: Page = 1,
        limit: Limit = 20,
    ) -> ToolResult:
        """Obtenir les votes d'un politicien spécifique avec ses statistiques de participation."""
        _log_request("get_politician_votes", slug=slug, page=page, limit=limit)
        votes = await fetch(
            api,
            "get_politician_votes",
            PoliticianVotes,
            f"/api/politiques/{encode_slug(slug)}/votes",
            {"page": page, "limit": limit},
        )
        _log_status(f"{votes.stats.total} votes, participation {votes.stats.participation_rate}%")
        return respond("get_politician_votes", render_politician_votes(votes))

    @mcp.tool(
        annotations=READ_ONLY,
        meta=invocation_meta("Calcul des statistiques de vote...", "Statistiques calculées"),
    )
    async def get_vote_stats(
        chamber: Annotated[
            Optional[ChamberFilter], Field(description="Filtrer par chambre : AN (Assemblée) ou SENAT (Sénat)")
        ] = None,
    ) -> ToolResult:
        """Obtenir les statistiques de vote par parti : cohésion, scrutins divisifs, distribution globale."""
        _log_request("get_vote_stats", chamber=chamber)
        stats = await fetch(api, "get_vote_stats", VoteStats, "/api/votes/stats", {"chamber": chamber})
        _log_status(f"{len(stats.parties)} parties, {len(stats.divisive_scrutins)} divisive scrutins")
        return respond("get_vote_stats", render_vote_stats(stats, chamber))
