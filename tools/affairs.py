# =============================================================================
# tools/affairs.py  —  Judicial Affair Tools
# =============================================================================
#
#   list_affairs            GET /api/affaires
#   get_politician_affairs  GET /api/politiques/{slug}/affaires
# =============================================================================

from typing import Annotated, Optional

from fastmcp import FastMCP
from fastmcp.tools.tool import ToolResult
from pydantic import Field

from core.affairs import render_affair_list, render_politician_affairs
from core.api import PoligraphClient, encode_slug
from core.labels import AffairCategoryFilter, AffairStatusFilter
from core.models import AffairList, PoliticianAffairs
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
        meta=invocation_meta("Recherche d'affaires judiciaires...", "Affaires trouvées"),
    )
    async def list_affairs(
        status: Annotated[Optional[AffairStatusFilter], Field(description="Filtrer par statut judiciaire")] = None,
        category: Annotated[
            Optional[AffairCategoryFilter], Field(description="Filtrer par catégorie d'infraction")
        ] = None,
        page: Page = 1,
        limit: Limit = 20,
    ) -> ToolResult:
        """Lister les affaires judiciaires impliquant des politiciens français, avec filtres par statut et catégorie."""
        _log_request("list_affairs", status=status, category=category, page=page, limit=limit)
        result = await fetch(api, "list_affairs", AffairList, "/api/affaires", {
            "status": status,
            "category": category,
            "page": page,
            "limit": limit,
        })
        _log_status(f"{result.pagination.total} affairs, page {result.pagination.page}")
        return respond("list_affairs", render_affair_list(result))

    @mcp.tool(
        annotations=READ_ONLY,
        meta=invocation_meta("Chargement des affaires...", "Affaires chargées"),
    )
    async def get_politician_affairs(
        slug: Annotated[str, Field(min_length=1, description="Identifiant du politicien (ex: 'nicolas-sarkozy')")],
    ) -> ToolResult:
        """Obtenir les affaires judiciaires d'un politicien spécifique, avec sources et détails."""
        _log_request("get_politician_affairs", slug=slug)
        result = await fetch(
            api,
            "get_politician_affairs",
            PoliticianAffairs,
            f"/api/politiques/{encode_slug(slug)}/affaires",
        )
        _log_status(f"{result.total} affairs for {result.politician.full_name}")
        return respond("get_politician_affairs", render_politician_affairs(result))
