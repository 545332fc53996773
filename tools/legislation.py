# =============================================================================
# tools/legislation.py  —  Advanced Search Tool
# =============================================================================
#
#   search_advanced  GET /api/search/advanced
# =============================================================================

from typing import Annotated, Optional

from fastmcp import FastMCP
from fastmcp.tools.tool import ToolResult
from pydantic import Field

from core.api import PoligraphClient
from core.labels import SearchMandateFilter
from core.legislation import render_advanced_search
from core.models import AdvancedSearch
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
        meta=invocation_meta("Recherche avancée en cours...", "Résultats trouvés"),
    )
    async def search_advanced(
        query: Annotated[Optional[str], Field(description="Recherche par nom ou prénom (min 2 caractères)")] = None,
        party: Annotated[Optional[str], Field(description="Filtrer par ID de parti")] = None,
        mandate: Annotated[Optional[SearchMandateFilter], Field(description="Filtrer par type de mandat")] = None,
        department: Annotated[
            Optional[str], Field(description="Filtrer par département (ex: 'Paris', 'Bouches-du-Rhône')")
        ] = None,
        hasAffairs: Annotated[Optional[bool], Field(description="Filtrer par présence d'affaires judiciaires")] = None,
        isActive: Annotated[Optional[bool], Field(description="Filtrer les politiciens ayant un mandat actuel")] = None,
        page: Page = 1,
        limit: Limit = 20,
    ) -> ToolResult:
        """Recherche avancée de politiciens avec filtres combinés : parti, mandat, département, affaires, statut actif."""
        _log_request("search_advanced", query=query, party=party, mandate=mandate, department=department,
                     hasAffairs=hasAffairs, isActive=isActive, page=page, limit=limit)
        result = await fetch(api, "search_advanced", AdvancedSearch, "/api/search/advanced", {
            "q": query,
            "party": party,
            "mandate": mandate,
            "department": department,
            "hasAffairs": hasAffairs,
            "isActive": isActive,
            "page": page,
            "limit": limit,
        })
        if result.suggestions:
            _log_status(f"Upstream suggests: {', '.join(result.suggestions)}")
        _log_status(f"{result.total} results")
        return respond("search_advanced", render_advanced_search(result, limit))
