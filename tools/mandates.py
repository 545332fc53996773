# =============================================================================
# tools/mandates.py  —  Mandate Tools
# =============================================================================
#
#   list_mandates  GET /api/mandats
# =============================================================================

from typing import Annotated, Optional

from fastmcp import FastMCP
from fastmcp.tools.tool import ToolResult
from pydantic import Field

from core.api import PoligraphClient
from core.labels import MandateListFilter
from core.mandates import render_mandate_list
from core.models import MandateList
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
        meta=invocation_meta("Recherche de mandats...", "Mandats trouvés"),
    )
    async def list_mandates(
        type: Annotated[Optional[MandateListFilter], Field(description="Filtrer par type de mandat")] = None,
        isCurrent: Annotated[
            Optional[bool], Field(description="true = mandats en cours, false = mandats terminés")
        ] = None,
        institution: Annotated[
            Optional[str], Field(description="Recherche sur l'institution (ex: 'Assemblée', 'Sénat')")
        ] = None,
        politician: Annotated[
            Optional[str], Field(description="Filtrer par slug du politicien (ex: 'gabriel-attal')")
        ] = None,
        page: Page = 1,
        limit: Limit = 20,
    ) -> ToolResult:
        """Lister les mandats politiques avec filtres par type, institution, statut actif/terminé et politicien."""
        _log_request("list_mandates", type=type, isCurrent=isCurrent, institution=institution,
                     politician=politician, page=page, limit=limit)
        result = await fetch(api, "list_mandates", MandateList, "/api/mandats", {
            "type": type,
            "isCurrent": isCurrent,
            "institution": institution,
            "politician": politician,
            "page": page,
            "limit": limit,
        })
        _log_status(f"{result.pagination.total} mandates")
        return respond("list_mandates", render_mandate_list(result))
