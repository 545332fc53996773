# =============================================================================
# tools/departments.py  —  Department Tools
# =============================================================================
#
#   get_department_stats        GET /api/stats/departments
#   get_deputies_by_department  GET /api/deputies/by-department
# =============================================================================

from typing import Annotated

from fastmcp import FastMCP
from fastmcp.tools.tool import ToolResult
from pydantic import Field

from core.api import PoligraphClient
from core.departments import render_department_stats, render_deputies
from core.labels import DepartmentFilterCode
from core.models import DepartmentStatsReport, DeputyList
from tools.common import READ_ONLY, _log_request, _log_status, fetch, invocation_meta, respond


def register(mcp: FastMCP, api: PoligraphClient) -> None:

    @mcp.tool(
        annotations=READ_ONLY,
        meta=invocation_meta("Calcul des statistiques départementales...", "Statistiques calculées"),
    )
    async def get_department_stats(
        filter: Annotated[
            DepartmentFilterCode,
            Field(description="Filtrer par type : all (députés + sénateurs), deputes, senateurs"),
        ] = "all",
    ) -> ToolResult:
        """Statistiques politiques par département : nombre d'élus, parti dominant, répartition des partis."""
        _log_request("get_department_stats", filter=filter)
        report = await fetch(
            api, "get_department_stats", DepartmentStatsReport, "/api/stats/departments", {"filter": filter}
        )
        _log_status(f"{len(report.departments)} departments")
        return respond("get_department_stats", render_department_stats(report, filter))

    @mcp.tool(
        annotations=READ_ONLY,
        meta=invocation_meta("Recherche des députés...", "Députés trouvés"),
    )
    async def get_deputies_by_department(
        department: Annotated[
            str, Field(min_length=1, description="Nom du département (ex: 'Paris', 'Bouches-du-Rhône', 'Nord')")
        ],
    ) -> ToolResult:
        """Obtenir la liste des députés en exercice dans un département donné."""
        _log_request("get_deputies_by_department", department=department)
        deputies = await fetch(
            api, "get_deputies_by_department", DeputyList, "/api/deputies/by-department", {"department": department}
        )
        _log_status(f"{len(deputies.items)} deputies in {department}")
        return respond("get_deputies_by_department", render_deputies(department, deputies))
