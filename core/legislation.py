# =============================================================================
# core/legislation.py  —  Advanced Search Renderer
# =============================================================================
#
# /api/search/advanced combines name, party, mandate, department and status
# filters.  Unlike the other list endpoints it returns page/total/totalPages
# at the top level instead of a "pagination" object, and it may add
# "suggestions" (alternative spellings) when a query matches little.
# =============================================================================

from core.labels import MandateType
from core.models import AdvancedSearch, CurrentMandate, SearchResult
from core.narrative import Narrative, ToolOutput, politician_url, results_header


def mandate_suffix(mandate: CurrentMandate) -> str:
    where = f", {mandate.constituency}" if mandate.constituency else ""
    return f" — {MandateType.label_for(mandate.type)}{where}"


def search_result_lines(r: SearchResult) -> list[str]:
    party = f" ({r.current_party.short_name})" if r.current_party else ""
    mandate = mandate_suffix(r.current_mandate) if r.current_mandate else ""
    affairs = f" [{r.affairs_count} affaire(s)]" if r.affairs_count > 0 else ""
    return [f"- **{r.full_name}**{party}{mandate}{affairs}", f"  /politiques/{r.slug}"]


def render_advanced_search(result: AdvancedSearch, limit: int) -> ToolOutput:
    doc = Narrative()
    doc.line(results_header(result.total, "résultats", result.page, result.total_pages)).blank()
    for r in result.results:
        doc.section(search_result_lines(r))

    if result.suggestions:
        doc.blank().line("**Suggestions** : " + ", ".join(result.suggestions))

    doc.page_hint(result.page, result.total_pages)

    return ToolOutput(
        text=doc.render(),
        data={
            "total": result.total,
            "page": result.page,
            "totalPages": result.total_pages,
            "pagination": {
                "page": result.page,
                "limit": limit,
                "total": result.total,
                "totalPages": result.total_pages,
            },
            "results": [
                {
                    "slug": r.slug,
                    "fullName": r.full_name,
                    "party": {"shortName": r.current_party.short_name} if r.current_party else None,
                    "mandate": (
                        {"type": r.current_mandate.type, "constituency": r.current_mandate.constituency}
                        if r.current_mandate
                        else None
                    ),
                    "affairsCount": r.affairs_count,
                    "url": politician_url(r.slug),
                }
                for r in result.results
            ],
            "suggestions": result.suggestions,
        },
    )
