# =============================================================================
# core/departments.py  —  Department Renderers
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   - render_department_stats()  → /api/stats/departments
#   - render_deputies()          → /api/deputies/by-department
#
# PARTY DOMINANCE:
#   The one figure computed locally.  party_dominance() counts, across all
#   departments, how many have each party as their dominantParty.
#   Departments without a dominant party are not counted, so the values
#   always sum to at most the number of departments.
# =============================================================================

from core.labels import DepartmentFilter
from core.models import DepartmentStats, DepartmentStatsReport, DeputyList
from core.narrative import Narrative, ToolOutput, politician_url, site_url

TOP_DEPARTMENTS_SHOWN = 10

NO_DEPUTY_HINT = (
    "_Aucun député trouvé pour ce département. Vérifiez l'orthographe "
    "(ex: 'Bouches-du-Rhône', pas 'Bouches du Rhône')._"
)


def party_dominance(departments: list[DepartmentStats]) -> dict[str, int]:
    """shortName → number of departments it dominates, most first.

    Ties keep the order in which parties were first seen.
    """
    counts: dict[str, int] = {}
    for d in departments:
        if d.dominant_party:
            key = d.dominant_party.short_name
            counts[key] = counts.get(key, 0) + 1
    return dict(sorted(counts.items(), key=lambda item: item[1], reverse=True))


def department_line(d: DepartmentStats) -> str:
    dominant = ""
    if d.dominant_party:
        dominant = f" — Dominant : {d.dominant_party.short_name} ({d.dominant_party.count})"
    return f"- **{d.name}** ({d.code}) : {d.total_elus} élus ({d.deputes}D, {d.senateurs}S){dominant}"


def render_department_stats(report: DepartmentStatsReport, filter_code: str = "all") -> ToolOutput:
    totals = report.stats
    top = sorted(report.departments, key=lambda d: d.total_elus, reverse=True)[:TOP_DEPARTMENTS_SHOWN]
    dominance = party_dominance(report.departments)
    map_url = site_url("carte")

    doc = Narrative()
    doc.heading(f"Statistiques par département — {DepartmentFilter.label_for(filter_code)}").blank()
    doc.line(
        f"**{totals.total_departments} départements** — {totals.total_elus} élus "
        f"({totals.total_deputes} députés, {totals.total_senateurs} sénateurs)"
    ).blank()

    doc.heading(f"Top {TOP_DEPARTMENTS_SHOWN} départements", 2)
    for d in top:
        doc.line(department_line(d))

    if dominance:
        doc.blank().heading("Parti dominant par nombre de départements", 2)
        for party, count in dominance.items():
            doc.bullet(f"**{party}** : {count} départements")

    doc.blank().line(map_url)

    return ToolOutput(
        text=doc.render(),
        data={
            "filter": filter_code,
            "stats": totals.to_dict(),
            "topDepartments": [
                {
                    "code": d.code,
                    "name": d.name,
                    "region": d.region,
                    "totalElus": d.total_elus,
                    "deputes": d.deputes,
                    "senateurs": d.senateurs,
                    "dominantParty": d.dominant_party.to_dict() if d.dominant_party else None,
                    "parties": [p.to_dict() for p in d.parties],
                }
                for d in top
            ],
            "partyDominance": dominance,
            "url": map_url,
        },
    )


def render_deputies(department: str, deputies: DeputyList) -> ToolOutput:
    doc = Narrative()
    doc.heading(f"Députés — {department}")
    doc.bold(f"{len(deputies.items)} député(s) en exercice").blank()

    for d in deputies.items:
        party = f" ({d.party.short_name})" if d.party else ""
        doc.bullet(f"**{d.full_name}**{party} — {d.constituency or ''}")
        doc.line(f"  /politiques/{d.slug}")

    if not deputies.items:
        doc.line(NO_DEPUTY_HINT)

    return ToolOutput(
        text=doc.render(),
        data={
            "department": department,
            "total": len(deputies.items),
            "deputies": [
                {
                    "slug": d.slug,
                    "fullName": d.full_name,
                    "constituency": d.constituency,
                    "party": d.party.to_dict() if d.party else None,
                    "url": politician_url(d.slug),
                }
                for d in deputies.items
            ],
        },
    )
