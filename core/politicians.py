# =============================================================================
# core/politicians.py  —  Politician Renderers
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns /api/politiques responses into ToolOutput (markdown + structured).
#   Three views:
#     - render_politician_list()   → search results, one line per politician
#     - render_politician()        → full profile with mandates and HATVP
#                                    declarations
#     - render_relations()         → relation graph grouped by relation type
#
# Nothing here performs I/O; tools/politicians.py fetches and calls these.
# =============================================================================

from typing import Optional

from core.formatting import format_date, truncate
from core.labels import MandateType, RelationType
from core.models import (
    Mandate,
    PartyRef,
    PoliticianDetail,
    PoliticianList,
    PoliticianSummary,
    RelationGraph,
    RelationNode,
)
from core.narrative import Narrative, ToolOutput, politician_url, results_header, more_trailer

RELATION_NODES_SHOWN = 15


def party_payload(party: Optional[PartyRef]) -> Optional[dict]:
    return party.to_dict() if party else None


def politician_line(p: PoliticianSummary) -> str:
    party = f" ({p.current_party.short_name})" if p.current_party else ""
    deceased = " [Décédé(e)]" if p.death_date else ""
    return f"- **{p.full_name}**{party}{deceased} — /politiques/{p.slug}"


def render_politician_list(result: PoliticianList) -> ToolOutput:
    pg = result.pagination
    doc = Narrative()
    doc.line(results_header(pg.total, "résultats", pg.page, pg.total_pages)).blank()
    for p in result.items:
        doc.line(politician_line(p))
    doc.page_hint(pg.page, pg.total_pages)

    return ToolOutput(
        text=doc.render(),
        data={
            "total": pg.total,
            "page": pg.page,
            "totalPages": pg.total_pages,
            "pagination": pg.to_dict(),
            "items": [
                {
                    "slug": p.slug,
                    "fullName": p.full_name,
                    "party": party_payload(p.current_party),
                    "birthDate": p.birth_date,
                    "deathDate": p.death_date,
                    "url": politician_url(p.slug),
                }
                for p in result.items
            ],
        },
    )


# -----------------------------------------------------------------------------
# Profile
# -----------------------------------------------------------------------------
def _constituency(m: Mandate) -> str:
    return f" — {m.constituency}" if m.constituency else ""


def current_mandate_line(m: Mandate) -> str:
    return (
        f"- {MandateType.label_for(m.type)} : {m.title}{_constituency(m)}"
        f" (depuis {format_date(m.start_date)})"
    )


def past_mandate_line(m: Mandate) -> str:
    return (
        f"- {MandateType.label_for(m.type)} : {m.title}{_constituency(m)}"
        f" ({format_date(m.start_date)} → {format_date(m.end_date)})"
    )


def mandates_section(mandates: list[Mandate]) -> list[str]:
    """'## Mandats' with current and past mandates in separate sub-sections."""
    if not mandates:
        return []
    current = [m for m in mandates if m.is_current]
    past = [m for m in mandates if not m.is_current]

    lines = ["", "## Mandats"]
    if current:
        lines.append("### En cours")
        lines.extend(current_mandate_line(m) for m in current)
    if past:
        lines.append("### Anciens mandats")
        lines.extend(past_mandate_line(m) for m in past)
    return lines


def birth_line(p: PoliticianDetail) -> str:
    born = "Née" if p.civility == "Mme" else "Né"
    place = f" à {p.birth_place}" if p.birth_place else ""
    return f"**{born}** le {format_date(p.birth_date)}{place}"


def render_politician(p: PoliticianDetail) -> ToolOutput:
    doc = Narrative()
    doc.heading(p.full_name)
    if p.current_party:
        party = p.current_party
        name = party.name or party.short_name
        doc.field("Parti", f"{name} ({party.short_name})")
    doc.line(birth_line(p))
    if p.death_date:
        doc.line(f"**Décédé(e)** le {format_date(p.death_date)}")

    doc.section(mandates_section(p.mandates))

    if p.declarations:
        doc.blank().heading("Déclarations HATVP", 2)
        for d in p.declarations:
            doc.bullet(f"{d.type} ({d.year}) : {d.url}")

    if p.affairs_count > 0:
        doc.blank().heading(f"Affaires judiciaires : {p.affairs_count}", 2)
        doc.line(f'Utilisez l\'outil get_politician_affairs avec le slug "{p.slug}" pour les détails.')

    if p.factchecks_count > 0:
        doc.blank().heading(f"Fact-checks : {p.factchecks_count}", 2)
        doc.line(f'Utilisez l\'outil get_politician_factchecks avec le slug "{p.slug}" pour les détails.')

    url = politician_url(p.slug)
    doc.blank().line(url)

    return ToolOutput(
        text=doc.render(),
        data={
            "slug": p.slug,
            "fullName": p.full_name,
            "civility": p.civility,
            "birthDate": p.birth_date,
            "deathDate": p.death_date,
            "birthPlace": p.birth_place,
            "photoUrl": p.photo_url,
            "party": party_payload(p.current_party),
            "mandates": [m.to_dict() for m in p.mandates],
            "declarations": [{"type": d.type, "year": d.year, "url": d.url} for d in p.declarations],
            "affairsCount": p.affairs_count,
            "factchecksCount": p.factchecks_count,
            "url": url,
        },
    )


# -----------------------------------------------------------------------------
# Relation graph
# -----------------------------------------------------------------------------
def group_relations(graph: RelationGraph) -> dict[str, list[RelationNode]]:
    """Map relation type → connected nodes, in link order.

    Links whose target is not among the returned nodes are skipped.
    """
    nodes_by_id = {n.id: n for n in graph.nodes}
    grouped: dict[str, list[RelationNode]] = {}
    for link in graph.links:
        node = nodes_by_id.get(link.target)
        if node is None:
            continue
        grouped.setdefault(link.type, []).append(node)
    return grouped


def relation_node_line(n: RelationNode) -> str:
    party = f" ({n.party.short_name})" if n.party else ""
    mandate = f" — {MandateType.label_for(n.mandate_type)}" if n.mandate_type else ""
    return f"- **{n.full_name}**{party}{mandate}"


def render_relations(graph: RelationGraph) -> ToolOutput:
    center = graph.center
    grouped = group_relations(graph)
    url = politician_url(center.slug) + "/relations"

    doc = Narrative()
    party = f" ({center.party.short_name})" if center.party else ""
    doc.heading(f"Relations — {center.full_name}{party}")
    doc.bold(f"{graph.total_connections} connexions").blank()

    for rel_type, nodes in grouped.items():
        count = graph.by_type.get(rel_type) or len(nodes)
        doc.heading(f"{RelationType.label_for(rel_type)} ({count})", 2)
        shown, remaining = truncate(nodes, RELATION_NODES_SHOWN)
        for n in shown:
            doc.line(relation_node_line(n))
        trailer = more_trailer(remaining)
        if trailer:
            doc.line(trailer)
        doc.blank()

    doc.line(url)

    return ToolOutput(
        text=doc.render(),
        data={
            "center": {"slug": center.slug, "fullName": center.full_name},
            "totalConnections": graph.total_connections,
            "byType": graph.by_type,
            "relations": {
                rel_type: [
                    {
                        "slug": n.slug,
                        "fullName": n.full_name,
                        "party": n.party.short_name if n.party else None,
                    }
                    for n in nodes
                ]
                for rel_type, nodes in grouped.items()
            },
            "url": url,
        },
    )
