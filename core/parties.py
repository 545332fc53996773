# =============================================================================
# core/parties.py  —  Political Party Renderers
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   - render_party_list()  → /api/partis
#   - render_party()       → /api/partis/{slug}
#
# LINEAGE:
#   A party has at most one predecessor but may have several successors
#   (splits), so "Succède à" is printed once and "Succédé par" once per
#   successor.
#
# MEMBERS:
#   Split into members holding a current mandate (first 30 listed) and
#   former members (first 10 listed), each with a "... et K autres" trailer.
# =============================================================================

from core.formatting import format_date, truncate
from core.labels import MandateType, PoliticalPosition
from core.models import PartyDetail, PartyList, PartyMember
from core.narrative import Narrative, ToolOutput, more_trailer, party_url, results_header

MEMBERS_WITH_MANDATE_SHOWN = 30
FORMER_MEMBERS_SHOWN = 10


def render_party_list(result: PartyList) -> ToolOutput:
    pg = result.pagination
    doc = Narrative()
    doc.line(results_header(pg.total, "partis", pg.page, pg.total_pages)).blank()
    for p in result.items:
        dissolved = " [Dissous]" if p.dissolved_date else ""
        doc.bullet(
            f"**{p.name}** ({p.short_name}) — {PoliticalPosition.label_for(p.political_position)}, "
            f"{p.member_count} membre(s){dissolved}"
        )
        doc.line(f"  /partis/{p.slug}")
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
                    "name": p.name,
                    "shortName": p.short_name,
                    "politicalPosition": p.political_position,
                    "memberCount": p.member_count,
                    "dissolvedDate": p.dissolved_date,
                    "url": party_url(p.slug),
                }
                for p in result.items
            ],
        },
    )


def member_line(m: PartyMember) -> str:
    mandate = f" — {MandateType.label_for(m.current_mandate.type)}" if m.current_mandate else ""
    affairs = f" [{m.affairs_count} affaire(s)]" if m.affairs_count > 0 else ""
    return f"- **{m.full_name}**{mandate}{affairs}"


def members_section(members: list[PartyMember]) -> list[str]:
    if not members:
        return []
    with_mandate = [m for m in members if m.current_mandate]
    former = [m for m in members if not m.current_mandate]

    doc = Narrative()
    doc.blank().heading(f"Membres ({len(members)})", 2)

    if with_mandate:
        doc.heading("Avec mandat actuel", 3)
        shown, remaining = truncate(with_mandate, MEMBERS_WITH_MANDATE_SHOWN)
        for m in shown:
            doc.line(member_line(m))
        trailer = more_trailer(remaining, "autres avec mandat")
        if trailer:
            doc.line(trailer)

    if former:
        doc.heading(f"Anciens ({len(former)})", 3)
        shown, remaining = truncate(former, FORMER_MEMBERS_SHOWN)
        for m in shown:
            doc.bullet(m.full_name)
        trailer = more_trailer(remaining)
        if trailer:
            doc.line(trailer)

    return doc.lines


def lineage_section(party: PartyDetail) -> list[str]:
    lines = []
    if party.predecessor:
        p = party.predecessor
        lines.extend(["", f"**Succède à** : {p.name} ({p.short_name}) — /partis/{p.slug}"])
    for s in party.successors:
        lines.append(f"**Succédé par** : {s.name} ({s.short_name}) — /partis/{s.slug}")
    return lines


def render_party(party: PartyDetail) -> ToolOutput:
    url = party_url(party.slug)

    doc = Narrative()
    doc.heading(f"{party.name} ({party.short_name})")
    doc.field("Position", PoliticalPosition.label_for(party.political_position))
    doc.field("Membres", party.member_count)
    if party.founded_date:
        doc.line(f"**Fondé** le {format_date(party.founded_date)}")
    if party.dissolved_date:
        doc.line(f"**Dissous** le {format_date(party.dissolved_date)}")
    if party.website:
        doc.field("Site web", party.website)
    if party.ideology:
        doc.field("Idéologie", party.ideology)
    if party.description:
        doc.blank().line(party.description)

    doc.section(lineage_section(party))
    doc.section(members_section(party.members))

    if party.external_ids:
        doc.blank().heading("Liens externes", 2)
        for ext in party.external_ids:
            target = ext.url or ext.external_id
            doc.bullet(f"{ext.source} : {target}")

    doc.blank().line(url)

    return ToolOutput(
        text=doc.render(),
        data={
            "slug": party.slug,
            "name": party.name,
            "shortName": party.short_name,
            "politicalPosition": party.political_position,
            "memberCount": party.member_count,
            "foundedDate": party.founded_date,
            "dissolvedDate": party.dissolved_date,
            "website": party.website,
            "ideology": party.ideology,
            "description": party.description,
            "predecessor": party.predecessor.to_dict() if party.predecessor else None,
            "successors": [s.to_dict() for s in party.successors],
            "membersWithMandate": sum(1 for m in party.members if m.current_mandate),
            "externalIds": [
                {"source": e.source, "externalId": e.external_id, "url": e.url} for e in party.external_ids
            ],
            "url": url,
        },
    )
