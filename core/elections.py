# =============================================================================
# core/elections.py  —  Election Renderers
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   - render_election_list()  → /api/elections
#   - render_election()       → /api/elections/{slug}, with rounds
#                               (turnout figures) and candidacies
#
# Only the first 30 candidacies are listed; elected candidates are flagged.
# =============================================================================

from core.formatting import format_date, truncate
from core.labels import ElectionStatus, ElectionType
from core.models import Candidacy, ElectionDetail, ElectionList, ElectionRound, ElectionSummary
from core.narrative import Narrative, ToolOutput, more_trailer, results_header, site_url

CANDIDACIES_SHOWN = 30


def election_url(slug: str) -> str:
    return site_url("elections", slug)


def schedule_text(e: ElectionSummary) -> str:
    parts = [f"1er tour : {format_date(e.round1_date)}"]
    if e.round2_date:
        parts.append(f"2nd tour : {format_date(e.round2_date)}")
    text = " — ".join(parts)
    if e.date_confirmed is False:
        text += " (date non confirmée)"
    return text


def election_lines(e: ElectionSummary) -> list[str]:
    count = f" — {e.candidacy_count} candidature(s)" if e.candidacy_count is not None else ""
    return [
        f"- **{e.title}** — {ElectionType.label_for(e.type)}, {ElectionStatus.label_for(e.status)}",
        f"  {schedule_text(e)}{count}",
        f"  /elections/{e.slug}",
    ]


def election_payload(e: ElectionSummary) -> dict:
    return {
        "slug": e.slug,
        "type": e.type,
        "title": e.title,
        "shortTitle": e.short_title,
        "status": e.status,
        "scope": e.scope,
        "round1Date": e.round1_date,
        "round2Date": e.round2_date,
        "dateConfirmed": e.date_confirmed,
        "candidacyCount": e.candidacy_count,
        "url": election_url(e.slug),
    }


def render_election_list(result: ElectionList) -> ToolOutput:
    pg = result.pagination
    doc = Narrative()
    doc.line(results_header(pg.total, "élections", pg.page, pg.total_pages)).blank()
    for e in result.items:
        doc.section(election_lines(e))
    doc.page_hint(pg.page, pg.total_pages)

    return ToolOutput(
        text=doc.render(),
        data={
            "total": pg.total,
            "page": pg.page,
            "totalPages": pg.total_pages,
            "pagination": pg.to_dict(),
            "items": [election_payload(e) for e in result.items],
        },
    )


def round_lines(r: ElectionRound) -> list[str]:
    lines = [f"### Tour {r.number} ({format_date(r.date)})"]
    if r.registered_voters is not None:
        lines.append(f"- **Inscrits** : {r.registered_voters}")
    if r.actual_voters is not None:
        lines.append(f"- **Votants** : {r.actual_voters}")
    if r.participation_rate is not None:
        lines.append(f"- **Participation** : {r.participation_rate}%")
    if r.blank_votes is not None:
        lines.append(f"- **Blancs** : {r.blank_votes}")
    if r.null_votes is not None:
        lines.append(f"- **Nuls** : {r.null_votes}")
    return lines


def candidacy_line(c: Candidacy) -> str:
    party = f" ({c.party_label})" if c.party_label else ""
    where = f" — {c.constituency_name}" if c.constituency_name else ""
    elected = " **[Élu(e)]**" if c.is_elected else ""
    return f"- **{c.candidate_name}**{party}{where}{elected}"


def candidacy_payload(c: Candidacy) -> dict:
    return {
        "candidateName": c.candidate_name,
        "partyLabel": c.party_label,
        "constituencyName": c.constituency_name,
        "isElected": c.is_elected,
        "politician": c.politician.to_dict() if c.politician else None,
        "party": c.party.to_dict() if c.party else None,
    }


def render_election(e: ElectionDetail) -> ToolOutput:
    url = election_url(e.slug)

    doc = Narrative()
    doc.heading(e.title)
    doc.field("Type", ElectionType.label_for(e.type))
    doc.field("Statut", ElectionStatus.label_for(e.status))
    if e.scope:
        doc.field("Périmètre", e.scope)
    doc.field("Calendrier", schedule_text(e))
    if e.description:
        doc.blank().line(e.description)

    if e.rounds:
        doc.blank().heading("Tours", 2)
        for r in sorted(e.rounds, key=lambda r: r.number):
            doc.section(round_lines(r))

    if e.candidacies:
        doc.blank().heading(f"Candidatures ({len(e.candidacies)})", 2)
        shown, remaining = truncate(e.candidacies, CANDIDACIES_SHOWN)
        for c in shown:
            doc.line(candidacy_line(c))
        trailer = more_trailer(remaining)
        if trailer:
            doc.line(trailer)

    doc.blank().line(url)

    data = election_payload(e)
    data.update(
        {
            "description": e.description,
            "rounds": [r.to_dict() for r in sorted(e.rounds, key=lambda r: r.number)],
            "candidacies": [candidacy_payload(c) for c in e.candidacies],
            "electedCount": sum(1 for c in e.candidacies if c.is_elected),
        }
    )
    return ToolOutput(text=doc.render(), data=data)
