# =============================================================================
# core/votes.py  —  Parliamentary Vote Renderers
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   - render_scrutin_list()      → /api/votes
#   - render_politician_votes()  → /api/politiques/{slug}/votes
#   - render_vote_stats()        → /api/votes/stats
#
# RANKING (vote stats only):
#   Parties are listed by descending cohesion rate.  Divisive scrutins are
#   listed by descending division score and cut to the top 10.  Both orders
#   apply to the narrative and to the structured payload.  The numbers
#   themselves are computed upstream and only relayed here.
# =============================================================================

from typing import Optional

from core.formatting import PLACEHOLDER, format_date, percent
from core.labels import Chamber, VotePosition, VoteResult
from core.models import PoliticianVotes, ScrutinList, VoteStats
from core.narrative import Narrative, ToolOutput, politician_url, results_header

DIVISIVE_SHOWN = 10


def result_label(code: Optional[str]) -> str:
    return VoteResult.label_for(code) or PLACEHOLDER


def render_scrutin_list(result: ScrutinList) -> ToolOutput:
    pg = result.pagination
    doc = Narrative()
    doc.line(results_header(pg.total, "scrutins", pg.page, pg.total_pages)).blank()
    for s in result.items:
        doc.bullet(f"**{s.title}** ({format_date(s.voting_date)})")
        doc.line(
            f"  {result_label(s.result)} — Pour: {s.votes_for}, "
            f"Contre: {s.votes_against}, Abstention: {s.votes_abstain}"
        )
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
                    "title": s.title,
                    "votingDate": s.voting_date,
                    "legislature": s.legislature,
                    "result": s.result,
                    **s.tally_dict(),
                    "sourceUrl": s.source_url,
                }
                for s in result.items
            ],
        },
    )


def render_politician_votes(result: PoliticianVotes) -> ToolOutput:
    who = result.politician
    pg = result.pagination
    s = result.stats

    doc = Narrative()
    party = f" ({who.party.name or who.party.short_name})" if who.party else ""
    doc.heading(f"Votes — {who.full_name}{party}").blank()

    doc.heading("Statistiques", 2)
    doc.bullet(f"**Total** : {s.total} votes")
    doc.bullet(f"**Pour** : {s.pour} ({percent(s.pour, s.total)}%)")
    doc.bullet(f"**Contre** : {s.contre} ({percent(s.contre, s.total)}%)")
    doc.bullet(f"**Abstention** : {s.abstention}")
    doc.bullet(f"**Absent** : {s.absent}")
    doc.bullet(f"**Taux de participation** : {s.participation_rate}%")
    doc.blank()

    doc.heading(f"Derniers votes (page {pg.page}/{pg.total_pages})", 2)
    for v in result.votes:
        doc.bullet(f"**{v.scrutin.title}** ({format_date(v.scrutin.voting_date)})")
        doc.line(f"  Vote : {VotePosition.label_for(v.position)} — Résultat : {result_label(v.scrutin.result)}")
    doc.page_hint(pg.page, pg.total_pages)

    return ToolOutput(
        text=doc.render(),
        data={
            "politician": {"slug": who.slug, "fullName": who.full_name},
            "stats": s.to_dict(),
            "votes": [
                {
                    "position": v.position,
                    "scrutin": {
                        "title": v.scrutin.title,
                        "votingDate": v.scrutin.voting_date,
                        "result": v.scrutin.result,
                        **v.scrutin.tally_dict(),
                    },
                }
                for v in result.votes
            ],
            "page": pg.page,
            "totalPages": pg.total_pages,
            "pagination": pg.to_dict(),
            "url": politician_url(who.slug),
        },
    )


def render_vote_stats(stats: VoteStats, chamber: Optional[str] = None) -> ToolOutput:
    g = stats.global_stats
    parties = sorted(stats.parties, key=lambda p: p.cohesion_rate, reverse=True)
    divisive = sorted(stats.divisive_scrutins, key=lambda s: s.division_score, reverse=True)[:DIVISIVE_SHOWN]

    doc = Narrative()
    doc.heading(f"Statistiques de vote — {Chamber.label_for(chamber)}").blank()

    doc.heading("Vue globale", 2)
    doc.bullet(f"**Total scrutins** : {g.total_scrutins}")
    doc.bullet(f"**Total votes** : {g.total_votes}")
    doc.bullet(f"Pour : {g.total_votes_for}")
    doc.bullet(f"Contre : {g.total_votes_against}")
    doc.bullet(f"Abstention : {g.total_votes_abstain}")
    doc.bullet(f"**Adoptés** : {g.adoptes} — **Rejetés** : {g.rejetes}")
    doc.bullet(f"**Taux de participation** : {g.participation_rate}%")
    doc.blank()

    doc.heading("Cohésion par parti", 2)
    for p in parties:
        doc.bullet(
            f"**{p.party_short_name}** ({p.party_name}) : {p.cohesion_rate}% de cohésion ({p.total_votes} votes)"
        )
    doc.blank()

    if divisive:
        doc.heading("Scrutins les plus divisifs", 2)
        for s in divisive:
            doc.bullet(f"**{s.title}** ({format_date(s.voting_date)})")
            doc.line(
                f"  Pour: {s.votes_for}, Contre: {s.votes_against}, "
                f"Abstention: {s.votes_abstain} — Score de division : {s.division_score}%"
            )

    return ToolOutput(
        text=doc.render(),
        data={
            "chamber": chamber,
            "global": g.to_dict(),
            "parties": [
                {
                    "shortName": p.party_short_name,
                    "name": p.party_name,
                    "cohesionRate": p.cohesion_rate,
                    "participationRate": p.participation_rate,
                    "totalVotes": p.total_votes,
                }
                for p in parties
            ],
            "divisiveScrutins": [
                {
                    "title": s.title,
                    "votingDate": s.voting_date,
                    **s.tally_dict(),
                    "divisionScore": s.division_score,
                }
                for s in divisive
            ],
        },
    )
