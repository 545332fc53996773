# =============================================================================
# core/factchecks.py  —  Fact-check Renderers
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   - render_factcheck_list()         → /api/factchecks
#   - render_politician_factchecks()  → /api/politiques/{slug}/factchecks
#   - render_factcheck_stats()        → /api/factchecks/stats
#
# The verdict line carries the normalised rating label ("Faux") followed
# by the fact-checker's own wording in quotes.
# =============================================================================

from core.formatting import format_date, percent
from core.labels import VerdictRating
from core.models import FactCheck, FactCheckList, FactCheckStats, PoliticianFactChecks
from core.narrative import Narrative, ToolOutput, politician_url, results_header


def factcheck_block(fc: FactCheck, show_politicians: bool = False) -> list[str]:
    doc = Narrative()
    doc.heading(fc.title, 3)
    doc.field("Verdict", f'{VerdictRating.label_for(fc.verdict_rating)} — "{fc.verdict}"')
    doc.field("Source", f"[{fc.source}]({fc.source_url})")
    doc.field("Publié le", format_date(fc.published_at))
    if fc.claimant:
        doc.field("Déclarant", fc.claimant)
    if fc.claim_date:
        doc.field("Date de la déclaration", format_date(fc.claim_date))

    doc.blank().line(f"> {fc.claim_text}")

    if show_politicians and fc.politicians:
        names = [f"{p.full_name} ({p.party.short_name})" if p.party else p.full_name for p in fc.politicians]
        doc.blank().field("Politicien(s) mentionné(s)", ", ".join(names))

    return doc.lines


def factcheck_payload(fc: FactCheck) -> dict:
    return {
        "title": fc.title,
        "claimText": fc.claim_text,
        "claimant": fc.claimant,
        "claimDate": fc.claim_date,
        "verdict": fc.verdict,
        "verdictRating": fc.verdict_rating,
        "verdictLabel": VerdictRating.label_for(fc.verdict_rating),
        "source": fc.source,
        "sourceUrl": fc.source_url,
        "publishedAt": fc.published_at,
        "politicians": [p.to_dict() for p in fc.politicians],
    }


def render_factcheck_list(result: FactCheckList) -> ToolOutput:
    pg = result.pagination
    doc = Narrative()
    doc.line(results_header(pg.total, "fact-checks", pg.page, pg.total_pages)).blank()
    for fc in result.items:
        doc.section(factcheck_block(fc, show_politicians=True)).rule()
    doc.page_hint(pg.page, pg.total_pages, leading_blank=False)

    return ToolOutput(
        text=doc.render(),
        data={
            "total": pg.total,
            "page": pg.page,
            "totalPages": pg.total_pages,
            "pagination": pg.to_dict(),
            "items": [factcheck_payload(fc) for fc in result.items],
        },
    )


def render_politician_factchecks(result: PoliticianFactChecks) -> ToolOutput:
    who = result.politician
    pg = result.pagination
    url = politician_url(who.slug)

    doc = Narrative()
    party = f" ({who.party.name or who.party.short_name})" if who.party else ""
    doc.heading(f"Fact-checks — {who.full_name}{party}")
    doc.bold(f"{result.total} fact-check(s)").blank()
    for fc in result.factchecks:
        doc.section(factcheck_block(fc)).rule()
    doc.page_hint(pg.page, pg.total_pages, leading_blank=False)
    doc.line(url)

    return ToolOutput(
        text=doc.render(),
        data={
            "politician": {"slug": who.slug, "fullName": who.full_name},
            "total": result.total,
            "page": pg.page,
            "totalPages": pg.total_pages,
            "pagination": pg.to_dict(),
            "factchecks": [factcheck_payload(fc) for fc in result.factchecks],
            "url": url,
        },
    )


def render_factcheck_stats(stats: FactCheckStats) -> ToolOutput:
    by_verdict = sorted(stats.by_verdict, key=lambda v: v.count, reverse=True)
    by_source = sorted(stats.by_source, key=lambda s: s.count, reverse=True)
    by_party = sorted(stats.by_party, key=lambda p: p.count, reverse=True)

    doc = Narrative()
    doc.heading("Statistiques des fact-checks")
    doc.bold(f"{stats.total} fact-checks").blank()

    doc.heading("Par verdict", 2)
    for v in by_verdict:
        doc.bullet(f"**{VerdictRating.label_for(v.key)}** : {v.count} ({percent(v.count, stats.total)}%)")
    doc.blank()

    doc.heading("Par source", 2)
    for s in by_source:
        doc.bullet(f"**{s.key}** : {s.count}")

    if by_party:
        doc.blank().heading("Par parti", 2)
        for p in by_party:
            name = f" ({p.name})" if p.name else ""
            doc.bullet(f"**{p.short_name}**{name} : {p.count}")

    return ToolOutput(
        text=doc.render(),
        data={
            "total": stats.total,
            "byVerdict": [
                {"verdictRating": v.key, "label": VerdictRating.label_for(v.key), "count": v.count}
                for v in by_verdict
            ],
            "bySource": [{"source": s.key, "count": s.count} for s in by_source],
            "byParty": [p.to_dict() for p in by_party],
        },
    )
