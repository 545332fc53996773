# =============================================================================
# core/affairs.py  —  Judicial Affair Renderers
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Renders affairs for two tools:
#     - render_affair_list()          → /api/affaires (many politicians)
#     - render_politician_affairs()   → /api/politiques/{slug}/affaires
#
# PRESUMPTION OF INNOCENCE:
#   An affair whose status is still open (inquiry, indictment, trial, appeal)
#   is always shown with PRESUMPTION_NOTICE.
#     - list view: the notice follows each qualifying affair
#     - single-politician view: the notice appears once, at the top, when
#       any affair qualifies, and not under each affair
# =============================================================================

from core.formatting import format_date
from core.labels import AffairCategory, AffairStatus
from core.models import Affair, AffairList, PoliticianAffairs
from core.narrative import Narrative, ToolOutput, politician_url, results_header
from core.politicians import party_payload

PRESUMPTION_NOTICE = (
    "**Rappel** : Toute personne mise en examen est présumée innocente "
    "jusqu'à ce que sa culpabilité ait été établie par une décision de "
    "justice définitive."
)


def affair_block(affair: Affair, politician_name: str = "", with_notice: bool = True) -> list[str]:
    """Markdown block for one affair (title, status, dates, sources)."""
    doc = Narrative()
    doc.heading(affair.title, 3)
    if politician_name:
        doc.field("Politicien", politician_name)
    doc.field("Statut", AffairStatus.label_for(affair.status))
    doc.field("Catégorie", AffairCategory.label_for(affair.category))

    if affair.facts_date:
        doc.field("Date des faits", format_date(affair.facts_date))
    if affair.start_date:
        doc.field("Début de procédure", format_date(affair.start_date))
    if affair.verdict_date:
        doc.field("Verdict", format_date(affair.verdict_date))
    if affair.sentence:
        doc.field("Peine", affair.sentence)
    if affair.appeal:
        doc.field("Appel", affair.appeal)
    if affair.party_at_time:
        party = affair.party_at_time
        doc.field("Parti au moment des faits", f"{party.name or party.short_name} ({party.short_name})")

    if affair.description:
        doc.blank().line(affair.description)

    if affair.sources:
        doc.blank().line("**Sources** :")
        for s in affair.sources:
            date = f" ({format_date(s.published_at)})" if s.published_at else ""
            doc.bullet(f"[{s.title}]({s.url}) — {s.publisher}{date}")

    if with_notice and AffairStatus.needs_presumption(affair.status):
        doc.blank().line(PRESUMPTION_NOTICE)

    return doc.lines


def affair_payload(affair: Affair) -> dict:
    return {
        "slug": affair.slug,
        "title": affair.title,
        "status": affair.status,
        "category": affair.category,
        "factsDate": affair.facts_date,
        "startDate": affair.start_date,
        "verdictDate": affair.verdict_date,
        "sentence": affair.sentence,
        "sources": [s.to_dict() for s in affair.sources],
    }


def render_affair_list(result: AffairList) -> ToolOutput:
    pg = result.pagination
    doc = Narrative()
    doc.line(results_header(pg.total, "affaires", pg.page, pg.total_pages)).blank()

    items = []
    for affair in result.items:
        who = affair.politician
        party = f" ({who.party.short_name})" if who.party else ""
        doc.section(affair_block(affair, politician_name=f"{who.full_name}{party}")).rule()

        payload = affair_payload(affair)
        payload["politician"] = who.to_dict()
        items.append(payload)

    doc.page_hint(pg.page, pg.total_pages, leading_blank=False)

    return ToolOutput(
        text=doc.render(),
        data={
            "total": pg.total,
            "page": pg.page,
            "totalPages": pg.total_pages,
            "pagination": pg.to_dict(),
            "items": items,
        },
    )


def render_politician_affairs(result: PoliticianAffairs) -> ToolOutput:
    who = result.politician
    url = politician_url(who.slug)

    doc = Narrative()
    party = f" ({who.party.name or who.party.short_name})" if who.party else ""
    doc.heading(f"Affaires judiciaires — {who.full_name}{party}")
    doc.bold(f"{result.total} affaire(s)").blank()

    if any(AffairStatus.needs_presumption(a.status) for a in result.affairs):
        doc.line(PRESUMPTION_NOTICE).blank()

    for affair in result.affairs:
        doc.section(affair_block(affair, with_notice=False)).rule()

    doc.line(url)

    return ToolOutput(
        text=doc.render(),
        data={
            "politician": {
                "slug": who.slug,
                "fullName": who.full_name,
                "party": party_payload(who.party),
            },
            "total": result.total,
            "affairs": [affair_payload(a) for a in result.affairs],
            "url": url,
        },
    )
