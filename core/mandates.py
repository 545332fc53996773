# =============================================================================
# core/mandates.py  —  Mandate List Renderer
# =============================================================================
#
# /api/mandats lists mandates across all politicians (each record carries
# its holder).  Three lines per mandate: holder and office, status and
# dates, then the holder's relative profile path.
# =============================================================================

from core.formatting import format_date
from core.labels import MandateType
from core.models import MandateList, MandateRecord
from core.narrative import Narrative, ToolOutput, politician_url, results_header


def mandate_status(m: MandateRecord) -> str:
    return "En cours" if m.is_current else f"Terminé ({format_date(m.end_date)})"


def mandate_lines(m: MandateRecord) -> list[str]:
    institution = f" — {m.institution}" if m.institution else ""
    constituency = f" — {m.constituency}" if m.constituency else ""
    return [
        f"- **{m.politician.full_name}** : {MandateType.label_for(m.type)}{institution}{constituency}",
        f"  {mandate_status(m)} — depuis {format_date(m.start_date)}",
        f"  /politiques/{m.politician.slug}",
    ]


def render_mandate_list(result: MandateList) -> ToolOutput:
    pg = result.pagination
    doc = Narrative()
    doc.line(results_header(pg.total, "mandats", pg.page, pg.total_pages)).blank()
    for m in result.items:
        doc.section(mandate_lines(m))
    doc.page_hint(pg.page, pg.total_pages)

    items = []
    for m in result.items:
        payload = m.to_dict()
        payload.update(
            {
                "typeLabel": MandateType.label_for(m.type),
                "role": m.role,
                "departmentCode": m.department_code,
                "politician": {
                    **m.politician.to_dict(),
                    "url": politician_url(m.politician.slug),
                },
            }
        )
        items.append(payload)

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
