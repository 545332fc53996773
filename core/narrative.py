# =============================================================================
# core/narrative.py  —  Markdown Narrative Builder
# =============================================================================
#
# Every tool answers with two things:
#   1. a markdown narrative for clients that display text
#   2. a structured dict for clients that read data
#
# Renderers build the narrative as an ordered sequence of sections.  A
# section is just a list of lines, produced by a small function, so each
# one can be tested on its own; Narrative stitches them together.
# =============================================================================

from dataclasses import dataclass, field
from typing import Any, Iterable, Optional

from core.config import get_settings


@dataclass
class ToolOutput:
    """The dual-format result of a renderer."""

    text: str
    data: dict[str, Any] = field(default_factory=dict)


class Narrative:
    """Ordered list of markdown lines with a few formatting shortcuts."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def line(self, text: str = "") -> "Narrative":
        self.lines.append(text)
        return self

    def blank(self) -> "Narrative":
        return self.line("")

    def heading(self, text: str, level: int = 1) -> "Narrative":
        return self.line(f"{'#' * level} {text}")

    def bold(self, text: str) -> "Narrative":
        return self.line(f"**{text}**")

    def field(self, label: str, value: Any) -> "Narrative":
        return self.line(f"**{label}** : {value}")

    def bullet(self, text: str) -> "Narrative":
        return self.line(f"- {text}")

    def rule(self) -> "Narrative":
        """Horizontal separator between list items."""
        self.lines.extend(["", "---", ""])
        return self

    def section(self, lines: Iterable[str]) -> "Narrative":
        self.lines.extend(lines)
        return self

    def page_hint(self, page: int, total_pages: int, leading_blank: bool = True) -> "Narrative":
        hint = pagination_hint(page, total_pages)
        if hint:
            if leading_blank:
                self.blank()
            self.line(hint)
        return self

    def render(self) -> str:
        return "\n".join(self.lines)


def pagination_hint(page: int, total_pages: int) -> Optional[str]:
    """'Next page' hint, only when there is a next page."""
    if page < total_pages:
        return f"_Page suivante : page={page + 1}_"
    return None


def results_header(total: int, noun: str, page: int, total_pages: int) -> str:
    """First line of every paginated list: '**12 partis** (page 1/1)'."""
    return f"**{total} {noun}** (page {page}/{total_pages})"


def more_trailer(remaining: int, suffix: str = "autres") -> Optional[str]:
    """'_... et K autres_' line for truncated lists."""
    if remaining > 0:
        return f"_... et {remaining} {suffix}_"
    return None


def site_url(*parts: str) -> str:
    """Absolute public URL on the Poligraph site."""
    path = "/".join(part.strip("/") for part in parts if part)
    return f"{get_settings().base_url}/{path}"


def politician_url(slug: str) -> str:
    return site_url("politiques", slug)


def party_url(slug: str) -> str:
    return site_url("partis", slug)
