from core.narrative import (
    Narrative,
    more_trailer,
    pagination_hint,
    party_url,
    politician_url,
    results_header,
    site_url,
)


def test_pagination_hint_only_when_a_next_page_exists():
    assert pagination_hint(1, 3) == "_Page suivante : page=2_"
    assert pagination_hint(2, 3) == "_Page suivante : page=3_"
    assert pagination_hint(3, 3) is None
    assert pagination_hint(1, 0) is None


def test_results_header():
    assert results_header(12, "partis", 1, 1) == "**12 partis** (page 1/1)"


def test_more_trailer():
    assert more_trailer(0) is None
    assert more_trailer(5) == "_... et 5 autres_"
    assert more_trailer(2, "autres avec mandat") == "_... et 2 autres avec mandat_"


def test_public_urls():
    assert politician_url("emmanuel-macron") == "https://poligraph.fr/politiques/emmanuel-macron"
    assert party_url("renaissance") == "https://poligraph.fr/partis/renaissance"
    assert site_url("carte") == "https://poligraph.fr/carte"


def test_narrative_builds_markdown_in_order():
    doc = Narrative()
    doc.heading("Titre").field("Parti", "Renaissance (RE)").blank().heading("Section", 2).bullet("item")
    doc.rule().page_hint(1, 2)
    assert doc.render() == "\n".join(
        [
            "# Titre",
            "**Parti** : Renaissance (RE)",
            "",
            "## Section",
            "- item",
            "",
            "---",
            "",
            "",
            "_Page suivante : page=2_",
        ]
    )


def test_page_hint_absent_on_last_page():
    doc = Narrative().line("x").page_hint(2, 2)
    assert doc.render() == "x"
