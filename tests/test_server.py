"""End-to-end tool calls through an in-memory FastMCP client."""

import pytest
from fastmcp import Client
from fastmcp.exceptions import ToolError

from tests import payloads

ALL_TOOLS = {
    "search_politicians",
    "get_politician",
    "get_politician_relations",
    "list_affairs",
    "get_politician_affairs",
    "list_votes",
    "get_politician_votes",
    "get_vote_stats",
    "search_advanced",
    "list_factchecks",
    "get_politician_factchecks",
    "get_factcheck_stats",
    "list_parties",
    "get_party",
    "list_elections",
    "get_election",
    "list_mandates",
    "get_department_stats",
    "get_deputies_by_department",
}


def _text(result) -> str:
    return result.content[0].text


# -----------------------------------------------------------------------------
# Registration
# -----------------------------------------------------------------------------
@pytest.mark.asyncio
async def test_every_tool_is_registered_read_only(server):
    async with Client(server) as client:
        tools = await client.list_tools()

    assert {t.name for t in tools} == ALL_TOOLS
    for tool in tools:
        assert tool.annotations.readOnlyHint is True, tool.name
        assert tool.description


@pytest.mark.asyncio
async def test_limit_schema_is_bounded(server):
    async with Client(server) as client:
        tools = {t.name: t for t in await client.list_tools()}

    limit = tools["search_politicians"].inputSchema["properties"]["limit"]
    assert limit["maximum"] == 100
    assert limit["minimum"] == 1
    assert tools["get_politician"].inputSchema["required"] == ["slug"]


# -----------------------------------------------------------------------------
# Scenarios
# -----------------------------------------------------------------------------
@pytest.mark.asyncio
async def test_search_politicians_by_name_with_limit(server, upstream):
    def answer(request):
        limit = int(request.url.params["limit"])
        items = [payloads.politician_item()]
        return payloads.politician_list(items, limit=limit, total=1)

    upstream.add("/api/politiques", answer)

    async with Client(server) as client:
        result = await client.call_tool("search_politicians", {"query": "Macron", "limit": 5})

    data = result.structured_content
    assert any("Macron" in item["fullName"] for item in data["items"])
    assert data["pagination"]["limit"] == 5
    assert upstream.last_params == {"search": "Macron", "page": "1", "limit": "5"}
    assert "**Emmanuel Macron** (RE)" in _text(result)


@pytest.mark.asyncio
async def test_list_affairs_by_category(server, upstream):
    upstream.add(
        "/api/affaires",
        {
            "data": [payloads.affair("a1", category="CORRUPTION"), payloads.affair("a2", category="CORRUPTION")],
            "pagination": payloads.pagination(total=2),
        },
    )

    async with Client(server) as client:
        result = await client.call_tool("list_affairs", {"category": "CORRUPTION"})

    assert upstream.last_params["category"] == "CORRUPTION"
    assert [item["category"] for item in result.structured_content["items"]] == ["CORRUPTION", "CORRUPTION"]
    assert "**Catégorie** : Corruption" in _text(result)


@pytest.mark.asyncio
async def test_list_factchecks_by_verdict(server, upstream):
    upstream.add(
        "/api/factchecks",
        {
            "data": [payloads.factcheck(title="Premier"), payloads.factcheck(title="Second")],
            "pagination": payloads.pagination(total=2),
        },
    )

    async with Client(server) as client:
        result = await client.call_tool("list_factchecks", {"verdict": "FALSE"})

    assert upstream.last_params["verdict"] == "FALSE"
    items = result.structured_content["items"]
    assert [fc["verdictRating"] for fc in items] == ["FALSE", "FALSE"]
    blocks = _text(result).split("### ")[1:]
    assert len(blocks) == 2
    assert all("Faux" in block for block in blocks)


@pytest.mark.asyncio
async def test_department_stats_dominance_is_bounded(server, upstream):
    upstream.add("/api/stats/departments", payloads.department_stats())

    async with Client(server) as client:
        result = await client.call_tool("get_department_stats", {})

    assert upstream.last_params == {"filter": "all"}
    data = result.structured_content
    dominated = 3  # Corse-du-Sud has no dominant party
    assert sum(data["partyDominance"].values()) <= dominated
    assert data["partyDominance"] == {"RN": 2, "RE": 1}


# -----------------------------------------------------------------------------
# Input validation
# -----------------------------------------------------------------------------
@pytest.mark.asyncio
async def test_out_of_range_limit_is_rejected_before_any_request(server, upstream):
    async with Client(server) as client:
        with pytest.raises(ToolError):
            await client.call_tool("search_politicians", {"limit": 500})

    assert upstream.requests == []


@pytest.mark.asyncio
async def test_unknown_filter_code_is_rejected_before_any_request(server, upstream):
    async with Client(server) as client:
        with pytest.raises(ToolError):
            await client.call_tool("list_affairs", {"category": "CAMBRIOLAGE"})
        with pytest.raises(ToolError):
            await client.call_tool("get_department_stats", {"filter": "maires"})

    assert upstream.requests == []


@pytest.mark.asyncio
async def test_missing_slug_is_rejected(server, upstream):
    async with Client(server) as client:
        with pytest.raises(ToolError):
            await client.call_tool("get_politician", {})

    assert upstream.requests == []


# -----------------------------------------------------------------------------
# Upstream failures
# -----------------------------------------------------------------------------
@pytest.mark.asyncio
async def test_unknown_slug_surfaces_the_status_code(server, upstream):
    async with Client(server) as client:
        with pytest.raises(ToolError) as excinfo:
            await client.call_tool("get_politician", {"slug": "inconnu"})

    assert "API 404" in str(excinfo.value)
    assert len(upstream.requests) == 1


@pytest.mark.asyncio
async def test_server_error_surfaces_the_status_code(server, upstream):
    upstream.add("/api/votes/stats", status=500, text="Internal Server Error")

    async with Client(server) as client:
        with pytest.raises(ToolError) as excinfo:
            await client.call_tool("get_vote_stats", {"chamber": "AN"})

    assert "API 500" in str(excinfo.value)


@pytest.mark.asyncio
async def test_malformed_body_is_reported(server, upstream):
    upstream.add("/api/partis", {"items": []})

    async with Client(server) as client:
        with pytest.raises(ToolError) as excinfo:
            await client.call_tool("list_parties", {})

    assert "PartyList" in str(excinfo.value)


# -----------------------------------------------------------------------------
# Request shaping
# -----------------------------------------------------------------------------
@pytest.mark.asyncio
async def test_slug_is_percent_encoded_once(server, upstream):
    upstream.add("/api/politiques/j%C3%A9r%C3%B4me%20cahuzac", payloads.politician_detail(slug="jérôme cahuzac"))

    async with Client(server) as client:
        await client.call_tool("get_politician", {"slug": "jérôme cahuzac"})

    assert upstream.last.url.raw_path == b"/api/politiques/j%C3%A9r%C3%B4me%20cahuzac"


@pytest.mark.asyncio
async def test_explicit_false_is_sent_upstream(server, upstream):
    upstream.add("/api/politiques", payloads.politician_list([]))

    async with Client(server) as client:
        await client.call_tool("search_politicians", {"hasAffairs": False})

    assert upstream.last_params["hasAffairs"] == "false"


@pytest.mark.asyncio
async def test_omitted_filters_are_not_sent(server, upstream):
    upstream.add("/api/partis", {"data": [], "pagination": payloads.pagination(total=0, total_pages=0)})

    async with Client(server) as client:
        await client.call_tool("list_parties", {})

    assert upstream.last_params == {"page": "1", "limit": "20"}


@pytest.mark.asyncio
async def test_next_page_hint_follows_upstream_pagination(server, upstream):
    upstream.add(
        "/api/votes",
        {"data": [payloads.scrutin()], "pagination": payloads.pagination(page=2, total=60, total_pages=3)},
    )

    async with Client(server) as client:
        result = await client.call_tool("list_votes", {"page": 2})

    assert upstream.last_params["page"] == "2"
    assert _text(result).endswith("_Page suivante : page=3_")
    assert result.structured_content["pagination"]["totalPages"] == 3


@pytest.mark.asyncio
async def test_relations_forward_types_and_limit(server, upstream):
    upstream.add("/api/politiques/emmanuel-macron/relations", payloads.relations())

    async with Client(server) as client:
        result = await client.call_tool(
            "get_politician_relations", {"slug": "emmanuel-macron", "types": "SAME_PARTY", "limit": 5}
        )

    assert upstream.last_params == {"types": "SAME_PARTY", "limit": "5"}
    assert result.structured_content["totalConnections"] == 3


@pytest.mark.asyncio
async def test_advanced_search_maps_filter_names(server, upstream):
    upstream.add("/api/search/advanced", payloads.advanced_search([payloads.search_result()]))

    async with Client(server) as client:
        result = await client.call_tool(
            "search_advanced",
            {"query": "Le Pen", "party": "RN", "mandate": "DEPUTE", "isActive": True, "limit": 10},
        )

    assert upstream.last_params == {
        "q": "Le Pen",
        "party": "RN",
        "mandate": "DEPUTE",
        "isActive": "true",
        "page": "1",
        "limit": "10",
    }
    assert result.structured_content["pagination"]["limit"] == 10


@pytest.mark.asyncio
async def test_deputies_by_department_empty_answer(server, upstream):
    upstream.add("/api/deputies/by-department", [])

    async with Client(server) as client:
        result = await client.call_tool("get_deputies_by_department", {"department": "Bouches du Rhône"})

    assert upstream.last_params == {"department": "Bouches du Rhône"}
    assert "Aucun député trouvé" in _text(result)
    assert result.structured_content["total"] == 0


@pytest.mark.asyncio
async def test_list_mandates_forwards_every_filter(server, upstream):
    upstream.add("/api/mandats", {"data": [payloads.mandate_record()], "pagination": payloads.pagination()})

    async with Client(server) as client:
        result = await client.call_tool(
            "list_mandates", {"type": "DEPUTE", "isCurrent": True, "politician": "sylvain-maillard"}
        )

    assert upstream.last_params == {
        "type": "DEPUTE",
        "isCurrent": "true",
        "politician": "sylvain-maillard",
        "page": "1",
        "limit": "20",
    }
    assert result.structured_content["items"][0]["politician"]["slug"] == "sylvain-maillard"


@pytest.mark.asyncio
async def test_get_election_renders_rounds_and_candidacies(server, upstream):
    upstream.add("/api/elections/presidentielle-2027", payloads.election_detail())

    async with Client(server) as client:
        result = await client.call_tool("get_election", {"slug": "presidentielle-2027"})

    assert "## Candidatures (2)" in _text(result)
    assert result.structured_content["electedCount"] == 1
    assert result.structured_content["url"] == "https://poligraph.fr/elections/presidentielle-2027"


@pytest.mark.asyncio
async def test_get_politician_affairs_keeps_the_presumption_notice(server, upstream):
    upstream.add(
        "/api/politiques/nicolas-sarkozy/affaires",
        payloads.politician_affairs([payloads.affair(status="APPEL_EN_COURS", politician=False)]),
    )

    async with Client(server) as client:
        result = await client.call_tool("get_politician_affairs", {"slug": "nicolas-sarkozy"})

    assert "présumée innocente" in _text(result)
    assert result.structured_content["total"] == 1


@pytest.mark.asyncio
async def test_get_party_fetches_by_slug(server, upstream):
    upstream.add("/api/partis/renaissance", payloads.party_detail())

    async with Client(server) as client:
        result = await client.call_tool("get_party", {"slug": "renaissance"})

    assert upstream.last.url.raw_path == b"/api/partis/renaissance"
    assert result.structured_content["membersWithMandate"] == 3
    assert result.structured_content["predecessor"]["slug"] == "en-marche"


@pytest.mark.asyncio
async def test_list_elections_forwards_type_and_status(server, upstream):
    upstream.add("/api/elections", {"data": [payloads.election_summary()], "pagination": payloads.pagination()})

    async with Client(server) as client:
        result = await client.call_tool("list_elections", {"type": "PRESIDENTIELLE", "status": "UPCOMING"})

    assert upstream.last_params == {"type": "PRESIDENTIELLE", "status": "UPCOMING", "page": "1", "limit": "20"}
    assert result.structured_content["items"][0]["slug"] == "presidentielle-2027"


@pytest.mark.asyncio
async def test_get_politician_votes_forwards_pagination(server, upstream):
    upstream.add("/api/politiques/jean-luc-melenchon/votes", payloads.politician_votes())

    async with Client(server) as client:
        result = await client.call_tool("get_politician_votes", {"slug": "jean-luc-melenchon", "limit": 5})

    assert upstream.last.url.raw_path.startswith(b"/api/politiques/jean-luc-melenchon/votes")
    assert upstream.last_params == {"page": "1", "limit": "5"}
    assert result.structured_content["stats"]["absent"] == 40
    assert result.structured_content["totalPages"] == 2


@pytest.mark.asyncio
async def test_get_politician_factchecks_forwards_pagination(server, upstream):
    upstream.add(
        "/api/politiques/nicolas-sarkozy/factchecks",
        {
            "politician": payloads.politician_affairs([])["politician"],
            "factchecks": [payloads.factcheck()],
            "total": 1,
            "pagination": payloads.pagination(),
        },
    )

    async with Client(server) as client:
        result = await client.call_tool("get_politician_factchecks", {"slug": "nicolas-sarkozy", "page": 1})

    assert upstream.last.url.raw_path.startswith(b"/api/politiques/nicolas-sarkozy/factchecks")
    assert upstream.last_params == {"page": "1", "limit": "20"}
    assert result.structured_content["politician"]["slug"] == "nicolas-sarkozy"
    assert result.structured_content["total"] == 1


@pytest.mark.asyncio
async def test_get_factcheck_stats_sends_no_params(server, upstream):
    upstream.add("/api/factchecks/stats", payloads.factcheck_stats())

    async with Client(server) as client:
        result = await client.call_tool("get_factcheck_stats", {})

    assert upstream.last_params == {}
    assert result.structured_content["total"] == 100
    assert result.structured_content["byVerdict"][0]["verdictRating"] == "FALSE"
