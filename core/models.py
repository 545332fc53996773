# =============================================================================
# core/models.py  —  Upstream Response Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses describe the JSON the Poligraph API sends back.  Nothing
# here is stored: every instance lives for one tool call and is discarded.
#
# PARSING RULES:
#   - Required fields are read with data["key"].  If the API ever drops one,
#     parse_response() raises ResponseShapeError instead of inventing a value.
#   - Optional fields are read with data.get("key") and stay None when
#     absent; renderers skip them.
#
# Field names are snake_case here; renderers map them back to the API's
# camelCase names in the structured payloads.
# =============================================================================

from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Type, TypeVar

M = TypeVar("M")


class ResponseShapeError(ValueError):
    """A required field is missing or has the wrong type in an API response."""


def parse_response(model: Type[M], payload: Any) -> M:
    """Build ``model`` from a decoded JSON payload or raise ResponseShapeError."""
    try:
        return model.from_dict(payload)  # type: ignore[attr-defined]
    except (KeyError, TypeError, AttributeError) as exc:
        raise ResponseShapeError(
            f"Réponse inattendue de l'API pour {model.__name__} : {exc!r}"
        ) from exc


def _opt(builder: Callable[[dict], M], value: Optional[dict]) -> Optional[M]:
    return builder(value) if value else None


def _list(builder: Callable[[dict], M], values: Optional[list]) -> list[M]:
    return [builder(v) for v in values or []]


# -----------------------------------------------------------------------------
# Shared building blocks
# -----------------------------------------------------------------------------
@dataclass
class Pagination:
    page: int
    limit: int
    total: int
    total_pages: int

    @classmethod
    def from_dict(cls, data: dict) -> "Pagination":
        return cls(
            page=data["page"],
            limit=data["limit"],
            total=data["total"],
            total_pages=data["totalPages"],
        )

    def to_dict(self) -> dict:
        return {
            "page": self.page,
            "limit": self.limit,
            "total": self.total,
            "totalPages": self.total_pages,
        }


@dataclass
class PartyRef:
    """A party as embedded in other records (only shortName is guaranteed)."""

    short_name: str
    name: Optional[str] = None
    id: Optional[str] = None
    slug: Optional[str] = None
    color: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "PartyRef":
        return cls(
            short_name=data["shortName"],
            name=data.get("name"),
            id=data.get("id"),
            slug=data.get("slug"),
            color=data.get("color"),
        )

    def to_dict(self) -> dict:
        return {"name": self.name, "shortName": self.short_name}


@dataclass
class PoliticianRef:
    """A politician as embedded in affairs, fact-checks, mandates, etc.

    ``party`` is filled from either "currentParty" or "party", whichever the
    endpoint uses.
    """

    slug: str
    full_name: str
    id: Optional[str] = None
    photo_url: Optional[str] = None
    party: Optional[PartyRef] = None

    @classmethod
    def from_dict(cls, data: dict) -> "PoliticianRef":
        return cls(
            slug=data["slug"],
            full_name=data["fullName"],
            id=data.get("id"),
            photo_url=data.get("photoUrl"),
            party=_opt(PartyRef.from_dict, data.get("currentParty") or data.get("party")),
        )

    def to_dict(self) -> dict:
        return {"slug": self.slug, "fullName": self.full_name}


@dataclass
class CurrentMandate:
    type: str
    title: Optional[str] = None
    constituency: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "CurrentMandate":
        return cls(type=data["type"], title=data.get("title"), constituency=data.get("constituency"))


@dataclass
class PartyCount:
    """A party with a number attached (department breakdowns, fact-check stats)."""

    short_name: str
    count: int
    name: Optional[str] = None
    id: Optional[str] = None
    color: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "PartyCount":
        return cls(
            short_name=data["shortName"],
            count=data["count"],
            name=data.get("name"),
            id=data.get("id"),
            color=data.get("color"),
        )

    def to_dict(self) -> dict:
        return {"shortName": self.short_name, "name": self.name, "count": self.count}


# -----------------------------------------------------------------------------
# Politicians
# -----------------------------------------------------------------------------
@dataclass
class Mandate:
    type: str
    title: str
    start_date: Optional[str]
    is_current: bool
    institution: Optional[str] = None
    constituency: Optional[str] = None
    end_date: Optional[str] = None
    id: Optional[str] = None

    @staticmethod
    def _kwargs(data: dict) -> dict:
        return dict(
            type=data["type"],
            title=data["title"],
            start_date=data.get("startDate"),
            is_current=bool(data["isCurrent"]),
            institution=data.get("institution"),
            constituency=data.get("constituency"),
            end_date=data.get("endDate"),
            id=data.get("id"),
        )

    @classmethod
    def from_dict(cls, data: dict) -> "Mandate":
        return cls(**cls._kwargs(data))

    def to_dict(self) -> dict:
        return {
            "type": self.type,
            "title": self.title,
            "institution": self.institution,
            "constituency": self.constituency,
            "startDate": self.start_date,
            "endDate": self.end_date,
            "isCurrent": self.is_current,
        }


@dataclass
class Declaration:
    """A HATVP wealth/interest declaration."""

    type: str
    year: int
    url: str

    @classmethod
    def from_dict(cls, data: dict) -> "Declaration":
        return cls(type=data["type"], year=data["year"], url=data["url"])


@dataclass
class PoliticianSummary:
    id: str
    slug: str
    full_name: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    civility: Optional[str] = None
    birth_date: Optional[str] = None
    death_date: Optional[str] = None
    birth_place: Optional[str] = None
    photo_url: Optional[str] = None
    current_party: Optional[PartyRef] = None

    @staticmethod
    def _kwargs(data: dict) -> dict:
        return dict(
            id=data["id"],
            slug=data["slug"],
            full_name=data["fullName"],
            first_name=data.get("firstName"),
            last_name=data.get("lastName"),
            civility=data.get("civility"),
            birth_date=data.get("birthDate"),
            death_date=data.get("deathDate"),
            birth_place=data.get("birthPlace"),
            photo_url=data.get("photoUrl"),
            current_party=_opt(PartyRef.from_dict, data.get("currentParty")),
        )

    @classmethod
    def from_dict(cls, data: dict) -> "PoliticianSummary":
        return cls(**cls._kwargs(data))


@dataclass
class PoliticianDetail(PoliticianSummary):
    mandates: list[Mandate] = field(default_factory=list)
    declarations: list[Declaration] = field(default_factory=list)
    affairs_count: int = 0
    factchecks_count: int = 0

    @classmethod
    def from_dict(cls, data: dict) -> "PoliticianDetail":
        return cls(
            **PoliticianSummary._kwargs(data),
            mandates=_list(Mandate.from_dict, data["mandates"]),
            declarations=_list(Declaration.from_dict, data.get("declarations")),
            affairs_count=data["affairsCount"],
            factchecks_count=data.get("factchecksCount") or 0,
        )


@dataclass
class PoliticianList:
    items: list[PoliticianSummary]
    pagination: Pagination

    @classmethod
    def from_dict(cls, data: dict) -> "PoliticianList":
        return cls(
            items=_list(PoliticianSummary.from_dict, data["data"]),
            pagination=Pagination.from_dict(data["pagination"]),
        )


# -----------------------------------------------------------------------------
# Relation graph (node/link shape)
# -----------------------------------------------------------------------------
@dataclass
class RelationNode:
    id: str
    slug: str
    full_name: str
    photo_url: Optional[str] = None
    party: Optional[PartyRef] = None
    mandate_type: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "RelationNode":
        return cls(
            id=data["id"],
            slug=data["slug"],
            full_name=data["fullName"],
            photo_url=data.get("photoUrl"),
            party=_opt(PartyRef.from_dict, data.get("party")),
            mandate_type=data.get("mandateType"),
        )


@dataclass
class RelationLink:
    source: str
    target: str
    type: str
    strength: Optional[float] = None
    label: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "RelationLink":
        return cls(
            source=data["source"],
            target=data["target"],
            type=data["type"],
            strength=data.get("strength"),
            label=data.get("label"),
        )


@dataclass
class RelationGraph:
    center: RelationNode
    nodes: list[RelationNode]
    links: list[RelationLink]
    total_connections: int
    by_type: dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict) -> "RelationGraph":
        stats = data["stats"]
        return cls(
            center=RelationNode.from_dict(data["center"]),
            nodes=_list(RelationNode.from_dict, data["nodes"]),
            links=_list(RelationLink.from_dict, data["links"]),
            total_connections=stats["totalConnections"],
            by_type=dict(stats.get("byType") or {}),
        )


# -----------------------------------------------------------------------------
# Judicial affairs
# -----------------------------------------------------------------------------
@dataclass
class Source:
    url: str
    title: str
    publisher: str
    published_at: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Source":
        return cls(
            url=data["url"],
            title=data["title"],
            publisher=data["publisher"],
            published_at=data.get("publishedAt"),
        )

    def to_dict(self) -> dict:
        return {"url": self.url, "title": self.title, "publisher": self.publisher}


@dataclass
class Affair:
    slug: str
    title: str
    status: str
    category: str
    description: Optional[str] = None
    facts_date: Optional[str] = None
    start_date: Optional[str] = None
    verdict_date: Optional[str] = None
    sentence: Optional[str] = None
    appeal: Optional[str] = None
    party_at_time: Optional[PartyRef] = None
    sources: list[Source] = field(default_factory=list)

    @staticmethod
    def _kwargs(data: dict) -> dict:
        return dict(
            slug=data["slug"],
            title=data["title"],
            status=data["status"],
            category=data["category"],
            description=data.get("description"),
            facts_date=data.get("factsDate"),
            start_date=data.get("startDate"),
            verdict_date=data.get("verdictDate"),
            sentence=data.get("sentence"),
            appeal=data.get("appeal"),
            party_at_time=_opt(PartyRef.from_dict, data.get("partyAtTime")),
            sources=_list(Source.from_dict, data.get("sources")),
        )

    @classmethod
    def from_dict(cls, data: dict) -> "Affair":
        return cls(**cls._kwargs(data))


@dataclass
class AffairListItem(Affair):
    """An affair from /api/affaires, which always names the politician."""

    politician: Optional[PoliticianRef] = None

    @classmethod
    def from_dict(cls, data: dict) -> "AffairListItem":
        return cls(
            **Affair._kwargs(data),
            politician=PoliticianRef.from_dict(data["politician"]),
        )


@dataclass
class AffairList:
    items: list[AffairListItem]
    pagination: Pagination

    @classmethod
    def from_dict(cls, data: dict) -> "AffairList":
        return cls(
            items=_list(AffairListItem.from_dict, data["data"]),
            pagination=Pagination.from_dict(data["pagination"]),
        )


@dataclass
class PoliticianAffairs:
    politician: PoliticianRef
    affairs: list[Affair]
    total: int

    @classmethod
    def from_dict(cls, data: dict) -> "PoliticianAffairs":
        return cls(
            politician=PoliticianRef.from_dict(data["politician"]),
            affairs=_list(Affair.from_dict, data["affairs"]),
            total=data["total"],
        )


# -----------------------------------------------------------------------------
# Parliamentary votes
# -----------------------------------------------------------------------------
@dataclass
class Scrutin:
    title: str
    voting_date: Optional[str]
    votes_for: int
    votes_against: int
    votes_abstain: int
    result: Optional[str] = None
    legislature: Optional[int] = None
    chamber: Optional[str] = None
    source_url: Optional[str] = None
    id: Optional[str] = None
    slug: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Scrutin":
        return cls(
            title=data["title"],
            voting_date=data.get("votingDate"),
            votes_for=data["votesFor"],
            votes_against=data["votesAgainst"],
            votes_abstain=data["votesAbstain"],
            result=data.get("result"),
            legislature=data.get("legislature"),
            chamber=data.get("chamber"),
            source_url=data.get("sourceUrl"),
            id=data.get("id"),
            slug=data.get("slug"),
        )

    def tally_dict(self) -> dict:
        return {
            "votesFor": self.votes_for,
            "votesAgainst": self.votes_against,
            "votesAbstain": self.votes_abstain,
        }


@dataclass
class ScrutinList:
    items: list[Scrutin]
    pagination: Pagination

    @classmethod
    def from_dict(cls, data: dict) -> "ScrutinList":
        return cls(
            items=_list(Scrutin.from_dict, data["data"]),
            pagination=Pagination.from_dict(data["pagination"]),
        )


@dataclass
class VoteTally:
    """A politician's personal voting record totals."""

    total: int
    pour: int
    contre: int
    abstention: int
    participation_rate: float
    non_votant: int = 0
    absent: int = 0

    @classmethod
    def from_dict(cls, data: dict) -> "VoteTally":
        return cls(
            total=data["total"],
            pour=data["pour"],
            contre=data["contre"],
            abstention=data["abstention"],
            participation_rate=data["participationRate"],
            non_votant=data.get("nonVotant") or 0,
            absent=data.get("absent") or 0,
        )

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "pour": self.pour,
            "contre": self.contre,
            "abstention": self.abstention,
            "nonVotant": self.non_votant,
            "absent": self.absent,
            "participationRate": self.participation_rate,
        }


@dataclass
class PoliticianVote:
    position: str
    scrutin: Scrutin

    @classmethod
    def from_dict(cls, data: dict) -> "PoliticianVote":
        return cls(position=data["position"], scrutin=Scrutin.from_dict(data["scrutin"]))


@dataclass
class PoliticianVotes:
    politician: PoliticianRef
    stats: VoteTally
    votes: list[PoliticianVote]
    pagination: Pagination

    @classmethod
    def from_dict(cls, data: dict) -> "PoliticianVotes":
        return cls(
            politician=PoliticianRef.from_dict(data["politician"]),
            stats=VoteTally.from_dict(data["stats"]),
            votes=_list(PoliticianVote.from_dict, data["votes"]),
            pagination=Pagination.from_dict(data["pagination"]),
        )


@dataclass
class PartyVoteStats:
    party_name: str
    party_short_name: str
    total_votes: int
    cohesion_rate: float
    participation_rate: float
    party_slug: Optional[str] = None
    party_color: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "PartyVoteStats":
        return cls(
            party_name=data["partyName"],
            party_short_name=data["partyShortName"],
            total_votes=data["totalVotes"],
            cohesion_rate=data["cohesionRate"],
            participation_rate=data["participationRate"],
            party_slug=data.get("partySlug"),
            party_color=data.get("partyColor"),
        )


@dataclass
class DivisiveScrutin(Scrutin):
    division_score: float = 0

    @classmethod
    def from_dict(cls, data: dict) -> "DivisiveScrutin":
        base = Scrutin.from_dict(data)
        return cls(**{**base.__dict__, "division_score": data["divisionScore"]})


@dataclass
class GlobalVoteStats:
    total_scrutins: int
    total_votes: int
    total_votes_for: int
    total_votes_against: int
    total_votes_abstain: int
    participation_rate: float
    adoptes: int
    rejetes: int

    @classmethod
    def from_dict(cls, data: dict) -> "GlobalVoteStats":
        return cls(
            total_scrutins=data["totalScrutins"],
            total_votes=data["totalVotes"],
            total_votes_for=data["totalVotesFor"],
            total_votes_against=data["totalVotesAgainst"],
            total_votes_abstain=data["totalVotesAbstain"],
            participation_rate=data["participationRate"],
            adoptes=data["adoptes"],
            rejetes=data["rejetes"],
        )

    def to_dict(self) -> dict:
        return {
            "totalScrutins": self.total_scrutins,
            "totalVotes": self.total_votes,
            "totalVotesFor": self.total_votes_for,
            "totalVotesAgainst": self.total_votes_against,
            "totalVotesAbstain": self.total_votes_abstain,
            "participationRate": self.participation_rate,
            "adoptes": self.adoptes,
            "rejetes": self.rejetes,
        }


@dataclass
class VoteStats:
    parties: list[PartyVoteStats]
    divisive_scrutins: list[DivisiveScrutin]
    global_stats: GlobalVoteStats

    @classmethod
    def from_dict(cls, data: dict) -> "VoteStats":
        return cls(
            parties=_list(PartyVoteStats.from_dict, data["parties"]),
            divisive_scrutins=_list(DivisiveScrutin.from_dict, data.get("divisiveScrutins")),
            global_stats=GlobalVoteStats.from_dict(data["global"]),
        )


# -----------------------------------------------------------------------------
# Advanced search
# -----------------------------------------------------------------------------
@dataclass
class SearchResult:
    slug: str
    full_name: str
    affairs_count: int = 0
    current_party: Optional[PartyRef] = None
    current_mandate: Optional[CurrentMandate] = None

    @classmethod
    def from_dict(cls, data: dict) -> "SearchResult":
        return cls(
            slug=data["slug"],
            full_name=data["fullName"],
            affairs_count=data.get("affairsCount") or 0,
            current_party=_opt(PartyRef.from_dict, data.get("currentParty")),
            current_mandate=_opt(CurrentMandate.from_dict, data.get("currentMandate")),
        )


@dataclass
class AdvancedSearch:
    results: list[SearchResult]
    total: int
    page: int
    total_pages: int
    suggestions: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "AdvancedSearch":
        return cls(
            results=_list(SearchResult.from_dict, data["results"]),
            total=data["total"],
            page=data["page"],
            total_pages=data["totalPages"],
            suggestions=list(data.get("suggestions") or []),
        )


# -----------------------------------------------------------------------------
# Fact-checks
# -----------------------------------------------------------------------------
@dataclass
class FactCheck:
    title: str
    claim_text: str
    verdict: str
    verdict_rating: str
    source: str
    source_url: str
    published_at: Optional[str] = None
    claimant: Optional[str] = None
    claim_date: Optional[str] = None
    politicians: list[PoliticianRef] = field(default_factory=list)
    id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "FactCheck":
        return cls(
            title=data["title"],
            claim_text=data["claimText"],
            verdict=data["verdict"],
            verdict_rating=data["verdictRating"],
            source=data["source"],
            source_url=data["sourceUrl"],
            published_at=data.get("publishedAt"),
            claimant=data.get("claimant"),
            claim_date=data.get("claimDate"),
            politicians=_list(PoliticianRef.from_dict, data.get("politicians")),
            id=data.get("id"),
        )


@dataclass
class FactCheckList:
    items: list[FactCheck]
    pagination: Pagination

    @classmethod
    def from_dict(cls, data: dict) -> "FactCheckList":
        return cls(
            items=_list(FactCheck.from_dict, data["data"]),
            pagination=Pagination.from_dict(data["pagination"]),
        )


@dataclass
class PoliticianFactChecks:
    politician: PoliticianRef
    factchecks: list[FactCheck]
    total: int
    pagination: Pagination

    @classmethod
    def from_dict(cls, data: dict) -> "PoliticianFactChecks":
        return cls(
            politician=PoliticianRef.from_dict(data["politician"]),
            factchecks=_list(FactCheck.from_dict, data["factchecks"]),
            total=data["total"],
            pagination=Pagination.from_dict(data["pagination"]),
        )


@dataclass
class KeyCount:
    key: str
    count: int


@dataclass
class FactCheckStats:
    total: int
    by_verdict: list[KeyCount]
    by_source: list[KeyCount]
    by_party: list[PartyCount]

    @classmethod
    def from_dict(cls, data: dict) -> "FactCheckStats":
        return cls(
            total=data["total"],
            by_verdict=[KeyCount(v["verdictRating"], v["count"]) for v in data["byVerdict"]],
            by_source=[KeyCount(s["source"], s["count"]) for s in data["bySource"]],
            by_party=_list(PartyCount.from_dict, data.get("byParty")),
        )


# -----------------------------------------------------------------------------
# Parties
# -----------------------------------------------------------------------------
@dataclass
class PartySummary:
    slug: str
    name: str
    short_name: str
    member_count: int
    id: Optional[str] = None
    color: Optional[str] = None
    political_position: Optional[str] = None
    logo_url: Optional[str] = None
    founded_date: Optional[str] = None
    dissolved_date: Optional[str] = None
    website: Optional[str] = None

    @staticmethod
    def _kwargs(data: dict) -> dict:
        return dict(
            slug=data["slug"],
            name=data["name"],
            short_name=data["shortName"],
            member_count=data["memberCount"],
            id=data.get("id"),
            color=data.get("color"),
            political_position=data.get("politicalPosition"),
            logo_url=data.get("logoUrl"),
            founded_date=data.get("foundedDate"),
            dissolved_date=data.get("dissolvedDate"),
            website=data.get("website"),
        )

    @classmethod
    def from_dict(cls, data: dict) -> "PartySummary":
        return cls(**cls._kwargs(data))


@dataclass
class PartyList:
    items: list[PartySummary]
    pagination: Pagination

    @classmethod
    def from_dict(cls, data: dict) -> "PartyList":
        return cls(
            items=_list(PartySummary.from_dict, data["data"]),
            pagination=Pagination.from_dict(data["pagination"]),
        )


@dataclass
class PartyMember:
    slug: str
    full_name: str
    affairs_count: int = 0
    photo_url: Optional[str] = None
    current_mandate: Optional[CurrentMandate] = None

    @classmethod
    def from_dict(cls, data: dict) -> "PartyMember":
        return cls(
            slug=data["slug"],
            full_name=data["fullName"],
            affairs_count=data.get("affairsCount") or 0,
            photo_url=data.get("photoUrl"),
            current_mandate=_opt(CurrentMandate.from_dict, data.get("currentMandate")),
        )


@dataclass
class PartyLink:
    """A predecessor or successor in a party's lineage."""

    slug: str
    name: str
    short_name: str

    @classmethod
    def from_dict(cls, data: dict) -> "PartyLink":
        return cls(slug=data["slug"], name=data["name"], short_name=data["shortName"])

    def to_dict(self) -> dict:
        return {"slug": self.slug, "name": self.name, "shortName": self.short_name}


@dataclass
class ExternalId:
    source: str
    external_id: str
    url: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "ExternalId":
        return cls(source=data["source"], external_id=data["externalId"], url=data.get("url"))


@dataclass
class PartyDetail(PartySummary):
    description: Optional[str] = None
    ideology: Optional[str] = None
    members: list[PartyMember] = field(default_factory=list)
    external_ids: list[ExternalId] = field(default_factory=list)
    predecessor: Optional[PartyLink] = None
    successors: list[PartyLink] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "PartyDetail":
        return cls(
            **PartySummary._kwargs(data),
            description=data.get("description"),
            ideology=data.get("ideology"),
            members=_list(PartyMember.from_dict, data.get("members")),
            external_ids=_list(ExternalId.from_dict, data.get("externalIds")),
            predecessor=_opt(PartyLink.from_dict, data.get("predecessor")),
            successors=_list(PartyLink.from_dict, data.get("successors")),
        )


# -----------------------------------------------------------------------------
# Elections
# -----------------------------------------------------------------------------
@dataclass
class ElectionSummary:
    slug: str
    type: str
    title: str
    status: str
    id: Optional[str] = None
    short_title: Optional[str] = None
    scope: Optional[str] = None
    round1_date: Optional[str] = None
    round2_date: Optional[str] = None
    date_confirmed: Optional[bool] = None
    candidacy_count: Optional[int] = None

    @staticmethod
    def _kwargs(data: dict) -> dict:
        return dict(
            slug=data["slug"],
            type=data["type"],
            title=data["title"],
            status=data["status"],
            id=data.get("id"),
            short_title=data.get("shortTitle"),
            scope=data.get("scope"),
            round1_date=data.get("round1Date"),
            round2_date=data.get("round2Date"),
            date_confirmed=data.get("dateConfirmed"),
            candidacy_count=data.get("candidacyCount"),
        )

    @classmethod
    def from_dict(cls, data: dict) -> "ElectionSummary":
        return cls(**cls._kwargs(data))


@dataclass
class ElectionList:
    items: list[ElectionSummary]
    pagination: Pagination

    @classmethod
    def from_dict(cls, data: dict) -> "ElectionList":
        return cls(
            items=_list(ElectionSummary.from_dict, data["data"]),
            pagination=Pagination.from_dict(data["pagination"]),
        )


@dataclass
class Candidacy:
    candidate_name: str
    party_label: Optional[str] = None
    constituency_name: Optional[str] = None
    is_elected: bool = False
    round1_pct: Optional[float] = None
    round2_pct: Optional[float] = None
    politician: Optional[PoliticianRef] = None
    party: Optional[PartyRef] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Candidacy":
        return cls(
            candidate_name=data["candidateName"],
            party_label=data.get("partyLabel"),
            constituency_name=data.get("constituencyName"),
            is_elected=bool(data.get("isElected")),
            round1_pct=data.get("round1Pct"),
            round2_pct=data.get("round2Pct"),
            politician=_opt(PoliticianRef.from_dict, data.get("politician")),
            party=_opt(PartyRef.from_dict, data.get("party")),
        )


@dataclass
class ElectionRound:
    number: int
    date: Optional[str] = None
    registered_voters: Optional[int] = None
    actual_voters: Optional[int] = None
    participation_rate: Optional[float] = None
    blank_votes: Optional[int] = None
    null_votes: Optional[int] = None

    @classmethod
    def from_dict(cls, data: dict) -> "ElectionRound":
        return cls(
            number=data["round"],
            date=data.get("date"),
            registered_voters=data.get("registeredVoters"),
            actual_voters=data.get("actualVoters"),
            participation_rate=data.get("participationRate"),
            blank_votes=data.get("blankVotes"),
            null_votes=data.get("nullVotes"),
        )

    def to_dict(self) -> dict:
        return {
            "round": self.number,
            "date": self.date,
            "registeredVoters": self.registered_voters,
            "actualVoters": self.actual_voters,
            "participationRate": self.participation_rate,
            "blankVotes": self.blank_votes,
            "nullVotes": self.null_votes,
        }


@dataclass
class ElectionDetail(ElectionSummary):
    description: Optional[str] = None
    candidacies: list[Candidacy] = field(default_factory=list)
    rounds: list[ElectionRound] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "ElectionDetail":
        return cls(
            **ElectionSummary._kwargs(data),
            description=data.get("description"),
            candidacies=_list(Candidacy.from_dict, data["candidacies"]),
            rounds=_list(ElectionRound.from_dict, data["rounds"]),
        )


# -----------------------------------------------------------------------------
# Mandates
# -----------------------------------------------------------------------------
@dataclass
class MandateRecord(Mandate):
    """A mandate listed on its own, with its holder attached."""

    politician: Optional[PoliticianRef] = None
    role: Optional[str] = None
    department_code: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "MandateRecord":
        return cls(
            **Mandate._kwargs(data),
            politician=PoliticianRef.from_dict(data["politician"]),
            role=data.get("role"),
            department_code=data.get("departmentCode"),
        )


@dataclass
class MandateList:
    items: list[MandateRecord]
    pagination: Pagination

    @classmethod
    def from_dict(cls, data: dict) -> "MandateList":
        return cls(
            items=_list(MandateRecord.from_dict, data["data"]),
            pagination=Pagination.from_dict(data["pagination"]),
        )


# -----------------------------------------------------------------------------
# Departments
# -----------------------------------------------------------------------------
@dataclass
class DepartmentStats:
    code: str
    name: str
    total_elus: int
    deputes: int
    senateurs: int
    region: Optional[str] = None
    dominant_party: Optional[PartyCount] = None
    parties: list[PartyCount] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "DepartmentStats":
        return cls(
            code=data["code"],
            name=data["name"],
            total_elus=data["totalElus"],
            deputes=data["deputes"],
            senateurs=data["senateurs"],
            region=data.get("region"),
            dominant_party=_opt(PartyCount.from_dict, data.get("dominantParty")),
            parties=_list(PartyCount.from_dict, data.get("parties")),
        )


@dataclass
class DepartmentTotals:
    total_departments: int
    total_elus: int
    total_deputes: int
    total_senateurs: int

    @classmethod
    def from_dict(cls, data: dict) -> "DepartmentTotals":
        return cls(
            total_departments=data["totalDepartments"],
            total_elus=data["totalElus"],
            total_deputes=data["totalDeputes"],
            total_senateurs=data["totalSenateurs"],
        )

    def to_dict(self) -> dict:
        return {
            "totalDepartments": self.total_departments,
            "totalElus": self.total_elus,
            "totalDeputes": self.total_deputes,
            "totalSenateurs": self.total_senateurs,
        }


@dataclass
class DepartmentStatsReport:
    departments: list[DepartmentStats]
    stats: DepartmentTotals
    filter: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "DepartmentStatsReport":
        return cls(
            departments=_list(DepartmentStats.from_dict, data["departments"]),
            stats=DepartmentTotals.from_dict(data["stats"]),
            filter=data.get("filter"),
        )


@dataclass
class Deputy:
    slug: str
    full_name: str
    constituency: Optional[str] = None
    photo_url: Optional[str] = None
    party: Optional[PartyRef] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Deputy":
        return cls(
            slug=data["slug"],
            full_name=data["fullName"],
            constituency=data.get("constituency"),
            photo_url=data.get("photoUrl"),
            party=_opt(PartyRef.from_dict, data.get("party")),
        )


@dataclass
class DeputyList:
    """/api/deputies/by-department answers with a bare JSON array."""

    items: list[Deputy]

    @classmethod
    def from_dict(cls, data: list) -> "DeputyList":
        if not isinstance(data, list):
            raise TypeError(f"expected a list of deputies, got {type(data).__name__}")
        return cls(items=_list(Deputy.from_dict, data))
