"""Canned Poligraph API payloads, shaped like the real endpoints' JSON."""


def pagination(page=1, limit=20, total=1, total_pages=1):
    return {"page": page, "limit": limit, "total": total, "totalPages": total_pages}


def party_ref(short_name="RE", name="Renaissance", **extra):
    return {"id": f"party-{short_name.lower()}", "shortName": short_name, "name": name, "color": "#ffeb00", **extra}


def politician_item(slug="emmanuel-macron", full_name="Emmanuel Macron", party=None, death_date=None):
    first, _, last = full_name.partition(" ")
    return {
        "id": f"pol-{slug}",
        "slug": slug,
        "fullName": full_name,
        "firstName": first,
        "lastName": last,
        "civility": "M.",
        "birthDate": "1977-12-21",
        "deathDate": death_date,
        "birthPlace": "Amiens",
        "photoUrl": None,
        "currentParty": party if party is not None else party_ref(),
    }


def politician_list(items, page=1, limit=20, total=None, total_pages=1):
    return {
        "data": items,
        "pagination": pagination(page, limit, len(items) if total is None else total, total_pages),
    }


def mandate(type_="DEPUTE", title="Député de la 1re circonscription", current=True, **extra):
    return {
        "id": f"m-{type_}-{title}",
        "type": type_,
        "title": title,
        "institution": "Assemblée nationale",
        "constituency": None,
        "startDate": "2022-06-22",
        "endDate": None if current else "2024-06-09",
        "isCurrent": current,
        **extra,
    }


def politician_detail(**overrides):
    data = politician_item()
    data.update(
        {
            "mandates": [
                mandate("PRESIDENT", "Président de la République", current=True, startDate="2017-05-14"),
                mandate(
                    "MINISTRE",
                    "Ministre de l'Économie",
                    current=False,
                    startDate="2014-08-26",
                    endDate="2016-08-30",
                ),
            ],
            "declarations": [
                {"id": "d1", "type": "DSP", "year": 2022, "url": "https://www.hatvp.fr/d1.pdf"},
            ],
            "affairsCount": 0,
            "factchecksCount": 3,
        }
    )
    data.update(overrides)
    return data


def source(title="Article", publisher="Le Monde", published_at="2021-03-01"):
    return {
        "id": f"src-{title}",
        "url": f"https://example.org/{title.lower()}",
        "title": title,
        "publisher": publisher,
        "publishedAt": published_at,
    }


def affair(slug="affaire-bismuth", status="CONDAMNATION_DEFINITIVE", category="CORRUPTION", politician=True, **extra):
    data = {
        "id": f"aff-{slug}",
        "slug": slug,
        "title": f"Affaire {slug}",
        "description": "Description de l'affaire.",
        "status": status,
        "category": category,
        "factsDate": "2014-01-01",
        "startDate": "2014-07-01",
        "verdictDate": None,
        "sentence": None,
        "appeal": None,
        "partyAtTime": {"shortName": "UMP", "name": "Union pour un mouvement populaire"},
        "sources": [source()],
    }
    if politician:
        data["politician"] = {
            "id": "pol-nicolas-sarkozy",
            "slug": "nicolas-sarkozy",
            "fullName": "Nicolas Sarkozy",
            "currentParty": {"shortName": "LR", "name": "Les Républicains"},
        }
    data.update(extra)
    return data


def politician_affairs(affairs):
    return {
        "politician": {
            "id": "pol-nicolas-sarkozy",
            "slug": "nicolas-sarkozy",
            "fullName": "Nicolas Sarkozy",
            "firstName": "Nicolas",
            "lastName": "Sarkozy",
            "photoUrl": None,
            "party": {"shortName": "LR", "name": "Les Républicains", "color": "#0066cc"},
        },
        "affairs": affairs,
        "total": len(affairs),
    }


def scrutin(title="Projet de loi de finances", result="ADOPTED", **extra):
    data = {
        "id": f"scr-{title}",
        "externalId": "VTANR5L16V1",
        "title": title,
        "votingDate": "2023-03-20",
        "legislature": 16,
        "votesFor": 278,
        "votesAgainst": 269,
        "votesAbstain": 12,
        "result": result,
        "sourceUrl": "https://www.assemblee-nationale.fr/scrutin/1",
        "totalVotes": 559,
    }
    data.update(extra)
    return data


def politician_votes(page=1, total_pages=2):
    return {
        "politician": {
            "id": "pol-jean-luc-melenchon",
            "slug": "jean-luc-melenchon",
            "fullName": "Jean-Luc Mélenchon",
            "firstName": "Jean-Luc",
            "lastName": "Mélenchon",
            "photoUrl": None,
            "party": {"shortName": "LFI", "name": "La France insoumise", "color": "#cc2443"},
        },
        "stats": {
            "total": 200,
            "pour": 50,
            "contre": 100,
            "abstention": 10,
            "nonVotant": 0,
            "absent": 40,
            "participationRate": 80,
        },
        "votes": [{"id": "v1", "position": "CONTRE", "scrutin": scrutin(result="REJECTED")}],
        "pagination": pagination(page, 20, 40, total_pages),
    }


def party_vote_stats(short_name, cohesion):
    return {
        "partyId": f"party-{short_name}",
        "partyName": f"Parti {short_name}",
        "partyShortName": short_name,
        "partyColor": None,
        "partySlug": short_name.lower(),
        "totalVotes": 1000,
        "pour": 500,
        "contre": 400,
        "abstention": 100,
        "nonVotant": 0,
        "absent": 0,
        "cohesionRate": cohesion,
        "participationRate": 75,
    }


def vote_stats(divisive_count=3):
    return {
        "parties": [
            party_vote_stats("LR", 81.5),
            party_vote_stats("RN", 97.2),
            party_vote_stats("PS", 88.0),
        ],
        "divisiveScrutins": [
            {**scrutin(title=f"Scrutin {i}"), "slug": f"scrutin-{i}", "chamber": "AN", "divisionScore": i * 3}
            for i in range(1, divisive_count + 1)
        ],
        "global": {
            "totalScrutins": 4000,
            "totalVotes": 1200000,
            "totalVotesFor": 600000,
            "totalVotesAgainst": 500000,
            "totalVotesAbstain": 100000,
            "participationRate": 61.2,
            "adoptes": 2500,
            "rejetes": 1500,
        },
    }


def search_result(slug="marine-le-pen", full_name="Marine Le Pen", affairs_count=2):
    return {
        "id": f"pol-{slug}",
        "slug": slug,
        "fullName": full_name,
        "photoUrl": None,
        "currentParty": {"shortName": "RN", "color": "#0d378a"},
        "currentMandate": {"type": "DEPUTE", "constituency": "Pas-de-Calais (11e)"},
        "affairsCount": affairs_count,
    }


def advanced_search(results, suggestions=None, page=1, total_pages=1):
    data = {"results": results, "total": len(results), "page": page, "totalPages": total_pages}
    if suggestions is not None:
        data["suggestions"] = suggestions
    return data


def factcheck(verdict_rating="FALSE", title="Le chômage a doublé", **extra):
    data = {
        "id": f"fc-{title}",
        "claimText": "Le chômage a doublé en cinq ans.",
        "claimant": "Marine Le Pen",
        "title": title,
        "verdict": "C'est faux",
        "verdictRating": verdict_rating,
        "source": "AFP Factuel",
        "sourceUrl": "https://factuel.afp.com/1",
        "publishedAt": "2024-02-10T08:00:00.000Z",
        "claimDate": None,
        "politicians": [
            {
                "id": "pol-marine-le-pen",
                "slug": "marine-le-pen",
                "fullName": "Marine Le Pen",
                "currentParty": {"shortName": "RN", "name": "Rassemblement national"},
            }
        ],
    }
    data.update(extra)
    return data


def factcheck_stats():
    return {
        "total": 100,
        "byVerdict": [
            {"verdictRating": "TRUE", "count": 10},
            {"verdictRating": "FALSE", "count": 60},
            {"verdictRating": "MISLEADING", "count": 30},
        ],
        "bySource": [
            {"source": "Les Décodeurs", "count": 40},
            {"source": "AFP Factuel", "count": 60},
        ],
        "byParty": [
            {"id": "p1", "name": "Renaissance", "shortName": "RE", "count": 15},
            {"id": "p2", "name": "Rassemblement national", "shortName": "RN", "count": 35},
        ],
    }


def party_summary(slug="renaissance", name="Renaissance", short_name="RE", **extra):
    data = {
        "id": f"party-{slug}",
        "slug": slug,
        "name": name,
        "shortName": short_name,
        "color": "#ffeb00",
        "politicalPosition": "CENTER",
        "logoUrl": None,
        "foundedDate": "2016-04-06",
        "dissolvedDate": None,
        "website": "https://parti-renaissance.fr",
        "memberCount": 120,
    }
    data.update(extra)
    return data


def party_member(i, with_mandate=True):
    return {
        "id": f"pol-{i}",
        "slug": f"membre-{i}",
        "fullName": f"Membre {i}",
        "photoUrl": None,
        "currentMandate": {"type": "DEPUTE", "constituency": "Paris"} if with_mandate else None,
        "affairsCount": 1 if i == 0 else 0,
    }


def party_detail(with_mandate=3, without_mandate=2):
    data = party_summary()
    data.update(
        {
            "description": "Parti présidentiel.",
            "ideology": "Libéralisme",
            "members": [party_member(i) for i in range(with_mandate)]
            + [party_member(100 + i, with_mandate=False) for i in range(without_mandate)],
            "externalIds": [{"source": "WIKIDATA", "externalId": "Q23731823", "url": None}],
            "predecessor": {"slug": "en-marche", "name": "En Marche", "shortName": "EM"},
            "successors": [],
        }
    )
    return data


def election_summary(slug="presidentielle-2027", **extra):
    data = {
        "id": f"el-{slug}",
        "slug": slug,
        "type": "PRESIDENTIELLE",
        "title": "Élection présidentielle 2027",
        "shortTitle": "Présidentielle 2027",
        "status": "UPCOMING",
        "scope": "NATIONAL",
        "round1Date": "2027-04-11",
        "round2Date": "2027-04-25",
        "dateConfirmed": False,
        "candidacyCount": 2,
    }
    data.update(extra)
    return data


def election_detail(candidacies=2):
    data = election_summary(status="COMPLETED", dateConfirmed=True)
    data.update(
        {
            "description": "Douzième élection présidentielle de la Ve République.",
            "candidacies": [
                {
                    "candidateName": f"Candidat {i}",
                    "partyLabel": "RE" if i == 0 else "RN",
                    "constituencyName": None,
                    "isElected": i == 0,
                    "politician": {"slug": f"candidat-{i}", "fullName": f"Candidat {i}"},
                    "party": None,
                }
                for i in range(candidacies)
            ],
            "rounds": [
                {"round": 2, "date": "2027-04-25", "registeredVoters": 48000000, "participationRate": 72.0},
                {
                    "round": 1,
                    "date": "2027-04-11",
                    "registeredVoters": 48000000,
                    "actualVoters": 35000000,
                    "participationRate": 73.7,
                    "blankVotes": 500000,
                    "nullVotes": 200000,
                },
            ],
        }
    )
    return data


def mandate_record(current=True):
    return {
        **mandate("DEPUTE", "Député", current=current, constituency="Paris (1re)"),
        "role": None,
        "departmentCode": "75",
        "politician": {"id": "pol-1", "slug": "sylvain-maillard", "fullName": "Sylvain Maillard", "photoUrl": None},
    }


def department(code, name, total, dominant=None):
    parties = [{"id": f"p-{dominant}", "name": dominant, "shortName": dominant, "color": None, "count": 3}] if dominant else []
    return {
        "code": code,
        "name": name,
        "region": "Région",
        "totalElus": total,
        "deputes": total - 2,
        "senateurs": 2,
        "dominantParty": parties[0] if parties else None,
        "parties": parties,
    }


def department_stats(departments=None):
    departments = departments or [
        department("75", "Paris", 22, "RE"),
        department("13", "Bouches-du-Rhône", 24, "RN"),
        department("59", "Nord", 32, "RN"),
        department("2A", "Corse-du-Sud", 3, None),
    ]
    return {
        "departments": departments,
        "stats": {
            "totalDepartments": len(departments),
            "totalElus": sum(d["totalElus"] for d in departments),
            "totalDeputes": sum(d["deputes"] for d in departments),
            "totalSenateurs": sum(d["senateurs"] for d in departments),
        },
        "filter": "all",
    }


def deputy(slug="sandrine-rousseau", full_name="Sandrine Rousseau"):
    return {
        "id": f"pol-{slug}",
        "slug": slug,
        "fullName": full_name,
        "photoUrl": None,
        "constituency": "Paris (9e)",
        "party": {"name": "Les Écologistes", "shortName": "ECO", "color": None},
    }


def relations(extra_nodes=0):
    nodes = [
        {"id": "n1", "slug": "gabriel-attal", "fullName": "Gabriel Attal", "photoUrl": None,
         "party": {"shortName": "RE", "color": None}, "mandateType": "PREMIER_MINISTRE"},
        {"id": "n2", "slug": "bruno-le-maire", "fullName": "Bruno Le Maire", "photoUrl": None,
         "party": None, "mandateType": None},
    ]
    nodes += [
        {"id": f"x{i}", "slug": f"depute-{i}", "fullName": f"Député {i}", "photoUrl": None,
         "party": None, "mandateType": "DEPUTE"}
        for i in range(extra_nodes)
    ]
    links = [
        {"source": "c", "target": "n1", "type": "SAME_PARTY", "strength": 1},
        {"source": "c", "target": "n2", "type": "SAME_GOVERNMENT", "strength": 1},
        {"source": "c", "target": "missing", "type": "SAME_GOVERNMENT", "strength": 1},
    ]
    links += [{"source": "c", "target": f"x{i}", "type": "SAME_LEGISLATURE", "strength": 0.5} for i in range(extra_nodes)]
    by_type = {"SAME_PARTY": 1, "SAME_GOVERNMENT": 2}
    if extra_nodes:
        by_type["SAME_LEGISLATURE"] = extra_nodes
    return {
        "center": {"id": "c", "slug": "emmanuel-macron", "fullName": "Emmanuel Macron", "photoUrl": None,
                   "party": {"shortName": "RE", "color": None}, "mandateType": "PRESIDENT"},
        "nodes": nodes,
        "links": links,
        "stats": {"totalConnections": 3 + extra_nodes, "byType": by_type},
    }
