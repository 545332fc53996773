# =============================================================================
# core/labels.py  —  Code → French Label Tables
# =============================================================================
#
# The API speaks in machine codes ("MISE_EN_EXAMEN", "FAR_RIGHT", ...).
# Every code set lives here exactly once, as a LabeledEnum whose members
# carry their display label.  Renderers call Enum.label_for(code), which
# falls back to the raw code for anything unknown and never raises.
#
# The Literal aliases under each enum are the codes a tool accepts as a
# FILTER.  They are sometimes a subset of the enum: the upstream only
# filters on some values even though it may return others.
# =============================================================================

from enum import Enum
from typing import Literal, Optional


class LabeledEnum(str, Enum):
    """A string enum whose members also carry a human-readable label."""

    def __new__(cls, code: str, label: str):
        member = str.__new__(cls, code)
        member._value_ = code
        member.label = label
        return member

    @classmethod
    def label_for(cls, code: Optional[str]) -> Optional[str]:
        """Label for ``code``, or ``code`` itself when it is not in the table."""
        try:
            return cls(code).label
        except ValueError:
            return code


# -----------------------------------------------------------------------------
# Mandates
# -----------------------------------------------------------------------------
class MandateType(LabeledEnum):
    DEPUTE = ("DEPUTE", "Député(e)")
    SENATEUR = ("SENATEUR", "Sénateur/trice")
    DEPUTE_EUROPEEN = ("DEPUTE_EUROPEEN", "Député(e) européen(ne)")
    PRESIDENT = ("PRESIDENT", "Président(e) de la République")
    PRESIDENT_REPUBLIQUE = ("PRESIDENT_REPUBLIQUE", "Président(e) de la République")
    PREMIER_MINISTRE = ("PREMIER_MINISTRE", "Premier(e) ministre")
    MINISTRE = ("MINISTRE", "Ministre")
    MINISTRE_DELEGUE = ("MINISTRE_DELEGUE", "Ministre délégué(e)")
    SECRETAIRE_ETAT = ("SECRETAIRE_ETAT", "Secrétaire d'État")
    MAIRE = ("MAIRE", "Maire")
    ADJOINT_MAIRE = ("ADJOINT_MAIRE", "Adjoint(e) au maire")
    PRESIDENT_REGION = ("PRESIDENT_REGION", "Président(e) de région")
    PRESIDENT_DEPARTEMENT = ("PRESIDENT_DEPARTEMENT", "Président(e) de département")
    CONSEILLER_REGIONAL = ("CONSEILLER_REGIONAL", "Conseiller/ère régional(e)")
    CONSEILLER_DEPARTEMENTAL = ("CONSEILLER_DEPARTEMENTAL", "Conseiller/ère départemental(e)")
    CONSEILLER_MUNICIPAL = ("CONSEILLER_MUNICIPAL", "Conseiller/ère municipal(e)")
    PRESIDENT_PARTI = ("PRESIDENT_PARTI", "Président(e) de parti")


# /api/politiques?mandateType=
PoliticianMandateFilter = Literal[
    "DEPUTE",
    "SENATEUR",
    "DEPUTE_EUROPEEN",
    "PRESIDENT",
    "PREMIER_MINISTRE",
    "MINISTRE",
    "SECRETAIRE_ETAT",
    "MAIRE",
    "PRESIDENT_REGION",
    "PRESIDENT_DEPARTEMENT",
    "CONSEILLER_REGIONAL",
    "CONSEILLER_DEPARTEMENTAL",
    "CONSEILLER_MUNICIPAL",
]

# /api/search/advanced?mandate=
SearchMandateFilter = Literal[
    "DEPUTE",
    "SENATEUR",
    "MINISTRE",
    "PREMIER_MINISTRE",
    "MINISTRE_DELEGUE",
    "SECRETAIRE_ETAT",
    "DEPUTE_EUROPEEN",
]

# /api/mandats?type=
MandateListFilter = Literal[
    "DEPUTE",
    "SENATEUR",
    "DEPUTE_EUROPEEN",
    "PRESIDENT_REPUBLIQUE",
    "PREMIER_MINISTRE",
    "MINISTRE",
    "SECRETAIRE_ETAT",
    "MINISTRE_DELEGUE",
    "PRESIDENT_REGION",
    "PRESIDENT_DEPARTEMENT",
    "MAIRE",
    "ADJOINT_MAIRE",
    "CONSEILLER_REGIONAL",
    "CONSEILLER_DEPARTEMENTAL",
    "CONSEILLER_MUNICIPAL",
    "PRESIDENT_PARTI",
]


# -----------------------------------------------------------------------------
# Judicial affairs
# -----------------------------------------------------------------------------
class AffairStatus(LabeledEnum):
    ENQUETE_PRELIMINAIRE = ("ENQUETE_PRELIMINAIRE", "Enquête préliminaire")
    MISE_EN_EXAMEN = ("MISE_EN_EXAMEN", "Mise en examen")
    PROCES_EN_COURS = ("PROCES_EN_COURS", "Procès en cours")
    CONDAMNATION_PREMIERE_INSTANCE = ("CONDAMNATION_PREMIERE_INSTANCE", "Condamnation (1ère instance)")
    CONDAMNATION_DEFINITIVE = ("CONDAMNATION_DEFINITIVE", "Condamnation définitive")
    APPEL_EN_COURS = ("APPEL_EN_COURS", "Appel en cours")
    RELAXE = ("RELAXE", "Relaxe")
    NON_LIEU = ("NON_LIEU", "Non-lieu")
    PRESCRIPTION = ("PRESCRIPTION", "Prescription")

    @classmethod
    def needs_presumption(cls, code: Optional[str]) -> bool:
        """True while no final decision has been reached."""
        return code in _UNRESOLVED_STATUSES


_UNRESOLVED_STATUSES = frozenset({
    AffairStatus.ENQUETE_PRELIMINAIRE.value,
    AffairStatus.MISE_EN_EXAMEN.value,
    AffairStatus.PROCES_EN_COURS.value,
    AffairStatus.APPEL_EN_COURS.value,
})

AffairStatusFilter = Literal[
    "ENQUETE_PRELIMINAIRE",
    "MISE_EN_EXAMEN",
    "PROCES_EN_COURS",
    "CONDAMNATION_PREMIERE_INSTANCE",
    "CONDAMNATION_DEFINITIVE",
    "APPEL_EN_COURS",
    "RELAXE",
    "NON_LIEU",
    "PRESCRIPTION",
]


class AffairCategory(LabeledEnum):
    CORRUPTION = ("CORRUPTION", "Corruption")
    FRAUDE_FISCALE = ("FRAUDE_FISCALE", "Fraude fiscale")
    BLANCHIMENT = ("BLANCHIMENT", "Blanchiment")
    TRAFIC_INFLUENCE = ("TRAFIC_INFLUENCE", "Trafic d'influence")
    PRISE_ILLEGALE_INTERET = ("PRISE_ILLEGALE_INTERET", "Prise illégale d'intérêts")
    VIOLENCE = ("VIOLENCE", "Violence")
    HARCELEMENT_SEXUEL = ("HARCELEMENT_SEXUEL", "Harcèlement sexuel")
    AGRESSION_SEXUELLE = ("AGRESSION_SEXUELLE", "Agression sexuelle")
    VIOL = ("VIOL", "Viol")
    DIFFAMATION = ("DIFFAMATION", "Diffamation")
    ABUS_BIENS_SOCIAUX = ("ABUS_BIENS_SOCIAUX", "Abus de biens sociaux")
    DETOURNEMENT_FONDS = ("DETOURNEMENT_FONDS", "Détournement de fonds")
    EMPLOI_FICTIF = ("EMPLOI_FICTIF", "Emploi fictif")
    FINANCEMENT_ILLEGAL = ("FINANCEMENT_ILLEGAL", "Financement illégal")
    HARCELEMENT_MORAL = ("HARCELEMENT_MORAL", "Harcèlement moral")
    MENACE = ("MENACE", "Menace")
    OUTRAGE = ("OUTRAGE", "Outrage")
    RECEL = ("RECEL", "Recel")


AffairCategoryFilter = Literal[
    "CORRUPTION",
    "FRAUDE_FISCALE",
    "BLANCHIMENT",
    "TRAFIC_INFLUENCE",
    "PRISE_ILLEGALE_INTERET",
    "VIOLENCE",
    "HARCELEMENT_SEXUEL",
    "DIFFAMATION",
]


# -----------------------------------------------------------------------------
# Fact-checks
# -----------------------------------------------------------------------------
class VerdictRating(LabeledEnum):
    TRUE = ("TRUE", "Vrai")
    MOSTLY_TRUE = ("MOSTLY_TRUE", "Plutôt vrai")
    HALF_TRUE = ("HALF_TRUE", "À moitié vrai")
    MISLEADING = ("MISLEADING", "Trompeur")
    OUT_OF_CONTEXT = ("OUT_OF_CONTEXT", "Hors contexte")
    MOSTLY_FALSE = ("MOSTLY_FALSE", "Plutôt faux")
    FALSE = ("FALSE", "Faux")
    UNVERIFIABLE = ("UNVERIFIABLE", "Invérifiable")


VerdictFilter = Literal[
    "TRUE",
    "MOSTLY_TRUE",
    "HALF_TRUE",
    "MISLEADING",
    "OUT_OF_CONTEXT",
    "MOSTLY_FALSE",
    "FALSE",
    "UNVERIFIABLE",
]


# -----------------------------------------------------------------------------
# Parties
# -----------------------------------------------------------------------------
UNCLASSIFIED_POSITION = "Non classé"


class PoliticalPosition(LabeledEnum):
    FAR_LEFT = ("FAR_LEFT", "Extrême gauche")
    LEFT = ("LEFT", "Gauche")
    CENTER_LEFT = ("CENTER_LEFT", "Centre-gauche")
    CENTER = ("CENTER", "Centre")
    CENTER_RIGHT = ("CENTER_RIGHT", "Centre-droit")
    RIGHT = ("RIGHT", "Droite")
    FAR_RIGHT = ("FAR_RIGHT", "Extrême droite")

    @classmethod
    def label_for(cls, code: Optional[str]) -> Optional[str]:
        if not code:
            return UNCLASSIFIED_POSITION
        return super().label_for(code)


PositionFilter = Literal["FAR_LEFT", "LEFT", "CENTER_LEFT", "CENTER", "CENTER_RIGHT", "RIGHT", "FAR_RIGHT"]


# -----------------------------------------------------------------------------
# Relation graph
# -----------------------------------------------------------------------------
class RelationType(LabeledEnum):
    SAME_PARTY = ("SAME_PARTY", "Même parti")
    SAME_GOVERNMENT = ("SAME_GOVERNMENT", "Même gouvernement")
    SAME_LEGISLATURE = ("SAME_LEGISLATURE", "Même législature")
    SAME_CONSTITUENCY = ("SAME_CONSTITUENCY", "Même département")
    SAME_EUROPEAN_GROUP = ("SAME_EUROPEAN_GROUP", "Même groupe européen")
    PARTY_HISTORY = ("PARTY_HISTORY", "Ancien même parti")


# -----------------------------------------------------------------------------
# Parliamentary votes
# -----------------------------------------------------------------------------
class VotePosition(LabeledEnum):
    POUR = ("POUR", "Pour")
    CONTRE = ("CONTRE", "Contre")
    ABSTENTION = ("ABSTENTION", "Abstention")
    NON_VOTANT = ("NON_VOTANT", "Non votant")
    ABSENT = ("ABSENT", "Absent")


class VoteResult(LabeledEnum):
    ADOPTED = ("ADOPTED", "Adopté")
    REJECTED = ("REJECTED", "Rejeté")


VoteResultFilter = Literal["ADOPTED", "REJECTED"]

ALL_CHAMBERS = "Toutes chambres"


class Chamber(LabeledEnum):
    AN = ("AN", "Assemblée nationale")
    SENAT = ("SENAT", "Sénat")

    @classmethod
    def label_for(cls, code: Optional[str]) -> Optional[str]:
        if not code:
            return ALL_CHAMBERS
        return super().label_for(code)


ChamberFilter = Literal["AN", "SENAT"]


# -----------------------------------------------------------------------------
# Elections
# -----------------------------------------------------------------------------
class ElectionType(LabeledEnum):
    PRESIDENTIELLE = ("PRESIDENTIELLE", "Présidentielle")
    LEGISLATIVES = ("LEGISLATIVES", "Législatives")
    SENATORIALES = ("SENATORIALES", "Sénatoriales")
    MUNICIPALES = ("MUNICIPALES", "Municipales")
    DEPARTEMENTALES = ("DEPARTEMENTALES", "Départementales")
    REGIONALES = ("REGIONALES", "Régionales")
    EUROPEENNES = ("EUROPEENNES", "Européennes")
    REFERENDUM = ("REFERENDUM", "Référendum")


ElectionTypeFilter = Literal[
    "PRESIDENTIELLE",
    "LEGISLATIVES",
    "SENATORIALES",
    "MUNICIPALES",
    "DEPARTEMENTALES",
    "REGIONALES",
    "EUROPEENNES",
    "REFERENDUM",
]


class ElectionStatus(LabeledEnum):
    UPCOMING = ("UPCOMING", "À venir")
    REGISTRATION = ("REGISTRATION", "Inscriptions ouvertes")
    CANDIDACIES = ("CANDIDACIES", "Dépôt des candidatures")
    CAMPAIGN = ("CAMPAIGN", "Campagne en cours")
    ROUND_1 = ("ROUND_1", "Premier tour")
    BETWEEN_ROUNDS = ("BETWEEN_ROUNDS", "Entre-deux-tours")
    ROUND_2 = ("ROUND_2", "Second tour")
    COMPLETED = ("COMPLETED", "Terminée")


ElectionStatusFilter = Literal[
    "UPCOMING",
    "REGISTRATION",
    "CANDIDACIES",
    "CAMPAIGN",
    "ROUND_1",
    "BETWEEN_ROUNDS",
    "ROUND_2",
    "COMPLETED",
]


# -----------------------------------------------------------------------------
# Department statistics
# -----------------------------------------------------------------------------
class DepartmentFilter(LabeledEnum):
    ALL = ("all", "Tous les élus")
    DEPUTES = ("deputes", "Députés")
    SENATEURS = ("senateurs", "Sénateurs")


DepartmentFilterCode = Literal["all", "deputes", "senateurs"]
