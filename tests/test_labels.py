import pytest
from typing import get_args

from core.labels import (
    AffairCategory,
    AffairCategoryFilter,
    AffairStatus,
    AffairStatusFilter,
    Chamber,
    DepartmentFilter,
    ElectionStatus,
    ElectionType,
    MandateListFilter,
    MandateType,
    PoliticalPosition,
    PoliticianMandateFilter,
    RelationType,
    SearchMandateFilter,
    VerdictFilter,
    VerdictRating,
    VotePosition,
    VoteResult,
)


@pytest.mark.parametrize(
    "enum, code, label",
    [
        (MandateType, "DEPUTE", "Député(e)"),
        (MandateType, "PRESIDENT", "Président(e) de la République"),
        (MandateType, "PRESIDENT_REPUBLIQUE", "Président(e) de la République"),
        (AffairStatus, "MISE_EN_EXAMEN", "Mise en examen"),
        (AffairCategory, "CORRUPTION", "Corruption"),
        (AffairCategory, "PRISE_ILLEGALE_INTERET", "Prise illégale d'intérêts"),
        (VerdictRating, "FALSE", "Faux"),
        (VerdictRating, "HALF_TRUE", "À moitié vrai"),
        (PoliticalPosition, "FAR_RIGHT", "Extrême droite"),
        (RelationType, "SAME_CONSTITUENCY", "Même département"),
        (VotePosition, "NON_VOTANT", "Non votant"),
        (VoteResult, "REJECTED", "Rejeté"),
        (Chamber, "SENAT", "Sénat"),
        (ElectionType, "EUROPEENNES", "Européennes"),
        (ElectionStatus, "BETWEEN_ROUNDS", "Entre-deux-tours"),
        (DepartmentFilter, "deputes", "Députés"),
    ],
)
def test_known_codes_have_french_labels(enum, code, label):
    assert enum.label_for(code) == label


@pytest.mark.parametrize("enum", [MandateType, AffairStatus, AffairCategory, VerdictRating, RelationType])
def test_unknown_codes_fall_back_to_the_raw_code(enum):
    assert enum.label_for("SOMETHING_NEW") == "SOMETHING_NEW"


def test_absent_position_and_chamber_have_explicit_labels():
    assert PoliticalPosition.label_for(None) == "Non classé"
    assert Chamber.label_for(None) == "Toutes chambres"


def test_presumption_applies_only_to_unresolved_statuses():
    unresolved = {"ENQUETE_PRELIMINAIRE", "MISE_EN_EXAMEN", "PROCES_EN_COURS", "APPEL_EN_COURS"}
    for status in AffairStatus:
        assert AffairStatus.needs_presumption(status.value) is (status.value in unresolved)
    assert AffairStatus.needs_presumption(None) is False


@pytest.mark.parametrize(
    "filter_alias, enum",
    [
        (PoliticianMandateFilter, MandateType),
        (SearchMandateFilter, MandateType),
        (MandateListFilter, MandateType),
        (AffairStatusFilter, AffairStatus),
        (AffairCategoryFilter, AffairCategory),
        (VerdictFilter, VerdictRating),
    ],
)
def test_every_filter_code_has_a_label(filter_alias, enum):
    codes = {member.value for member in enum}
    assert set(get_args(filter_alias)) <= codes


def test_members_compare_equal_to_their_codes():
    assert AffairStatus.MISE_EN_EXAMEN == "MISE_EN_EXAMEN"
    assert AffairStatus("RELAXE").label == "Relaxe"
