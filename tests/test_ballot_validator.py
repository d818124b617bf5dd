import pytest

from ballot import (
    MAX_PREFERENCES,
    BallotSelection,
    ColumnSelection,
    VoteStatus,
    validate_ballot,
    validate_column,
)
from ballot.offices import PREFERENTIAL_OFFICES
from ballot.validator import DUPLICATE_REASON, INVALID_NUMBER_REASON
from roster import OfficeType


def test_blank_ballot():
    classification = validate_ballot(BallotSelection())

    assert classification.status is VoteStatus.BLANK
    assert classification.columns == {}
    assert len(classification.reasons) == 1
    assert "BLANCO" in classification.summary
    assert "No has seleccionado ninguna opción" in classification.summary


def test_duplicate_preference_voids_only_that_column():
    selection = BallotSelection(
        presidential_ticket=7,
        columns={OfficeType.NATIONAL_SENATOR: ColumnSelection(3, [12, 12])},
    )

    classification = validate_ballot(selection)

    assert classification.status is VoteStatus.NULL
    senate = classification.columns[OfficeType.NATIONAL_SENATOR]
    assert senate.status is VoteStatus.NULL
    assert senate.reason == DUPLICATE_REASON
    assert OfficeType.PRESIDENTIAL_TICKET not in classification.columns
    assert classification.reasons == [f"Senadores Nacionales: {DUPLICATE_REASON}"]
    assert "Senadores Nacionales" in classification.summary
    assert DUPLICATE_REASON in classification.summary


def test_too_many_preferences_cites_count_and_maximum():
    selection = BallotSelection(columns={OfficeType.DEPUTY: ColumnSelection(5, [4, 9, 1])})

    classification = validate_ballot(selection)

    assert classification.status is VoteStatus.NULL
    deputy = classification.columns[OfficeType.DEPUTY]
    assert deputy.status is VoteStatus.NULL
    assert deputy.reason == "Se marcaron 3 preferenciales pero el máximo permitido es 2"
    assert classification.null_offices() == [OfficeType.DEPUTY]


def test_party_only_regional_senate_is_valid():
    selection = BallotSelection(columns={OfficeType.REGIONAL_SENATOR: ColumnSelection(9, [])})

    classification = validate_ballot(selection)

    assert classification.status is VoteStatus.VALID
    assert classification.columns == {
        OfficeType.REGIONAL_SENATOR: validate_column(ColumnSelection(9, []), 1)
    }
    assert classification.reasons == []
    assert "Marcaste 1 columna(s): Senadores Regionales." in classification.summary


def test_presidential_only_ballot_is_valid():
    classification = validate_ballot(BallotSelection(presidential_ticket=1366))

    assert classification.status is VoteStatus.VALID
    assert classification.columns == {}
    assert "Fórmula Presidencial" in classification.summary


def test_valid_summary_lists_every_marked_column():
    selection = BallotSelection(
        presidential_ticket=1,
        columns={
            OfficeType.ANDEAN_PARLIAMENT: ColumnSelection(2, [1]),
            OfficeType.NATIONAL_SENATOR: ColumnSelection(3, [1, 2]),
        },
    )

    classification = validate_ballot(selection)

    assert classification.status is VoteStatus.VALID
    assert (
        "Marcaste 3 columna(s): Fórmula Presidencial, Senadores Nacionales, Parlamento Andino."
        in classification.summary
    )


def test_null_column_does_not_propagate():
    selection = BallotSelection(
        presidential_ticket=2,
        columns={
            OfficeType.NATIONAL_SENATOR: ColumnSelection(3, [1, 4]),
            OfficeType.REGIONAL_SENATOR: ColumnSelection(3, [2]),
            OfficeType.DEPUTY: ColumnSelection(3, [0]),
            OfficeType.ANDEAN_PARLIAMENT: ColumnSelection(8, []),
        },
    )

    classification = validate_ballot(selection)

    assert classification.status is VoteStatus.NULL
    assert classification.null_offices() == [OfficeType.DEPUTY]
    for office in (OfficeType.NATIONAL_SENATOR, OfficeType.REGIONAL_SENATOR, OfficeType.ANDEAN_PARLIAMENT):
        assert classification.columns[office].status is VoteStatus.VALID
        assert classification.columns[office].reason is None
    assert "1 columna(s) NULA(S): Diputados" in classification.summary


def test_unmarked_columns_are_absent():
    selection = BallotSelection(columns={OfficeType.DEPUTY: ColumnSelection(3, [1])})

    classification = validate_ballot(selection)

    assert list(classification.columns) == [OfficeType.DEPUTY]


@pytest.mark.parametrize("maximum", [0, 1, 2])
def test_preferences_are_optional_for_any_maximum(maximum):
    result = validate_column(ColumnSelection(1, []), maximum)

    assert result.status is VoteStatus.VALID


@pytest.mark.parametrize("office", PREFERENTIAL_OFFICES)
def test_maximum_is_enforced_per_column(office):
    maximum = MAX_PREFERENCES[office]
    exact = list(range(1, maximum + 1))
    over = list(range(1, maximum + 2))

    assert validate_ballot(BallotSelection(columns={office: ColumnSelection(1, exact)})).status is VoteStatus.VALID
    classification = validate_ballot(BallotSelection(columns={office: ColumnSelection(1, over)}))
    assert classification.columns[office].status is VoteStatus.NULL
    assert str(maximum) in classification.columns[office].reason


@pytest.mark.parametrize("office", [o for o in PREFERENTIAL_OFFICES if MAX_PREFERENCES[o] >= 2])
def test_duplicate_within_maximum_is_null(office):
    classification = validate_ballot(BallotSelection(columns={office: ColumnSelection(1, [5, 5])}))

    assert classification.columns[office].reason == DUPLICATE_REASON


@pytest.mark.parametrize("preferences", [[0], [-3], [2, -1]])
def test_non_positive_numbers_are_invalid(preferences):
    result = validate_column(ColumnSelection(1, preferences), 2)

    assert result.status is VoteStatus.NULL
    assert result.reason == INVALID_NUMBER_REASON


def test_first_matching_rule_is_reported():
    assert validate_column(ColumnSelection(1, [0, 0, 0]), 2).reason == DUPLICATE_REASON
    assert validate_column(ColumnSelection(1, [0, 1, 2]), 2).reason.startswith("Se marcaron 3")


def test_validation_is_idempotent_and_pure():
    selection = BallotSelection(
        presidential_ticket=7,
        columns={
            OfficeType.NATIONAL_SENATOR: ColumnSelection(3, [12, 12]),
            OfficeType.DEPUTY: ColumnSelection(4, [1]),
        },
    )
    before = repr(selection)

    first = validate_ballot(selection)
    second = validate_ballot(selection)

    assert first == second
    assert first is not second
    assert repr(selection) == before
    assert selection.changes == 0
