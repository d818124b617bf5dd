import pytest

from ballot import THRESHOLD, VOTING_RULES, alliance_threshold, column_config
from roster import OfficeType


@pytest.mark.parametrize("members, expected", [(0, 5), (1, 5), (2, 6), (4, 8)])
def test_alliance_threshold_adds_one_point_per_extra_party(members, expected):
    assert alliance_threshold(members) == expected


def test_voting_rules_describe_threshold():
    assert VOTING_RULES["valla"]["porcentaje"] == THRESHOLD.percentage == 5
    assert VOTING_RULES["valla"]["minimosDiputados"] == 7
    assert VOTING_RULES["valla"]["minimosSenadores"] == 3
    assert any("Repetir" in rule for rule in VOTING_RULES["nulo"])


def test_column_config_lookup():
    assert column_config("PARLAMENTO_ANDINO").title == "Parlamento Andino"
    assert column_config(OfficeType.REGIONAL_SENATOR).max_preferences == 1
    with pytest.raises(ValueError):
        column_config("ALCALDE")
