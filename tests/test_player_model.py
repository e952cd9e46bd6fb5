import pytest
from pydantic import ValidationError

from sitstart.models import (
    InjuryStatus,
    Player,
    PlayerProps,
    ScoringConfigError,
    ScoringRules,
    Tier,
    parse_injury_status,
)
from sitstart.models import ScoredPlayer


def _rules(**overrides) -> dict:
    data = {
        "passYards": 0.04,
        "passTD": 4,
        "passInt": -2,
        "rushYards": 0.1,
        "rushTD": 6,
        "recYards": 0.1,
        "reception": 1,
        "recTD": 6,
        "fumble": -2,
        "twoPtConversion": 2,
    }
    data.update(overrides)
    return data


def test_player_is_frozen():
    player = Player(name="Test Player", position="RB", team="kc", slot="rb")

    assert player.team == "KC"
    assert player.slot == "RB"

    with pytest.raises((TypeError, ValidationError)):
        player.name = "Other"  # type: ignore[misc]


def test_player_normalizes_defense_and_status_codes():
    player = Player(name="Chiefs", position="DST", team="KC", status="Questionable", bye_week="0")

    assert player.position == "DEF"
    assert player.status is InjuryStatus.QUESTIONABLE
    assert player.bye_week is None


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Q", InjuryStatus.QUESTIONABLE),
        ("d", InjuryStatus.DOUBTFUL),
        ("Out", InjuryStatus.OUT),
        ("IR", InjuryStatus.INJURED_RESERVE),
        ("PUP-R", InjuryStatus.PUP),
        ("SUSP", InjuryStatus.SUSPENDED),
        ("NA", None),
        ("", None),
        (None, None),
    ],
)
def test_parse_injury_status(raw, expected):
    assert parse_injury_status(raw) is expected


def test_props_empty_detection_ignores_unknown_markets():
    assert PlayerProps().is_empty
    assert PlayerProps.model_validate({"player_sacks": 0.5}).is_empty
    assert not PlayerProps(rush_yds=55.5).is_empty


def test_props_reject_out_of_range_probability():
    with pytest.raises(ValidationError):
        PlayerProps(anytime_td_prob=1.4)


def test_scoring_rules_accept_camel_and_snake_case():
    camel = ScoringRules.from_mapping(_rules())
    snake = ScoringRules(
        pass_yards=0.04,
        pass_td=4,
        pass_int=-2,
        rush_yards=0.1,
        rush_td=6,
        rec_yards=0.1,
        reception=1,
        rec_td=6,
        fumble=-2,
        two_pt_conversion=2,
    )
    assert camel == snake


def test_scoring_rules_missing_field_fails_fast():
    data = _rules()
    del data["recTD"]
    del data["fumble"]

    with pytest.raises(ScoringConfigError) as excinfo:
        ScoringRules.from_mapping(data)

    assert "recTD" in str(excinfo.value)
    assert "fumble" in str(excinfo.value)


def test_scoring_rules_reject_partial_seven_field_record():
    partial = {
        "passYards": 0.04,
        "passTD": 4,
        "passInt": -2,
        "rushYards": 0,
        "recYards": 0,
        "reception": 1,
        "recTD": 6,
    }

    with pytest.raises(ScoringConfigError, match="fumble, rushTD, twoPtConversion"):
        ScoringRules.from_mapping(partial)


def test_scoring_rules_reject_non_numeric_values():
    with pytest.raises(ScoringConfigError):
        ScoringRules.from_mapping(_rules(passTD="lots"))


def test_touchdown_value_splits_pass_catchers():
    rules = ScoringRules.from_mapping(_rules(rushTD=6, recTD=7))

    assert rules.touchdown_value("WR") == 7
    assert rules.touchdown_value("TE") == 7
    assert rules.touchdown_value("RB") == 6
    assert rules.touchdown_value("QB") == 6


@pytest.mark.parametrize(
    "reception, label",
    [(0, "Standard"), (0.5, "Half PPR"), (1, "Full PPR"), (0.25, "0.25 PPR")],
)
def test_ppr_label(reception, label):
    assert ScoringRules.from_mapping(_rules(reception=reception)).ppr_label == label


def test_scoring_summary():
    rules = ScoringRules.from_mapping(_rules(passTD=6, reception=0.5))
    assert rules.summary() == "passTD=6, INT=-2, reception=0.5"


def test_scored_player_with_slot_returns_copy():
    scored = ScoredPlayer(player=Player(name="A", position="WR", team="KC", slot="BN"), tier=Tier.B)

    moved = scored.with_slot("FLEX")

    assert moved.slot == "FLEX"
    assert scored.slot == "BN"
    assert scored.opponent is None
