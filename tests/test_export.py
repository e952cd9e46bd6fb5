import pytest

from sitstart.export import CSV_HEADERS, export_players_to_csv, format_player, format_swap
from sitstart.export.records import round_half_up
from sitstart.models import FlexSwapSuggestion, GameContext, Player, ScoredPlayer, Tier


GAME = GameContext(home_team="KC", away_team="LV", spread=-3, total=45)


def _active() -> ScoredPlayer:
    return ScoredPlayer(
        player=Player(name="Runner, Jr.", position="RB", team="LV", slot="FLEX", status="Q", bye_week=8),
        context=GAME,
        efp=12.345,
        score=0.666,
        tier=Tier.A,
        reasons=("Props: 70 rush yds",),
    )


def _resting() -> ScoredPlayer:
    return ScoredPlayer(
        player=Player(name="Resting", position="TE", team="SEA"),
        is_bye_week=True,
    )


def test_csv_has_fixed_header_and_one_row_per_player():
    text = export_players_to_csv([_active(), _resting()])

    lines = text.splitlines()
    assert lines[0] == ",".join(CSV_HEADERS)
    assert lines[1] == '"Runner, Jr.",RB,LV,FLEX,KC,12.3,0.7,A,Q,8'
    assert lines[2] == "Resting,TE,SEA,BN,,0.0,0.0,BYE,,"
    assert len(lines) == 3


def test_csv_with_no_players_is_header_only():
    assert export_players_to_csv([]) == ",".join(CSV_HEADERS) + "\n"


def test_format_player_rounds_and_flattens():
    output = format_player(_active())

    assert output.efp == 12.3
    assert output.score == 0.7
    assert output.opponent == "KC"
    assert output.tier == "A"
    assert output.status == "Q"
    assert output.reasons == ["Props: 70 rush yds"]


def test_format_swap_uses_short_keys():
    swap = FlexSwapSuggestion(out_name="Starter", in_name="Bench", improvement=1.26)

    dumped = format_swap(swap).model_dump(by_alias=True)

    assert dumped == {"action": "swap", "out": "Starter", "in": "Bench", "improvement": 1.3}


@pytest.mark.parametrize("value, expected", [(2.25, 2.3), (0.25, 0.3), (-0.25, -0.3), (12.345, 12.3), (1.04, 1.0)])
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


def test_exact_halves_round_up_in_records_and_csv():
    player = ScoredPlayer(
        player=Player(name="Half", position="WR", team="KC", slot="WR"),
        context=GAME,
        efp=2.25,
        score=0.25,
        tier=Tier.B,
    )

    output = format_player(player)
    row = export_players_to_csv([player]).splitlines()[1]

    assert (output.efp, output.score) == (2.3, 0.3)
    assert row.split(",")[5:7] == ["2.3", "0.3"]
