import pytest

from sitstart.models import GameContext, find_game_context


def test_implied_totals_split_total_by_spread():
    game = GameContext(home_team="KC", away_team="LV", spread=-7, total=48)

    totals = game.implied_totals
    assert totals is not None
    assert totals.home == pytest.approx(27.5)
    assert totals.away == pytest.approx(20.5)
    assert game.home_implied_total == pytest.approx(27.5)


def test_implied_totals_absent_without_lines():
    assert GameContext(home_team="KC", away_team="LV").implied_totals is None
    assert GameContext(home_team="KC", away_team="LV", spread=-3).home_implied_total is None


def test_pick_em_game_still_has_implied_totals():
    game = GameContext(home_team="KC", away_team="LV", spread=0, total=44)
    assert game.home_implied_total == pytest.approx(22.0)


def test_script_lean_is_team_relative():
    game = GameContext(home_team="KC", away_team="LV", spread=-6, total=46)

    assert game.script_lean("KC") == (False, True)
    assert game.script_lean("LV") == (True, False)


def test_script_lean_below_threshold():
    game = GameContext(home_team="KC", away_team="LV", spread=-3, total=46)
    assert game.script_lean("KC") == (False, False)
    assert game.script_lean("LV") == (False, False)


def test_script_lean_needs_spread_and_totals():
    assert GameContext(home_team="KC", away_team="LV", spread=-10).script_lean("KC") == (False, False)
    assert GameContext(home_team="KC", away_team="LV", spread=0, total=40).script_lean("KC") == (False, False)


def test_find_game_context_and_opponent():
    games = [
        GameContext(home_team="KC", away_team="LV"),
        GameContext(home_team="buf", away_team="mia"),
    ]

    game = find_game_context(games, "MIA")
    assert game is games[1]
    assert game.opponent_of("MIA") == "BUF"
    assert game.opponent_of("BUF") == "MIA"
    assert find_game_context(games, "SEA") is None
