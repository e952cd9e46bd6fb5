from sitstart.models import EMPTY_PROPS, GameContext, Player, PlayerProps
from sitstart.scoring import generate_reasons
from sitstart.scoring.reasons import summarize_props


def test_reasons_follow_priority_and_cap():
    game = GameContext(home_team="KC", away_team="LV", spread=-7, total=48)
    player = Player(name="Receiver", position="WR", team="LV", status="Q")
    props = PlayerProps(rec_yds=65.5, receptions=5.5, anytime_td_prob=0.4, two_plus_td_prob=0.2)

    reasons = generate_reasons(player, props, game)

    # the injury note is fifth and falls off the end
    assert reasons == (
        "Props: 65.5 rec yds, 5.5 rec, 40% TD, 20% 2+ TD",
        "High implied total (27.5)",
        "Pass-heavy game script (underdog)",
        "High ceiling (20% 2+ TD)",
    )


def test_run_script_reason_uses_player_team():
    game = GameContext(home_team="KC", away_team="LV", spread=-7, total=40)
    favorite = Player(name="Back", position="RB", team="KC", status="D")
    underdog = Player(name="Other Back", position="RB", team="LV")
    props = PlayerProps(rush_yds=70)

    assert generate_reasons(favorite, props, game) == (
        "Props: 70 rush yds",
        "Run-heavy game script (favorite)",
        "Injury concern (Doubtful)",
    )
    assert generate_reasons(underdog, props, game) == ("Props: 70 rush yds",)


def test_bye_week_reasons():
    player = Player(name="Resting", position="TE", team="SEA", bye_week=9)

    reasons = generate_reasons(player, EMPTY_PROPS, None, is_bye_week=True)

    assert reasons == ("BYE WEEK - DO NOT START", "No props available (using fallback estimate)")


def test_low_total_pick_em_has_no_script_reason():
    game = GameContext(home_team="KC", away_team="LV", spread=0, total=36)
    player = Player(name="Back", position="RB", team="KC", status="O")

    reasons = generate_reasons(player, EMPTY_PROPS, game)

    assert reasons == (
        "Low implied total (18.0)",
        "OUT for this game",
        "No props available (using fallback estimate)",
    )


def test_ceiling_reason_requires_threshold():
    game = GameContext(home_team="KC", away_team="LV")
    player = Player(name="Tight End", position="TE", team="KC")

    reasons = generate_reasons(player, PlayerProps(two_plus_td_prob=0.15), game)

    assert reasons == ("Props: 15% 2+ TD",)


def test_summarize_props_skips_missing_fields():
    assert summarize_props(PlayerProps(pass_yds=249.5, rush_yds=20.5)) == "Props: 249.5 pass yds, 20.5 rush yds"
    assert summarize_props(PlayerProps()) is None
