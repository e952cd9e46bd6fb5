import httpx
import pytest

from sitstart.api import create_app


SCORING = {
    "passYards": 0.04,
    "passTD": 4,
    "passInt": -2,
    "rushYards": 0.1,
    "rushTD": 6,
    "recYards": 0.1,
    "reception": 0.5,
    "recTD": 6,
    "fumble": -2,
    "twoPtConversion": 2,
}


def _payload(**overrides):
    payload = {
        "roster": [
            {"name": "Low", "position": "RB", "team": "KC", "slot": "FLEX"},
            {"name": "Mid", "position": "RB", "team": "KC", "slot": "RB"},
            {"name": "High", "position": "RB", "team": "KC", "slot": "BN"},
            {"name": "Resting", "position": "WR", "team": "SEA", "slot": "WR", "bye_week": 10},
        ],
        "scoring_rules": SCORING,
        "games": [{"home_team": "KC", "away_team": "LV", "spread": -3, "total": 44}],
        "props": {
            "Low": {"rush_yds": 100},
            "Mid": {"rush_yds": 150},
            "High": {"rush_yds": 200},
        },
    }
    payload.update(overrides)
    return payload


@pytest.mark.anyio
async def test_health_endpoint():
    transport = httpx.ASGITransport(app=create_app())
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


@pytest.mark.anyio
async def test_recommend_actual_lineup():
    transport = httpx.ASGITransport(app=create_app())
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.post("/recommend", json=_payload(mode="actual"))

    assert resp.status_code == 200
    body = resp.json()
    assert body["meta"]["scoring"] == "Half PPR"
    assert body["meta"]["scoring_summary"] == "passTD=4, INT=-2, reception=0.5"
    assert body["meta"]["mode"] == "actual"
    assert [p["name"] for p in body["starters"]] == ["Low", "Mid", "Resting"]
    assert [p["name"] for p in body["bench"]] == ["High"]
    resting = body["starters"][2]
    assert resting["tier"] == "BYE"
    assert resting["reasons"][0] == "BYE WEEK - DO NOT START"
    assert body["flex_options"] == [{"action": "swap", "out": "Low", "in": "High", "improvement": 2.4}]
    assert body["notes"] == ["1 FLEX swap(s) suggested - see flex_options"]


@pytest.mark.anyio
async def test_recommend_csv_export():
    transport = httpx.ASGITransport(app=create_app())
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.post("/recommend", params={"format": "csv"}, json=_payload(explain="min"))

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/csv")
    assert "attachment" in resp.headers["content-disposition"]
    lines = resp.text.strip().splitlines()
    assert lines[0] == "Name,Position,Team,Slot,Opponent,EFP,Score,Tier,Status,Bye"
    assert len(lines) == 5


@pytest.mark.anyio
async def test_recommend_rejects_incomplete_scoring():
    scoring = dict(SCORING)
    del scoring["recTD"]
    transport = httpx.ASGITransport(app=create_app())
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.post("/recommend", json=_payload(scoring_rules=scoring))

    assert resp.status_code == 400
    assert "recTD" in resp.json()["detail"]


@pytest.mark.anyio
async def test_recommend_accepts_empty_roster():
    transport = httpx.ASGITransport(app=create_app())
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.post("/recommend", json=_payload(roster=[]))

    assert resp.status_code == 200
    body = resp.json()
    assert body["starters"] == []
    assert body["bench"] == []
    assert body["flex_options"] == []
