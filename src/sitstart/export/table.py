"""CSV export of a scored lineup."""

from __future__ import annotations

import csv
from io import StringIO
from typing import Sequence

from sitstart.models import ScoredPlayer

from .records import round_half_up


CSV_HEADERS = ("Name", "Position", "Team", "Slot", "Opponent", "EFP", "Score", "Tier", "Status", "Bye")


def _row(player: ScoredPlayer) -> list[str]:
    status = player.player.status
    bye_week = player.player.bye_week
    return [
        player.name,
        player.position,
        player.team,
        player.slot,
        player.opponent or "",
        f"{round_half_up(player.efp):.1f}",
        f"{round_half_up(player.score):.1f}",
        player.tier.value,
        status.value if status is not None else "",
        str(bye_week) if bye_week else "",
    ]


def export_players_to_csv(players: Sequence[ScoredPlayer]) -> str:
    """One row per player under the fixed header; numbers to one decimal."""

    buffer = StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for player in players:
        writer.writerow(_row(player))
    return buffer.getvalue()


__all__ = ["CSV_HEADERS", "export_players_to_csv"]
