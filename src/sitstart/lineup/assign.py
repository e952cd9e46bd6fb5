"""Partition a scored roster into starters and bench."""

from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Optional, Sequence, Union

from sitstart.config import BENCH_SLOTS, SlotRules
from sitstart.models import Lineup, ScoredPlayer


logger = logging.getLogger(__name__)

BENCH_LABEL = "BN"


def lineup_from_actual(players: Sequence[ScoredPlayer]) -> Lineup:
    """Respect the externally supplied slots: BN/IR sit, everything else starts."""

    starters = tuple(player for player in players if player.slot not in BENCH_SLOTS)
    bench = tuple(player for player in players if player.slot in BENCH_SLOTS)
    return Lineup(starters=starters, bench=bench)


def _open_slot(
    player: ScoredPlayer,
    remaining: Mapping[str, int],
    rules: SlotRules,
) -> Optional[str]:
    position = player.position
    if remaining.get(position, 0) > 0:
        return position
    for slot in rules.flex_slots:
        if remaining.get(slot, 0) > 0 and rules.accepts(slot, position):
            return slot
    return None


def fill_lineup(
    players: Sequence[ScoredPlayer],
    slot_rules: Union[SlotRules, Mapping[str, int]],
) -> Lineup:
    """Greedily start the highest composite scores.

    Each player takes their own position slot when it has room, otherwise the
    first multi-position slot (FLEX and friends) that accepts them, otherwise
    the bench. Bye-week players always sit. Ties keep input order.
    """

    rules = slot_rules if isinstance(slot_rules, SlotRules) else SlotRules.from_counts(slot_rules)
    remaining: Dict[str, int] = dict(rules.slot_counts)

    starters: List[ScoredPlayer] = []
    bench: List[ScoredPlayer] = []
    for player in sorted(players, key=lambda p: p.score, reverse=True):
        slot = None if player.is_bye_week else _open_slot(player, remaining, rules)
        if slot is None:
            bench.append(player.with_slot(BENCH_LABEL))
            continue
        remaining[slot] -= 1
        starters.append(player.with_slot(slot))

    unfilled = {slot: count for slot, count in remaining.items() if count > 0}
    if unfilled:
        logger.info("Lineup has unfilled slots: %s", unfilled)
    return Lineup(starters=tuple(starters), bench=tuple(bench))


__all__ = ["BENCH_LABEL", "fill_lineup", "lineup_from_actual"]
