"""Roster slot requirements for supported league formats."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping, Tuple

from sitstart.models import FLEX_POSITIONS, ScoringConfigError


BENCH_SLOTS: FrozenSet[str] = frozenset({"BN", "IR"})

# Multi-position slots keyed by every label the league collaborators use for them.
_FLEX_SLOT_POSITIONS: Dict[str, FrozenSet[str]] = {
    "FLEX": FLEX_POSITIONS,
    "W/R/T": FLEX_POSITIONS,
    "W/R": frozenset({"WR", "RB"}),
    "W/T": frozenset({"WR", "TE"}),
    "SUPERFLEX": frozenset({"QB"}) | FLEX_POSITIONS,
    "Q/W/R/T": frozenset({"QB"}) | FLEX_POSITIONS,
}


@dataclass(frozen=True)
class SlotRules:
    """Starter slot counts plus the positions each slot accepts."""

    slot_counts: Mapping[str, int]
    slot_positions: Mapping[str, FrozenSet[str]]

    @classmethod
    def from_counts(cls, counts: Mapping[str, int]) -> "SlotRules":
        starters: Dict[str, int] = {}
        for raw_slot, raw_count in counts.items():
            slot = raw_slot.strip().upper()
            try:
                count = int(raw_count)
            except (TypeError, ValueError):
                raise ScoringConfigError(f"slot {raw_slot!r} has non-integer count {raw_count!r}") from None
            if count < 0:
                raise ScoringConfigError(f"slot {raw_slot!r} has negative count {count}")
            if slot in BENCH_SLOTS:
                continue
            starters[slot] = starters.get(slot, 0) + count
        positions = {
            slot: _FLEX_SLOT_POSITIONS.get(slot, frozenset({slot})) for slot in starters
        }
        return cls(slot_counts=MappingProxyType(starters), slot_positions=MappingProxyType(positions))

    @property
    def flex_slots(self) -> Tuple[str, ...]:
        """Starter slots that accept more than one position, in declaration order."""

        return tuple(slot for slot, allowed in self.slot_positions.items() if len(allowed) > 1)

    @property
    def starter_count(self) -> int:
        return sum(self.slot_counts.values())

    def accepts(self, slot: str, position: str) -> bool:
        return position in self.slot_positions.get(slot, frozenset({slot}))


_LEAGUE_FORMATS: Dict[str, Mapping[str, int]] = {
    "STANDARD": {"QB": 1, "RB": 2, "WR": 2, "TE": 1, "FLEX": 1, "K": 1, "DEF": 1, "BN": 6},
    "THREE_WR": {"QB": 1, "RB": 2, "WR": 3, "TE": 1, "FLEX": 1, "K": 1, "DEF": 1, "BN": 6},
    "SUPERFLEX": {
        "QB": 1, "RB": 2, "WR": 2, "TE": 1, "FLEX": 1, "SUPERFLEX": 1, "K": 1, "DEF": 1, "BN": 6,
    },
}


def iter_formats() -> Iterable[str]:
    return _LEAGUE_FORMATS.keys()


def get_slot_rules(league_format: str = "STANDARD") -> SlotRules:
    """Fetch slot rules for a named league format, raising KeyError if missing."""

    key = league_format.upper()
    if key not in _LEAGUE_FORMATS:
        raise KeyError(f"No slot rules configured for format={league_format!r}")
    return SlotRules.from_counts(_LEAGUE_FORMATS[key])


DEFAULT_SLOT_COUNTS: Mapping[str, int] = MappingProxyType(dict(_LEAGUE_FORMATS["STANDARD"]))
DEFAULT_SLOT_RULES = SlotRules.from_counts(DEFAULT_SLOT_COUNTS)
