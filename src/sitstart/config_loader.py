"""Persist and load week snapshot files for the CLI."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from sitstart.models import GameContext, Player, PlayerProps, ScoringRules


@dataclass
class WeekSnapshot:
    roster: List[Player]
    scoring_rules: ScoringRules
    games: List[GameContext] = field(default_factory=list)
    props: Dict[str, PlayerProps] = field(default_factory=dict)
    slot_counts: Optional[Dict[str, int]] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "WeekSnapshot":
        if "scoring_rules" not in data:
            raise ValueError("snapshot is missing 'scoring_rules'")
        return cls(
            roster=[Player.model_validate(entry) for entry in data.get("roster", [])],
            scoring_rules=ScoringRules.from_mapping(data["scoring_rules"]),
            games=[GameContext.model_validate(entry) for entry in data.get("games", [])],
            props={name: PlayerProps.model_validate(entry) for name, entry in data.get("props", {}).items()},
            slot_counts=data.get("slot_counts"),
        )

    @classmethod
    def load(cls, path: Path) -> "WeekSnapshot":
        return cls.from_dict(json.loads(path.read_text(encoding="utf-8")))

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "roster": [player.model_dump(mode="json", exclude_none=True) for player in self.roster],
            "scoring_rules": self.scoring_rules.model_dump(),
            "games": [game.model_dump(exclude_none=True) for game in self.games],
            "props": {name: props.model_dump(exclude_none=True) for name, props in self.props.items()},
        }
        if self.slot_counts is not None:
            payload["slot_counts"] = self.slot_counts
        return payload

    def save(self, path: Path) -> None:
        path.write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")
