"""Command-line interface for weekly start/sit recommendations."""

from __future__ import annotations

import argparse
import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Sequence

from sitstart.config import get_slot_rules, iter_formats, tables_from_env
from sitstart.config_loader import WeekSnapshot
from sitstart.export import export_players_to_csv, format_players, format_swap
from sitstart.pipeline import build_recommendation


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Rank a fantasy roster for one week")
    parser.add_argument("snapshot", type=Path, help="Path to week snapshot JSON")
    parser.add_argument(
        "--mode",
        choices=("optimal", "actual"),
        default="optimal",
        help="Compute the best lineup or keep the roster's current slots",
    )
    parser.add_argument(
        "--league-format",
        choices=sorted(iter_formats()),
        default=None,
        help="Named slot layout used when the snapshot has no slot_counts",
    )
    parser.add_argument("--format", choices=("json", "csv"), default="json", help="Output format")
    parser.add_argument("--explain", choices=("all", "min"), default="all", help="Include reasons")
    parser.add_argument("--output", type=Path, default=None, help="Write output here instead of stdout")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, ...)")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    snapshot = WeekSnapshot.load(args.snapshot)
    slot_rules = snapshot.slot_counts
    if slot_rules is None and args.league_format:
        slot_rules = get_slot_rules(args.league_format)

    recommendation = build_recommendation(
        snapshot.roster,
        snapshot.scoring_rules,
        snapshot.games,
        snapshot.props,
        slot_rules=slot_rules,
        mode=args.mode,
        explain=args.explain,
        tables=tables_from_env(),
    )
    lineup = recommendation.lineup

    if args.format == "csv":
        text = export_players_to_csv([*lineup.starters, *lineup.bench])
    else:
        rules = snapshot.scoring_rules
        payload = {
            "meta": {
                "scoring": rules.ppr_label,
                "scoring_summary": rules.summary(),
                "mode": args.mode,
                "generated_at": datetime.now(timezone.utc).isoformat(),
            },
            "starters": [p.model_dump() for p in format_players(lineup.starters)],
            "bench": [p.model_dump() for p in format_players(lineup.bench)],
            "flex_options": [format_swap(s).model_dump(by_alias=True) for s in recommendation.flex_options],
            "notes": list(recommendation.notes),
        }
        text = json.dumps(payload, indent=2)

    if args.output:
        args.output.write_text(text, encoding="utf-8")
        print(f"Wrote {len(lineup)} players to {args.output}")
        for note in recommendation.notes:
            print(note)
    else:
        print(text)


if __name__ == "__main__":
    main()
