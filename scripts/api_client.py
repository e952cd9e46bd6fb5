"""Lightweight REST client for the sitstart API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx


def main() -> None:
    parser = argparse.ArgumentParser(description="Request a start/sit recommendation from the sitstart API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("snapshot", type=Path, help="Week snapshot JSON (roster, scoring_rules, games, props)")
    parser.add_argument("--mode", choices=("optimal", "actual"), default="optimal")
    parser.add_argument("--explain", choices=("all", "min"), default="all")
    parser.add_argument("--csv", action="store_true", help="Request the CSV export instead of JSON")
    parser.add_argument("--export-path", type=Path, help="Destination path for exported CSV")
    args = parser.parse_args()

    try:
        payload = json.loads(args.snapshot.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid snapshot JSON: {exc}") from exc
    payload["mode"] = args.mode
    payload["explain"] = args.explain

    with httpx.Client(base_url=args.base_url) as client:
        resp = client.post("/recommend", json=payload, params={"format": "csv" if args.csv else "json"})
        if resp.status_code == 400:
            raise SystemExit(f"request rejected: {resp.json().get('detail')}")
        resp.raise_for_status()

        if args.csv:
            if args.export_path:
                args.export_path.write_text(resp.text)
                print(f"CSV export saved to {args.export_path}")
            else:
                print(resp.text)
            return

        body = resp.json()
        print("Meta:", json.dumps(body["meta"], indent=2))
        print(f"Received {len(body['starters'])} starters and {len(body['bench'])} bench players")
        for swap in body["flex_options"]:
            print(f"Swap: start {swap['in']} over {swap['out']} (+{swap['improvement']})")
        for note in body["notes"]:
            print(note)


if __name__ == "__main__":
    main()
