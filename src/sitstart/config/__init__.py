"""Configuration helpers for scoring tables and roster slots."""

from .roster import (
    BENCH_SLOTS,
    DEFAULT_SLOT_COUNTS,
    DEFAULT_SLOT_RULES,
    SlotRules,
    get_slot_rules,
    iter_formats,
)
from .tables import DEFAULT_TABLES, ScoringTables, tables_from_env

__all__ = [
    "BENCH_SLOTS",
    "DEFAULT_SLOT_COUNTS",
    "DEFAULT_SLOT_RULES",
    "DEFAULT_TABLES",
    "ScoringTables",
    "SlotRules",
    "get_slot_rules",
    "iter_formats",
    "tables_from_env",
]
