"""Formatted output records and tabular export."""

from .records import FlexSwapOutput, PlayerOutput, format_player, format_players, format_swap
from .table import CSV_HEADERS, export_players_to_csv

__all__ = [
    "CSV_HEADERS",
    "FlexSwapOutput",
    "PlayerOutput",
    "export_players_to_csv",
    "format_player",
    "format_players",
    "format_swap",
]
