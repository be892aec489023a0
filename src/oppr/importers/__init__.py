"""Importers for external player data."""

from __future__ import annotations

from oppr.importers.csv_players import ParsedPlayer, parse_player_csv

__all__ = ["ParsedPlayer", "parse_player_csv"]
