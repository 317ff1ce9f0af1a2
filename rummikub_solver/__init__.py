"""Rummikub hand solver package."""

from .rules import Ruleset
from .tiles import Color, InvalidTile, Tile, format_tile, parse_tile
from .action import Action, ActionKind
from .partition import Partition, format_partition
from .candidates import generate_actions
from .validator import is_legal_partition
from .engine import BacktrackingSearch, SearchLimitExceeded, SearchStats, solve_tiles
from .hand import Hand

__all__ = [
    "Ruleset",
    "Color",
    "InvalidTile",
    "Tile",
    "format_tile",
    "parse_tile",
    "Action",
    "ActionKind",
    "Partition",
    "format_partition",
    "generate_actions",
    "is_legal_partition",
    "BacktrackingSearch",
    "SearchLimitExceeded",
    "SearchStats",
    "solve_tiles",
    "Hand",
]
