from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .tiles import Tile


class ActionKind(str, Enum):
    START_RUN = "START_RUN"
    START_GROUP = "START_GROUP"
    EXTEND_RUN = "EXTEND_RUN"
    EXTEND_GROUP = "EXTEND_GROUP"


@dataclass(frozen=True)
class Action:
    kind: ActionKind
    tile: Tile
    index: Optional[int] = None

    @staticmethod
    def start_run(tile: Tile) -> "Action":
        return Action(ActionKind.START_RUN, tile)

    @staticmethod
    def start_group(tile: Tile) -> "Action":
        return Action(ActionKind.START_GROUP, tile)

    @staticmethod
    def extend_run(tile: Tile, index: int) -> "Action":
        return Action(ActionKind.EXTEND_RUN, tile, index)

    @staticmethod
    def extend_group(tile: Tile, index: int) -> "Action":
        return Action(ActionKind.EXTEND_GROUP, tile, index)
