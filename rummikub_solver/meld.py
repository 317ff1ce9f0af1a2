from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

from .rules import Ruleset
from .tiles import Tile


class MeldKind(str, Enum):
    RUN = "RUN"
    GROUP = "GROUP"


def _contiguous_blocks(presence: List[int]) -> List[int]:
    blocks: List[int] = []
    length = 0
    for present in presence:
        if present:
            length += 1
        elif length:
            blocks.append(length)
            length = 0
    if length:
        blocks.append(length)
    return blocks


@dataclass
class Meld:
    kind: MeldKind
    tiles: List[Tile]

    def canonicalize(self) -> "Meld":
        sorted_tiles = sorted(
            self.tiles,
            key=lambda t: (
                t.denomination if self.kind == MeldKind.RUN else t.color,
                t.color if self.kind == MeldKind.RUN else t.denomination,
            ),
        )
        return Meld(self.kind, sorted_tiles)

    def is_valid(self, ruleset: Ruleset | None = None) -> Tuple[bool, str]:
        ruleset = ruleset or Ruleset()
        if self.kind == MeldKind.RUN:
            return self._check_run(ruleset)
        if self.kind == MeldKind.GROUP:
            return self._check_group(ruleset)
        return False, "unknown meld kind"

    def _check_run(self, ruleset: Ruleset) -> Tuple[bool, str]:
        if len(self.tiles) < ruleset.min_run_length:
            return False, "run too short"
        # one slot per denomination, slot 0 is denomination 1
        counts = [0] * ruleset.values
        color = self.tiles[0].color
        for tile in self.tiles:
            if tile.color != color:
                return False, "run must have same color"
            if tile.denomination > ruleset.values:
                return False, "value outside ruleset"
            counts[tile.denomination - 1] += 1
        if any(c > 1 for c in counts):
            return False, "run must not duplicate value"
        if any(block < ruleset.min_run_length for block in _contiguous_blocks(counts)):
            return False, "run must be consecutive"
        return True, ""

    def _check_group(self, ruleset: Ruleset) -> Tuple[bool, str]:
        if not ruleset.min_group_size <= len(self.tiles) <= ruleset.max_group_size:
            return False, f"group must have length {ruleset.min_group_size} to {ruleset.max_group_size}"
        if any(t.denomination > ruleset.values for t in self.tiles):
            return False, "value outside ruleset"
        if len({t.denomination for t in self.tiles}) != 1:
            return False, "group must share value"
        if len({t.color for t in self.tiles}) != len(self.tiles):
            return False, "group colors must be distinct"
        return True, ""
