from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List

from .action import Action, ActionKind
from .meld import Meld, MeldKind
from .multiset import TileMultiset
from .tiles import Tile, format_tile


@dataclass
class Partition:
    runs: List[List[Tile]] = field(default_factory=list)
    groups: List[List[Tile]] = field(default_factory=list)

    def apply(self, action: Action) -> None:
        if action.kind == ActionKind.START_RUN:
            self.runs.append([action.tile])
        elif action.kind == ActionKind.START_GROUP:
            self.groups.append([action.tile])
        elif action.kind == ActionKind.EXTEND_RUN:
            self.runs[action.index].append(action.tile)
        elif action.kind == ActionKind.EXTEND_GROUP:
            self.groups[action.index].append(action.tile)
        else:
            raise ValueError(f"Unknown action kind {action.kind}")

    def undo(self, action: Action) -> None:
        """Reverse ``apply(action)``; only valid for the most recent action."""
        if action.kind == ActionKind.START_RUN:
            self.runs.pop()
        elif action.kind == ActionKind.START_GROUP:
            self.groups.pop()
        elif action.kind == ActionKind.EXTEND_RUN:
            self.runs[action.index].pop()
        elif action.kind == ActionKind.EXTEND_GROUP:
            self.groups[action.index].pop()
        else:
            raise ValueError(f"Unknown action kind {action.kind}")

    def copy(self) -> "Partition":
        return Partition(
            runs=[list(run) for run in self.runs],
            groups=[list(group) for group in self.groups],
        )

    def is_empty(self) -> bool:
        return not self.runs and not self.groups

    def melds(self) -> Iterable[Meld]:
        for run in self.runs:
            yield Meld(MeldKind.RUN, run)
        for group in self.groups:
            yield Meld(MeldKind.GROUP, group)

    def all_tiles(self) -> Iterable[Tile]:
        for meld in self.melds():
            yield from meld.tiles

    def multiset(self) -> TileMultiset:
        return TileMultiset.from_tiles(self.all_tiles())

    def tile_count(self) -> int:
        return sum(len(run) for run in self.runs) + sum(len(group) for group in self.groups)


def format_partition(partition: Partition) -> List[str]:
    lines: List[str] = []
    counters = {MeldKind.RUN: 0, MeldKind.GROUP: 0}
    for meld in partition.melds():
        canon = meld.canonicalize()
        label = f"{meld.kind.value.title()} {counters[meld.kind]}"
        lines.append(f"{label}: " + " ".join(format_tile(t) for t in canon.tiles))
        counters[meld.kind] += 1
    return lines
