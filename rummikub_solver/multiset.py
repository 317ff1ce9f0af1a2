from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence

from .tiles import MAX_DENOMINATION, Color, Tile

MULTISET_SIZE = len(Color) * MAX_DENOMINATION


def _validate_counts(counts: Sequence[int]) -> None:
    if len(counts) != MULTISET_SIZE:
        raise ValueError(f"multiset length must be {MULTISET_SIZE}")
    if any(c < 0 for c in counts):
        raise ValueError("multiset counts must be non-negative")


@dataclass
class TileMultiset:
    counts: List[int]

    def __post_init__(self) -> None:
        _validate_counts(self.counts)

    @classmethod
    def empty(cls) -> "TileMultiset":
        return cls([0] * MULTISET_SIZE)

    @classmethod
    def from_tiles(cls, tiles: Iterable[Tile]) -> "TileMultiset":
        counts = [0] * MULTISET_SIZE
        for tile in tiles:
            counts[tile.index()] += 1
        return cls(counts)

    def count(self, tile: Tile) -> int:
        return self.counts[tile.index()]

    def __eq__(self, other: object) -> bool:
        return isinstance(other, TileMultiset) and self.counts == other.counts
