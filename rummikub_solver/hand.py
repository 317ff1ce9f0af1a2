from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from .engine import BacktrackingSearch, SearchStats
from .multiset import TileMultiset
from .partition import Partition
from .rules import Ruleset
from .tiles import Tile


class Hand:
    """Tiles held by one player, and the partition found for them.

    ``solve`` never reorders the hand itself. Both result accessors return
    empty lists until a solve succeeds, and after a failed one.
    """

    def __init__(self, ruleset: Ruleset | None = None, node_limit: Optional[int] = None) -> None:
        self.ruleset = ruleset or Ruleset()
        self.node_limit = node_limit
        self._tiles: List[Tile] = []
        self._counts = TileMultiset.empty()
        self._solution = Partition()
        self.stats = SearchStats()

    def add(self, tile: Tile) -> None:
        self.ruleset.check_tile(tile, self._counts)
        self._counts.counts[tile.index()] += 1
        self._tiles.append(tile)

    def extend(self, tiles: Iterable[Tile]) -> None:
        for tile in tiles:
            self.add(tile)

    @property
    def tiles(self) -> Tuple[Tile, ...]:
        return tuple(self._tiles)

    def __len__(self) -> int:
        return len(self._tiles)

    def solve(self) -> bool:
        self._solution = Partition()
        search = BacktrackingSearch(list(self._tiles), self.ruleset, self.node_limit)
        try:
            partition = search.run()
        finally:
            self.stats = search.stats
        if partition is None:
            return False
        self._solution = partition
        return True

    def get_groups(self) -> List[List[Tile]]:
        return [list(group) for group in self._solution.groups]

    def get_runs(self) -> List[List[Tile]]:
        return [list(run) for run in self._solution.runs]

    @property
    def solution(self) -> Partition:
        return self._solution.copy()
