from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .candidates import generate_actions
from .multiset import TileMultiset
from .partition import Partition
from .rules import Ruleset
from .tiles import Tile
from .validator import is_legal_partition

logger = logging.getLogger(__name__)


class SearchLimitExceeded(RuntimeError):
    """Raised when a search expands more nodes than its ``node_limit``."""


@dataclass
class SearchStats:
    nodes: int = 0
    leaves: int = 0
    applied: int = 0
    undone: int = 0


def sort_for_search(tiles: Sequence[Tile]) -> List[Tile]:
    # stable, by denomination only; tiles are popped from the end
    return sorted(tiles, key=lambda t: t.denomination)


@dataclass
class BacktrackingSearch:
    hand: Sequence[Tile]
    ruleset: Ruleset = field(default_factory=Ruleset)
    node_limit: Optional[int] = None
    stats: SearchStats = field(default_factory=SearchStats)

    def __post_init__(self) -> None:
        self._hand_ms = TileMultiset.empty()
        for tile in self.hand:
            self.ruleset.check_tile(tile, self._hand_ms)
            self._hand_ms.counts[tile.index()] += 1

    def run(self) -> Optional[Partition]:
        """Return the first legal partition in exploration order, or ``None``."""
        working = sort_for_search(self.hand)
        partition = Partition()
        self.stats = SearchStats()
        logger.info("searching partition for %d tiles", len(working))
        found = self._solve_rec(working, partition)
        logger.debug(
            "search finished: nodes=%d leaves=%d applied=%d undone=%d",
            self.stats.nodes,
            self.stats.leaves,
            self.stats.applied,
            self.stats.undone,
        )
        if not found:
            logger.info("no partition exists")
            return None
        logger.info("found %d runs and %d groups", len(partition.runs), len(partition.groups))
        return partition

    def _solve_rec(self, working: List[Tile], partition: Partition) -> bool:
        self.stats.nodes += 1
        if self.node_limit is not None and self.stats.nodes > self.node_limit:
            raise SearchLimitExceeded(f"search exceeded {self.node_limit} nodes")

        if not working:
            self.stats.leaves += 1
            legal, _ = is_legal_partition(partition, self._hand_ms, self.ruleset)
            return legal

        tile = working.pop()
        for action in generate_actions(tile, partition):
            partition.apply(action)
            self.stats.applied += 1
            if self._solve_rec(working, partition):
                return True
            partition.undo(action)
            self.stats.undone += 1

        working.append(tile)
        return False


def solve_tiles(
    tiles: Sequence[Tile], ruleset: Ruleset | None = None, node_limit: Optional[int] = None
) -> Optional[Partition]:
    search = BacktrackingSearch(list(tiles), ruleset or Ruleset(), node_limit)
    return search.run()
