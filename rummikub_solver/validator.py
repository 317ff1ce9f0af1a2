from __future__ import annotations

from typing import Sequence, Tuple, Union

from .meld import Meld, MeldKind
from .multiset import TileMultiset
from .partition import Partition
from .rules import Ruleset
from .tiles import Tile


def _missing_from_hand(tiles: Sequence[Tile], hand: TileMultiset) -> Tile | None:
    for tile in tiles:
        if hand.count(tile) == 0:
            return tile
    return None


def is_legal_partition(
    partition: Partition, hand: Union[Sequence[Tile], TileMultiset], ruleset: Ruleset | None = None
) -> Tuple[bool, str]:
    """Check a fully assigned partition, groups first and then runs.

    ``hand`` is the original, unsorted hand. Every tile of every meld must
    appear in it by value. Stops at the first failing meld.
    """
    ruleset = ruleset or Ruleset()
    hand_ms = hand if isinstance(hand, TileMultiset) else TileMultiset.from_tiles(hand)

    for idx, group in enumerate(partition.groups):
        ok, reason = Meld(MeldKind.GROUP, group).is_valid(ruleset)
        if not ok:
            return False, f"group {idx}: {reason}"
        if ruleset.check_hand_membership:
            missing = _missing_from_hand(group, hand_ms)
            if missing is not None:
                return False, f"group {idx}: tile {missing} not in hand"

    for idx, run in enumerate(partition.runs):
        if ruleset.check_hand_membership:
            missing = _missing_from_hand(run, hand_ms)
            if missing is not None:
                return False, f"run {idx}: tile {missing} not in hand"
        ok, reason = Meld(MeldKind.RUN, run).is_valid(ruleset)
        if not ok:
            return False, f"run {idx}: {reason}"

    return True, ""
