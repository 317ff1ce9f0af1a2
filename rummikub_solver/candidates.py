from __future__ import annotations

from typing import List, Sequence

from .action import Action
from .partition import Partition
from .tiles import Tile


def _can_extend_run(run: Sequence[Tile], tile: Tile) -> bool:
    # contiguity is left to the validator
    return all(t.color == tile.color and t.denomination != tile.denomination for t in run)


def _can_extend_group(group: Sequence[Tile], tile: Tile) -> bool:
    return all(t.color != tile.color and t.denomination == tile.denomination for t in group)


def generate_actions(tile: Tile, partition: Partition) -> List[Action]:
    """List every structurally admissible placement of ``tile``.

    Order is run extensions, group extensions (both by index), then a new run
    and a new group. Starting a new run or group is always offered, even when
    an extension exists. The engine explores actions in exactly this order,
    so it decides which solution is found first.
    """
    actions: List[Action] = []
    for idx, run in enumerate(partition.runs):
        if _can_extend_run(run, tile):
            actions.append(Action.extend_run(tile, idx))
    for idx, group in enumerate(partition.groups):
        if _can_extend_group(group, tile):
            actions.append(Action.extend_group(tile, idx))
    actions.append(Action.start_run(tile))
    actions.append(Action.start_group(tile))
    return actions
