from __future__ import annotations

from dataclasses import dataclass

from .multiset import TileMultiset
from .tiles import InvalidTile, Tile


@dataclass(frozen=True)
class Ruleset:
    colors: int = 4
    values: int = 13
    copies_per_tiletype: int = 2
    min_run_length: int = 3
    min_group_size: int = 3
    max_group_size: int = 4
    check_hand_membership: bool = True
    enforce_copy_limit: bool = True

    def full_set_size(self) -> int:
        return self.colors * self.values * self.copies_per_tiletype

    def check_tile(self, tile: Tile, held: TileMultiset | None = None) -> None:
        """Raise ``InvalidTile`` unless ``tile`` may be added to the tiles counted in ``held``."""
        if not isinstance(tile, Tile):
            raise InvalidTile(f"expected a Tile, got {tile!r}")
        if tile.denomination > self.values or int(tile.color) >= self.colors:
            raise InvalidTile(f"tile {tile} is not part of this set")
        if self.enforce_copy_limit and held is not None and held.count(tile) >= self.copies_per_tiletype:
            raise InvalidTile(f"more than {self.copies_per_tiletype} copies of {tile}")
