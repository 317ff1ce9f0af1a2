from __future__ import annotations

import argparse
import logging
import random
from typing import List, Optional

from .engine import SearchLimitExceeded
from .hand import Hand
from .partition import format_partition
from .rules import Ruleset
from .tiles import Tile, format_tile, iter_full_set, parse_tiles


def deal_tiles(count: int, seed: Optional[int] = None, ruleset: Ruleset | None = None) -> List[Tile]:
    ruleset = ruleset or Ruleset()
    rng = random.Random(seed)
    full_set = list(iter_full_set(ruleset.colors, ruleset.values, ruleset.copies_per_tiletype))
    if not 0 <= count <= len(full_set):
        raise ValueError(f"can only deal 0 to {len(full_set)} tiles")
    rng.shuffle(full_set)
    return full_set[:count]


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name)
    pkg_logger = logging.getLogger("rummikub_solver")
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(logging.BASIC_FORMAT))
    handler.setLevel(level)
    pkg_logger.addHandler(handler)
    pkg_logger.propagate = False
    pkg_logger.setLevel(level)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Split a Rummikub hand into runs and groups.")
    parser.add_argument("tiles", nargs="*", help="Tiles such as 5R 12b 1Y (colors R, G, B, Y).")
    parser.add_argument("--deal", type=int, default=None, help="Solve a hand of N tiles drawn from a shuffled set.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible deals.")
    parser.add_argument("--node-limit", type=int, default=None, help="Give up after this many search nodes (exit code 3).")
    parser.add_argument("--log-level", choices=["WARNING", "INFO", "DEBUG"], default="WARNING")
    args = parser.parse_args(argv)

    if args.tiles and args.deal is not None:
        parser.error("give either tiles or --deal, not both")
    _configure_logging(args.log_level)

    hand = Hand(node_limit=args.node_limit)
    try:
        if args.deal is not None:
            hand.extend(deal_tiles(args.deal, seed=args.seed))
        else:
            hand.extend(parse_tiles(args.tiles))
    except ValueError as exc:
        parser.error(str(exc))

    print("Hand:", " ".join(format_tile(t) for t in hand.tiles))
    try:
        solved = hand.solve()
    except SearchLimitExceeded as exc:
        print(f"Gave up: {exc}")
        return 3
    if not solved:
        print("No solution")
        return 1
    for line in format_partition(hand.solution):
        print(line)
    print(f"Searched {hand.stats.nodes} nodes")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
