import logging
import pathlib
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from rummikub_solver.engine import BacktrackingSearch, SearchLimitExceeded, solve_tiles, sort_for_search
from rummikub_solver.multiset import TileMultiset
from rummikub_solver.rules import Ruleset
from rummikub_solver.tiles import Color, InvalidTile, Tile, parse_tiles

R, G, B, Y = Color.RED, Color.GREEN, Color.BLUE, Color.YELLOW


def _assert_sound(tiles, partition):
    assert partition.multiset() == TileMultiset.from_tiles(tiles)
    for meld in partition.melds():
        ok, reason = meld.is_valid()
        assert ok, reason


def test_sort_is_stable_by_denomination():
    tiles = [Tile(5, Y), Tile(2, R), Tile(5, R), Tile(2, B)]
    assert sort_for_search(tiles) == [Tile(2, R), Tile(2, B), Tile(5, Y), Tile(5, R)]


def test_run_is_built_in_descending_order():
    partition = solve_tiles(parse_tiles(["2R", "1R", "3R"]))
    assert partition.runs == [[Tile(3, R), Tile(2, R), Tile(1, R)]]
    assert partition.groups == []


def test_first_solution_follows_generator_order():
    # Extending an existing run comes first, so two same-colored blocks end up
    # in a single run rather than two.
    tiles = parse_tiles(["1R", "2R", "3R", "5R", "6R", "7R"])
    partition = solve_tiles(tiles)
    assert len(partition.runs) == 1
    assert len(partition.runs[0]) == 6
    _assert_sound(tiles, partition)


@pytest.mark.parametrize(
    "tokens",
    [
        ["4R", "5R", "6R", "9B", "10B", "11B", "12B", "13B", "1R", "1G", "1B", "1Y"],
        ["3R", "3G", "3B", "4R", "4G", "4B", "5R", "5G", "5B"],
        ["7R", "7G", "7B", "7Y", "7R", "8R", "9R"],
        ["10Y", "11Y", "12Y", "13Y", "13R", "13G", "13B"],
        ["1B", "2B", "3B", "1B", "2B", "3B"],
    ],
)
def test_solvable_hands_are_solved_soundly(tokens):
    tiles = parse_tiles(tokens)
    partition = solve_tiles(tiles)
    assert partition is not None
    _assert_sound(tiles, partition)


@pytest.mark.parametrize(
    "tokens",
    [
        ["1R", "2R"],
        ["5R", "5R"],
        ["1R", "2R", "3R", "5B"],
        ["5R", "5G", "5B", "5Y", "5R"],
        ["12R", "13R", "1R"],
        ["1R", "2G", "3B"],
    ],
)
def test_unsolvable_hands_return_none(tokens):
    assert solve_tiles(parse_tiles(tokens)) is None


def test_stats_balance_apply_and_undo():
    tiles = parse_tiles(["1R", "2R", "3R", "7B", "7G", "7Y"])
    search = BacktrackingSearch(tiles)
    partition = search.run()
    assert search.stats.applied - search.stats.undone == len(tiles)
    assert search.stats.leaves >= 1

    failing = BacktrackingSearch(parse_tiles(["1R", "2R", "4R"]))
    assert failing.run() is None
    assert failing.stats.applied == failing.stats.undone
    assert partition.tile_count() == len(tiles)


def test_search_does_not_touch_input():
    tiles = parse_tiles(["3R", "1R", "2R"])
    snapshot = list(tiles)
    solve_tiles(tiles)
    assert tiles == snapshot


def test_node_limit_stops_search():
    with pytest.raises(SearchLimitExceeded):
        solve_tiles(parse_tiles(["1R", "2R"]), node_limit=3)
    assert solve_tiles(parse_tiles(["1R", "2R", "3R"]), node_limit=100) is not None


def test_search_logs_outcome(caplog):
    with caplog.at_level(logging.INFO, logger="rummikub_solver.engine"):
        solve_tiles(parse_tiles(["1R", "2R"]))
    assert "no partition exists" in caplog.text


def test_search_rejects_tiles_outside_ruleset():
    tiles = parse_tiles(["12R", "12G", "12B"])
    with pytest.raises(InvalidTile):
        solve_tiles(tiles, Ruleset(values=10))
    with pytest.raises(InvalidTile):
        BacktrackingSearch(parse_tiles(["3R", "3G", "3Y"]), Ruleset(colors=3))


def test_search_enforces_copy_limit():
    tiles = parse_tiles(["5R", "5R", "5R"])
    with pytest.raises(InvalidTile):
        solve_tiles(tiles)
    assert solve_tiles(tiles, Ruleset(enforce_copy_limit=False)) is None
