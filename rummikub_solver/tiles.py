from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List

MAX_DENOMINATION = 13


class InvalidTile(ValueError):
    """Raised when a tile cannot exist in a standard set."""


class Color(int, Enum):
    RED = 0
    GREEN = 1
    BLUE = 2
    YELLOW = 3

    @property
    def letter(self) -> str:
        return self.name[0]

    @classmethod
    def from_letter(cls, letter: str) -> "Color":
        for color in cls:
            if color.letter == letter.upper():
                return color
        raise InvalidTile(f"unknown color letter {letter!r}")


@dataclass(frozen=True)
class Tile:
    denomination: int
    color: Color

    def __post_init__(self) -> None:
        if isinstance(self.denomination, bool) or not isinstance(self.denomination, int):
            raise InvalidTile(f"denomination must be an int, got {self.denomination!r}")
        if not 1 <= self.denomination <= MAX_DENOMINATION:
            raise InvalidTile(f"denomination {self.denomination} outside 1..{MAX_DENOMINATION}")
        if not isinstance(self.color, Color):
            raise InvalidTile(f"unknown color {self.color!r}")

    def index(self) -> int:
        return int(self.color) * MAX_DENOMINATION + (self.denomination - 1)

    def __str__(self) -> str:
        return format_tile(self)


def format_tile(tile: Tile) -> str:
    return f"{tile.denomination}{tile.color.letter}"


def parse_tile(text: str) -> Tile:
    """Parse ``"5R"`` / ``"13y"`` into a tile."""
    token = text.strip()
    if len(token) < 2 or not token[:-1].isdecimal():
        raise InvalidTile(f"cannot parse tile {text!r}")
    return Tile(int(token[:-1]), Color.from_letter(token[-1]))


def parse_tiles(tokens: Iterable[str]) -> List[Tile]:
    return [parse_tile(token) for token in tokens]


def iter_full_set(colors: int, values: int, copies: int) -> Iterator[Tile]:
    palette = list(Color)[:colors]
    for _ in range(copies):
        for color in palette:
            for value in range(1, values + 1):
                yield Tile(value, color)
