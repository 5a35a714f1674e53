"""Liquid colours used in the puzzle and their display names."""

from __future__ import annotations

from enum import IntEnum

MAX_UNIT = 4
"""Number of liquid units a single bottle can hold."""


class Color(IntEnum):
    """The twelve liquid colours."""

    YELLOW = 0
    RED = 1
    SKY_BLUE = 2
    AQUA_GREEN = 3
    PINK = 4
    MAGENTA = 5
    BLUE = 6
    PURPLE = 7
    YELLOW_GREEN = 8
    ORANGE = 9
    GRAY = 10
    DARK_GREEN = 11


_NAMES: dict[Color, str] = {
    Color.YELLOW: "黃色",
    Color.RED: "赤色",
    Color.SKY_BLUE: "水色",
    Color.AQUA_GREEN: "薄緑",
    Color.PINK: "桃色",
    Color.MAGENTA: "赤紫",
    Color.BLUE: "青色",
    Color.PURPLE: "紫色",
    Color.YELLOW_GREEN: "黄緑",
    Color.ORANGE: "橙色",
    Color.GRAY: "灰色",
    Color.DARK_GREEN: "深緑",
}


def color_name(color: int) -> str:
    """Return the display name of a colour; raise ValueError for an unknown one."""
    return _NAMES[Color(color)]