"""Named colour palette."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import IntEnum

__all__ = ["Color", "ColorRGBA", "color_at"]


class Color(IntEnum):
    BLACK = 0
    WHITE = 1
    RED = 2
    PINK = 3
    GREEN = 4
    BLUE = 5
    MARINE = 6
    YELLOW = 7
    CYAN = 8
    MAGENTA = 9
    ORANGE_RED = 10
    ORANGE = 11
    DARK_ORANGE = 12
    GOLD = 13
    GREEN_YELLOW = 14
    FOREST_GREEN = 15
    SPRING_GREEN = 16
    SKY_BLUE = 17
    MEDIUM_ORCHID = 18
    GREY = 19
    VIOLET = 20
    ROYAL_BLUE = 21


@dataclass(frozen=True)
class ColorRGBA:
    """Colour with red, green, blue and alpha channels in [0, 1]."""

    r: float = 1.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0


_PALETTE = {
    Color.BLACK: ColorRGBA(0.0, 0.0, 0.0, 1.0),
    Color.WHITE: ColorRGBA(1.0, 1.0, 1.0, 1.0),
    Color.RED: ColorRGBA(1.0, 0.0, 0.0, 1.0),
    Color.PINK: ColorRGBA(1.0, 0.44, 0.70, 1.0),
    Color.GREEN: ColorRGBA(0.0, 1.0, 0.0, 1.0),
    Color.BLUE: ColorRGBA(0.0, 0.0, 1.0, 1.0),
    Color.MARINE: ColorRGBA(0.5, 1.0, 0.83, 1.0),
    Color.YELLOW: ColorRGBA(1.0, 1.0, 0.0, 1.0),
    Color.CYAN: ColorRGBA(0.0, 1.0, 1.0, 1.0),
    Color.MAGENTA: ColorRGBA(1.0, 0.0, 1.0, 1.0),
    Color.VIOLET: ColorRGBA(0.93, 0.43, 0.93, 1.0),
    Color.ORANGE_RED: ColorRGBA(1.0, 0.275, 0.0, 1.0),
    Color.ORANGE: ColorRGBA(1.0, 0.65, 0.0, 1.0),
    Color.DARK_ORANGE: ColorRGBA(1.0, 0.6, 0.0, 1.0),
    Color.GOLD: ColorRGBA(1.0, 0.84, 0.0, 1.0),
    Color.GREEN_YELLOW: ColorRGBA(0.5, 1.0, 0.0, 1.0),
    Color.FOREST_GREEN: ColorRGBA(0.13, 0.545, 0.13, 1.0),
    Color.SPRING_GREEN: ColorRGBA(0.0, 1.0, 0.5, 1.0),
    Color.SKY_BLUE: ColorRGBA(0.0, 0.749, 1.0, 1.0),
    Color.MEDIUM_ORCHID: ColorRGBA(0.729, 0.333, 0.827, 1.0),
    Color.GREY: ColorRGBA(0.5, 0.5, 0.5, 1.0),
    Color.ROYAL_BLUE: ColorRGBA(0.25, 0.41, 0.88, 1.0),
}


def color_at(color: Color | int, alpha: float = 1.0) -> ColorRGBA:
    """Return the RGBA value of a named colour with the given alpha."""
    return dataclasses.replace(_PALETTE[Color(color)], a=alpha)