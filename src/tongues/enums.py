"""Enumerations for tongues type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class ColorName(StrEnum):
    """Named terminal colors accepted by color[...] directives.

    Lookup is case-insensitive; values are the lowercase spellings.
    """

    BLACK = "black"
    BLUE = "blue"
    CYAN = "cyan"
    DARKGRAY = "darkgray"
    DEFAULT = "default"
    GREEN = "green"
    LIGHTBLUE = "lightblue"
    LIGHTCYAN = "lightcyan"
    LIGHTGRAY = "lightgray"
    LIGHTGREEN = "lightgreen"
    LIGHTMAGENTA = "lightmagenta"
    LIGHTPURPLE = "lightpurple"
    LIGHTRED = "lightred"
    LIGHTYELLOW = "lightyellow"
    MAGENTA = "magenta"
    PURPLE = "purple"
    RED = "red"
    WHITE = "white"
    YELLOW = "yellow"


class ColorChannel(StrEnum):
    """Which half of a style a color directive targets.

    StrEnum provides automatic string conversion: str(ColorChannel.BACKGROUND) == "bg"
    """

    FOREGROUND = "fg"
    """Text color (default when no channel prefix is given)"""

    BACKGROUND = "bg"
    """Cell background color: color[bg;...]"""


class StyleFlag(StrEnum):
    """Boolean style keywords recognized inside a styling command.

    The value is the keyword searched for in the command text.
    """

    BOLD = "bold"
    DIM = "dimmed"
    ITALIC = "italic"
    UNDERLINE = "underline"
    STRIKETHROUGH = "strikethrough"
    HIDDEN = "hidden"
    BLINK = "blink"
    REVERSE = "reverse"


__all__ = [
    "ColorChannel",
    "ColorName",
    "StyleFlag",
]
