"""Color directive parsing.

Turns the bracket contents of a ``color[...]`` styling directive into a
channel and a concrete color value:

    color[red]          foreground, named
    color[bg;lightblue] background, named
    color[208]          foreground, 256-color index
    color[bg;0;255;0]   background, 24-bit RGB
    color[fg;10;20;30]  foreground, 24-bit RGB (explicit channel)

Colors convert to ``rich.color.Color`` for rendering. Named colors map to the
16 standard terminal colors; indexes always use the 256-color form so that
``color[1]`` and ``color[red]`` stay distinguishable in the output.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass

from rich.color import Color, ColorType

from tongues.constants import MAX_COLOR_COMPONENT
from tongues.diagnostics import ColorParseError, ErrorTemplate
from tongues.enums import ColorChannel, ColorName

__all__ = [
    "ColorDirective",
    "ColorValue",
    "IndexedColor",
    "NamedColor",
    "RgbColor",
    "parse_color_name",
    "parse_color_spec",
]

# Standard palette numbers (SGR 30-37 for 0-7, 90-97 for 8-15).
# Purple/magenta and their light variants share a slot.
_STANDARD_NUMBERS: dict[ColorName, int] = {
    ColorName.BLACK: 0,
    ColorName.RED: 1,
    ColorName.GREEN: 2,
    ColorName.YELLOW: 3,
    ColorName.BLUE: 4,
    ColorName.PURPLE: 5,
    ColorName.MAGENTA: 5,
    ColorName.CYAN: 6,
    ColorName.WHITE: 7,
    ColorName.DARKGRAY: 8,
    ColorName.LIGHTRED: 9,
    ColorName.LIGHTGREEN: 10,
    ColorName.LIGHTYELLOW: 11,
    ColorName.LIGHTBLUE: 12,
    ColorName.LIGHTPURPLE: 13,
    ColorName.LIGHTMAGENTA: 13,
    ColorName.LIGHTCYAN: 14,
    ColorName.LIGHTGRAY: 15,
}

_CHANNEL_PREFIXES: tuple[str, ...] = ("bg;", "fg;")


def _check_component(value: int, field_name: str) -> None:
    if not 0 <= value <= MAX_COLOR_COMPONENT:
        msg = f"{field_name} must be in 0..{MAX_COLOR_COMPONENT}, got {value}"
        raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class NamedColor:
    """One of the 19 fixed terminal color names."""

    name: ColorName

    def to_rich(self) -> Color:
        """Convert to a rich Color (standard palette or terminal default)."""
        if self.name is ColorName.DEFAULT:
            return Color.default()
        return Color.from_ansi(_STANDARD_NUMBERS[self.name])


@dataclass(frozen=True, slots=True)
class IndexedColor:
    """Entry of the 256-color palette.

    Attributes:
        index: Palette index, 0..255
    """

    index: int

    def __post_init__(self) -> None:
        _check_component(self.index, "index")

    def to_rich(self) -> Color:
        """Convert to a rich 8-bit Color."""
        return Color(f"color({self.index})", ColorType.EIGHT_BIT, number=self.index)


@dataclass(frozen=True, slots=True)
class RgbColor:
    """24-bit color.

    Attributes:
        red: Red component, 0..255
        green: Green component, 0..255
        blue: Blue component, 0..255
    """

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        _check_component(self.red, "red")
        _check_component(self.green, "green")
        _check_component(self.blue, "blue")

    def to_rich(self) -> Color:
        """Convert to a rich true-color Color."""
        return Color.from_rgb(self.red, self.green, self.blue)


type ColorValue = NamedColor | IndexedColor | RgbColor
"""Tagged union of the three color forms."""


@dataclass(frozen=True, slots=True)
class ColorDirective:
    """A parsed color[...] directive.

    Attributes:
        channel: Foreground or background
        color: Concrete color value
    """

    channel: ColorChannel
    color: ColorValue


def parse_color_name(token: str) -> NamedColor | None:
    """Look up a color name, ignoring case and surrounding whitespace.

    Args:
        token: Candidate name, e.g. "LightBlue"

    Returns:
        NamedColor, or None if the token is not one of the 19 names
    """
    try:
        return NamedColor(ColorName(token.strip().lower()))
    except ValueError:
        return None


def _parse_component(token: str, spec: str) -> int:
    """Parse a base-10 integer in 0..255."""
    digits = token.strip().removeprefix("+")
    if not (digits.isascii() and digits.isdigit()):
        raise ColorParseError(ErrorTemplate.color_invalid(spec), token=spec)
    value = int(digits)
    if value > MAX_COLOR_COMPONENT:
        raise ColorParseError(ErrorTemplate.color_out_of_range(spec, token), token=spec)
    return value


def parse_color_spec(spec: str) -> ColorDirective:
    """Parse the bracket contents of a color directive.

    A leading "bg" selects the background channel. Any "bg;" prefixes, then
    any "fg;" prefixes, are stripped before the value is read. Fewer than
    three ';'-separated parts means a name or a palette index; three or more
    means an RGB triple (extra parts are ignored).

    Args:
        spec: Text between "color[" and "]"

    Returns:
        ColorDirective

    Raises:
        ColorParseError: If the value is not a name, an index, or RGB in range

    Example:
        >>> parse_color_spec("red")
        ColorDirective(channel=<ColorChannel.FOREGROUND: 'fg'>, color=NamedColor(name=<ColorName.RED: 'red'>))
        >>> parse_color_spec("bg;0;255;0").color
        RgbColor(red=0, green=255, blue=0)
    """
    text = spec.strip()
    channel = ColorChannel.BACKGROUND if text.startswith("bg") else ColorChannel.FOREGROUND
    for prefix in _CHANNEL_PREFIXES:
        while text.startswith(prefix):
            text = text.removeprefix(prefix)

    parts = text.split(";")
    if len(parts) < 3:
        named = parse_color_name(parts[0])
        if named is not None:
            return ColorDirective(channel, named)
        return ColorDirective(channel, IndexedColor(_parse_component(parts[0], spec)))

    red, green, blue = (_parse_component(part, spec) for part in parts[:3])
    return ColorDirective(channel, RgbColor(red, green, blue))
