"""Inline styling markup compiler.

Compiles templates such as::

    "Status: (ansi bold color[green])OK(ansi )  (ansi dimmed)3 files"

into an ordered sequence of StyledRun values and renders them as ANSI SGR
escape sequences through ``rich.style.Style``.

Syntax:
    - ``(ansi `` opens a command; the command runs to the first ``)``.
    - Text after the ``)`` is styled up to the next ``(ansi `` or the end.
    - Text before the first marker is unstyled.
    - Flags are keyword substrings anywhere in the command: bold, dimmed,
      italic, underline, strikethrough, hidden, blink, reverse.
    - ``color[...]`` directives set colors (see tongues.runtime.colors). The
      i-th ``color`` pairs with the i-th ``]`` in the command.

Channel policy: each directive is parsed on its own and the last directive
per channel wins, so ``color[red] color[bg;blue] color[green]`` yields a
green foreground on a blue background.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from rich.color import ColorSystem
from rich.style import Style

from tongues.constants import COLOR_DIRECTIVE, MARKUP_MARKER
from tongues.diagnostics import ErrorTemplate, MarkupSyntaxError
from tongues.enums import ColorChannel, StyleFlag
from tongues.runtime.colors import ColorDirective, ColorValue, parse_color_spec

__all__ = [
    "PLAIN",
    "StyleDirective",
    "StyledRun",
    "ansify",
    "compile_markup",
    "parse_command",
    "render_runs",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class StyleDirective:
    """Complete style for one run of text.

    Built fresh per command; never shared between runs.
    """

    bold: bool = False
    dim: bool = False
    italic: bool = False
    underline: bool = False
    strikethrough: bool = False
    hidden: bool = False
    blink: bool = False
    reverse: bool = False
    foreground: ColorValue | None = None
    background: ColorValue | None = None

    @property
    def is_plain(self) -> bool:
        """Check whether the directive sets nothing at all."""
        return self == PLAIN

    def to_rich(self) -> Style:
        """Convert to a rich Style.

        Unset attributes are passed as None so rich emits no code for them.
        """
        return Style(
            color=self.foreground.to_rich() if self.foreground is not None else None,
            bgcolor=self.background.to_rich() if self.background is not None else None,
            bold=self.bold or None,
            dim=self.dim or None,
            italic=self.italic or None,
            underline=self.underline or None,
            strike=self.strikethrough or None,
            conceal=self.hidden or None,
            blink=self.blink or None,
            reverse=self.reverse or None,
        )


PLAIN = StyleDirective()
"""The unstyled directive."""


@dataclass(frozen=True, slots=True)
class StyledRun:
    """Contiguous text paired with the style that applies to it."""

    text: str
    style: StyleDirective = PLAIN

    def render(self, *, color: bool = True) -> str:
        """Render the run, wrapped in SGR codes unless color is False or the run is plain."""
        if not color or self.style.is_plain:
            return self.text
        return self.style.to_rich().render(self.text, color_system=ColorSystem.TRUECOLOR)


def _color_directives(command: str) -> list[ColorDirective]:
    """Locate and parse every color[...] directive in a command."""
    closers = [index for index, char in enumerate(command) if char == "]"]
    directives: list[ColorDirective] = []
    start = 0
    while (found := command.find(COLOR_DIRECTIVE, start)) != -1:
        occurrence = len(directives)
        opener = found + len(COLOR_DIRECTIVE)
        if (
            command[opener : opener + 1] != "["
            or occurrence >= len(closers)
            or closers[occurrence] <= opener
        ):
            diagnostic = ErrorTemplate.markup_unmatched_bracket(command, occurrence + 1)
            raise MarkupSyntaxError(diagnostic, command=command)
        spec = command[opener + 1 : closers[occurrence]].lstrip("[").rstrip("]")
        directives.append(parse_color_spec(spec))
        start = opener
    return directives


def parse_command(command: str) -> StyleDirective:
    """Parse the text between "(ansi " and ")" into a StyleDirective.

    Args:
        command: Command text, e.g. "bold color[bg;0;255;0]"

    Returns:
        StyleDirective

    Raises:
        MarkupSyntaxError: If a color directive has unmatched brackets
        ColorParseError: If a color value is invalid
    """
    foreground: ColorValue | None = None
    background: ColorValue | None = None
    for directive in _color_directives(command):
        if directive.channel is ColorChannel.BACKGROUND:
            background = directive.color
        else:
            foreground = directive.color

    return StyleDirective(
        bold=StyleFlag.BOLD in command,
        dim=StyleFlag.DIM in command,
        italic=StyleFlag.ITALIC in command,
        underline=StyleFlag.UNDERLINE in command,
        strikethrough=StyleFlag.STRIKETHROUGH in command,
        hidden=StyleFlag.HIDDEN in command,
        blink=StyleFlag.BLINK in command,
        reverse=StyleFlag.REVERSE in command,
        foreground=foreground,
        background=background,
    )


def compile_markup(template: str) -> tuple[StyledRun, ...]:
    """Compile a template into styled runs.

    The first run always holds the (possibly empty) text before the first
    marker, unstyled.

    Args:
        template: Text possibly containing "(ansi ...)" commands

    Returns:
        Tuple of StyledRun in output order

    Raises:
        MarkupSyntaxError: If a command has no closing ')' or unmatched brackets
        ColorParseError: If a color value is invalid

    Example:
        >>> compile_markup("(ansi bold)Hello")
        (StyledRun(text='', style=...), StyledRun(text='Hello', style=StyleDirective(bold=True, ...)))
    """
    head, *pieces = template.split(MARKUP_MARKER)
    runs = [StyledRun(head)]
    offset = len(head)
    for piece in pieces:
        command, closed, text = piece.partition(")")
        if not closed:
            diagnostic = ErrorTemplate.markup_unterminated(piece, offset)
            raise MarkupSyntaxError(diagnostic, command=piece)
        runs.append(StyledRun(text, parse_command(command)))
        offset += len(MARKUP_MARKER) + len(piece)
    logger.debug("Compiled %d styled runs", len(runs))
    return tuple(runs)


def render_runs(runs: Iterable[StyledRun], *, color: bool = True) -> str:
    """Concatenate runs into one string.

    Args:
        runs: Styled runs in output order
        color: Emit ANSI escape sequences (False yields the bare text)

    Returns:
        Rendered string
    """
    return "".join(run.render(color=color) for run in runs)


def ansify(template: str, *, color: bool = True) -> str:
    """Compile and render a template in one step."""
    return render_runs(compile_markup(template), color=color)
