"""Template runtime: argument substitution, color parsing, markup compilation.

Python 3.13+.
"""

from .arguments import ArgumentValue, coerce_argument, find_placeholders, substitute_arguments
from .colors import (
    ColorDirective,
    ColorValue,
    IndexedColor,
    NamedColor,
    RgbColor,
    parse_color_name,
    parse_color_spec,
)
from .markup import (
    PLAIN,
    StyledRun,
    StyleDirective,
    ansify,
    compile_markup,
    parse_command,
    render_runs,
)

__all__ = [
    "PLAIN",
    "ArgumentValue",
    "ColorDirective",
    "ColorValue",
    "IndexedColor",
    "NamedColor",
    "RgbColor",
    "StyleDirective",
    "StyledRun",
    "ansify",
    "coerce_argument",
    "compile_markup",
    "find_placeholders",
    "parse_color_name",
    "parse_color_spec",
    "parse_command",
    "render_runs",
    "substitute_arguments",
]
