"""Hypothesis strategies for tongues property-based testing.

Strategies are organized by domain:

- locales: POSIX locale strings and their components
- markup: color tokens and styling commands

Usage:
    from tests.strategies import locale_strings, color_specs
"""

from .locales import (
    encodings,
    language_codes,
    locale_parts,
    locale_strings,
    modifiers,
    territories,
)
from .markup import (
    color_names,
    color_specs,
    plain_text,
    rgb_triples,
    style_flags,
)

__all__ = [
    "color_names",
    "color_specs",
    "encodings",
    "language_codes",
    "locale_parts",
    "locale_strings",
    "modifiers",
    "plain_text",
    "rgb_triples",
    "style_flags",
    "territories",
]
