"""Shared constants for tongues.

Centralized configuration constants used across the locale, localization
and runtime packages. Placing constants here avoids circular imports and
provides a single source of truth.

Constants are grouped by domain:
- Locale defaults: Placeholders substituted for absent locale components
- File layout: Translation file naming and discovery
- Markup: Inline styling syntax markers
- Limits: Loop protection for fallback resolution

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locale defaults
    "DEFAULT_TERRITORY",
    "DEFAULT_ENCODING",
    "DEFAULT_MODIFIER",
    "DEFAULT_LANGUAGE",
    "LOCALE_ENV_VAR",
    # File layout
    "TRANSLATION_EXTENSION",
    # Markup
    "MARKUP_MARKER",
    "COLOR_DIRECTIVE",
    "PLACEHOLDER_TEMPLATE",
    # Limits
    "MAX_FALLBACK_DEPTH",
    "MAX_COLOR_COMPONENT",
]

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Placeholders used when a locale string omits a component.
# "en" parses to LocaleTag("en", "xx", "blank", "blank").
DEFAULT_TERRITORY: str = "xx"
DEFAULT_ENCODING: str = "blank"
DEFAULT_MODIFIER: str = "blank"

# Last-resort language prefix when no file matches the requested language.
DEFAULT_LANGUAGE: str = "en"

# Environment variable holding the user's locale preference.
LOCALE_ENV_VAR: str = "LANG"

# ============================================================================
# FILE LAYOUT
# ============================================================================

# Translation documents are TOML: <language>[_<territory>][@<modifier>].toml
TRANSLATION_EXTENSION: str = ".toml"

# ============================================================================
# MARKUP
# ============================================================================

# Opens a styling command: "(ansi bold color[red])text"
MARKUP_MARKER: str = "(ansi "

# Color directive keyword inside a styling command: color[bg;0;255;0]
COLOR_DIRECTIVE: str = "color"

# Argument placeholder: "Hello, ($name)!"
PLACEHOLDER_TEMPLATE: str = "(${name})"

# ============================================================================
# LIMITS
# ============================================================================

# Upper bound on documents visited for a single key. Fallback chains in
# practice are 1-2 documents deep; cycles are caught before this limit.
MAX_FALLBACK_DEPTH: int = 32

# Indexed and RGB color components are 8-bit.
MAX_COLOR_COMPONENT: int = 255
