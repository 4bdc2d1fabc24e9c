"""tongues - terminal message translation with locale fallback and inline styling.

Resolves a dotted message key against a directory of TOML translation files,
choosing the file that best matches a POSIX locale preference and following
each document's fallback locale when a key is missing, then substitutes
``($name)`` arguments and compiles ``(ansi ...)`` styling markup into ANSI
escape sequences.

Public API:
    Translator - Translate keys against one translation directory
    translate - One-shot translation
    ResolverConfig - File extension, default language, fallback limits
    LocaleTag / parse_locale - POSIX locale parsing
    compile_markup / StyledRun - Styling markup compilation

Exceptions:
    TonguesError - Base exception class
    LocaleParseError - Malformed locale string
    FileResolutionFailure - No usable translation file
    DocumentParseError - Malformed translation file
    KeyNotFound - Key absent from every reachable document
    FallbackCycleError - Fallback chain loops
    ArgumentTypeError - Argument without a string form
    MarkupSyntaxError - Malformed styling command
    ColorParseError - Invalid color directive

Submodules:
    tongues.localization - File discovery, loading and resolution
    tongues.runtime - Arguments, colors and markup
    tongues.diagnostics - Error types and diagnostic formatting
"""

from .diagnostics import (
    ArgumentTypeError,
    ColorParseError,
    DocumentParseError,
    FallbackCycleError,
    FileResolutionFailure,
    KeyNotFound,
    LocaleParseError,
    MarkupSyntaxError,
    TonguesError,
)
from .locale_utils import LocaleTag, parse_locale
from .localization import ResolverConfig, Translator, translate
from .runtime import StyledRun, StyleDirective, compile_markup

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("tongues")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ArgumentTypeError",
    "ColorParseError",
    "DocumentParseError",
    "FallbackCycleError",
    "FileResolutionFailure",
    "KeyNotFound",
    "LocaleParseError",
    "LocaleTag",
    "MarkupSyntaxError",
    "ResolverConfig",
    "StyleDirective",
    "StyledRun",
    "TonguesError",
    "Translator",
    "__version__",
    "compile_markup",
    "parse_locale",
    "translate",
]
