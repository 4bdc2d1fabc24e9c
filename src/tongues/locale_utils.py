"""Locale utilities for POSIX locale strings.

Parses locale preferences such as ``en_US.UTF-8@euro`` (from ``$LANG`` or a
translation document's ``fallback`` field) into a structured LocaleTag, and
bridges tags to Babel for human-readable display names.

    POSIX locale string structure

        "en_US.UTF-8@euro"
         ^  ^  ^     ^
         |  |  |     L modifier   - optional, default "blank"
         |  |  L encoding         - optional, default "blank"
         |  L territory           - optional, default "xx"
         L language               - mandatory

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
import os
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from tongues.constants import (
    DEFAULT_ENCODING,
    DEFAULT_LANGUAGE,
    DEFAULT_MODIFIER,
    DEFAULT_TERRITORY,
    LOCALE_ENV_VAR,
)
from tongues.diagnostics import ErrorTemplate, LocaleParseError

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "LocaleTag",
    "clear_locale_cache",
    "describe_locale",
    "get_babel_locale",
    "get_system_locale",
    "parse_locale",
]

logger = logging.getLogger(__name__)


@functools.cache
def _locale_pattern() -> re.Pattern[str]:
    """Compile the locale grammar once, on first use.

    Every component is optional so the pattern always matches at position 0;
    an empty language run is rejected by parse_locale instead. Encoding stops
    at '@' so that a trailing modifier is not swallowed.
    """
    return re.compile(
        r"(?P<language>[a-zA-Z]*)"
        r"(?:_(?P<territory>..))?"
        r"(?:\.(?P<encoding>[^@]*))?"
        r"(?:@(?P<modifier>[a-zA-Z0-9]*))?"
    )


@dataclass(frozen=True, slots=True)
class LocaleTag:
    """Structured POSIX locale preference.

    All fields are lowercase. Absent components hold the placeholder
    defaults so that tags compare and print consistently.

    Attributes:
        language: Language code (never empty)
        territory: Two-character territory, or "xx" when absent
        encoding: Character encoding, or "blank" when absent
        modifier: Alphanumeric modifier, or "blank" when absent

    Example:
        >>> parse_locale("fr_CA@quebec")
        LocaleTag(language='fr', territory='ca', encoding='blank', modifier='quebec')
    """

    language: str
    territory: str = DEFAULT_TERRITORY
    encoding: str = DEFAULT_ENCODING
    modifier: str = DEFAULT_MODIFIER

    def __post_init__(self) -> None:
        """Validate LocaleTag invariants.

        Raises:
            ValueError: If language is empty.
        """
        if not self.language:
            msg = "LocaleTag.language must not be empty"
            raise ValueError(msg)

    @property
    def has_territory(self) -> bool:
        """Check whether the territory was given explicitly."""
        return self.territory != DEFAULT_TERRITORY

    @property
    def has_encoding(self) -> bool:
        """Check whether the encoding was given explicitly."""
        return self.encoding != DEFAULT_ENCODING

    @property
    def has_modifier(self) -> bool:
        """Check whether the modifier was given explicitly."""
        return self.modifier != DEFAULT_MODIFIER

    def __str__(self) -> str:
        """Render the canonical POSIX form, omitting defaulted components."""
        result = self.language
        if self.has_territory:
            result += f"_{self.territory}"
        if self.has_encoding:
            result += f".{self.encoding}"
        if self.has_modifier:
            result += f"@{self.modifier}"
        return result


def parse_locale(locale_string: str) -> LocaleTag:
    """Parse a POSIX locale string into a LocaleTag.

    Matching is a prefix match: text the grammar does not cover (for example
    the "-US" in the BCP-47 style "en-US") is ignored. Components that are
    present but empty ("en_US." or "en@") take their defaults.

    Args:
        locale_string: Locale preference, e.g. "en_US.UTF-8@euro"

    Returns:
        LocaleTag with lowercased fields and defaults filled in

    Raises:
        LocaleParseError: If the string has no leading language letters

    Example:
        >>> parse_locale("en_US.UTF-8@euro")
        LocaleTag(language='en', territory='us', encoding='utf-8', modifier='euro')
        >>> parse_locale("fr")
        LocaleTag(language='fr', territory='xx', encoding='blank', modifier='blank')
    """
    match = _locale_pattern().match(locale_string)
    if match is None or not match.group("language"):
        diagnostic = ErrorTemplate.locale_invalid(locale_string)
        raise LocaleParseError(diagnostic, locale_string=locale_string)

    tag = LocaleTag(
        language=match.group("language").lower(),
        territory=(match.group("territory") or DEFAULT_TERRITORY).lower(),
        encoding=(match.group("encoding") or DEFAULT_ENCODING).lower(),
        modifier=(match.group("modifier") or DEFAULT_MODIFIER).lower(),
    )
    logger.debug("Parsed locale %r as %r", locale_string, tag)
    return tag


def get_system_locale(
    env_var: str = LOCALE_ENV_VAR,
    *,
    default: str = DEFAULT_LANGUAGE,
) -> str:
    """Read the user's locale preference from the environment.

    The raw value is returned unparsed so that error messages and fallback
    bookkeeping refer to exactly what the user configured.

    Args:
        env_var: Environment variable to read (default: "LANG")
        default: Value returned when the variable is unset or empty

    Returns:
        Locale string, e.g. "de_DE.UTF-8"

    Example:
        >>> import os
        >>> os.environ['LANG'] = 'de_DE.UTF-8'
        >>> get_system_locale()
        'de_DE.UTF-8'
    """
    value = os.environ.get(env_var, "")
    if value:
        return value
    logger.debug("$%s is not set; using default locale %r", env_var, default)
    return default


@functools.lru_cache(maxsize=128)
def get_babel_locale(tag: LocaleTag) -> Locale:
    """Get a Babel Locale object for a LocaleTag with caching.

    Only language and territory are passed to Babel; encoding and modifier
    have no CLDR counterpart. Thread-safe via lru_cache internal locking.

    Args:
        tag: Parsed locale tag

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If CLDR has no data for the locale
        ValueError: If the identifier is malformed for Babel

    Example:
        >>> locale = get_babel_locale(parse_locale("pt_BR"))
        >>> locale.language, locale.territory
        ('pt', 'BR')
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    identifier = tag.language
    if tag.has_territory:
        identifier += f"_{tag.territory.upper()}"
    return Locale.parse(identifier)


def describe_locale(tag: LocaleTag, display_locale: str = "en") -> str:
    """Return a human-readable name for a tag, e.g. "French (Canada)".

    Tags CLDR does not know (private codes, odd territories) are described
    by their canonical POSIX form instead.

    Args:
        tag: Parsed locale tag
        display_locale: Language to write the name in

    Returns:
        Display name or POSIX identifier
    """
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    try:
        locale = get_babel_locale(tag)
    except (UnknownLocaleError, ValueError) as e:
        logger.debug("No CLDR data for %s: %s", tag, e)
        return str(tag)

    name = locale.get_display_name(display_locale)
    if not name:
        return str(tag)
    if tag.has_modifier:
        name += f" [{tag.modifier}]"
    return name


def clear_locale_cache() -> None:
    """Clear the Babel locale cache.

    Useful for testing or when memory needs to be reclaimed.
    """
    get_babel_locale.cache_clear()
