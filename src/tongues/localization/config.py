"""Resolver configuration.

Provides a single frozen dataclass that encapsulates every tunable of the
translation lookup: file extension, last-resort language, environment
variable, and the fallback chain limit.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from tongues.constants import (
    DEFAULT_LANGUAGE,
    LOCALE_ENV_VAR,
    MAX_FALLBACK_DEPTH,
    TRANSLATION_EXTENSION,
)

__all__ = ["ResolverConfig"]


@dataclass(frozen=True, slots=True)
class ResolverConfig:
    """Immutable configuration for message resolution.

    All fields have sensible defaults; ``ResolverConfig()`` matches the
    standard directory convention of ``<language>[_<territory>][@<modifier>].toml``
    files with English as the last resort.

    Attributes:
        extension: Translation file suffix including the dot (default: ".toml").
        default_language: Filename prefix tried when no file matches the
            requested language (default: "en").
        locale_env_var: Environment variable read when the caller supplies no
            locale (default: "LANG").
        max_fallback_depth: Maximum documents visited for one key
            (default: 32). Cycles are detected before this limit is reached.

    Example:
        >>> config = ResolverConfig(default_language="de")
        >>> translator = Translator("locales", config=config)
    """

    extension: str = TRANSLATION_EXTENSION
    default_language: str = DEFAULT_LANGUAGE
    locale_env_var: str = LOCALE_ENV_VAR
    max_fallback_depth: int = MAX_FALLBACK_DEPTH

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If extension does not start with '.', default_language
                is empty or non-alphabetic, locale_env_var is empty, or
                max_fallback_depth is not positive.
        """
        if not self.extension.startswith(".") or len(self.extension) < 2:
            msg = f"extension must start with '.', got {self.extension!r}"
            raise ValueError(msg)
        if not self.default_language.isalpha():
            msg = f"default_language must be letters only, got {self.default_language!r}"
            raise ValueError(msg)
        if not self.locale_env_var:
            msg = "locale_env_var must not be empty"
            raise ValueError(msg)
        if self.max_fallback_depth <= 0:
            msg = "max_fallback_depth must be positive"
            raise ValueError(msg)
