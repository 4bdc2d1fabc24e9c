"""Message resolution with locale fallback chains.

Implements the translate pipeline:

    locale string -> LocaleTag -> best file -> TranslationDocument
        -> walk key path (restart with document.fallback on a miss)
        -> template -> argument substitution -> markup -> rendered string

Key architectural decisions:
- No caching: every call lists the directory and reads the selected files
  again, so edits to translation files take effect immediately
- Fallback chains are followed strictly sequentially and guarded by a
  visited-locale set, so a chain that loops raises FallbackCycleError
- Errors are terminal: a call returns one rendered string or raises

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import date, datetime, time
from os import fspath
from typing import TYPE_CHECKING

from tongues.diagnostics import (
    ErrorTemplate,
    FallbackCycleError,
    FileResolutionFailure,
    KeyNotFound,
)
from tongues.locale_utils import get_system_locale, parse_locale
from tongues.localization.config import ResolverConfig
from tongues.localization.keys import split_key
from tongues.localization.loading import (
    FallbackInfo,
    find_translation_file,
    load_document,
)
from tongues.runtime.arguments import ArgumentValue, substitute_arguments
from tongues.runtime.markup import StyledRun, compile_markup, render_runs

if TYPE_CHECKING:
    from tongues.localization.types import (
        DirectoryPath,
        KeyPath,
        LocaleString,
        MessageKey,
        Template,
    )

__all__ = [
    "ResolvedMessage",
    "Translator",
    "lookup_key",
    "resolve_message",
    "stringify_value",
    "translate",
]

logger = logging.getLogger(__name__)

type FallbackCallback = Callable[[FallbackInfo], None]


@dataclass(frozen=True, slots=True)
class ResolvedMessage:
    """Result of resolving one key.

    Attributes:
        template: Raw message text (placeholders and markup not yet applied)
        locale_string: Locale string whose document contained the key
        source_path: File the template came from
        fallback_chain: Locale strings tried, in order, ending with locale_string
        attempts: Files loaded, in order, ending with source_path
    """

    template: Template
    locale_string: LocaleString
    source_path: str
    fallback_chain: tuple[LocaleString, ...]
    attempts: tuple[str, ...]

    @property
    def used_fallback(self) -> bool:
        """Check whether the key came from a document other than the first."""
        return len(self.attempts) > 1


def lookup_key(messages: Mapping[str, object], path: KeyPath) -> tuple[object, str | None]:
    """Walk a message tree along a key path.

    Args:
        messages: The [messages] table of a document
        path: Key segments

    Returns:
        (value, None) when every segment resolves, otherwise
        (None, first_missing_segment)

    Example:
        >>> lookup_key({"greeting": {"formal": "Good day"}}, ("greeting", "formal"))
        ('Good day', None)
        >>> lookup_key({"greeting": "hi"}, ("greeting", "missing"))
        (None, 'missing')
    """
    node: object = messages
    for segment in path:
        if isinstance(node, Mapping) and segment in node:
            node = node[segment]
        else:
            return None, segment
    return node, None


def _inline_value(value: object) -> str:
    """Render a value nested inside an array or table, TOML style."""
    if isinstance(value, str):
        escaped = value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
        return f'"{escaped}"'
    return stringify_value(value)


def stringify_value(value: object) -> str:
    """Convert a resolved TOML value to template text.

    Strings are returned verbatim. Other values are written the way TOML
    would write them, so a key that points at a table still renders.

    Args:
        value: Value found at the end of a key path

    Returns:
        Template text

    Example:
        >>> stringify_value(True)
        'true'
        >>> stringify_value({"a": "b", "n": [1, 2]})
        '{ a = "b", n = [1, 2] }'
    """
    match value:
        case str():
            return value
        case bool():
            return "true" if value else "false"
        case int() | float():
            return str(value)
        case datetime() | date() | time():
            return value.isoformat()
        case list():
            return "[" + ", ".join(_inline_value(item) for item in value) + "]"
        case Mapping():
            if not value:
                return "{}"
            entries = ", ".join(f"{key} = {_inline_value(item)}" for key, item in value.items())
            return "{ " + entries + " }"
        case _:
            return str(value)


def resolve_message(
    directory: DirectoryPath,
    message_key: MessageKey,
    locale_string: LocaleString | None = None,
    *,
    config: ResolverConfig | None = None,
    on_fallback: FallbackCallback | None = None,
) -> ResolvedMessage:
    """Resolve a dotted key to its raw template, following fallbacks.

    Algorithm:
        1. Parse the current locale string
        2. Select the best file in the directory
        3. Load the document
        4. Walk the key path; on success return the value
        5. On a miss, continue with the document's fallback locale

    Args:
        directory: Directory holding translation files
        message_key: Dotted key, e.g. "greeting.formal"
        locale_string: Starting locale; None reads config.locale_env_var
        config: Resolver configuration (default: ResolverConfig())
        on_fallback: Called with a FallbackInfo each time a document lacks
            the key and resolution moves to its fallback

    Returns:
        ResolvedMessage

    Raises:
        LocaleParseError: If a locale string in the chain is malformed
        FileResolutionFailure: If no file matches or the directory is unreadable
        DocumentParseError: If a selected file is malformed
        KeyNotFound: If the chain ends without finding the key
        FallbackCycleError: If the chain loops or exceeds max_fallback_depth
    """
    config = config or ResolverConfig()
    current = (
        locale_string
        if locale_string is not None
        else get_system_locale(config.locale_env_var, default=config.default_language)
    )
    path = split_key(message_key)
    visited: list[LocaleString] = []
    attempts: list[str] = []

    while True:
        if current in visited:
            chain = (*visited, current)
            diagnostic = ErrorTemplate.fallback_cycle(message_key, attempts[-1], chain)
            raise FallbackCycleError(
                diagnostic, message_key=message_key, path=attempts[-1], chain=chain
            )
        if len(visited) >= config.max_fallback_depth:
            chain = (*visited, current)
            diagnostic = ErrorTemplate.fallback_depth_exceeded(
                message_key, config.max_fallback_depth, chain
            )
            raise FallbackCycleError(
                diagnostic, message_key=message_key, path=attempts[-1], chain=chain
            )
        visited.append(current)

        tag = parse_locale(current)
        file_path = find_translation_file(directory, tag, config)
        if file_path is None:
            diagnostic = ErrorTemplate.no_translation_file(
                fspath(directory), current, tag.language, config.default_language
            )
            raise FileResolutionFailure(
                diagnostic, directory=fspath(directory), locale_string=current
            )

        document = load_document(file_path)
        attempts.append(document.source_path)
        value, missing = lookup_key(document.messages, path)

        if missing is None:
            logger.debug("Resolved '%s' from %s", message_key, document.source_path)
            return ResolvedMessage(
                template=stringify_value(value),
                locale_string=current,
                source_path=document.source_path,
                fallback_chain=tuple(visited),
                attempts=tuple(attempts),
            )

        if not document.has_fallback:
            diagnostic = ErrorTemplate.key_not_found(
                message_key, missing, document.source_path, tuple(visited)
            )
            raise KeyNotFound(
                diagnostic,
                message_key=message_key,
                segment=missing,
                path=document.source_path,
            )

        logger.info(
            "Key '%s' missing segment %r in %s; falling back to %r",
            message_key,
            missing,
            document.source_path,
            document.fallback,
        )
        if on_fallback is not None:
            on_fallback(
                FallbackInfo(
                    requested_locale=current,
                    fallback_locale=document.fallback,
                    message_key=message_key,
                    missing_segment=missing,
                    source_path=document.source_path,
                )
            )
        current = document.fallback


class Translator:
    """Translate message keys against one translation directory.

    Holds only configuration; every call re-reads the directory, so a
    Translator can be shared freely between threads.

    Example:
        >>> translator = Translator("locales")
        >>> translator.translate("greeting.hello", {"name": "Ada"}, locale="fr_FR")
        'Bonjour, Ada!'

    Attributes:
        directory: Translation directory
        config: Resolver configuration
    """

    __slots__ = ("_config", "_directory", "_on_fallback")

    def __init__(
        self,
        directory: DirectoryPath,
        *,
        config: ResolverConfig | None = None,
        on_fallback: FallbackCallback | None = None,
    ) -> None:
        """Initialize translator.

        Args:
            directory: Directory holding translation files
            config: Resolver configuration (default: ResolverConfig())
            on_fallback: Optional observer for locale fallback events
        """
        self._directory = directory
        self._config = config or ResolverConfig()
        self._on_fallback = on_fallback

    @property
    def directory(self) -> DirectoryPath:
        """Get the translation directory."""
        return self._directory

    @property
    def config(self) -> ResolverConfig:
        """Get the resolver configuration (read-only)."""
        return self._config

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"Translator(directory={fspath(self._directory)!r})"

    def resolve(
        self, message_key: MessageKey, locale: LocaleString | None = None
    ) -> ResolvedMessage:
        """Resolve a key to its raw template (no substitution, no markup).

        Args:
            message_key: Dotted key
            locale: Starting locale; None reads the configured environment variable

        Returns:
            ResolvedMessage
        """
        return resolve_message(
            self._directory,
            message_key,
            locale,
            config=self._config,
            on_fallback=self._on_fallback,
        )

    def compile(
        self,
        message_key: MessageKey,
        args: Mapping[str, ArgumentValue] | None = None,
        *,
        locale: LocaleString | None = None,
    ) -> tuple[StyledRun, ...]:
        """Resolve, substitute arguments, and compile markup into styled runs.

        Arguments are substituted before markup is compiled, so argument
        values may themselves contain styling commands.
        """
        template = self.resolve(message_key, locale).template
        return compile_markup(substitute_arguments(template, args))

    def translate(
        self,
        message_key: MessageKey,
        args: Mapping[str, ArgumentValue] | None = None,
        *,
        locale: LocaleString | None = None,
        color: bool = True,
    ) -> str:
        """Produce the final rendered string for a key.

        Args:
            message_key: Dotted key
            args: Values for ($name) placeholders (optional)
            locale: Starting locale; None reads the configured environment variable
            color: Emit ANSI escape sequences (False strips styling)

        Returns:
            Rendered string

        Raises:
            TonguesError: Any subclass; see resolve_message, substitute_arguments
                and compile_markup
        """
        return render_runs(self.compile(message_key, args, locale=locale), color=color)


def translate(
    directory: DirectoryPath,
    message_key: MessageKey,
    args: Mapping[str, ArgumentValue] | None = None,
    *,
    locale: LocaleString | None = None,
    color: bool = True,
    config: ResolverConfig | None = None,
) -> str:
    """One-shot translation; see Translator.translate.

    Example:
        >>> translate("locales", "greeting.hello", {"name": "Ada"}, locale="en")
        'Hello, Ada!'
    """
    return Translator(directory, config=config).translate(
        message_key, args, locale=locale, color=color
    )
