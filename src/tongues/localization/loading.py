"""Translation file discovery and loading.

Picks the best translation file for a LocaleTag from a directory listing and
loads it into a TranslationDocument. Also provides the FallbackInfo record
handed to observers when resolution moves from one document to the next.

Components:
    candidate_file_names - The four preferred file names for a tag
    find_translation_file - Best match in a directory, or None
    TranslationDocument - Immutable parsed translation file
    load_document - Read and validate one TOML translation file
    list_translations - Inspect every translation file in a directory
    FallbackInfo - Immutable record of a locale fallback event

File selection order for tag (fr, ca, blank, quebec):
    1. fr_ca@quebec.toml
    2. fr_ca.toml
    3. fr@quebec.toml
    4. fr.toml
    5. first file starting with "fr"
    6. first file starting with the default language ("en")

Python 3.13+.
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from os import fspath
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING

from tongues.diagnostics import (
    DocumentParseError,
    ErrorTemplate,
    FileResolutionFailure,
    LocaleParseError,
)
from tongues.locale_utils import LocaleTag, describe_locale, parse_locale
from tongues.localization.config import ResolverConfig

if TYPE_CHECKING:
    from collections.abc import Mapping

    from tongues.localization.types import DirectoryPath, LocaleString, MessageKey

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # File selection
    "candidate_file_names",
    "find_translation_file",
    "list_directory",
    # Documents
    "TranslationDocument",
    "load_document",
    # Directory inspection
    "TranslationFile",
    "list_translations",
    # Fallback observability
    "FallbackInfo",
]

logger = logging.getLogger(__name__)

# Optional top-level string fields of a translation document.
_STRING_FIELDS: tuple[str, ...] = ("language", "territory", "modifier", "fallback")


def candidate_file_names(tag: LocaleTag, extension: str = ".toml") -> tuple[str, ...]:
    """Build the four preferred file names for a tag, most specific first.

    Territory and modifier segments are omitted when they hold the default
    placeholders, so a bare tag like "fr" yields "fr.toml" four times.

    Args:
        tag: Parsed locale tag
        extension: File suffix including the dot

    Returns:
        Tuple of exactly four file names

    Example:
        >>> candidate_file_names(parse_locale("fr_CA@quebec"))
        ('fr_ca@quebec.toml', 'fr_ca.toml', 'fr@quebec.toml', 'fr.toml')
    """
    territory = f"_{tag.territory}" if tag.has_territory else ""
    modifier = f"@{tag.modifier}" if tag.has_modifier else ""
    language = tag.language
    return (
        f"{language}{territory}{modifier}{extension}",
        f"{language}{territory}{extension}",
        f"{language}{modifier}{extension}",
        f"{language}{extension}",
    )


def list_directory(directory: Path) -> tuple[str, ...]:
    """List regular file names in a directory, sorted for deterministic order.

    Non-recursive; subdirectories and other non-file entries are skipped.

    Args:
        directory: Directory to list

    Returns:
        Sorted tuple of file names

    Raises:
        FileResolutionFailure: If the directory is missing or unreadable
    """
    try:
        names = sorted(entry.name for entry in directory.iterdir() if entry.is_file())
    except OSError as e:
        diagnostic = ErrorTemplate.directory_unreadable(fspath(directory), str(e))
        raise FileResolutionFailure(diagnostic, directory=fspath(directory)) from e
    return tuple(names)


def find_translation_file(
    directory: DirectoryPath,
    tag: LocaleTag,
    config: ResolverConfig | None = None,
) -> Path | None:
    """Find the best translation file for a tag.

    Args:
        directory: Directory holding translation files
        tag: Parsed locale tag
        config: Resolver configuration (default: ResolverConfig())

    Returns:
        Path of the selected file, or None if nothing matches

    Raises:
        FileResolutionFailure: If the directory is missing or unreadable
    """
    config = config or ResolverConfig()
    base = Path(directory)
    names = list_directory(base)
    available = frozenset(names)

    for candidate in candidate_file_names(tag, config.extension):
        if candidate in available:
            logger.debug("Selected %s for %s", candidate, tag)
            return base / candidate

    for prefix in (tag.language, config.default_language):
        for name in names:
            if name.startswith(prefix) and name.endswith(config.extension):
                logger.warning(
                    "No exact translation file for %s; using %s (prefix '%s')",
                    tag,
                    name,
                    prefix,
                )
                return base / name

    logger.debug("No translation file for %s in %s", tag, base)
    return None


@dataclass(frozen=True, slots=True)
class TranslationDocument:
    """Parsed translation file.

    Loaded fresh on every resolution attempt and owned by that attempt.

    Attributes:
        messages: Nested message table (read-only view)
        language: Declared language (informational)
        territory: Declared territory (informational)
        modifier: Declared modifier (informational)
        fallback: Locale string to retry with when a key is missing;
                  empty means no fallback
        source_path: File the document was loaded from
    """

    messages: Mapping[str, object]
    language: str = ""
    territory: str = ""
    modifier: str = ""
    fallback: str = ""
    source_path: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, object], source_path: str = "") -> TranslationDocument:
        """Validate a parsed TOML tree against the document schema.

        Args:
            data: Top-level table produced by tomllib
            source_path: File path for diagnostics

        Returns:
            TranslationDocument

        Raises:
            DocumentParseError: If messages is missing or not a table, or a
                string field holds another type
        """
        messages = data.get("messages")
        if not isinstance(messages, dict):
            diagnostic = ErrorTemplate.document_schema_violation(
                source_path, "messages", "a table"
            )
            raise DocumentParseError(diagnostic, path=source_path)

        strings: dict[str, str] = {}
        for name in _STRING_FIELDS:
            value = data.get(name, "")
            if not isinstance(value, str):
                diagnostic = ErrorTemplate.document_schema_violation(
                    source_path, name, "a string"
                )
                raise DocumentParseError(diagnostic, path=source_path)
            strings[name] = value

        return cls(
            messages=MappingProxyType(messages),
            source_path=source_path,
            **strings,
        )

    @property
    def has_fallback(self) -> bool:
        """Check whether the document names a fallback locale."""
        return bool(self.fallback)


def load_document(path: Path) -> TranslationDocument:
    """Read and parse one translation file.

    Args:
        path: File to load

    Returns:
        Validated TranslationDocument

    Raises:
        FileResolutionFailure: If the file cannot be read
        DocumentParseError: If the content is not UTF-8 TOML matching the schema
    """
    source_path = fspath(path)
    try:
        raw = path.read_bytes()
    except OSError as e:
        diagnostic = ErrorTemplate.file_unreadable(source_path, str(e))
        raise FileResolutionFailure(
            diagnostic, directory=fspath(path.parent), path=source_path
        ) from e

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        diagnostic = ErrorTemplate.document_invalid_encoding(source_path)
        raise DocumentParseError(diagnostic, path=source_path) from e

    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        diagnostic = ErrorTemplate.document_invalid_toml(source_path, str(e))
        raise DocumentParseError(diagnostic, path=source_path) from e

    document = TranslationDocument.from_mapping(data, source_path)
    logger.debug(
        "Loaded %s (%d top-level messages, fallback=%r)",
        source_path,
        len(document.messages),
        document.fallback,
    )
    return document


@dataclass(frozen=True, slots=True)
class TranslationFile:
    """A translation file found in a directory.

    Attributes:
        path: File path
        tag: Locale tag parsed from the file name
        display_name: Human-readable locale name from CLDR (e.g., "French (Canada)")
    """

    path: Path
    tag: LocaleTag
    display_name: str = field(default="", compare=False)


def list_translations(
    directory: DirectoryPath,
    config: ResolverConfig | None = None,
) -> tuple[TranslationFile, ...]:
    """Describe every translation file in a directory.

    Files whose names do not start with a language code are skipped with a
    warning; they can never be selected as a candidate either, only through
    the prefix fallback.

    Args:
        directory: Directory holding translation files
        config: Resolver configuration (default: ResolverConfig())

    Returns:
        Tuple of TranslationFile, sorted by file name

    Raises:
        FileResolutionFailure: If the directory is missing or unreadable
    """
    config = config or ResolverConfig()
    base = Path(directory)
    found: list[TranslationFile] = []
    for name in list_directory(base):
        if not name.endswith(config.extension):
            continue
        stem = name.removesuffix(config.extension)
        try:
            tag = parse_locale(stem)
        except LocaleParseError:
            logger.warning("Skipping %s: file name is not a locale", name)
            continue
        found.append(TranslationFile(path=base / name, tag=tag, display_name=describe_locale(tag)))
    return tuple(found)


@dataclass(frozen=True, slots=True)
class FallbackInfo:
    """Information about a locale fallback event.

    Provided to the on_fallback callback when a document lacks the requested
    key and resolution restarts with the document's fallback locale.

    Attributes:
        requested_locale: Locale string that selected the incomplete document
        fallback_locale: Locale string resolution continues with
        message_key: The message key being resolved
        missing_segment: First key segment absent from the document
        source_path: The incomplete document

    Example:
        >>> def log_fallback(info: FallbackInfo) -> None:
        ...     print(f"{info.message_key}: {info.requested_locale} -> "
        ...           f"{info.fallback_locale} ({info.source_path})")
        >>> translator = Translator("locales", on_fallback=log_fallback)
    """

    requested_locale: LocaleString
    fallback_locale: LocaleString
    message_key: MessageKey
    missing_segment: str
    source_path: str
