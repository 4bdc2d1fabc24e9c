"""Translation lookup package.

Provides the full lookup stack: type aliases, configuration, key splitting,
file discovery and loading, and the fallback-following resolver.

Submodules:
    types        - PEP 695 type aliases (MessageKey, KeyPath, LocaleString, ...)
    config       - ResolverConfig
    keys         - split_key, format_key_path
    loading      - candidate_file_names, find_translation_file, TranslationDocument,
                   load_document, list_translations, FallbackInfo
    orchestrator - resolve_message, Translator, translate

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from tongues.localization.config import ResolverConfig
from tongues.localization.keys import format_key_path, split_key
from tongues.localization.loading import (
    FallbackInfo,
    TranslationDocument,
    TranslationFile,
    candidate_file_names,
    find_translation_file,
    list_translations,
    load_document,
)
from tongues.localization.orchestrator import (
    ResolvedMessage,
    Translator,
    lookup_key,
    resolve_message,
    translate,
)
from tongues.localization.types import (
    DirectoryPath,
    KeyPath,
    LocaleString,
    MessageKey,
    Template,
)

__all__ = [
    # Main entry points
    "Translator",
    "translate",
    "resolve_message",
    "ResolvedMessage",
    # Configuration
    "ResolverConfig",
    # Keys
    "split_key",
    "format_key_path",
    "lookup_key",
    # File discovery and loading
    "candidate_file_names",
    "find_translation_file",
    "load_document",
    "list_translations",
    "TranslationDocument",
    "TranslationFile",
    # Fallback observability
    "FallbackInfo",
    # Type aliases for user code type annotations
    "DirectoryPath",
    "KeyPath",
    "LocaleString",
    "MessageKey",
    "Template",
]
