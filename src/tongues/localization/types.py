"""Type aliases for the localization domain.

Provides semantic type aliases used throughout the localization package
and by user code when annotating Translator call sites.

Python 3.13+. Zero external dependencies.
"""

from os import PathLike

__all__ = [
    "DirectoryPath",
    "KeyPath",
    "LocaleString",
    "MessageKey",
    "Template",
]

type MessageKey = str
"""Dotted message key (e.g., 'greeting.formal.morning')."""

type KeyPath = tuple[str, ...]
"""Message key split into table lookups (e.g., ('greeting', 'formal', 'morning'))."""

type LocaleString = str
"""Raw POSIX locale preference (e.g., 'en_US.UTF-8', 'fr_CA@quebec')."""

type DirectoryPath = str | PathLike[str]
"""Directory holding one translation document per locale."""

type Template = str
"""Resolved message text, still containing ($name) placeholders and markup."""
