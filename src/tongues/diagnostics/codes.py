"""Error codes and the Diagnostic record shared by every failure.

Codes are grouped by thousands: locale and files, documents and keys,
arguments, markup.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
    "SourceSpan",
]


class ErrorCategory(StrEnum):
    """Pipeline stage at which a failure was detected.

    Categories:
        LOCALE: Locale string could not be parsed
        FILE: Translation file could not be located or read
        DOCUMENT: Translation file content is malformed
        REFERENCE: Message key could not be resolved
        ARGUMENT: Caller-supplied argument is unusable
        MARKUP: Styling markup is malformed
    """

    LOCALE = "locale"
    FILE = "file"
    DOCUMENT = "document"
    REFERENCE = "reference"
    ARGUMENT = "argument"
    MARKUP = "markup"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Locale and file resolution errors
        2000-2999: Document and reference errors
        3000-3999: Argument substitution errors
        4000-4999: Markup and color errors
    """

    # Locale and file resolution (1000-1999)
    LOCALE_INVALID = 1001
    DIRECTORY_UNREADABLE = 1101
    NO_TRANSLATION_FILE = 1102
    FILE_UNREADABLE = 1103

    # Documents and references (2000-2999)
    DOCUMENT_INVALID_TOML = 2001
    DOCUMENT_INVALID_ENCODING = 2002
    DOCUMENT_SCHEMA_VIOLATION = 2003
    KEY_NOT_FOUND = 2101
    FALLBACK_CYCLE = 2102
    FALLBACK_DEPTH_EXCEEDED = 2103

    # Arguments (3000-3999)
    ARGUMENT_NOT_COERCIBLE = 3001
    ARGUMENT_NAME_INVALID = 3002
    ARGUMENTS_NOT_MAPPING = 3003

    # Markup (4000-4999)
    MARKUP_UNTERMINATED_COMMAND = 4001
    MARKUP_UNMATCHED_BRACKET = 4002
    COLOR_INVALID = 4101
    COLOR_OUT_OF_RANGE = 4102


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Half-open ``[start, end)`` character range inside a markup template."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            msg = f"Invalid span start={self.start} end={self.end}: need 0 <= start <= end"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """What went wrong while translating, and where.

    Only ``code`` and ``message`` are always present. The remaining fields
    are filled in by the stage that failed: resolution sets the locale and
    location, key lookup adds the key and fallback chain, substitution adds
    the argument, markup parsing adds the span.

    Attributes:
        code: Unique error code
        message: One-line description
        span: Offset inside the template (markup errors only)
        hint: How to fix it
        location: Translation file or directory involved
        locale_string: Locale being resolved
        message_key: Dotted key being resolved
        argument_name: Placeholder name (substitution errors)
        received_type: Type name of the rejected argument value
        severity: "error" or "warning"
        fallback_chain: Locales visited before the failure, in order
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    location: str | None = None
    locale_string: str | None = None
    message_key: str | None = None
    argument_name: str | None = None
    received_type: str | None = None
    severity: Literal["error", "warning"] = "error"
    fallback_chain: tuple[str, ...] | None = None

    def __str__(self) -> str:
        return self.message

    def format_error(self) -> str:
        """Render with the default (rust-style, uncolored) formatter."""
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
