"""Diagnostic system for tongues errors.

Provides structured error diagnostics with codes, spans and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory, SourceSpan
from .errors import (
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
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "ArgumentTypeError",
    "ColorParseError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "DocumentParseError",
    "ErrorCategory",
    "ErrorTemplate",
    "FallbackCycleError",
    "FileResolutionFailure",
    "KeyNotFound",
    "LocaleParseError",
    "MarkupSyntaxError",
    "OutputFormat",
    "SourceSpan",
    "TonguesError",
]
