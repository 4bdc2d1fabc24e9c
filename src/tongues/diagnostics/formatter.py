"""Text and JSON rendering of Diagnostic records.

Renders Diagnostic objects for terminals (rust, simple) and for tooling
(json). Context lines (locale, key, fallback chain, argument) are collected
once and shared by every output format.

Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]

_SEVERITY_COLORS = {"error": "\033[1;31m", "warning": "\033[1;33m"}
_RESET = "\033[0m"


class OutputFormat(StrEnum):
    """How DiagnosticFormatter lays out a diagnostic."""

    RUST = "rust"  # header, arrow line, "= label: value" lines
    SIMPLE = "simple"  # CODE: message
    JSON = "json"  # one object per diagnostic


def _context(diagnostic: Diagnostic) -> list[tuple[str, str, str | list[str]]]:
    """Collect (label, json key, value) for every populated context field."""
    fields: list[tuple[str, str, str | list[str]]] = []
    if diagnostic.locale_string is not None:
        fields.append(("locale", "locale", diagnostic.locale_string))
    if diagnostic.message_key is not None:
        fields.append(("key", "message_key", diagnostic.message_key))
    if diagnostic.fallback_chain:
        fields.append(("fallback chain", "fallback_chain", list(diagnostic.fallback_chain)))
    if diagnostic.argument_name:
        fields.append(("argument", "argument_name", diagnostic.argument_name))
    if diagnostic.received_type:
        fields.append(("received", "received_type", diagnostic.received_type))
    return fields


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Renders diagnostics for the CLI and for log output.

    Attributes:
        output_format: Layout to use
        sanitize: Truncate message and hint text to max_content_length
        color: Highlight the severity with ANSI codes (rust format only)
        max_content_length: Maximum message length when sanitizing

    Example:
        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(ErrorTemplate.locale_invalid("")))
        LOCALE_INVALID: Locale string '' has no language component
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic in the configured output format."""
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return f"{diagnostic.code.name}: {self._clip(diagnostic.message)}"
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics separated by blank lines."""
        return "\n\n".join(self.format(d) for d in diagnostics)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Multi-line layout modelled on compiler errors.

            error[NO_TRANSLATION_FILE]: No translation file for 'fr_FR' in 'locales'
              --> locales
              = locale: fr_FR
              = help: Add a file starting with 'fr' or 'en' to the directory
        """
        severity = diagnostic.severity
        if self.color:
            severity = f"{_SEVERITY_COLORS[severity]}{severity}{_RESET}"

        lines = [f"{severity}[{diagnostic.code.name}]: {self._clip(diagnostic.message)}"]
        if diagnostic.location:
            lines.append(f"  --> {diagnostic.location}")
        elif diagnostic.span:
            lines.append(f"  --> offset {diagnostic.span.start}..{diagnostic.span.end}")

        for label, _, value in _context(diagnostic):
            text = " -> ".join(value) if isinstance(value, list) else value
            lines.append(f"  = {label}: {text}")

        if diagnostic.hint:
            lines.append(f"  = help: {self._clip(diagnostic.hint)}")
        return "\n".join(lines)

    def _format_json(self, diagnostic: Diagnostic) -> str:
        """One JSON object on a single line; context fields only when set."""
        data: dict[str, object] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": self._clip(diagnostic.message),
            "severity": diagnostic.severity,
        }
        if diagnostic.span:
            data["start"] = diagnostic.span.start
            data["end"] = diagnostic.span.end
        if diagnostic.location:
            data["location"] = diagnostic.location
        data.update((key, value) for _, key, value in _context(diagnostic))
        if diagnostic.hint:
            data["hint"] = self._clip(diagnostic.hint)
        return json.dumps(data, ensure_ascii=False)

    def _clip(self, text: str) -> str:
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
