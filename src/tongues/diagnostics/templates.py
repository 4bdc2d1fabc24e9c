"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every error case in one place.
    """

    # Locale and file resolution

    @staticmethod
    def locale_invalid(locale_string: str) -> Diagnostic:
        """Locale string has no parseable language component.

        Args:
            locale_string: The string that failed to parse

        Returns:
            Diagnostic for LOCALE_INVALID
        """
        msg = f"Locale string {locale_string!r} has no language component"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_INVALID,
            message=msg,
            hint="Use the form language[_territory][.encoding][@modifier], e.g. 'en_US.UTF-8'",
            locale_string=locale_string,
        )

    @staticmethod
    def directory_unreadable(directory: str, reason: str) -> Diagnostic:
        """Translation directory is missing or cannot be listed.

        Args:
            directory: Directory path
            reason: Operating system error text

        Returns:
            Diagnostic for DIRECTORY_UNREADABLE
        """
        msg = f"Cannot read translation directory {directory!r}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.DIRECTORY_UNREADABLE,
            message=msg,
            hint="Check that the path exists and is a readable directory",
            location=directory,
        )

    @staticmethod
    def no_translation_file(
        directory: str, locale_string: str, language: str, default_language: str
    ) -> Diagnostic:
        """No candidate, language-prefix, or default-language file exists.

        Args:
            directory: Directory that was searched
            locale_string: Locale string being resolved
            language: Parsed language of the locale string
            default_language: Last-resort language prefix

        Returns:
            Diagnostic for NO_TRANSLATION_FILE
        """
        msg = f"No translation file for {locale_string!r} in {directory!r}"
        return Diagnostic(
            code=DiagnosticCode.NO_TRANSLATION_FILE,
            message=msg,
            hint=(
                f"Add a file starting with '{language}' or '{default_language}' "
                "to the directory"
            ),
            location=directory,
            locale_string=locale_string,
        )

    @staticmethod
    def file_unreadable(path: str, reason: str) -> Diagnostic:
        """Selected translation file cannot be opened.

        Args:
            path: File path
            reason: Operating system error text

        Returns:
            Diagnostic for FILE_UNREADABLE
        """
        msg = f"Failed to open translation file {path!r}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.FILE_UNREADABLE,
            message=msg,
            location=path,
        )

    # Documents

    @staticmethod
    def document_invalid_toml(path: str, reason: str) -> Diagnostic:
        """Translation file is not valid TOML.

        Args:
            path: File path
            reason: Parser error text (includes line and column)

        Returns:
            Diagnostic for DOCUMENT_INVALID_TOML
        """
        msg = f"Translation file {path!r} is not valid TOML: {reason}"
        return Diagnostic(
            code=DiagnosticCode.DOCUMENT_INVALID_TOML,
            message=msg,
            location=path,
        )

    @staticmethod
    def document_invalid_encoding(path: str) -> Diagnostic:
        """Translation file is not UTF-8."""
        msg = f"Translation file {path!r} is not valid UTF-8"
        return Diagnostic(
            code=DiagnosticCode.DOCUMENT_INVALID_ENCODING,
            message=msg,
            hint="TOML documents must be encoded as UTF-8",
            location=path,
        )

    @staticmethod
    def document_schema_violation(path: str, field: str, expected: str) -> Diagnostic:
        """Translation file is missing a field or has a field of the wrong type.

        Args:
            path: File path
            field: Offending top-level field
            expected: Description of the expected value

        Returns:
            Diagnostic for DOCUMENT_SCHEMA_VIOLATION
        """
        msg = f"Field '{field}' in {path!r} must be {expected}"
        return Diagnostic(
            code=DiagnosticCode.DOCUMENT_SCHEMA_VIOLATION,
            message=msg,
            hint="Documents need a [messages] table; language, territory, modifier "
            "and fallback are optional strings",
            location=path,
        )

    # References

    @staticmethod
    def key_not_found(
        message_key: str, segment: str, path: str, chain: tuple[str, ...]
    ) -> Diagnostic:
        """Key absent and the document declares no fallback.

        Args:
            message_key: Full dotted key
            segment: First segment that did not resolve
            path: Last document searched
            chain: Locale strings visited

        Returns:
            Diagnostic for KEY_NOT_FOUND
        """
        msg = f"Message key '{message_key}' not found (missing segment {segment!r})"
        return Diagnostic(
            code=DiagnosticCode.KEY_NOT_FOUND,
            message=msg,
            hint="Add the key to the file or set its 'fallback' field",
            location=path,
            message_key=message_key,
            fallback_chain=chain,
        )

    @staticmethod
    def fallback_cycle(message_key: str, path: str, chain: tuple[str, ...]) -> Diagnostic:
        """Fallback chain returned to a locale string it already tried.

        Args:
            message_key: Full dotted key
            path: Document whose fallback closed the loop
            chain: Locale strings visited, ending with the repeated one

        Returns:
            Diagnostic for FALLBACK_CYCLE
        """
        msg = f"Fallback cycle while resolving '{message_key}': {' -> '.join(chain)}"
        return Diagnostic(
            code=DiagnosticCode.FALLBACK_CYCLE,
            message=msg,
            hint="Break the loop by pointing one document's 'fallback' at a complete file",
            location=path,
            message_key=message_key,
            fallback_chain=chain,
        )

    @staticmethod
    def fallback_depth_exceeded(
        message_key: str, max_depth: int, chain: tuple[str, ...]
    ) -> Diagnostic:
        """Fallback chain is longer than the configured limit."""
        msg = f"Fallback chain for '{message_key}' exceeded {max_depth} documents"
        return Diagnostic(
            code=DiagnosticCode.FALLBACK_DEPTH_EXCEEDED,
            message=msg,
            message_key=message_key,
            fallback_chain=chain,
        )

    # Arguments

    @staticmethod
    def argument_not_coercible(name: str, value: object) -> Diagnostic:
        """Argument value has no string form.

        Args:
            name: Argument name
            value: Offending value

        Returns:
            Diagnostic for ARGUMENT_NOT_COERCIBLE
        """
        type_name = type(value).__name__
        msg = f"Argument '{name}' of type {type_name} cannot be converted to a string"
        return Diagnostic(
            code=DiagnosticCode.ARGUMENT_NOT_COERCIBLE,
            message=msg,
            hint="Pass str, int, float, Decimal, bool, date, datetime or UTF-8 bytes",
            argument_name=name,
            received_type=type_name,
        )

    @staticmethod
    def argument_name_invalid(name: object) -> Diagnostic:
        """Argument mapping has a non-string key."""
        type_name = type(name).__name__
        msg = f"Argument names must be strings, got {type_name} {name!r}"
        return Diagnostic(
            code=DiagnosticCode.ARGUMENT_NAME_INVALID,
            message=msg,
            received_type=type_name,
        )

    @staticmethod
    def arguments_not_mapping(args: object) -> Diagnostic:
        """Arguments were passed as something other than a mapping."""
        type_name = type(args).__name__
        msg = f"Invalid args type: expected Mapping or None, got {type_name}"
        return Diagnostic(
            code=DiagnosticCode.ARGUMENTS_NOT_MAPPING,
            message=msg,
            received_type=type_name,
        )

    # Markup

    @staticmethod
    def markup_unterminated(command: str, offset: int) -> Diagnostic:
        """Styling command has no closing parenthesis.

        Args:
            command: Text following the marker
            offset: Position of the marker in the template

        Returns:
            Diagnostic for MARKUP_UNTERMINATED_COMMAND
        """
        msg = f"Styling command {command!r} is missing its closing ')'"
        return Diagnostic(
            code=DiagnosticCode.MARKUP_UNTERMINATED_COMMAND,
            message=msg,
            span=SourceSpan(start=offset, end=offset + len(command)),
            hint="Write commands as (ansi bold color[red])text",
        )

    @staticmethod
    def markup_unmatched_bracket(command: str, occurrence: int) -> Diagnostic:
        """A color directive has no matching ']' or no opening '['.

        Args:
            command: Full command text
            occurrence: 1-based index of the failing color directive

        Returns:
            Diagnostic for MARKUP_UNMATCHED_BRACKET
        """
        msg = f"Color directive #{occurrence} in command {command!r} has unmatched brackets"
        return Diagnostic(
            code=DiagnosticCode.MARKUP_UNMATCHED_BRACKET,
            message=msg,
            hint="Each 'color' must be written color[...]",
        )

    @staticmethod
    def color_invalid(token: str) -> Diagnostic:
        """Color token is not a name, an index, or an RGB triple.

        Args:
            token: Bracket contents

        Returns:
            Diagnostic for COLOR_INVALID
        """
        msg = f"Invalid color {token!r}"
        return Diagnostic(
            code=DiagnosticCode.COLOR_INVALID,
            message=msg,
            hint="Use a color name (red, lightblue, ...), an index 0-255, or r;g;b",
        )

    @staticmethod
    def color_out_of_range(token: str, component: str) -> Diagnostic:
        """Numeric color component outside 0..255."""
        msg = f"Color component {component!r} in {token!r} is outside 0-255"
        return Diagnostic(
            code=DiagnosticCode.COLOR_OUT_OF_RANGE,
            message=msg,
        )
