"""Exception hierarchy with structured diagnostics.

Every failure in the translate pipeline is terminal for the call: the caller
receives either one fully rendered string or one of these exceptions. Each
exception stores an optional Diagnostic for rich error output and the
context (locale string, file path, key) needed to diagnose a misconfigured
translation directory.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, ErrorCategory

__all__ = [
    "ArgumentTypeError",
    "ColorParseError",
    "DocumentParseError",
    "FallbackCycleError",
    "FileResolutionFailure",
    "KeyNotFound",
    "LocaleParseError",
    "MarkupSyntaxError",
    "TonguesError",
]


class TonguesError(Exception):
    """Base exception for all tongues errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    category: ErrorCategory | None = None

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize TonguesError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class LocaleParseError(TonguesError):
    """Locale string does not match language[_territory][.encoding][@modifier].

    Attributes:
        locale_string: The string that failed to parse
    """

    category = ErrorCategory.LOCALE

    def __init__(self, message: str | Diagnostic, *, locale_string: str = "") -> None:
        super().__init__(message)
        self.locale_string = locale_string


class FileResolutionFailure(TonguesError):
    """No usable translation file, or the directory/file could not be read.

    Attributes:
        directory: Directory that was searched
        locale_string: Locale string being resolved
        path: Specific file that failed to open (empty for directory errors)
    """

    category = ErrorCategory.FILE

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        directory: str = "",
        locale_string: str = "",
        path: str = "",
    ) -> None:
        super().__init__(message)
        self.directory = directory
        self.locale_string = locale_string
        self.path = path


class DocumentParseError(TonguesError):
    """Translation file is not valid TOML or violates the document schema.

    Attributes:
        path: File that failed to parse
    """

    category = ErrorCategory.DOCUMENT

    def __init__(self, message: str | Diagnostic, *, path: str = "") -> None:
        super().__init__(message)
        self.path = path


class KeyNotFound(TonguesError):
    """Message key could not be resolved in any reachable document.

    Attributes:
        message_key: Full dotted key requested by the caller
        segment: Path segment that was missing in the last document
        path: Last document searched
    """

    category = ErrorCategory.REFERENCE

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        message_key: str = "",
        segment: str = "",
        path: str = "",
    ) -> None:
        super().__init__(message)
        self.message_key = message_key
        self.segment = segment
        self.path = path


class FallbackCycleError(KeyNotFound):
    """Fallback chain revisits a locale string or exceeds the depth limit.

    Subclass of KeyNotFound: a cycle means the key is absent from every
    document the chain can reach.

    Example:
        en.toml: fallback = "fr"
        fr.toml: fallback = "en"   <- loops back

    Attributes:
        chain: Locale strings visited, in order, ending with the repeat
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        message_key: str = "",
        segment: str = "",
        path: str = "",
        chain: tuple[str, ...] = (),
    ) -> None:
        super().__init__(message, message_key=message_key, segment=segment, path=path)
        self.chain = chain


class ArgumentTypeError(TonguesError):
    """Argument value has no string form (or its name is not a string).

    Attributes:
        argument_name: Name of the offending argument
        received_type: Type name of the offending value
    """

    category = ErrorCategory.ARGUMENT

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        argument_name: str = "",
        received_type: str = "",
    ) -> None:
        super().__init__(message)
        self.argument_name = argument_name
        self.received_type = received_type


class MarkupSyntaxError(TonguesError):
    """Styling command is unterminated or has unmatched color brackets.

    Attributes:
        command: Command text (or remainder) that failed to parse
    """

    category = ErrorCategory.MARKUP

    def __init__(self, message: str | Diagnostic, *, command: str = "") -> None:
        super().__init__(message)
        self.command = command


class ColorParseError(MarkupSyntaxError):
    """Color token is neither a known name, an index, nor an RGB triple.

    Attributes:
        token: Bracket contents of the failing color[...] directive
    """

    def __init__(self, message: str | Diagnostic, *, token: str = "") -> None:
        super().__init__(message, command=token)
        self.token = token
