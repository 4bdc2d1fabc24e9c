"""Argument substitution for resolved templates.

Replaces ``($name)`` placeholders with caller-supplied values. This is flat
text substitution, not templating: there are no expressions, no selectors
and no escaping. Placeholders without a matching argument stay verbatim.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from datetime import date, datetime
from decimal import Decimal

from tongues.constants import PLACEHOLDER_TEMPLATE
from tongues.diagnostics import ArgumentTypeError, ErrorTemplate

__all__ = [
    "ArgumentValue",
    "coerce_argument",
    "find_placeholders",
    "substitute_arguments",
]

logger = logging.getLogger(__name__)

type ArgumentValue = str | int | float | Decimal | bool | date | datetime | bytes
"""Values with a display string form.

bool renders as true/false, date and datetime as ISO 8601, bytes must be UTF-8.
"""

_PLACEHOLDER_PATTERN = re.compile(r"\(\$([^()\s]+)\)")


def coerce_argument(name: str, value: object) -> str:
    """Convert an argument value to its display string.

    Args:
        name: Argument name (for diagnostics)
        value: Argument value

    Returns:
        String form of the value

    Raises:
        ArgumentTypeError: If the value has no string form

    Example:
        >>> coerce_argument("count", 3)
        '3'
        >>> coerce_argument("ok", True)
        'true'
    """
    match value:
        case str():
            return value
        case bool():
            return "true" if value else "false"
        case int() | float() | Decimal():
            return str(value)
        case date():  # includes datetime
            return value.isoformat()
        case bytes():
            try:
                return value.decode("utf-8")
            except UnicodeDecodeError as e:
                diagnostic = ErrorTemplate.argument_not_coercible(name, value)
                raise ArgumentTypeError(
                    diagnostic, argument_name=name, received_type="bytes"
                ) from e
        case _:
            diagnostic = ErrorTemplate.argument_not_coercible(name, value)
            raise ArgumentTypeError(
                diagnostic, argument_name=name, received_type=type(value).__name__
            )


def substitute_arguments(
    template: str,
    args: Mapping[str, ArgumentValue] | None = None,
) -> str:
    """Replace every ($name) placeholder with the matching argument.

    Each argument is applied exhaustively before the next one, in mapping
    order. A value that itself contains "($other)" can therefore be expanded
    by a later argument; callers should not rely on either order.

    Args:
        template: Resolved message text
        args: Flat mapping of argument name to value (optional)

    Returns:
        Template with supplied placeholders replaced

    Raises:
        ArgumentTypeError: If args is not a mapping, a name is not a string,
            or a value has no string form

    Example:
        >>> substitute_arguments("Hello, ($name)!", {"name": "Ada"})
        'Hello, Ada!'
        >>> substitute_arguments("Hello, ($other)!", {"name": "Ada"})
        'Hello, ($other)!'
    """
    if args is None:
        return template
    if not isinstance(args, Mapping):
        diagnostic = ErrorTemplate.arguments_not_mapping(args)
        raise ArgumentTypeError(diagnostic, received_type=type(args).__name__)

    result = template
    for name, value in args.items():
        if not isinstance(name, str):
            diagnostic = ErrorTemplate.argument_name_invalid(name)
            raise ArgumentTypeError(diagnostic, received_type=type(name).__name__)
        text = coerce_argument(name, value)
        result = result.replace(PLACEHOLDER_TEMPLATE.format(name=name), text)

    unresolved = [name for name in find_placeholders(result) if name not in args]
    if unresolved:
        logger.debug("Placeholders left unsubstituted: %s", ", ".join(unresolved))
    return result


def find_placeholders(template: str) -> tuple[str, ...]:
    """List placeholder names in order of first appearance.

    Args:
        template: Message text

    Returns:
        Unique placeholder names, e.g. ("name", "count")
    """
    return tuple(dict.fromkeys(_PLACEHOLDER_PATTERN.findall(template)))
