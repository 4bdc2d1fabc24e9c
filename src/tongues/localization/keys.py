"""Message key splitting.

A message key is a dot-delimited path of table keys. Splitting is purely
lexical: empty segments (from leading, trailing or doubled dots) are kept
and simply fail to match any table key during resolution.

Python 3.13+. Zero external dependencies.
"""

from tongues.localization.types import KeyPath, MessageKey

__all__ = ["KEY_SEPARATOR", "format_key_path", "split_key"]

KEY_SEPARATOR: str = "."


def split_key(message_key: MessageKey) -> KeyPath:
    """Split a dotted message key into path segments.

    Args:
        message_key: Key such as "greeting.formal.morning"

    Returns:
        Tuple of segments, empty strings preserved

    Example:
        >>> split_key("greeting.formal")
        ('greeting', 'formal')
        >>> split_key("a..b")
        ('a', '', 'b')
    """
    return tuple(message_key.split(KEY_SEPARATOR))


def format_key_path(path: KeyPath) -> MessageKey:
    """Join segments back into a dotted key (inverse of split_key)."""
    return KEY_SEPARATOR.join(path)
