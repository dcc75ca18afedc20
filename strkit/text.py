#
# Strkit Text Tools
#

# Standard library -----------------------------------------------------------------------------------------------------
from enum import Enum, unique
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .convert import from_value
from .utils import as_text_like, class_name, coerce_like

__all__ = [
    'DEFAULT_TRIM_CHARS',
    'Direction',
    'cat',
    'replace',
    'split',
    'strip',
    'trim',
]

DEFAULT_TRIM_CHARS = " \t\r\n"


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class Direction(str, Enum):
    """
    Side(s) of a string that trim() works on.

    Members are str subclasses; trim() also accepts the short forms 'l', 'r', 'b'.
    """
    LEFT = "left"
    RIGHT = "right"
    BOTH = "both"


_DIRECTION_ALIASES = {
    "l": Direction.LEFT,
    "r": Direction.RIGHT,
    "b": Direction.BOTH,
}


# Methods --------------------------------------------------------------------------------------------------------------

def cat(*values: Any) -> str:
    """
    Concatenate any number of values into a string.

    Non-string values are rendered with from_value(), so booleans read 'true'/'false'.

    Examples:
        >>> cat("hello ", 23)
        'hello 23'
        >>> cat("127.0.0.1", ':', 7777)
        '127.0.0.1:7777'
        >>> cat()
        ''
    """
    return "".join(from_value(v) for v in values)


def replace(source: str | bytes | bytearray | memoryview,
            sub: str | bytes,
            to: str | bytes,
            max_replacements: int = 0) -> str | bytes:
    """
    Replace occurrences of a substring with another string.

    Matching is leftmost-first and non-overlapping.

    Args:
        source: The string, str or bytes-like. Bytes-like sources return bytes.
        sub: Substring to replace. An empty substring leaves the source unchanged.
        to: Replacement string.
        max_replacements: Max replace times, 0 or negative for unlimited.

    Examples:
        >>> replace("xooxoox", "oo", "ee")
        'xeexeex'
        >>> replace("xooxoox", "oo", "ee", 1)
        'xeexoox'
    """
    source = as_text_like(source)
    sub = coerce_like(sub, source, name="sub")
    to = coerce_like(to, source, name="to")
    if not sub:
        return source
    count = max_replacements if max_replacements > 0 else -1
    return source.replace(sub, to, count)


def split(source: str | bytes | bytearray | memoryview,
          delimiter: str | bytes,
          max_splits: int = 0) -> list[str] | list[bytes]:
    """
    Split a string by a single character or a substring delimiter.

    Leading and interior empty segments are kept, while a single trailing empty segment
    (the source ends right on a delimiter) is dropped. After `max_splits` splits the rest
    of the source, delimiters included, becomes the last segment.

    Args:
        source: The string, str or bytes-like. Bytes-like sources return bytes segments.
        delimiter: Single character or non-empty substring.
        max_splits: Max split times, 0 or negative for unlimited.

    Returns:
        List of segments; [source] when the delimiter is absent, [""] for an empty source.

    Raises:
        ValueError: If the delimiter is empty.
        TypeError: If source or delimiter are not string values.

    Examples:
        >>> split("x y z", ' ')
        ['x', 'y', 'z']
        >>> split("|x|y|", '|')
        ['', 'x', 'y']
        >>> split("xooy", "oo")
        ['x', 'y']
        >>> split("xooy", 'o', 1)
        ['x', 'oy']
    """
    source = as_text_like(source)
    delimiter = coerce_like(delimiter, source, name="delimiter")
    if not delimiter:
        raise ValueError("empty delimiter")
    if not isinstance(max_splits, int):
        raise TypeError(f"max_splits must be int, not {class_name(max_splits)}")

    segments = source.split(delimiter, max_splits if max_splits > 0 else -1)
    if len(segments) > 1 and not segments[-1]:
        segments.pop()
    return segments


def strip(source: str | bytes | bytearray | memoryview,
          chars: str | bytes = DEFAULT_TRIM_CHARS,
          direction: Direction | str = Direction.BOTH) -> str | bytes:
    """Alias of trim()."""
    return trim(source, chars, direction)


def trim(source: str | bytes | bytearray | memoryview,
         chars: str | bytes = DEFAULT_TRIM_CHARS,
         direction: Direction | str = Direction.BOTH) -> str | bytes:
    """
    Trim a set of characters from either end of a string.

    Removes the maximal run of characters found in `chars` from the selected side(s).

    Args:
        source: The string, str or bytes-like. Bytes-like sources return bytes.
        chars: Characters to trim, a single character or a set given as a string.
               Defaults to space, tab, CR and LF. An empty set trims nothing.
        direction: 'l'/'left', 'r'/'right' or 'b'/'both' (default), or a Direction.

    Raises:
        ValueError: If direction is unknown.

    Examples:
        >>> trim(" xx\\r\\n")
        'xx'
        >>> trim("abxxa", "ab")
        'xx'
        >>> trim("abxxa", "ab", 'l')
        'xxa'
        >>> trim("abxxa", "ab", 'r')
        'abxx'
    """
    source = as_text_like(source)
    chars = coerce_like(chars, source, name="chars")
    direction = _direction(direction)
    if not chars:
        return source

    if direction is Direction.LEFT:
        return source.lstrip(chars)
    if direction is Direction.RIGHT:
        return source.rstrip(chars)
    return source.strip(chars)


# Private methods ------------------------------------------------------------------------------------------------------

def _direction(d: Direction | str) -> Direction:
    if isinstance(d, Direction):
        return d
    if not isinstance(d, str):
        raise TypeError(f"direction must be str, not {class_name(d)}")
    key = d.lower()
    if key in _DIRECTION_ALIASES:
        return _DIRECTION_ALIASES[key]
    try:
        return Direction(key)
    except ValueError:
        raise ValueError(f"unknown trim direction {d!r}, expected 'l', 'r', 'b', "
                         f"'left', 'right' or 'both'") from None
