"""
Debug formatting of values for diagnostics and logging.

dbg() renders scalars, strings, pairs and containers into a compact, human-oriented
string. The output is not meant to be parsed back: quoted strings are not escaped.

Shapes:
    - str, bytes-like        "text"
    - pair (any 2-tuple)     key:value
    - sequence               [e1,e2,...]
    - set                    {e1,e2,...}
    - mapping                {k1:v1,k2:v2,...}
    - anything else          from_value(x), so True renders as true

Dispatch goes by shape (the collection ABCs), not by concrete container type, so a
deque, a frozenset or a frozendict render like a list, a set and a dict.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import collections.abc as abc
from functools import singledispatch
from typing import Any, Iterable

# Local ----------------------------------------------------------------------------------------------------------------
from .convert import from_value

__all__ = ['dbg']


# Methods --------------------------------------------------------------------------------------------------------------

def dbg(value: Any) -> str:
    """
    Convert a value to a debug string.

    Examples:
        >>> dbg([1, 2, 3])
        '[1,2,3]'
        >>> dbg([])
        '[]'
        >>> dbg((1, "a"))
        '1:"a"'
        >>> dbg({"a": [1, 2], "b": []})
        '{"a":[1,2],"b":[]}'
    """
    buf: list[str] = []
    _dbg(value, buf)
    return "".join(buf)


# Private methods ------------------------------------------------------------------------------------------------------

@singledispatch
def _dbg(value: Any, buf: list[str]) -> None:
    buf.append(from_value(value))


@_dbg.register(str)
@_dbg.register(bytes)
@_dbg.register(bytearray)
@_dbg.register(memoryview)
def _dbg_text(value, buf: list[str]) -> None:
    buf.append('"')
    buf.append(from_value(value))
    buf.append('"')


@_dbg.register(tuple)
def _dbg_tuple(value: tuple, buf: list[str]) -> None:
    if len(value) == 2:
        _dbg_pair(value[0], value[1], buf)
    else:
        _dbg_items(value, "[", "]", buf)


@_dbg.register(abc.Sequence)
def _dbg_sequence(value: abc.Sequence, buf: list[str]) -> None:
    _dbg_items(value, "[", "]", buf)


@_dbg.register(abc.Set)
def _dbg_set(value: abc.Set, buf: list[str]) -> None:
    _dbg_items(value, "{", "}", buf)


@_dbg.register(abc.Mapping)
def _dbg_mapping(value: abc.Mapping, buf: list[str]) -> None:
    _dbg_items(value.items(), "{", "}", buf)


def _dbg_pair(key: Any, val: Any, buf: list[str]) -> None:
    _dbg(key, buf)
    buf.append(":")
    _dbg(val, buf)


def _dbg_items(items: Iterable[Any], open_ch: str, close_ch: str, buf: list[str]) -> None:
    start = len(buf)
    buf.append(open_ch)
    for x in items:
        _dbg(x, buf)
        buf.append(",")

    # Closing bracket takes the place of the last separator
    if len(buf) > start + 1:
        buf[-1] = close_ch
    else:
        buf.append(close_ch)
