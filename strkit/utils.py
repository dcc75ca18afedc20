"""
Strkit utilities shared across the package.

Contains the string-representation helpers used by multiple modules to avoid circular imports.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any, overload

# Classes --------------------------------------------------------------------------------------------------------------

BYTES_LIKE = (bytes, bytearray, memoryview)


# Methods --------------------------------------------------------------------------------------------------------------


def class_name(obj: Any, fully_qualified: bool = False) -> str:
    """
    Get the class name of an object or a class.

    Returns class name whether given an instance or the class itself.
    For example, both `class_name(10)` and `class_name(int)` return 'int'.
    Builtins are never qualified.

    Examples:
        >>> class_name(b"x")
        'bytes'
        >>> class C: ...
        >>> class_name(C, fully_qualified=True)
        'strkit.utils.C'
    """
    cls = obj if isinstance(obj, type) else obj.__class__
    if fully_qualified and cls.__module__ != "builtins":
        return cls.__module__ + "." + cls.__name__
    return cls.__name__


@overload
def as_text_like(s: str) -> str: ...


@overload
def as_text_like(s: bytes | bytearray | memoryview) -> bytes: ...


def as_text_like(s: str | bytes | bytearray | memoryview) -> str | bytes:
    """Normalize a string value to one of the two owned representations, str or bytes.

    Mutable or borrowed byte views (bytearray, memoryview) are copied into bytes,
    so results built from them never share the caller's buffer.

    Raises:
        TypeError: If `s` is neither str nor bytes-like.

    Examples:
        >>> as_text_like("abc")
        'abc'
        >>> as_text_like(bytearray(b"abc"))
        b'abc'
    """
    if isinstance(s, str):
        return s
    if isinstance(s, bytes):
        return s
    if isinstance(s, (bytearray, memoryview)):
        return bytes(s)
    raise TypeError(f"string value must be str or bytes-like, not {class_name(s)}")


def coerce_like(arg: str | bytes | bytearray | memoryview, ref: str | bytes, name: str = "argument") -> str | bytes:
    """
    Convert an argument to the representation of `ref`.

    str arguments are UTF-8 encoded for bytes references, bytes-like arguments are
    UTF-8 decoded for str references.

    Raises:
        TypeError: If `arg` is neither str nor bytes-like.
        ValueError: If a bytes-like `arg` is not valid UTF-8 and `ref` is str.
    """
    if not isinstance(arg, (str, *BYTES_LIKE)):
        raise TypeError(f"{name} must be str or bytes-like, not {class_name(arg)}")

    if isinstance(ref, str):
        if isinstance(arg, str):
            return arg
        try:
            return bytes(arg).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ValueError(f"{name} is not valid UTF-8: {bytes(arg)!r}") from exc

    if isinstance(arg, str):
        return arg.encode("utf-8")
    return bytes(arg)
