"""
Error codes reported by the string converters.

Conversion functions never raise on malformed or out-of-range input. They return a
sentinel (False, 0 or 0.0) and record the outcome in a per-thread error slot, which
callers read with error() immediately after the call:

    >>> from strkit.convert import to_int32
    >>> to_int32("abc")
    0
    >>> error()
    <ErrorCode.EINVAL: 22>

Lifecycle of the slot:
    - Every parse call overwrites it, SUCCESS included.
    - It is never cleared automatically.
    - Each thread has its own slot; a thread that never parsed reads SUCCESS.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import errno
import threading
from enum import IntEnum, unique

__all__ = [
    'ErrorCode',
    'ConversionError',
    'error',
    'set_error',
]


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class ErrorCode(IntEnum):
    """
    Outcome of a conversion.

    Members are int subclasses with the platform errno values, so they compare
    equal to errno.EINVAL and errno.ERANGE.
    """
    SUCCESS = 0
    EINVAL = errno.EINVAL
    ERANGE = errno.ERANGE

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    ErrorCode.SUCCESS: "success",
    ErrorCode.EINVAL: "invalid format",
    ErrorCode.ERANGE: "out of range",
}


class ConversionError(ValueError):
    """
    Raised by Conversion.unwrap() when a conversion failed.

    Attributes:
        code: The ErrorCode of the failure.
        source: The input that failed to convert.
        target: Name of the target type.
    """

    def __init__(self, code: ErrorCode, source: object = None, target: str = "") -> None:
        self.code = ErrorCode(code)
        self.source = source
        self.target = target
        super().__init__(f"cannot convert {source!r} to {target}: {self.code.description}")


class _ErrorSlot(threading.local):
    code: ErrorCode = ErrorCode.SUCCESS


_slot = _ErrorSlot()


# Methods --------------------------------------------------------------------------------------------------------------

def error() -> ErrorCode:
    """Return the calling thread's most recent conversion outcome."""
    return _slot.code


def set_error(code: ErrorCode | int) -> None:
    """
    Overwrite the calling thread's error slot.

    Raises:
        ValueError: If `code` is not one of the ErrorCode values.
    """
    _slot.code = ErrorCode(code)
