"""
Convert strings to built-in types and back.

Parse functions return the typed value on success, or a sentinel (False, 0, 0.0) on
failure. Every call also overwrites the calling thread's error slot, see strkit.errors:

    >>> to_int32("32k")
    32768
    >>> to_int32("99999999999999")
    0
    >>> error()
    <ErrorCode.ERANGE: 34>

Use convert() for a tagged value-or-error result that leaves the slot alone.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import logging
import math
import re
import sys
from dataclasses import dataclass
from enum import Enum, unique
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import ErrorCode, ConversionError, error, set_error
from .utils import BYTES_LIKE, class_name

__all__ = [
    'Target',
    'Conversion',
    'convert',
    'error',
    'from_value',
    'to_bool',
    'to_int32',
    'to_int64',
    'to_uint32',
    'to_uint64',
    'to_double',
]

logger = logging.getLogger(__name__)

INT32_MIN, INT32_MAX = -(2 ** 31), 2 ** 31 - 1
INT64_MIN, INT64_MAX = -(2 ** 63), 2 ** 63 - 1
UINT32_MAX = 2 ** 32 - 1
UINT64_MAX = 2 ** 64 - 1

# Binary unit suffixes: 32k == 32 << 10
UNIT_SHIFTS = {"k": 10, "m": 20, "g": 30, "t": 40, "p": 50}

TRUE_WORDS = frozenset({"true", "1"})
FALSE_WORDS = frozenset({"false", "0"})

_INT_RE = re.compile(
    r"(?P<sign>[+-]?)"
    r"(?:0[xX](?P<hex>[0-9a-fA-F]+)|0[oO](?P<oct>[0-7]+)|0[bB](?P<bin>[01]+)|(?P<dec>[0-9]+))"
    r"(?P<unit>[kKmMgGtTpP]?)"
)
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_FLOAT_WORDS = frozenset({"inf", "infinity", "nan"})


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class Target(str, Enum):
    """
    Built-in types a string can be parsed into.

    Members are str subclasses, so the plain names ("int32", "double", ...) are accepted
    anywhere a Target is expected.
    """
    BOOL = "bool"
    INT32 = "int32"
    INT64 = "int64"
    UINT32 = "uint32"
    UINT64 = "uint64"
    DOUBLE = "double"


@dataclass(frozen=True, slots=True)
class Conversion:
    """Tagged result of convert(): the parsed value or the sentinel, plus the outcome."""
    value: bool | int | float
    error: ErrorCode = ErrorCode.SUCCESS
    source: Any = None
    target: Target | None = None

    @property
    def ok(self) -> bool:
        return self.error is ErrorCode.SUCCESS

    def unwrap(self) -> bool | int | float:
        """
        Return the value, or raise if the conversion failed.

        Raises:
            ConversionError: With the failure code, input and target name.
        """
        if not self.ok:
            target = self.target.value if self.target is not None else ""
            raise ConversionError(self.error, source=self.source, target=target)
        return self.value


# Methods --------------------------------------------------------------------------------------------------------------

def convert(s: str | bytes | bytearray | memoryview, target: Target | str) -> Conversion:
    """
    Parse a string into a built-in type and return a tagged result.

    Unlike the to_* functions this does not touch the thread's error slot.

    Args:
        s: The string to parse, str or bytes-like.
        target: A Target member or its name ("bool", "int32", ...).

    Returns:
        Conversion with the value, or the type's sentinel and a failure code.

    Raises:
        TypeError: If `s` is not a string value.
        ValueError: If `target` is unknown.

    Examples:
        >>> convert("0x10", "uint32")
        Conversion(value=16, error=<ErrorCode.SUCCESS: 0>, source='0x10', target=<Target.UINT32: 'uint32'>)
        >>> convert("yes", Target.BOOL).ok
        False
    """
    target = Target(target)
    text = _as_parse_text(s)
    if target is Target.BOOL:
        value, code = _parse_bool(text)
    elif target is Target.DOUBLE:
        value, code = _parse_double(text)
    else:
        lo, hi = _INT_BOUNDS[target]
        value, code = _parse_int(text, lo, hi)

    if code is not ErrorCode.SUCCESS:
        logger.debug("cannot convert %r to %s: %s", s, target.value, code.description)
    return Conversion(value, code, source=s, target=target)


def from_value(value: Any) -> str:
    """
    Render a value as its canonical, locale-free string.

    bool renders as "true"/"false" so that to_bool() reads it back, float renders as the
    shortest string that round-trips, bytes-like values are decoded as UTF-8. An int too
    long for decimal conversion (see sys.set_int_max_str_digits) renders in hex.

    Examples:
        >>> from_value(True)
        'true'
        >>> from_value(-42)
        '-42'
        >>> from_value(0.1)
        '0.1'
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        try:
            return int.__repr__(value)
        except ValueError:
            # Past sys.get_int_max_str_digits(); hex has no such limit
            return hex(value)
    if isinstance(value, float):
        return float.__repr__(value)
    if isinstance(value, BYTES_LIKE):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)


def to_bool(s: str | bytes | bytearray | memoryview) -> bool:
    """Parse "true"/"1" or "false"/"0" (case-sensitive). Returns False and sets EINVAL otherwise."""
    return _convert_to_slot(s, Target.BOOL)


def to_int32(s: str | bytes | bytearray | memoryview) -> int:
    """
    Parse a signed 32-bit integer. Returns 0 and sets EINVAL or ERANGE on failure.

    Accepts an optional sign, 0x/0o/0b prefixes and a k/m/g/t/p binary unit suffix.
    A plain leading zero stays decimal: "010" is 10, not octal 8 as with C's strtol.
    The other integer parsers share this grammar.
    """
    return _convert_to_slot(s, Target.INT32)


def to_int64(s: str | bytes | bytearray | memoryview) -> int:
    """Parse a signed 64-bit integer. Returns 0 and sets EINVAL or ERANGE on failure."""
    return _convert_to_slot(s, Target.INT64)


def to_uint32(s: str | bytes | bytearray | memoryview) -> int:
    """Parse an unsigned 32-bit integer; signs are rejected. Returns 0 and sets EINVAL or ERANGE on failure."""
    return _convert_to_slot(s, Target.UINT32)


def to_uint64(s: str | bytes | bytearray | memoryview) -> int:
    """Parse an unsigned 64-bit integer; signs are rejected. Returns 0 and sets EINVAL or ERANGE on failure."""
    return _convert_to_slot(s, Target.UINT64)


def to_double(s: str | bytes | bytearray | memoryview) -> float:
    """
    Parse a decimal or exponential floating point literal.

    Accepts "inf", "infinity" and "nan" in any case. A finite literal that overflows to
    infinity, or a non-zero literal that underflows to a subnormal or to zero, sets ERANGE
    and returns 0.0. Malformed input sets EINVAL and returns 0.0.
    """
    return _convert_to_slot(s, Target.DOUBLE)


# Private methods ------------------------------------------------------------------------------------------------------

_INT_BOUNDS = {
    Target.INT32: (INT32_MIN, INT32_MAX),
    Target.INT64: (INT64_MIN, INT64_MAX),
    Target.UINT32: (0, UINT32_MAX),
    Target.UINT64: (0, UINT64_MAX),
}

_INT_BASES = (("hex", 16), ("oct", 8), ("bin", 2), ("dec", 10))

# Significant digits of UINT64_MAX per base
_MAX_DIGITS = {16: 16, 8: 22, 2: 64, 10: 20}


def _convert_to_slot(s, target: Target):
    result = convert(s, target)
    set_error(result.error)
    return result.value


def _as_parse_text(s) -> str | None:
    """Decode the input for parsing; None marks bytes that cannot be ASCII text."""
    if isinstance(s, str):
        return s
    if isinstance(s, BYTES_LIKE):
        try:
            return bytes(s).decode("ascii")
        except UnicodeDecodeError:
            return None
    raise TypeError(f"cannot parse {class_name(s)}, str or bytes-like required")


def _parse_bool(text: str | None) -> tuple[bool, ErrorCode]:
    if text in TRUE_WORDS:
        return True, ErrorCode.SUCCESS
    if text in FALSE_WORDS:
        return False, ErrorCode.SUCCESS
    return False, ErrorCode.EINVAL


def _parse_int(text: str | None, lo: int, hi: int) -> tuple[int, ErrorCode]:
    m = _INT_RE.fullmatch(text) if text is not None else None
    if m is None:
        return 0, ErrorCode.EINVAL

    sign = m["sign"]
    if sign and lo == 0:
        # Unsigned targets take no sign at all
        return 0, ErrorCode.EINVAL

    for group, base in _INT_BASES:
        digits = m[group]
        if digits is not None:
            break
    significant = digits.lstrip("0") or "0"
    if len(significant) > _MAX_DIGITS[base]:
        # Wider than 64 bits, and possibly past int()'s digit limit
        return 0, ErrorCode.ERANGE
    x = int(significant, base)

    if m["unit"]:
        x <<= UNIT_SHIFTS[m["unit"].lower()]
    if sign == "-":
        x = -x

    if not lo <= x <= hi:
        return 0, ErrorCode.ERANGE
    return x, ErrorCode.SUCCESS


def _parse_double(text: str | None) -> tuple[float, ErrorCode]:
    if text is None:
        return 0.0, ErrorCode.EINVAL

    unsigned = text[1:] if text[:1] in ("+", "-") else text
    if unsigned.lower() in _FLOAT_WORDS:
        return float(text), ErrorCode.SUCCESS

    if not _FLOAT_RE.fullmatch(text):
        return 0.0, ErrorCode.EINVAL

    x = float(text)
    if math.isinf(x):
        return 0.0, ErrorCode.ERANGE
    if 0.0 < abs(x) < sys.float_info.min:
        return 0.0, ErrorCode.ERANGE
    if x == 0.0 and _has_nonzero_mantissa(text):
        return 0.0, ErrorCode.ERANGE
    return x, ErrorCode.SUCCESS


def _has_nonzero_mantissa(text: str) -> bool:
    mantissa = re.split(r"[eE]", text, maxsplit=1)[0]
    return any(ch in "123456789" for ch in mantissa)
