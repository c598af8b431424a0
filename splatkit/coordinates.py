"""Validation and conversion of geographic coordinates written as text.

Coordinates are given either in decimal degrees ("DD", e.g. ``"45.5"``) or
as space separated degrees, minutes and seconds ("DMS", e.g. ``"45 30 0"``).
The numeric parsing follows lenient rules: a field that is not a number
counts as zero, surrounding whitespace is ignored, and values are held with
single precision before they are formatted with six significant digits.
"""

from __future__ import annotations

import math
import re
import struct

__all__ = [
    "is_not_empty",
    "is_dd_format",
    "is_dms_format",
    "is_latitude",
    "is_longitude",
    "dd_to_dms",
    "dms_to_dd",
]

_FLOAT_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_INT_RE = re.compile(r"[+-]?\d+")
_LEADING_INT_RE = re.compile(r"[+-]?\d+")
_SPECIAL_FLOATS = {"inf": math.inf, "+inf": math.inf, "-inf": -math.inf, "nan": math.nan}
_FLT_MAX = 3.4028234663852886e38
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_NON_DIGIT = re.compile(r"\D")

MAX_LATITUDE = 90
MAX_LONGITUDE = 180
MINUTES_PER_DEGREE = 60


def _f32(value: float) -> float:
    """Round a number to single precision."""
    if math.isinf(value) or math.isnan(value):
        return value
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _to_float(text: str) -> float:
    """Parse a single precision number; anything unparsable yields 0."""
    stripped = text.strip()
    special = _SPECIAL_FLOATS.get(stripped.lower())
    if special is not None:
        return special
    if not _FLOAT_RE.fullmatch(stripped):
        return 0.0
    value = float(stripped)
    if math.isinf(value) or abs(value) > _FLT_MAX:
        return 0.0
    return _f32(value)


def _to_int(text: str) -> int:
    """Parse a 32-bit integer; anything unparsable or out of range yields 0."""
    stripped = text.strip()
    if not _INT_RE.fullmatch(stripped):
        return 0
    value = int(stripped)
    if not _INT32_MIN <= value <= _INT32_MAX:
        return 0
    return value


def _leading_int(text: str) -> int:
    """Parse the integer at the start of ``text``, raising if there is none."""
    match = _LEADING_INT_RE.match(text.lstrip(" \t\n\r\f\v"))
    if match is None:
        raise ValueError(f"no integer at the start of {text!r}")
    value = int(match.group())
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise ValueError(f"integer out of range in {text!r}")
    return value


def _section(text: str, sep: str, index: int) -> str:
    """Return the ``index``-th field of ``text`` split on ``sep``, or ''."""
    parts = text.split(sep)
    return parts[index] if index < len(parts) else ""


def _number(value: float) -> str:
    """Format a number with six significant digits, trailing zeros dropped."""
    return format(value, ".6g")


def is_not_empty(text: str) -> bool:
    """Return True if ``text`` holds anything besides whitespace."""
    return text.strip() != ""


def is_dd_format(text: str) -> bool:
    """Return True if ``text`` is a non-negative decimal-degree value.

    The text must hold no spaces.  It is accepted when it is made only of
    digits (an empty string included), or when it holds a decimal point and
    its value is non-zero.
    """
    fields = text.split(" ")
    if len(fields) != 1:
        return False
    field = fields[0]
    value = _to_float(field)
    if value < 0:
        return False
    only_digits = _NON_DIGIT.search(field) is None
    return only_digits or ("." in field and value != 0)


def is_dms_format(text: str) -> bool:
    """Return True if ``text`` is a degrees-minutes-seconds triple.

    The total must lie within [0, 180], minutes must be an integer in
    [0, 60) and seconds a number in [0, 60).
    """
    fields = text.split(" ")
    if len(fields) != 3:
        return False
    total = _to_float(dms_to_dd(text))
    minutes = _to_int(fields[1])
    seconds = _to_float(fields[2])
    return (
        0 <= total <= MAX_LONGITUDE
        and 0 <= minutes < MINUTES_PER_DEGREE
        and 0 <= seconds < MINUTES_PER_DEGREE
    )


def _within(text: str, limit: int) -> bool:
    if is_dms_format(text):
        degrees = _to_int(text.split(" ")[0])
        return 0 <= degrees <= limit
    if is_dd_format(text):
        return 0 <= _to_float(text) <= limit
    return False


def is_latitude(text: str) -> bool:
    """Return True if ``text`` is a latitude magnitude in DD or DMS form (0..90)."""
    return _within(text, MAX_LATITUDE)


def is_longitude(text: str) -> bool:
    """Return True if ``text`` is a longitude magnitude in DD or DMS form (0..180)."""
    return _within(text, MAX_LONGITUDE)


def dd_to_dms(value: str) -> str:
    """Convert decimal degrees to a ``"D M S"`` string.

    The sign of the input is dropped.  Raises ValueError if ``value`` does
    not start with an integer part.
    """
    degrees = abs(_leading_int(value))
    magnitude = abs(_to_float(value))
    arc_minutes = _f32(_f32(magnitude - degrees) * 60)
    minutes = int(arc_minutes)
    seconds = _f32(_f32(arc_minutes - minutes) * 60)
    return f"{degrees} {minutes} {_number(seconds)}"


def dms_to_dd(value: str) -> str:
    """Convert a ``"D M S"`` string to decimal degrees, formatted as text.

    Missing minutes or seconds count as zero.  A negative integer degree
    field loses its sign.
    """
    degrees_text = _section(value, " ", 0)
    if _to_int(degrees_text) < 0:
        degrees_text = _section(degrees_text, "-", 1)
    minutes = _to_float(_section(value, " ", 1))
    seconds = _to_float(_section(value, " ", 2))
    degrees = _to_float(degrees_text)
    total = _f32(degrees + minutes / 60.0 + seconds / 3600.0)
    result = _number(total)
    if "-" in degrees_text:
        return "-" + result
    return result