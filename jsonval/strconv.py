"""Locale-independent conversion between numeric text and floats."""

from __future__ import annotations

import math
import re

_DECIMAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

DEFAULT_PRECISION = 17


def strtod(text: str | bytes) -> float:
    """Convert decimal text to a float.

    The whole text must be a decimal number. Raises ValueError for
    malformed text and OverflowError when the value does not fit a double.
    """
    if isinstance(text, (bytes, bytearray)):
        text = bytes(text).decode("ascii", errors="replace")
    if not _DECIMAL.fullmatch(text):
        raise ValueError(f"not a decimal number: {text!r}")
    value = float(text)
    if math.isinf(value):
        raise OverflowError(f"real number overflow: {text!r}")
    return value


def dtostr(value: float, precision: int = 0) -> str:
    """Format a float so that it always reads back as a real.

    A precision of 0 means 17 significant digits. The result always holds
    a '.' or an 'e', and exponents carry no '+' sign and no leading zeros.
    """
    if not math.isfinite(value):
        raise ValueError(f"cannot format non-finite value {value!r}")
    if precision == 0:
        precision = DEFAULT_PRECISION

    text = "%.*g" % (precision, value)

    if "." not in text and "e" not in text:
        text += ".0"

    mantissa, sep, exponent = text.partition("e")
    if sep:
        sign = "-" if exponent.startswith("-") else ""
        digits = exponent[1:] if exponent[:1] in "+-" else exponent
        text = f"{mantissa}e{sign}{digits.lstrip('0')}"
    return text