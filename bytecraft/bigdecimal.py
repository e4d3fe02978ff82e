"""Exact addition of non-negative decimal numbers given as strings."""

from __future__ import annotations

import re

_NUMBER = re.compile(r"(\d*)(?:\.(\d*))?")


def _split(text: str) -> tuple[str, str]:
    match = _NUMBER.fullmatch(text)
    if match is None or not (match.group(1) or match.group(2)):
        raise ValueError(f"not a non-negative decimal number: {text!r}")
    return match.group(1) or "0", match.group(2) or ""


def add(first: str, second: str) -> str:
    """Add two decimal strings.

    The fraction keeps as many digits as the longer fraction of the two
    operands; leading zeros of the integer part are dropped.
    """
    first_int, first_frac = _split(first)
    second_int, second_frac = _split(second)
    width = max(len(first_frac), len(second_frac))
    total = int(first_int + first_frac.ljust(width, "0")) + int(
        second_int + second_frac.ljust(width, "0")
    )
    digits = str(total).rjust(width + 1, "0")
    if not width:
        return digits
    return f"{digits[:-width]}.{digits[-width:]}"