"""Code items and their source text."""

import math
from typing import TypeGuard

from codefrag.core.names import Name

CodeItem = Name | str | int | float | bool | None

CONCAT_OPERATOR = "+"


def render_item(item: CodeItem) -> str:
    """Render a single code item the way the target language prints it."""
    if isinstance(item, Name):
        return item.text
    if isinstance(item, str):
        return item
    if item is None:
        return "null"
    if isinstance(item, bool):
        return "true" if item else "false"
    if isinstance(item, float):
        if math.isnan(item):
            return "NaN"
        if math.isinf(item):
            return "Infinity" if item > 0 else "-Infinity"
        if item.is_integer() and abs(item) < 1e21:
            return str(int(item))
        return _float_text(item)
    return str(item)


def _float_text(value: float) -> str:
    """Shortest round-trip digits, laid out as JavaScript prints numbers."""
    text = repr(value)
    if "e" not in text:
        return text
    mantissa, exp = text.split("e")
    exponent = int(exp)
    # positional below 1e21 and down to 1e-6
    if -7 < exponent < 0:
        sign = "-" if mantissa.startswith("-") else ""
        digits = mantissa.lstrip("-").replace(".", "")
        return f"{sign}0.{'0' * (-exponent - 1)}{digits}"
    return f"{mantissa}e{'+' if exponent > 0 else '-'}{abs(exponent)}"


def is_quoted_start(item: CodeItem) -> TypeGuard[str]:
    return isinstance(item, str) and item.startswith('"')


def is_quoted_end(item: CodeItem) -> TypeGuard[str]:
    return isinstance(item, str) and item.endswith('"')
