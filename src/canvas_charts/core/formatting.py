"""Value and label formatting for chart text.

Numbers are abbreviated with K/M/B suffixes:

    |n| >= 1e9  ->  1 decimal + "B"
    |n| >= 1e6  ->  1 decimal + "M"
    |n| >= 1e3  ->  0 decimals + "K"
    otherwise   ->  integer text

Rounding is half-away-from-zero on the exact binary value of the float,
so 2_500 renders as "3K" rather than banker's "2K".
"""

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from numbers import Real
from typing import Any

from canvas_charts.constants import ELLIPSIS


def to_number(value: Any) -> float:
    """Coerce a table cell to a finite float.

    Anything that is not numeric (None, free text, NaN, infinity) becomes 0.0.
    Numeric strings are parsed after stripping whitespace.
    """
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, Real):
        number = float(value)
    elif isinstance(value, (str, Decimal)):
        text = str(value).strip()
        if not text:
            return 0.0
        try:
            number = float(text)
        except ValueError:
            return 0.0
    else:
        return 0.0
    if math.isnan(number) or math.isinf(number):
        return 0.0
    return number


def is_numeric(value: Any) -> bool:
    """True for real numbers (bools excluded), the 'number' scalar kind."""
    return isinstance(value, Real) and not isinstance(value, bool)


def to_fixed(value: float, decimals: int = 0) -> str:
    """Fixed-point text with half-away-from-zero rounding."""
    number = Decimal(value)
    quantum = Decimal(1).scaleb(-decimals)
    # quantize needs room for every integer digit plus the decimals
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, number.adjusted() + decimals + 2)
        text = str(number.quantize(quantum, rounding=ROUND_HALF_UP))
    if text.startswith("-") and Decimal(text) == 0:
        text = text[1:]
    return text


def format_value(value: Any) -> str:
    """Abbreviate a number for axis ticks, bar labels and tooltips."""
    num = to_number(value)
    magnitude = abs(num)
    if magnitude >= 1e9:
        return to_fixed(num / 1e9, 1) + "B"
    if magnitude >= 1e6:
        return to_fixed(num / 1e6, 1) + "M"
    if magnitude >= 1e3:
        return to_fixed(num / 1e3, 0) + "K"
    return to_fixed(num, 0)


def format_currency(value: Any, symbol: str = "$") -> str:
    """Abbreviated amount with a currency prefix, e.g. '$1.2M'."""
    return f"{symbol}{format_value(value)}"


def format_percent(value: Any, decimals: int = 1) -> str:
    """Percentage text, e.g. '12.5%'."""
    return f"{to_fixed(to_number(value), decimals)}%"


def format_billions(value: Any, decimals: int = 2) -> str:
    """Always-in-billions text used by the aging distribution."""
    return f"{to_fixed(to_number(value) / 1e9, decimals)}B"


def to_label(value: Any) -> str:
    """Text for a category cell; empty/missing cells render as ''."""
    if value is None or value is False or value == "":
        return ""
    if is_numeric(value):
        number = float(value)
        if number == 0 or math.isnan(number):
            return ""
        if number.is_integer():
            return str(int(number))
    return str(value)


def truncate_label(text: Any, max_chars: int) -> str:
    """Cut text longer than max_chars and append an ellipsis."""
    text = str(text)
    if len(text) <= max_chars:
        return text
    return text[: max(0, max_chars - 1)] + ELLIPSIS


def vertical_label_budget(slot_width: float, minimum: int = 8) -> int:
    """Character budget for a rotated category label below a vertical bar."""
    return max(minimum, int(math.floor(slot_width / 5)))
