"""Month label correction and time-window filtering for monthly series.

Upstream feeds label months as "<Mon> <Year>" (e.g. "Mar 2025") and
occasionally stamp them one fiscal year ahead. Labels dated after the
current month are moved back one year before any filtering or drawing.
"""

import logging
import re
from datetime import date
from enum import Enum
from typing import Any, Sequence

from canvas_charts.schemas.columns import ColumnNames

logger = logging.getLogger(__name__)

MONTH_LABEL_RE = re.compile(r"^\s*([A-Za-z]{3})[A-Za-z]*\.?\s+(\d{4})\s*$")
MONTHS = {
    name: index
    for index, name in enumerate(
        ("jan", "feb", "mar", "apr", "may", "jun",
         "jul", "aug", "sep", "oct", "nov", "dec"),
        start=1,
    )
}

Row = dict[str, Any]


class TimeWindow(str, Enum):
    """Time filters offered above the cash flow chart."""

    LAST_30_DAYS = "30d"
    LAST_90_DAYS = "90d"
    YEAR_TO_DATE = "ytd"

    @classmethod
    def parse(cls, window: "str | TimeWindow") -> "TimeWindow":
        """Accept '30d'/'90d'/'ytd' or the feed keys '30_DAY'/'90_DAY'/'YTD'.

        Raises:
            ValueError: For any other window.
        """
        if isinstance(window, cls):
            return window
        key = str(window).strip().lower().replace("_day", "d")
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown time window: {window!r}") from None


def parse_month_label(label: Any) -> tuple[str, int, int] | None:
    """Split "Mar 2025" into ('Mar', 3, 2025); None if it is not a month label."""
    match = MONTH_LABEL_RE.match(str(label)) if label is not None else None
    if not match:
        return None
    month = MONTHS.get(match.group(1).lower())
    if month is None:
        return None
    return match.group(1), month, int(match.group(2))


def corrected_year(label: Any, today: date | None = None) -> int | None:
    """Year of a month label after rollover correction."""
    parsed = parse_month_label(label)
    if parsed is None:
        return None
    today = today or date.today()
    _, month, year = parsed
    if (year, month) > (today.year, today.month):
        return year - 1
    return year


def correct_month_label(label: Any, today: date | None = None) -> Any:
    """Move a month label dated after the current month back one year.

    "Dec 2026" seen in April 2025 becomes "Dec 2025"; "Jan 2025" is kept.
    Anything that is not a "<Mon> <Year>" label is returned unchanged.
    """
    parsed = parse_month_label(label)
    if parsed is None:
        return label
    fixed = corrected_year(label, today)
    if fixed == parsed[2]:
        return label
    # only the year changes; the month token is kept as written
    text = str(label)
    match = MONTH_LABEL_RE.match(text)
    return f"{text[:match.start(2)]}{fixed}{text[match.end(2):]}"


def correct_month_labels(
    rows: Sequence[Row],
    today: date | None = None,
    label_col: str = ColumnNames.DATE_LABEL,
) -> list[Row]:
    """Copies of the rows with their month labels corrected."""
    corrected = []
    for row in rows:
        row = dict(row)
        if label_col in row:
            row[label_col] = correct_month_label(row[label_col], today)
        corrected.append(row)
    return corrected


def filter_time_window(
    rows: Sequence[Row],
    window: "str | TimeWindow",
    today: date | None = None,
    label_col: str = ColumnNames.DATE_LABEL,
) -> list[Row]:
    """Keep the rows a time window covers.

    30d keeps the last row, 90d the last three and ytd every row whose
    corrected year is the current year.

    Raises:
        ValueError: If the window is not one of the known filters.
    """
    window = TimeWindow.parse(window)
    rows = list(rows)
    if window == TimeWindow.LAST_30_DAYS:
        kept = rows[-1:]
    elif window == TimeWindow.LAST_90_DAYS:
        kept = rows[-3:]
    else:
        year = (today or date.today()).year
        kept = [row for row in rows if corrected_year(row.get(label_col), today) == year]

    logger.debug(f"Time window {window.value}: kept {len(kept)} of {len(rows)} rows")
    return kept
