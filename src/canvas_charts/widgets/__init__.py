"""Dashboard widgets built on the generic chart engine.

- cash_flow.py: Cumulative cash outflow forecast (actual / projected / budget)
- aging.py: AP aging bucket distribution
- time_window.py: Month label correction and time-window filters
"""

from .aging import AgingBucket, AgingChart, aggregate_aging
from .cash_flow import CashFlowChart, CashFlowSummary, summarize
from .time_window import TimeWindow, correct_month_label, filter_time_window

__all__ = [
    "AgingBucket",
    "AgingChart",
    "aggregate_aging",
    "CashFlowChart",
    "CashFlowSummary",
    "summarize",
    "TimeWindow",
    "correct_month_label",
    "filter_time_window",
]
