"""Accounts payable aging distribution.

Rows are grouped by aging bucket and their amounts summed. Bucket labels
come prefixed with their rank ("1. 0-30 days", "2. 31-60 days", ...) so a
lexical sort is also chronological; the prefix is dropped for display.
"""

import logging
import re
from typing import Any, Sequence

import pandas as pd
from pydantic import BaseModel, ConfigDict

from canvas_charts.constants import AGING_COLORS, COLOR_TEXT_MUTED, COLOR_TEXT_STRONG
from canvas_charts.core.formatting import format_billions, format_percent, to_number
from canvas_charts.renderers.base import draw_round_rect
from canvas_charts.schemas import (
    CanvasSize,
    ChartConfig,
    ChartType,
    ElementKind,
    HitTestElement,
    RenderResult,
)
from canvas_charts.schemas.columns import ColumnNames
from canvas_charts.services.controller import ChartController
from canvas_charts.services.data_prep import normalize_dataset

logger = logging.getLogger(__name__)

RANK_PREFIX_RE = re.compile(r"^\d\.\s*")
UNKNOWN_BUCKET = "Unknown"

DEFAULT_AGING_CONFIG = ChartConfig(
    x_axis_col_name=ColumnNames.BUCKET,
    y_axis_col_name=[ColumnNames.AMOUNT_INR],
    title="AP Aging Distribution",
)

# Vertical layout of the bar widget (pixels)
VALUE_AREA = 34.0
LABEL_AREA = 18.0
BAR_GAP = 2.0


class AgingBucket(BaseModel):
    """One aggregated aging bucket, ready to draw."""

    raw_label: str
    label: str
    amount: float
    pct: float
    height_pct: float
    color: str

    model_config = ConfigDict(frozen=True)

    @property
    def amount_text(self) -> str:
        return format_billions(self.amount)

    @property
    def pct_text(self) -> str:
        return format_percent(self.pct)


def aggregate_aging(
    rows: "Sequence[dict[str, Any]] | pd.DataFrame",
    bucket_col: str = ColumnNames.BUCKET,
    amount_col: str = ColumnNames.AMOUNT_INR,
) -> list[AgingBucket]:
    """Sum amounts per bucket, sorted by raw bucket label.

    Rows without a bucket go to "Unknown"; missing amounts count as 0.
    Colors follow the aging ramp by position and stay on its last color
    past the sixth bucket.
    """
    records = normalize_dataset(rows)
    if not records:
        return []

    frame = pd.DataFrame(
        {
            "bucket": [str(r.get(bucket_col) or UNKNOWN_BUCKET) for r in records],
            "amount": [to_number(r.get(amount_col)) for r in records],
        }
    )
    totals = frame.groupby("bucket", sort=False)["amount"].sum()
    totals = totals.sort_index()

    grand_total = float(totals.sum())
    largest = float(totals.max())

    buckets = []
    for i, (label, amount) in enumerate(totals.items()):
        amount = float(amount)
        buckets.append(
            AgingBucket(
                raw_label=label,
                label=RANK_PREFIX_RE.sub("", label),
                amount=amount,
                pct=amount / grand_total * 100 if grand_total else 0.0,
                height_pct=amount / largest * 100 if largest > 0 else 0.0,
                color=AGING_COLORS[min(i, len(AGING_COLORS) - 1)],
            )
        )
    logger.debug(f"Aggregated {len(records)} rows into {len(buckets)} aging buckets")
    return buckets


class AgingChart(ChartController):
    """Controller for the AP aging widget.

    Vertical bar requests get the dedicated bucket view: equal-width bars
    scaled to the largest bucket, amount and share above each bar and the
    bucket name below. Other chart types go to the generic engine with the
    raw rows.
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.buckets: list[AgingBucket] = []

    def render(
        self,
        dataset: "Sequence[dict[str, Any]] | pd.DataFrame | None",
        chart_config: ChartConfig | dict | None = None,
        chart_type: ChartType | str | None = ChartType.VERTICAL_BAR,
        title: str | None = None,
        canvas_size: CanvasSize | None = None,
    ) -> list[HitTestElement]:
        return super().render(
            normalize_dataset(dataset),
            chart_config if chart_config is not None else DEFAULT_AGING_CONFIG,
            chart_type,
            title,
            canvas_size,
        )

    def _draw(self, canvas_size: CanvasSize | None) -> list[HitTestElement]:
        chart_type = ChartType.parse(self._last_inputs["chart_type"])
        if chart_type != ChartType.VERTICAL_BAR:
            self.buckets = []
            return super()._draw(canvas_size)

        self.buckets = aggregate_aging(self._last_inputs["dataset"])
        if not self.buckets:
            return self._publish(
                RenderResult(
                    chart_type=chart_type.value,
                    canvas_width=self.surface.width,
                    canvas_height=self.surface.height,
                )
            )

        self._fit_surface(canvas_size)
        elements = self._draw_buckets()
        logger.info(f"Rendered aging chart: {len(self.buckets)} buckets")
        return self._publish(
            RenderResult(
                chart_type=chart_type.value,
                elements=elements,
                drawn_count=len(self.buckets),
                total_count=len(self.buckets),
                canvas_width=self.surface.width,
                canvas_height=self.surface.height,
            )
        )

    def _draw_buckets(self) -> list[HitTestElement]:
        surface, settings = self.surface, self.settings
        n = len(self.buckets)
        bar_w = (surface.width - BAR_GAP * (n - 1)) / n
        bars_top = VALUE_AREA
        bars_bottom = surface.height - LABEL_AREA
        bars_h = bars_bottom - bars_top

        elements = []
        for i, bucket in enumerate(self.buckets):
            x = i * (bar_w + BAR_GAP)
            center = x + bar_w / 2
            bar_h = bucket.height_pct / 100 * bars_h
            top = bars_bottom - bar_h
            draw_round_rect(surface, x, top, bar_w, bar_h, [4, 4, 0, 0], bucket.color)

            surface.text_align = "center"
            surface.fill_style = COLOR_TEXT_STRONG
            surface.font = settings.font(11, "bold")
            surface.fill_text(bucket.amount_text, center, 13)
            surface.fill_style = COLOR_TEXT_MUTED
            surface.font = settings.font(9)
            surface.fill_text(bucket.pct_text, center, 26)

            surface.font = settings.font(8)
            surface.fill_text(bucket.label, center, surface.height - 5)

            elements.append(
                HitTestElement(
                    kind=ElementKind.BAR,
                    x=x,
                    y=top,
                    width=bar_w,
                    height=bar_h,
                    label=bucket.label,
                    formatted_value=bucket.amount_text,
                    detail=f"{bucket.pct_text} of total",
                )
            )
        return elements
