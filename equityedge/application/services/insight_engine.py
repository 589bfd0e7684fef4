"""
Application service: derive trend metrics and a buy/hold recommendation from
a daily price series.

Pure functions: no I/O, no shared state.  Short or empty series are normal
input; metrics whose window is not filled are omitted, never padded.

Business decisions owned here:
  - Windows: 30 recent bars, 7-bar averages, 10-bar momentum comparison.
  - Thresholds: a gain above 5% means Hold, a loss above 8% means Buy.
"""

import math
from typing import Optional, Sequence

from equityedge.domain.entities.insights import (
    BUY,
    HOLD,
    SEVEN_DAY_AVERAGE,
    SEVEN_DAY_VOLUME,
    THIRTY_DAY_AVERAGE,
    Recommendation,
    TrendMetric,
)
from equityedge.domain.entities.stock_price import PriceBar

RECENT_WINDOW = 30
SHORT_WINDOW = 7
MOMENTUM_WINDOW = 10

GAIN_HOLD_THRESHOLD = 5.0
LOSS_BUY_THRESHOLD = 8.0


def derive_insights(
    bars: Sequence[PriceBar],
) -> tuple[list[TrendMetric], Optional[Recommendation]]:
    """Compute trends and a recommendation from bars ordered oldest first.

    Returns:
        (trends, recommendation): trends in the fixed order 7-day average,
        30-day average, average 7-day volume; recommendation is None when
        fewer than 10 bars are available.
    """
    recent = list(bars[-RECENT_WINDOW:])
    return compute_trends(recent), recommend(recent)


def compute_trends(recent: Sequence[PriceBar]) -> list[TrendMetric]:
    trends: list[TrendMetric] = []
    last_week = recent[-SHORT_WINDOW:]

    if len(recent) >= SHORT_WINDOW:
        trends.append(TrendMetric(SEVEN_DAY_AVERAGE, _format_price(_mean_close(last_week))))

    if len(recent) >= RECENT_WINDOW:
        trends.append(TrendMetric(THIRTY_DAY_AVERAGE, _format_price(_mean_close(recent))))

    if len(recent) >= SHORT_WINDOW:
        avg_volume = sum(bar.volume or 0 for bar in last_week) / SHORT_WINDOW
        trends.append(TrendMetric(SEVEN_DAY_VOLUME, _format_volume(avg_volume)))

    return trends


def recommend(recent: Sequence[PriceBar]) -> Optional[Recommendation]:
    """Compare the latest close with the close 10 bars earlier.

    A flat price lands in the loss branch with a 0.00% loss.
    """
    if len(recent) < MOMENTUM_WINDOW:
        return None

    latest = recent[-1].close
    earlier = recent[-MOMENTUM_WINDOW].close
    if earlier == 0:
        return None

    if latest > earlier:
        percent_gain = (latest - earlier) / earlier * 100
        return Recommendation(
            action=HOLD if percent_gain > GAIN_HOLD_THRESHOLD else BUY,
            reason=f"Stock has gained {percent_gain:.2f}% in the last 10 trading days.",
        )

    percent_loss = (earlier - latest) / earlier * 100
    return Recommendation(
        action=BUY if percent_loss > LOSS_BUY_THRESHOLD else HOLD,
        reason=f"Stock has lost {percent_loss:.2f}% in the last 10 trading days.",
    )


def _mean_close(bars: Sequence[PriceBar]) -> float:
    return sum(bar.close for bar in bars) / len(bars)


def _format_price(value: float) -> str:
    return f"{value:.2f}"


def _format_volume(value: float) -> str:
    # half-up rounding, then thousands separators
    return f"{math.floor(value + 0.5):,}"
