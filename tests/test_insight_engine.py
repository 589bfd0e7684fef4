"""Tests for the insight derivation engine."""

import pytest

from conftest import make_bars
from equityedge.application.services.insight_engine import compute_trends, derive_insights, recommend
from equityedge.domain.entities.insights import (
    SEVEN_DAY_AVERAGE,
    SEVEN_DAY_VOLUME,
    THIRTY_DAY_AVERAGE,
)
from equityedge.domain.entities.stock_price import PriceBar


def closes_ending(earlier, latest, length=10, filler=50.0):
    """Series whose bar 10 from the end closes at *earlier* and last bar at *latest*."""
    closes = [filler] * length
    closes[-10] = earlier
    closes[-1] = latest
    return closes


class TestShortSeries:
    @pytest.mark.parametrize("length", range(0, 7))
    def test_fewer_than_seven_bars_yield_nothing(self, length):
        trends, recommendation = derive_insights(make_bars([10.0] * length))
        assert trends == []
        assert recommendation is None

    def test_seven_bars_yield_two_trends_and_no_recommendation(self):
        trends, recommendation = derive_insights(make_bars([42.5] * 7, volume=1234))

        assert [t.type for t in trends] == [SEVEN_DAY_AVERAGE, SEVEN_DAY_VOLUME]
        assert trends[0].value == "42.50"
        assert trends[1].value == "1,234"
        assert recommendation is None

    def test_twenty_nine_bars_never_emit_thirty_day_average(self):
        trends, _ = derive_insights(make_bars([10.0] * 29))
        assert THIRTY_DAY_AVERAGE not in [t.type for t in trends]


class TestTrends:
    def test_constant_series_of_thirty_or_more(self):
        trends, _ = derive_insights(make_bars([25.0] * 45, volume=2_500_000))

        assert [(t.type, t.value) for t in trends] == [
            (SEVEN_DAY_AVERAGE, "25.00"),
            (THIRTY_DAY_AVERAGE, "25.00"),
            (SEVEN_DAY_VOLUME, "2,500,000"),
        ]

    def test_averages_use_only_the_most_recent_windows(self):
        closes = [1000.0] * 20 + [10.0] * 23 + [20.0] * 7
        trends = dict((t.type, t.value) for t in derive_insights(make_bars(closes))[0])

        assert trends[SEVEN_DAY_AVERAGE] == "20.00"
        # last 30 bars: 23 at 10.0 and 7 at 20.0
        assert trends[THIRTY_DAY_AVERAGE] == f"{(23 * 10 + 7 * 20) / 30:.2f}"

    def test_missing_volume_counts_as_zero(self):
        bars = make_bars([5.0] * 7, volume=700)
        bars[-1] = PriceBar(bars[-1].date, 5.0, 5.0, 5.0, 5.0, volume=None)

        trends = compute_trends(bars)

        assert trends[-1].value == "600"

    def test_volume_rounds_half_up(self):
        bars = make_bars([5.0] * 7, volume=0)
        bars[0] = PriceBar(bars[0].date, 5.0, 5.0, 5.0, 5.0, volume=3)
        bars[1] = PriceBar(bars[1].date, 5.0, 5.0, 5.0, 5.0, volume=0)
        # 3.5 / 7 → 0.5 rounds up to 1
        bars[2] = PriceBar(bars[2].date, 5.0, 5.0, 5.0, 5.0, volume=0.5)

        assert compute_trends(bars)[-1].value == "1"


class TestRecommendation:
    def test_fewer_than_ten_bars_has_no_recommendation(self):
        assert recommend(make_bars([10.0] * 9)) is None

    def test_flat_price_is_hold_with_zero_loss(self):
        rec = recommend(make_bars(closes_ending(100.0, 100.0)))

        assert rec.action == "Hold"
        assert "lost 0.00%" in rec.reason

    @pytest.mark.parametrize(
        "latest, action, phrase",
        [
            (106.0, "Hold", "gained 6.00%"),
            (104.0, "Buy", "gained 4.00%"),
            (91.0, "Buy", "lost 9.00%"),
            (93.0, "Hold", "lost 7.00%"),
        ],
    )
    def test_threshold_boundaries(self, latest, action, phrase):
        rec = recommend(make_bars(closes_ending(100.0, latest)))

        assert rec.action == action
        assert phrase in rec.reason
        assert rec.reason.endswith("in the last 10 trading days.")

    def test_compares_against_the_tenth_bar_from_the_end_of_recent_window(self):
        closes = closes_ending(100.0, 106.0, length=60, filler=1.0)
        _, rec = derive_insights(make_bars(closes))

        assert rec.action == "Hold"
        assert "gained 6.00%" in rec.reason

    def test_zero_reference_close_is_skipped(self):
        assert recommend(make_bars(closes_ending(0.0, 10.0))) is None
