"""
Domain entities produced by the insights pipeline.
Zero external dependencies: pure Python dataclasses only.
"""

from dataclasses import dataclass, field
from typing import Optional

SEVEN_DAY_AVERAGE = "7-day average"
THIRTY_DAY_AVERAGE = "30-day average"
SEVEN_DAY_VOLUME = "average 7-day volume"

BUY = "Buy"
HOLD = "Hold"

BULLISH = "Bullish"
NEUTRAL = "Neutral"
BEARISH = "Bearish"


@dataclass(frozen=True)
class TrendMetric:
    type: str
    value: str


@dataclass(frozen=True)
class Recommendation:
    action: str
    reason: str


@dataclass(frozen=True)
class SentimentEstimate:
    overall_prediction: str
    confidence: int


NEUTRAL_SENTIMENT = SentimentEstimate(overall_prediction=NEUTRAL, confidence=50)


@dataclass(frozen=True)
class InsightsResult:
    symbol: str
    trends: list[TrendMetric] = field(default_factory=list)
    recommendation: Optional[Recommendation] = None
    sentiment: SentimentEstimate = NEUTRAL_SENTIMENT
