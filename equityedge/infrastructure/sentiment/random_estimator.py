"""
Infrastructure adapter: placeholder random signal → ISentimentEstimator.

Stand-in until a real sentiment model or API is wired in.  The prediction is a
uniform choice over Bullish/Neutral/Bearish and the confidence a uniform
integer in [50, 90).  Pass a seeded random.Random for reproducible output.
"""

import random
from typing import Optional

from equityedge.domain.entities.insights import BEARISH, BULLISH, NEUTRAL, SentimentEstimate
from equityedge.domain.ports.sentiment_port import ISentimentEstimator

PREDICTIONS = (BULLISH, NEUTRAL, BEARISH)
MIN_CONFIDENCE = 50
MAX_CONFIDENCE = 90


class RandomSentimentEstimator(ISentimentEstimator):
    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random()

    def estimate(self, symbol: str) -> SentimentEstimate:
        return SentimentEstimate(
            overall_prediction=self._rng.choice(PREDICTIONS),
            confidence=self._rng.randrange(MIN_CONFIDENCE, MAX_CONFIDENCE),
        )
