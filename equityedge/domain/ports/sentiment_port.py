"""
Port (interface) for sentiment estimators.
Implementations must not depend on the insight engine: the only input is the symbol.
"""

from abc import ABC, abstractmethod

from equityedge.domain.entities.insights import SentimentEstimate


class ISentimentEstimator(ABC):
    @abstractmethod
    def estimate(self, symbol: str) -> SentimentEstimate: ...
