"""
Port (interface) for quote / chart / news providers.
Infrastructure adapters (e.g. YFinanceMarketDataProvider) must implement this interface.
"""

from abc import ABC, abstractmethod
from datetime import datetime

from stockboard.domain.entities.market_data import NewsItem, PricePoint, QuoteSnapshot


class IMarketDataProvider(ABC):
    @abstractmethod
    def get_quote(self, symbol: str) -> QuoteSnapshot:
        """Return the latest quote for a market-suffixed symbol (e.g. '2330.TW').

        Raises:
            ValueError: if the provider has no price for *symbol*.
        """
        ...

    @abstractmethod
    def get_news(self, symbol: str, count: int = 10) -> list[NewsItem]:
        """Return news scoped to the instrument, most recent first."""
        ...

    @abstractmethod
    def get_intraday(
        self,
        symbol: str,
        start: datetime,
        interval: str = "5m",
    ) -> list[PricePoint]:
        """Return price samples from *start* to now at the given sampling interval."""
        ...
