"""
Domain entities for quote, intraday and news data.
Zero external dependencies: pure Python dataclasses only.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

# Taiwan has no daylight saving; a fixed offset avoids depending on a tz database.
EXCHANGE_TZ = timezone(timedelta(hours=8), "Asia/Taipei")


@dataclass(frozen=True)
class QuoteSnapshot:
    symbol: str
    name: str
    price: float
    change: Optional[float]
    percent_change: Optional[float]
    volume: Optional[int]
    day_high: Optional[float]
    day_low: Optional[float]
    open: Optional[float]
    previous_close: Optional[float]


@dataclass(frozen=True)
class PricePoint:
    """One intraday sample. close/volume are None when the provider had no trade."""

    timestamp: datetime
    close: Optional[float]
    volume: Optional[int]


@dataclass(frozen=True)
class NewsItem:
    title: str
    link: str
    publisher: str
    published_at: Optional[datetime]
