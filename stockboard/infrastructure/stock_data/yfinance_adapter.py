"""
Infrastructure adapter: yfinance → IMarketDataProvider.
All yfinance-specific details (ticker.info, fast_info, get_news(), history()) are
confined here; the rest of the codebase depends only on IMarketDataProvider.
"""

import math
from datetime import datetime, timezone
from typing import Any, Optional

import pandas as pd
import yfinance as yf

from stockboard.domain.entities.market_data import NewsItem, PricePoint, QuoteSnapshot
from stockboard.domain.ports.market_data_port import IMarketDataProvider


def _number(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return None if math.isnan(number) else round(number, 4)


def _integer(value: Any) -> Optional[int]:
    number = _number(value)
    return None if number is None else int(number)


def _first(*values: Any) -> Optional[float]:
    for value in values:
        number = _number(value)
        if number is not None:
            return number
    return None


def _parse_iso(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


def _parse_news_item(raw: dict) -> NewsItem:
    """Map either the nested 'content' item shape or the legacy flat shape."""
    content = raw.get("content")
    if isinstance(content, dict):
        link = (content.get("canonicalUrl") or {}).get("url") or (
            content.get("clickThroughUrl") or {}
        ).get("url")
        return NewsItem(
            title=(content.get("title") or "").strip(),
            link=link or "",
            publisher=(content.get("provider") or {}).get("displayName") or "",
            published_at=_parse_iso(content.get("pubDate") or content.get("displayTime")),
        )

    published = raw.get("providerPublishTime")
    return NewsItem(
        title=(raw.get("title") or "").strip(),
        link=raw.get("link") or "",
        publisher=raw.get("publisher") or "",
        published_at=(
            datetime.fromtimestamp(published, tz=timezone.utc) if published else None
        ),
    )


class YFinanceMarketDataProvider(IMarketDataProvider):
    """Fetches quotes, news and intraday bars from Yahoo Finance via the yfinance library."""

    def __init__(self, timeout: float = 8.0) -> None:
        self._timeout = timeout

    def get_quote(self, symbol: str) -> QuoteSnapshot:
        ticker = yf.Ticker(symbol)
        info = ticker.info or {}
        fast_info = ticker.fast_info

        price = _first(info.get("regularMarketPrice"), info.get("currentPrice"))
        if price is None:
            price = _number(getattr(fast_info, "last_price", None))
        if price is None:
            raise ValueError(f"No price data available for symbol: {symbol!r}")

        previous_close = _first(
            info.get("regularMarketPreviousClose"),
            info.get("previousClose"),
            getattr(fast_info, "previous_close", None),
        )
        change = _number(info.get("regularMarketChange"))
        if change is None and previous_close:
            change = round(price - previous_close, 4)
        percent_change = _number(info.get("regularMarketChangePercent"))
        if percent_change is None and change is not None and previous_close:
            percent_change = round(change / previous_close * 100, 4)

        return QuoteSnapshot(
            symbol=symbol,
            name=info.get("longName") or info.get("shortName") or symbol,
            price=price,
            change=change,
            percent_change=percent_change,
            volume=_integer(info.get("regularMarketVolume") or info.get("volume")),
            day_high=_first(info.get("regularMarketDayHigh"), info.get("dayHigh")),
            day_low=_first(info.get("regularMarketDayLow"), info.get("dayLow")),
            open=_first(info.get("regularMarketOpen"), info.get("open")),
            previous_close=previous_close,
        )

    def get_news(self, symbol: str, count: int = 10) -> list[NewsItem]:
        raw_items = yf.Ticker(symbol).get_news(count=count) or []
        return [_parse_news_item(raw) for raw in raw_items if isinstance(raw, dict)]

    def get_intraday(
        self,
        symbol: str,
        start: datetime,
        interval: str = "5m",
    ) -> list[PricePoint]:
        history = yf.Ticker(symbol).history(
            start=start, interval=interval, timeout=self._timeout
        )
        if history.empty:
            return []

        return [
            PricePoint(
                timestamp=pd.Timestamp(ts).to_pydatetime(),
                close=_number(row["Close"]),
                volume=_integer(row["Volume"]),
            )
            for ts, row in history.iterrows()
        ]
