"""Shared test configuration and fixtures."""

from datetime import datetime, timedelta, timezone

import pytest

from stockboard.domain.entities.institutional_flow import InstitutionalTrade
from stockboard.domain.entities.market_data import NewsItem, PricePoint, QuoteSnapshot

TAIPEI = timezone(timedelta(hours=8))


@pytest.fixture
def sample_quote():
    return QuoteSnapshot(
        symbol="2330.TW",
        name="Taiwan Semiconductor Manufacturing Company Limited",
        price=578.0,
        change=5.0,
        percent_change=0.87,
        volume=25_431_000,
        day_high=580.0,
        day_low=571.0,
        open=573.0,
        previous_close=573.0,
    )


@pytest.fixture
def sample_chart():
    base = datetime(2024, 5, 2, 9, 0, tzinfo=TAIPEI)
    return [
        PricePoint(timestamp=base, close=573.0, volume=1_200_000),
        PricePoint(timestamp=base + timedelta(minutes=5), close=575.0, volume=0),
        PricePoint(timestamp=base + timedelta(minutes=10), close=None, volume=800_000),
        PricePoint(timestamp=base + timedelta(minutes=15), close=578.0, volume=650_000),
    ]


@pytest.fixture
def sample_news():
    published = datetime(2024, 5, 2, 1, 30, tzinfo=timezone.utc)
    return [
        NewsItem("台積電法說會釋利多", "https://example.com/a", "經濟日報", published),
        NewsItem("", "https://example.com/b", "工商時報", published),
        NewsItem("外資連三買台積電", "https://example.com/c", "鉅亨網", published),
        NewsItem("AI 需求強勁", "", "Yahoo", published),
        NewsItem("先進製程產能滿載", "https://example.com/d", "中央社", None),
        NewsItem("半導體庫存調整近尾聲", "https://example.com/e", "MoneyDJ", published),
    ]


@pytest.fixture
def sample_trades():
    return [
        InstitutionalTrade("2024-04-30", "2330", "Foreign_Investor", 30_000_000, 20_000_000),
        InstitutionalTrade("2024-05-02", "2330", "Foreign_Investor", 15_000_500, 10_000_000),
        InstitutionalTrade("2024-05-02", "2330", "Foreign_Dealer_Self", 0, 0),
        InstitutionalTrade("2024-05-02", "2330", "Investment_Trust", 200_000, 1_500_500),
        InstitutionalTrade("2024-05-02", "2330", "Dealer_self", 300_000, 100_000),
        InstitutionalTrade("2024-05-02", "2330", "Dealer_Hedging", 50_000, 250_000),
    ]


@pytest.fixture
def fixed_clock():
    return lambda: datetime(2024, 5, 2, 6, 0, tzinfo=timezone.utc)
