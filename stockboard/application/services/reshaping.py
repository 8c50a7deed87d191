"""
Pure reshaping of raw provider results into dashboard-ready sequences.
Depends only on Domain entities; no infrastructure imports.
"""

import math
from collections import defaultdict
from datetime import date

from stockboard.domain.entities.institutional_flow import (
    ActorFlow,
    InstitutionalActor,
    InstitutionalFlow,
    InstitutionalTrade,
)
from stockboard.domain.entities.market_data import EXCHANGE_TZ, NewsItem, PricePoint

NEWS_LIMIT = 3
SHARES_PER_LOT = 1000

# FinMind investor names grouped into the three actors shown on the dashboard.
INVESTOR_ACTORS = {
    "Foreign_Investor": InstitutionalActor.FOREIGN,
    "Foreign_Dealer_Self": InstitutionalActor.FOREIGN,
    "Investment_Trust": InstitutionalActor.INVESTMENT_TRUST,
    "Dealer_self": InstitutionalActor.DEALER,
    "Dealer_Hedging": InstitutionalActor.DEALER,
    "Dealer": InstitutionalActor.DEALER,
}


def _has_trade(point: PricePoint) -> bool:
    if point.close is None or math.isnan(point.close):
        return False
    return bool(point.volume)


def session_date(point: PricePoint) -> date:
    """Exchange-local trading date of a sample; naive timestamps are taken as local."""
    ts = point.timestamp
    return (ts.astimezone(EXCHANGE_TZ) if ts.tzinfo is not None else ts).date()


def filter_intraday(points: list[PricePoint]) -> list[PricePoint]:
    """Traded samples of the most recent session, in order.

    Samples with zero/missing volume or no close are dropped first; the
    lookback window can span two sessions, so only the latest exchange-local
    date among the remaining samples is kept.
    """
    traded = [p for p in points if _has_trade(p)]
    if not traded:
        return []
    latest = max(session_date(p) for p in traded)
    return [p for p in traded if session_date(p) == latest]


def select_news(items: list[NewsItem], limit: int = NEWS_LIMIT) -> list[NewsItem]:
    """Keep well-formed items (title and link present) in provider order, truncated."""
    well_formed = [item for item in items if item.title and item.link]
    return well_formed[:limit]


def summarize_institutional_flow(trades: list[InstitutionalTrade]) -> InstitutionalFlow:
    """Net buy-minus-sell per actor for the most recent date present, in lots.

    Lots are floor((buy - sell) / 1000). An actor with no rows on that date,
    or an empty input, yields None rather than 0.
    """
    if not trades:
        return InstitutionalFlow.unavailable()

    latest = max(t.date for t in trades)
    net_shares: dict[InstitutionalActor, int] = defaultdict(int)
    seen: set[InstitutionalActor] = set()
    for trade in trades:
        actor = INVESTOR_ACTORS.get(trade.investor)
        if trade.date != latest or actor is None:
            continue
        net_shares[actor] += trade.buy - trade.sell
        seen.add(actor)

    return InstitutionalFlow(
        trade_date=latest,
        actors=tuple(
            ActorFlow(
                actor=actor,
                net_lots=net_shares[actor] // SHARES_PER_LOT if actor in seen else None,
            )
            for actor in InstitutionalActor
        ),
    )
