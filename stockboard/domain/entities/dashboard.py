"""
Domain entity for the composite dashboard document returned per request.
Zero external dependencies: pure Python dataclasses only.
"""

from dataclasses import dataclass

from stockboard.domain.entities.commentary import CommentaryBlock
from stockboard.domain.entities.institutional_flow import InstitutionalFlow
from stockboard.domain.entities.market_data import NewsItem, PricePoint, QuoteSnapshot


@dataclass(frozen=True)
class DashboardDocument:
    """Everything the dashboard renders for one symbol.

    degraded_sources lists the secondary lookups ("news", "chart", "chips")
    that failed and were replaced by their empty placeholder. It is
    informational only and never turns the response into an error.
    """

    quote: QuoteSnapshot
    chart: list[PricePoint]
    news: list[NewsItem]
    flow: InstitutionalFlow
    commentary: CommentaryBlock
    degraded_sources: tuple[str, ...] = ()
