"""
Pydantic response models for the HTTP API.

Field aliases carry the wire names the dashboard front end reads
(prevClose, aiAnalysis, pct, ...); they must not change.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from stockboard.domain.entities.commentary import Opinion
from stockboard.domain.entities.dashboard import DashboardDocument
from stockboard.domain.entities.market_data import EXCHANGE_TZ, NewsItem, PricePoint


def _local(value: datetime) -> datetime:
    return value.astimezone(EXCHANGE_TZ) if value.tzinfo is not None else value


class ChartPointResponse(BaseModel):
    time: str
    price: float
    volume: int

    @classmethod
    def from_point(cls, point: PricePoint) -> "ChartPointResponse":
        return cls(
            time=_local(point.timestamp).strftime("%H:%M"),
            price=point.close,
            volume=point.volume,
        )


class OpinionResponse(BaseModel):
    name: str
    view: str
    desc: str
    score: int = Field(ge=0, le=100)

    @classmethod
    def from_opinion(cls, opinion: Opinion) -> "OpinionResponse":
        return cls(name=opinion.name, view=opinion.view, desc=opinion.desc, score=opinion.score)


class OpinionsResponse(BaseModel):
    gemini: OpinionResponse
    gpt: OpinionResponse
    deepseek: OpinionResponse


class AIAnalysisResponse(BaseModel):
    opinions: OpinionsResponse
    summary: str


class NewsItemResponse(BaseModel):
    title: str
    link: str
    publisher: str
    time: str

    @classmethod
    def from_item(cls, item: NewsItem) -> "NewsItemResponse":
        published = _local(item.published_at).strftime("%Y-%m-%d %H:%M") if item.published_at else ""
        return cls(title=item.title, link=item.link, publisher=item.publisher, time=published)


class ChipResponse(BaseModel):
    name: str
    val: Optional[int]


class DashboardResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    price: float
    change: Optional[float]
    pct: Optional[float]
    volume: Optional[int]
    high: Optional[float]
    low: Optional[float]
    open: Optional[float]
    prev_close: Optional[float] = Field(alias="prevClose")
    chart: list[ChartPointResponse]
    ai_analysis: AIAnalysisResponse = Field(alias="aiAnalysis")
    news: list[NewsItemResponse]
    chips: list[ChipResponse]

    @classmethod
    def from_document(cls, document: DashboardDocument) -> "DashboardResponse":
        quote = document.quote
        commentary = document.commentary
        return cls(
            name=quote.name,
            price=quote.price,
            change=quote.change,
            pct=quote.percent_change,
            volume=quote.volume,
            high=quote.day_high,
            low=quote.day_low,
            open=quote.open,
            prev_close=quote.previous_close,
            chart=[ChartPointResponse.from_point(p) for p in document.chart],
            ai_analysis=AIAnalysisResponse(
                opinions=OpinionsResponse(
                    gemini=OpinionResponse.from_opinion(commentary.gemini),
                    gpt=OpinionResponse.from_opinion(commentary.gpt),
                    deepseek=OpinionResponse.from_opinion(commentary.deepseek),
                ),
                summary=commentary.summary,
            ),
            news=[NewsItemResponse.from_item(item) for item in document.news],
            chips=[
                ChipResponse(name=flow.actor.value, val=flow.net_lots)
                for flow in document.flow.actors
            ],
        )


class ErrorResponse(BaseModel):
    error: str
    kind: str
    details: Optional[str] = None
