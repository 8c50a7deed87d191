"""
Templated per-persona commentary derived from a quote.

The three "opinions" are fixed text templates selected by the sign and size
of the day's percent change; no model is called and nothing is random, so the
same quote always produces the same block.
"""

from enum import Enum

from stockboard.domain.entities.commentary import CommentaryBlock, Opinion
from stockboard.domain.entities.market_data import QuoteSnapshot

TREND_THRESHOLD_PCT = 0.5


class Trend(str, Enum):
    BULLISH = "bullish"
    BEARISH = "bearish"
    NEUTRAL = "neutral"


def classify_trend(percent_change: float | None) -> Trend:
    pct = percent_change or 0.0
    if pct > TREND_THRESHOLD_PCT:
        return Trend.BULLISH
    if pct < -TREND_THRESHOLD_PCT:
        return Trend.BEARISH
    return Trend.NEUTRAL


# (view, score, desc template) per persona and trend.
_GEMINI = {
    Trend.BULLISH: ("偏多", 82, "股價上漲 {pct:.2f}%，短線動能轉強，均線有望翻揚，可留意回測支撐後的布局機會。"),
    Trend.BEARISH: ("偏空", 35, "股價下跌 {abs_pct:.2f}%，短線走勢轉弱，建議觀察前波低點是否守住。"),
    Trend.NEUTRAL: ("中立", 55, "股價波動 {pct:.2f}%，走勢盤整，等待方向明確後再行動。"),
}
_GPT = {
    Trend.BULLISH: ("買進", 78, "成交量 {lots:,} 張，價漲量增，資金進駐跡象明顯，短期偏多操作。"),
    Trend.BEARISH: ("減碼", 30, "成交量 {lots:,} 張，賣壓湧現，建議降低持股並設好停損。"),
    Trend.NEUTRAL: ("觀望", 50, "成交量 {lots:,} 張，量能平淡，多空力道均衡，暫以觀望為宜。"),
}
_DEEPSEEK = {
    Trend.BULLISH: ("看多", 75, "漲幅 {pct:.2f}% 優於盤整區間，技術面偏多，但需留意追高風險。"),
    Trend.BEARISH: ("看空", 38, "跌幅 {abs_pct:.2f}% 超出正常波動，短線情緒偏悲觀，宜等待止跌訊號。"),
    Trend.NEUTRAL: ("持平", 52, "漲跌幅 {pct:.2f}% 在正常範圍內，基本面未見明顯變化，維持中性看法。"),
}
_SUMMARY = {
    Trend.BULLISH: "三大模型一致偏多：今日上漲 {pct:.2f}%，量價配合良好，短線趨勢向上。",
    Trend.BEARISH: "三大模型一致偏空：今日下跌 {abs_pct:.2f}%，短線賣壓較重，操作宜保守。",
    Trend.NEUTRAL: "三大模型看法中性：今日漲跌 {pct:.2f}%，盤勢整理中，建議等待明確訊號。",
}


def _opinion(name: str, templates: dict, trend: Trend, values: dict) -> Opinion:
    view, score, desc = templates[trend]
    return Opinion(name=name, view=view, desc=desc.format(**values), score=score)


def build_commentary(quote: QuoteSnapshot) -> CommentaryBlock:
    trend = classify_trend(quote.percent_change)
    pct = quote.percent_change or 0.0
    values = {
        "pct": pct,
        "abs_pct": abs(pct),
        "lots": (quote.volume or 0) // 1000,
    }
    return CommentaryBlock(
        gemini=_opinion("Gemini", _GEMINI, trend, values),
        gpt=_opinion("GPT-4o", _GPT, trend, values),
        deepseek=_opinion("DeepSeek", _DEEPSEEK, trend, values),
        summary=_SUMMARY[trend].format(**values),
    )
