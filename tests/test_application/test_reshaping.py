"""Tests for intraday, news and institutional-flow reshaping."""

from datetime import datetime, timedelta, timezone

from stockboard.application.services.reshaping import (
    filter_intraday,
    select_news,
    session_date,
    summarize_institutional_flow,
)
from stockboard.domain.entities.institutional_flow import InstitutionalActor, InstitutionalTrade
from stockboard.domain.entities.market_data import EXCHANGE_TZ, NewsItem, PricePoint


def _net(flow):
    return {f.actor: f.net_lots for f in flow.actors}


class TestFilterIntraday:
    def test_drops_untraded_points_and_keeps_order(self, sample_chart):
        result = filter_intraday(sample_chart)

        assert result == [sample_chart[0], sample_chart[3]]

    def test_drops_nan_close_and_missing_volume(self):
        ts = datetime(2024, 5, 2, 9, 0)
        points = [
            PricePoint(ts, float("nan"), 100),
            PricePoint(ts, 10.0, None),
            PricePoint(ts, 11.0, 5),
        ]

        assert filter_intraday(points) == [points[2]]

    def test_empty_series(self):
        assert filter_intraday([]) == []

    def test_keeps_only_latest_session(self):
        day_one = datetime(2024, 5, 1, 9, 0, tzinfo=EXCHANGE_TZ)
        day_two = datetime(2024, 5, 2, 9, 0, tzinfo=EXCHANGE_TZ)
        points = [
            PricePoint(timestamp=day_one.replace(hour=12), close=570.0, volume=900),
            PricePoint(timestamp=day_one.replace(hour=13, minute=25), close=571.0, volume=800),
            PricePoint(timestamp=day_two, close=573.0, volume=1200),
            PricePoint(timestamp=day_two.replace(hour=10, minute=55), close=578.0, volume=700),
        ]

        result = filter_intraday(points)

        assert result == points[2:]
        assert {session_date(p) for p in result} == {day_two.date()}

    def test_untraded_latest_session_falls_back_to_prior_traded_one(self):
        day_one = datetime(2024, 5, 1, 13, 0, tzinfo=EXCHANGE_TZ)
        points = [
            PricePoint(timestamp=day_one, close=571.0, volume=800),
            PricePoint(timestamp=day_one + timedelta(hours=20), close=None, volume=0),
        ]

        assert filter_intraday(points) == points[:1]

    def test_session_date_uses_exchange_local_day(self):
        late_utc = PricePoint(
            timestamp=datetime(2024, 5, 1, 23, 30, tzinfo=timezone.utc), close=1.0, volume=1
        )
        naive = PricePoint(timestamp=datetime(2024, 5, 1, 23, 30), close=1.0, volume=1)

        assert session_date(late_utc).isoformat() == "2024-05-02"
        assert session_date(naive).isoformat() == "2024-05-01"


class TestSelectNews:
    def test_filters_malformed_before_truncating(self, sample_news):
        result = select_news(sample_news)

        assert [item.title for item in result] == [
            "台積電法說會釋利多",
            "外資連三買台積電",
            "先進製程產能滿載",
        ]

    def test_fewer_than_limit_kept_as_is(self):
        items = [NewsItem("a", "https://x/a", "p", None), NewsItem("b", "https://x/b", "p", None)]

        assert select_news(items) == items


class TestSummarizeInstitutionalFlow:
    def test_latest_date_grouped_and_scaled_to_lots(self, sample_trades):
        flow = summarize_institutional_flow(sample_trades)

        assert flow.trade_date == "2024-05-02"
        assert _net(flow) == {
            InstitutionalActor.FOREIGN: 5000,
            InstitutionalActor.INVESTMENT_TRUST: -1301,
            InstitutionalActor.DEALER: 0,
        }

    def test_actor_order_is_fixed(self, sample_trades):
        flow = summarize_institutional_flow(sample_trades)

        assert [f.actor for f in flow.actors] == list(InstitutionalActor)

    def test_no_data_yields_null_for_every_actor(self):
        flow = summarize_institutional_flow([])

        assert flow.trade_date is None
        assert set(_net(flow).values()) == {None}
        assert len(flow.actors) == 3

    def test_actor_missing_on_latest_date_is_null(self):
        trades = [
            InstitutionalTrade("2024-05-01", "2330", "Investment_Trust", 5000, 0),
            InstitutionalTrade("2024-05-02", "2330", "Foreign_Investor", 2999, 1000),
            InstitutionalTrade("2024-05-02", "2330", "Unknown_Class", 9000, 0),
        ]

        assert _net(summarize_institutional_flow(trades)) == {
            InstitutionalActor.FOREIGN: 1,
            InstitutionalActor.INVESTMENT_TRUST: None,
            InstitutionalActor.DEALER: None,
        }
