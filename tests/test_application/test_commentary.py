"""Tests for the templated commentary block."""

from dataclasses import replace

import pytest

from stockboard.application.services.commentary import Trend, build_commentary, classify_trend


class TestClassifyTrend:
    @pytest.mark.parametrize(
        "pct,expected",
        [
            (0.87, Trend.BULLISH),
            (0.51, Trend.BULLISH),
            (0.5, Trend.NEUTRAL),
            (0.0, Trend.NEUTRAL),
            (None, Trend.NEUTRAL),
            (-0.5, Trend.NEUTRAL),
            (-0.51, Trend.BEARISH),
            (-3.2, Trend.BEARISH),
        ],
    )
    def test_thresholds(self, pct, expected):
        assert classify_trend(pct) is expected


class TestBuildCommentary:
    def test_positive_quote_selects_bullish_branch(self, sample_quote):
        block = build_commentary(sample_quote)

        assert (block.gemini.view, block.gemini.score) == ("偏多", 82)
        assert (block.gpt.view, block.gpt.score) == ("買進", 78)
        assert (block.deepseek.view, block.deepseek.score) == ("看多", 75)
        assert block.summary.startswith("三大模型一致偏多")
        assert "0.87%" in block.summary

    def test_volume_rendered_in_lots(self, sample_quote):
        block = build_commentary(sample_quote)

        assert "25,431 張" in block.gpt.desc

    def test_negative_quote_selects_bearish_branch(self, sample_quote):
        block = build_commentary(replace(sample_quote, change=-12.0, percent_change=-2.08))

        assert [block.gemini.view, block.gpt.view, block.deepseek.view] == ["偏空", "減碼", "看空"]
        assert "2.08%" in block.summary
        assert "-2.08" not in block.summary

    def test_flat_quote_is_neutral(self, sample_quote):
        block = build_commentary(replace(sample_quote, percent_change=0.1, volume=None))

        assert block.gemini.view == "中立"
        assert "0 張" in block.gpt.desc

    def test_deterministic_and_scores_in_range(self, sample_quote):
        first = build_commentary(sample_quote)

        assert first == build_commentary(sample_quote)
        for opinion in (first.gemini, first.gpt, first.deepseek):
            assert 0 <= opinion.score <= 100
