"""Tests for a single order's ratio history."""

import math

import pytest

from pairscope.charts.historical import prepare_historical_order_chart_data
from pairscope.ingestion.models import BalanceChange, Token, Trade


def _trade(timestamp: int, input_amount: str, output_amount: str) -> Trade:
    token = Token(address="0xoutput_token", symbol="output_token", decimals=1)
    return Trade(
        id=f"t-{timestamp}-{output_amount}",
        timestamp=timestamp,
        input_change=BalanceChange(token=token, formatted_amount=input_amount),
        output_change=BalanceChange(token=token, formatted_amount=output_amount),
    )


class TestPrepareHistoricalOrderChartData:
    def test_transforms_and_sorts(self):
        trades = [
            _trade(1632000000, "50", "100"),
            _trade(1631000000, "50", "100"),
            _trade(1630000000, "50", "100"),
        ]
        result = prepare_historical_order_chart_data(trades, "dark")

        assert len(result) == 3
        assert [p.time for p in result] == [1630000000, 1631000000, 1632000000]
        assert all(p.value == 0.5 for p in result)
        assert all(p.color == "#5178FF" for p in result)

    def test_light_theme_color(self):
        result = prepare_historical_order_chart_data([_trade(1, "1", "2")], "light")
        assert result[0].color == "#4E4AF6"

    def test_same_timestamp_weighted_by_output(self):
        trades = [
            _trade(1632000000, "50", "100"),  # 0.5
            _trade(1632000000, "50", "200"),  # 0.25
            _trade(1632000000, "50", "400"),  # 0.125
        ]
        result = prepare_historical_order_chart_data(trades, "dark")

        expected = (0.5 * 100 + 0.25 * 200 + 0.125 * 400) / (100 + 200 + 400)
        assert len(result) == 1
        assert result[0].value == pytest.approx(expected)
        assert result[0].color == "#5178FF"

    def test_signed_amounts_use_magnitudes(self):
        trades = [
            _trade(10, "50", "-100"),
            _trade(10, "-50", "-200"),
        ]
        result = prepare_historical_order_chart_data(trades, "dark")
        expected = (0.5 * 100 + 0.25 * 200) / 300
        assert result[0].value == pytest.approx(expected)
        assert result[0].value > 0

    def test_single_trade_value_unchanged(self):
        result = prepare_historical_order_chart_data([_trade(10, "3", "7")], "dark")
        assert result[0].value == 3 / 7

    def test_unusable_trades_skipped(self):
        trades = [
            _trade(10, "abc", "100"),
            _trade(20, "50", "0"),
            _trade(30, "50", "inf"),
            _trade(40, "50", "100"),
        ]
        result = prepare_historical_order_chart_data(trades, "dark")
        assert [p.time for p in result] == [40]

    def test_overflowing_ratio_skipped(self):
        trades = [
            _trade(10, "1e308", "1e-10"),
            _trade(20, "50", "100"),
        ]
        result = prepare_historical_order_chart_data(trades, "dark")
        assert [p.time for p in result] == [20]

    def test_overflowing_merge_dropped(self):
        # each ratio is finite but the weighted sum overflows
        trades = [
            _trade(10, "1e308", "10"),
            _trade(10, "1e308", "100"),
            _trade(20, "50", "100"),
        ]
        result = prepare_historical_order_chart_data(trades, "dark")
        assert [p.time for p in result] == [20]
        assert all(math.isfinite(p.value) for p in result)

    def test_empty(self):
        assert prepare_historical_order_chart_data([], "dark") == []
