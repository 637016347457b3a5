"""
Tests for stock_sentiment.ingestion.trade_parser — raw trade line parsing.

Covers:
  - parse_trade_line(): valid BUY/SELL lines, permissive direction tokens,
    verbatim symbols, wrong field counts, bad dates, empty symbol
  - TradeParseError carries the offending line
"""

from __future__ import annotations

from datetime import date

import pytest

from stock_sentiment.ingestion.trade_parser import TradeParseError, parse_trade_line
from stock_sentiment.models.trade import Trade
from stock_sentiment.taxonomy.trade_taxonomy import TradeDirection


# ── parse_trade_line — happy path ──────────────────────────────────────────────

class TestParseTradeLineValid:
    def test_buy_line(self):
        trade = parse_trade_line("2024-03-14,BUY,GOOG")
        assert isinstance(trade, Trade)
        assert trade.trade_date == date(2024, 3, 14)
        assert trade.direction is TradeDirection.BUY
        assert trade.symbol == "GOOG"
        assert trade.signal == 1

    def test_sell_line(self):
        trade = parse_trade_line("2024-03-14,SELL,AMZN")
        assert trade.direction is TradeDirection.SELL
        assert trade.signal == -1

    def test_symbol_is_case_sensitive(self):
        assert parse_trade_line("2024-03-14,BUY,goog").symbol == "goog"

    def test_trade_is_frozen(self):
        trade = parse_trade_line("2024-03-14,BUY,GOOG")
        with pytest.raises(Exception):
            trade.symbol = "AAPL"  # type: ignore[misc]

    def test_custom_buy_token(self):
        trade = parse_trade_line("2024-03-14,B,GOOG", buy_token="B")
        assert trade.direction is TradeDirection.BUY


# ── parse_trade_line — permissive direction tokens ─────────────────────────────

class TestDirectionTokens:
    @pytest.mark.parametrize("token", ["buy", "Buy", "HOLD", "", " BUY", "SELL "])
    def test_anything_but_exact_buy_is_a_sell(self, token):
        trade = parse_trade_line(f"2024-03-14,{token},GOOG")
        assert trade.direction is TradeDirection.SELL


# ── parse_trade_line — errors ──────────────────────────────────────────────────

class TestParseTradeLineErrors:
    @pytest.mark.parametrize(
        "line",
        ["", "2024-03-14,BUY", "2024-03-14,BUY,GOOG,extra", "2024-03-14"],
    )
    def test_wrong_field_count_raises(self, line):
        with pytest.raises(TradeParseError, match="3 comma-separated fields"):
            parse_trade_line(line)

    @pytest.mark.parametrize(
        "raw_date",
        ["2024-3-14", "14-03-2024", "2024/03/14", "2024-02-30", "2024-03-14T10:00", "yesterday"],
    )
    def test_bad_date_raises(self, raw_date):
        with pytest.raises(TradeParseError, match="Invalid trade date"):
            parse_trade_line(f"{raw_date},BUY,GOOG")

    def test_empty_symbol_raises(self):
        with pytest.raises(TradeParseError, match="symbol"):
            parse_trade_line("2024-03-14,BUY,")

    def test_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            parse_trade_line("garbage")

    def test_error_keeps_offending_line(self):
        with pytest.raises(TradeParseError) as exc_info:
            parse_trade_line("2024-03-14,BUY")
        assert exc_info.value.line == "2024-03-14,BUY"
        assert "2024-03-14,BUY" in str(exc_info.value)
