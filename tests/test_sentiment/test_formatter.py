"""Tests for stock_sentiment.sentiment.formatter."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from stock_sentiment.models.trade import RankedEntry
from stock_sentiment.sentiment.formatter import build_alert_strings, format_alert


def test_format_buy_alert() -> None:
    assert format_alert(RankedEntry(symbol="GOOG", rank=5)) == "5,BUY,GOOG"


def test_format_sell_alert_drops_sign() -> None:
    assert format_alert(RankedEntry(symbol="AMZN", rank=-3)) == "3,SELL,AMZN"


def test_format_multi_digit_magnitude() -> None:
    assert format_alert(RankedEntry(symbol="TSLA", rank=-120)) == "120,SELL,TSLA"


def test_symbol_printed_verbatim() -> None:
    assert format_alert(RankedEntry(symbol="brk.b", rank=1)) == "1,BUY,brk.b"


def test_build_alert_strings_preserves_order() -> None:
    entries = [RankedEntry(symbol="GOOG", rank=5), RankedEntry(symbol="AMZN", rank=-3)]
    assert build_alert_strings(entries) == ["5,BUY,GOOG", "3,SELL,AMZN"]


def test_build_alert_strings_empty() -> None:
    assert build_alert_strings([]) == []


def test_zero_rank_entry_rejected() -> None:
    """A zero rank never reaches the formatter; the model refuses it."""
    with pytest.raises(ValidationError):
        RankedEntry(symbol="AMZN", rank=0)
