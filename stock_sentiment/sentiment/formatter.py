"""Alert string formatting: ``"<magnitude>,<BUY|SELL>,<symbol>"``."""

from __future__ import annotations

from typing import Iterable

from stock_sentiment.models.trade import RankedEntry

ALERT_DELIMITER = ","


def format_alert(entry: RankedEntry) -> str:
    """Render one ranked entry, e.g. ``RankedEntry("AMZN", -3)`` -> ``"3,SELL,AMZN"``."""
    return ALERT_DELIMITER.join((str(entry.magnitude), entry.direction.value, entry.symbol))


def build_alert_strings(entries: Iterable[RankedEntry]) -> list[str]:
    """Format every entry, preserving order."""
    return [format_alert(entry) for entry in entries]
