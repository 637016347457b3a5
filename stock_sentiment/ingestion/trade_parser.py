"""
Parser for raw friend trade lines.

Format — exactly three comma-separated fields, no header::

    YYYY-MM-DD,BUY|SELL,SYMBOL
    2024-03-14,BUY,GOOG

Direction token:
  Only an exact ``BUY`` is a buy. ``SELL``, lowercase ``buy`` and any other
  token are read as a sell. No error is raised for unknown tokens.

Date:
  Four-digit year, two-digit month, two-digit day, dash-separated. Day
  granularity only; anything else (time suffix, ``2024-3-4``) is rejected.

A malformed line raises ``TradeParseError``. Callers decide whether that
aborts the whole computation (the default) or is logged and skipped.
"""

from __future__ import annotations

import re
from datetime import date, datetime

from pydantic import ValidationError

from stock_sentiment.models.trade import Trade
from stock_sentiment.taxonomy.trade_taxonomy import TradeDirection

FIELD_DELIMITER = ","
EXPECTED_FIELD_COUNT = 3
DEFAULT_DATE_FORMAT = "%Y-%m-%d"

_ISO_DAY_SHAPE = re.compile(r"\d{4}-\d{2}-\d{2}")


class TradeParseError(ValueError):
    """A trade line could not be parsed.

    Attributes:
        line: The offending raw line.
    """

    def __init__(self, message: str, line: str) -> None:
        super().__init__(f"{message} (line: {line!r})")
        self.line = line


def parse_trade_line(
    line: str,
    date_format: str = DEFAULT_DATE_FORMAT,
    buy_token: str = "BUY",
) -> Trade:
    """Parse one raw trade line into a validated :class:`Trade`.

    Args:
        line: Raw ``"date,direction,symbol"`` record.
        date_format: ``strptime`` pattern for the date field.
        buy_token: Direction token that counts as a buy.

    Returns:
        Frozen :class:`Trade`.

    Raises:
        TradeParseError: Wrong field count, unparseable date or empty symbol.
    """
    fields = line.split(FIELD_DELIMITER)
    if len(fields) != EXPECTED_FIELD_COUNT:
        raise TradeParseError(
            f"Expected {EXPECTED_FIELD_COUNT} comma-separated fields, got {len(fields)}",
            line,
        )

    raw_date, raw_direction, symbol = fields
    trade_date = _parse_trade_date(raw_date, date_format, line)

    try:
        return Trade(
            trade_date=trade_date,
            direction=TradeDirection.from_token(raw_direction, buy_token),
            symbol=symbol,
        )
    except ValidationError as exc:
        raise TradeParseError(f"Invalid trade record: {exc.errors()[0]['msg']}", line) from exc


def _parse_trade_date(raw: str, date_format: str, line: str) -> date:
    """Parse the date field at day granularity."""
    if date_format == DEFAULT_DATE_FORMAT and not _ISO_DAY_SHAPE.fullmatch(raw):
        raise TradeParseError(f"Invalid trade date '{raw}'. Expected YYYY-MM-DD format", line)
    try:
        return datetime.strptime(raw, date_format).date()
    except ValueError as exc:
        raise TradeParseError(
            f"Invalid trade date '{raw}'. Expected format {date_format}", line
        ) from exc
