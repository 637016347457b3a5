"""
Rank accumulator: parses trade lines, applies the trailing window, and sums
directional signals per symbol into a shared rank map.

The rank map is a plain ``dict[str, int]``. It is created fresh for each
alert computation and pooled across all of a user's friends. A symbol is
inserted only when one of its trades falls inside the window, so a trade
outside the window never leaves a zero entry behind.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Optional

from stock_sentiment.ingestion.trade_parser import (
    DEFAULT_DATE_FORMAT,
    TradeParseError,
    parse_trade_line,
)

logger = logging.getLogger(__name__)

RankMap = dict[str, int]


def is_within_window(trade_date: date, cutoff: date) -> bool:
    """True when ``trade_date`` is strictly after the cutoff day."""
    return trade_date > cutoff


def accumulate_trade(
    line: str,
    cutoff: date,
    rank_map: RankMap,
    date_format: str = DEFAULT_DATE_FORMAT,
    buy_token: str = "BUY",
) -> bool:
    """Fold one trade line into ``rank_map`` in place.

    Args:
        line: Raw ``"date,direction,symbol"`` record.
        cutoff: Window cutoff day from ``compute_cutoff()``.
        rank_map: Shared symbol -> rank mapping, mutated in place.
        date_format: ``strptime`` pattern for the date field.
        buy_token: Direction token that counts as a buy.

    Returns:
        ``True`` if the trade was inside the window and counted.

    Raises:
        TradeParseError: If ``line`` is malformed.
    """
    trade = parse_trade_line(line, date_format=date_format, buy_token=buy_token)
    if not is_within_window(trade.trade_date, cutoff):
        return False
    rank_map[trade.symbol] = rank_map.get(trade.symbol, 0) + trade.signal
    return True


def accumulate_trades(
    lines: Iterable[str],
    cutoff: date,
    rank_map: Optional[RankMap] = None,
    date_format: str = DEFAULT_DATE_FORMAT,
    buy_token: str = "BUY",
    skip_malformed: bool = False,
) -> RankMap:
    """Fold many trade lines into one rank map.

    Args:
        lines: Raw trade lines (any order).
        cutoff: Window cutoff day.
        rank_map: Map to extend. A new one is created when ``None``.
        date_format: ``strptime`` pattern for the date field.
        buy_token: Direction token that counts as a buy.
        skip_malformed: Log and skip malformed lines instead of raising.

    Returns:
        The (possibly newly created) rank map.

    Raises:
        TradeParseError: On the first malformed line, unless ``skip_malformed``.
    """
    if rank_map is None:
        rank_map = {}

    for line in lines:
        try:
            accumulate_trade(
                line, cutoff, rank_map, date_format=date_format, buy_token=buy_token
            )
        except TradeParseError as exc:
            if not skip_malformed:
                raise
            logger.warning("Skipping malformed trade line: %s", exc)

    return rank_map
