"""
Stock ranker: turns an accumulated rank map into an ordered list of
:class:`RankedEntry`.

Ordering
--------
1. Symbols whose net rank is exactly 0 are dropped.
2. Primary key: ``abs(rank)`` descending. Strong buys and strong sells
   rank together.
3. Tie-break: symbol ascending (plain string comparison, case-sensitive),
   so output never depends on dict iteration order.
"""

from __future__ import annotations

from typing import Mapping

from stock_sentiment.models.trade import RankedEntry


def rank_stocks(rank_map: Mapping[str, int]) -> list[RankedEntry]:
    """Filter zero ranks and order the rest by magnitude, then symbol.

    Args:
        rank_map: Symbol -> signed rank.

    Returns:
        List of :class:`RankedEntry`, strongest signal first. Empty for an
        empty map.
    """
    non_zero = [(symbol, rank) for symbol, rank in rank_map.items() if rank != 0]
    ordered = sorted(non_zero, key=lambda item: (-abs(item[1]), item[0]))
    return [RankedEntry(symbol=symbol, rank=rank) for symbol, rank in ordered]
