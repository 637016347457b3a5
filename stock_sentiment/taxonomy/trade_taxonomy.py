"""
Trade taxonomy for friend trade transactions.

``TradeDirection`` is the only dimension a trade record carries. Each
direction contributes a signed ``signal`` to a symbol's rank: ``+1`` for a
buy and ``-1`` for a sell.

Usage example::

    from stock_sentiment.taxonomy.trade_taxonomy import TradeDirection

    TradeDirection.from_token("BUY").signal    # 1
    TradeDirection.from_token("HOLD").signal   # -1  (anything not BUY is a sell)

This module has NO imports from any other ``stock_sentiment`` package.
"""

from enum import StrEnum


class TradeDirection(StrEnum):
    """Direction of a single trade transaction."""

    BUY = "BUY"
    """Friend bought the stock; counts +1 toward the symbol's rank."""

    SELL = "SELL"
    """Friend sold the stock; counts -1 toward the symbol's rank."""

    @property
    def signal(self) -> int:
        return 1 if self is TradeDirection.BUY else -1

    @classmethod
    def from_token(cls, token: str, buy_token: str = "BUY") -> "TradeDirection":
        """Map a raw direction token to a direction.

        Only an exact match on ``buy_token`` is a buy. Every other token,
        including lowercase ``"buy"`` and unknown values, is read as a sell.
        """
        return cls.BUY if token == buy_token else cls.SELL

    @classmethod
    def from_rank(cls, rank: int) -> "TradeDirection":
        """Net direction of a non-zero rank."""
        return cls.BUY if rank > 0 else cls.SELL
