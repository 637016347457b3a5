"""
Trade and ranking models.

Two-stage design:
  1. ``Trade``       — one parsed trade line: (date, direction, symbol).
  2. ``RankedEntry`` — one symbol's net rank after accumulation and
                       zero-filtering, ready to be ordered and formatted.

Both models are frozen (immutable) after construction. A ``Trade`` only
lives for the duration of one alert computation; nothing is persisted.
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, field_validator

from stock_sentiment.taxonomy.trade_taxonomy import TradeDirection


class Trade(BaseModel):
    """A single parsed trade transaction.

    Attributes:
        trade_date: Calendar day of the trade (no time component).
        direction: ``TradeDirection.BUY`` or ``TradeDirection.SELL``.
        symbol: Stock symbol, case-sensitive, taken verbatim from the record.
    """

    model_config = ConfigDict(frozen=True)

    trade_date: date
    direction: TradeDirection
    symbol: str

    @field_validator("symbol")
    @classmethod
    def validate_symbol(cls, v: str) -> str:
        if not v:
            raise ValueError("symbol must not be empty.")
        return v

    @property
    def signal(self) -> int:
        """Signed contribution of this trade to its symbol's rank."""
        return self.direction.signal


class RankedEntry(BaseModel):
    """A symbol paired with its non-zero net rank.

    Attributes:
        symbol: Stock symbol.
        rank: Signed sum of buy/sell signals; never 0.
    """

    model_config = ConfigDict(frozen=True)

    symbol: str
    rank: int

    @field_validator("rank")
    @classmethod
    def validate_rank_non_zero(cls, v: int) -> int:
        if v == 0:
            raise ValueError("rank must be non-zero; zero-rank symbols are dropped before ranking.")
        return v

    @property
    def magnitude(self) -> int:
        return abs(self.rank)

    @property
    def direction(self) -> TradeDirection:
        return TradeDirection.from_rank(self.rank)
