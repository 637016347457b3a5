"""
Stock sentiment digest: ranked buy/sell alerts from a user's friends' trades.

Typical use::

    from stock_sentiment import StockSentiment
    from stock_sentiment.ingestion.friend_oracle import InMemoryFriendOracle

    oracle = InMemoryFriendOracle(friends={...}, trades={...})
    StockSentiment(oracle).get_alerts("me")
    # ["3,SELL,GRPN", "2,BUY,CRM", ...]
"""

from stock_sentiment.sentiment.service import StockSentiment, get_alerts

__all__ = ["StockSentiment", "get_alerts"]
__version__ = "0.1.0"
