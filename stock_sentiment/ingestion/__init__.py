"""
Ingestion layer: raw trade line parsing and the friend/trade lookup boundary.

Modules
-------
trade_parser  : parse_trade_line() + TradeParseError — one line -> Trade.
friend_oracle : FriendOracle protocol + InMemoryFriendOracle + JsonFriendOracle.
"""
