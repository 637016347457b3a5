"""
Sentiment engine: folds friends' trade lines into ranked buy/sell alerts.

Modules
-------
accumulator : is_within_window() + accumulate_trade() + accumulate_trades()
              — parse, window-filter and sum signals into a rank map.
ranker      : rank_stocks() — drop zero ranks, order by magnitude then symbol.
formatter   : format_alert() + build_alert_strings() — "<n>,<BUY|SELL>,<symbol>".
service     : StockSentiment.get_alerts() — drives the pipeline for one user.
"""
