"""
StockSentiment — computes the ranked alert digest for one user.

Pipeline for ``get_alerts(user_id)``
------------------------------------
1. Compute the window cutoff once from the injected clock.
2. Fetch the user's friend ids from the :class:`FriendOracle`.
3. For each friend, fetch trade lines and fold them into one shared rank map.
4. ``rank_stocks()`` -> ``build_alert_strings()``.

Each call is self-contained: the cutoff and rank map are rebuilt every time
and nothing is cached on the instance between calls.

Error handling
--------------
By default a single malformed trade line raises ``TradeParseError`` out of
``get_alerts()`` and no alerts are returned for that call. Setting
``sentiment.skip_malformed = true`` logs and skips bad lines instead.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional

from stock_sentiment.config import AppConfig
from stock_sentiment.ingestion.friend_oracle import FriendOracle
from stock_sentiment.sentiment.accumulator import RankMap, accumulate_trades
from stock_sentiment.sentiment.formatter import build_alert_strings
from stock_sentiment.sentiment.ranker import rank_stocks
from stock_sentiment.utils.time_utils import compute_cutoff

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class StockSentiment:
    """Aggregates friends' recent trades into ranked buy/sell alerts.

    Attributes:
        oracle: Friend/trade lookup collaborator.
        config: Application configuration (window length, tokens, error policy).
        clock: Zero-arg callable returning "now". Injected so tests can pin time.
    """

    def __init__(
        self,
        oracle: FriendOracle,
        config: Optional[AppConfig] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self.oracle = oracle
        self.config = config or AppConfig()
        self.clock = clock or datetime.now

    def get_alerts(self, user_id: str) -> list[str]:
        """Return formatted alerts for ``user_id``, strongest signal first.

        Args:
            user_id: Id of the user whose friends' trades are aggregated.

        Returns:
            Alert strings like ``"3,SELL,GRPN"``. Empty when no friend traded
            inside the window or every symbol netted to zero.

        Raises:
            TradeParseError: If a trade line is malformed and
                ``skip_malformed`` is off.
        """
        settings = self.config.sentiment
        cutoff = compute_cutoff(self.clock(), window_days=settings.window_days)
        logger.debug("Computing alerts for %s with cutoff %s", user_id, cutoff)

        friend_ids = self.oracle.get_friends_list_for_user(user_id) or []
        rank_map: RankMap = {}

        for friend_id in friend_ids:
            trades = self.oracle.get_trade_transactions_for_user(friend_id) or []
            logger.debug("Friend %s: %d trade line(s)", friend_id, len(trades))
            accumulate_trades(
                trades,
                cutoff,
                rank_map,
                date_format=settings.date_format,
                buy_token=settings.buy_token,
                skip_malformed=settings.skip_malformed,
            )

        alerts = build_alert_strings(rank_stocks(rank_map))
        logger.info(
            "Alerts for %s: %d friend(s), %d symbol(s) in window, %d alert(s)",
            user_id, len(friend_ids), len(rank_map), len(alerts),
        )
        return alerts


def get_alerts(
    oracle: FriendOracle,
    user_id: str,
    config: Optional[AppConfig] = None,
    clock: Optional[Clock] = None,
) -> list[str]:
    """Functional shortcut for ``StockSentiment(oracle, config, clock).get_alerts(user_id)``."""
    return StockSentiment(oracle, config=config, clock=clock).get_alerts(user_id)
