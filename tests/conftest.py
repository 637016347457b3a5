"""
Shared pytest fixtures for the stock sentiment test suite.

Provides:
  - ``fixed_now`` / ``fixed_clock``: a pinned "now" so window math is
    deterministic regardless of when the suite runs.
  - ``cutoff``: the 7-day cutoff day derived from ``fixed_now``.
  - ``day``: helper that renders ``cutoff + n days`` as ``YYYY-MM-DD``.
  - ``two_friend_oracle``: the pooled two-friend social graph used by the
    end-to-end alert tests.
  - ``_restore_root_logger`` (autouse): undoes ``configure_logging()`` calls
    made by CLI and logging tests.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Callable

import pytest

from stock_sentiment.ingestion.friend_oracle import InMemoryFriendOracle
from stock_sentiment.utils.time_utils import compute_cutoff

FIXED_NOW = datetime(2026, 10, 19, 15, 30, 0)


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


# ── Time fixtures ─────────────────────────────────────────────────────────────

@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def fixed_clock(fixed_now) -> Callable[[], datetime]:
    return lambda: fixed_now


@pytest.fixture
def cutoff(fixed_now) -> date:
    """Cutoff day for the default 7-day window (2026-10-12)."""
    return compute_cutoff(fixed_now)


@pytest.fixture
def day(cutoff) -> Callable[[int], str]:
    """Return ``cutoff + offset`` days formatted as a trade-line date."""

    def _day(offset: int) -> str:
        return (cutoff + timedelta(days=offset)).isoformat()

    return _day


# ── Oracle fixtures ───────────────────────────────────────────────────────────

@pytest.fixture
def two_friend_oracle(day) -> InMemoryFriendOracle:
    """Two friends whose pooled trades produce five non-zero symbols.

    Net ranks: GRPN -3, AAPL -2, CRM +2, AMZN +1, GOOG +1, BABA 0.
    """
    return InMemoryFriendOracle(
        friends={"myUserId": ["user1", "user2"]},
        trades={
            "user1": [
                "2014-01-01,BUY,GOOG",
                f"{day(1)},BUY,AMZN",
                f"{day(2)},SELL,BABA",
                f"{day(4)},SELL,GRPN",
                f"{day(6)},SELL,GRPN",
                f"{day(6)},SELL,AAPL",
                f"{day(6)},BUY,CRM",
            ],
            "user2": [
                f"{day(1)},BUY,GOOG",
                f"{day(2)},BUY,BABA",
                f"{day(2)},SELL,GRPN",
                f"{day(6)},SELL,AAPL",
                f"{day(6)},BUY,CRM",
            ],
        },
    )
