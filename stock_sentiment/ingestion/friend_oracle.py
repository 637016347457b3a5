"""
Friend oracle — the only boundary between the sentiment core and the outside.

The core needs exactly two lookups:

  - ``get_friends_list_for_user(user_id)``      -> friend ids
  - ``get_trade_transactions_for_user(user_id)`` -> raw trade lines

Any object with those two methods satisfies :class:`FriendOracle`. Retry,
timeout and caching policy belong to the implementation, not to the core.

Two implementations ship here:

  - :class:`InMemoryFriendOracle` — dict-backed, used by tests and demos.
  - :class:`JsonFriendOracle`     — loaded from a JSON document on disk::

        {
          "friends": {"me": ["alice", "bob"]},
          "trades": {
            "alice": ["2024-03-14,BUY,GOOG"],
            "bob":   ["2024-03-15,SELL,GRPN"]
          }
        }
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Mapping, Optional, Protocol, Sequence, runtime_checkable

from pydantic import BaseModel, ConfigDict, ValidationError

logger = logging.getLogger(__name__)


@runtime_checkable
class FriendOracle(Protocol):
    """Friend and trade lookup contract."""

    def get_friends_list_for_user(self, user_id: str) -> Sequence[str]:
        ...

    def get_trade_transactions_for_user(self, user_id: str) -> Sequence[str]:
        ...


class InMemoryFriendOracle:
    """Dict-backed :class:`FriendOracle`.

    Unknown user ids yield empty lists rather than errors.

    Attributes:
        friends: user id -> friend ids.
        trades: user id -> raw trade lines.
    """

    def __init__(
        self,
        friends: Optional[Mapping[str, Sequence[str]]] = None,
        trades: Optional[Mapping[str, Sequence[str]]] = None,
    ) -> None:
        self.friends: dict[str, list[str]] = {
            k: list(v) for k, v in (friends or {}).items()
        }
        self.trades: dict[str, list[str]] = {
            k: list(v) for k, v in (trades or {}).items()
        }

    def get_friends_list_for_user(self, user_id: str) -> list[str]:
        return list(self.friends.get(user_id, []))

    def get_trade_transactions_for_user(self, user_id: str) -> list[str]:
        return list(self.trades.get(user_id, []))


class SocialGraphDocument(BaseModel):
    """Validated shape of a friend-oracle JSON document."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    friends: dict[str, list[str]] = {}
    trades: dict[str, list[str]] = {}


class JsonFriendOracle(InMemoryFriendOracle):
    """:class:`FriendOracle` backed by a JSON file loaded once at construction.

    Attributes:
        path: Source file the data was loaded from.
    """

    def __init__(self, path: Path) -> None:
        document = load_social_graph(path)
        super().__init__(friends=document.friends, trades=document.trades)
        self.path = path


def load_social_graph(path: Path) -> SocialGraphDocument:
    """Read and validate a friend-oracle JSON document.

    Args:
        path: Path to the JSON file (must exist).

    Returns:
        Validated :class:`SocialGraphDocument`.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: If the file is not valid JSON or has the wrong shape.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Social graph file not found: {path}")

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path.name}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ValueError(f"{path.name} must contain a JSON object with 'friends' and 'trades'.")

    try:
        document = SocialGraphDocument(**raw)
    except ValidationError as exc:
        raise ValueError(f"{path.name} failed validation:\n{exc}") from exc

    logger.info(
        "Loaded social graph from %s (%d users with friends, %d users with trades)",
        path.name, len(document.friends), len(document.trades),
    )
    return document


def load_friend_oracle(path: Path) -> JsonFriendOracle:
    """Convenience wrapper: build a :class:`JsonFriendOracle` from ``path``."""
    return JsonFriendOracle(Path(path))
