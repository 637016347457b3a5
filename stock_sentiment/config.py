"""
Application configuration management.

Load order (each layer overrides the previous):
  1. ``config/default.toml``      — committed static defaults
  2. ``config/local.toml``        — optional local overrides (gitignored)
  3. ``.env``                     — local secrets and env overrides (gitignored)
  4. Environment variables        — ``STOCK_SENTIMENT_*`` prefix

Entry point: ``load_config(config_path=None) -> AppConfig``

``StockSentiment`` and the CLI commands receive an ``AppConfig`` instance —
never raw dicts or individual env var lookups scattered through the codebase.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

# ── Sub-config models ─────────────────────────────────────────────────────────


class SentimentConfig(BaseModel):
    """Trade parsing and trailing-window settings.

    ``skip_malformed`` switches the accumulator from fail-fast (a single bad
    trade line aborts the whole alert computation) to log-and-skip.
    """

    model_config = ConfigDict(frozen=True)

    window_days: int = 7
    date_format: str = "%Y-%m-%d"
    buy_token: str = "BUY"
    skip_malformed: bool = False

    @field_validator("window_days")
    @classmethod
    def validate_window_days(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"window_days must be >= 1, got {v}.")
        return v

    @field_validator("buy_token")
    @classmethod
    def validate_buy_token(cls, v: str) -> str:
        if not v or "," in v:
            raise ValueError(f"buy_token must be a non-empty token without commas, got '{v}'.")
        return v


class LoggingConfig(BaseModel):
    """Logging output settings."""

    model_config = ConfigDict(frozen=True)

    level: str = "INFO"
    log_file: str = ""
    json_format: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"Log level must be one of {sorted(valid)}, got '{v}'.")
        return v.upper()


class AppConfig(BaseModel):
    """Complete application configuration — the single source of truth.

    It is constructed by ``load_config()`` which merges TOML + .env.
    ``AppConfig()`` with no arguments gives the built-in defaults.
    """

    model_config = ConfigDict(frozen=True)

    sentiment: SentimentConfig = SentimentConfig()
    logging: LoggingConfig = LoggingConfig()
    debug: bool = False


# ── Loader ────────────────────────────────────────────────────────────────────

_PROJECT_ROOT = Path(__file__).parent.parent


def _find_project_root() -> Path:
    """Walk up from this file to find the project root (contains pyproject.toml)."""
    candidate = Path(__file__).parent
    for _ in range(5):
        if (candidate / "pyproject.toml").exists():
            return candidate
        candidate = candidate.parent
    return _PROJECT_ROOT


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load and merge application configuration.

    Args:
        config_path: Explicit path to a TOML config file. Defaults to
            ``<project_root>/config/default.toml``.

    Returns:
        Fully validated ``AppConfig`` instance.

    Raises:
        FileNotFoundError: If the specified ``config_path`` does not exist.
        pydantic.ValidationError: If merged config values fail validation.
    """
    root = _find_project_root()

    # 1. Load .env file (silently skip if missing)
    load_dotenv(dotenv_path=root / ".env", override=False)

    # 2. Load TOML config
    if config_path is None:
        config_path = root / "config" / "default.toml"

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(
            f"Config file not found: {config_path}\n"
            "Create config/default.toml or pass --config."
        )

    with open(config_path, "rb") as f:
        raw: dict[str, Any] = tomllib.load(f)

    local_config_path = config_path.parent / "local.toml"
    if local_config_path.exists():
        with open(local_config_path, "rb") as f:
            local_raw: dict[str, Any] = tomllib.load(f)
        raw = _deep_merge(raw, local_raw)

    # 3. Apply STOCK_SENTIMENT_* environment variable overrides
    raw = _apply_env_overrides(raw)

    # 4. Build and validate AppConfig
    return _build_app_config(raw)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``override`` into ``base``."""
    result = dict(base)
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def _env_flag(value: str) -> bool:
    return value.lower() in ("1", "true", "yes")


def _apply_env_overrides(raw: dict[str, Any]) -> dict[str, Any]:
    """Apply STOCK_SENTIMENT_* env vars to the raw config dict.

    Supported overrides:
      STOCK_SENTIMENT_LOG_LEVEL       → raw["logging"]["level"]
      STOCK_SENTIMENT_WINDOW_DAYS     → raw["sentiment"]["window_days"]
      STOCK_SENTIMENT_SKIP_MALFORMED  → raw["sentiment"]["skip_malformed"]
      STOCK_SENTIMENT_DEBUG           → raw["debug"]
    """
    if log_level := os.environ.get("STOCK_SENTIMENT_LOG_LEVEL"):
        raw.setdefault("logging", {})["level"] = log_level

    if window_days := os.environ.get("STOCK_SENTIMENT_WINDOW_DAYS"):
        raw.setdefault("sentiment", {})["window_days"] = window_days

    if skip_malformed := os.environ.get("STOCK_SENTIMENT_SKIP_MALFORMED"):
        raw.setdefault("sentiment", {})["skip_malformed"] = _env_flag(skip_malformed)

    if debug := os.environ.get("STOCK_SENTIMENT_DEBUG"):
        raw["debug"] = _env_flag(debug)

    return raw


def _build_app_config(raw: dict[str, Any]) -> AppConfig:
    """Map raw TOML dict to ``AppConfig`` model structure."""
    project = raw.pop("project", {})

    return AppConfig(
        sentiment=SentimentConfig(**raw.get("sentiment", {})),
        logging=LoggingConfig(**raw.get("logging", {})),
        debug=raw.get("debug", project.get("debug", False)),
    )
