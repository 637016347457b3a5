"""
Stock Sentiment — CLI entry point.

All commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Validate inputs.
  4. Execute action.
  5. Report result to stdout.

Install and run::

    pip install -e .
    stock-sentiment --help
    stock-sentiment validate-config
    stock-sentiment alerts me --data social_graph.json
    stock-sentiment alerts me --data social_graph.json --json
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="stock-sentiment",
    help="Ranked buy/sell alerts from a user's friends' recent trades.",
    add_completion=False,
)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from stock_sentiment.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except Exception as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config):
    """Set up logging from config."""
    from stock_sentiment.utils.logging import configure_logging
    configure_logging(config.logging)


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("alerts")
def alerts(
    user_id: str = typer.Argument(..., help="User whose friends' trades are aggregated."),
    data_path: str = typer.Option(
        ...,
        "--data",
        help="JSON file with 'friends' and 'trades' mappings.",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print alerts as a JSON array instead of one per line.",
    ),
) -> None:
    """Print ranked stock alerts for USER_ID.

    Exits with code 1 if the data file is missing or invalid, or if a trade
    line is malformed (unless ``skip_malformed`` is enabled in config).
    """
    from stock_sentiment.ingestion.friend_oracle import load_friend_oracle
    from stock_sentiment.ingestion.trade_parser import TradeParseError
    from stock_sentiment.sentiment.service import StockSentiment

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    try:
        oracle = load_friend_oracle(Path(data_path))
    except (FileNotFoundError, ValueError) as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)

    try:
        result = StockSentiment(oracle, config=config).get_alerts(user_id)
    except TradeParseError as exc:
        typer.echo(f"[ERROR] Trade parse failed: {exc}", err=True)
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(json.dumps(result))
        return

    for alert in result:
        typer.echo(alert)


@app.command("validate-config")
def validate_config(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file (default: config/default.toml).",
    ),
    show_full: bool = typer.Option(
        False,
        "--full",
        help="Print full config including all fields.",
    ),
) -> None:
    """Validate the configuration file and print parsed values.

    Exits with code 1 if the config fails validation.
    """
    config = _load_config_or_exit(config_path)

    typer.echo("Configuration validated successfully.")
    typer.echo("")
    typer.echo(f"  Window (days):    {config.sentiment.window_days}")
    typer.echo(f"  Date format:      {config.sentiment.date_format}")
    typer.echo(f"  Buy token:        {config.sentiment.buy_token}")
    typer.echo(f"  Skip malformed:   {config.sentiment.skip_malformed}")
    typer.echo(f"  Log level:        {config.logging.level}")
    typer.echo(f"  Debug mode:       {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(config.model_dump(), indent=2, default=str))

    typer.echo("")
    typer.echo("[OK] Config valid.")


if __name__ == "__main__":
    app()
