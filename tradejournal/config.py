"""Configuration for the trading journal.

Policy constants used by the analytics (commission, calendar thresholds,
detector sample sizes) live here so they can be tuned from
``~/.config/tradejournal/config.toml`` without touching the code::

    [analytics]
    commission = 20.0
    high_day_threshold = 2500.0
    currency_symbol = "$"

    [journal]
    data_path = "~/journal/export.json"
"""

import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "tradejournal"
CONFIG_PATH = CONFIG_DIR / "config.toml"
DEFAULT_DATA_PATH = CONFIG_DIR / "journal.json"


class AnalyticsConfig(BaseModel):
    """Thresholds and constants for the analytics engine."""

    commission: float = Field(default=40.0, ge=0, description="Flat commission per trade")
    high_day_threshold: float = Field(
        default=1000.0, gt=0, description="Net P&L beyond which a day is high severity"
    )
    fomo_level_threshold: int = Field(
        default=5, description="FOMO level above which a losing trade counts as FOMO-driven"
    )
    pattern_min_count: int = Field(
        default=2, ge=0, description="Behavioral patterns surface when count exceeds this"
    )
    recurring_loss_min_count: int = Field(
        default=1, ge=0, description="Recurring losses surface when repeats exceed this"
    )
    setup_confluence_min: int = Field(
        default=3, ge=1, description="Confluence tags for a high-quality setup"
    )
    session_name: str = Field(
        default="Market Open (9:30-10:30)", description="Session analysed for time-based performance"
    )
    session_min_trades: int = Field(default=3, ge=1, description="Trades needed to judge the session")
    win_rate_warning: int = Field(default=50, ge=0, le=100, description="Win rate below this warns")
    avg_rr_warning: float = Field(default=1.5, ge=0, description="Average R:R below this warns")
    min_trades_for_insights: int = Field(default=3, ge=0, description="Trades needed for insights")
    weekly_window_days: int = Field(default=7, ge=1, description="Length of the weekly window")
    recent_trades_limit: int = Field(default=4, ge=1, description="Trades shown as recent")
    currency_symbol: str = Field(default="₹", description="Currency symbol for display")
    data_path: Path = Field(default=DEFAULT_DATA_PATH, description="Journal snapshot JSON file")

    model_config = {"frozen": True}


DEFAULT_CONFIG = AnalyticsConfig()


def load_config(config_path: Optional[Path] = None) -> AnalyticsConfig:
    """Load configuration from a TOML file.

    Args:
        config_path: Path to the config file. Defaults to
            ``~/.config/tradejournal/config.toml``.

    Returns:
        The loaded configuration, or defaults when the file is missing or
        cannot be parsed.
    """
    import toml

    path = config_path or CONFIG_PATH
    if not path.exists():
        return DEFAULT_CONFIG

    try:
        raw = toml.load(path)
    except (OSError, toml.TomlDecodeError) as e:
        logger.warning("Could not read config %s: %s", path, e)
        return DEFAULT_CONFIG

    values = dict(raw.get("analytics", {}))
    journal = raw.get("journal", {})
    if "data_path" in journal:
        values["data_path"] = Path(journal["data_path"]).expanduser()

    try:
        return AnalyticsConfig(**values)
    except ValidationError as e:
        logger.warning("Invalid settings in %s, using defaults: %s", path, e)
        return DEFAULT_CONFIG
