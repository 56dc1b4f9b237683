"""Trade data model."""

from datetime import datetime
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field, ValidationInfo, model_validator
from pydantic.alias_generators import to_camel

# Fixed per-trade brokerage charged on every round trip
DEFAULT_COMMISSION = 40.0


def compute_trade_pl(
    direction: str,
    quantity: float,
    entry_price: float,
    exit_price: float,
    commission: float = DEFAULT_COMMISSION,
) -> tuple[float, float]:
    """Calculate gross and net P&L for a closed position.

    Args:
        direction: "Long" or "Short".
        quantity: Position size.
        entry_price: Average entry price.
        exit_price: Average exit price.
        commission: Flat commission deducted from the gross P&L.

    Returns:
        Tuple of (gross_pl, net_pl).
    """
    if direction == "Long":
        gross = (exit_price - entry_price) * quantity
    else:
        gross = (entry_price - exit_price) * quantity
    return gross, gross - commission


def compute_risk_reward(
    entry_price: float,
    stop_loss: Optional[float],
    target_price: Optional[float],
) -> float:
    """Reward distance divided by risk distance, 0 when either leg is unset."""
    if not stop_loss or not target_price:
        return 0.0
    risk = abs(entry_price - stop_loss)
    reward = abs(target_price - entry_price)
    if risk <= 0:
        return 0.0
    return reward / risk


def _pick(data: dict, name: str, alias: str) -> Any:
    if name in data:
        return data[name]
    return data.get(alias)


class Trade(BaseModel):
    """Represents one completed position recorded in the journal.

    ``gross_pl``, ``net_pl`` and ``risk_reward_ratio`` are derived once, when
    the record is created. Records loaded from the store that already carry
    these values keep them as stored.
    """

    id: str = Field(default="", description="Opaque store identifier")
    symbol: str = Field(..., min_length=1, description="Trading symbol")
    direction: Literal["Long", "Short"] = Field(..., description="Position direction")
    quantity: float = Field(..., gt=0, description="Position size")
    entry_price: float = Field(..., gt=0, description="Entry price")
    exit_price: float = Field(..., gt=0, description="Exit price")
    stop_loss: Optional[float] = Field(default=None, gt=0, description="Stop-loss price")
    target_price: Optional[float] = Field(default=None, gt=0, description="Target price")
    strategy: str = Field(default="", description="Free-form strategy name")
    entry_date: datetime = Field(..., description="Entry timestamp")
    exit_date: Optional[datetime] = Field(default=None, description="Exit timestamp")

    gross_pl: float = Field(default=0.0, alias="grossPL", description="P&L before commission")
    net_pl: float = Field(default=0.0, alias="netPL", description="P&L after commission")
    risk_reward_ratio: float = Field(default=0.0, ge=0, description="Planned reward:risk")

    # Psychology and context tags
    confidence_level: int = Field(default=0, description="Confidence at entry (1-10)")
    pre_emotion: str = Field(default="", description="Emotion before entry")
    post_emotion: str = Field(default="", description="Emotion after exit")
    sleep_quality: int = Field(default=0, description="Sleep quality (1-10)")
    physical_condition: int = Field(default=0, description="Physical condition (1-10)")
    fomo_level: int = Field(default=0, description="Fear of missing out (1-10)")
    pre_stress: int = Field(default=0, description="Stress before entry (1-10)")
    stress_during: int = Field(default=0, description="Stress while in trade (1-10)")
    position_comfort: int = Field(default=0, description="Comfort with size (1-10)")
    market_sentiment: str = Field(default="")
    news_awareness: str = Field(default="")
    market_environment: str = Field(default="")
    multi_timeframes: tuple[str, ...] = Field(default=())
    volume_analysis: str = Field(default="")
    technical_confluence: tuple[str, ...] = Field(default=(), description="Confluence factors")
    market_session: str = Field(default="", description="Session the trade was entered in")
    trade_catalyst: str = Field(default="")
    waited_for_setup: str = Field(default="", description="Whether entry waited for the setup")
    plan_deviation: str = Field(default="")
    exit_reason: str = Field(default="")
    primary_exit_reason: str = Field(default="")
    exit_emotion: str = Field(default="")
    would_take_again: str = Field(default="")
    lesson: str = Field(default="")
    volatility_today: str = Field(default="")
    sector_performance: str = Field(default="")
    economic_events: tuple[str, ...] = Field(default=())
    personal_distractions: tuple[str, ...] = Field(default=())
    followed_rules: tuple[str, ...] = Field(default=(), description="Titles of rules followed")
    notes: str = Field(default="")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "alias_generator": to_camel,
    }

    @model_validator(mode="before")
    @classmethod
    def _derive_pl(cls, data: Any, info: ValidationInfo) -> Any:
        if not isinstance(data, dict):
            return data

        commission = DEFAULT_COMMISSION
        if info.context and "commission" in info.context:
            commission = info.context["commission"]

        data = dict(data)
        # Older documents store untouched optional fields as null
        for name, field in cls.model_fields.items():
            if field.is_required():
                continue
            for key in (name, field.alias):
                if key in data and data[key] is None:
                    del data[key]

        # The entry form stores an empty stop/target as null or 0
        for name, alias in (("stop_loss", "stopLoss"), ("target_price", "targetPrice")):
            for key in (name, alias):
                if key in data and not data[key]:
                    data[key] = None

        direction = _pick(data, "direction", "direction")
        quantity = _pick(data, "quantity", "quantity") or 0
        entry = _pick(data, "entry_price", "entryPrice") or 0
        exit_ = _pick(data, "exit_price", "exitPrice") or 0

        gross = _pick(data, "gross_pl", "grossPL")
        if gross is None:
            gross, _ = compute_trade_pl(direction, float(quantity), float(entry), float(exit_), commission)
            data["gross_pl"] = gross
        if _pick(data, "net_pl", "netPL") is None:
            data["net_pl"] = float(gross) - commission
        if _pick(data, "risk_reward_ratio", "riskRewardRatio") is None:
            data["risk_reward_ratio"] = compute_risk_reward(
                float(entry),
                _pick(data, "stop_loss", "stopLoss"),
                _pick(data, "target_price", "targetPrice"),
            )
        return data

    @property
    def is_win(self) -> bool:
        return self.net_pl > 0

    @property
    def is_loss(self) -> bool:
        return self.net_pl < 0
