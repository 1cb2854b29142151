"""Pydantic schemas for league settings and value source."""

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field


class ScoringModeSchema(str, Enum):
    """League scoring format."""
    PPR = "PPR"
    HALF_PPR = "Half PPR"
    STANDARD = "Standard"


class ValueSourceSchema(str, Enum):
    """Market table selection."""
    DEMO = "Demo"
    EXTERNAL = "External"
    BLEND = "Blend"


# === Request Schemas ===

class UpdateSettingsRequest(BaseModel):
    """Partial update of league settings. Omitted fields are unchanged."""
    scoring_mode: Optional[ScoringModeSchema] = None
    superflex: Optional[bool] = None
    te_premium: Optional[bool] = None
    league_size: Optional[Union[int, float, str]] = Field(
        None, description="Clamped to 8-16; unparseable input uses the default"
    )
    ktc_adjustment: Optional[bool] = None
    ktc_decay: Optional[Union[float, str]] = Field(
        None, description="Clamped to 0.80-0.99; unparseable input uses 0.93"
    )


class UpdateValueSourceRequest(BaseModel):
    """Change the market source and/or blend weight."""
    source: Optional[ValueSourceSchema] = None
    blend_weight: Optional[Union[float, str]] = Field(
        None, description="Weight on External, clamped to 0-1"
    )


# === Response Schemas ===

class SettingsResponse(BaseModel):
    """Current league settings."""
    scoring_mode: ScoringModeSchema
    superflex: bool
    te_premium: bool
    league_size: int
    ktc_adjustment: bool
    ktc_decay: float


class ValueSourceResponse(BaseModel):
    """Current market source."""
    source: ValueSourceSchema
    blend_weight: float


class PickCurveResponse(BaseModel):
    """Baseline pick values by round for the current settings."""
    superflex: bool
    te_premium: bool
    rounds: dict[str, int]
