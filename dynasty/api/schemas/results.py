"""Pydantic schemas for league evaluation results."""

from typing import Optional

from pydantic import BaseModel


class SegmentResponse(BaseModel):
    """One asset's raw contribution to a team's stacked bar."""
    asset_id: str
    label: str
    value: int


class SuggestionResponse(BaseModel):
    """An asset suggested to close a deficit."""
    key: str
    kind: str
    name: str
    value: int


class AdviceResponse(BaseModel):
    """Balancing advice for one team."""
    status: str
    delta: int
    need: int
    message: str
    suggestions: list[SuggestionResponse]


class TeamResultResponse(BaseModel):
    """Valuation of one side of the trade."""
    team_id: str
    name: str
    values: list[int]
    raw_total: int
    adjusted_total: int
    delta: int
    segments: list[SegmentResponse]
    advice: Optional[AdviceResponse] = None


class EvaluationResponse(BaseModel):
    """Totals, deltas and advice for every team."""
    teams: list[TeamResultResponse]
    grand_adjusted: int
    average_adjusted: int
    decay: float
    second_piece_percent: int
    adjustment_enabled: bool
