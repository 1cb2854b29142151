"""Pydantic schemas for market imports."""

from pydantic import BaseModel, Field


class ImportPlayersRequest(BaseModel):
    """Players CSV: Name/Player, Position, Age, Value, SF Value."""
    content: str = Field(..., description="Raw CSV text including the header row")


class ImportPicksRequest(BaseModel):
    """Picks CSV: Round (slot like 1.07), Value, SF Value."""
    year: int = Field(..., description="Draft year the values apply to")
    content: str = Field(..., description="Raw CSV text including the header row")


class ImportPlayersResponse(BaseModel):
    """Result of a players import."""
    imported: int


class MarketValueResponse(BaseModel):
    value: float
    sf_value: float


class ImportPicksResponse(BaseModel):
    """Result of a picks import."""
    year: int
    slots: dict[str, MarketValueResponse]
    rounds: dict[str, MarketValueResponse]


class MarketSummaryResponse(BaseModel):
    """What market tables are loaded."""
    demo_players: int
    external_players: int
    external_pick_years: list[int]
