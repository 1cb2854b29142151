"""Pydantic schemas for teams and roster assets."""

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field


class PositionSchema(str, Enum):
    """Player positions."""
    QB = "QB"
    RB = "RB"
    WR = "WR"
    TE = "TE"


# === Request Schemas ===

class CreateTeamRequest(BaseModel):
    """Request to add a team. Name defaults to the next letter."""
    name: Optional[str] = None


class RenameTeamRequest(BaseModel):
    """Request to rename a team."""
    name: str = Field(..., description="New team name")


class AddPlayerRequest(BaseModel):
    """Request to add a player to a team."""
    name: str = ""
    position: PositionSchema = PositionSchema.WR
    age: Optional[int] = None


class AddPickRequest(BaseModel):
    """Request to add a draft pick. Year defaults to next year."""
    year: Optional[int] = None
    slot: str = Field("1.01", description="Slot as ROUND.PICK, e.g. 1.07")


class UpdateAssetRequest(BaseModel):
    """
    Partial update of an asset.

    Player fields (name, position, age) apply to players; pick fields
    (year, slot) apply to picks. Other fields are ignored.
    """
    name: Optional[str] = None
    position: Optional[PositionSchema] = None
    age: Optional[int] = None
    year: Optional[Union[int, str]] = None
    slot: Optional[str] = None


# === Response Schemas ===

class AssetResponse(BaseModel):
    """An asset with its current value."""
    id: str
    kind: str
    label: str
    value: int
    name: Optional[str] = None
    position: Optional[str] = None
    age: Optional[int] = None
    year: Optional[int] = None
    slot: Optional[str] = None


class TeamResponse(BaseModel):
    """A team with its priced assets."""
    id: str
    name: str
    assets: list[AssetResponse]


class TeamsResponse(BaseModel):
    """All teams on the board."""
    count: int
    teams: list[TeamResponse]
