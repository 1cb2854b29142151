"""Pydantic schemas for API request/response models."""

from dynasty.api.schemas.market import (
    ImportPicksRequest,
    ImportPicksResponse,
    ImportPlayersRequest,
    ImportPlayersResponse,
    MarketSummaryResponse,
)
from dynasty.api.schemas.results import EvaluationResponse, TeamResultResponse
from dynasty.api.schemas.settings import (
    PickCurveResponse,
    SettingsResponse,
    UpdateSettingsRequest,
    UpdateValueSourceRequest,
    ValueSourceResponse,
)
from dynasty.api.schemas.teams import (
    AddPickRequest,
    AddPlayerRequest,
    AssetResponse,
    CreateTeamRequest,
    RenameTeamRequest,
    TeamResponse,
    TeamsResponse,
    UpdateAssetRequest,
)

__all__ = [
    "AddPickRequest",
    "AddPlayerRequest",
    "AssetResponse",
    "CreateTeamRequest",
    "EvaluationResponse",
    "ImportPicksRequest",
    "ImportPicksResponse",
    "ImportPlayersRequest",
    "ImportPlayersResponse",
    "MarketSummaryResponse",
    "PickCurveResponse",
    "RenameTeamRequest",
    "SettingsResponse",
    "TeamResponse",
    "TeamResultResponse",
    "TeamsResponse",
    "UpdateAssetRequest",
    "UpdateSettingsRequest",
    "UpdateValueSourceRequest",
    "ValueSourceResponse",
]
