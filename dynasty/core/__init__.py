"""Core trade valuation engine."""

from dynasty.core.assets import Asset, PickAsset, PlayerAsset, Team
from dynasty.core.board import TradeBoard
from dynasty.core.enums import (
    AssetKind,
    BalanceStatus,
    Position,
    RoundKey,
    ScoringMode,
    SuggestionPreference,
    ValueSource,
)
from dynasty.core.evaluation import LeagueEvaluation, Segment, TeamResult, evaluate
from dynasty.core.settings import LeagueSettings, ValueSourceConfig

__all__ = [
    "Asset",
    "AssetKind",
    "BalanceStatus",
    "LeagueEvaluation",
    "LeagueSettings",
    "PickAsset",
    "PlayerAsset",
    "Position",
    "RoundKey",
    "ScoringMode",
    "Segment",
    "SuggestionPreference",
    "Team",
    "TeamResult",
    "TradeBoard",
    "ValueSource",
    "ValueSourceConfig",
    "evaluate",
]
