"""
API Router for teams and their assets.

Asset mutations return the fresh league evaluation so clients can redraw
totals without a second request.
"""

from fastapi import APIRouter, HTTPException

from dynasty.api.schemas.results import EvaluationResponse
from dynasty.api.schemas.teams import (
    AddPickRequest,
    AddPlayerRequest,
    CreateTeamRequest,
    RenameTeamRequest,
    TeamResponse,
    TeamsResponse,
    UpdateAssetRequest,
)
from dynasty.api.services import get_session
from dynasty.core.enums import Position

router = APIRouter(prefix="/teams", tags=["teams"])


def _team_response(session, team) -> dict:
    assets = []
    for asset in team.assets:
        data = asset.to_dict()
        data["label"] = asset.label
        data["value"] = session.asset_value(asset)
        assets.append(data)
    return {"id": team.id, "name": team.name, "assets": assets}


def _get_team_or_404(session, team_id: str):
    try:
        return session.board.get_team(team_id)
    except LookupError:
        raise HTTPException(status_code=404, detail="Team not found")


# === Teams ===

@router.get("", response_model=TeamsResponse)
async def list_teams():
    """Get all teams with priced assets."""
    session = get_session()
    teams = [_team_response(session, team) for team in session.board.teams]
    return {"count": len(teams), "teams": teams}


@router.post("", response_model=TeamResponse)
async def create_team(request: CreateTeamRequest):
    """Add a team to the trade."""
    session = get_session()
    team = session.board.add_team(request.name)
    return _team_response(session, team)


@router.patch("/{team_id}", response_model=TeamResponse)
async def rename_team(team_id: str, request: RenameTeamRequest):
    """Rename a team."""
    session = get_session()
    _get_team_or_404(session, team_id)
    team = session.board.rename_team(team_id, request.name)
    return _team_response(session, team)


@router.delete("/{team_id}", response_model=EvaluationResponse)
async def remove_team(team_id: str):
    """
    Remove a team from the trade.

    A trade always keeps at least two teams.
    """
    session = get_session()
    _get_team_or_404(session, team_id)
    try:
        session.board.remove_team(team_id)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return session.evaluate().to_dict()


# === Assets ===

@router.post("/{team_id}/players", response_model=EvaluationResponse)
async def add_player(team_id: str, request: AddPlayerRequest):
    """Add a player to a team."""
    session = get_session()
    _get_team_or_404(session, team_id)
    session.add_player(
        team_id,
        name=request.name,
        position=Position(request.position.value),
        age=request.age,
    )
    return session.evaluate().to_dict()


@router.post("/{team_id}/picks", response_model=EvaluationResponse)
async def add_pick(team_id: str, request: AddPickRequest):
    """Add a draft pick to a team. Defaults to next year's 1.01."""
    session = get_session()
    _get_team_or_404(session, team_id)
    session.add_pick(team_id, year=request.year, slot=request.slot)
    return session.evaluate().to_dict()


@router.patch("/{team_id}/assets/{asset_id}", response_model=EvaluationResponse)
async def update_asset(team_id: str, asset_id: str, request: UpdateAssetRequest):
    """Edit an asset in place."""
    session = get_session()
    _get_team_or_404(session, team_id)
    patch = request.model_dump(mode="json", exclude_unset=True)
    try:
        session.board.update_asset(team_id, asset_id, patch)
    except LookupError:
        raise HTTPException(status_code=404, detail="Asset not found")
    return session.evaluate().to_dict()


@router.delete("/{team_id}/assets/{asset_id}", response_model=EvaluationResponse)
async def remove_asset(team_id: str, asset_id: str):
    """Remove an asset from a team."""
    session = get_session()
    _get_team_or_404(session, team_id)
    try:
        session.board.remove_asset(team_id, asset_id)
    except LookupError:
        raise HTTPException(status_code=404, detail="Asset not found")
    return session.evaluate().to_dict()


@router.post("/{team_id}/assets/{asset_id}/move/{to_team_id}", response_model=EvaluationResponse)
async def move_asset(team_id: str, asset_id: str, to_team_id: str):
    """Move an asset to another team."""
    session = get_session()
    _get_team_or_404(session, team_id)
    _get_team_or_404(session, to_team_id)
    try:
        session.board.move_asset(asset_id, team_id, to_team_id)
    except LookupError:
        raise HTTPException(status_code=404, detail="Asset not found")
    return session.evaluate().to_dict()
