"""
API Router for external market imports.

An import either replaces the table completely or fails with 400 and leaves
the previous table in place.
"""

from fastapi import APIRouter, HTTPException

from dynasty.api.schemas.market import (
    ImportPicksRequest,
    ImportPicksResponse,
    ImportPlayersRequest,
    ImportPlayersResponse,
    MarketSummaryResponse,
)
from dynasty.api.services import get_session
from dynasty.core.market.importer import MarketImportError

router = APIRouter(prefix="/market", tags=["market"])


@router.get("", response_model=MarketSummaryResponse)
async def get_market_summary():
    """Which market tables are loaded."""
    return get_session().catalog.summary()


@router.post("/players", response_model=ImportPlayersResponse)
async def import_players(request: ImportPlayersRequest):
    """Replace the external player values with an uploaded CSV."""
    try:
        count = get_session().import_players(request.content)
    except MarketImportError as e:
        raise HTTPException(
            status_code=400,
            detail=f"Could not parse Players CSV ({e}). "
                   "Expected headers: Name/Player, Position, Value, SF Value",
        )
    return {"imported": count}


@router.post("/picks", response_model=ImportPicksResponse)
async def import_picks(request: ImportPicksRequest):
    """Replace one draft year's external pick values with an uploaded CSV."""
    try:
        table = get_session().import_picks(request.year, request.content)
    except MarketImportError as e:
        raise HTTPException(
            status_code=400,
            detail=f"Could not parse Picks CSV ({e}). "
                   "Expected headers: Round (1.01), Value, SF Value",
        )
    return {"year": request.year, **table}
