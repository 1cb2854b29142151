"""API Router for trade results: adjusted totals, deltas and suggestions."""

from fastapi import APIRouter, Query

from dynasty.api.schemas.results import EvaluationResponse
from dynasty.api.services import get_session
from dynasty.core.enums import SuggestionPreference

router = APIRouter(tags=["results"])


@router.get("/results", response_model=EvaluationResponse)
async def get_results(
    preference: SuggestionPreference = Query(SuggestionPreference.ANY),
    tolerance: float = Query(0.10, ge=0.01, le=0.5),
):
    """
    Evaluate the trade.

    - Adjusted total per team and league average
    - Each team's delta from the average
    - Suggestions for teams below the average
    - Stacked-bar segments per team
    """
    return get_session().evaluate(preference=preference, tolerance=tolerance).to_dict()
