"""
API Router for league settings and market source selection.

Every change is snapshotted so the next session starts from it.
"""

from fastapi import APIRouter

from dynasty.api.schemas.settings import (
    PickCurveResponse,
    SettingsResponse,
    UpdateSettingsRequest,
    UpdateValueSourceRequest,
    ValueSourceResponse,
)
from dynasty.api.services import get_session
from dynasty.core.enums import ValueSource

router = APIRouter(tags=["settings"])


@router.get("/settings", response_model=SettingsResponse)
async def get_settings():
    """Get the current league settings."""
    return get_session().settings.to_dict()


@router.put("/settings", response_model=SettingsResponse)
async def update_settings(request: UpdateSettingsRequest):
    """
    Update league settings.

    Decay is clamped to 0.80-0.99 and league size to 8-16.
    """
    patch = request.model_dump(mode="json", exclude_none=True)
    return get_session().update_settings(patch).to_dict()


@router.get("/value-source", response_model=ValueSourceResponse)
async def get_value_source():
    """Get the active market source and blend weight."""
    return get_session().value_source.to_dict()


@router.put("/value-source", response_model=ValueSourceResponse)
async def update_value_source(request: UpdateValueSourceRequest):
    """Switch between Demo, External and Blend, or change the blend weight."""
    source = ValueSource(request.source.value) if request.source else None
    config = get_session().set_value_source(source=source, blend_weight=request.blend_weight)
    return config.to_dict()


@router.get("/market/pick-curve", response_model=PickCurveResponse)
async def get_pick_curve():
    """Baseline pick values by round under the current settings."""
    session = get_session()
    return {
        "superflex": session.settings.superflex,
        "te_premium": session.settings.te_premium,
        "rounds": {key.value: value for key, value in session.curve().items()},
    }
