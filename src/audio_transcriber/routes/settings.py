"""Health and runtime settings endpoints."""

from datetime import datetime, timezone
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from pydantic import ValidationError

from audio_transcriber.dependencies import get_settings_store
from audio_transcriber.infrastructure.interfaces import SettingsStore
from audio_transcriber.logging import setup_logging
from audio_transcriber.response_models import (
    HealthResponse,
    SettingsResponse,
    SettingsUpdateRequest,
    SettingsUpdateResponse,
)

logger = setup_logging(__name__)

router = APIRouter(prefix="/api", tags=["settings"])

SettingsStoreDep = Annotated[SettingsStore, Depends(get_settings_store)]


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    """Returns service liveness."""
    return HealthResponse(timestamp=datetime.now(timezone.utc))


@router.get("/config", response_model=SettingsResponse)
def get_settings(store: SettingsStoreDep) -> SettingsResponse:
    """Returns the current limits; the API key is reported only as present or not."""
    return SettingsResponse.from_settings(store.get())


@router.post("/config", response_model=SettingsUpdateResponse)
def update_settings(
    request: SettingsUpdateRequest, store: SettingsStoreDep
) -> SettingsUpdateResponse:
    """Applies a partial settings update."""
    try:
        settings = store.update(request.changes())
    except ValidationError as e:
        logger.warning("Rejected settings update", extra={"error": str(e)})
        raise HTTPException(
            status_code=422,
            detail={"kind": "invalid_settings", "message": str(e)},
        )

    return SettingsUpdateResponse(
        message="Configuration updated successfully",
        config=SettingsResponse.from_settings(settings),
    )
