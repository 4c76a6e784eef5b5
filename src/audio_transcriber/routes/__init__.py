"""API route exports."""

from .settings import router as settings_router
from .transcription import router as transcription_router

__all__ = ["settings_router", "transcription_router"]
