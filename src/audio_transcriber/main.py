"""FastAPI application entry point."""

from ddtrace import patch_all
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from audio_transcriber.dependencies import get_config, get_settings_store
from audio_transcriber.logging import setup_logging
from audio_transcriber.routes import settings_router, transcription_router

patch_all()

logger = setup_logging(__name__)


def create_app() -> FastAPI:
    """Builds the API application."""
    config = get_config()

    app = FastAPI(title="Audio Transcriber Service")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.server.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(settings_router)
    app.include_router(transcription_router)

    settings = get_settings_store().get()
    logger.info(
        "Config loaded",
        extra={
            "max_file_size_mb": settings.max_file_size / (1024 * 1024),
            "max_duration_min": settings.max_duration / 60,
            "supported_extensions": list(settings.supported_extensions),
            "has_api_key": settings.has_api_key,
        },
    )
    return app


app = create_app()
