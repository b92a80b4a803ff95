from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from animal_shelter.application.seed import seed_shelter
from animal_shelter.config.settings import Settings, get_settings
from animal_shelter.domain.models.shelter import Shelter
from animal_shelter.interfaces.http.deps import get_app_settings
from animal_shelter.interfaces.http.routers import animals, kennels
from animal_shelter.interfaces.middleware.error_handler import register_error_handlers


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name.upper(), logging.INFO)
    root = logging.getLogger()
    # Avoid adding duplicate handlers on reload
    if not any(isinstance(h, logging.StreamHandler) for h in root.handlers):
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        )
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(level)
    # Align common libraries
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(name).setLevel(level)


def create_app(
    *,
    settings: Settings | None = None,
    shelter: Shelter | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    _configure_logging(settings.log_level)
    app = FastAPI(
        title="LP Animal Shelter Api",
        version="0.1.0",
        description="LP No-kill Animal Shelter Api",
    )
    app.state.settings = settings
    if shelter is None:
        shelter = Shelter(
            small=settings.small_kennels,
            medium=settings.medium_kennels,
            large=settings.large_kennels,
        )
        if settings.seed_demo_data:
            seed_shelter(shelter)
    app.state.shelter = shelter
    register_error_handlers(app)

    # Group all API routes behind a single versioned prefix
    api = APIRouter(prefix="/api/v1")
    api.include_router(kennels.router)
    api.include_router(animals.router)

    @api.get("/health", tags=["health"])
    async def health(_: Settings = Depends(get_app_settings)) -> dict[str, str]:  # noqa: ANN001
        return {"status": "ok"}

    app.include_router(api)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    return app


app = create_app()
