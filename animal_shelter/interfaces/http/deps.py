from __future__ import annotations

from fastapi import Request

from animal_shelter.config.settings import Settings, get_settings
from animal_shelter.domain.models.shelter import Shelter


def get_shelter(request: Request) -> Shelter:
    shelter = getattr(request.app.state, "shelter", None)
    if shelter is None:
        raise RuntimeError("Shelter not configured")
    return shelter


def get_app_settings(request: Request) -> Settings:
    settings = getattr(request.app.state, "settings", None)
    return settings or get_settings()
