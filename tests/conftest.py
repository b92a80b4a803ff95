from __future__ import annotations

import sys
from collections.abc import AsyncIterator
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(PROJECT_ROOT))

# ruff: noqa: E402
from animal_shelter.config.settings import Settings
from animal_shelter.domain.models.shelter import Shelter
from animal_shelter.interfaces.http.main import create_app


@pytest.fixture()
def test_settings() -> Settings:
    return Settings.model_validate(
        {
            "log_level": "INFO",
            "small_kennels": 1,
            "medium_kennels": 1,
            "large_kennels": 1,
            "seed_demo_data": False,
        }
    )


@pytest.fixture()
def shelter(test_settings: Settings) -> Shelter:
    return Shelter(
        small=test_settings.small_kennels,
        medium=test_settings.medium_kennels,
        large=test_settings.large_kennels,
    )


@pytest.fixture()
def app(test_settings: Settings, shelter: Shelter):
    return create_app(settings=test_settings, shelter=shelter)


@pytest.fixture()
async def client(app) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
