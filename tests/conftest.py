from __future__ import annotations

import random

import pytest
from fastapi.testclient import TestClient

from weather_dashboard.api import deps
from weather_dashboard.core.config import Settings
from weather_dashboard.factory import create_app
from tests.fakes import FakeWeatherProvider


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        _env_file=None,
        env="test",
        debug=True,
        docs_enabled=False,
        secret_key="test_secret_key_must_be_32_chars_minimum",
        cors_origins=["http://localhost"],
        trusted_hosts=["testserver", "localhost"],
        openweather_api_key=None,
        weather_timeout_seconds=1.0,
        default_city="New York",
    )


@pytest.fixture()
def provider() -> FakeWeatherProvider:
    return FakeWeatherProvider()


@pytest.fixture()
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture()
def client(settings: Settings, provider: FakeWeatherProvider) -> TestClient:
    app = create_app(settings)
    app.dependency_overrides[deps.get_weather_provider] = lambda: provider
    app.dependency_overrides[deps.get_particle_rng] = lambda: random.Random(42)
    with TestClient(app) as client:
        yield client
