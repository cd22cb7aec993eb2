from __future__ import annotations

import re

import httpx
from fastapi.testclient import TestClient

from tests.fakes import FakeWeatherProvider
from weather_dashboard.api import deps
from weather_dashboard.clients.openweather import OpenWeatherClient
from weather_dashboard.models.weather import UnitSystem


def _extract_csrf_token(html: str) -> str:
    match = re.search(r'name="csrf_token" value="([^"]+)"', html)
    assert match, "CSRF token input not found"
    return match.group(1)


def test_root_redirects_to_dashboard(client: TestClient) -> None:
    resp = client.get("/", follow_redirects=False)
    assert resp.status_code == 303
    assert resp.headers["location"] == "/ui/weather"


def test_startup_shows_default_city(client: TestClient, provider: FakeWeatherProvider) -> None:
    resp = client.get("/ui/weather")
    assert resp.status_code == 200
    assert provider.calls == [("New York", UnitSystem.METRIC)]
    assert '<h2 class="city">New York</h2>' in resp.text
    assert '<body class="warm">' in resp.text
    assert "Switch to °F" in resp.text
    assert "km/h" in resp.text


def test_search_remembers_last_city(client: TestClient, provider: FakeWeatherProvider) -> None:
    resp = client.get("/ui/weather", params={"city": "Oslo"})
    assert resp.status_code == 200
    assert '<body class="cold">' in resp.text
    assert resp.text.count('class="snowflake"') == 50

    provider.calls.clear()
    again = client.get("/ui/weather")
    assert provider.calls == [("Oslo", UnitSystem.METRIC)]
    assert '<h2 class="city">Oslo</h2>' in again.text


def test_unknown_city_shows_notice_and_last_city(
    client: TestClient, provider: FakeWeatherProvider
) -> None:
    client.get("/ui/weather", params={"city": "Bergen"})

    resp = client.get("/ui/weather", params={"city": "Atlantis"})
    assert resp.status_code == 200
    assert "City not found!" in resp.text
    assert '<h2 class="city">Bergen</h2>' in resp.text
    assert '<body class="rainy">' in resp.text
    assert client.get("/api/v1/preferences").json()["last_city"] == "Bergen"


def test_blank_search_does_not_change_last_city(
    client: TestClient, provider: FakeWeatherProvider
) -> None:
    client.get("/ui/weather", params={"city": "London"})
    provider.calls.clear()

    resp = client.get("/ui/weather", params={"city": "  "})
    assert resp.status_code == 200
    assert provider.calls == [("London", UnitSystem.METRIC)]
    assert client.get("/api/v1/preferences").json()["last_city"] == "London"


def test_unit_toggle_flow(client: TestClient, provider: FakeWeatherProvider) -> None:
    page = client.get("/ui/weather", params={"city": "Cairo"})
    csrf = _extract_csrf_token(page.text)

    resp = client.post("/ui/units", data={"city": "Cairo", "csrf_token": csrf})
    assert resp.status_code == 200
    assert provider.calls[-1] == ("Cairo", UnitSystem.IMPERIAL)
    assert "Switch to °C" in resp.text
    assert "91°" in resp.text
    assert "mph" in resp.text
    assert '<body class="hot">' in resp.text

    back = client.post("/ui/units", data={"city": "", "csrf_token": csrf})
    assert back.status_code == 200
    assert provider.calls[-1] == ("Cairo", UnitSystem.METRIC)
    assert "Switch to °F" in back.text


def test_unit_toggle_requires_csrf(client: TestClient) -> None:
    client.get("/ui/weather")
    resp = client.post("/ui/units", data={"city": "Oslo", "csrf_token": "nope"})
    assert resp.status_code == 400
    assert client.get("/api/v1/preferences").json()["unit"] == "metric"


def test_ui_index_redirects_to_weather(client: TestClient) -> None:
    resp = client.get("/ui/", follow_redirects=False)
    assert resp.status_code == 303
    assert resp.headers["location"] == "/ui/weather"


def test_transient_failure_falls_back_to_last_city(
    client: TestClient, provider: FakeWeatherProvider
) -> None:
    client.get("/ui/weather", params={"city": "Oslo"})
    provider.readings["paris"] = (20.0, "Clear", "clear sky")
    provider.failing.add("paris")
    provider.calls.clear()

    resp = client.get("/ui/weather", params={"city": "Paris"})
    assert resp.status_code == 200
    assert provider.calls == [("Paris", UnitSystem.METRIC), ("Oslo", UnitSystem.METRIC)]
    assert '<h2 class="city">Oslo</h2>' in resp.text
    assert '<body class="cold">' in resp.text
    assert "City not found!" not in resp.text
    assert client.get("/api/v1/preferences").json()["last_city"] == "Oslo"


def test_failed_toggle_on_last_city_looks_up_once(
    client: TestClient, provider: FakeWeatherProvider
) -> None:
    page = client.get("/ui/weather")
    csrf = _extract_csrf_token(page.text)
    provider.failing.add("new york")
    provider.calls.clear()

    resp = client.post("/ui/units", data={"city": "", "csrf_token": csrf})
    assert resp.status_code == 200
    assert provider.calls == [("New York", UnitSystem.IMPERIAL)]
    assert "Switch to °C" in resp.text
    assert "Weather is unavailable right now." in resp.text


def test_failed_toggle_on_typed_city_falls_back_to_last_city(
    client: TestClient, provider: FakeWeatherProvider
) -> None:
    page = client.get("/ui/weather")
    csrf = _extract_csrf_token(page.text)
    provider.calls.clear()

    resp = client.post("/ui/units", data={"city": "Atlantis", "csrf_token": csrf})
    assert resp.status_code == 200
    assert provider.calls == [
        ("Atlantis", UnitSystem.IMPERIAL),
        ("New York", UnitSystem.IMPERIAL),
    ]
    assert "City not found!" in resp.text
    assert '<h2 class="city">New York</h2>' in resp.text


def test_non_finite_live_temperature_does_not_break_page(client: TestClient) -> None:
    payload = {
        "name": "Oslo",
        "main": {"temp": "NaN", "humidity": 81},
        "wind": {"speed": 4.1},
        "weather": [{"main": "Clouds", "description": "overcast clouds"}],
    }
    live = OpenWeatherClient(
        api_key="secret-key",
        timeout_seconds=1.0,
        transport=httpx.MockTransport(lambda r: httpx.Response(200, json=payload)),
    )
    client.app.dependency_overrides[deps.get_weather_provider] = lambda: live
    try:
        resp = client.get("/ui/weather", params={"city": "Oslo"})
    finally:
        live.close()
    assert resp.status_code == 200
    assert "Weather is unavailable right now." in resp.text
    assert client.get("/api/v1/preferences").json()["last_city"] == "New York"
