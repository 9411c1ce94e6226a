"""Integration tests - can optionally hit real API (disabled by default)."""
import os
import pytest
from openweathermap_client import OpenWeatherMapClient
from weather_data import Config, Location

requires_secret = pytest.mark.skipif(
    not os.environ.get("OWM_API_SECRET"),
    reason="OWM_API_SECRET not set - skipping integration test"
)


@pytest.fixture
def live_client():
    config = Config(
        key=os.environ.get("OWM_API_KEY", ""),
        secret=os.environ.get("OWM_API_SECRET", ""),
        location=Location(lat=33.44, lon=-94.04, name="Texarkana")  # Example coordinates
    )
    return OpenWeatherMapClient(config)


@requires_secret
def test_get_current_integration(live_client):
    """
    Integration test that hits the real OpenWeatherMap API.

    Set OWM_API_SECRET environment variable to run this test.
    """
    weather = live_client.get_current()

    assert weather.type
    assert weather.date_time.timestamp() > 0


@requires_secret
def test_get_forecast_integration(live_client):
    """One-call access depends on the subscription behind the key."""
    forecast = live_client.get_forecast()

    assert forecast
    assert all(w.timezone for w in forecast)
    times = [w.date_time for w in forecast]
    assert times == sorted(times)
