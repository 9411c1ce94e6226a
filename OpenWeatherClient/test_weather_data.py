"""Tests for weather_data module."""
import dataclasses
import pytest
from datetime import datetime, timedelta, timezone
from weather_data import Config, Location, Weather


def make_weather(date_time):
    return Weather(
        type="Clear",
        description="clear sky",
        date_time=date_time,
        temp=20.0,
        temp_feeling=19.0,
        temp_min=18.0,
        temp_max=22.0,
        humidity=60.0
    )


def test_weather_creation():
    """Test creating Weather with required fields."""
    when = datetime(2021, 1, 1, tzinfo=timezone.utc)
    weather = make_weather(when)

    assert weather.type == "Clear"
    assert weather.description == "clear sky"
    assert weather.date_time == when
    assert weather.temp == 20.0
    assert weather.temp_feeling == 19.0
    assert weather.humidity == 60.0
    assert weather.timezone is None


def test_weather_is_value_object():
    when = datetime(2021, 1, 1, tzinfo=timezone.utc)

    assert make_weather(when) == make_weather(when)
    with pytest.raises(dataclasses.FrozenInstanceError):
        make_weather(when).temp = 30.0


def test_weather_is_stale():
    """Test is_stale() method."""
    weather = make_weather(datetime.now(timezone.utc) - timedelta(hours=1))

    # Should be stale with default 15-minute threshold
    assert weather.is_stale(max_age_seconds=900) is True

    # Should not be stale with 2-hour threshold
    assert weather.is_stale(max_age_seconds=7200) is False


def test_weather_fresh():
    """Test that fresh data is not stale."""
    weather = make_weather(datetime.now(timezone.utc))

    assert weather.is_stale() is False


def test_location_is_immutable():
    location = Location(lat=52.52, lon=13.405, name="Berlin")
    config = Config(key="k", secret="s", location=location)

    assert config.location.name == "Berlin"
    with pytest.raises(dataclasses.FrozenInstanceError):
        location.lat = 0.0
