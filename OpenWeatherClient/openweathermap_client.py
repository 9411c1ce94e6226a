"""OpenWeatherMap API client."""
import logging
from datetime import datetime, timezone
from typing import Any, List, Optional

import requests

from owm_schema import OwmCondition, OwmForecastResponse, OwmMain, OwmWeatherResponse
from weather_data import Config, Weather
from weather_errors import (
    AuthenticationError,
    DecodeError,
    EmptyResponseError,
    TransportError,
)

API_URL = "https://api.openweathermap.org/data/2.5"
PROVIDER_NAME = "open-weather-map"
PERIOD_HOURLY = "hourly"
UNITS = "metric"
DEFAULT_TIMEOUT = 10


def _utc(timestamp: int) -> datetime:
    try:
        return datetime.fromtimestamp(timestamp, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as e:
        logging.error(f"Invalid timestamp in API response: {timestamp}")
        raise DecodeError(PROVIDER_NAME, f"Invalid timestamp {timestamp}: {e}") from e


class OpenWeatherMapClient:
    """
    Client for the OpenWeatherMap current weather and one-call APIs.

    Every call is one blocking GET against the provider; nothing is cached
    or retried. Results are mapped into provider-agnostic Weather records.
    """

    def __init__(
        self,
        config: Config,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT
    ):
        """
        Initialize the client.

        Args:
            config: Credentials and location; fields are copied, not validated
            session: HTTP transport to reuse (a new Session by default)
            timeout: HTTP request timeout in seconds
        """
        self.key = config.key
        self.secret = config.secret
        self.location = config.location
        self.session = session or requests.Session()
        self.timeout = timeout

    def get_current(self) -> Weather:
        """
        Fetch current weather from the /weather endpoint.

        Returns:
            Weather: Current conditions at the configured location

        Raises:
            TransportError: If the request fails before a response arrives
            AuthenticationError: If the API key is rejected
            DecodeError: If the body is not a valid current weather response
            EmptyResponseError: If the response has no weather condition
        """
        # The provider is queried with the latitude in both coordinates.
        data = self._get_json("weather", self.location.lat, self.location.lat)

        try:
            out = OwmWeatherResponse.from_dict(data)
        except (ValueError, TypeError, OverflowError) as e:
            logging.error(f"Failed to parse API response: {e}")
            raise DecodeError(PROVIDER_NAME, f"Failed to parse response: {e}") from e

        condition = self._first_condition(out.weather)
        if out.main is None:
            logging.error("Response missing 'main' block")
            raise DecodeError(PROVIDER_NAME, "Response missing 'main' block")

        weather = Weather(
            type=condition.main,
            description=condition.description,
            date_time=_utc(out.dt),
            temp=out.main.temp,
            temp_feeling=out.main.feels_like,
            temp_min=out.main.temp_min,
            temp_max=out.main.temp_max,
            humidity=out.main.humidity,
        )
        logging.info(f"Successfully parsed weather data: {weather.temp}°C, {weather.type}")
        return weather

    def get_forecast(self) -> List[Weather]:
        """
        Fetch the hourly forecast from the /onecall endpoint.

        Returns:
            List[Weather]: One record per forecast hour, in provider order,
            each carrying the response timezone

        Raises:
            TransportError: If the request fails before a response arrives
            AuthenticationError: If the API key is rejected
            DecodeError: If the body is not a valid forecast response
            EmptyResponseError: If any hourly entry has no weather condition
        """
        data = self._get_json("onecall", self.location.lat, self.location.lon)

        try:
            out = OwmForecastResponse.from_dict(data)
        except (ValueError, TypeError, OverflowError) as e:
            logging.error(f"Failed to parse API response: {e}")
            raise DecodeError(PROVIDER_NAME, f"Failed to parse response: {e}") from e

        forecast = [self._hourly_weather(entry, out.timezone) for entry in out.hourly]
        logging.info(f"Successfully parsed forecast: {len(forecast)} {PERIOD_HOURLY} entries ({out.timezone})")
        return forecast

    def _get_json(self, endpoint: str, lat: float, lon: float) -> Any:
        """Issue one GET and return the decoded JSON body."""
        url = f"{API_URL}/{endpoint}"
        params = {
            "lat": f"{lat:.3f}",
            "lon": f"{lon:.3f}",
            "appid": self.secret,
            "units": UNITS,
        }

        try:
            logging.info(f"Making OpenWeatherMap API request: {url}")
            logging.debug(f"Request parameters: lat={params['lat']}, lon={params['lon']}, units={UNITS}")
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logging.error(f"Network error during API request: {e}")
            raise TransportError(PROVIDER_NAME, str(e)) from e

        logging.info(f"API response status: {response.status_code}")

        # Checked before the body is touched: error bodies are not decoded.
        if response.status_code == requests.codes.unauthorized:
            logging.error("API request rejected: invalid api key")
            raise AuthenticationError(PROVIDER_NAME, "invalid api key")

        try:
            data = response.json()
        except ValueError as e:
            # requests' JSONDecodeError is also a RequestException
            logging.error(f"Failed to parse API response: {e}")
            raise DecodeError(PROVIDER_NAME, f"Failed to parse response: {e}") from e
        except requests.exceptions.RequestException as e:
            logging.error(f"Failed to read API response: {e}")
            raise TransportError(PROVIDER_NAME, str(e)) from e

        if isinstance(data, dict):
            logging.debug(f"API response data keys: {list(data.keys())}")
        return data

    @staticmethod
    def _first_condition(conditions: List[OwmCondition]) -> OwmCondition:
        if not conditions:
            logging.error("Response missing 'weather' array")
            raise EmptyResponseError(PROVIDER_NAME, "Response missing 'weather' array")
        return conditions[0]

    def _hourly_weather(self, entry: OwmMain, tz: str) -> Weather:
        condition = self._first_condition(entry.weather)
        return Weather(
            type=condition.main,
            description=condition.description,
            date_time=_utc(entry.dt),
            temp=entry.temp,
            temp_feeling=entry.feels_like,
            temp_min=entry.temp_min,
            temp_max=entry.temp_max,
            humidity=entry.humidity,
            timezone=tz,
        )
