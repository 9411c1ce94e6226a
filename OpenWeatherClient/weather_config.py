"""Environment configuration and logging setup for the weather client."""
import logging
import os
import sys
from typing import Optional

from dotenv import load_dotenv

from weather_data import Config, Location


class ConfigError(Exception):
    """Raised when required settings are missing or invalid."""
    pass


def load_config(env_file: Optional[str] = None) -> Config:
    """
    Build a client Config from the environment.

    Values from env_file (or a .env found by python-dotenv) fill in
    variables that are not already set.

    Raises:
        ConfigError: If the secret or coordinates are missing or invalid
    """
    load_dotenv(env_file)
    key = os.getenv("OWM_API_KEY", "")
    secret = os.getenv("OWM_API_SECRET")
    lat = os.getenv("WEATHER_LAT")
    lon = os.getenv("WEATHER_LON")
    name = os.getenv("WEATHER_LOCATION_NAME", "")

    if not secret:
        raise ConfigError("Missing OWM_API_SECRET in environment")
    if not lat or not lon:
        raise ConfigError("Missing WEATHER_LAT/WEATHER_LON in environment")

    try:
        lat_val = float(lat)
        lon_val = float(lon)
    except ValueError as exc:
        raise ConfigError(f"Invalid coordinates: {exc}") from exc

    logging.info("Configuration loaded: lat=%s lon=%s name=%s", lat_val, lon_val, name)
    return Config(key=key, secret=secret, location=Location(lat=lat_val, lon=lon_val, name=name))


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    log_level = logging.DEBUG if verbose else logging.INFO
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=handlers
    )
