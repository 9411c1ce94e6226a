"""Weather domain model - pure data structures independent of any API."""
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional


@dataclass(frozen=True)
class Location:
    """Fixed geographic point the client reports weather for."""
    lat: float
    lon: float
    name: str = ""


@dataclass(frozen=True)
class Config:
    """Provider credentials plus location, used to build a client."""
    key: str
    secret: str
    location: Location


@dataclass(frozen=True)
class Weather:
    """Normalized weather record, independent of any specific API."""
    type: str  # e.g., "Clouds", "Rain", "Clear"
    description: str  # e.g., "broken clouds", "light rain"
    date_time: datetime  # timezone-aware, UTC
    temp: float
    temp_feeling: float
    temp_min: float
    temp_max: float
    humidity: float
    timezone: Optional[str] = None  # IANA name, forecast records only

    def is_stale(self, max_age_seconds: int = 900) -> bool:
        """Check if this record is older than max_age_seconds."""
        age = datetime.now(timezone.utc) - self.date_time
        return age.total_seconds() > max_age_seconds
