"""
Raw OpenWeatherMap response records.

These mirror the provider's JSON exactly and live only for the duration of
one request. Missing scalar fields decode to zero values; anything of the
wrong shape raises ValueError or TypeError, which the client reports as a
DecodeError.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


def _object(data: Any, what: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise ValueError(f"expected JSON object for {what}, got {type(data).__name__}")
    return data


def _optional_object(data: Dict[str, Any], key: str) -> Optional[Dict[str, Any]]:
    value = data.get(key)
    if value is None:
        return None
    return _object(value, f"'{key}'")


def _array(data: Dict[str, Any], key: str) -> List[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"expected JSON array for '{key}', got {type(value).__name__}")
    return value


def _number(data: Dict[str, Any], key: str) -> Any:
    value = data.get(key)
    # bool is an int subclass; JSON true/false is not a number
    if value is not None and (isinstance(value, bool) or not isinstance(value, (int, float))):
        raise ValueError(f"expected JSON number for '{key}', got {type(value).__name__}")
    return value


def _float(data: Dict[str, Any], key: str) -> float:
    value = _number(data, key)
    return 0.0 if value is None else float(value)


def _int(data: Dict[str, Any], key: str) -> int:
    value = _number(data, key)
    if value is None:
        return 0
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"expected JSON integer for '{key}', got {value}")
    return int(value)


def _str(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"expected JSON string for '{key}', got {type(value).__name__}")
    return value


@dataclass
class OwmCondition:
    id: int
    main: str
    description: str
    icon: str

    @classmethod
    def from_dict(cls, data: Any) -> "OwmCondition":
        data = _object(data, "weather condition")
        return cls(
            id=_int(data, "id"),
            main=_str(data, "main"),
            description=_str(data, "description"),
            icon=_str(data, "icon"),
        )


def _conditions(data: Dict[str, Any]) -> List[OwmCondition]:
    return [OwmCondition.from_dict(item) for item in _array(data, "weather")]


@dataclass
class OwmMain:
    """Temperature block; forecast entries also carry their own conditions."""
    dt: int
    temp: float
    feels_like: float
    temp_min: float
    temp_max: float
    pressure: int
    humidity: float
    weather: List[OwmCondition] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "OwmMain":
        data = _object(data, "main block")
        return cls(
            dt=_int(data, "dt"),
            temp=_float(data, "temp"),
            feels_like=_float(data, "feels_like"),
            temp_min=_float(data, "temp_min"),
            temp_max=_float(data, "temp_max"),
            pressure=_int(data, "pressure"),
            humidity=_float(data, "humidity"),
            weather=_conditions(data),
        )


@dataclass
class OwmWind:
    speed: float = 0.0
    deg: int = 0


@dataclass
class OwmClouds:
    all: int = 0


@dataclass
class OwmWeatherResponse:
    """Body of the /weather (current conditions) endpoint."""
    dt: int
    weather: List[OwmCondition]
    main: Optional[OwmMain]
    wind: OwmWind
    clouds: OwmClouds

    @classmethod
    def from_dict(cls, data: Any) -> "OwmWeatherResponse":
        data = _object(data, "response")
        main = _optional_object(data, "main")
        wind = _optional_object(data, "wind") or {}
        clouds = _optional_object(data, "clouds") or {}
        return cls(
            dt=_int(data, "dt"),
            weather=_conditions(data),
            main=OwmMain.from_dict(main) if main is not None else None,
            wind=OwmWind(speed=_float(wind, "speed"), deg=_int(wind, "deg")),
            clouds=OwmClouds(all=_int(clouds, "all")),
        )


@dataclass
class OwmForecastResponse:
    """Body of the /onecall endpoint."""
    timezone: str
    current: Optional[OwmMain]
    minutely: List[OwmMain]
    hourly: List[OwmMain]

    @classmethod
    def from_dict(cls, data: Any) -> "OwmForecastResponse":
        data = _object(data, "response")
        current = _optional_object(data, "current")
        return cls(
            timezone=_str(data, "timezone"),
            current=OwmMain.from_dict(current) if current is not None else None,
            minutely=[OwmMain.from_dict(item) for item in _array(data, "minutely")],
            hourly=[OwmMain.from_dict(item) for item in _array(data, "hourly")],
        )
