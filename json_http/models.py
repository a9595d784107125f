"""Data models used by the JSON HTTP helpers and the weather samples."""

from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass, field
from typing import Any, BinaryIO, Dict, List, Optional, Sequence

JSON_CONTENT_TYPE = "application/json"


@dataclass
class RequestBody:
    """Serialised request content together with its content headers."""

    stream: BinaryIO
    headers: Dict[str, str] = field(default_factory=dict)

    @property
    def content_type(self) -> Optional[str]:
        return self.headers.get("Content-Type")

    def content(self) -> bytes:
        """Return the buffered bytes, leaving the stream rewound."""

        if self.stream.seekable():
            self.stream.seek(0)
        data = self.stream.read()
        if self.stream.seekable():
            self.stream.seek(0)
        return data


@dataclass
class City:
    """Location a forecast applies to."""

    id: int
    name: str
    country: str = ""

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "City":
        return cls(
            id=int(payload["id"]),
            name=str(payload.get("name", "")),
            country=str(payload.get("country", "")),
        )


@dataclass
class ForecastEntry:
    """A single forecast step; temperatures are reported in Kelvin."""

    timestamp: _dt.datetime
    temperature: float
    humidity: Optional[int] = None
    description: str = ""

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "ForecastEntry":
        main = payload.get("main") or {}
        weather = payload.get("weather") or [{}]
        humidity = main.get("humidity")
        return cls(
            timestamp=_dt.datetime.fromtimestamp(int(payload["dt"]), tz=_dt.timezone.utc),
            temperature=float(main["temp"]),
            humidity=int(humidity) if humidity is not None else None,
            description=str(weather[0].get("description", "")),
        )


@dataclass
class Forecast:
    """Typed view of an OpenWeatherMap five day forecast response."""

    city: Optional[City]
    entries: Sequence[ForecastEntry]

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "Forecast":
        """Build a forecast from the decoded ``/forecast`` JSON document."""

        city_payload = payload.get("city")
        entries: List[ForecastEntry] = [
            ForecastEntry.from_payload(item) for item in payload.get("list", []) or []
        ]
        return cls(
            city=City.from_payload(city_payload) if city_payload else None,
            entries=entries,
        )

    def summary(self) -> str:
        """Return a one line description of the forecast."""

        name = self.city.name if self.city else "Unknown location"
        if not self.entries:
            return f"{name}: no forecast entries"
        first, last = self.entries[0], self.entries[-1]
        return (
            f"{name}: {len(self.entries)} entries from "
            f"{first.timestamp:%Y-%m-%d %H:%M} to {last.timestamp:%Y-%m-%d %H:%M} UTC, "
            f"first {first.temperature - 273.15:.1f}°C {first.description}"
        )


__all__ = ["City", "Forecast", "ForecastEntry", "JSON_CONTENT_TYPE", "RequestBody"]
