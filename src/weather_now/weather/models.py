"""Weather data models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from weather_now.common.types import JsonDict, LatLon


class Unit(Enum):
    """Temperature display unit. Values match the persisted strings."""

    CELSIUS = "C"
    FAHRENHEIT = "F"

    def toggled(self) -> Unit:
        return Unit.FAHRENHEIT if self is Unit.CELSIUS else Unit.CELSIUS


@dataclass(frozen=True)
class Place:
    """A geocoded place.

    Attributes:
        name: Place name (e.g. "London")
        country: Country name
        admin1: First-level administrative region, if any
        latitude: Full-precision latitude
        longitude: Full-precision longitude
        population: Population, if the geocoder knows it
    """

    name: str
    country: str
    latitude: float
    longitude: float
    admin1: str | None = None
    population: int | None = None

    @property
    def key(self) -> tuple[float, float, str]:
        """Identity of a candidate row in the disambiguation list."""
        return (self.latitude, self.longitude, self.name)

    @property
    def lat_lon(self) -> LatLon:
        return (self.latitude, self.longitude)

    def to_record(self) -> JsonDict:
        """Subset written to the "last place" record."""
        return {
            "name": self.name,
            "country": self.country,
            "admin1": self.admin1,
            "latitude": self.latitude,
            "longitude": self.longitude,
        }


@dataclass(frozen=True)
class CurrentWeather:
    """Current conditions at a place, as reported by Open-Meteo.

    Attributes:
        temperature: Air temperature in Celsius
        windspeed: Wind speed in km/h
        winddirection: Wind direction in degrees
        weathercode: WMO weather code
        time: Provider timestamp (local time, ISO-like)
        place: The place that was queried
    """

    temperature: float
    windspeed: float
    winddirection: float
    weathercode: int
    time: str
    place: Place
