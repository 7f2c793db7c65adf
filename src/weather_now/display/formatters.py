"""Display strings for temperatures, places and weather records."""

from __future__ import annotations

import json
from datetime import datetime

from weather_now.common.types import celsius_to_fahrenheit, round_to
from weather_now.weather.codes import weather_icon, weather_text
from weather_now.weather.models import CurrentWeather, Place, Unit


def display_temperature(celsius: float, unit: Unit) -> float:
    """Temperature in ``unit``, rounded to one decimal."""
    value = celsius if unit is Unit.CELSIUS else celsius_to_fahrenheit(celsius)
    return round_to(value, 1)


def _trim(value: float) -> str:
    # 15.0 -> "15", 12.3 -> "12.3", -0.0 -> "0"
    return str(int(value)) if value.is_integer() else str(value)


def format_temperature(celsius: float, unit: Unit) -> str:
    """Format e.g. ``15°C`` or ``59°F``."""
    return f"{_trim(display_temperature(celsius, unit))}°{unit.value}"


def format_place_label(place: Place) -> str:
    """``Name, Admin1 · Country``."""
    label = f"{place.name}, {place.admin1}" if place.admin1 else place.name
    if place.country:
        label += f" · {place.country}"
    return label


def format_candidate(place: Place) -> tuple[str, str, str]:
    """Columns of a disambiguation row: title, detail, coordinates.

    Coordinates are rounded for display only.
    """
    title = f"{place.name}, {place.admin1}" if place.admin1 else place.name
    detail = place.country
    if place.population:
        detail += f" · pop {place.population}"
    coords = f"lat {place.latitude:.2f}, lon {place.longitude:.2f}"
    return title, detail, coords


def format_time(raw: str) -> str:
    """Render the provider's ISO-like local time, falling back to the raw text."""
    try:
        return datetime.fromisoformat(raw).strftime("%Y-%m-%d %H:%M")
    except ValueError:
        return raw


def format_condition(weather: CurrentWeather) -> str:
    return f"{weather_text(weather.weathercode)} · {format_time(weather.time)}"


def format_json(weather: CurrentWeather, unit: Unit) -> str:
    """Format a weather record as a JSON string."""
    place = weather.place
    return json.dumps(
        {
            "place": {
                "name": place.name,
                "admin1": place.admin1,
                "country": place.country,
                "latitude": place.latitude,
                "longitude": place.longitude,
            },
            "temperature": display_temperature(weather.temperature, unit),
            "unit": unit.value,
            "temperature_c": weather.temperature,
            "condition": weather_text(weather.weathercode),
            "icon": weather_icon(weather.weathercode),
            "weathercode": weather.weathercode,
            "windspeed": weather.windspeed,
            "winddirection": weather.winddirection,
            "time": weather.time,
        },
        indent=2,
        ensure_ascii=False,
    )
