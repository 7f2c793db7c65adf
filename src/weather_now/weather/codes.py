"""WMO weather code lookup: condition text and icon glyph.

Codes follow the Open-Meteo ``weathercode`` table.
"""

from __future__ import annotations

UNKNOWN_TEXT = "Unknown"
UNKNOWN_ICON = "🌈"

WEATHER_CODES: dict[int, tuple[str, str]] = {
    0:  ("Clear sky", "☀️"),
    1:  ("Mainly clear", "🌤️"),
    2:  ("Partly cloudy", "⛅"),
    3:  ("Overcast", "☁️"),
    45: ("Fog", "🌫️"),
    48: ("Depositing rime fog", "🌫️"),
    51: ("Light drizzle", "🌦️"),
    53: ("Moderate drizzle", "🌦️"),
    55: ("Dense drizzle", "🌧️"),
    56: ("Light freezing drizzle", "🌧️❄️"),
    57: ("Dense freezing drizzle", "🌧️❄️"),
    61: ("Slight rain", "🌧️"),
    63: ("Moderate rain", "🌧️"),
    65: ("Heavy rain", "🌧️"),
    66: ("Light freezing rain", "🌧️❄️"),
    67: ("Heavy freezing rain", "🌧️❄️"),
    71: ("Slight snow fall", "❄️"),
    73: ("Moderate snow fall", "❄️"),
    75: ("Heavy snow fall", "❄️"),
    77: ("Snow grains", "❄️"),
    80: ("Slight rain showers", "🌦️"),
    81: ("Moderate rain showers", "🌦️"),
    82: ("Violent rain showers", "⛈️"),
    85: ("Slight snow showers", "🌨️"),
    86: ("Heavy snow showers", "🌨️"),
    95: ("Thunderstorm", "⛈️"),
    96: ("Thunderstorm with hail (small)", "⛈️🧊"),
    99: ("Thunderstorm with hail (heavy)", "⛈️🧊"),
}


def weather_text(code: int) -> str:
    entry = WEATHER_CODES.get(code)
    return entry[0] if entry else UNKNOWN_TEXT


def weather_icon(code: int) -> str:
    entry = WEATHER_CODES.get(code)
    return entry[1] if entry else UNKNOWN_ICON
