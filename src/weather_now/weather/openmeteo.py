"""Open-Meteo current-conditions client."""

from __future__ import annotations

import logging

import httpx

from weather_now.common.errors import WeatherFetchError, WeatherUnavailableError
from weather_now.common.http import HttpClient
from weather_now.config import get_settings
from weather_now.weather.models import CurrentWeather, Place

logger = logging.getLogger(__name__)


async def fetch_current_weather(place: Place, client: HttpClient | None = None) -> CurrentWeather:
    """Fetch current conditions at ``place``'s full-precision coordinates.

    Args:
        place: Place to query; attached to the returned record
        client: Shared HTTP client; a private one is opened when omitted

    Returns:
        CurrentWeather with temperature in Celsius

    Raises:
        WeatherUnavailableError: response has no ``current_weather`` object
        WeatherFetchError: transport failure, non-success status or a
            malformed payload
    """
    lat, lon = place.lat_lon
    settings = get_settings()
    params = {
        "latitude": lat,
        "longitude": lon,
        "current_weather": "true",
        "timezone": "auto",
    }
    url = f"{settings.forecast_api_url}/forecast"

    try:
        if client is None:
            async with HttpClient() as own:
                resp = await own.get(url, params=params)
        else:
            resp = await client.get(url, params=params)
        data = resp.json()
    except httpx.HTTPStatusError as exc:
        logger.info("Forecast HTTP %d for (%.4f, %.4f)", exc.response.status_code, lat, lon)
        raise WeatherFetchError(f"Weather request failed for ({lat}, {lon})") from exc
    except httpx.HTTPError as exc:
        logger.info("Forecast transport error for (%.4f, %.4f): %s", lat, lon, exc)
        raise WeatherFetchError(f"Weather request failed for ({lat}, {lon})") from exc
    except ValueError as exc:
        logger.info("Forecast returned invalid JSON for (%.4f, %.4f): %s", lat, lon, exc)
        raise WeatherFetchError(f"Malformed weather response for ({lat}, {lon})") from exc

    if not isinstance(data, dict):
        raise WeatherFetchError(f"Malformed weather response for ({lat}, {lon})")

    current = data.get("current_weather")
    if not current:
        logger.warning("Forecast response missing 'current_weather' for (%.4f, %.4f)", lat, lon)
        raise WeatherUnavailableError(f"No current conditions for ({lat}, {lon})")

    try:
        return CurrentWeather(
            temperature=float(current["temperature"]),
            windspeed=float(current["windspeed"]),
            winddirection=float(current["winddirection"]),
            weathercode=int(current["weathercode"]),
            time=str(current["time"]),
            place=place,
        )
    except (KeyError, TypeError, ValueError, OverflowError) as exc:
        logger.warning("Forecast parse error for (%.4f, %.4f): %s", lat, lon, exc)
        raise WeatherFetchError(f"Malformed weather response for ({lat}, {lon})") from exc
