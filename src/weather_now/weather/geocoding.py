"""Place name to candidate places using the Open-Meteo geocoding API."""

from __future__ import annotations

import logging

import httpx

from weather_now.common.errors import GeocodingError, ValidationError
from weather_now.common.http import HttpClient
from weather_now.config import get_settings
from weather_now.weather.models import Place

logger = logging.getLogger(__name__)


def _parse_place(raw: dict) -> Place:
    population = raw.get("population")
    return Place(
        name=str(raw["name"]),
        country=str(raw.get("country") or ""),
        admin1=raw.get("admin1") or None,
        latitude=float(raw["latitude"]),
        longitude=float(raw["longitude"]),
        population=int(population) if population else None,
    )


async def search_places(query: str, client: HttpClient | None = None) -> list[Place]:
    """Search for places matching ``query``.

    Requests up to ``geocoding_count`` English candidates. Returns an empty
    list when nothing matches; one element means the caller can skip
    disambiguation.

    Raises:
        ValidationError: ``query`` is empty after stripping
        GeocodingError: transport failure, non-success status or a
            malformed payload
    """
    q = query.strip()
    if not q:
        raise ValidationError("Enter a city name.")

    settings = get_settings()
    params = {
        "name": q,
        "count": settings.geocoding_count,
        "language": settings.geocoding_language,
        "format": "json",
    }
    url = f"{settings.geocoding_api_url}/search"

    try:
        if client is None:
            async with HttpClient() as own:
                resp = await own.get(url, params=params)
        else:
            resp = await client.get(url, params=params)
        data = resp.json()
    except httpx.HTTPStatusError as exc:
        logger.info("Geocoding HTTP %d for %r", exc.response.status_code, q)
        raise GeocodingError(f"Geocoding request failed for {q!r}") from exc
    except httpx.HTTPError as exc:
        logger.info("Geocoding transport error for %r: %s", q, exc)
        raise GeocodingError(f"Geocoding request failed for {q!r}") from exc
    except ValueError as exc:
        logger.info("Geocoding returned invalid JSON for %r: %s", q, exc)
        raise GeocodingError(f"Malformed geocoding response for {q!r}") from exc

    if not isinstance(data, dict):
        raise GeocodingError(f"Malformed geocoding response for {q!r}")

    results = data.get("results") or []
    if not isinstance(results, list) or not all(isinstance(raw, dict) for raw in results):
        logger.warning("Geocoding 'results' is not a list of objects for %r", q)
        raise GeocodingError(f"Malformed geocoding response for {q!r}")
    try:
        places = [_parse_place(raw) for raw in results]
    except (KeyError, TypeError, ValueError) as exc:
        logger.warning("Geocoding parse error for %r: %s", q, exc)
        raise GeocodingError(f"Malformed geocoding response for {q!r}") from exc

    logger.debug("Geocoding %r returned %d candidate(s)", q, len(places))
    return places
