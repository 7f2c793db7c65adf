"""Error kinds raised by the clients and caught by the controller."""

from __future__ import annotations


class WeatherNowError(Exception):
    """Base class for all recoverable weather-now errors."""


class ValidationError(WeatherNowError):
    """User input rejected before any request was issued."""


class GeocodingError(WeatherNowError):
    """Place search failed: transport error, bad status or malformed payload."""


class WeatherFetchError(WeatherNowError):
    """Current-conditions request failed: transport, status or payload."""


class WeatherUnavailableError(WeatherFetchError):
    """Well-formed weather payload without a ``current_weather`` object."""
