"""View state owned by the controller."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from weather_now.weather.models import CurrentWeather, Place, Unit


class Mode(Enum):
    """Display mode derived from the view state flags."""

    IDLE = "idle"
    SEARCHING = "searching"
    DISAMBIGUATING = "disambiguating"
    SHOWING_WEATHER = "showing_weather"
    NO_MATCHES = "no_matches"
    FAILED = "failed"


@dataclass
class ViewState:
    """Everything the UI renders.

    ``places`` is None when no list applies, ``[]`` after a search with
    no matches, and holds the candidates while disambiguating.
    """

    query: str = ""
    loading: bool = False
    error: str = ""
    places: list[Place] | None = None
    selected: Place | None = None
    weather: CurrentWeather | None = None
    unit: Unit = Unit.CELSIUS

    @property
    def mode(self) -> Mode:
        if self.loading:
            return Mode.SEARCHING
        if self.error:
            return Mode.FAILED
        if self.places is not None:
            return Mode.DISAMBIGUATING if self.places else Mode.NO_MATCHES
        if self.weather is not None:
            return Mode.SHOWING_WEATHER
        return Mode.IDLE

    def show_error(self, message: str) -> None:
        self.error = message
        self.places = None
        self.weather = None

    def show_places(self, places: list[Place]) -> None:
        self.places = places
        self.error = ""
        self.weather = None

    def show_weather(self, weather: CurrentWeather) -> None:
        self.weather = weather
        self.error = ""
        self.places = None

    def clear_results(self) -> None:
        self.error = ""
        self.places = None
        self.weather = None
