"""Controller: drives the geocoding and weather clients and owns the view state.

Every user or network event goes through exactly one method here:
``mount``, ``submit``, ``select_place``, ``set_unit``/``toggle_unit``.
Client errors are caught and turned into an error message in the state;
nothing raised by the clients escapes this module.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from weather_now.app.state import Mode, ViewState
from weather_now.common.errors import GeocodingError, WeatherFetchError, WeatherUnavailableError
from weather_now.common.http import HttpClient
from weather_now.storage.preferences import Preferences
from weather_now.weather.geocoding import search_places
from weather_now.weather.models import Place, Unit
from weather_now.weather.openmeteo import fetch_current_weather

logger = logging.getLogger(__name__)

MSG_ENTER_CITY = "Enter a city name."
MSG_GEOCODING_FAILED = "Failed to look up the city. Check your network and try again."
MSG_WEATHER_FAILED = "Failed to fetch weather. Check your network and try again."
MSG_WEATHER_UNAVAILABLE = "Weather data unavailable for this location."


class WeatherController:
    """Single owner of ``ViewState``.

    Args:
        preferences: Persistence adapter for last place and unit
        client: Shared HTTP client; each request opens its own when omitted
        on_change: Called with the state after every transition, including
            the switch into the loading state
    """

    def __init__(
        self,
        preferences: Preferences,
        client: HttpClient | None = None,
        on_change: Callable[[ViewState], None] | None = None,
    ) -> None:
        self.state = ViewState()
        self._prefs = preferences
        self._client = client
        self._on_change = on_change

    def _emit(self) -> None:
        if self._on_change is not None:
            self._on_change(self.state)

    async def mount(self) -> None:
        """Restore the unit preference and reload weather for the last place."""
        await self.restore_unit()

        last = await self._prefs.load_last_place()
        if last is None:
            self._emit()
            return

        logger.debug("Restoring last place %s (%.4f, %.4f)", last.name, last.latitude, last.longitude)
        self.state.query = last.name
        self.state.selected = last
        await self._fetch_weather(last)

    async def restore_unit(self) -> None:
        """Load the persisted unit, defaulting to Celsius."""
        unit = await self._prefs.load_unit()
        self.state.unit = unit or Unit.CELSIUS

    async def submit(self, text: str) -> None:
        """Search for ``text`` and resolve or list the matches."""
        if self.state.loading:
            logger.debug("Search ignored while a request is in flight")
            return

        self.state.query = text
        self.state.clear_results()
        self.state.selected = None

        q = text.strip()
        if not q:
            self.state.show_error(MSG_ENTER_CITY)
            self._emit()
            return

        self.state.loading = True
        self._emit()
        try:
            places = await search_places(q, client=self._client)
        except GeocodingError:
            logger.warning("Place search failed for %r", q, exc_info=True)
            self.state.show_error(MSG_GEOCODING_FAILED)
            self.state.loading = False
            self._emit()
            return

        if len(places) == 1:
            self.state.selected = places[0]
            await self._fetch_weather(places[0])
            return

        # 0 matches shows the empty list state; 2+ asks the user to pick
        self.state.show_places(places)
        self.state.loading = False
        self._emit()

    async def select_place(self, place: Place) -> None:
        """Pick one of the listed candidates and fetch its weather."""
        if self.state.loading:
            logger.debug("Selection ignored while a request is in flight")
            return
        self.state.selected = place
        self.state.places = None
        await self._fetch_weather(place)

    async def select_index(self, index: int) -> bool:
        """Pick the ``index``-th (1-based) candidate.

        Returns False when no list is shown or ``index`` is out of range.
        """
        places = self.state.places
        if self.state.mode is not Mode.DISAMBIGUATING or places is None:
            return False
        if not 1 <= index <= len(places):
            return False
        await self.select_place(places[index - 1])
        return True

    async def set_unit(self, unit: Unit) -> None:
        """Switch display unit. Never touches the network."""
        self.state.unit = unit
        await self._prefs.save_unit(unit)
        self._emit()

    async def toggle_unit(self) -> None:
        await self.set_unit(self.state.unit.toggled())

    async def _fetch_weather(self, place: Place) -> None:
        self.state.loading = True
        self.state.clear_results()
        self._emit()

        try:
            weather = await fetch_current_weather(place, client=self._client)
        except WeatherUnavailableError:
            self.state.show_error(MSG_WEATHER_UNAVAILABLE)
        except WeatherFetchError:
            logger.warning("Weather fetch failed for %s", place.name, exc_info=True)
            self.state.show_error(MSG_WEATHER_FAILED)
        else:
            self.state.show_weather(weather)
            await self._prefs.save_last_place(self._record_for(place))
        finally:
            self.state.loading = False

        self._emit()

    def _record_for(self, place: Place) -> Place:
        """Place written as "last place"; coordinates are always the fetched ones."""
        selected = self.state.selected
        name = place.name or (selected.name if selected else "") or self.state.query.strip()
        country = place.country or (selected.country if selected else "")
        admin1 = place.admin1 or (selected.admin1 if selected else None)
        return Place(
            name=name,
            country=country,
            admin1=admin1,
            latitude=place.latitude,
            longitude=place.longitude,
        )
