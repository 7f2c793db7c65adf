"""Tests for display formatting and the weather code lookup."""

from __future__ import annotations

import json

import pytest

from weather_now.common.types import celsius_to_fahrenheit, round_to
from weather_now.display.formatters import (
    display_temperature,
    format_candidate,
    format_condition,
    format_json,
    format_place_label,
    format_temperature,
    format_time,
)
from weather_now.weather.codes import UNKNOWN_ICON, UNKNOWN_TEXT, WEATHER_CODES, weather_icon, weather_text
from weather_now.weather.models import CurrentWeather, Place, Unit

TEMPS = [-40.0, -17.78, -0.04, 0.0, 0.25, 12.34, 15.0, 21.65, 37.0, 48.88]


class TestTemperature:
    @pytest.mark.parametrize("c", TEMPS)
    def test_celsius_rounded_to_one_decimal(self, c):
        assert display_temperature(c, Unit.CELSIUS) == round_to(c, 1)

    @pytest.mark.parametrize("c", TEMPS)
    def test_fahrenheit_converted_then_rounded(self, c):
        assert display_temperature(c, Unit.FAHRENHEIT) == round_to(c * 9 / 5 + 32, 1)

    @pytest.mark.parametrize("c", TEMPS)
    def test_toggle_twice_is_identity(self, c):
        before = format_temperature(c, Unit.CELSIUS)
        format_temperature(c, Unit.CELSIUS.toggled())
        assert format_temperature(c, Unit.CELSIUS.toggled().toggled()) == before

    def test_whole_values_have_no_decimal(self):
        assert format_temperature(15.0, Unit.CELSIUS) == "15°C"
        assert format_temperature(15.0, Unit.FAHRENHEIT) == "59°F"
        assert format_temperature(-40.0, Unit.FAHRENHEIT) == "-40°F"

    def test_fractional_values(self):
        assert format_temperature(12.34, Unit.CELSIUS) == "12.3°C"
        assert format_temperature(21.65, Unit.FAHRENHEIT) == "71°F"

    def test_halves_round_up(self):
        assert round_to(0.25, 1) == 0.3
        assert round_to(-0.25, 1) == -0.2
        assert round_to(2.5) == 3.0

    def test_negative_zero_prints_as_zero(self):
        assert format_temperature(-0.04, Unit.CELSIUS) == "0°C"

    def test_celsius_to_fahrenheit(self):
        assert celsius_to_fahrenheit(0.0) == 32.0
        assert celsius_to_fahrenheit(100.0) == 212.0


class TestWeatherCodes:
    def test_known_code(self):
        assert weather_text(3) == "Overcast"
        assert weather_icon(3) == "☁️"
        assert weather_text(95) == "Thunderstorm"

    @pytest.mark.parametrize("code", [-1, 4, 42, 100, 999])
    def test_unknown_code_falls_back(self, code):
        assert code not in WEATHER_CODES
        assert weather_text(code) == UNKNOWN_TEXT == "Unknown"
        assert weather_icon(code) == UNKNOWN_ICON


class TestPlaceFormatting:
    def test_label_with_admin1(self, london):
        assert format_place_label(london) == "London, England · United Kingdom"

    def test_label_without_admin1(self):
        paris = Place(name="Paris", country="France", latitude=48.85, longitude=2.35)
        assert format_place_label(paris) == "Paris · France"

    def test_candidate_row_rounds_coordinates_for_display_only(self):
        place = Place(
            name="Springfield", country="United States", admin1="Illinois",
            latitude=39.80172, longitude=-89.64371, population=116250,
        )
        assert format_candidate(place) == (
            "Springfield, Illinois",
            "United States · pop 116250",
            "lat 39.80, lon -89.64",
        )
        assert place.latitude == 39.80172

    def test_candidate_row_without_population(self):
        place = Place(name="Springfield", country="United States", latitude=44.04624, longitude=-123.02203)
        title, detail, _ = format_candidate(place)
        assert title == "Springfield"
        assert detail == "United States"


class TestWeatherFormatting:
    @pytest.fixture
    def weather(self, london):
        return CurrentWeather(
            temperature=15.0, windspeed=11.2, winddirection=247.6,
            weathercode=3, time="2026-10-19T14:00", place=london,
        )

    def test_time(self):
        assert format_time("2026-10-19T14:00") == "2026-10-19 14:00"
        assert format_time("yesterday-ish") == "yesterday-ish"

    def test_condition(self, weather):
        assert format_condition(weather) == "Overcast · 2026-10-19 14:00"

    def test_json(self, weather):
        data = json.loads(format_json(weather, Unit.FAHRENHEIT))
        assert data["temperature"] == 59.0
        assert data["unit"] == "F"
        assert data["temperature_c"] == 15.0
        assert data["condition"] == "Overcast"
        assert data["place"]["name"] == "London"
