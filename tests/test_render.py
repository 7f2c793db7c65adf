"""Tests for Rich rendering of the view state."""

from __future__ import annotations

import io

from rich.console import Console

from weather_now.app.state import ViewState
from weather_now.display.render import IDLE_MESSAGE, render
from weather_now.weather.models import Place


def _render_text(state: ViewState) -> str:
    console = Console(file=io.StringIO(), width=120)
    render(state, console)
    return console.file.getvalue()


def test_idle():
    assert IDLE_MESSAGE in _render_text(ViewState())


def test_candidate_names_are_not_markup():
    state = ViewState(places=[
        Place(name="Foo [/b]", country="[red]Land", admin1="[bold]Region", latitude=1.0, longitude=2.0),
        Place(name="Bar", country="Land", latitude=3.0, longitude=4.0),
    ])

    output = _render_text(state)

    assert "Foo [/b]" in output
    assert "[red]Land" in output
    assert "[bold]Region" in output
    assert "Bar" in output


def test_error_message_is_not_markup():
    state = ViewState(error="bad [/i] thing")
    assert "bad [/i] thing" in _render_text(state)
