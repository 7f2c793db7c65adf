"""Rich rendering of the view state."""

from __future__ import annotations

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from weather_now.app.state import Mode, ViewState
from weather_now.common.types import round_to
from weather_now.display.formatters import (
    format_candidate,
    format_condition,
    format_place_label,
    format_temperature,
)
from weather_now.weather.codes import weather_icon
from weather_now.weather.models import CurrentWeather, Place, Unit

IDLE_MESSAGE = "No results yet. Search a city to get current weather."
NO_MATCHES_MESSAGE = "No places found for that query."
FOOTER_TIP = "Tip: Last successful search is saved and will load on next visit."


def unit_toggle(unit: Unit) -> Text:
    """Two-button unit toggle with the active unit highlighted."""
    text = Text()
    for u in Unit:
        style = "bold white on dodger_blue2" if u is unit else "dim"
        text.append(f" {u.value} ", style=style)
        if u is Unit.CELSIUS:
            text.append(" ")
    return text


def candidates_table(places: list[Place]) -> Table:
    table = Table(title="Multiple matches. Pick the right one:", show_lines=True)
    table.add_column("#", justify="right", width=3)
    table.add_column("Place")
    table.add_column("Country")
    table.add_column("Coordinates", style="dim", no_wrap=True)

    for i, place in enumerate(places, start=1):
        title, detail, coords = format_candidate(place)
        table.add_row(str(i), Text(title), Text(detail), Text(coords))
    return table


def weather_panel(weather: CurrentWeather, unit: Unit, selected: Place | None = None) -> Panel:
    place = selected or weather.place

    stats = Table.grid(padding=(0, 3))
    stats.add_column(justify="center")
    stats.add_column(justify="center")
    stats.add_column(justify="center")
    stats.add_column(justify="center")
    stats.add_row("[dim]Temp[/dim]", "[dim]Wind[/dim]", "[dim]Wind Dir[/dim]", "[dim]Source[/dim]")
    stats.add_row(
        f"[bold]{format_temperature(weather.temperature, unit)}[/bold]",
        f"{weather.windspeed:g} km/h",
        f"{int(round_to(weather.winddirection))}°",
        "Open-Meteo",
    )

    body = Group(
        Text(f"{weather_icon(weather.weathercode)}  {format_place_label(place)}", style="bold"),
        Text(format_condition(weather), style="dim"),
        Text(""),
        stats,
        Text(""),
        unit_toggle(unit),
    )
    return Panel(body, title="Weather Now", border_style="sky_blue2")


def render(state: ViewState, console: Console | None = None) -> None:
    """Print the region for the current display mode."""
    if console is None:
        console = Console()

    mode = state.mode
    if mode is Mode.SEARCHING:
        console.print("[dim]Searching...[/dim]")
    elif mode is Mode.FAILED:
        console.print(Text(state.error, style="red"))
    elif mode is Mode.DISAMBIGUATING and state.places:
        console.print(candidates_table(state.places))
    elif mode is Mode.NO_MATCHES:
        console.print(f"[yellow]{NO_MATCHES_MESSAGE}[/yellow]")
    elif mode is Mode.SHOWING_WEATHER and state.weather is not None:
        console.print(weather_panel(state.weather, state.unit, state.selected))
    else:
        console.print(f"[dim]{IDLE_MESSAGE}[/dim]")
