"""Typer CLI: weather-now ui, search, last, unit."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

import typer
from rich.console import Console

from weather_now.app.controller import WeatherController
from weather_now.app.state import Mode, ViewState
from weather_now.common.http import HttpClient
from weather_now.config import get_settings
from weather_now.display.formatters import format_json
from weather_now.display.render import FOOTER_TIP, render
from weather_now.storage.preferences import Preferences
from weather_now.storage.store import KeyValueStore, MemoryStore, SQLiteStore
from weather_now.weather.models import Unit

app = typer.Typer(
    name="weather-now",
    help="Current weather for any city - fast.",
    no_args_is_help=True,
)
console = Console()

PROMPT = "[bold]City[/bold] [dim](:c/:f/:u unit, :q quit)[/dim] > "


def _make_store(persist: bool) -> KeyValueStore:
    return SQLiteStore() if persist else MemoryStore()


def _http_client() -> HttpClient:
    return HttpClient()


def _parse_unit(value: str) -> Unit:
    try:
        return Unit(value.strip().upper())
    except ValueError:
        raise typer.BadParameter(f"unit must be C or F, got {value!r}")


def _print_result(state: ViewState, output: str) -> None:
    if output == "json" and state.weather is not None:
        typer.echo(format_json(state.weather, state.unit))
    else:
        render(state, console)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    no_persist: bool = typer.Option(
        False, "--no-persist",
        help="Keep last place and unit in memory only",
    ),
) -> None:
    """Look up current weather by city name."""
    level = logging.DEBUG if verbose else get_settings().log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = {"persist": not no_persist}


@app.command()
def ui(ctx: typer.Context) -> None:
    """Interactive session: search, pick a match, toggle the unit."""
    store = _make_store(ctx.obj["persist"])

    async def _run() -> None:
        async with _http_client() as client:
            controller = WeatherController(
                Preferences(store),
                client=client,
                on_change=lambda state: render(state, console),
            )
            console.print("[bold]Weather Now[/bold]")
            console.print(f"[dim]{FOOTER_TIP}[/dim]")
            await controller.mount()

            while True:
                try:
                    text = console.input(PROMPT)
                except EOFError:
                    break
                cmd = text.strip().lower()

                if cmd in (":q", ":quit"):
                    break
                if cmd in (":c", ":f", ":u"):
                    if controller.state.mode is not Mode.SHOWING_WEATHER:
                        console.print("[dim]Unit toggle is available once weather is shown.[/dim]")
                    elif cmd == ":u":
                        await controller.toggle_unit()
                    else:
                        await controller.set_unit(Unit(cmd[1].upper()))
                    continue
                if controller.state.mode is Mode.DISAMBIGUATING and cmd.isdigit():
                    if not await controller.select_index(int(cmd)):
                        count = len(controller.state.places or [])
                        console.print(f"[yellow]Pick a number between 1 and {count}.[/yellow]")
                    continue

                await controller.submit(text)

    asyncio.run(_run())


@app.command()
def search(
    ctx: typer.Context,
    query: str = typer.Argument(help="City name, e.g. London"),
    pick: Optional[int] = typer.Option(
        None, "--pick", "-p",
        help="Choose the N-th match (1-based) when several places match",
    ),
    unit: Optional[str] = typer.Option(
        None, "--unit", "-u",
        help="Display unit C or F (saved as the new preference)",
    ),
    output: str = typer.Option(
        "table", "--output", "-o",
        help="Output format: table, json",
    ),
) -> None:
    """Search a city once and print its current weather."""
    new_unit = _parse_unit(unit) if unit is not None else None
    store = _make_store(ctx.obj["persist"])

    async def _run() -> ViewState:
        async with _http_client() as client:
            controller = WeatherController(Preferences(store), client=client)
            await controller.restore_unit()
            if new_unit is not None:
                await controller.set_unit(new_unit)

            await controller.submit(query)
            if pick is not None and controller.state.mode is Mode.DISAMBIGUATING:
                if not await controller.select_index(pick):
                    count = len(controller.state.places or [])
                    console.print(f"[red]--pick must be between 1 and {count}[/red]")
                    raise typer.Exit(code=2)
            return controller.state

    state = asyncio.run(_run())
    _print_result(state, output)
    if state.mode is Mode.FAILED:
        raise typer.Exit(code=1)


@app.command()
def last(
    ctx: typer.Context,
    output: str = typer.Option(
        "table", "--output", "-o",
        help="Output format: table, json",
    ),
) -> None:
    """Fetch current weather for the last successfully searched place."""
    store = _make_store(ctx.obj["persist"])

    async def _run() -> ViewState:
        async with _http_client() as client:
            controller = WeatherController(Preferences(store), client=client)
            await controller.mount()
            return controller.state

    state = asyncio.run(_run())
    if state.mode is Mode.IDLE:
        console.print("[yellow]No saved place yet. Run a search first.[/yellow]")
        return
    _print_result(state, output)
    if state.mode is Mode.FAILED:
        raise typer.Exit(code=1)


@app.command(name="unit")
def unit_command(
    ctx: typer.Context,
    value: Optional[str] = typer.Argument(None, help="C or F; omit to show the current unit"),
) -> None:
    """Show or set the temperature unit preference."""
    new_unit = _parse_unit(value) if value is not None else None
    store = _make_store(ctx.obj["persist"])

    async def _run() -> Unit:
        controller = WeatherController(Preferences(store))
        await controller.restore_unit()
        if new_unit is not None:
            await controller.set_unit(new_unit)
        return controller.state.unit

    current = asyncio.run(_run())
    console.print(f"Unit: [bold]{current.value}[/bold]")


if __name__ == "__main__":
    app()
