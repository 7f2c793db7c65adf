"""Persisted last place and unit preference.

Reads never raise: corrupt or incomplete records are treated as absent.
Writes are best-effort: failures are logged and swallowed.
"""

from __future__ import annotations

import json
import logging

from weather_now.storage.store import KeyValueStore
from weather_now.weather.models import Place, Unit

logger = logging.getLogger(__name__)

LAST_PLACE_KEY = "wn_last"
UNIT_KEY = "wn_unit"


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class Preferences:
    """Persistence adapter over an injected key-value store."""

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    async def _read(self, key: str) -> str | None:
        try:
            return await self._store.get(key)
        except Exception:
            logger.warning("Failed to read %r from storage", key, exc_info=True)
            return None

    async def _write(self, key: str, value: str) -> None:
        try:
            await self._store.set(key, value)
        except Exception:
            logger.warning("Failed to write %r to storage", key, exc_info=True)

    async def load_last_place(self) -> Place | None:
        raw = await self._read(LAST_PLACE_KEY)
        if not raw:
            return None
        try:
            obj = json.loads(raw)
        except ValueError:
            logger.debug("Ignoring invalid stored place: %r", raw)
            return None
        if not isinstance(obj, dict):
            return None

        lat, lon = obj.get("latitude"), obj.get("longitude")
        if not (_is_number(lat) and _is_number(lon)):
            logger.debug("Ignoring stored place without coordinates: %r", obj)
            return None

        return Place(
            name=str(obj.get("name") or ""),
            country=str(obj.get("country") or ""),
            admin1=obj.get("admin1") or None,
            latitude=float(lat),
            longitude=float(lon),
        )

    async def save_last_place(self, place: Place) -> None:
        await self._write(LAST_PLACE_KEY, json.dumps(place.to_record()))

    async def load_unit(self) -> Unit | None:
        raw = await self._read(UNIT_KEY)
        try:
            return Unit(raw) if raw else None
        except ValueError:
            logger.debug("Ignoring unknown stored unit: %r", raw)
            return None

    async def save_unit(self, unit: Unit) -> None:
        await self._write(UNIT_KEY, unit.value)
