"""Zone persistence stores keyed by zone definition value."""

import json
import logging
from pathlib import Path
from typing import Protocol

from pydantic import TypeAdapter

from zones.models import Zone

logger = logging.getLogger(__name__)

_ZONES_ADAPTER = TypeAdapter(list[Zone])


class ZoneStore(Protocol):
    """Anything able to load and save zones per definition key."""

    def load(self, key: str) -> list[Zone] | None: ...

    def save(self, key: str, zones: list[Zone]) -> bool: ...


class InMemoryZoneStore:
    """Dict-backed store, holding copies of whatever it is given."""

    def __init__(self) -> None:
        self._data: dict[str, list[Zone]] = {}

    def load(self, key: str) -> list[Zone] | None:
        """Return a copy of the zones saved under ``key``, or None."""
        zones = self._data.get(key)
        if zones is None:
            return None
        return [zone.model_copy() for zone in zones]

    def save(self, key: str, zones: list[Zone]) -> bool:
        """Store a copy of ``zones`` under ``key`` and return True."""
        self._data[key] = [zone.model_copy() for zone in zones]
        return True


class JsonZoneStore:
    """Store every definition's zones in a single JSON document on disk."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def load(self, key: str) -> list[Zone] | None:
        """Load the zones saved under ``key``.

        Args:
            key: Zone definition value.

        Returns:
            Saved zones, or None when the file or key does not exist.
        """
        raw = self._read().get(key)
        if raw is None:
            return None
        return _ZONES_ADAPTER.validate_python(raw)

    def save(self, key: str, zones: list[Zone]) -> bool:
        """Persist ``zones`` under ``key``, keeping other keys untouched.

        Args:
            key: Zone definition value.
            zones: Zones to persist.

        Returns:
            True once the document has been written.
        """
        data = self._read()
        data[key] = _ZONES_ADAPTER.dump_python(zones, by_alias=True)
        self.path.write_text(json.dumps(data, indent=2))
        logger.debug("Saved %d zones under %s to %s", len(zones), key, self.path)
        return True

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        return json.loads(self.path.read_text())
