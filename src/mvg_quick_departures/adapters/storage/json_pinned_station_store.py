"""JSON file store for the pinned home and work stations."""

import json
import logging
import os
import tempfile
from pathlib import Path

from mvg_quick_departures.domain.models.station import (
    DEFAULT_HOME_STATION,
    DEFAULT_WORK_STATION,
    PinnedStation,
    PinSlot,
)
from mvg_quick_departures.domain.ports.pinned_station_store import PinnedStationStore

logger = logging.getLogger(__name__)

STORAGE_KEYS = {
    PinSlot.HOME: "mvg-home-station",
    PinSlot.WORK: "mvg-work-station",
}

DEFAULTS = {
    PinSlot.HOME: DEFAULT_HOME_STATION,
    PinSlot.WORK: DEFAULT_WORK_STATION,
}


class JsonPinnedStationStore(PinnedStationStore):
    """Keeps pinned stations in memory and mirrors every write to a JSON file.

    The file is read once on construction. A missing or unreadable file, or
    a malformed entry, leaves the affected slot at its default.
    """

    def __init__(self, path: Path) -> None:
        """Initialize the store.

        Args:
            path: Location of the JSON file. Parent directories are created on write.
        """
        self.path = path
        self._stations: dict[PinSlot, PinnedStation] = dict(DEFAULTS)
        self._load()

    def get(self, slot: PinSlot) -> PinnedStation:
        """Get the pinned station for a slot."""
        return self._stations[slot]

    def set(self, slot: PinSlot, station: PinnedStation) -> None:
        """Persist the pinned station for a slot."""
        self._stations[slot] = station
        self._save()

    def _load(self) -> None:
        if not self.path.exists():
            logger.debug(f"No pinned stations file at {self.path}, using defaults")
            return
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read pinned stations from {self.path}: {e}")
            return
        if not isinstance(data, dict):
            logger.warning(f"Ignoring pinned stations file {self.path}: not a JSON object")
            return

        for slot, key in STORAGE_KEYS.items():
            entry = data.get(key)
            if entry is None:
                continue
            if (
                isinstance(entry, dict)
                and isinstance(entry.get("globalId"), str)
                and isinstance(entry.get("name"), str)
            ):
                self._stations[slot] = PinnedStation(
                    global_id=entry["globalId"], name=entry["name"]
                )
            else:
                logger.warning(f"Ignoring malformed entry '{key}' in {self.path}")

    def _save(self) -> None:
        data = {
            key: {"globalId": self._stations[slot].global_id, "name": self._stations[slot].name}
            for slot, key in STORAGE_KEYS.items()
        }
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # Write to a temp file next to the target and swap it in
        fd, tmp_name = tempfile.mkstemp(prefix=".pinned-", suffix=".json", dir=self.path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            os.replace(tmp_name, self.path)
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug(f"Saved pinned stations to {self.path}")
