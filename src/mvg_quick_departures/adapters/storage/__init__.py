"""Storage adapters."""

from mvg_quick_departures.adapters.storage.json_pinned_station_store import (
    JsonPinnedStationStore,
)

__all__ = ["JsonPinnedStationStore"]
