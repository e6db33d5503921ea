"""Tests for the JSON pinned station store."""

import json
from pathlib import Path

from mvg_quick_departures.adapters.storage import JsonPinnedStationStore
from mvg_quick_departures.domain.models import (
    DEFAULT_HOME_STATION,
    DEFAULT_WORK_STATION,
    PinnedStation,
    PinSlot,
)

GIESING = PinnedStation(global_id="de:09162:1100", name="Giesing")


def test_when_file_missing_then_defaults(tmp_path: Path) -> None:
    """Given no file, when loading, then home is Marienplatz and work is Hauptbahnhof."""
    store = JsonPinnedStationStore(tmp_path / "pinned.json")

    assert store.get(PinSlot.HOME) == DEFAULT_HOME_STATION
    assert store.get(PinSlot.WORK) == DEFAULT_WORK_STATION
    assert DEFAULT_HOME_STATION == PinnedStation("de:09162:2", "Marienplatz")
    assert DEFAULT_WORK_STATION == PinnedStation("de:09162:1", "Hauptbahnhof")
    assert not (tmp_path / "pinned.json").exists()


def test_when_set_then_persisted_under_storage_keys(tmp_path: Path) -> None:
    """Given a new home station, when setting it, then the file holds both slots."""
    path = tmp_path / "nested" / "pinned.json"
    store = JsonPinnedStationStore(path)

    store.set(PinSlot.HOME, GIESING)

    assert json.loads(path.read_text(encoding="utf-8")) == {
        "mvg-home-station": {"globalId": "de:09162:1100", "name": "Giesing"},
        "mvg-work-station": {"globalId": "de:09162:1", "name": "Hauptbahnhof"},
    }
    assert JsonPinnedStationStore(path).get(PinSlot.HOME) == GIESING
    assert list(path.parent.iterdir()) == [path]


def test_when_file_is_corrupt_then_defaults(tmp_path: Path) -> None:
    """Given invalid JSON, when loading, then defaults are used."""
    path = tmp_path / "pinned.json"
    path.write_text("{not json", encoding="utf-8")

    store = JsonPinnedStationStore(path)

    assert store.get(PinSlot.HOME) == DEFAULT_HOME_STATION


def test_when_file_is_not_an_object_then_defaults(tmp_path: Path) -> None:
    """Given a JSON list, when loading, then defaults are used."""
    path = tmp_path / "pinned.json"
    path.write_text("[1, 2]", encoding="utf-8")

    assert JsonPinnedStationStore(path).get(PinSlot.WORK) == DEFAULT_WORK_STATION


def test_when_one_entry_is_malformed_then_only_that_slot_defaults(tmp_path: Path) -> None:
    """Given a valid work entry and a malformed home entry, then only home falls back."""
    path = tmp_path / "pinned.json"
    path.write_text(
        json.dumps(
            {
                "mvg-home-station": {"globalId": 42},
                "mvg-work-station": {"globalId": "de:09162:1100", "name": "Giesing"},
            }
        ),
        encoding="utf-8",
    )

    store = JsonPinnedStationStore(path)

    assert store.get(PinSlot.HOME) == DEFAULT_HOME_STATION
    assert store.get(PinSlot.WORK) == GIESING
