"""Tests for the home/work station picker."""

from unittest.mock import MagicMock

import pytest

from mvg_quick_departures.adapters.notifications import LogNotifier
from mvg_quick_departures.application.services import StationPicker, StationSearchService
from mvg_quick_departures.domain.errors import NetworkError
from mvg_quick_departures.domain.models import IconCategory, PinnedStation, PinSlot
from tests.fakes import FakeStationRepository, make_station

MARIENPLATZ = make_station("de:09162:2", "Marienplatz", place="München")
DEUTSCHES_MUSEUM = make_station(
    "de:09162:poi:7", "Deutsches Museum", place="München", transport_types=(), type="POI"
)


def _picker(
    slot: PinSlot, repo: FakeStationRepository, callback: MagicMock | None = None
) -> StationPicker:
    search = StationSearchService.for_search_panel(repo, LogNotifier(), debounce_seconds=0)
    return StationPicker(slot, search, callback or MagicMock())


class TestStationPicker:
    """Tests for StationPicker."""

    @pytest.mark.asyncio
    async def test_view_lists_results_with_slot_action(self) -> None:
        """Given results, then each entry offers to set the slot's station."""
        repo = FakeStationRepository({"M": [MARIENPLATZ, DEUTSCHES_MUSEUM]})
        picker = _picker(PinSlot.WORK, repo)

        await picker.search("M")
        view = picker.view()

        assert view.placeholder == "Search for work station..."
        assert view.query == "M"
        assert [e.title for e in view.entries] == ["Marienplatz", "Deutsches Museum"]
        assert [e.subtitle for e in view.entries] == ["München", "München"]
        assert [e.icon for e in view.entries] == [IconCategory.RAIL, IconCategory.ROAD]
        assert {e.action_title for e in view.entries} == {"Set as Work Station"}
        assert view.empty_view is None

    @pytest.mark.asyncio
    async def test_when_nothing_found_then_empty_view(self) -> None:
        """Given a query without results, then the picker explains that nothing was found."""
        picker = _picker(PinSlot.HOME, FakeStationRepository())

        await picker.search("xyz")
        view = picker.view()

        assert view.entries == []
        assert view.empty_view is not None
        assert view.empty_view.title == "No stations found"
        assert view.empty_view.description == "Try searching with a different term"

    @pytest.mark.asyncio
    async def test_when_search_fails_then_empty_view(self) -> None:
        """Given a failing search, then the picker shows the empty view."""
        repo = FakeStationRepository(errors={"Marien": NetworkError("timeout")})
        picker = _picker(PinSlot.HOME, repo)

        await picker.search("Marien")

        assert picker.view().empty_view is not None

    def test_when_no_query_then_no_empty_view(self) -> None:
        """Given a fresh picker, then there is neither a result nor an empty view."""
        view = _picker(PinSlot.HOME, FakeStationRepository()).view()

        assert view.placeholder == "Search for home station..."
        assert view.entries == []
        assert view.empty_view is None

    @pytest.mark.asyncio
    async def test_choose_hands_projection_to_callback_and_closes(self) -> None:
        """Given a result, when choosing it, then the callback receives the pin."""
        callback = MagicMock()
        repo = FakeStationRepository({"Marien": [MARIENPLATZ]})
        picker = _picker(PinSlot.HOME, repo, callback)
        results = await picker.search("Marien")

        pinned = await picker.choose(results[0])

        assert pinned == PinnedStation("de:09162:2", "Marienplatz")
        callback.assert_called_once_with(PinSlot.HOME, pinned)
        assert picker.chosen == pinned

        picker.update_query("Other")
        assert repo.calls == ["Marien"]
