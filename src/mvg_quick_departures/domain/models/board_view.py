"""View models handed to the rendering collaborator."""

from pydantic import BaseModel, ConfigDict

from mvg_quick_departures.domain.models.departure import DepartureStatus
from mvg_quick_departures.domain.models.feed_status import FeedStatus
from mvg_quick_departures.domain.models.station_catalog import StationCatalog
from mvg_quick_departures.domain.models.transport_type import IconCategory


class EmptyView(BaseModel):
    """Placeholder shown when a list has nothing to display."""

    model_config = ConfigDict(frozen=True)

    title: str
    description: str


class DepartureView(BaseModel):
    """One formatted departure row."""

    model_config = ConfigDict(frozen=True)

    title: str
    subtitle: str
    eta: str
    clock_time: str
    occupancy: str
    tooltip: str
    icon: IconCategory
    status: DepartureStatus


class DepartureGroupView(BaseModel):
    """A formatted transport type section."""

    model_config = ConfigDict(frozen=True)

    transport_type: str
    title: str
    subtitle: str
    departures: list[DepartureView]


class BoardView(BaseModel):
    """Everything the renderer needs for one redraw of the departure board."""

    model_config = ConfigDict(frozen=True)

    station_id: str | None
    station_name: str | None
    is_loading: bool
    status: FeedStatus
    groups: list[DepartureGroupView]
    catalog: StationCatalog
    empty_view: EmptyView | None = None
    error: str | None = None


class PickerEntry(BaseModel):
    """A search result row in the home/work station picker."""

    model_config = ConfigDict(frozen=True)

    global_id: str
    title: str
    subtitle: str
    icon: IconCategory
    action_title: str


class StationPickerView(BaseModel):
    """The home/work station picker list."""

    model_config = ConfigDict(frozen=True)

    placeholder: str
    query: str
    is_loading: bool
    entries: list[PickerEntry]
    empty_view: EmptyView | None = None
