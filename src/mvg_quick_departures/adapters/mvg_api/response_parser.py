"""Parsing of MVG API responses into domain models."""

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

from mvg_quick_departures.domain.errors import ParseError
from mvg_quick_departures.domain.models.departure import Departure
from mvg_quick_departures.domain.models.station import Station
from mvg_quick_departures.domain.models.transport_type import Occupancy

logger = logging.getLogger(__name__)


class MvgDepartureRecord(BaseModel):
    """A departure as delivered by ``/departures`` (camelCase field names)."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    planned_departure_time: int = Field(alias="plannedDepartureTime")
    realtime_departure_time: int | None = Field(default=None, alias="realtimeDepartureTime")
    delay_in_minutes: int | None = Field(default=None, alias="delayInMinutes")
    realtime: bool = False
    transport_type: str = Field(alias="transportType")
    label: str
    destination: str
    cancelled: bool = False
    platform: int | None = None
    platform_changed: bool = Field(default=False, alias="platformChanged")
    occupancy: str = Occupancy.UNKNOWN

    def to_departure(self) -> Departure:
        """Convert to the domain model."""
        delay = max(self.delay_in_minutes or 0, 0)
        realtime_time = (
            self.realtime_departure_time
            if self.realtime_departure_time is not None
            else self.planned_departure_time
        )
        return Departure(
            planned_departure_time=self.planned_departure_time,
            realtime_departure_time=realtime_time,
            delay_in_minutes=delay,
            realtime=self.realtime,
            transport_type=self.transport_type,
            label=self.label,
            destination=self.destination,
            cancelled=self.cancelled,
            platform=self.platform,
            platform_changed=self.platform_changed,
            occupancy=self.occupancy,
        )


class MvgLocationRecord(BaseModel):
    """A location as delivered by ``/locations``."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    global_id: str | None = Field(default=None, alias="globalId")
    name: str = ""
    place: str = ""
    transport_types: list[str] = Field(default_factory=list, alias="transportTypes")
    type: str = "STATION"

    @field_validator("transport_types", mode="before")
    @classmethod
    def none_as_empty(cls, v: Any) -> Any:
        """The API sends null for locations without lines."""
        return [] if v is None else v

    def to_station(self) -> Station | None:
        """Convert to the domain model; locations without an id cannot be selected."""
        if not self.global_id:
            return None
        return Station(
            global_id=self.global_id,
            name=self.name or self.global_id,
            place=self.place,
            transport_types=frozenset(self.transport_types),
            type=self.type,
        )


_departure_list = TypeAdapter(list[MvgDepartureRecord])
_location_list = TypeAdapter(list[MvgLocationRecord])


def parse_departures(data: Any) -> list[Departure]:
    """Parse a ``/departures`` body.

    Raises:
        ParseError: If the body is not a list of departure records.
    """
    try:
        records = _departure_list.validate_python(data)
    except ValidationError as e:
        raise ParseError(
            f"Unexpected departures response: {e.error_count()} validation error(s)"
        ) from e
    return [record.to_departure() for record in records]


def parse_locations(data: Any) -> list[Station]:
    """Parse a ``/locations`` body, skipping locations without a global id.

    Raises:
        ParseError: If the body is not a list of location records.
    """
    try:
        records = _location_list.validate_python(data)
    except ValidationError as e:
        raise ParseError(
            f"Unexpected locations response: {e.error_count()} validation error(s)"
        ) from e

    stations = []
    for record in records:
        station = record.to_station()
        if station is None:
            logger.debug(f"Skipping location without globalId: {record.name} ({record.type})")
            continue
        stations.append(station)
    return stations
