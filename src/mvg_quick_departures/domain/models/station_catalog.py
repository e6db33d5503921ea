"""Station catalog domain models."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict

from mvg_quick_departures.domain.models.transport_type import IconCategory


class CatalogSection(StrEnum):
    """Sections of the station dropdown."""

    QUICK_ACCESS = "Quick Access"
    ALL_STATIONS = "All Stations"
    SEARCH_RESULTS = "Search Results"


class CatalogEntry(BaseModel):
    """A selectable station row."""

    model_config = ConfigDict(frozen=True)

    global_id: str
    title: str
    icon: IconCategory


class CatalogSectionView(BaseModel):
    """A titled list of catalog entries."""

    model_config = ConfigDict(frozen=True)

    section: CatalogSection
    entries: list[CatalogEntry]

    @property
    def title(self) -> str:
        """Section heading."""
        return self.section.value


class StationCatalog(BaseModel):
    """Ordered, deduplicated list of selectable stations."""

    model_config = ConfigDict(frozen=True)

    sections: list[CatalogSectionView]

    @property
    def entries(self) -> list[CatalogEntry]:
        """All entries in display order."""
        return [entry for section in self.sections for entry in section.entries]

    @property
    def global_ids(self) -> list[str]:
        """Identifiers of all entries in display order."""
        return [entry.global_id for entry in self.entries]
