"""In-memory catalogue of builders and incentives."""

from dataclasses import dataclass, field
from datetime import date
from typing import Iterable

from nocobuilds.exceptions import DuplicateEntityError, EntityNotFoundError
from nocobuilds.models import Builder, FilterCriteria, Incentive, IncentiveFilterCriteria
from nocobuilds.search import apply_builder_filters, apply_incentive_filters


@dataclass
class CatalogueStore:
    """Holds an already-fetched collection, indexed by id, in insertion order.

    Fetching and caching belong to the API layer; the store only indexes
    what it is given.
    """

    _builders: dict[str, Builder] = field(default_factory=dict)
    _incentives: dict[str, Incentive] = field(default_factory=dict)

    @classmethod
    def from_entities(
        cls,
        builders: Iterable[Builder] = (),
        incentives: Iterable[Incentive] = (),
    ) -> "CatalogueStore":
        store = cls()
        for builder in builders:
            store.add_builder(builder)
        for incentive in incentives:
            store.add_incentive(incentive)
        return store

    def add_builder(self, builder: Builder) -> None:
        """Add a builder to the store."""
        if builder.builder_id in self._builders:
            raise DuplicateEntityError(f"Builder {builder.builder_id} already exists")
        self._builders[builder.builder_id] = builder

    def add_incentive(self, incentive: Incentive) -> None:
        """Add an incentive to the store."""
        if incentive.incentive_id in self._incentives:
            raise DuplicateEntityError(f"Incentive {incentive.incentive_id} already exists")
        self._incentives[incentive.incentive_id] = incentive

    @property
    def builders(self) -> list[Builder]:
        return list(self._builders.values())

    @property
    def incentives(self) -> list[Incentive]:
        return list(self._incentives.values())

    # Query methods
    def get_builder(self, builder_id: str) -> Builder:
        try:
            return self._builders[builder_id]
        except KeyError:
            raise EntityNotFoundError(f"Builder {builder_id} not found") from None

    def get_incentive(self, incentive_id: str) -> Incentive:
        try:
            return self._incentives[incentive_id]
        except KeyError:
            raise EntityNotFoundError(f"Incentive {incentive_id} not found") from None

    def resolve_builders(self, builder_ids: Iterable[str]) -> list[Builder]:
        """Look up builders in the order given, e.g. a saved comparison."""
        return [self.get_builder(builder_id) for builder_id in builder_ids]

    def cities(self) -> list[str]:
        """Every community city in the catalogue, sorted, for the location filter."""
        return sorted({city for builder in self._builders.values() for city in builder.all_cities})

    def providers(self) -> list[str]:
        return sorted({incentive.provider for incentive in self._incentives.values()})

    def search_builders(self, criteria: FilterCriteria) -> list[Builder]:
        return apply_builder_filters(self.builders, criteria)

    def search_incentives(self, criteria: IncentiveFilterCriteria, today: date) -> list[Incentive]:
        return apply_incentive_filters(self.incentives, criteria, today)

    def summary(self) -> dict[str, int]:
        """Return summary counts of all entities."""
        return {
            "builders": len(self._builders),
            "communities": sum(len(builder.communities) for builder in self._builders.values()),
            "incentives": len(self._incentives),
        }
