"""Query objects describing the user's current search, filter and sort intent.

An empty selection on any dimension means "no constraint". Criteria are
not validated: an inverted price range is accepted and simply matches
nothing.
"""

from dataclasses import dataclass, field

from nocobuilds.models.enums import (
    BuilderCategory,
    BuilderType,
    HomeType,
    IncentiveType,
    PriceRangeCategory,
    SortOption,
)
from nocobuilds.models.incentive import EXPIRING_SOON_DAYS


def _freeze_sets(obj: object, *names: str) -> None:
    for name in names:
        value = getattr(obj, name)
        if not isinstance(value, frozenset):
            object.__setattr__(obj, name, frozenset(value))


@dataclass(frozen=True)
class FilterCriteria:
    """Builder directory query."""

    search_text: str = ""
    selected_categories: frozenset[BuilderCategory] = field(default_factory=frozenset)
    selected_builder_types: frozenset[BuilderType] = field(default_factory=frozenset)
    selected_home_types: frozenset[HomeType] = field(default_factory=frozenset)
    selected_cities: frozenset[str] = field(default_factory=frozenset)
    selected_price_ranges: frozenset[PriceRangeCategory] = field(default_factory=frozenset)
    price_range: tuple[int, int] | None = None  # (min_acceptable, max_acceptable)
    minimum_rating: float = 0.0
    build_on_your_lot: bool | None = None
    sort: SortOption | None = None  # None keeps catalogue order

    def __post_init__(self) -> None:
        _freeze_sets(
            self,
            "selected_categories",
            "selected_builder_types",
            "selected_home_types",
            "selected_cities",
            "selected_price_ranges",
        )

    @property
    def has_active_filters(self) -> bool:
        """Whether any structured filter is set. Search text and sort do not count."""
        return (
            bool(self.selected_categories)
            or bool(self.selected_builder_types)
            or bool(self.selected_home_types)
            or bool(self.selected_cities)
            or bool(self.selected_price_ranges)
            or self.price_range is not None
            or self.minimum_rating > 0.0
            or self.build_on_your_lot is not None
        )

    @property
    def active_filter_count(self) -> int:
        return (
            len(self.selected_categories)
            + len(self.selected_builder_types)
            + len(self.selected_home_types)
            + len(self.selected_cities)
            + len(self.selected_price_ranges)
            + (self.price_range is not None)
            + (self.minimum_rating > 0.0)
            + (self.build_on_your_lot is not None)
        )

    def cleared(self) -> "FilterCriteria":
        """Reset every structured filter, keeping search text and sort."""
        return FilterCriteria(search_text=self.search_text, sort=self.sort)


@dataclass(frozen=True)
class IncentiveFilterCriteria:
    """Incentive list query. Expired offers are hidden by default."""

    search_text: str = ""
    selected_types: frozenset[IncentiveType] = field(default_factory=frozenset)
    selected_providers: frozenset[str] = field(default_factory=frozenset)
    selected_categories: frozenset[str] = field(default_factory=frozenset)
    selected_locations: frozenset[str] = field(default_factory=frozenset)
    minimum_amount: int = 0
    expiring_soon_only: bool = False
    hide_expired: bool = True
    expiring_soon_days: int = EXPIRING_SOON_DAYS

    def __post_init__(self) -> None:
        _freeze_sets(
            self,
            "selected_types",
            "selected_providers",
            "selected_categories",
            "selected_locations",
        )

    @property
    def has_active_filters(self) -> bool:
        """``hide_expired`` is the default posture and is not counted."""
        return (
            bool(self.selected_types)
            or bool(self.selected_providers)
            or bool(self.selected_categories)
            or bool(self.selected_locations)
            or self.minimum_amount > 0
            or self.expiring_soon_only
        )

    def cleared(self) -> "IncentiveFilterCriteria":
        return IncentiveFilterCriteria(
            search_text=self.search_text,
            expiring_soon_days=self.expiring_soon_days,
        )
