"""Enumeration types for directory entities.

Member values match the JSON payloads served by the builders API.
Each enum exposes ``display_name`` through a per-member mapping that
covers every member.
"""

from enum import Enum


class BuilderCategory(str, Enum):
    NATIONAL = "National"
    REGIONAL = "Regional"
    LOCAL_CUSTOM = "Local Custom"

    @property
    def display_name(self) -> str:
        return _BUILDER_CATEGORY_NAMES[self]


class BuilderType(str, Enum):
    PRODUCTION = "Production"
    LUXURY = "Luxury"
    SEMI_CUSTOM = "Semi-Custom"
    CUSTOM = "Custom"
    TOWNHOMES = "Townhomes"

    @property
    def display_name(self) -> str:
        return _BUILDER_TYPE_NAMES[self]


class CommunityStatus(str, Enum):
    ACTIVE = "Active"
    COMING_SOON = "Coming Soon"
    FINAL_PHASE = "Final Phase"
    SOLD_OUT = "Sold Out"
    PRE_SALES = "Pre-Sales"

    @property
    def display_name(self) -> str:
        return _COMMUNITY_STATUS_NAMES[self]


class HomeType(str, Enum):
    SINGLE_FAMILY = "Single-Family"
    PAIRED_HOMES = "Paired Homes"
    TOWNHOMES = "Townhomes"
    PATIO_HOMES = "Patio Homes"
    CONDOS = "Condos"
    VILLAS = "Villas"

    @property
    def display_name(self) -> str:
        return _HOME_TYPE_NAMES[self]


class IncentiveType(str, Enum):
    REBATE = "rebate"
    TAX_CREDIT = "tax_credit"
    DISCOUNT = "discount"
    FINANCING = "financing"

    @property
    def display_name(self) -> str:
        return _INCENTIVE_TYPE_NAMES[self]


class SortOption(str, Enum):
    NAME = "name"
    PRICE_ASCENDING = "price_ascending"
    COMMUNITY_COUNT = "community_count"

    @property
    def display_name(self) -> str:
        return _SORT_OPTION_NAMES[self]


class PriceRangeCategory(str, Enum):
    """Fixed price buckets offered as filter chips."""

    BUDGET = "under_400k"
    MID_RANGE = "400k_600k"
    UPPER_MID = "600k_800k"
    LUXURY = "800k_plus"

    @property
    def display_name(self) -> str:
        return _PRICE_RANGE_NAMES[self]

    @property
    def bounds(self) -> tuple[int, int | None]:
        """Inclusive bounds; an upper bound of None is unbounded."""
        return _PRICE_RANGE_BOUNDS[self]

    def overlaps(self, low: int, high: int) -> bool:
        """True when [low, high] shares at least one value with the bucket."""
        bucket_low, bucket_high = self.bounds
        if high < bucket_low:
            return False
        return bucket_high is None or low <= bucket_high


_BUILDER_CATEGORY_NAMES = {
    BuilderCategory.NATIONAL: "National",
    BuilderCategory.REGIONAL: "Regional",
    BuilderCategory.LOCAL_CUSTOM: "Local Custom",
}

_BUILDER_TYPE_NAMES = {
    BuilderType.PRODUCTION: "Production",
    BuilderType.LUXURY: "Luxury",
    BuilderType.SEMI_CUSTOM: "Semi-Custom",
    BuilderType.CUSTOM: "Custom",
    BuilderType.TOWNHOMES: "Townhomes",
}

_COMMUNITY_STATUS_NAMES = {
    CommunityStatus.ACTIVE: "Active",
    CommunityStatus.COMING_SOON: "Coming Soon",
    CommunityStatus.FINAL_PHASE: "Final Phase",
    CommunityStatus.SOLD_OUT: "Sold Out",
    CommunityStatus.PRE_SALES: "Pre-Sales",
}

_HOME_TYPE_NAMES = {
    HomeType.SINGLE_FAMILY: "Single-Family",
    HomeType.PAIRED_HOMES: "Paired Homes",
    HomeType.TOWNHOMES: "Townhomes",
    HomeType.PATIO_HOMES: "Patio Homes",
    HomeType.CONDOS: "Condos",
    HomeType.VILLAS: "Villas",
}

_INCENTIVE_TYPE_NAMES = {
    IncentiveType.REBATE: "Rebate",
    IncentiveType.TAX_CREDIT: "Tax Credit",
    IncentiveType.DISCOUNT: "Discount",
    IncentiveType.FINANCING: "Special Financing",
}

_SORT_OPTION_NAMES = {
    SortOption.NAME: "Name",
    SortOption.PRICE_ASCENDING: "Price Range",
    SortOption.COMMUNITY_COUNT: "Most Communities",
}

_PRICE_RANGE_NAMES = {
    PriceRangeCategory.BUDGET: "Under $400K",
    PriceRangeCategory.MID_RANGE: "$400K - $600K",
    PriceRangeCategory.UPPER_MID: "$600K - $800K",
    PriceRangeCategory.LUXURY: "$800K+",
}

_PRICE_RANGE_BOUNDS: dict[PriceRangeCategory, tuple[int, int | None]] = {
    PriceRangeCategory.BUDGET: (0, 399_999),
    PriceRangeCategory.MID_RANGE: (400_000, 599_999),
    PriceRangeCategory.UPPER_MID: (600_000, 799_999),
    PriceRangeCategory.LUXURY: (800_000, None),
}
