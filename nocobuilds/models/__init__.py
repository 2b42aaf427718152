"""Domain models for the builder directory."""

from nocobuilds.models.base import Coordinates, CorporateInfo, PriceRange, SquareFootageRange
from nocobuilds.models.builder import Builder, Community
from nocobuilds.models.criteria import FilterCriteria, IncentiveFilterCriteria
from nocobuilds.models.enums import (
    BuilderCategory,
    BuilderType,
    CommunityStatus,
    HomeType,
    IncentiveType,
    PriceRangeCategory,
    SortOption,
)
from nocobuilds.models.incentive import EXPIRING_SOON_DAYS, Incentive

__all__ = [
    "EXPIRING_SOON_DAYS",
    "Builder",
    "BuilderCategory",
    "BuilderType",
    "Community",
    "CommunityStatus",
    "Coordinates",
    "CorporateInfo",
    "FilterCriteria",
    "HomeType",
    "Incentive",
    "IncentiveFilterCriteria",
    "IncentiveType",
    "PriceRange",
    "PriceRangeCategory",
    "SortOption",
    "SquareFootageRange",
]
