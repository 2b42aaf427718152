"""Pytest configuration and fixtures."""

from datetime import date
from typing import Any, Callable

import pytest

from nocobuilds.models import (
    Builder,
    BuilderCategory,
    BuilderType,
    Community,
    CommunityStatus,
    HomeType,
    Incentive,
    IncentiveType,
    PriceRange,
)


def build_community(**overrides: Any) -> Community:
    values: dict[str, Any] = {
        "community_id": "comm-001",
        "name": "Test Meadows",
        "city": "Loveland",
        "status": CommunityStatus.ACTIVE,
        "home_types": (HomeType.SINGLE_FAMILY,),
    }
    values.update(overrides)
    return Community(**values)


def build_builder(**overrides: Any) -> Builder:
    values: dict[str, Any] = {
        "builder_id": "bldr-001",
        "name": "Test Homes",
        "description": "Quality homes in Northern Colorado",
        "location": "Fort Collins",
        "category": BuilderCategory.REGIONAL,
        "builder_types": (BuilderType.PRODUCTION,),
        "price_range": PriceRange(min=400_000, max=600_000),
        "rating": 4.0,
        "review_count": 100,
    }
    values.update(overrides)
    return Builder(**values)


def build_incentive(**overrides: Any) -> Incentive:
    values: dict[str, Any] = {
        "incentive_id": "inc-001",
        "title": "Closing Cost Credit",
        "description": "Credit toward closing costs",
        "incentive_type": IncentiveType.REBATE,
        "amount": 5000,
        "provider": "Lennar",
        "category": "Closing Cost Assistance",
        "location": "Loveland",
    }
    values.update(overrides)
    return Incentive(**values)


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def today() -> date:
    """Fixed reference date for expiration checks."""
    return date(2025, 6, 1)


@pytest.fixture
def make_builder() -> Callable[..., Builder]:
    return build_builder


@pytest.fixture
def make_community() -> Callable[..., Community]:
    return build_community


@pytest.fixture
def make_incentive() -> Callable[..., Incentive]:
    return build_incentive


@pytest.fixture
def catalogue() -> list[Builder]:
    """Small catalogue spanning categories, types, cities and prices."""
    return [
        build_builder(
            builder_id="b-horton",
            name="Horton Homes",
            category=BuilderCategory.NATIONAL,
            builder_types=(BuilderType.PRODUCTION,),
            price_range=PriceRange(min=320_000, max=480_000),
            rating=4.2,
            specialties=("Affordable Quality", "First-Time Buyers"),
            communities=(
                build_community(community_id="c-revere", name="Revere", city="Johnstown"),
                build_community(
                    community_id="c-ledge",
                    name="Ledge Rock",
                    city="Johnstown",
                    home_types=(HomeType.PAIRED_HOMES,),
                ),
            ),
            build_on_your_lot=False,
        ),
        build_builder(
            builder_id="b-bridgewater",
            name="Bridgewater Custom",
            description="Luxury custom homes",
            category=BuilderCategory.LOCAL_CUSTOM,
            builder_types=(BuilderType.CUSTOM, BuilderType.LUXURY),
            price_range=PriceRange(min=900_000, max=2_500_000),
            rating=4.8,
            build_on_your_lot=True,
        ),
        build_builder(
            builder_id="b-richmond",
            name="Richmond American",
            category=BuilderCategory.NATIONAL,
            builder_types=(BuilderType.PRODUCTION, BuilderType.SEMI_CUSTOM),
            price_range=PriceRange(min=450_000, max=700_000),
            rating=3.9,
            communities=(
                build_community(
                    community_id="c-kinston",
                    name="Kinston",
                    city="Loveland",
                    home_types=(HomeType.TOWNHOMES,),
                    status=CommunityStatus.COMING_SOON,
                ),
            ),
        ),
    ]
