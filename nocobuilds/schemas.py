"""Pydantic schemas for the builders API's JSON payloads (Pydantic v2).

Payload keys are camelCase; the snake_case field names are accepted too.
Unknown keys are ignored. These models only validate shape and types;
entity invariants stay on the frozen dataclasses in ``nocobuilds.models``.
"""

from __future__ import annotations

from datetime import date
from typing import Any, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from nocobuilds.logging import get_logger
from nocobuilds.models import (
    BuilderCategory,
    BuilderType,
    CommunityStatus,
    HomeType,
    IncentiveType,
)

logger = get_logger(__name__)


def parse_expiration_date(raw: Any) -> date | None:
    """Parse a ``yyyy-MM-dd`` date, returning None when absent or malformed."""
    if raw is None:
        return None
    try:
        return date.fromisoformat(str(raw)[:10])
    except ValueError:
        logger.warning("Ignoring malformed expiration date %r", raw)
        return None


class PayloadModel(BaseModel):
    # ids and years sometimes arrive as JSON numbers
    model_config = ConfigDict(extra="ignore", populate_by_name=True, coerce_numbers_to_str=True)


class RangePayload(PayloadModel):
    min: int
    max: int


class CoordinatesPayload(PayloadModel):
    lat: float
    lng: float


class CorporateInfoPayload(PayloadModel):
    headquarters: Optional[str] = None
    founded: Optional[str] = None
    public_company: Optional[bool] = Field(None, validation_alias=AliasChoices("publicCompany", "public_company"))
    stock_ticker: Optional[str] = Field(None, validation_alias=AliasChoices("stockTicker", "stock_ticker"))


class CommunityPayload(PayloadModel):
    id: str
    name: str
    city: str
    status: CommunityStatus
    home_types: List[HomeType] = Field(..., validation_alias=AliasChoices("homeTypes", "home_types"))
    price_range: Optional[RangePayload] = Field(None, validation_alias=AliasChoices("priceRange", "price_range"))
    square_footage_range: Optional[RangePayload] = Field(
        None,
        validation_alias=AliasChoices("squareFootageRange", "square_footage_range"),
    )
    coordinates: Optional[CoordinatesPayload] = None
    amenities: Optional[List[str]] = None
    url: Optional[str] = None
    description: Optional[str] = None
    collections: Optional[List[str]] = None
    launch_date: Optional[str] = Field(None, validation_alias=AliasChoices("launchDate", "launch_date"))
    lot_sizes: Optional[str] = Field(None, validation_alias=AliasChoices("lotSizes", "lot_sizes"))
    nearby_attractions: Optional[List[str]] = Field(
        None,
        validation_alias=AliasChoices("nearbyAttractions", "nearby_attractions"),
    )


class BuilderPayload(PayloadModel):
    id: str
    name: str
    description: Optional[str] = None
    location: str
    category: BuilderCategory
    builder_types: List[BuilderType] = Field(
        ...,
        validation_alias=AliasChoices("builderType", "builder_types"),
    )
    price_range: RangePayload = Field(..., validation_alias=AliasChoices("priceRange", "price_range"))
    rating: float = Field(0.0, ge=0, le=5)
    review_count: int = Field(0, ge=0, validation_alias=AliasChoices("reviewCount", "review_count"))
    specialties: Optional[List[str]] = None
    communities: Optional[List[CommunityPayload]] = None
    image_url: Optional[str] = Field(None, validation_alias=AliasChoices("imageUrl", "image_url"))
    logo_url: Optional[str] = Field(None, validation_alias=AliasChoices("logoUrl", "logo_url"))
    website: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    warranty: Optional[str] = None
    square_footage_range: Optional[RangePayload] = Field(
        None,
        validation_alias=AliasChoices("squareFootageRange", "square_footage_range"),
    )
    established: Optional[str] = None
    building_styles: Optional[List[str]] = Field(
        None,
        validation_alias=AliasChoices("buildingStyles", "building_styles"),
    )
    current_incentives: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("currentIncentives", "current_incentives"),
    )
    build_on_your_lot: Optional[bool] = Field(
        None,
        validation_alias=AliasChoices("buildOnYourLot", "build_on_your_lot"),
    )
    yearly_homes: Optional[int] = Field(None, validation_alias=AliasChoices("yearlyHomes", "yearly_homes"))
    serves_counties: Optional[List[str]] = Field(
        None,
        validation_alias=AliasChoices("servesCounties", "serves_counties"),
    )
    corporate_info: Optional[CorporateInfoPayload] = Field(
        None,
        validation_alias=AliasChoices("corporateInfo", "corporate_info"),
    )


class IncentivePayload(PayloadModel):
    id: str
    title: str
    description: Optional[str] = None
    incentive_type: IncentiveType = Field(..., validation_alias=AliasChoices("type", "incentive_type"))
    amount: int = Field(0, ge=0)
    percentage: Optional[float] = None
    eligibility: Optional[List[str]] = None
    expiration_date: Optional[date] = Field(
        None,
        validation_alias=AliasChoices("expirationDate", "expiration_date"),
    )
    provider: str
    category: Optional[str] = None
    location: Optional[str] = None

    @field_validator("expiration_date", mode="before")
    @classmethod
    def _lenient_expiration(cls, value: Any) -> date | None:
        # a bad date drops the expiry rather than the whole offer
        if isinstance(value, date):
            return value
        return parse_expiration_date(value)
