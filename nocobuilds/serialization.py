"""Conversion between entities and the builders API's JSON payloads.

Payload keys are camelCase. Decoding validates through the schemas in
``nocobuilds.schemas``; any validation failure or entity invariant
violation surfaces as ``PayloadError``. A malformed optional
``expirationDate`` is dropped with a warning.
"""

from __future__ import annotations

from dataclasses import asdict, is_dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, Iterable, Mapping, TypeVar

from pydantic import BaseModel, ValidationError

from nocobuilds.exceptions import InvalidEntityError, PayloadError
from nocobuilds.models import (
    Builder,
    Community,
    Coordinates,
    CorporateInfo,
    Incentive,
    PriceRange,
    SquareFootageRange,
)
from nocobuilds.schemas import (
    BuilderPayload,
    CommunityPayload,
    IncentivePayload,
    RangePayload,
    parse_expiration_date,
)

__all__ = [
    "builder_from_dict",
    "builder_to_payload",
    "builders_from_payload",
    "community_from_dict",
    "community_to_payload",
    "dataclass_to_dict",
    "incentive_from_dict",
    "incentive_to_payload",
    "incentives_from_payload",
    "parse_expiration_date",
    "serialize_value",
    "to_dict",
]


def to_dict(obj: Any) -> dict:
    """Convert object to dictionary."""
    if is_dataclass(obj):
        return dataclass_to_dict(obj)
    elif isinstance(obj, dict):
        return obj
    else:
        return {"value": str(obj)}


def dataclass_to_dict(obj: Any) -> dict:
    """Convert dataclass to dict with proper serialization."""
    result = {}
    for key, value in asdict(obj).items():
        result[key] = serialize_value(value)
    return result


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple, set, frozenset)):
        return [serialize_value(v) for v in value]
    return value


# Decoding


M = TypeVar("M", bound=BaseModel)


def _validate(schema: type[M], data: Any, kind: str) -> M:
    try:
        return schema.model_validate(data)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or '<root>'}: {error['msg']}"
            for error in exc.errors()
        )
        raise PayloadError(f"Invalid {kind} payload: {problems}") from exc


def _price_range(raw: RangePayload | None) -> PriceRange | None:
    return PriceRange(min=raw.min, max=raw.max) if raw is not None else None


def _square_footage(raw: RangePayload | None) -> SquareFootageRange | None:
    return SquareFootageRange(min=raw.min, max=raw.max) if raw is not None else None


def _optional_tuple(values: list[str] | None) -> tuple[str, ...] | None:
    return tuple(values) if values is not None else None


def _community(payload: CommunityPayload) -> Community:
    coordinates = payload.coordinates
    return Community(
        community_id=payload.id,
        name=payload.name,
        city=payload.city,
        status=payload.status,
        home_types=tuple(payload.home_types),
        price_range=_price_range(payload.price_range),
        square_footage_range=_square_footage(payload.square_footage_range),
        coordinates=Coordinates(lat=coordinates.lat, lng=coordinates.lng) if coordinates else None,
        amenities=_optional_tuple(payload.amenities),
        url=payload.url,
        description=payload.description,
        collections=_optional_tuple(payload.collections),
        launch_date=payload.launch_date,
        lot_sizes=payload.lot_sizes,
        nearby_attractions=_optional_tuple(payload.nearby_attractions),
    )


def community_from_dict(data: Mapping[str, Any]) -> Community:
    payload = _validate(CommunityPayload, data, "Community")
    try:
        return _community(payload)
    except InvalidEntityError as exc:
        raise PayloadError(str(exc)) from exc


def builder_from_dict(data: Mapping[str, Any]) -> Builder:
    """Decode one builder payload, including its communities."""
    payload = _validate(BuilderPayload, data, "Builder")
    corporate = payload.corporate_info
    try:
        return Builder(
            builder_id=payload.id,
            name=payload.name,
            description=payload.description or "",
            location=payload.location,
            category=payload.category,
            builder_types=tuple(payload.builder_types),
            price_range=_price_range(payload.price_range),
            rating=payload.rating,
            review_count=payload.review_count,
            specialties=tuple(payload.specialties or ()),
            communities=tuple(_community(community) for community in payload.communities or ()),
            image_url=payload.image_url or "",
            logo_url=payload.logo_url,
            website=payload.website,
            phone=payload.phone,
            email=payload.email,
            warranty=payload.warranty,
            square_footage_range=_square_footage(payload.square_footage_range),
            established=payload.established,
            building_styles=_optional_tuple(payload.building_styles),
            current_incentives=payload.current_incentives,
            build_on_your_lot=payload.build_on_your_lot,
            yearly_homes=payload.yearly_homes,
            serves_counties=_optional_tuple(payload.serves_counties),
            corporate_info=CorporateInfo(
                headquarters=corporate.headquarters,
                founded=corporate.founded,
                public_company=corporate.public_company,
                stock_ticker=corporate.stock_ticker,
            )
            if corporate
            else None,
        )
    except InvalidEntityError as exc:
        raise PayloadError(str(exc)) from exc


def incentive_from_dict(data: Mapping[str, Any]) -> Incentive:
    payload = _validate(IncentivePayload, data, "Incentive")
    try:
        return Incentive(
            incentive_id=payload.id,
            title=payload.title,
            description=payload.description or "",
            incentive_type=payload.incentive_type,
            amount=payload.amount,
            provider=payload.provider,
            category=payload.category or "",
            location=payload.location or "",
            percentage=payload.percentage,
            eligibility=tuple(payload.eligibility or ()),
            expiration_date=payload.expiration_date,
        )
    except InvalidEntityError as exc:
        raise PayloadError(str(exc)) from exc


def builders_from_payload(payload: Iterable[Mapping[str, Any]]) -> list[Builder]:
    return [builder_from_dict(item) for item in payload]


def incentives_from_payload(payload: Iterable[Mapping[str, Any]]) -> list[Incentive]:
    return [incentive_from_dict(item) for item in payload]


# Encoding


def _compact(data: dict[str, Any]) -> dict[str, Any]:
    """Drop absent optional values, as the API omits them."""
    return {key: value for key, value in data.items() if value is not None}


def _range_payload(value: PriceRange | SquareFootageRange | None) -> dict[str, int] | None:
    if value is None:
        return None
    return {"min": value.min, "max": value.max}


def community_to_payload(community: Community) -> dict[str, Any]:
    coordinates = community.coordinates
    return _compact(
        {
            "id": community.community_id,
            "name": community.name,
            "city": community.city,
            "status": community.status.value,
            "homeTypes": [home_type.value for home_type in community.home_types],
            "priceRange": _range_payload(community.price_range),
            "squareFootageRange": _range_payload(community.square_footage_range),
            "coordinates": {"lat": coordinates.lat, "lng": coordinates.lng} if coordinates else None,
            "amenities": serialize_value(community.amenities),
            "url": community.url,
            "description": community.description,
            "collections": serialize_value(community.collections),
            "launchDate": community.launch_date,
            "lotSizes": community.lot_sizes,
            "nearbyAttractions": serialize_value(community.nearby_attractions),
        }
    )


def builder_to_payload(builder: Builder) -> dict[str, Any]:
    corporate = builder.corporate_info
    return _compact(
        {
            "id": builder.builder_id,
            "name": builder.name,
            "description": builder.description,
            "location": builder.location,
            "category": builder.category.value,
            "builderType": [builder_type.value for builder_type in builder.builder_types],
            "priceRange": _range_payload(builder.price_range),
            "rating": builder.rating,
            "reviewCount": builder.review_count,
            "specialties": list(builder.specialties),
            "communities": [community_to_payload(community) for community in builder.communities],
            "imageUrl": builder.image_url,
            "logoUrl": builder.logo_url,
            "website": builder.website,
            "phone": builder.phone,
            "email": builder.email,
            "warranty": builder.warranty,
            "squareFootageRange": _range_payload(builder.square_footage_range),
            "established": builder.established,
            "buildingStyles": serialize_value(builder.building_styles),
            "currentIncentives": builder.current_incentives,
            "buildOnYourLot": builder.build_on_your_lot,
            "yearlyHomes": builder.yearly_homes,
            "servesCounties": serialize_value(builder.serves_counties),
            "corporateInfo": _compact(
                {
                    "headquarters": corporate.headquarters,
                    "founded": corporate.founded,
                    "publicCompany": corporate.public_company,
                    "stockTicker": corporate.stock_ticker,
                }
            )
            if corporate
            else None,
        }
    )


def incentive_to_payload(incentive: Incentive) -> dict[str, Any]:
    return _compact(
        {
            "id": incentive.incentive_id,
            "title": incentive.title,
            "description": incentive.description,
            "type": incentive.incentive_type.value,
            "amount": incentive.amount,
            "percentage": incentive.percentage,
            "eligibility": list(incentive.eligibility),
            "expirationDate": serialize_value(incentive.expiration_date),
            "provider": incentive.provider,
            "category": incentive.category,
            "location": incentive.location,
        }
    )
