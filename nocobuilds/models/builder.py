"""Builder and community models."""

from dataclasses import dataclass

from nocobuilds.exceptions import InvalidEntityError
from nocobuilds.formatting import format_rating, format_review_count
from nocobuilds.models.base import Coordinates, CorporateInfo, PriceRange, SquareFootageRange
from nocobuilds.models.enums import BuilderCategory, BuilderType, CommunityStatus, HomeType


def _freeze(obj: object, *names: str) -> None:
    """Store sequence fields as tuples so frozen records stay immutable."""
    for name in names:
        value = getattr(obj, name)
        if value is not None and not isinstance(value, tuple):
            object.__setattr__(obj, name, tuple(value))


@dataclass(frozen=True)
class Community:
    """A development offered by a builder.

    Communities have no lifecycle of their own; they are only reachable
    through the builder that lists them.
    """

    community_id: str
    name: str
    city: str
    status: CommunityStatus
    home_types: tuple[HomeType, ...]
    price_range: PriceRange | None = None
    square_footage_range: SquareFootageRange | None = None
    coordinates: Coordinates | None = None
    amenities: tuple[str, ...] | None = None
    url: str | None = None
    description: str | None = None
    collections: tuple[str, ...] | None = None
    launch_date: str | None = None
    lot_sizes: str | None = None
    nearby_attractions: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        _freeze(self, "home_types", "amenities", "collections", "nearby_attractions")
        if not self.home_types:
            raise InvalidEntityError(f"Community {self.community_id} has no home types")


@dataclass(frozen=True)
class Builder:
    """Home builder listed in the directory."""

    builder_id: str
    name: str
    description: str
    location: str
    category: BuilderCategory
    builder_types: tuple[BuilderType, ...]
    price_range: PriceRange
    rating: float
    review_count: int
    specialties: tuple[str, ...] = ()
    communities: tuple[Community, ...] = ()
    image_url: str = ""
    logo_url: str | None = None
    website: str | None = None
    phone: str | None = None
    email: str | None = None
    warranty: str | None = None
    square_footage_range: SquareFootageRange | None = None
    established: str | None = None
    building_styles: tuple[str, ...] | None = None
    current_incentives: str | None = None
    build_on_your_lot: bool | None = None
    yearly_homes: int | None = None
    serves_counties: tuple[str, ...] | None = None
    corporate_info: CorporateInfo | None = None

    def __post_init__(self) -> None:
        _freeze(
            self,
            "builder_types",
            "specialties",
            "communities",
            "building_styles",
            "serves_counties",
        )
        if not self.builder_types:
            raise InvalidEntityError(f"Builder {self.builder_id} has no builder types")
        if not 0 <= self.rating <= 5:
            raise InvalidEntityError(
                f"Builder {self.builder_id} rating {self.rating} outside [0, 5]"
            )
        if self.review_count < 0:
            raise InvalidEntityError(f"Builder {self.builder_id} has negative review count")

    @property
    def has_website(self) -> bool:
        return self.website is not None

    @property
    def has_phone(self) -> bool:
        return self.phone is not None

    @property
    def has_email(self) -> bool:
        return self.email is not None

    @property
    def has_current_incentives(self) -> bool:
        return bool(self.current_incentives)

    @property
    def formatted_rating(self) -> str:
        return format_rating(self.rating)

    @property
    def formatted_review_count(self) -> str:
        return format_review_count(self.review_count)

    @property
    def all_cities(self) -> list[str]:
        """Distinct community cities, sorted."""
        return sorted({community.city for community in self.communities})

    @property
    def available_home_types(self) -> list[HomeType]:
        """Union of every community's home types, sorted by display name."""
        types = {home_type for community in self.communities for home_type in community.home_types}
        return sorted(types, key=lambda home_type: home_type.display_name)

    @property
    def active_communities(self) -> int:
        return sum(1 for community in self.communities if community.status == CommunityStatus.ACTIVE)
