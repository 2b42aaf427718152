"""Value records shared by builders and communities."""

from dataclasses import dataclass

from nocobuilds.exceptions import InvalidEntityError
from nocobuilds.formatting import compact_currency, grouped_number


def _check_bounds(kind: str, low: int, high: int) -> None:
    if low < 0 or high < 0:
        raise InvalidEntityError(f"{kind} bounds must be non-negative, got {low}..{high}")
    if low > high:
        raise InvalidEntityError(f"{kind} min {low} exceeds max {high}")


@dataclass(frozen=True)
class PriceRange:
    """Inclusive price range in whole dollars."""

    min: int
    max: int

    def __post_init__(self) -> None:
        _check_bounds("Price range", self.min, self.max)

    def overlaps(self, low: int, high: int) -> bool:
        """True when [min, max] and [low, high] intersect, boundaries inclusive.

        An inverted query range (low > high) never overlaps.
        """
        if low > high:
            return False
        return self.min <= high and low <= self.max

    @property
    def formatted_range(self) -> str:
        return f"{compact_currency(self.min)} - {compact_currency(self.max)}"


@dataclass(frozen=True)
class SquareFootageRange:
    min: int
    max: int

    def __post_init__(self) -> None:
        _check_bounds("Square footage", self.min, self.max)

    @property
    def formatted_range(self) -> str:
        return f"{grouped_number(self.min)} - {grouped_number(self.max)} sq ft"


@dataclass(frozen=True)
class Coordinates:
    lat: float
    lng: float


@dataclass(frozen=True)
class CorporateInfo:
    """Parent-company details for national builders."""

    headquarters: str | None = None
    founded: str | None = None
    public_company: bool | None = None
    stock_ticker: str | None = None
