"""Incentive model.

Expiration helpers take the current date as an argument instead of
reading the system clock, so callers decide what "today" means.
"""

from dataclasses import dataclass
from datetime import date

from nocobuilds.exceptions import InvalidEntityError
from nocobuilds.formatting import compact_currency
from nocobuilds.models.enums import IncentiveType

EXPIRING_SOON_DAYS = 30


@dataclass(frozen=True)
class Incentive:
    """Promotional offer (rebate, tax credit, discount or financing) from a provider."""

    incentive_id: str
    title: str
    description: str
    incentive_type: IncentiveType
    amount: int  # whole dollars, 0 when the offer is not dollar-denominated
    provider: str
    category: str
    location: str
    percentage: float | None = None
    eligibility: tuple[str, ...] = ()
    expiration_date: date | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.eligibility, tuple):
            object.__setattr__(self, "eligibility", tuple(self.eligibility))
        if self.amount < 0:
            raise InvalidEntityError(f"Incentive {self.incentive_id} has negative amount")

    @property
    def has_expiration_date(self) -> bool:
        return self.expiration_date is not None

    def days_until_expiration(self, today: date) -> int | None:
        """Whole days from ``today`` to the expiration date (negative once past)."""
        if self.expiration_date is None:
            return None
        return (self.expiration_date - today).days

    def is_expired(self, today: date) -> bool:
        if self.expiration_date is None:
            return False
        return self.expiration_date < today

    def is_expiring_soon(self, today: date, window_days: int = EXPIRING_SOON_DAYS) -> bool:
        """True when the offer ends within ``window_days`` of ``today``, today included."""
        days = self.days_until_expiration(today)
        if days is None:
            return False
        return 0 <= days <= window_days

    @property
    def formatted_amount(self) -> str:
        if self.amount > 0:
            return compact_currency(self.amount)
        if self.percentage is not None:
            return f"{self.percentage:.1f}%"
        return "Special Offer"

    @property
    def formatted_expiration_date(self) -> str:
        if self.expiration_date is None:
            return ""
        expires = self.expiration_date
        return f"Expires {expires:%b} {expires.day}, {expires.year}"
