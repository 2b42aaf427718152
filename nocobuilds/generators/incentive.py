"""Incentive generator for the sample catalogue."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Iterator

from nocobuilds.generators.base import BaseGenerator
from nocobuilds.models import Incentive, IncentiveType

CATEGORIES = {
    IncentiveType.REBATE: "Closing Cost Assistance",
    IncentiveType.TAX_CREDIT: "Energy Tax Credit",
    IncentiveType.DISCOUNT: "Price Reduction",
    IncentiveType.FINANCING: "Special Financing",
}


class IncentiveGenerator(BaseGenerator):
    """Generate incentives whose expiration dates are spread around ``today``."""

    def generate(self, provider: str, today: date) -> Incentive:
        """Generate a single incentive.

        Parameters
        ----------
        provider : str
            Builder or program offering the incentive.
        today : date
            Reference date; expirations fall between 30 days before and
            180 days after it, or are absent.

        Returns
        -------
        Incentive
            Generated incentive.
        """
        incentive_type = self.random.choice(list(IncentiveType))
        amount = 0
        percentage = None
        if incentive_type == IncentiveType.FINANCING:
            percentage = round(self.random.uniform(2.99, 5.99), 3)
        else:
            amount = self.random.randrange(1_000, 25_000, 500)

        expiration = None
        if self.random.random() < 0.85:
            expiration = today + timedelta(days=self.random.randint(-30, 180))

        return Incentive(
            incentive_id=self.fake.uuid4(),
            title=f"{incentive_type.display_name} from {provider}",
            description=self.fake.sentence(nb_words=14),
            incentive_type=incentive_type,
            amount=amount,
            percentage=percentage,
            eligibility=tuple(self.fake.words(nb=self.random.randint(1, 3))),
            expiration_date=expiration,
            provider=provider,
            category=CATEGORIES[incentive_type],
            location=self.fake.city(),
        )

    def generate_batch(self, providers: list[str], count: int, today: date) -> Iterator[Incentive]:
        for _ in range(count):
            yield self.generate(self.random.choice(providers), today)
