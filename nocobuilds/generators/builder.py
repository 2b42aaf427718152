"""Builder and community generators for the sample catalogue."""

from __future__ import annotations

from typing import Iterator

from nocobuilds.generators.base import BaseGenerator
from nocobuilds.models import (
    Builder,
    BuilderCategory,
    BuilderType,
    Community,
    CommunityStatus,
    Coordinates,
    HomeType,
    PriceRange,
    SquareFootageRange,
)

# Northern Colorado towns served by the directory
CITIES = [
    "Fort Collins",
    "Loveland",
    "Windsor",
    "Johnstown",
    "Severance",
    "Wellington",
    "Timnath",
    "Berthoud",
    "Mead",
    "Greeley",
]

# Rough town centres; generated communities are scattered around them
CITY_CENTRES: dict[str, tuple[float, float]] = {
    "Fort Collins": (40.5853, -105.0844),
    "Loveland": (40.3978, -105.0750),
    "Windsor": (40.4775, -104.9014),
    "Johnstown": (40.3369, -104.9122),
    "Severance": (40.5244, -104.8511),
    "Wellington": (40.7036, -105.0086),
    "Timnath": (40.5291, -104.9853),
    "Berthoud": (40.3083, -105.0811),
    "Mead": (40.2333, -104.9986),
    "Greeley": (40.4233, -104.7091),
}

SPECIALTIES = [
    "Energy Efficient",
    "Affordable Quality",
    "Flexible Financing",
    "Modern Amenities",
    "First-Time Buyers",
    "Luxury Finishes",
    "Custom Floor Plans",
    "Mountain Views",
    "Smart Home Technology",
    "Low Maintenance Living",
    "Main-Floor Living",
]

AMENITIES = ["Community Pool", "Playground", "Walking Trails", "Clubhouse", "Dog Park", "Open Space"]

CATEGORY_WEIGHTS = {
    BuilderCategory.NATIONAL: 0.40,
    BuilderCategory.REGIONAL: 0.35,
    BuilderCategory.LOCAL_CUSTOM: 0.25,
}

# Price floor ranges (USD) by category
PRICE_FLOORS = {
    BuilderCategory.NATIONAL: (300_000, 500_000),
    BuilderCategory.REGIONAL: (380_000, 650_000),
    BuilderCategory.LOCAL_CUSTOM: (550_000, 1_100_000),
}

STATUS_WEIGHTS = {
    CommunityStatus.ACTIVE: 0.55,
    CommunityStatus.COMING_SOON: 0.15,
    CommunityStatus.FINAL_PHASE: 0.12,
    CommunityStatus.SOLD_OUT: 0.08,
    CommunityStatus.PRE_SALES: 0.10,
}


class CommunityGenerator(BaseGenerator):
    """Generate synthetic communities."""

    def generate(self, price_range: PriceRange | None = None) -> Community:
        """Generate a single community.

        Parameters
        ----------
        price_range : PriceRange | None
            Owning builder's range; the community's range is drawn inside it.

        Returns
        -------
        Community
            Generated community.
        """
        city = self.random.choice(CITIES)
        lat, lng = CITY_CENTRES[city]
        status = self.random.choices(list(STATUS_WEIGHTS), weights=list(STATUS_WEIGHTS.values()), k=1)[0]
        home_types = self.random.sample(list(HomeType), k=self.random.randint(1, 3))

        community_price = None
        if price_range is not None:
            low = self.random.randint(price_range.min, price_range.max)
            high = self.random.randint(low, price_range.max)
            community_price = PriceRange(min=low, max=high)

        sq_ft_min = self.random.randrange(1000, 2400, 100)
        return Community(
            community_id=self.fake.uuid4(),
            name=f"{self.fake.last_name()} {self.random.choice(['Ranch', 'Crossing', 'Meadows', 'Ridge', 'Farm'])}",
            city=city,
            status=status,
            home_types=tuple(home_types),
            price_range=community_price,
            square_footage_range=SquareFootageRange(min=sq_ft_min, max=sq_ft_min + self.random.randrange(400, 2000, 100)),
            coordinates=Coordinates(
                lat=round(lat + self.random.uniform(-0.03, 0.03), 4),
                lng=round(lng + self.random.uniform(-0.03, 0.03), 4),
            ),
            amenities=tuple(self.random.sample(AMENITIES, k=self.random.randint(0, 3))),
            launch_date=str(self.random.randint(2019, 2026)),
        )


class BuilderGenerator(BaseGenerator):
    """Generate synthetic builders with 0-4 communities each."""

    def __init__(self, seed: int | None = None, locale: str = "en_US") -> None:
        super().__init__(seed, locale)
        community_seed = seed + 1 if seed is not None else None
        self._communities = CommunityGenerator(seed=community_seed, locale=locale)

    def generate(self) -> Builder:
        """Generate a single builder.

        Returns
        -------
        Builder
            Generated builder.
        """
        return self._generate_one()

    def generate_batch(self, count: int) -> Iterator[Builder]:
        """Generate multiple builders.

        Parameters
        ----------
        count : int
            Number of builders to generate.

        Yields
        ------
        Builder
            Generated builders.
        """
        for _ in range(count):
            yield self._generate_one()

    def _generate_one(self) -> Builder:
        category = self.random.choices(
            list(CATEGORY_WEIGHTS), weights=list(CATEGORY_WEIGHTS.values()), k=1
        )[0]
        floor_low, floor_high = PRICE_FLOORS[category]
        price_min = self.random.randrange(floor_low, floor_high, 10_000)
        price_range = PriceRange(min=price_min, max=price_min + self.random.randrange(100_000, 600_000, 10_000))

        if category == BuilderCategory.LOCAL_CUSTOM:
            builder_types = [BuilderType.CUSTOM, BuilderType.LUXURY]
        else:
            builder_types = self.random.sample(
                [BuilderType.PRODUCTION, BuilderType.SEMI_CUSTOM, BuilderType.TOWNHOMES],
                k=self.random.randint(1, 2),
            )

        communities = tuple(self._communities.generate(price_range) for _ in range(self.random.randint(0, 4)))
        name = self.fake.company()
        domain = self.fake.domain_name()

        return Builder(
            builder_id=self.fake.uuid4(),
            name=name,
            description=self.fake.catch_phrase(),
            location=communities[0].city if communities else self.random.choice(CITIES),
            category=category,
            builder_types=tuple(builder_types),
            price_range=price_range,
            rating=round(self.random.uniform(3.0, 5.0), 1),
            review_count=self.random.randint(0, 2500),
            specialties=tuple(self.random.sample(SPECIALTIES, k=self.random.randint(1, 4))),
            communities=communities,
            website=f"https://{domain}" if self.random.random() < 0.9 else None,
            phone=self.fake.numerify("(970) 555-####") if self.random.random() < 0.8 else None,
            email=f"info@{domain}" if self.random.random() < 0.6 else None,
            warranty=self.random.choice(["10-year structural warranty", "2-10 Home Buyers Warranty", None]),
            established=str(self.random.randint(1950, 2020)) if self.random.random() < 0.8 else None,
            build_on_your_lot=self.random.choice([True, False, None]),
        )
