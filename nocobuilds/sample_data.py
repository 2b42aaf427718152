"""Fixed development catalogue used by previews and tests."""

from datetime import date

from nocobuilds.models import (
    Builder,
    BuilderCategory,
    BuilderType,
    Community,
    CommunityStatus,
    Coordinates,
    CorporateInfo,
    HomeType,
    Incentive,
    IncentiveType,
    PriceRange,
    SquareFootageRange,
)

SAMPLE_BUILDER = Builder(
    builder_id="1",
    name="D.R. Horton",
    description=(
        "America's largest homebuilder offering affordable quality homes with modern "
        "amenities and flexible financing options."
    ),
    location="Johnstown",
    category=BuilderCategory.NATIONAL,
    builder_types=(BuilderType.PRODUCTION,),
    price_range=PriceRange(min=320_000, max=480_000),
    rating=4.2,
    review_count=203,
    specialties=("Affordable Quality", "Flexible Financing", "Modern Amenities", "First-Time Buyers"),
    image_url="/images/dr-horton.jpg",
    logo_url="/logos/dr-horton-logo.svg",
    website="https://drhorton.com",
    phone="(970) 555-0123",
    email="info@drhorton.com",
    communities=(
        Community(
            community_id="revere-johnstown",
            name="Revere at Johnstown",
            city="Johnstown",
            status=CommunityStatus.ACTIVE,
            home_types=(HomeType.SINGLE_FAMILY, HomeType.PAIRED_HOMES),
            price_range=PriceRange(min=320_000, max=480_000),
            square_footage_range=SquareFootageRange(min=1200, max=2800),
            url="https://www.drhorton.com/colorado/denver/johnstown/revere-at-johnstown",
            description="Master-planned community with modern amenities and flexible floor plans",
            collections=("Express", "Freedom", "Emerald"),
            launch_date="2024",
            amenities=("Community Pool", "Playground", "Walking Trails"),
            lot_sizes="0.1 - 0.25 acres",
            nearby_attractions=("St. Vrain State Park", "Johnstown Town Center"),
            coordinates=Coordinates(lat=40.3308, lng=-104.9108),
        ),
    ),
    warranty="10-year structural warranty",
    square_footage_range=SquareFootageRange(min=1200, max=3500),
    established="1978",
    building_styles=("Contemporary", "Traditional", "Ranch"),
    current_incentives="Special Interest Rate promo - 3.875% 7/6 ARM",
    build_on_your_lot=False,
    yearly_homes=1200,
    serves_counties=("Weld", "Larimer", "Boulder"),
    corporate_info=CorporateInfo(
        headquarters="Arlington, TX",
        founded="1978",
        public_company=True,
        stock_ticker="DHI",
    ),
)

SAMPLE_BUILDERS = [SAMPLE_BUILDER]

SAMPLE_INCENTIVES = [
    Incentive(
        incentive_id="dr-horton-1",
        title="Special Interest Rate Promotion",
        description=(
            "Special Interest Rate promos in Colorado; recent example shows 3.875% 7/6 ARM on "
            "select homes when using DHI Mortgage (contract/cutoff windows apply)."
        ),
        incentive_type=IncentiveType.FINANCING,
        amount=0,
        percentage=3.875,
        eligibility=("DHI Mortgage", "Select Homes", "Contract Windows Apply"),
        expiration_date=date(2025, 12, 31),
        provider="D.R. Horton",
        category="Special Financing",
        location="Multiple NoCo Communities (Johnstown, Severance, Wellington, Mead, Fort Lupton)",
    ),
    Incentive(
        incentive_id="lennar-1",
        title="Closing Cost Credit",
        description=(
            "Up to $5,000 toward closing costs on select quick-move-ins when financing with "
            "Lennar Mortgage (limited time)."
        ),
        incentive_type=IncentiveType.REBATE,
        amount=5000,
        eligibility=("Quick Move-In Homes", "Lennar Mortgage"),
        expiration_date=date(2025, 12, 31),
        provider="Lennar",
        category="Closing Cost Assistance",
        location="Loveland (Riano Ridge), Johnstown (Ledge Rock)",
    ),
    Incentive(
        incentive_id="richmond-1",
        title="Northern Colorado Special Financing",
        description=(
            "Northern Colorado special financing offers running with specific 8/18-8/24/2025 "
            "contract dates; also current ARM promo pages."
        ),
        incentive_type=IncentiveType.FINANCING,
        amount=0,
        eligibility=("HomeAmerican Mortgage", "Funds Limited", "First-Come First-Served"),
        expiration_date=date(2025, 8, 24),
        provider="Richmond American",
        category="Special Financing",
        location="Multiple Northern Colorado Communities",
    ),
]
