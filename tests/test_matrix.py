"""Tests for the comparison matrix."""

from nocobuilds.comparison.matrix import (
    ROW_BUILDERS,
    ComparisonCategory,
    build_comparison_matrix,
    comparison_rows,
)
from nocobuilds.models import BuilderCategory, CommunityStatus, PriceRange, SquareFootageRange
from nocobuilds.sample_data import SAMPLE_BUILDER


def _row(sections, category: ComparisonCategory, label: str):
    section = next(s for s in sections if s.category == category)
    return next(r for r in section.rows if r.label == label)


class TestMatrixShape:
    """Tests for section order and row width."""

    def test_five_sections_in_fixed_order(self, make_builder) -> None:
        sections = build_comparison_matrix([make_builder(builder_id="a"), make_builder(builder_id="b")])
        assert [s.label for s in sections] == [
            "Basic Information",
            "Pricing",
            "Communities",
            "Key Features",
            "Contact Information",
        ]

    def test_row_labels(self, make_builder) -> None:
        sections = build_comparison_matrix([make_builder()])
        labels = {s.label: [r.label for r in s.rows] for s in sections}
        assert labels == {
            "Basic Information": ["Builder Type", "Rating", "Reviews", "Established"],
            "Pricing": ["Price Range", "Square Footage"],
            "Communities": ["Total Communities", "Active Communities", "Primary Location"],
            "Key Features": ["Key Specialties", "Build on Your Lot", "Warranty"],
            "Contact Information": ["Website", "Phone", "Email"],
        }

    def test_values_follow_input_order(self, make_builder) -> None:
        a = make_builder(builder_id="a", location="Windsor")
        b = make_builder(builder_id="b", location="Berthoud")

        sections = build_comparison_matrix([a, b])

        for section in sections:
            for row in section.rows:
                assert len(row.values) == 2
        assert _row(sections, ComparisonCategory.COMMUNITIES, "Primary Location").values == ("Windsor", "Berthoud")

    def test_empty_selection(self) -> None:
        sections = build_comparison_matrix([])
        assert len(sections) == 5
        assert all(row.values == () for s in sections for row in s.rows)

    def test_every_category_has_rows(self) -> None:
        assert set(ROW_BUILDERS) == set(ComparisonCategory)


class TestMatrixValues:
    """Tests for formatted cell values."""

    def test_sample_builder(self) -> None:
        sections = build_comparison_matrix([SAMPLE_BUILDER])

        def value(category, label):
            return _row(sections, category, label).values[0]

        assert value(ComparisonCategory.BASIC_INFO, "Builder Type") == "National"
        assert value(ComparisonCategory.BASIC_INFO, "Rating") == "4.2"
        assert value(ComparisonCategory.BASIC_INFO, "Reviews") == "203 reviews"
        assert value(ComparisonCategory.BASIC_INFO, "Established") == "1978"
        assert value(ComparisonCategory.PRICING, "Price Range") == "$320K - $480K"
        assert value(ComparisonCategory.PRICING, "Square Footage") == "1,200 - 3,500 sq ft"
        assert value(ComparisonCategory.COMMUNITIES, "Total Communities") == "1"
        assert value(ComparisonCategory.COMMUNITIES, "Active Communities") == "1"
        assert value(ComparisonCategory.COMMUNITIES, "Primary Location") == "Johnstown"
        assert value(ComparisonCategory.FEATURES, "Key Specialties") == (
            "Affordable Quality, Flexible Financing, Modern Amenities"
        )
        assert value(ComparisonCategory.FEATURES, "Build on Your Lot") == "No"
        assert value(ComparisonCategory.FEATURES, "Warranty") == "10-year structural warranty"
        assert value(ComparisonCategory.CONTACT, "Website") == "Available"
        assert value(ComparisonCategory.CONTACT, "Phone") == "Available"
        assert value(ComparisonCategory.CONTACT, "Email") == "Available"

    def test_fallbacks_for_missing_fields(self, make_builder) -> None:
        builder = make_builder(
            established=None,
            square_footage_range=None,
            warranty=None,
            build_on_your_lot=None,
            website=None,
            phone=None,
            email=None,
        )
        sections = build_comparison_matrix([builder])

        assert _row(sections, ComparisonCategory.BASIC_INFO, "Established").values == ("N/A",)
        assert _row(sections, ComparisonCategory.PRICING, "Square Footage").values == ("Contact builder",)
        assert _row(sections, ComparisonCategory.FEATURES, "Warranty").values == ("Contact builder",)
        assert _row(sections, ComparisonCategory.FEATURES, "Build on Your Lot").values == ("No",)
        assert _row(sections, ComparisonCategory.FEATURES, "Key Specialties").values == ("",)
        for label in ("Website", "Phone", "Email"):
            assert _row(sections, ComparisonCategory.CONTACT, label).values == ("N/A",)

    def test_contact_values_never_exposed(self, make_builder) -> None:
        builder = make_builder(website="https://example.com", phone="(970) 555-0100", email="a@example.com")
        rows = comparison_rows(ComparisonCategory.CONTACT, [builder])
        assert [r.values for r in rows] == [("Available",), ("Available",), ("Available",)]

    def test_large_review_count_and_prices(self, make_builder, make_community) -> None:
        builder = make_builder(
            category=BuilderCategory.LOCAL_CUSTOM,
            review_count=2500,
            price_range=PriceRange(min=900_000, max=1_200_000),
            square_footage_range=SquareFootageRange(min=2800, max=6500),
            build_on_your_lot=True,
            communities=(
                make_community(community_id="c1"),
                make_community(community_id="c2", status=CommunityStatus.SOLD_OUT),
            ),
        )
        sections = build_comparison_matrix([builder])

        assert _row(sections, ComparisonCategory.BASIC_INFO, "Builder Type").values == ("Local Custom",)
        assert _row(sections, ComparisonCategory.BASIC_INFO, "Reviews").values == ("2k+ reviews",)
        assert _row(sections, ComparisonCategory.PRICING, "Price Range").values == ("$900K - $1.2M",)
        assert _row(sections, ComparisonCategory.COMMUNITIES, "Total Communities").values == ("2",)
        assert _row(sections, ComparisonCategory.COMMUNITIES, "Active Communities").values == ("1",)
        assert _row(sections, ComparisonCategory.FEATURES, "Build on Your Lot").values == ("Yes",)
