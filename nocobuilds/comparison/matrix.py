"""Side-by-side comparison table.

``build_comparison_matrix`` maps an ordered list of builders to five
fixed sections of labelled rows. Each row carries one value per builder,
in input order, so columns line up with headers built from the same list.
Contact rows only report whether a channel is available, never the value.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Sequence

from nocobuilds.models.builder import Builder

NOT_AVAILABLE = "N/A"
CONTACT_BUILDER = "Contact builder"
AVAILABLE = "Available"


class ComparisonCategory(str, Enum):
    BASIC_INFO = "Basic Information"
    PRICING = "Pricing"
    COMMUNITIES = "Communities"
    FEATURES = "Key Features"
    CONTACT = "Contact Information"

    @property
    def label(self) -> str:
        return self.value


@dataclass(frozen=True)
class ComparisonRow:
    label: str
    values: tuple[str, ...]


@dataclass(frozen=True)
class ComparisonSection:
    category: ComparisonCategory
    rows: tuple[ComparisonRow, ...]

    @property
    def label(self) -> str:
        return self.category.label


def _row(label: str, builders: Sequence[Builder], value: Callable[[Builder], str]) -> ComparisonRow:
    return ComparisonRow(label=label, values=tuple(value(builder) for builder in builders))


def _availability(present: bool) -> str:
    return AVAILABLE if present else NOT_AVAILABLE


def _basic_info_rows(builders: Sequence[Builder]) -> list[ComparisonRow]:
    return [
        _row("Builder Type", builders, lambda b: b.category.display_name),
        _row("Rating", builders, lambda b: b.formatted_rating),
        _row("Reviews", builders, lambda b: b.formatted_review_count),
        _row("Established", builders, lambda b: b.established or NOT_AVAILABLE),
    ]


def _pricing_rows(builders: Sequence[Builder]) -> list[ComparisonRow]:
    return [
        _row("Price Range", builders, lambda b: b.price_range.formatted_range),
        _row(
            "Square Footage",
            builders,
            lambda b: b.square_footage_range.formatted_range if b.square_footage_range else CONTACT_BUILDER,
        ),
    ]


def _community_rows(builders: Sequence[Builder]) -> list[ComparisonRow]:
    return [
        _row("Total Communities", builders, lambda b: str(len(b.communities))),
        _row("Active Communities", builders, lambda b: str(b.active_communities)),
        _row("Primary Location", builders, lambda b: b.location),
    ]


def _feature_rows(builders: Sequence[Builder]) -> list[ComparisonRow]:
    return [
        _row("Key Specialties", builders, lambda b: ", ".join(b.specialties[:3])),
        _row("Build on Your Lot", builders, lambda b: "Yes" if b.build_on_your_lot is True else "No"),
        _row("Warranty", builders, lambda b: b.warranty or CONTACT_BUILDER),
    ]


def _contact_rows(builders: Sequence[Builder]) -> list[ComparisonRow]:
    return [
        _row("Website", builders, lambda b: _availability(b.has_website)),
        _row("Phone", builders, lambda b: _availability(b.has_phone)),
        _row("Email", builders, lambda b: _availability(b.has_email)),
    ]


ROW_BUILDERS: dict[ComparisonCategory, Callable[[Sequence[Builder]], list[ComparisonRow]]] = {
    ComparisonCategory.BASIC_INFO: _basic_info_rows,
    ComparisonCategory.PRICING: _pricing_rows,
    ComparisonCategory.COMMUNITIES: _community_rows,
    ComparisonCategory.FEATURES: _feature_rows,
    ComparisonCategory.CONTACT: _contact_rows,
}


def comparison_rows(category: ComparisonCategory, builders: Sequence[Builder]) -> list[ComparisonRow]:
    return ROW_BUILDERS[category](builders)


def build_comparison_matrix(builders: Sequence[Builder]) -> list[ComparisonSection]:
    """Build every comparison section, in category order, for ``builders``."""
    return [
        ComparisonSection(category=category, rows=tuple(comparison_rows(category, builders)))
        for category in ComparisonCategory
    ]
