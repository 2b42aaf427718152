"""Builder search, filtering and sorting.

All functions are pure: they never mutate the input collection and
return new lists. Dimensions combine with AND; values selected within
one dimension combine with OR against the builder's own attribute.
A builder missing the field a filter depends on fails that filter;
when the filter is inactive the missing field is irrelevant.
"""

from __future__ import annotations

from typing import Callable, Iterable, Sequence

from nocobuilds.logging import get_logger
from nocobuilds.models.builder import Builder
from nocobuilds.models.criteria import FilterCriteria
from nocobuilds.models.enums import SortOption

logger = get_logger(__name__)


def _contains(haystack: str | None, needle: str) -> bool:
    return haystack is not None and needle in haystack.lower()


def matches_search_text(builder: Builder, search_text: str) -> bool:
    """Case-insensitive substring match over name, description, location,
    specialties and each community's name and city. Empty text matches."""
    if not search_text:
        return True

    needle = search_text.lower()
    return (
        _contains(builder.name, needle)
        or _contains(builder.description, needle)
        or _contains(builder.location, needle)
        or any(_contains(specialty, needle) for specialty in builder.specialties)
        or any(
            _contains(community.name, needle) or _contains(community.city, needle)
            for community in builder.communities
        )
    )


def matches_price_range(builder: Builder, low: int, high: int) -> bool:
    """Interval overlap, boundaries inclusive."""
    return builder.price_range.overlaps(low, high)


def matches_filters(builder: Builder, criteria: FilterCriteria) -> bool:
    """Structured filters only; search text is checked by ``matches_search_text``."""
    if criteria.selected_cities:
        if not criteria.selected_cities.intersection(builder.all_cities):
            return False

    if criteria.price_range is not None:
        low, high = criteria.price_range
        if not matches_price_range(builder, low, high):
            return False

    if criteria.selected_price_ranges:
        price = builder.price_range
        if not any(bucket.overlaps(price.min, price.max) for bucket in criteria.selected_price_ranges):
            return False

    if criteria.selected_categories and builder.category not in criteria.selected_categories:
        return False

    if criteria.selected_builder_types:
        if not criteria.selected_builder_types.intersection(builder.builder_types):
            return False

    if criteria.selected_home_types:
        if not criteria.selected_home_types.intersection(builder.available_home_types):
            return False

    # A builder that does not state build-on-your-lot fails either choice
    if criteria.build_on_your_lot is not None:
        if builder.build_on_your_lot != criteria.build_on_your_lot:
            return False

    if builder.rating < criteria.minimum_rating:
        return False

    return True


def _name_key(builder: Builder) -> str:
    return builder.name


def _price_key(builder: Builder) -> int:
    return builder.price_range.min


def _community_count_key(builder: Builder) -> int:
    # Most communities first
    return -len(builder.communities)


_SORT_KEYS: dict[SortOption, Callable[[Builder], object]] = {
    SortOption.NAME: _name_key,
    SortOption.PRICE_ASCENDING: _price_key,
    SortOption.COMMUNITY_COUNT: _community_count_key,
}


def sort_builders(builders: Iterable[Builder], sort: SortOption | None) -> list[Builder]:
    """Stable sort; ties keep their input order. ``None`` keeps input order.

    Names compare by plain code point order (case-sensitive, locale
    independent).
    """
    if sort is None:
        return list(builders)
    return sorted(builders, key=_SORT_KEYS[sort])


def apply_builder_filters(builders: Sequence[Builder], criteria: FilterCriteria) -> list[Builder]:
    """Filter and sort ``builders`` according to ``criteria``.

    Parameters
    ----------
    builders : Sequence[Builder]
        Full catalogue, left untouched.
    criteria : FilterCriteria
        Search text, structured filters and sort key.

    Returns
    -------
    list[Builder]
        Matching builders in sort order.
    """
    matched = [
        builder
        for builder in builders
        if matches_search_text(builder, criteria.search_text) and matches_filters(builder, criteria)
    ]
    logger.debug(
        "Builder filter matched %d of %d",
        len(matched),
        len(builders),
        extra={"matched": len(matched), "total": len(builders)},
    )
    return sort_builders(matched, criteria.sort)
