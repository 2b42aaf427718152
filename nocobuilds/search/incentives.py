"""Incentive search and filtering.

Expiration checks use the ``today`` passed by the caller.
"""

from __future__ import annotations

from datetime import date
from typing import Sequence

from nocobuilds.logging import get_logger
from nocobuilds.models.criteria import IncentiveFilterCriteria
from nocobuilds.models.incentive import Incentive

logger = get_logger(__name__)


def matches_search_text(incentive: Incentive, search_text: str) -> bool:
    """Case-insensitive substring match over title, description, provider,
    category and location. Empty text matches."""
    if not search_text:
        return True

    needle = search_text.lower()
    return any(
        needle in field.lower()
        for field in (
            incentive.title,
            incentive.description,
            incentive.provider,
            incentive.category,
            incentive.location,
        )
    )


def matches_filters(incentive: Incentive, criteria: IncentiveFilterCriteria, today: date) -> bool:
    if criteria.selected_types and incentive.incentive_type not in criteria.selected_types:
        return False

    if criteria.selected_providers and incentive.provider not in criteria.selected_providers:
        return False

    if criteria.selected_categories and incentive.category not in criteria.selected_categories:
        return False

    if criteria.selected_locations and incentive.location not in criteria.selected_locations:
        return False

    if incentive.amount < criteria.minimum_amount:
        return False

    if criteria.expiring_soon_only and not incentive.is_expiring_soon(today, criteria.expiring_soon_days):
        return False

    if criteria.hide_expired and incentive.is_expired(today):
        return False

    return True


def apply_incentive_filters(
    incentives: Sequence[Incentive],
    criteria: IncentiveFilterCriteria,
    today: date,
) -> list[Incentive]:
    """Return incentives matching ``criteria`` as of ``today``, in input order."""
    matched = [
        incentive
        for incentive in incentives
        if matches_search_text(incentive, criteria.search_text)
        and matches_filters(incentive, criteria, today)
    ]
    logger.debug(
        "Incentive filter matched %d of %d (today=%s)",
        len(matched),
        len(incentives),
        today,
        extra={"matched": len(matched), "total": len(incentives), "today": today.isoformat()},
    )
    return matched
