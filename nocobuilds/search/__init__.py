"""Search, filter and sort over in-memory builder and incentive collections."""

from nocobuilds.search.builders import apply_builder_filters, sort_builders
from nocobuilds.search.incentives import apply_incentive_filters

__all__ = ["apply_builder_filters", "apply_incentive_filters", "sort_builders"]
