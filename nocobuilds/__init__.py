"""Builder directory core: catalogue filtering, sorting and comparison."""

from nocobuilds.comparison import ComparisonSet, build_comparison_matrix
from nocobuilds.search import apply_builder_filters, apply_incentive_filters
from nocobuilds.store import CatalogueStore

__version__ = "0.1.0"

__all__ = [
    "CatalogueStore",
    "ComparisonSet",
    "apply_builder_filters",
    "apply_incentive_filters",
    "build_comparison_matrix",
]
