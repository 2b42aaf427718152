"""Builder comparison selection and table."""

from nocobuilds.comparison.manager import MAX_COMPARED_BUILDERS, ComparisonSet
from nocobuilds.comparison.matrix import (
    ComparisonCategory,
    ComparisonRow,
    ComparisonSection,
    build_comparison_matrix,
)

__all__ = [
    "MAX_COMPARED_BUILDERS",
    "ComparisonCategory",
    "ComparisonRow",
    "ComparisonSection",
    "ComparisonSet",
    "build_comparison_matrix",
]
