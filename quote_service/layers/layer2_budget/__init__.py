"""Layer 2: Budget - 예산 구간 대비 견적 비교."""

from .budget_comparator import (
    BudgetComparator,
    get_budget_comparator,
    compare_budget_vs_assessment,
    classify_alignment,
)
from .tables import BudgetBounds, BUDGET_RANGES, get_budget_range

__all__ = [
    "BudgetComparator",
    "get_budget_comparator",
    "compare_budget_vs_assessment",
    "classify_alignment",
    "BudgetBounds",
    "BUDGET_RANGES",
    "get_budget_range",
]
