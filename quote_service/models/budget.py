"""
예산 비교(BudgetComparison) 모델입니다.
고객이 선택한 예산 구간과 실제 평가 결과의 가격을 비교한 분석 결과입니다.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class AlignmentStatus(str, Enum):
    """예산 적합도 판정."""

    ALIGNED = "aligned"
    UNDER_BUDGET = "under-budget"
    OVER_BUDGET = "over-budget"
    SIGNIFICANTLY_OVER = "significantly-over"


class ActionType(str, Enum):
    INCREASE_BUDGET = "increase-budget"
    REDUCE_SCOPE = "reduce-scope"
    PHASE_PROJECT = "phase-project"
    OPTIMIZE_FEATURES = "optimize-features"


class ActionPriority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class BudgetRangeInfo(BaseModel):
    """선택된 예산 구간. max 가 None 이면 상한 없음('discuss')."""
    selected: str
    min: int
    max: Optional[int] = None
    average: float


class AssessmentNeeds(BaseModel):
    estimated_min: int
    estimated_max: int
    average: float
    calculated_total: int


class Alignment(BaseModel):
    status: AlignmentStatus
    percentage_difference: int
    message: str
    recommendation: str


class FeatureAlternative(BaseModel):
    """비싼 기능을 대체할 수 있는 저비용 대안."""
    feature: str
    alternative: str
    cost_savings: int


class FeatureComparison(BaseModel):
    included_in_budget: list[str] = Field(default_factory=list)
    missing_from_budget: list[str] = Field(default_factory=list)
    recommended_features: list[str] = Field(default_factory=list)
    budget_friendly_alternatives: list[FeatureAlternative] = Field(default_factory=list)


class CostAllocation(BaseModel):
    """비용 항목별 배분."""
    base_price: int = 0
    features: int = 0
    platform: int = 0
    design: int = 0
    integrations: int = 0
    complexity: int = 0
    timeline: int = 0


class CostBreakdownComparison(BaseModel):
    budget_allocation: CostAllocation
    assessment_allocation: CostAllocation
    differences: CostAllocation


class ValueSnapshot(BaseModel):
    features_per_dollar: float = Field(..., description="1,000달러당 기능 수")
    quality_level: str
    scope_level: str


class ValueAnalysis(BaseModel):
    budget_value: ValueSnapshot
    assessment_value: ValueSnapshot
    recommendations: list[str] = Field(default_factory=list)


class ActionItem(BaseModel):
    type: ActionType
    priority: ActionPriority
    title: str
    description: str
    impact: str


class BudgetComparison(BaseModel):
    """예산 대비 평가 결과 비교 보고서."""

    budget_range: BudgetRangeInfo
    assessment_needs: AssessmentNeeds
    alignment: Alignment
    feature_comparison: FeatureComparison
    cost_breakdown: CostBreakdownComparison
    value_analysis: ValueAnalysis
    action_items: list[ActionItem] = Field(default_factory=list)
