"""
예산 비교에 사용하는 정적 테이블입니다.
예산 구간 → 금액 범위, 그리고 비싼 기능의 저비용 대안 목록을 정의합니다.
"""

from types import MappingProxyType
from typing import NamedTuple, Optional


class BudgetBounds(NamedTuple):
    """
    예산 구간의 금액 범위 (달러).

    max 가 None 이면 상한이 없는 구간('discuss')입니다.
    상한이 없을 때는 비교 대상 금액의 2배를 상한으로 간주합니다.
    """
    min: int
    max: Optional[int]

    @property
    def is_bounded(self) -> bool:
        return self.max is not None

    def effective_max(self, total: float) -> float:
        return self.max if self.max is not None else total * 2

    def average(self, total: float) -> float:
        return (self.min + self.effective_max(total)) / 2


DEFAULT_BUDGET_TIER = "discuss"

BUDGET_RANGES = MappingProxyType({
    "under-5k": BudgetBounds(0, 5000),
    "1-2k": BudgetBounds(1000, 2000),
    "2-5k": BudgetBounds(2000, 5000),
    "5k-10k": BudgetBounds(5000, 10000),
    "10k-25k": BudgetBounds(10000, 25000),
    "25k-50k": BudgetBounds(25000, 50000),
    "50k-100k": BudgetBounds(50000, 100000),
    "100k+": BudgetBounds(100000, 500000),
    "discuss": BudgetBounds(0, None),
})

# 예산 상한 대비 이 비율까지는 '초과', 그 이상은 '크게 초과'
OVER_BUDGET_TOLERANCE = 1.2

# 예산 평균이 견적보다 이만큼 크면 추가 기능을 추천
UPSELL_SURPLUS_SMALL = 1000
UPSELL_SURPLUS_LARGE = 2000

UPSELL_FEATURES_LARGE = (
    "Advanced analytics dashboard",
    "Mobile app version",
    "API documentation",
)
UPSELL_FEATURES_SMALL = (
    "Enhanced security features",
    "Performance optimization",
)

# 비율 차이가 이 값(%)을 넘으면 예산 증액을 권장
INCREASE_BUDGET_THRESHOLD = 50

# 이 금액 미만의 예산이 초과되면 템플릿 기반 솔루션을 추천
TEMPLATE_SUGGESTION_BUDGET = 10000


class Alternative(NamedTuple):
    feature: str
    alternative: str
    cost_savings: int


CUSTOM_CMS_ALTERNATIVE = Alternative("Custom CMS", "Headless CMS (Contentful/Strapi)", 3000)
ENTERPRISE_SSO_ALTERNATIVE = Alternative("Enterprise SSO", "Social Login (Google/Facebook)", 2500)
NATIVE_APPS_ALTERNATIVE = Alternative("Native iOS + Android Apps", "Progressive Web App (PWA)", 15000)


def get_budget_range(budget_tier: Optional[str]) -> tuple[str, BudgetBounds]:
    """예산 구간 조회. 없거나 알 수 없는 구간은 'discuss' 로 대체합니다."""
    if budget_tier in BUDGET_RANGES:
        return budget_tier, BUDGET_RANGES[budget_tier]
    return DEFAULT_BUDGET_TIER, BUDGET_RANGES[DEFAULT_BUDGET_TIER]
