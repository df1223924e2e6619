"""Pricing calculator - converts assessment answers to an itemized price breakdown."""

import logging
from typing import Optional

from quote_service.models import (
    ProjectAssessment,
    PricingBreakdown,
    FeatureLine,
    ComplexityInfo,
    TimelineInfo,
    PlatformInfo,
    DesignInfo,
    IntegrationInfo,
    PriceRange,
    MarketComparison,
)
from quote_service.layers.base_stage import PipelineStage
from quote_service.utils import round_half_up

from .tables import (
    BASE_PRICE_RATIO,
    RANGE_LOW_RATIO,
    RANGE_HIGH_RATIO,
    DEFAULT_PROJECT_TYPE,
    MARKET_COMPARISON,
    PLATFORM_PRICES,
    AUTH_FEATURES,
    PAYMENT_FEATURE,
    REAL_TIME_FEATURE,
    CMS_FEATURES,
    API_FEATURES,
    INTEGRATION_UNIT_PRICE,
    DESIGN_PRICES,
    DEFAULT_DESIGN_PRICE,
    DEFAULT_DESIGN_LEVEL,
    DEFAULT_COMPLEXITY,
    COMPLEXITY_MULTIPLIERS,
    TIMELINE_MULTIPLIERS,
    RUSH_TIMELINES,
    MarketData,
    PricedTier,
)

logger = logging.getLogger(__name__)

PLATFORM_LABELS = {
    "ios": "iOS",
    "android": "Android",
    "desktop": "Desktop",
    "api-only": "API-only",
}

TIMELINE_LABELS = {
    "asap": "Rush delivery (ASAP)",
    "1-3-months": "Fast track (1-3 months)",
    "3-6-months": "Standard timeline (3-6 months)",
    "6-12-months": "Extended timeline (6-12 months)",
    "flexible": "Flexible timeline",
}


def market_data_for(project_type: Optional[str]) -> MarketData:
    """프로젝트 유형의 시장 가격대. 알 수 없는 유형은 'other' 로 대체."""
    return MARKET_COMPARISON.get(project_type or DEFAULT_PROJECT_TYPE, MARKET_COMPARISON[DEFAULT_PROJECT_TYPE])


def is_rush(preferred_timeline: Optional[str]) -> bool:
    return preferred_timeline in RUSH_TIMELINES


def project_cost(breakdown: PricingBreakdown) -> float:
    """
    견적서/예산 비교에서 쓰는 프로젝트 총비용 (반올림 전).

    (기본 가격 + 기능 + 플랫폼 + 디자인 + 연동) x 복잡도 배수 에,
    급행 일정일 때만 일정 배수를 곱합니다.
    디자인/연동 비용은 기능 목록에도 한 줄씩 들어 있으므로 견적 금액에는 두 번 반영됩니다.
    플랫폼 비용은 기능 목록에 없으므로 한 번만 더합니다.
    여유 일정 할인(0.9)은 예상 가격 범위에만 반영되고 견적 금액에는 반영되지 않습니다.
    """
    total = (
        breakdown.base_price
        + breakdown.feature_total
        + breakdown.platform.price
        + breakdown.design.price
        + breakdown.integrations.price
    )
    total *= breakdown.complexity.multiplier
    if breakdown.timeline.rush:
        total *= breakdown.timeline.multiplier
    return total


def _line(tier: PricedTier) -> FeatureLine:
    return FeatureLine(name=tier.label, price=tier.price, category=tier.category)


class PricingCalculator(PipelineStage[PricingBreakdown]):
    """평가 답변을 항목별 가격 명세로 변환하는 순수 계산기."""

    _stage_name = "PricingCalculator"

    def calculate_pricing(self, assessment: ProjectAssessment) -> PricingBreakdown:
        """
        평가 답변으로 가격 명세를 계산합니다.

        입력이 같으면 결과도 항상 같으며(시간/난수 의존 없음),
        누락된 선택 항목은 비용 0 또는 기본 구간으로 처리하므로 예외를 던지지 않습니다.

        Args:
            assessment: 고객의 평가 답변 (일부만 채워진 미리보기도 가능)

        Returns:
            PricingBreakdown: 항목별 가격과 예상 범위
        """
        return self.run(assessment)

    def _do_run(self, assessment: ProjectAssessment, **context) -> PricingBreakdown:
        # 1. 기본 가격: 시장 평균의 60%
        market = market_data_for(assessment.project_type)
        base_price = market.average * BASE_PRICE_RATIO

        # 2. 플랫폼 추가 비용
        platform = self._price_platforms(assessment.platform)

        # 3. 기능별 가격
        features: list[FeatureLine] = []
        features.extend(self._authentication_lines(assessment.user_authentication))
        if assessment.payment_processing:
            features.append(_line(PAYMENT_FEATURE))
        if assessment.real_time_features:
            features.append(_line(REAL_TIME_FEATURE))
        features.extend(self._cms_lines(assessment.content_management))
        features.extend(_line(tier) for tier in API_FEATURES.get(assessment.api_requirements, ()))

        integrations = self._price_integrations(assessment.integrations)
        if integrations.count:
            features.append(FeatureLine(
                name=f"{integrations.count} Third-party Integration(s)",
                price=integrations.price,
                category="Integrations",
            ))

        design = self._price_design(assessment.design_style)
        if design.price > 0:
            features.append(FeatureLine(
                name=f"{design.level.capitalize()} Design",
                price=design.price,
                category="Design",
            ))

        # 4. 배수 적용 전 합계
        pre_multiplier = base_price + platform.price + sum(f.price for f in features)

        # 5-6. 복잡도 / 일정 배수
        complexity = self._complexity(assessment.data_storage)
        timeline = self._timeline(assessment.preferred_timeline)

        # 7. 최종 가격 (반올림은 출력 단계에서만)
        final_price = pre_multiplier * complexity.multiplier * timeline.multiplier

        # 8. 예상 범위
        estimated_range = PriceRange(
            min=round_half_up(final_price * RANGE_LOW_RATIO),
            max=round_half_up(final_price * RANGE_HIGH_RATIO),
            average=round_half_up(final_price),
        )

        logger.debug(
            f"[{self._stage_name}] type={assessment.project_type} "
            f"pre={pre_multiplier:.2f} x{complexity.multiplier} x{timeline.multiplier} "
            f"= {final_price:.2f}"
        )

        # 9. 시장 비교 (표시용)
        return PricingBreakdown(
            base_price=round_half_up(base_price),
            features=features,
            complexity=complexity,
            timeline=timeline,
            platform=platform,
            design=design,
            integrations=integrations,
            subtotal=round_half_up(final_price),
            estimated_range=estimated_range,
            market_comparison=MarketComparison(
                low_end=market.low,
                high_end=market.high,
                average=market.average,
            ),
        )

    def _price_platforms(self, platforms: list[str]) -> PlatformInfo:
        """플랫폼별 추가 비용. 같은 플랫폼이 중복 선택되어도 한 번만 계산합니다."""
        selected = list(dict.fromkeys(platforms or []))
        items = []
        for name in selected:
            price = PLATFORM_PRICES.get(name, 0)
            if price:
                label = PLATFORM_LABELS.get(name, name.capitalize())
                items.append(FeatureLine(name=f"{label} Platform", price=price, category="Platform"))
        return PlatformInfo(
            platforms=selected,
            price=sum(item.price for item in items),
            items=items,
        )

    def _authentication_lines(self, auth_type: Optional[str]) -> list[FeatureLine]:
        tier = AUTH_FEATURES.get(auth_type)
        return [_line(tier)] if tier else []

    def _cms_lines(self, cms_type: Optional[str]) -> list[FeatureLine]:
        tier = CMS_FEATURES.get(cms_type)
        return [_line(tier)] if tier else []

    def _price_integrations(self, integrations: list[str]) -> IntegrationInfo:
        count = len(integrations or [])
        return IntegrationInfo(count=count, price=count * INTEGRATION_UNIT_PRICE)

    def _price_design(self, design_style: Optional[str]) -> DesignInfo:
        if not design_style:
            return DesignInfo(level=DEFAULT_DESIGN_LEVEL, price=0)
        return DesignInfo(
            level=design_style,
            price=DESIGN_PRICES.get(design_style, DEFAULT_DESIGN_PRICE),
        )

    def _complexity(self, data_storage: Optional[str]) -> ComplexityInfo:
        level = data_storage if data_storage in COMPLEXITY_MULTIPLIERS else DEFAULT_COMPLEXITY
        tier = COMPLEXITY_MULTIPLIERS[level]
        return ComplexityInfo(level=level, multiplier=tier.multiplier, description=tier.description)

    def _timeline(self, preferred_timeline: Optional[str]) -> TimelineInfo:
        if preferred_timeline not in TIMELINE_MULTIPLIERS:
            return TimelineInfo()
        return TimelineInfo(
            rush=is_rush(preferred_timeline),
            multiplier=TIMELINE_MULTIPLIERS[preferred_timeline],
            description=TIMELINE_LABELS[preferred_timeline],
        )


# 싱글톤 인스턴스 (상태가 없으므로 프로그램 전체에서 공유)
_pricing_calculator: Optional[PricingCalculator] = None


def get_pricing_calculator() -> PricingCalculator:
    """PricingCalculator 인스턴스를 반환합니다."""
    global _pricing_calculator
    if _pricing_calculator is None:
        _pricing_calculator = PricingCalculator()
    return _pricing_calculator


def calculate_pricing(assessment: ProjectAssessment) -> PricingBreakdown:
    """평가 답변 → 가격 명세 (공유 계산기 사용)."""
    return get_pricing_calculator().calculate_pricing(assessment)
