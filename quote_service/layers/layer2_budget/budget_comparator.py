"""
Budget comparator - 고객이 선택한 예산 구간과 평가 결과의 가격을 비교합니다.

가격 계산기의 결과를 바탕으로 적합도 판정, 예산 내 포함 가능한 기능,
비용 항목별 배분, 가치 분석, 권장 조치를 하나의 보고서로 만듭니다.
"""

import logging
import math
from typing import Optional

from quote_service.models import (
    ProjectAssessment,
    PricingBreakdown,
    BudgetComparison,
    BudgetRangeInfo,
    AssessmentNeeds,
    Alignment,
    AlignmentStatus,
    FeatureAlternative,
    FeatureComparison,
    CostAllocation,
    CostBreakdownComparison,
    ValueSnapshot,
    ValueAnalysis,
    ActionItem,
    ActionType,
    ActionPriority,
)
from quote_service.layers.base_stage import PipelineStage
from quote_service.layers.layer1_pricing import get_pricing_calculator, project_cost
from quote_service.utils import round_half_up

from .tables import (
    BudgetBounds,
    get_budget_range,
    OVER_BUDGET_TOLERANCE,
    UPSELL_SURPLUS_SMALL,
    UPSELL_SURPLUS_LARGE,
    UPSELL_FEATURES_LARGE,
    UPSELL_FEATURES_SMALL,
    INCREASE_BUDGET_THRESHOLD,
    TEMPLATE_SUGGESTION_BUDGET,
    CUSTOM_CMS_ALTERNATIVE,
    ENTERPRISE_SSO_ALTERNATIVE,
    NATIVE_APPS_ALTERNATIVE,
)

logger = logging.getLogger(__name__)

OVER_STATUSES = (AlignmentStatus.OVER_BUDGET, AlignmentStatus.SIGNIFICANTLY_OVER)


COST_BUCKETS = ("base_price", "features", "platform", "design", "integrations", "complexity", "timeline")


def _money(amount: float) -> str:
    return f"${amount:,.0f}"


def classify_alignment(bounds: BudgetBounds, total: int) -> AlignmentStatus:
    """
    예산 범위 대비 견적 금액의 적합도를 판정합니다.

    범위 안(양 끝 포함) → aligned, 최소 미만 → under-budget,
    상한의 1.2배 이하 → over-budget, 그 이상 → significantly-over.
    """
    effective_max = bounds.effective_max(total)
    if bounds.min <= total <= effective_max:
        return AlignmentStatus.ALIGNED
    if total < bounds.min:
        return AlignmentStatus.UNDER_BUDGET
    if total <= effective_max * OVER_BUDGET_TOLERANCE:
        return AlignmentStatus.OVER_BUDGET
    return AlignmentStatus.SIGNIFICANTLY_OVER


def quality_level(total: float, feature_count: int) -> str:
    cost_per_feature = total / max(1, feature_count)
    if cost_per_feature > 5000:
        return "Premium"
    if cost_per_feature > 2000:
        return "High"
    if cost_per_feature > 1000:
        return "Standard"
    return "Basic"


def scope_level(total: float) -> str:
    if total > 50000:
        return "Enterprise"
    if total > 25000:
        return "Large"
    if total > 10000:
        return "Medium"
    if total > 5000:
        return "Small-Medium"
    return "Small"


class BudgetComparator(PipelineStage[BudgetComparison]):
    """예산 구간과 평가 결과의 가격을 비교하는 순수 분석기."""

    _stage_name = "BudgetComparator"

    def compare_budget_vs_assessment(
        self,
        assessment: ProjectAssessment,
        pricing: Optional[PricingBreakdown] = None,
    ) -> BudgetComparison:
        """
        예산 대비 평가 결과 비교 보고서를 만듭니다.

        Args:
            assessment: 고객의 평가 답변
            pricing: 이미 계산된 가격 명세 (없으면 새로 계산)

        Returns:
            BudgetComparison: 적합도, 기능/비용/가치 분석, 권장 조치
        """
        return self.run(assessment, pricing=pricing)

    def _do_run(self, assessment: ProjectAssessment, **context) -> BudgetComparison:
        pricing = context.get("pricing") or get_pricing_calculator().calculate_pricing(assessment)
        tier, bounds = get_budget_range(assessment.budget_range)
        total = round_half_up(project_cost(pricing))

        budget_average = bounds.average(total)
        alignment = self._alignment(bounds, total, budget_average)
        features = self._compare_features(assessment, bounds, total, budget_average)
        cost_breakdown = self._compare_cost_breakdown(pricing, bounds, total)
        value = self._analyze_value(assessment, bounds, total, budget_average, alignment.status)
        actions = self._action_items(alignment, features)

        logger.info(
            f"[{self._stage_name}] budget={tier} total={total} "
            f"status={alignment.status.value} diff={alignment.percentage_difference}%"
        )

        return BudgetComparison(
            budget_range=BudgetRangeInfo(
                selected=tier,
                min=bounds.min,
                max=bounds.max,
                average=budget_average,
            ),
            assessment_needs=AssessmentNeeds(
                estimated_min=pricing.estimated_range.min,
                estimated_max=pricing.estimated_range.max,
                average=(pricing.estimated_range.min + pricing.estimated_range.max) / 2,
                calculated_total=total,
            ),
            alignment=alignment,
            feature_comparison=features,
            cost_breakdown=cost_breakdown,
            value_analysis=value,
            action_items=actions,
        )

    # ------------------------------------------------------------
    # 적합도
    # ------------------------------------------------------------

    def _alignment(self, bounds: BudgetBounds, total: int, budget_average: float) -> Alignment:
        status = classify_alignment(bounds, total)
        if budget_average > 0:
            percentage_difference = round_half_up((total - budget_average) / budget_average * 100)
        else:
            percentage_difference = 0

        if status == AlignmentStatus.ALIGNED:
            message = (
                f"Your budget aligns well with your project needs. The estimated cost "
                f"({_money(total)}) fits within your selected budget range."
            )
            recommendation = (
                "Your budget is well-aligned. You can proceed with confidence that your "
                "project scope matches your financial expectations."
            )
        elif status == AlignmentStatus.UNDER_BUDGET:
            message = (
                f"Great news! Your project needs ({_money(total)}) are below your minimum budget "
                f"({_money(bounds.min)}). You could save up to {_money(bounds.min - total)} "
                f"or invest in additional features."
            )
            recommendation = (
                "Consider adding premium features, enhanced design, or additional integrations "
                "to maximize value within your budget."
            )
        elif status == AlignmentStatus.OVER_BUDGET:
            message = (
                f"Your project needs ({_money(total)}) exceed your selected budget "
                f"({_money(bounds.max)}) by approximately {_money(total - bounds.max)}."
            )
            recommendation = (
                "Consider phasing the project, reducing scope, or increasing your budget "
                "to align with your requirements."
            )
        else:
            message = (
                f"Your project needs ({_money(total)}) significantly exceed your selected budget "
                f"({_money(bounds.max)}) by approximately {_money(total - bounds.max)}."
            )
            recommendation = (
                "We strongly recommend either significantly increasing your budget, phasing the "
                "project into multiple stages, or substantially reducing the project scope to "
                "align with your budget."
            )

        return Alignment(
            status=status,
            percentage_difference=percentage_difference,
            message=message,
            recommendation=recommendation,
        )

    # ------------------------------------------------------------
    # 기능 비교
    # ------------------------------------------------------------

    def _compare_features(
        self,
        assessment: ProjectAssessment,
        bounds: BudgetBounds,
        total: int,
        budget_average: float,
    ) -> FeatureComparison:
        all_features = list(assessment.must_have_features)
        effective_max = bounds.effective_max(total)
        is_over = total > effective_max

        if is_over:
            # 예산 비율만큼 앞에서부터 포함 (최소 1개)
            keep = max(1, math.floor(len(all_features) * effective_max / total))
            included = all_features[:keep]
            missing = all_features[keep:]
        else:
            included = all_features
            missing = []

        recommended: list[str] = []
        if not is_over and budget_average > total:
            surplus = budget_average - total
            if surplus > UPSELL_SURPLUS_LARGE:
                recommended.extend(UPSELL_FEATURES_LARGE)
            if surplus > UPSELL_SURPLUS_SMALL:
                recommended.extend(UPSELL_FEATURES_SMALL)

        return FeatureComparison(
            included_in_budget=included,
            missing_from_budget=missing,
            recommended_features=recommended,
            budget_friendly_alternatives=self._alternatives(assessment),
        )

    def _alternatives(self, assessment: ProjectAssessment) -> list[FeatureAlternative]:
        features = set(assessment.must_have_features)
        platforms = {p.lower() for p in assessment.platform}

        found = []
        if "Custom CMS" in features or assessment.content_management == "custom-cms":
            found.append(CUSTOM_CMS_ALTERNATIVE)
        if "Enterprise SSO" in features or assessment.user_authentication == "enterprise-sso":
            found.append(ENTERPRISE_SSO_ALTERNATIVE)
        if {"ios", "android"} <= platforms:
            found.append(NATIVE_APPS_ALTERNATIVE)

        return [FeatureAlternative(**alt._asdict()) for alt in found]

    # ------------------------------------------------------------
    # 비용 배분
    # ------------------------------------------------------------

    def _compare_cost_breakdown(
        self,
        pricing: PricingBreakdown,
        bounds: BudgetBounds,
        total: int,
    ) -> CostBreakdownComparison:
        # 배분 합계는 견적 금액의 배수 적용 전 합계와 같음 (디자인/연동은 기능 줄에도 포함)
        allocation = {
            "base_price": float(pricing.base_price),
            "features": float(pricing.feature_total),
            "platform": float(pricing.platform.price),
            "design": float(pricing.design.price),
            "integrations": float(pricing.integrations.price),
        }
        pre_multiplier = sum(allocation.values())
        allocation["complexity"] = pre_multiplier * (pricing.complexity.multiplier - 1)
        allocation["timeline"] = (
            (pre_multiplier + allocation["complexity"]) * (pricing.timeline.multiplier - 1)
        )

        effective_max = bounds.effective_max(total)
        scale = effective_max / total if total > effective_max else 1.0
        budget = {key: value * scale for key, value in allocation.items()}

        def _to_model(values: dict[str, float]) -> CostAllocation:
            return CostAllocation(**{key: round_half_up(values[key]) for key in COST_BUCKETS})

        return CostBreakdownComparison(
            budget_allocation=_to_model(budget),
            assessment_allocation=_to_model(allocation),
            differences=_to_model({key: allocation[key] - budget[key] for key in COST_BUCKETS}),
        )

    # ------------------------------------------------------------
    # 가치 분석
    # ------------------------------------------------------------

    def _analyze_value(
        self,
        assessment: ProjectAssessment,
        bounds: BudgetBounds,
        total: int,
        budget_average: float,
        status: AlignmentStatus,
    ) -> ValueAnalysis:
        feature_count = (
            len(assessment.must_have_features)
            + len(assessment.platform)
            + len(assessment.integrations)
        )

        def _snapshot(amount: float) -> ValueSnapshot:
            per_dollar = feature_count / amount * 1000 if amount > 0 else 0.0
            return ValueSnapshot(
                features_per_dollar=round(per_dollar, 2),
                quality_level=quality_level(amount, feature_count),
                scope_level=scope_level(amount),
            )

        if status in OVER_STATUSES:
            recommendations = [
                "Consider phasing the project to fit your budget while maintaining quality",
                "Prioritize core features and defer nice-to-have features to later phases",
            ]
            if bounds.max is not None and bounds.max < TEMPLATE_SUGGESTION_BUDGET:
                recommendations.append(
                    "Explore template-based solutions to reduce custom development costs"
                )
        elif status == AlignmentStatus.UNDER_BUDGET:
            recommendations = [
                "Your budget allows for premium features and enhanced quality",
                "Consider investing in advanced integrations or mobile app development",
                "You could add professional design services or extended support",
            ]
        else:
            recommendations = [
                "Your budget and project scope are well-aligned",
                "Consider adding a maintenance and support plan",
            ]

        return ValueAnalysis(
            budget_value=_snapshot(budget_average),
            assessment_value=_snapshot(total),
            recommendations=recommendations,
        )

    # ------------------------------------------------------------
    # 권장 조치
    # ------------------------------------------------------------

    def _action_items(self, alignment: Alignment, features: FeatureComparison) -> list[ActionItem]:
        items: list[ActionItem] = []

        if alignment.status in OVER_STATUSES:
            items.append(ActionItem(
                type=ActionType.PHASE_PROJECT,
                priority=ActionPriority.HIGH,
                title="Phase the Project",
                description=(
                    "Break your project into multiple phases to fit your budget "
                    "while maintaining quality."
                ),
                impact="Could reduce initial cost by 40-60% while delivering core functionality first.",
            ))
            if features.budget_friendly_alternatives:
                savings = sum(alt.cost_savings for alt in features.budget_friendly_alternatives)
                items.append(ActionItem(
                    type=ActionType.OPTIMIZE_FEATURES,
                    priority=ActionPriority.HIGH,
                    title="Use Budget-Friendly Alternatives",
                    description=(
                        "Replace expensive features with cost-effective alternatives "
                        "that still meet your needs."
                    ),
                    impact=f"Could save {_money(savings)} while maintaining core functionality.",
                ))
            items.append(ActionItem(
                type=ActionType.REDUCE_SCOPE,
                priority=ActionPriority.MEDIUM,
                title="Reduce Project Scope",
                description=(
                    "Prioritize must-have features and defer nice-to-have features "
                    "to future updates."
                ),
                impact="Could reduce cost by 20-30% by focusing on core functionality.",
            ))
            if alignment.percentage_difference > INCREASE_BUDGET_THRESHOLD:
                items.append(ActionItem(
                    type=ActionType.INCREASE_BUDGET,
                    priority=ActionPriority.MEDIUM,
                    title="Consider Increasing Budget",
                    description=(
                        "Your project needs significantly exceed your budget. Consider "
                        "increasing your budget to match your requirements."
                    ),
                    impact=(
                        "Would allow you to include all desired features and maintain "
                        "high quality standards."
                    ),
                ))
        elif alignment.status == AlignmentStatus.UNDER_BUDGET:
            items.append(ActionItem(
                type=ActionType.OPTIMIZE_FEATURES,
                priority=ActionPriority.LOW,
                title="Enhance Project Scope",
                description="Your budget allows for additional features and enhancements.",
                impact=(
                    "You could add premium features, enhanced design, or extended support "
                    "within your budget."
                ),
            ))

        return items


# 싱글톤 인스턴스
_budget_comparator: Optional[BudgetComparator] = None


def get_budget_comparator() -> BudgetComparator:
    """BudgetComparator 인스턴스를 반환합니다."""
    global _budget_comparator
    if _budget_comparator is None:
        _budget_comparator = BudgetComparator()
    return _budget_comparator


def compare_budget_vs_assessment(assessment: ProjectAssessment) -> BudgetComparison:
    """평가 답변 → 예산 비교 보고서 (공유 분석기 사용)."""
    return get_budget_comparator().compare_budget_vs_assessment(assessment)
