"""
Proposal composer - 평가 답변과 가격 명세로 고객 제안서를 작성합니다.

작성 흐름:
1. 가격 계산 (Layer 1)
2. 최종 금액 산정 (100달러 단위)
3. 일정 계획 / 지불 일정
4. 작업 범위, 산출물, 상호 약속
5. 저예산이면 대안 진행 방식 추가
"""

import logging
import math
from datetime import date, timedelta
from typing import Optional

from quote_service.config import get_settings
from quote_service.models import (
    ProjectAssessment,
    PricingBreakdown,
    ProposalDocument,
    ProjectOverview,
    ScopeOfWork,
    TimelinePhase,
    ProposalTimeline,
    PaymentMilestone,
    ProposalPricing,
    Expectations,
    DomainServices,
    AlternativeOption,
    AlternativeOptions,
)
from quote_service.layers.base_stage import PipelineStage
from quote_service.layers.layer1_pricing import get_pricing_calculator, project_cost, is_rush
from quote_service.layers.layer2_budget import get_budget_range
from quote_service.utils import round_half_up, round_to_nearest

from . import templates as tpl

logger = logging.getLogger(__name__)


def _weeks_label(weeks: int) -> str:
    return f"{weeks} week" if weeks == 1 else f"{weeks} weeks"


def build_payment_schedule(total: int) -> list[PaymentMilestone]:
    """
    최종 금액을 지불 단계로 나눕니다.

    앞 단계들은 비율대로 반올림하고, 마지막 단계가 나머지를 가져가므로
    합계는 항상 total 과 같습니다.
    """
    schedule = []
    paid = 0
    for i, step in enumerate(tpl.PAYMENT_SCHEDULE):
        if i == len(tpl.PAYMENT_SCHEDULE) - 1:
            amount = total - paid
        else:
            amount = round_half_up(total * step.percentage / 100)
            paid += amount
        schedule.append(PaymentMilestone(
            milestone=step.milestone,
            percentage=step.percentage,
            amount=amount,
            due_date=step.due_date,
        ))
    return schedule


class ProposalComposer(PipelineStage[ProposalDocument]):
    """
    고객 제안서 작성기.

    Attributes:
        low_budget_threshold: 예산 상한이 이 금액 미만이거나 under-5k 구간이면 저예산 대안을 추가
        offer_domain_services: 도메인 서비스 안내 포함 여부
        contact_email: 안내 문구에 들어가는 연락처
    """

    _stage_name = "ProposalComposer"

    def __init__(
        self,
        low_budget_threshold: int = 5000,
        offer_domain_services: bool = True,
        contact_email: str = "hello@example.com",
        contact_phone: str = "",
    ):
        self.low_budget_threshold = low_budget_threshold
        self.offer_domain_services = offer_domain_services
        self.contact_email = contact_email
        self.contact_phone = contact_phone

    def generate_proposal(
        self,
        assessment: ProjectAssessment,
        assessment_id: str,
        issue_date: Optional[date] = None,
    ) -> ProposalDocument:
        """
        제안서 생성.

        Args:
            assessment: 고객의 평가 답변
            assessment_id: 원본 평가 ID
            issue_date: 발행일 (기본값: 오늘)

        Returns:
            ProposalDocument: 완성된 제안서
        """
        return self.run(assessment, assessment_id=assessment_id, issue_date=issue_date)

    def _do_run(self, assessment: ProjectAssessment, **context) -> ProposalDocument:
        assessment_id = context["assessment_id"]
        issue_date = context.get("issue_date") or date.today()

        pricing = get_pricing_calculator().calculate_pricing(assessment)
        final_total = round_to_nearest(project_cost(pricing), tpl.PRICE_ROUNDING_STEP)
        low_budget = self._is_low_budget(assessment.budget_range)

        proposal = ProposalDocument(
            title=f"Professional Proposal: {assessment.project_name or 'Your Project'}",
            assessment_id=assessment_id,
            client_name=assessment.name or "",
            client_email=assessment.email or "",
            issue_date=issue_date,
            project_overview=ProjectOverview(
                project_name=assessment.project_name or "",
                project_type=assessment.project_type or "other",
                description=assessment.project_description or "",
                target_audience=assessment.target_audience or "",
                main_goals=list(assessment.main_goals),
            ),
            scope_of_work=self._scope_of_work(assessment),
            timeline=self._timeline(assessment, pricing, issue_date),
            pricing=self._pricing(pricing, final_total),
            deliverables=self._deliverables(assessment, pricing),
            expectations=Expectations(
                client_responsibilities=list(tpl.CLIENT_RESPONSIBILITIES),
                our_commitments=list(tpl.OUR_COMMITMENTS),
                communication=tpl.COMMUNICATION,
            ),
            next_steps=self._next_steps(low_budget),
            domain_services=self._domain_services(),
            alternative_options=self._alternative_options(final_total) if low_budget else None,
        )

        logger.info(
            f"[{self._stage_name}] {assessment_id}: total=${final_total:,} "
            f"weeks={proposal.timeline.total_weeks} low_budget={low_budget}"
        )
        return proposal

    def _is_low_budget(self, budget_tier: Optional[str]) -> bool:
        tier, bounds = get_budget_range(budget_tier)
        if tier == tpl.LOW_BUDGET_TIER:
            return True
        return bounds.max is not None and bounds.max < self.low_budget_threshold

    def _scope_of_work(self, assessment: ProjectAssessment) -> ScopeOfWork:
        requirements = []
        if assessment.data_storage:
            requirements.append(f"Data Storage: {assessment.data_storage}")
        if assessment.user_authentication:
            requirements.append(f"Authentication: {assessment.user_authentication}")
        if assessment.payment_processing:
            requirements.append("Payment Processing Integration")
        if assessment.real_time_features:
            requirements.append("Real-time Features")
        if assessment.api_requirements and assessment.api_requirements != "none":
            requirements.append(f"API Requirements: {assessment.api_requirements}")
        if assessment.content_management:
            requirements.append(f"Content Management: {assessment.content_management}")
        if assessment.responsive_design:
            requirements.append("Responsive Design (Mobile, Tablet, Desktop)")
        if assessment.accessibility_requirements:
            requirements.append(f"Accessibility: {assessment.accessibility_requirements}")

        return ScopeOfWork(
            features=list(assessment.must_have_features),
            platforms=list(assessment.platform),
            integrations=list(assessment.integrations),
            technical_requirements=requirements,
        )

    def _timeline(
        self,
        assessment: ProjectAssessment,
        pricing: PricingBreakdown,
        issue_date: date,
    ) -> ProposalTimeline:
        base_weeks = tpl.BASE_WEEKS.get(assessment.project_type, tpl.DEFAULT_BASE_WEEKS)
        rush_ratio = tpl.RUSH_DURATION_RATIO if is_rush(assessment.preferred_timeline) else 1
        estimated_weeks = math.ceil(base_weeks * pricing.complexity.multiplier * rush_ratio)

        start_date = issue_date + timedelta(days=tpl.START_DELAY_DAYS)
        phases = []
        cursor = start_date
        for template in tpl.PHASES:
            weeks = math.ceil(estimated_weeks * template.ratio)
            end = cursor + timedelta(weeks=weeks)
            phases.append(TimelinePhase(
                phase=template.name,
                weeks=weeks,
                duration=_weeks_label(weeks),
                start_date=cursor,
                end_date=end,
                deliverables=list(template.deliverables),
            ))
            cursor = end

        total_weeks = sum(p.weeks for p in phases)
        return ProposalTimeline(
            phases=phases,
            estimated_weeks=estimated_weeks,
            total_weeks=total_weeks,
            total_duration=(
                f"{_weeks_label(total_weeks)} (approximately {math.ceil(total_weeks / 4)} months)"
            ),
            start_date=start_date,
        )

    def _pricing(self, pricing: PricingBreakdown, final_total: int) -> ProposalPricing:
        return ProposalPricing(
            base_price=pricing.base_price,
            features=pricing.features,
            complexity=pricing.complexity,
            timeline=pricing.timeline,
            platform=pricing.platform,
            design=pricing.design,
            integrations=pricing.integrations,
            subtotal=pricing.subtotal,
            final_total=final_total,
            payment_schedule=build_payment_schedule(final_total),
        )

    def _deliverables(self, assessment: ProjectAssessment, pricing: PricingBreakdown) -> list[str]:
        deliverables = list(tpl.BASE_DELIVERABLES)
        if assessment.has_brand_guidelines:
            deliverables.append(tpl.BRAND_DELIVERABLE)
        if pricing.design.price:
            deliverables.extend(tpl.DESIGN_DELIVERABLES)
        if assessment.content_management and assessment.content_management != "static":
            deliverables.append(tpl.CMS_DELIVERABLE)
        deliverables.append(tpl.SUPPORT_DELIVERABLE)
        return deliverables

    def _next_steps(self, low_budget: bool) -> list[str]:
        steps = list(tpl.NEXT_STEPS)
        if low_budget:
            steps.insert(0, tpl.LOW_BUDGET_FIRST_STEP)
            steps.append(tpl.LOW_BUDGET_LAST_STEP)
        return steps

    def _domain_services(self) -> Optional[DomainServices]:
        if not self.offer_domain_services:
            return None
        contact = self.contact_email
        if self.contact_phone:
            contact = f"{contact} or {self.contact_phone}"
        return DomainServices(
            included=False,
            message=tpl.DOMAIN_MESSAGE,
            pricing=tpl.DOMAIN_PRICING.format(contact=contact),
        )

    def _alternative_options(self, total: int) -> AlternativeOptions:
        mvp = round_half_up(total * tpl.MVP_RATIO)
        mvp_percentage = round_half_up(tpl.MVP_RATIO * 100)
        phased = AlternativeOption(
            name="Phased Development Approach",
            summary="Break your project into smaller, manageable phases that fit your budget.",
            highlights=(
                [f"MVP: {item}" for item in tpl.MVP_HIGHLIGHTS]
                + [f"Enhancements: {item}" for item in tpl.ENHANCEMENT_HIGHLIGHTS]
            ),
            phases=[
                PaymentMilestone(
                    milestone="Phase 1: MVP (Minimum Viable Product)",
                    percentage=mvp_percentage,
                    amount=mvp,
                    due_date="Upon MVP kickoff",
                ),
                PaymentMilestone(
                    milestone="Phase 2: Enhancements",
                    percentage=100 - mvp_percentage,
                    amount=total - mvp,
                    due_date="After MVP launch",
                ),
            ],
        )
        simplified = AlternativeOption(
            name="Simplified Scope",
            summary="Focus on essential features that deliver maximum value.",
            highlights=list(tpl.SIMPLIFIED_HIGHLIGHTS),
        )
        template_based = AlternativeOption(
            name="Template-Based Solution",
            summary="Use a professional template as a foundation to reduce costs.",
            highlights=list(tpl.TEMPLATE_HIGHLIGHTS),
        )
        return AlternativeOptions(
            headline=tpl.LOW_BUDGET_HEADLINE.format(threshold=self.low_budget_threshold),
            options=[phased, simplified, template_based],
            recommended_total=total,
            closing_note=tpl.LOW_BUDGET_CLOSING,
        )


# 싱글톤 인스턴스
_proposal_composer: Optional[ProposalComposer] = None


def get_proposal_composer() -> ProposalComposer:
    """설정값으로 구성된 ProposalComposer 인스턴스를 반환합니다."""
    global _proposal_composer
    if _proposal_composer is None:
        settings = get_settings()
        _proposal_composer = ProposalComposer(
            low_budget_threshold=settings.low_budget_threshold,
            offer_domain_services=settings.offer_domain_services,
            contact_email=settings.contact_email,
            contact_phone=settings.contact_phone,
        )
    return _proposal_composer


def generate_proposal(assessment: ProjectAssessment, assessment_id: str) -> ProposalDocument:
    """평가 답변 → 제안서 (공유 작성기 사용)."""
    return get_proposal_composer().generate_proposal(assessment, assessment_id)
