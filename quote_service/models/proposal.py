"""Proposal document models for client-facing proposals."""

from datetime import date
from typing import Optional
from pydantic import BaseModel, Field

from .pricing import (
    FeatureLine,
    ComplexityInfo,
    TimelineInfo,
    PlatformInfo,
    DesignInfo,
    IntegrationInfo,
)


class ProjectOverview(BaseModel):
    """프로젝트 개요."""
    project_name: str = Field("", description="프로젝트명")
    project_type: str = Field("other", description="프로젝트 유형")
    description: str = Field("", description="프로젝트 설명")
    target_audience: str = Field("", description="대상 사용자")
    main_goals: list[str] = Field(default_factory=list, description="주요 목표")


class ScopeOfWork(BaseModel):
    """작업 범위."""
    features: list[str] = Field(default_factory=list, description="필수 기능")
    platforms: list[str] = Field(default_factory=list, description="대상 플랫폼")
    integrations: list[str] = Field(default_factory=list, description="외부 연동")
    technical_requirements: list[str] = Field(default_factory=list, description="기술 요구사항")


class TimelinePhase(BaseModel):
    """일정 단계."""
    phase: str = Field(..., description="단계명")
    weeks: int = Field(..., description="기간 (주)")
    duration: str = Field(..., description="표시용 기간")
    start_date: Optional[date] = Field(None, description="시작일")
    end_date: Optional[date] = Field(None, description="종료일")
    deliverables: list[str] = Field(default_factory=list, description="산출물")


class ProposalTimeline(BaseModel):
    """일정 계획. total_weeks 는 단계별 기간의 합입니다."""
    phases: list[TimelinePhase] = Field(default_factory=list)
    estimated_weeks: int = Field(0, description="복잡도/급행 여부로 산정한 기준 기간")
    total_weeks: int = Field(0, description="단계별 기간의 합")
    total_duration: str = Field("", description="표시용 전체 기간")
    start_date: date


class PaymentMilestone(BaseModel):
    """지불 일정의 한 단계."""
    milestone: str
    percentage: int
    amount: int
    due_date: str


class ProposalPricing(BaseModel):
    """제안서 가격 섹션. 가격 계산 결과에 최종 금액과 지불 일정을 더한 것."""
    base_price: int
    features: list[FeatureLine] = Field(default_factory=list)
    complexity: ComplexityInfo
    timeline: TimelineInfo
    platform: PlatformInfo
    design: DesignInfo
    integrations: IntegrationInfo
    subtotal: int
    final_total: int = Field(..., description="100달러 단위로 반올림한 최종 금액")
    payment_schedule: list[PaymentMilestone] = Field(default_factory=list)


class Expectations(BaseModel):
    """고객과 개발자 양측의 약속 사항."""
    client_responsibilities: list[str] = Field(default_factory=list)
    our_commitments: list[str] = Field(default_factory=list)
    communication: str = ""


class DomainServices(BaseModel):
    """도메인 등록 부가 서비스 안내."""
    included: bool = False
    message: str = ""
    pricing: str = ""


class AlternativeOption(BaseModel):
    """저예산 고객을 위한 대안 진행 방식."""
    name: str
    summary: str
    highlights: list[str] = Field(default_factory=list)
    phases: list[PaymentMilestone] = Field(default_factory=list)


class AlternativeOptions(BaseModel):
    """저예산(예산 상한이 기준 이하) 제안 블록."""
    headline: str
    options: list[AlternativeOption] = Field(default_factory=list)
    recommended_total: int
    closing_note: str = ""


class ProposalDocument(BaseModel):
    """고객 제안서 문서."""

    # 기본 정보
    title: str = Field(..., description="제안서 제목")
    assessment_id: str = Field(..., description="원본 평가 ID")
    client_name: str = Field("", description="고객명")
    client_email: str = Field("", description="고객 이메일")
    issue_date: date = Field(..., description="제안서 발행일")

    # 제안서 섹션
    project_overview: ProjectOverview = Field(default_factory=ProjectOverview)
    scope_of_work: ScopeOfWork = Field(default_factory=ScopeOfWork)
    timeline: ProposalTimeline
    pricing: ProposalPricing
    deliverables: list[str] = Field(default_factory=list)
    expectations: Expectations = Field(default_factory=Expectations)
    next_steps: list[str] = Field(default_factory=list)
    domain_services: Optional[DomainServices] = None
    alternative_options: Optional[AlternativeOptions] = None

    def to_markdown(self) -> str:
        """마크다운 형식의 제안서 생성."""
        lines = []

        # 헤더
        lines.append(f"# {self.title}")
        lines.append("")
        lines.append(f"**Prepared for**: {self.client_name} ({self.client_email})")
        lines.append(f"**Date**: {self.issue_date.strftime('%B %d, %Y')}")
        lines.append(f"**Assessment**: {self.assessment_id}")
        lines.append("")
        lines.append("---")
        lines.append("")

        # 1. 프로젝트 개요
        lines.append("## 1. Project Overview")
        lines.append("")
        lines.append(f"**Project**: {self.project_overview.project_name}")
        lines.append(f"**Type**: {self.project_overview.project_type}")
        lines.append("")
        if self.project_overview.description:
            lines.append(self.project_overview.description)
            lines.append("")
        if self.project_overview.target_audience:
            lines.append(f"**Target audience**: {self.project_overview.target_audience}")
            lines.append("")
        if self.project_overview.main_goals:
            lines.append("### Goals")
            lines.append("")
            for goal in self.project_overview.main_goals:
                lines.append(f"- {goal}")
            lines.append("")

        # 2. 작업 범위
        lines.append("## 2. Scope of Work")
        lines.append("")
        sections = [
            ("Features", self.scope_of_work.features),
            ("Platforms", self.scope_of_work.platforms),
            ("Integrations", self.scope_of_work.integrations),
            ("Technical Requirements", self.scope_of_work.technical_requirements),
        ]
        for heading, items in sections:
            if items:
                lines.append(f"### {heading}")
                lines.append("")
                for item in items:
                    lines.append(f"- {item}")
                lines.append("")

        # 3. 일정
        lines.append("## 3. Timeline")
        lines.append("")
        lines.append(f"**Total duration**: {self.timeline.total_duration}")
        lines.append(f"**Start date**: {self.timeline.start_date.strftime('%B %d, %Y')}")
        lines.append("")
        if self.timeline.phases:
            lines.append("| Phase | Duration | Key Deliverables |")
            lines.append("|-------|----------|------------------|")
            for phase in self.timeline.phases:
                deliverables_str = ", ".join(phase.deliverables[:3]) if phase.deliverables else "-"
                lines.append(f"| {phase.phase} | {phase.duration} | {deliverables_str} |")
            lines.append("")

        # 4. 가격
        lines.append("## 4. Investment")
        lines.append("")
        lines.append("| Item | Category | Price |")
        lines.append("|------|----------|-------|")
        lines.append(f"| Base development | Base | ${self.pricing.base_price:,} |")
        for item in self.pricing.platform.items:
            lines.append(f"| {item.name} | {item.category} | ${item.price:,} |")
        for feature in self.pricing.features:
            lines.append(f"| {feature.name} | {feature.category} | ${feature.price:,} |")
        lines.append("")
        lines.append(
            f"Complexity: {self.pricing.complexity.level} (x{self.pricing.complexity.multiplier}). "
            f"Timeline: {self.pricing.timeline.description} (x{self.pricing.timeline.multiplier})."
        )
        lines.append("")
        lines.append(f"**Total investment**: ${self.pricing.final_total:,}")
        lines.append("")
        if self.pricing.payment_schedule:
            lines.append("### Payment Schedule")
            lines.append("")
            lines.append("| Milestone | Share | Amount | Due |")
            lines.append("|-----------|-------|--------|-----|")
            for payment in self.pricing.payment_schedule:
                lines.append(
                    f"| {payment.milestone} | {payment.percentage}% | ${payment.amount:,} | {payment.due_date} |"
                )
            lines.append("")

        # 5. 산출물
        if self.deliverables:
            lines.append("## 5. Deliverables")
            lines.append("")
            for deliverable in self.deliverables:
                lines.append(f"- {deliverable}")
            lines.append("")

        # 6. 상호 약속
        lines.append("## 6. Expectations")
        lines.append("")
        if self.expectations.client_responsibilities:
            lines.append("### Client Responsibilities")
            lines.append("")
            for item in self.expectations.client_responsibilities:
                lines.append(f"- {item}")
            lines.append("")
        if self.expectations.our_commitments:
            lines.append("### Our Commitments")
            lines.append("")
            for item in self.expectations.our_commitments:
                lines.append(f"- {item}")
            lines.append("")
        if self.expectations.communication:
            lines.append(self.expectations.communication)
            lines.append("")

        # 7. 저예산 대안
        if self.alternative_options:
            alt = self.alternative_options
            lines.append("## 7. Options for Your Budget")
            lines.append("")
            lines.append(alt.headline)
            lines.append("")
            for i, option in enumerate(alt.options, 1):
                lines.append(f"### Option {i}: {option.name}")
                lines.append("")
                lines.append(option.summary)
                lines.append("")
                for phase in option.phases:
                    lines.append(f"- **{phase.milestone}**: ${phase.amount:,}")
                for highlight in option.highlights:
                    lines.append(f"- {highlight}")
                lines.append("")
            lines.append(f"**Recommended total**: ${alt.recommended_total:,}")
            lines.append("")
            if alt.closing_note:
                lines.append(alt.closing_note)
                lines.append("")

        # 8. 후속 절차
        if self.next_steps:
            lines.append("## Next Steps")
            lines.append("")
            for i, step in enumerate(self.next_steps, 1):
                lines.append(f"{i}. {step}")
            lines.append("")

        # 도메인 서비스 안내
        if self.domain_services:
            lines.append("---")
            lines.append("")
            lines.append(f"*{self.domain_services.message}*")
            lines.append("")
            lines.append(f"*{self.domain_services.pricing}*")

        return "\n".join(lines)

    def to_json(self) -> str:
        """JSON 형식으로 변환."""
        return self.model_dump_json(indent=2)
