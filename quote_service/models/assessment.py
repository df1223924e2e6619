"""
프로젝트 평가(Assessment) 데이터 모델입니다.
견적 위저드의 6단계 질문에 대한 고객 답변과, 저장소에 보관되는 평가 레코드를 정의합니다.
"""

import re
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .common import WizardModel
from .pricing import PricingBreakdown


class ProjectType(str, Enum):
    """프로젝트 유형 (시장 평균 가격표의 조회 키)."""

    WEBSITE = "website"
    WEB_APP = "web-app"
    MOBILE_APP = "mobile-app"
    ECOMMERCE = "ecommerce"
    SAAS = "saas"
    API = "api"
    OTHER = "other"


class Platform(str, Enum):
    """대상 플랫폼."""

    WEB = "web"
    IOS = "ios"
    ANDROID = "android"
    DESKTOP = "desktop"
    API_ONLY = "api-only"


class DataStorageTier(str, Enum):
    """데이터 저장 복잡도 (복잡도 배수의 조회 키)."""

    SIMPLE = "simple"
    MODERATE = "moderate"
    COMPLEX = "complex"
    ENTERPRISE = "enterprise"


class AuthTier(str, Enum):
    """사용자 인증 수준."""

    NONE = "none"
    BASIC = "basic"
    SOCIAL_LOGIN = "social-login"
    ENTERPRISE_SSO = "enterprise-sso"
    CUSTOM = "custom"


class ApiTier(str, Enum):
    """API 요구사항."""

    NONE = "none"
    INTERNAL = "internal"
    PUBLIC = "public"
    BOTH = "both"


class CmsTier(str, Enum):
    """콘텐츠 관리 방식."""

    STATIC = "static"
    BASIC = "basic-cms"
    HEADLESS = "headless-cms"
    CUSTOM = "custom-cms"


class DesignStyle(str, Enum):
    """디자인 스타일."""

    MINIMALIST = "minimalist"
    MODERN = "modern"
    CORPORATE = "corporate"
    CREATIVE = "creative"
    CUSTOM = "custom"
    NOT_SURE = "not-sure"


class TimelineTier(str, Enum):
    """희망 일정 (일정 배수의 조회 키)."""

    ASAP = "asap"
    ONE_TO_THREE_MONTHS = "1-3-months"
    THREE_TO_SIX_MONTHS = "3-6-months"
    SIX_TO_TWELVE_MONTHS = "6-12-months"
    FLEXIBLE = "flexible"


class BudgetTier(str, Enum):
    """고객이 선택한 예산 구간."""

    UNDER_5K = "under-5k"
    FROM_1K_TO_2K = "1-2k"
    FROM_2K_TO_5K = "2-5k"
    FROM_5K_TO_10K = "5k-10k"
    FROM_10K_TO_25K = "10k-25k"
    FROM_25K_TO_50K = "25k-50k"
    FROM_50K_TO_100K = "50k-100k"
    OVER_100K = "100k+"
    DISCUSS = "discuss"


class AssessmentStatus(str, Enum):
    """관리자(백오피스)가 지정하는 평가 처리 상태."""

    PENDING = "pending"         # 접수됨
    REVIEWED = "reviewed"       # 검토 완료
    CONTACTED = "contacted"     # 고객에게 연락함
    ARCHIVED = "archived"       # 보관됨


# 가격에 영향이 없는 선택형 질문들의 허용 값
BUSINESS_CHOICES: dict[str, tuple[str, ...]] = {
    "accessibility_requirements": ("basic", "wcag-aa", "wcag-aaa", "custom"),
    "user_experience_priority": ("speed", "features", "design", "accessibility", "balanced"),
    "business_stage": ("idea", "mvp", "existing-product", "scaling"),
    "primary_business_goal": (
        "increase-revenue", "reduce-costs", "improve-efficiency",
        "expand-market", "enhance-brand", "other",
    ),
    "expected_users": ("0-100", "100-1000", "1000-10000", "10000+", "unknown"),
    "revenue_model": ("subscription", "one-time", "freemium", "advertising", "marketplace", "other"),
    "budget_flexibility": ("strict", "some-flexibility", "flexible"),
    "hosting_preferences": ("cloud", "dedicated", "no-preference"),
}

# 가격 계산에 쓰이는 구간 질문들의 허용 값
TIER_CHOICES: dict[str, type[Enum]] = {
    "data_storage": DataStorageTier,
    "user_authentication": AuthTier,
    "api_requirements": ApiTier,
    "content_management": CmsTier,
    "design_style": DesignStyle,
    "preferred_timeline": TimelineTier,
    "budget_range": BudgetTier,
}

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class ProjectAssessment(WizardModel):
    """
    고객이 견적 위저드에서 입력한 답변 전체입니다.

    가격 계산 코어가 사용하는 느슨한 형태로, 모든 필드가 선택 사항입니다.
    구간(tier) 필드는 일반 문자열이라 알 수 없는 값도 그대로 통과하며,
    계산기에서 기본 구간으로 대체됩니다. (위저드 진행 중 실시간 미리보기용)
    """

    # 1단계: 기본 정보
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    company: Optional[str] = None
    role: Optional[str] = None

    # 2단계: 프로젝트 비전과 목표
    project_name: Optional[str] = None
    project_type: Optional[str] = None
    project_description: Optional[str] = None
    target_audience: Optional[str] = None
    main_goals: list[str] = Field(default_factory=list)
    success_metrics: Optional[str] = None

    # 3단계: 기술 요구사항
    platform: list[str] = Field(default_factory=list)
    preferred_tech_stack: list[str] = Field(default_factory=list)
    must_have_features: list[str] = Field(default_factory=list)
    nice_to_have_features: list[str] = Field(default_factory=list)
    integrations: list[str] = Field(default_factory=list)
    third_party_services: list[str] = Field(default_factory=list)
    data_storage: Optional[str] = None
    user_authentication: Optional[str] = None
    payment_processing: bool = False
    real_time_features: bool = False
    api_requirements: Optional[str] = None

    # 4단계: 디자인 및 UX
    design_style: Optional[str] = None
    has_brand_guidelines: bool = False
    brand_guidelines_description: Optional[str] = None
    responsive_design: bool = True
    accessibility_requirements: Optional[str] = None
    user_experience_priority: Optional[str] = None
    content_management: Optional[str] = None

    # 5단계: 비즈니스 목표
    business_stage: Optional[str] = None
    primary_business_goal: Optional[str] = None
    expected_users: Optional[str] = None
    revenue_model: Optional[str] = None
    competitive_advantage: Optional[str] = None

    # 6단계: 일정과 예산
    preferred_timeline: Optional[str] = None
    budget_range: Optional[str] = None
    budget_flexibility: Optional[str] = None
    ongoing_maintenance: bool = False
    hosting_preferences: Optional[str] = None

    # 기타
    additional_notes: Optional[str] = None
    referral_source: Optional[str] = None
    newsletter: bool = False

    @field_validator(
        "main_goals", "platform", "preferred_tech_stack", "must_have_features",
        "nice_to_have_features", "integrations", "third_party_services",
        mode="before",
    )
    @classmethod
    def _none_to_empty_list(cls, value):
        # 위저드가 건너뛴 단계의 목록은 null 로 올 수 있음
        return [] if value is None else value


class AssessmentSubmission(ProjectAssessment):
    """
    최종 제출되는 평가 데이터입니다.

    저장소에 들어가기 전 경계에서 엄격하게 검증합니다.
    (필수 항목, 최소 길이, 이메일 형식, 구간 값의 유효성)
    """

    model_config = ConfigDict(use_enum_values=True)

    name: str = Field(..., min_length=2)
    email: str
    project_name: str = Field(..., min_length=2)
    project_type: ProjectType
    project_description: str = Field(..., min_length=50)
    target_audience: str = Field(..., min_length=10)
    main_goals: list[str] = Field(..., min_length=1)
    platform: list[Platform] = Field(..., min_length=1)
    must_have_features: list[str] = Field(..., min_length=1)

    @field_validator("email")
    @classmethod
    def _check_email(cls, value: str) -> str:
        value = value.strip()
        if not EMAIL_PATTERN.match(value):
            raise ValueError("Invalid email address")
        return value

    @field_validator(*TIER_CHOICES.keys())
    @classmethod
    def _check_tier(cls, value: Optional[str], info) -> Optional[str]:
        if value is None:
            return value
        allowed = [member.value for member in TIER_CHOICES[info.field_name]]
        if value not in allowed:
            raise ValueError(f"must be one of: {', '.join(allowed)}")
        return value

    @field_validator(*BUSINESS_CHOICES.keys())
    @classmethod
    def _check_choice(cls, value: Optional[str], info) -> Optional[str]:
        if value is None:
            return value
        allowed = BUSINESS_CHOICES[info.field_name]
        if value not in allowed:
            raise ValueError(f"must be one of: {', '.join(allowed)}")
        return value


class AssessmentRecord(BaseModel):
    """저장소에 보관되는 평가 레코드입니다. 생성 후에는 status 만 변경됩니다."""

    id: str = Field(..., description="평가 ID (ASMT-YYYYMMDD-xxxxxx)")
    status: AssessmentStatus = Field(default=AssessmentStatus.PENDING)
    assessment: AssessmentSubmission
    pricing_breakdown: PricingBreakdown = Field(..., description="제출 시점의 가격 계산 결과")
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: Optional[datetime] = None
