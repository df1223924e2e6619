"""
제안서 템플릿 - 제안서의 고정 문구와 단계/지불 비율을 정의합니다.
"""

from types import MappingProxyType
from typing import NamedTuple


# 프로젝트 유형별 기준 기간 (주)
BASE_WEEKS = MappingProxyType({
    "website": 4,
    "web-app": 12,
    "mobile-app": 16,
    "ecommerce": 10,
    "saas": 20,
    "api": 8,
    "other": 10,
})
DEFAULT_BASE_WEEKS = 10

# 급행 일정이면 기간을 20% 단축
RUSH_DURATION_RATIO = 0.8

# 착수일 = 제안서 발행일 + 1주
START_DELAY_DAYS = 7


class PhaseTemplate(NamedTuple):
    name: str
    ratio: float
    deliverables: tuple[str, ...]


PHASES = (
    PhaseTemplate(
        "Discovery & Planning",
        0.15,
        (
            "Project requirements document",
            "Technical architecture plan",
            "Design mockups and wireframes",
            "Project timeline and milestones",
        ),
    ),
    PhaseTemplate(
        "Design & Development",
        0.6,
        (
            "UI/UX design implementation",
            "Core functionality development",
            "Integration setup",
            "Testing and quality assurance",
        ),
    ),
    PhaseTemplate(
        "Testing & Refinement",
        0.15,
        (
            "Comprehensive testing",
            "Bug fixes and refinements",
            "Performance optimization",
            "Client review and feedback implementation",
        ),
    ),
    PhaseTemplate(
        "Launch & Handoff",
        0.1,
        (
            "Production deployment",
            "Documentation delivery",
            "Training and knowledge transfer",
            "Post-launch support setup",
        ),
    ),
)


class PaymentTemplate(NamedTuple):
    milestone: str
    percentage: int
    due_date: str


# 마지막 단계가 반올림 차이를 흡수
PAYMENT_SCHEDULE = (
    PaymentTemplate("Project Kickoff", 30, "Upon contract signing"),
    PaymentTemplate("Design Approval", 30, "Upon design phase completion"),
    PaymentTemplate("Development Milestone", 30, "Upon development phase completion"),
    PaymentTemplate("Final Delivery", 10, "Upon project completion and launch"),
)

# 최종 금액은 100달러 단위
PRICE_ROUNDING_STEP = 100

BASE_DELIVERABLES = (
    "Fully functional application/website",
    "Source code and documentation",
    "Deployment to production environment",
    "User documentation and guides",
    "Admin panel (if applicable)",
)
BRAND_DELIVERABLE = "Brand guideline implementation"
DESIGN_DELIVERABLES = ("Custom design system", "Design assets and style guide")
CMS_DELIVERABLE = "Content management system setup"
SUPPORT_DELIVERABLE = "Post-launch support (30 days)"

CLIENT_RESPONSIBILITIES = (
    "Provide timely feedback on designs and development milestones",
    "Supply all necessary content, images, and brand assets",
    "Respond to questions and requests within 2 business days",
    "Participate in scheduled review meetings",
    "Approve milestones before proceeding to next phase",
    "Provide access to necessary third-party services and accounts",
)
OUR_COMMITMENTS = (
    "Deliver high-quality code following industry best practices",
    "Meet agreed-upon milestones and deadlines",
    "Provide regular progress updates and communication",
    "Ensure responsive design across all devices",
    "Implement security best practices",
    "Provide comprehensive documentation",
    "Offer 30 days of post-launch support",
)
COMMUNICATION = (
    "We will communicate primarily via email with scheduled video calls for major "
    "milestones. Response time: within 24 hours on business days."
)

NEXT_STEPS = (
    "Review this proposal and discuss any questions or concerns",
    "Confirm project scope and timeline",
    "Sign the project agreement",
    "Provide initial payment to begin project kickoff",
    "Schedule kickoff meeting to discuss project details",
)
LOW_BUDGET_FIRST_STEP = "Consider the realistic scope options provided for your budget"
LOW_BUDGET_LAST_STEP = "Discuss phased approach if needed to fit budget constraints"

DOMAIN_MESSAGE = (
    "We offer domain registration and ownership services. Secure your brand's "
    "online identity with a professional domain name."
)
DOMAIN_PRICING = (
    "Domain pricing varies by extension (.com, .net, .org, etc.). "
    "Contact us at {contact} for a quote on your preferred domain name."
)

# 상한과 무관하게 항상 저예산으로 보는 예산 구간
LOW_BUDGET_TIER = "under-5k"

# 저예산 대안
LOW_BUDGET_HEADLINE = (
    "We understand that your budget is under ${threshold:,}. To provide you with the best "
    "value and realistic expectations, we recommend one of the following approaches."
)
MVP_RATIO = 0.6
MVP_HIGHLIGHTS = (
    "Core functionality only",
    "Essential features",
    "Basic design",
    "Launch-ready foundation",
)
ENHANCEMENT_HIGHLIGHTS = (
    "Additional features",
    "Design refinements",
    "Performance optimization",
    "Advanced integrations",
)
SIMPLIFIED_HIGHLIGHTS = (
    "Core functionality",
    "Responsive design",
    "Basic integrations",
    "Essential features only",
    "Standard design (no custom design system)",
)
TEMPLATE_HIGHLIGHTS = (
    "Customized professional template",
    "Your branding and content",
    "Essential customizations",
    "Faster delivery",
    "Lower cost",
)
LOW_BUDGET_CLOSING = (
    "This proposal reflects a realistic scope that fits your budget while delivering a "
    "professional, functional solution. We can discuss which approach works best for "
    "your needs and timeline."
)
