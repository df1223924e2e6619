"""Data models for the quote service."""

from .pricing import (
    FeatureLine,
    ComplexityInfo,
    TimelineInfo,
    PlatformInfo,
    DesignInfo,
    IntegrationInfo,
    PriceRange,
    MarketComparison,
    PricingBreakdown,
)
from .assessment import (
    ProjectType,
    Platform,
    DataStorageTier,
    AuthTier,
    ApiTier,
    CmsTier,
    DesignStyle,
    TimelineTier,
    BudgetTier,
    AssessmentStatus,
    ProjectAssessment,
    AssessmentSubmission,
    AssessmentRecord,
)
from .budget import (
    AlignmentStatus,
    ActionType,
    ActionPriority,
    BudgetRangeInfo,
    AssessmentNeeds,
    Alignment,
    FeatureAlternative,
    FeatureComparison,
    CostAllocation,
    CostBreakdownComparison,
    ValueSnapshot,
    ValueAnalysis,
    ActionItem,
    BudgetComparison,
)
from .proposal import (
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
    ProposalDocument,
)
from .error import ErrorResponse
from .quote import (
    QuoteStatus,
    InvoiceStatus,
    Quote,
    InvoiceLineItem,
    Invoice,
)

__all__ = [
    # Pricing models
    "FeatureLine",
    "ComplexityInfo",
    "TimelineInfo",
    "PlatformInfo",
    "DesignInfo",
    "IntegrationInfo",
    "PriceRange",
    "MarketComparison",
    "PricingBreakdown",
    # Assessment models
    "ProjectType",
    "Platform",
    "DataStorageTier",
    "AuthTier",
    "ApiTier",
    "CmsTier",
    "DesignStyle",
    "TimelineTier",
    "BudgetTier",
    "AssessmentStatus",
    "ProjectAssessment",
    "AssessmentSubmission",
    "AssessmentRecord",
    # Budget comparison models
    "AlignmentStatus",
    "ActionType",
    "ActionPriority",
    "BudgetRangeInfo",
    "AssessmentNeeds",
    "Alignment",
    "FeatureAlternative",
    "FeatureComparison",
    "CostAllocation",
    "CostBreakdownComparison",
    "ValueSnapshot",
    "ValueAnalysis",
    "ActionItem",
    "BudgetComparison",
    # Proposal models
    "ProjectOverview",
    "ScopeOfWork",
    "TimelinePhase",
    "ProposalTimeline",
    "PaymentMilestone",
    "ProposalPricing",
    "Expectations",
    "DomainServices",
    "AlternativeOption",
    "AlternativeOptions",
    "ProposalDocument",
    # Quote / invoice models
    "QuoteStatus",
    "InvoiceStatus",
    "Quote",
    "InvoiceLineItem",
    "Invoice",
    # Error models
    "ErrorResponse",
]
