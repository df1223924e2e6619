"""
가격 계산 결과(PricingBreakdown) 모델입니다.
모든 금액은 센트가 아닌 정수 달러 단위입니다.
"""

from pydantic import BaseModel, Field


class FeatureLine(BaseModel):
    """가격표의 한 줄 (기능명, 가격, 분류)."""
    name: str
    price: int
    category: str


class ComplexityInfo(BaseModel):
    """데이터 저장 복잡도에 따른 배수."""
    level: str = "moderate"
    multiplier: float = 1.0
    description: str = "Standard web application"


class TimelineInfo(BaseModel):
    """희망 일정에 따른 배수. rush 는 급행(asap, 1-3개월) 여부."""
    rush: bool = False
    multiplier: float = 1.0
    description: str = "Standard timeline"


class PlatformInfo(BaseModel):
    """플랫폼 추가 비용. items 는 플랫폼별 명세이며 features 에는 중복 포함되지 않습니다."""
    platforms: list[str] = Field(default_factory=list)
    price: int = 0
    items: list[FeatureLine] = Field(default_factory=list)


class DesignInfo(BaseModel):
    level: str = "modern"
    price: int = 0


class IntegrationInfo(BaseModel):
    count: int = 0
    price: int = 0


class PriceRange(BaseModel):
    """예상 가격 범위 (최종 가격의 ±20%)."""
    min: int
    max: int
    average: int


class MarketComparison(BaseModel):
    """프로젝트 유형별 시장 가격대 (표시용, 계산에는 쓰이지 않음)."""
    low_end: int
    high_end: int
    average: int


class PricingBreakdown(BaseModel):
    """평가 답변으로부터 계산된 항목별 가격 명세."""

    base_price: int = Field(..., description="시장 평균의 60%로 잡은 기본 가격")
    features: list[FeatureLine] = Field(default_factory=list, description="기능별 가격 (입력 순서 유지)")
    complexity: ComplexityInfo = Field(default_factory=ComplexityInfo)
    timeline: TimelineInfo = Field(default_factory=TimelineInfo)
    platform: PlatformInfo = Field(default_factory=PlatformInfo)
    design: DesignInfo = Field(default_factory=DesignInfo)
    integrations: IntegrationInfo = Field(default_factory=IntegrationInfo)
    subtotal: int = Field(..., description="배수까지 모두 적용한 합계")
    estimated_range: PriceRange
    market_comparison: MarketComparison

    @property
    def feature_total(self) -> int:
        return sum(f.price for f in self.features)
