"""
가격 계산에 사용하는 정적 가격표입니다.

2024-2025 시장 평균을 바탕으로 한 비즈니스 가정값이며,
프로세스 시작 시 한 번 로드되고 이후 변경되지 않습니다. (읽기 전용 매핑)
"""

from types import MappingProxyType
from typing import NamedTuple


class MarketData(NamedTuple):
    """프로젝트 유형별 시장 가격대 (달러)."""
    low: int
    high: int
    average: int


class PricedTier(NamedTuple):
    """구간별 가격표 항목: 표시 이름, 가격, 분류."""
    label: str
    price: int
    category: str


class MultiplierTier(NamedTuple):
    multiplier: float
    description: str


# 기본 가격 = 시장 평균 x BASE_PRICE_RATIO
BASE_PRICE_RATIO = 0.6

# 예상 가격 범위 (최종 가격 기준 ±20%)
RANGE_LOW_RATIO = 0.8
RANGE_HIGH_RATIO = 1.2

DEFAULT_PROJECT_TYPE = "other"

MARKET_COMPARISON = MappingProxyType({
    "website": MarketData(low=2000, high=15000, average=6000),
    "web-app": MarketData(low=10000, high=100000, average=35000),
    "mobile-app": MarketData(low=15000, high=150000, average=50000),
    "ecommerce": MarketData(low=5000, high=50000, average=20000),
    "saas": MarketData(low=20000, high=200000, average=75000),
    "api": MarketData(low=5000, high=50000, average=20000),
    "other": MarketData(low=5000, high=100000, average=30000),
})

# 플랫폼별 추가 비용 (web 은 기본 가격에 포함, api-only 는 UI 가 없어 할인)
PLATFORM_PRICES = MappingProxyType({
    "web": 0,
    "ios": 8000,
    "android": 8000,
    "desktop": 10000,
    "api-only": -2000,
})

AUTH_FEATURES = MappingProxyType({
    "basic": PricedTier("Basic Authentication", 500, "Security"),
    "social-login": PricedTier("Social Login Integration", 1000, "Security"),
    "enterprise-sso": PricedTier("Enterprise SSO", 3000, "Security"),
    "custom": PricedTier("Custom Authentication", 2000, "Security"),
})

PAYMENT_FEATURE = PricedTier("Payment Processing", 2000, "E-commerce")
REAL_TIME_FEATURE = PricedTier("Real-time Features", 1500, "Advanced")

CMS_FEATURES = MappingProxyType({
    "basic-cms": PricedTier("Basic CMS", 2000, "Content"),
    "headless-cms": PricedTier("Headless CMS Integration", 3000, "Content"),
    "custom-cms": PricedTier("Custom CMS", 5000, "Content"),
})

INTERNAL_API_FEATURE = PricedTier("Internal API", 2000, "API")
PUBLIC_API_FEATURE = PricedTier("Public API", 4000, "API")

# API 요구사항 → 포함되는 API 기능 (both 는 두 항목 모두 추가)
API_FEATURES = MappingProxyType({
    "internal": (INTERNAL_API_FEATURE,),
    "public": (PUBLIC_API_FEATURE,),
    "both": (INTERNAL_API_FEATURE, PUBLIC_API_FEATURE),
})

INTEGRATION_UNIT_PRICE = 1000

DESIGN_PRICES = MappingProxyType({
    "minimalist": 0,
    "modern": 2000,
    "corporate": 3000,
    "creative": 4000,
    "custom": 5000,
    "not-sure": 2000,
})
DEFAULT_DESIGN_PRICE = 2000
DEFAULT_DESIGN_LEVEL = "modern"

DEFAULT_COMPLEXITY = "moderate"
COMPLEXITY_MULTIPLIERS = MappingProxyType({
    "simple": MultiplierTier(0.8, "Simple data structure"),
    "moderate": MultiplierTier(1.0, "Moderate complexity"),
    "complex": MultiplierTier(1.5, "Complex data structure"),
    "enterprise": MultiplierTier(2.5, "Enterprise-grade system"),
})

TIMELINE_MULTIPLIERS = MappingProxyType({
    "asap": 1.5,            # 급행 (50% 할증)
    "1-3-months": 1.2,      # 빠른 일정 (20% 할증)
    "3-6-months": 1.0,      # 표준
    "6-12-months": 0.9,     # 여유 (10% 할인)
    "flexible": 0.9,        # 여유 (10% 할인)
})
RUSH_TIMELINES = frozenset({"asap", "1-3-months"})
