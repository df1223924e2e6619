"""Layer 1: Pricing - assessment answers to itemized price breakdown."""

from .pricing_calculator import (
    PricingCalculator,
    get_pricing_calculator,
    calculate_pricing,
    market_data_for,
    project_cost,
    is_rush,
)

__all__ = [
    "PricingCalculator",
    "get_pricing_calculator",
    "calculate_pricing",
    "market_data_for",
    "project_cost",
    "is_rush",
]
