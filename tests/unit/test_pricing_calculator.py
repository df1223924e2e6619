"""Unit tests for the pricing calculator.

Covers base price lookup, feature lines, platform surcharges,
complexity/timeline multipliers, the estimated range and fallbacks
for unknown or missing answers.
"""

import pytest

from quote_service.models import ProjectAssessment
from quote_service.layers.layer1_pricing import (
    PricingCalculator,
    calculate_pricing,
    market_data_for,
    project_cost,
)


@pytest.fixture
def calculator():
    return PricingCalculator()


class TestBasePrice:
    def test_website_baseline(self, calculator, website_assessment):
        breakdown = calculator.calculate_pricing(website_assessment)

        assert breakdown.base_price == 3600
        assert breakdown.features == []
        assert breakdown.subtotal == 3600
        assert breakdown.estimated_range.min == 2880
        assert breakdown.estimated_range.max == 4320
        assert breakdown.estimated_range.average == 3600

    def test_market_comparison_is_reported(self, calculator, website_assessment):
        breakdown = calculator.calculate_pricing(website_assessment)

        assert breakdown.market_comparison.low_end == 2000
        assert breakdown.market_comparison.high_end == 15000
        assert breakdown.market_comparison.average == 6000

    @pytest.mark.parametrize("project_type", [None, "blockchain-thing"])
    def test_unknown_project_type_falls_back_to_other(self, calculator, project_type):
        breakdown = calculator.calculate_pricing(ProjectAssessment(project_type=project_type))

        assert breakdown.base_price == 18000
        assert market_data_for(project_type).average == 30000


class TestFeatureLines:
    def test_feature_order_and_prices(self, calculator):
        assessment = ProjectAssessment(
            project_type="web-app",
            user_authentication="social-login",
            payment_processing=True,
            real_time_features=True,
            content_management="headless-cms",
            api_requirements="both",
            integrations=["Stripe", "Mailchimp"],
            design_style="creative",
        )
        breakdown = calculator.calculate_pricing(assessment)

        assert [(f.name, f.price) for f in breakdown.features] == [
            ("Social Login Integration", 1000),
            ("Payment Processing", 2000),
            ("Real-time Features", 1500),
            ("Headless CMS Integration", 3000),
            ("Internal API", 2000),
            ("Public API", 4000),
            ("2 Third-party Integration(s)", 2000),
            ("Creative Design", 4000),
        ]
        assert breakdown.integrations.count == 2
        assert breakdown.integrations.price == 2000
        assert breakdown.design.price == 4000

    def test_no_auth_no_api_adds_nothing(self, calculator):
        assessment = ProjectAssessment(
            project_type="website",
            user_authentication="none",
            api_requirements="none",
            content_management="static",
        )
        breakdown = calculator.calculate_pricing(assessment)

        assert breakdown.features == []

    def test_minimalist_design_is_free(self, calculator):
        breakdown = calculator.calculate_pricing(
            ProjectAssessment(project_type="website", design_style="minimalist")
        )

        assert breakdown.design.price == 0
        assert all(f.category != "Design" for f in breakdown.features)

    def test_unknown_design_style_uses_default_price(self, calculator):
        breakdown = calculator.calculate_pricing(
            ProjectAssessment(project_type="website", design_style="brutalist")
        )

        assert breakdown.design.price == 2000


class TestPlatforms:
    def test_native_platforms_are_itemized_not_in_features(self, calculator, mobile_enterprise_assessment):
        breakdown = calculator.calculate_pricing(mobile_enterprise_assessment)

        assert breakdown.platform.price == 16000
        assert [item.name for item in breakdown.platform.items] == ["iOS Platform", "Android Platform"]
        assert all(f.category != "Platform" for f in breakdown.features)

    def test_duplicate_platforms_counted_once(self, calculator):
        breakdown = calculator.calculate_pricing(
            ProjectAssessment(project_type="website", platform=["ios", "ios", "web"])
        )

        assert breakdown.platform.platforms == ["ios", "web"]
        assert breakdown.platform.price == 8000

    def test_api_only_reduces_price(self, calculator):
        breakdown = calculator.calculate_pricing(
            ProjectAssessment(project_type="api", platform=["api-only"])
        )

        assert breakdown.platform.price == -2000
        assert breakdown.subtotal == 12000 - 2000


class TestMultipliers:
    def test_mobile_enterprise_total(self, calculator, mobile_enterprise_assessment):
        breakdown = calculator.calculate_pricing(mobile_enterprise_assessment)

        assert breakdown.base_price == 30000
        assert breakdown.complexity.level == "enterprise"
        assert breakdown.complexity.multiplier == 2.5
        assert breakdown.subtotal == 115000
        assert project_cost(breakdown) == pytest.approx(115000)

    def test_rush_timeline_applies_everywhere(self, calculator):
        breakdown = calculator.calculate_pricing(
            ProjectAssessment(project_type="website", preferred_timeline="asap")
        )

        assert breakdown.timeline.rush is True
        assert breakdown.subtotal == 5400
        assert project_cost(breakdown) == pytest.approx(5400)

    def test_relaxed_timeline_discount_only_in_estimate(self, calculator):
        breakdown = calculator.calculate_pricing(
            ProjectAssessment(project_type="website", preferred_timeline="flexible")
        )

        assert breakdown.timeline.rush is False
        assert breakdown.timeline.multiplier == 0.9
        assert breakdown.subtotal == 3240
        assert project_cost(breakdown) == pytest.approx(3600)

    def test_unknown_complexity_defaults_to_moderate(self, calculator):
        breakdown = calculator.calculate_pricing(
            ProjectAssessment(project_type="website", data_storage="galactic")
        )

        assert breakdown.complexity.level == "moderate"
        assert breakdown.complexity.multiplier == 1.0

    def test_simple_complexity_discount(self, calculator):
        breakdown = calculator.calculate_pricing(
            ProjectAssessment(project_type="website", data_storage="simple", user_authentication="basic")
        )

        # (3600 + 500) x 0.8
        assert breakdown.subtotal == 3280
        assert breakdown.estimated_range.min == 2624
        assert breakdown.estimated_range.max == 3936


class TestDeterminism:
    def test_same_input_same_output(self, mobile_enterprise_assessment):
        first = calculate_pricing(mobile_enterprise_assessment)
        second = calculate_pricing(mobile_enterprise_assessment)

        assert first.model_dump() == second.model_dump()

    def test_empty_assessment_does_not_raise(self, calculator):
        breakdown = calculator.calculate_pricing(ProjectAssessment())

        assert breakdown.subtotal == 18000
        assert breakdown.features == []
