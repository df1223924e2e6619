"""Unit tests for the proposal composer.

Covers final total rounding, payment schedule sums, the timeline
plan, low-budget alternatives and optional sections.
"""

from datetime import date

import pytest

from quote_service.models import ProjectAssessment
from quote_service.layers.layer3_proposal import ProposalComposer, build_payment_schedule


ISSUE_DATE = date(2026, 3, 2)


@pytest.fixture
def composer():
    return ProposalComposer(low_budget_threshold=5000, offer_domain_services=True)


class TestPricingSection:
    def test_mobile_enterprise_total(self, composer, mobile_enterprise_assessment):
        proposal = composer.generate_proposal(mobile_enterprise_assessment, "ASMT-20260302-abc123")

        assert proposal.pricing.final_total == 115000
        assert [p.amount for p in proposal.pricing.payment_schedule] == [34500, 34500, 34500, 11500]

    def test_total_rounded_to_hundreds(self, composer):
        assessment = ProjectAssessment(
            project_type="website",
            data_storage="simple",
            user_authentication="basic",
        )
        proposal = composer.generate_proposal(assessment, "ASMT-20260302-abc123")

        # (3600 + 500) x 0.8 = 3280
        assert proposal.pricing.subtotal == 3280
        assert proposal.pricing.final_total == 3300

    def test_relaxed_timeline_not_discounted(self, composer):
        assessment = ProjectAssessment(project_type="website", preferred_timeline="6-12-months")
        proposal = composer.generate_proposal(assessment, "ASMT-20260302-abc123")

        assert proposal.pricing.subtotal == 3240
        assert proposal.pricing.final_total == 3600

    def test_design_and_integrations_added_to_total(self, composer):
        assessment = ProjectAssessment(
            project_type="website",
            design_style="modern",
            integrations=["stripe", "mailchimp"],
            preferred_timeline="3-6-months",
        )
        proposal = composer.generate_proposal(assessment, "ASMT-20260302-abc123")

        # 3600 + feature lines (2000 + 2000) + design 2000 + integrations 2000
        assert proposal.pricing.final_total == 11600
        assert sum(p.amount for p in proposal.pricing.payment_schedule) == 11600

    @pytest.mark.parametrize("total", [0, 100, 3300, 12345, 115000, 217500])
    def test_payment_schedule_sums_to_total(self, total):
        schedule = build_payment_schedule(total)

        assert sum(p.amount for p in schedule) == total
        assert [p.percentage for p in schedule] == [30, 30, 30, 10]
        assert schedule[0].due_date == "Upon contract signing"

    def test_last_payment_absorbs_rounding(self):
        schedule = build_payment_schedule(12345)

        # 12345 x 0.3 = 3703.5 → 3704
        assert [p.amount for p in schedule] == [3704, 3704, 3704, 1233]


class TestTimeline:
    def test_website_phases(self, composer, website_assessment):
        proposal = composer.generate_proposal(website_assessment, "ASMT-20260302-abc123", issue_date=ISSUE_DATE)
        timeline = proposal.timeline

        assert timeline.estimated_weeks == 4
        assert [p.weeks for p in timeline.phases] == [1, 3, 1, 1]
        assert timeline.total_weeks == 6
        assert timeline.total_duration == "6 weeks (approximately 2 months)"
        assert timeline.start_date == date(2026, 3, 9)

    def test_phase_dates_are_chained(self, composer, website_assessment):
        proposal = composer.generate_proposal(website_assessment, "ASMT-20260302-abc123", issue_date=ISSUE_DATE)
        phases = proposal.timeline.phases

        assert phases[0].start_date == date(2026, 3, 9)
        assert phases[0].end_date == date(2026, 3, 16)
        for previous, current in zip(phases, phases[1:]):
            assert current.start_date == previous.end_date
        assert phases[-1].end_date == date(2026, 4, 20)

    def test_rush_shortens_schedule(self, composer):
        assessment = ProjectAssessment(project_type="web-app", preferred_timeline="asap")
        proposal = composer.generate_proposal(assessment, "ASMT-20260302-abc123")

        # ceil(12 x 1.0 x 0.8)
        assert proposal.timeline.estimated_weeks == 10

    def test_phase_deliverables(self, composer, website_assessment):
        proposal = composer.generate_proposal(website_assessment, "ASMT-20260302-abc123")

        assert proposal.timeline.phases[0].phase == "Discovery & Planning"
        assert len(proposal.timeline.phases[0].deliverables) == 4


class TestLowBudget:
    def test_under_5k_gets_alternative_options(self, composer, website_assessment):
        proposal = composer.generate_proposal(website_assessment, "ASMT-20260302-abc123")
        alternatives = proposal.alternative_options

        assert alternatives is not None
        assert alternatives.recommended_total == 3600
        assert [o.name for o in alternatives.options] == [
            "Phased Development Approach",
            "Simplified Scope",
            "Template-Based Solution",
        ]
        phased = alternatives.options[0]
        assert [p.amount for p in phased.phases] == [2160, 1440]

    def test_low_budget_next_steps(self, composer, website_assessment):
        proposal = composer.generate_proposal(website_assessment, "ASMT-20260302-abc123")

        assert proposal.next_steps[0] == "Consider the realistic scope options provided for your budget"
        assert proposal.next_steps[-1] == "Discuss phased approach if needed to fit budget constraints"
        assert len(proposal.next_steps) == 7

    def test_tier_below_threshold_is_low_budget(self, composer):
        assessment = ProjectAssessment(project_type="website", budget_range="1-2k")

        assert composer.generate_proposal(assessment, "ASMT-20260302-abc123").alternative_options is not None

    @pytest.mark.parametrize("budget", ["2-5k", "5k-10k", "discuss", None])
    def test_regular_budget_has_no_alternatives(self, composer, budget):
        assessment = ProjectAssessment(project_type="website", budget_range=budget)
        proposal = composer.generate_proposal(assessment, "ASMT-20260302-abc123")

        assert proposal.alternative_options is None
        assert len(proposal.next_steps) == 5

    def test_threshold_is_configurable(self):
        composer = ProposalComposer(low_budget_threshold=15000)
        assessment = ProjectAssessment(project_type="website", budget_range="5k-10k")

        assert composer.generate_proposal(assessment, "ASMT-20260302-abc123").alternative_options is not None


class TestDocumentSections:
    def test_title_and_client(self, composer, sample_submission):
        proposal = composer.generate_proposal(sample_submission, "ASMT-20260302-abc123", issue_date=ISSUE_DATE)

        assert proposal.title == "Professional Proposal: Bakery Website"
        assert proposal.client_name == "Jane Doe"
        assert proposal.client_email == "jane@example.com"
        assert proposal.issue_date == ISSUE_DATE
        assert proposal.scope_of_work.features == ["Online menu", "Contact form"]
        assert "Responsive Design (Mobile, Tablet, Desktop)" in proposal.scope_of_work.technical_requirements

    def test_deliverables_follow_answers(self, composer):
        assessment = ProjectAssessment(
            project_type="website",
            design_style="modern",
            has_brand_guidelines=True,
            content_management="basic-cms",
        )
        deliverables = composer.generate_proposal(assessment, "ASMT-20260302-abc123").deliverables

        assert "Brand guideline implementation" in deliverables
        assert "Custom design system" in deliverables
        assert "Content management system setup" in deliverables
        assert deliverables[-1] == "Post-launch support (30 days)"

    def test_domain_services_toggle(self, website_assessment):
        with_domain = ProposalComposer(contact_email="studio@example.com")
        without_domain = ProposalComposer(offer_domain_services=False)

        domain = with_domain.generate_proposal(website_assessment, "ASMT-20260302-abc123").domain_services
        assert domain is not None
        assert "studio@example.com" in domain.pricing
        assert without_domain.generate_proposal(website_assessment, "ASMT-20260302-abc123").domain_services is None

    def test_markdown_rendering(self, composer, sample_submission):
        proposal = composer.generate_proposal(sample_submission, "ASMT-20260302-abc123", issue_date=ISSUE_DATE)
        markdown = proposal.to_markdown()

        assert markdown.startswith("# Professional Proposal: Bakery Website")
        assert "**Date**: March 02, 2026" in markdown
        assert "**Total investment**: $3,600" in markdown
        assert "## 7. Options for Your Budget" in markdown

    def test_domain_services_contact_includes_phone(self, website_assessment):
        composer = ProposalComposer(contact_email="studio@example.com", contact_phone="+1 555 0100")

        domain = composer.generate_proposal(website_assessment, "ASMT-20260302-abc123").domain_services
        assert "studio@example.com or +1 555 0100" in domain.pricing
