"""Unit tests for assessment, quote and proposal models.

Tests camelCase intake, strict submission validation and
persisted record defaults.
"""

import pytest
from pydantic import ValidationError

from quote_service.models import (
    ProjectAssessment,
    AssessmentSubmission,
    AssessmentRecord,
    AssessmentStatus,
    PricingBreakdown,
    InvoiceLineItem,
)


class TestProjectAssessment:
    def test_accepts_camel_case_and_snake_case(self):
        camel = ProjectAssessment.model_validate({"projectType": "saas", "mustHaveFeatures": ["Billing"]})
        snake = ProjectAssessment(project_type="saas", must_have_features=["Billing"])

        assert camel == snake

    def test_null_lists_become_empty(self):
        assessment = ProjectAssessment.model_validate({"platform": None, "integrations": None})

        assert assessment.platform == []
        assert assessment.integrations == []

    def test_defaults(self):
        assessment = ProjectAssessment()

        assert assessment.responsive_design is True
        assert assessment.payment_processing is False
        assert assessment.budget_range is None

    def test_unknown_tier_values_pass_through(self):
        assessment = ProjectAssessment(budget_range="whatever", data_storage="huge")

        assert assessment.budget_range == "whatever"


class TestAssessmentSubmission:
    def test_valid_payload(self, submission_payload):
        submission = AssessmentSubmission.model_validate(submission_payload)

        assert submission.project_type == "website"
        assert submission.platform == ["web"]
        assert submission.budget_range == "under-5k"

    def test_email_is_trimmed(self, submission_payload):
        submission_payload["email"] = "  jane@example.com "
        assert AssessmentSubmission.model_validate(submission_payload).email == "jane@example.com"

    @pytest.mark.parametrize(
        "field, value",
        [
            ("email", "not-an-email"),
            ("name", "J"),
            ("projectDescription", "Too short"),
            ("projectType", "spaceship"),
            ("platform", []),
            ("platform", ["smart-fridge"]),
            ("mustHaveFeatures", []),
            ("budgetRange", "a-lot"),
            ("preferredTimeline", "yesterday"),
            ("businessStage", "pre-seed"),
        ],
    )
    def test_invalid_values_rejected(self, submission_payload, field, value):
        submission_payload[field] = value

        with pytest.raises(ValidationError):
            AssessmentSubmission.model_validate(submission_payload)

    def test_missing_required_field(self, submission_payload):
        del submission_payload["targetAudience"]

        with pytest.raises(ValidationError):
            AssessmentSubmission.model_validate(submission_payload)


class TestAssessmentRecord:
    def test_defaults_to_pending(self, sample_submission):
        record = AssessmentRecord(
            id="ASMT-20260302-abc123",
            assessment=sample_submission,
            pricing_breakdown=PricingBreakdown(
                base_price=3600,
                subtotal=3600,
                estimated_range={"min": 2880, "max": 4320, "average": 3600},
                market_comparison={"low_end": 2000, "high_end": 15000, "average": 6000},
            ),
        )

        assert record.status == AssessmentStatus.PENDING
        assert record.updated_at is None

    def test_json_roundtrip_keeps_submission(self, sample_submission):
        record = AssessmentRecord(
            id="ASMT-20260302-abc123",
            assessment=sample_submission,
            pricing_breakdown=PricingBreakdown(
                base_price=3600,
                subtotal=3600,
                estimated_range={"min": 2880, "max": 4320, "average": 3600},
                market_comparison={"low_end": 2000, "high_end": 15000, "average": 6000},
            ),
        )
        loaded = AssessmentRecord.model_validate_json(record.model_dump_json())

        assert loaded.assessment.must_have_features == ["Online menu", "Contact form"]
        assert loaded.pricing_breakdown.feature_total == 0


class TestInvoiceLineItem:
    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError):
            InvoiceLineItem(description="Kickoff", amount=-1)

    def test_zero_quantity_rejected(self):
        with pytest.raises(ValidationError):
            InvoiceLineItem(description="Kickoff", amount=100, quantity=0)
