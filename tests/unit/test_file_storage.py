"""FileStorage unit tests.

Tests save/load/list operations for assessment records, quotes
and invoices using a temporary directory.
"""

import pytest
from unittest.mock import patch
from datetime import date, datetime, timedelta

from quote_service.services.file_storage import FileStorage
from quote_service.models import (
    AssessmentRecord,
    AssessmentStatus,
    Quote,
    QuoteStatus,
    Invoice,
)
from quote_service.layers.layer1_pricing import calculate_pricing
from quote_service.layers.layer3_proposal import ProposalComposer
from quote_service.exceptions import StorageError


def _make_record(submission, record_id: str, created_at: datetime, status=AssessmentStatus.PENDING) -> AssessmentRecord:
    """Helper to create an AssessmentRecord with a fixed timestamp."""
    return AssessmentRecord(
        id=record_id,
        status=status,
        assessment=submission,
        pricing_breakdown=calculate_pricing(submission),
        created_at=created_at,
    )


def _make_quote(submission, quote_number: str, assessment_id: str) -> Quote:
    """Helper to create a Quote from a freshly composed proposal."""
    proposal = ProposalComposer().generate_proposal(submission, assessment_id)
    return Quote(
        quote_number=quote_number,
        assessment_id=assessment_id,
        title=proposal.title,
        proposal_data=proposal,
        total_amount=proposal.pricing.final_total,
        valid_until=date.today() + timedelta(days=30),
    )


# ===================================================================
# Directory layout
# ===================================================================

class TestLayout:
    def test_creates_subdirectories(self, tmp_path):
        storage = FileStorage(base_path=str(tmp_path / "store"))

        assert storage.assessments_path.is_dir()
        assert storage.quotes_path.is_dir()
        assert storage.invoices_path.is_dir()


# ===================================================================
# Assessment records
# ===================================================================

class TestAssessmentStorage:
    @pytest.mark.asyncio
    async def test_save_and_get_roundtrip(self, temp_storage, sample_submission):
        record = _make_record(sample_submission, "ASMT-20260302-aaa111", datetime(2026, 3, 2, 9, 0))
        saved_id = await temp_storage.save_assessment(record)
        assert saved_id == "ASMT-20260302-aaa111"

        loaded = await temp_storage.get_assessment("ASMT-20260302-aaa111")
        assert loaded is not None
        assert loaded.assessment.project_name == "Bakery Website"
        assert loaded.pricing_breakdown.subtotal == record.pricing_breakdown.subtotal

    @pytest.mark.asyncio
    async def test_get_missing_returns_none(self, temp_storage):
        assert await temp_storage.get_assessment("ASMT-20260302-ffffff") is None

    @pytest.mark.asyncio
    async def test_list_newest_first_with_pagination(self, temp_storage, sample_submission):
        for i in range(3):
            await temp_storage.save_assessment(
                _make_record(sample_submission, f"ASMT-20260302-aaa11{i}", datetime(2026, 3, 2, 9, i))
            )

        records = await temp_storage.list_assessments()
        assert [r.id for r in records] == ["ASMT-20260302-aaa112", "ASMT-20260302-aaa111", "ASMT-20260302-aaa110"]

        page = await temp_storage.list_assessments(skip=1, limit=1)
        assert [r.id for r in page] == ["ASMT-20260302-aaa111"]

    @pytest.mark.asyncio
    async def test_list_filters_by_status(self, temp_storage, sample_submission):
        await temp_storage.save_assessment(
            _make_record(sample_submission, "ASMT-20260302-aaa111", datetime(2026, 3, 2, 9, 0))
        )
        await temp_storage.save_assessment(
            _make_record(
                sample_submission, "ASMT-20260302-aaa222", datetime(2026, 3, 2, 10, 0),
                status=AssessmentStatus.ARCHIVED,
            )
        )

        archived = await temp_storage.list_assessments(status="archived")
        assert [r.id for r in archived] == ["ASMT-20260302-aaa222"]

    @pytest.mark.asyncio
    async def test_update_missing_returns_false(self, temp_storage, sample_submission):
        record = _make_record(sample_submission, "ASMT-20260302-aaa111", datetime(2026, 3, 2, 9, 0))
        assert await temp_storage.update_assessment(record) is False

    @pytest.mark.asyncio
    async def test_corrupted_file_is_skipped(self, temp_storage, sample_submission):
        await temp_storage.save_assessment(
            _make_record(sample_submission, "ASMT-20260302-aaa111", datetime(2026, 3, 2, 9, 0))
        )
        (temp_storage.assessments_path / "ASMT-20260302-bad000.json").write_text("{not json", encoding="utf-8")

        assert await temp_storage.get_assessment("ASMT-20260302-bad000") is None
        assert len(await temp_storage.list_assessments()) == 1

    @pytest.mark.asyncio
    async def test_save_failure_raises_storage_error(self, temp_storage, sample_submission):
        record = _make_record(sample_submission, "ASMT-20260302-aaa111", datetime(2026, 3, 2, 9, 0))

        with patch("quote_service.services.file_storage.aiofiles.open", side_effect=OSError("disk full")):
            with pytest.raises(StorageError) as exc_info:
                await temp_storage.save_assessment(record)

        assert exc_info.value.error_code == "ERR_STORE_001"
        assert "disk full" in exc_info.value.details["error"]


# ===================================================================
# Quotes and invoices
# ===================================================================

class TestQuoteStorage:
    @pytest.mark.asyncio
    async def test_save_get_and_filter_by_assessment(self, temp_storage, sample_submission):
        await temp_storage.save_quote(_make_quote(sample_submission, "Q-20260302-aaa111", "ASMT-20260302-aaa111"))
        await temp_storage.save_quote(_make_quote(sample_submission, "Q-20260302-bbb222", "ASMT-20260302-bbb222"))

        loaded = await temp_storage.get_quote("Q-20260302-aaa111")
        assert loaded is not None
        assert loaded.status == QuoteStatus.PENDING
        assert loaded.proposal_data.pricing.final_total == loaded.total_amount

        quotes = await temp_storage.list_quotes(assessment_id="ASMT-20260302-bbb222")
        assert [q.quote_number for q in quotes] == ["Q-20260302-bbb222"]

    @pytest.mark.asyncio
    async def test_save_invoice_roundtrip(self, temp_storage):
        invoice = Invoice(
            invoice_number="INV-20260302-AB12C",
            quote_number="Q-20260302-aaa111",
            title="Professional Proposal: Bakery Website",
            amount=360000,
            due_date=date(2026, 3, 16),
        )
        await temp_storage.save_invoice(invoice)

        loaded = await temp_storage.get_invoice("INV-20260302-AB12C")
        assert loaded == invoice
        assert [i.invoice_number for i in await temp_storage.list_invoices()] == ["INV-20260302-AB12C"]
