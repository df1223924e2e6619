"""
견적 파이프라인의 전체 흐름을 관리하는 오케스트레이터입니다.

처리 단계:
1. 가격 계산 (Pricing): 위저드 답변 → 항목별 가격 명세
2. 예산 비교 (Budget): 선택한 예산 구간과 견적 금액 비교
3. 제안서 작성 (Proposal): 제안서 생성 후 견적서로 저장
4. 청구 (Invoice): 관리자가 견적서를 청구서로 전환

계산 코어(layers)는 순수 함수이고, 저장소 입출력은 모두 이 클래스에서만 일어납니다.
"""

import logging
import secrets
import string
import uuid
from datetime import datetime, date, timedelta
from typing import Optional

from quote_service.config import get_settings
from quote_service.exceptions import InputValidationError, QuoteConversionError, QuoteServiceError, StorageError
from quote_service.models import (
    ProjectAssessment,
    AssessmentSubmission,
    AssessmentRecord,
    AssessmentStatus,
    PricingBreakdown,
    BudgetComparison,
    Quote,
    QuoteStatus,
    Invoice,
    InvoiceLineItem,
)
from quote_service.layers.layer1_pricing import get_pricing_calculator
from quote_service.layers.layer2_budget import get_budget_comparator
from quote_service.layers.layer3_proposal import get_proposal_composer
from quote_service.services.file_storage import FileStorage, get_file_storage
from quote_service.utils import parse_choice

logger = logging.getLogger(__name__)

# 청구서로 전환할 수 있는 견적서 상태
CONVERTIBLE_STATUSES = (QuoteStatus.PENDING, QuoteStatus.ACCEPTED)

INVOICE_SUFFIX_ALPHABET = string.ascii_uppercase + string.digits


def _today_stamp() -> str:
    return datetime.now().strftime("%Y%m%d")


def new_assessment_id() -> str:
    """평가 ID 발급 (ASMT-YYYYMMDD-xxxxxx)."""
    return f"ASMT-{_today_stamp()}-{uuid.uuid4().hex[:6]}"


def new_quote_number() -> str:
    """견적 번호 발급 (Q-YYYYMMDD-xxxxxx)."""
    return f"Q-{_today_stamp()}-{uuid.uuid4().hex[:6]}"


def new_invoice_number() -> str:
    """청구 번호 발급 (INV-YYYYMMDD-XXXXX)."""
    suffix = "".join(secrets.choice(INVOICE_SUFFIX_ALPHABET) for _ in range(5))
    return f"INV-{_today_stamp()}-{suffix}"


class QuotePipeline:
    """
    평가 접수부터 청구서 발행까지를 조율하는 클래스입니다.
    각 단계별 계산기를 실행하고 결과를 저장소에 기록합니다.
    """

    def __init__(self, storage: Optional[FileStorage] = None):
        settings = get_settings()
        self.storage = storage or get_file_storage()
        self.quote_valid_days = settings.quote_valid_days
        self.invoice_due_days = settings.invoice_due_days

        self.pricing_calculator = get_pricing_calculator()
        self.budget_comparator = get_budget_comparator()
        self.proposal_composer = get_proposal_composer()

    # ==================== 가격 미리보기 ====================

    def preview_pricing(self, answers: ProjectAssessment) -> PricingBreakdown:
        """위저드 진행 중 실시간 가격 미리보기. 저장하지 않습니다."""
        return self.pricing_calculator.calculate_pricing(answers)

    # ==================== 평가 ====================

    async def submit_assessment(
        self,
        submission: AssessmentSubmission,
    ) -> tuple[AssessmentRecord, Optional[Quote]]:
        """
        최종 제출된 평가를 저장하고 첫 견적서를 자동 생성합니다.

        견적서 생성이 실패해도 평가 접수는 유지됩니다.

        Returns:
            (저장된 평가 레코드, 생성된 견적서 또는 None)
        """
        record = AssessmentRecord(
            id=new_assessment_id(),
            assessment=submission,
            pricing_breakdown=self.pricing_calculator.calculate_pricing(submission),
        )
        await self.storage.save_assessment(record)
        logger.info(
            f"[QuotePipeline] 평가 접수: {record.id} ({submission.project_type}, "
            f"예상 ${record.pricing_breakdown.subtotal:,})"
        )

        quote = None
        try:
            quote = await self._create_quote(record)
        except QuoteServiceError as e:
            logger.warning(f"[QuotePipeline] 견적서 자동 생성 실패 {record.id}: {e.message}")

        return record, quote

    async def get_assessment(self, assessment_id: str) -> Optional[AssessmentRecord]:
        return await self.storage.get_assessment(assessment_id)

    async def list_assessments(
        self,
        status: Optional[str] = None,
        skip: int = 0,
        limit: int = 20,
    ) -> list[AssessmentRecord]:
        """평가 목록 (최신순). status 가 있으면 해당 상태만."""
        if status is not None:
            status = parse_choice(status, AssessmentStatus).value
        return await self.storage.list_assessments(skip=skip, limit=limit, status=status)

    async def update_assessment_status(
        self,
        assessment_id: str,
        status: str,
    ) -> Optional[AssessmentRecord]:
        """
        평가 처리 상태 변경. 평가 레코드의 유일한 변경 경로입니다.

        Raises:
            InputValidationError: 허용되지 않는 상태 값
        """
        new_status = parse_choice(status, AssessmentStatus)
        record = await self.storage.get_assessment(assessment_id)
        if record is None:
            return None

        previous = record.status
        record.status = new_status
        record.updated_at = datetime.now()
        await self.storage.update_assessment(record)

        logger.info(f"[QuotePipeline] 상태 변경 {assessment_id}: {previous.value} → {new_status.value}")
        return record

    # ==================== 예산 비교 ====================

    async def compare_budget(self, assessment_id: str) -> Optional[BudgetComparison]:
        """저장된 평가의 예산 비교. 제출 시점의 가격 명세를 사용합니다."""
        record = await self.storage.get_assessment(assessment_id)
        if record is None:
            return None
        return self.budget_comparator.compare_budget_vs_assessment(
            record.assessment,
            pricing=record.pricing_breakdown,
        )

    # ==================== 견적서 ====================

    async def generate_quote(self, assessment_id: str) -> Optional[Quote]:
        """저장된 평가로 제안서를 새로 작성하고 견적서로 저장합니다."""
        record = await self.storage.get_assessment(assessment_id)
        if record is None:
            return None
        return await self._create_quote(record)

    async def get_quote(self, quote_number: str) -> Optional[Quote]:
        return await self.storage.get_quote(quote_number)

    async def list_quotes(
        self,
        assessment_id: Optional[str] = None,
        skip: int = 0,
        limit: int = 20,
    ) -> list[Quote]:
        return await self.storage.list_quotes(assessment_id=assessment_id, skip=skip, limit=limit)

    async def update_quote_status(self, quote_number: str, status: str) -> Optional[Quote]:
        """
        고객 응답에 따른 견적서 상태 변경.

        Raises:
            InputValidationError: 허용되지 않는 상태 값이거나 'invoiced' 를 직접 지정한 경우
            QuoteConversionError: 이미 청구서로 전환된 견적서
        """
        new_status = parse_choice(status, QuoteStatus)
        if new_status == QuoteStatus.INVOICED:
            raise InputValidationError(
                "청구서 전환은 invoice 엔드포인트로만 할 수 있습니다.",
                details={"status": status},
            )

        quote = await self.storage.get_quote(quote_number)
        if quote is None:
            return None
        if quote.status == QuoteStatus.INVOICED:
            raise QuoteConversionError(
                f"이미 청구된 견적서입니다: {quote_number}",
                details={"invoice_number": quote.invoice_number},
            )

        quote.status = new_status
        quote.updated_at = datetime.now()
        await self.storage.save_quote(quote)
        logger.info(f"[QuotePipeline] 견적서 상태 변경 {quote_number}: {new_status.value}")
        return quote

    async def _create_quote(self, record: AssessmentRecord) -> Quote:
        proposal = self.proposal_composer.generate_proposal(record.assessment, record.id)
        quote = Quote(
            quote_number=new_quote_number(),
            assessment_id=record.id,
            title=proposal.title,
            proposal_data=proposal,
            total_amount=proposal.pricing.final_total,
            valid_until=date.today() + timedelta(days=self.quote_valid_days),
        )
        await self.storage.save_quote(quote)
        logger.info(
            f"[QuotePipeline] 견적서 생성: {quote.quote_number} "
            f"({record.id}, ${quote.total_amount:,})"
        )
        return quote

    # ==================== 청구서 ====================

    async def convert_quote_to_invoice(self, quote_number: str) -> Optional[Invoice]:
        """
        견적서를 청구서(센트 단위)로 전환합니다.

        지불 일정의 각 단계가 청구서의 항목이 되며,
        전환된 견적서는 'invoiced' 상태가 됩니다.

        Raises:
            QuoteConversionError: 대기/수락 상태가 아닌 견적서
        """
        quote = await self.storage.get_quote(quote_number)
        if quote is None:
            return None
        if quote.status not in CONVERTIBLE_STATUSES:
            raise QuoteConversionError(
                f"청구서로 전환할 수 없는 견적서 상태입니다: {quote.status.value}",
                details={
                    "quote_number": quote_number,
                    "status": quote.status.value,
                    "invoice_number": quote.invoice_number,
                },
            )

        line_items = [
            InvoiceLineItem(
                description=f"{payment.milestone} ({payment.percentage}%)",
                amount=payment.amount * 100,
            )
            for payment in quote.proposal_data.pricing.payment_schedule
        ]
        invoice = Invoice(
            invoice_number=new_invoice_number(),
            quote_number=quote.quote_number,
            title=quote.title,
            recipient_email=quote.proposal_data.client_email or None,
            amount=quote.total_amount * 100,
            line_items=line_items,
            due_date=date.today() + timedelta(days=self.invoice_due_days),
        )
        # 견적서를 먼저 잠근 뒤 청구서를 기록 (실패 시 견적서 상태 복원)
        previous_status, previous_updated_at = quote.status, quote.updated_at
        quote.status = QuoteStatus.INVOICED
        quote.invoice_number = invoice.invoice_number
        quote.updated_at = datetime.now()
        await self.storage.save_quote(quote)

        try:
            await self.storage.save_invoice(invoice)
        except StorageError:
            logger.error(f"[QuotePipeline] 청구서 저장 실패, 견적서 상태 복원: {quote_number}")
            quote.status = previous_status
            quote.invoice_number = None
            quote.updated_at = previous_updated_at
            await self.storage.save_quote(quote)
            raise

        logger.info(
            f"[QuotePipeline] 청구서 발행: {invoice.invoice_number} "
            f"← {quote_number} ({invoice.amount} cents)"
        )
        return invoice

    async def list_invoices(self, skip: int = 0, limit: int = 20) -> list[Invoice]:
        return await self.storage.list_invoices(skip=skip, limit=limit)


# 싱글톤 인스턴스
_quote_pipeline: Optional[QuotePipeline] = None


def get_quote_pipeline() -> QuotePipeline:
    """QuotePipeline 인스턴스를 반환합니다."""
    global _quote_pipeline
    if _quote_pipeline is None:
        _quote_pipeline = QuotePipeline()
    return _quote_pipeline
