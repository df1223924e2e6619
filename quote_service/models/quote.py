"""
견적서(Quote)와 청구서(Invoice) 모델입니다.

견적서는 제안서 생성 시마다 하나씩 저장되며 금액은 달러 단위,
청구서는 결제 대행사 호환을 위해 센트 단위로 저장됩니다.
"""

from datetime import datetime, date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from .proposal import ProposalDocument


class QuoteStatus(str, Enum):
    PENDING = "pending"     # 고객 응답 대기
    ACCEPTED = "accepted"   # 고객 수락
    REJECTED = "rejected"   # 고객 거절
    EXPIRED = "expired"     # 유효기간 경과
    INVOICED = "invoiced"   # 청구서로 전환됨


class InvoiceStatus(str, Enum):
    DRAFT = "draft"
    SENT = "sent"
    PAID = "paid"
    OVERDUE = "overdue"
    CANCELLED = "cancelled"


class Quote(BaseModel):
    """제안서를 감싸는 견적서 레코드."""

    quote_number: str = Field(..., description="고유 견적 번호 (Q-YYYYMMDD-xxxxxx)")
    assessment_id: str
    title: str
    proposal_data: ProposalDocument
    total_amount: int = Field(..., description="제안서 최종 금액 (달러)")
    status: QuoteStatus = QuoteStatus.PENDING
    valid_until: date
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: Optional[datetime] = None
    invoice_number: Optional[str] = None


class InvoiceLineItem(BaseModel):
    description: str
    amount: int = Field(..., ge=0, description="금액 (센트)")
    quantity: int = Field(1, gt=0)


class Invoice(BaseModel):
    """견적서로부터 관리자가 발행하는 청구서."""

    invoice_number: str = Field(..., description="고유 청구 번호 (INV-YYYYMMDD-XXXXX)")
    quote_number: str
    title: str
    recipient_email: Optional[str] = None
    amount: int = Field(..., ge=0, description="총액 (센트)")
    line_items: list[InvoiceLineItem] = Field(default_factory=list)
    status: InvoiceStatus = InvoiceStatus.DRAFT
    due_date: date
    created_at: datetime = Field(default_factory=datetime.now)
