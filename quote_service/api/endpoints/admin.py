"""
관리자(백오피스) API입니다.
접수된 평가의 처리 상태 관리, 견적서 목록, 청구서 발행 기능을 제공합니다.
"""

from typing import Optional
from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from quote_service.services import get_quote_pipeline
from quote_service.utils import validate_record_id

router = APIRouter()


class StatusUpdate(BaseModel):
    """상태 변경 요청 데이터 모델"""
    status: str


@router.get("/assessments")
async def list_assessments(
    skip: int = 0,
    limit: int = 20,
    status: Optional[str] = None
) -> dict:
    """접수된 평가 목록 조회 (최신순, 상태 필터 지원)"""
    records = await get_quote_pipeline().list_assessments(status=status, skip=skip, limit=limit)

    return {
        "count": len(records),
        "assessments": [
            {
                "id": record.id,
                "status": record.status.value,
                "name": record.assessment.name,
                "email": record.assessment.email,
                "project_name": record.assessment.project_name,
                "project_type": record.assessment.project_type,
                "budget_range": record.assessment.budget_range,
                "estimated_total": record.pricing_breakdown.subtotal,
                "created_at": record.created_at.isoformat(),
            }
            for record in records
        ],
    }


@router.patch("/assessments/{assessment_id}/status")
async def update_assessment_status(assessment_id: str, update: StatusUpdate) -> dict:
    """
    평가 처리 상태 변경.
    허용 상태: pending(접수), reviewed(검토 완료), contacted(연락함), archived(보관)
    """
    assessment_id = validate_record_id(assessment_id)
    record = await get_quote_pipeline().update_assessment_status(assessment_id, update.status)

    if not record:
        raise HTTPException(status_code=404, detail="평가를 찾을 수 없습니다")

    return {
        "id": record.id,
        "status": record.status.value,
        "updated_at": record.updated_at.isoformat() if record.updated_at else None,
    }


@router.get("/quotes")
async def list_quotes(
    skip: int = 0,
    limit: int = 20,
    assessment_id: Optional[str] = None
) -> dict:
    """견적서 목록 조회 (최신순)"""
    if assessment_id is not None:
        assessment_id = validate_record_id(assessment_id)
    quotes = await get_quote_pipeline().list_quotes(
        assessment_id=assessment_id, skip=skip, limit=limit
    )

    return {
        "count": len(quotes),
        "quotes": [
            {
                "quote_number": quote.quote_number,
                "assessment_id": quote.assessment_id,
                "title": quote.title,
                "total_amount": quote.total_amount,
                "status": quote.status.value,
                "valid_until": quote.valid_until.isoformat(),
                "invoice_number": quote.invoice_number,
                "created_at": quote.created_at.isoformat(),
            }
            for quote in quotes
        ],
    }


@router.patch("/quotes/{quote_number}/status")
async def update_quote_status(quote_number: str, update: StatusUpdate) -> dict:
    """고객 응답에 따른 견적서 상태 변경 (accepted, rejected, expired 등)"""
    quote_number = validate_record_id(quote_number)
    quote = await get_quote_pipeline().update_quote_status(quote_number, update.status)

    if not quote:
        raise HTTPException(status_code=404, detail="견적서를 찾을 수 없습니다")

    return {"quote_number": quote.quote_number, "status": quote.status.value}


@router.post("/quotes/{quote_number}/invoice", status_code=201)
async def convert_quote_to_invoice(quote_number: str) -> dict:
    """
    견적서를 청구서로 전환.
    이미 청구된 견적서이거나 거절/만료된 견적서면 409 를 반환합니다.
    """
    quote_number = validate_record_id(quote_number)
    invoice = await get_quote_pipeline().convert_quote_to_invoice(quote_number)

    if not invoice:
        raise HTTPException(status_code=404, detail="견적서를 찾을 수 없습니다")

    return invoice.model_dump()


@router.get("/invoices")
async def list_invoices(skip: int = 0, limit: int = 20) -> dict:
    """발행된 청구서 목록 조회 (최신순)"""
    invoices = await get_quote_pipeline().list_invoices(skip=skip, limit=limit)

    return {
        "count": len(invoices),
        "invoices": [invoice.model_dump() for invoice in invoices],
    }
