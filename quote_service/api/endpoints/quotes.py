"""
견적서 조회 API입니다.
고객에게 전달된 견적 번호로 견적서와 제안서를 확인합니다.
"""

from fastapi import APIRouter, HTTPException

from quote_service.services import get_quote_pipeline
from quote_service.utils import validate_record_id

router = APIRouter()


@router.get("/{quote_number}")
async def get_quote(quote_number: str) -> dict:
    """견적 번호로 견적서 조회"""
    quote_number = validate_record_id(quote_number)
    quote = await get_quote_pipeline().get_quote(quote_number)

    if not quote:
        raise HTTPException(status_code=404, detail="견적서를 찾을 수 없습니다")

    return quote.model_dump()
