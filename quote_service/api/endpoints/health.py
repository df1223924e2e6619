"""
헬스 체크(Health Check) 엔드포인트입니다.
서버가 살아서 정상적으로 응답하는지 확인하는 용도입니다.
"""

from fastapi import APIRouter

from quote_service.config import get_settings

router = APIRouter()


@router.get("")
async def health_check():
    """
    기본 상태 확인 함수.
    서버가 켜져 있으면 {"status": "healthy"}를 반환합니다.
    """
    return {"status": "healthy"}


@router.get("/detail")
async def health_check_detail():
    """
    상세 상태 확인 함수.
    견적/청구 정책 등 현재 설정 정보도 같이 보여줍니다.
    """
    settings = get_settings()
    return {
        "status": "healthy",
        "config": {
            "storage_path": settings.storage_path,
            "quote_valid_days": settings.quote_valid_days,  # 견적서 유효 기간
            "invoice_due_days": settings.invoice_due_days,  # 청구서 지불 기한
            "low_budget_threshold": settings.low_budget_threshold,  # 저예산 기준 금액
            "offer_domain_services": settings.offer_domain_services,
        }
    }
