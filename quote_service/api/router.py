"""
API 라우터 설정 파일입니다.
각 기능별로 나누어진 API 주소들을 하나로 모으는 역할을 합니다.
"""

from fastapi import APIRouter

from quote_service.api.endpoints import health, assessments, quotes, admin

# 메인 API 라우터 생성
api_router = APIRouter()

# 헬스 체크 엔드포인트: 서버 상태 확인용 (/health)
api_router.include_router(
    health.router,
    prefix="/health",
    tags=["health"]
)

# 평가 엔드포인트: 가격 미리보기, 제출, 예산 비교, 제안서 (/assessments)
api_router.include_router(
    assessments.router,
    prefix="/assessments",
    tags=["assessments"]
)

# 견적서 엔드포인트: 견적 번호로 조회 (/quotes)
api_router.include_router(
    quotes.router,
    prefix="/quotes",
    tags=["quotes"]
)

# 관리자 엔드포인트: 평가 상태 관리, 견적서/청구서 (/admin)
api_router.include_router(
    admin.router,
    prefix="/admin",
    tags=["admin"]
)
